"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the domain's validation rules
(username pattern, EmailAddress VO, shipment field limits) and match the
field names expected by the API's Pydantic request schemas.
"""

import random
import uuid
from datetime import date, timedelta

from faker import Faker

fake = Faker()

SHIPMENT_STATUSES = ["PENDING", "IN_TRANSIT", "OUT_FOR_DELIVERY", "DELIVERED", "DELAYED"]

SORTABLE_FIELDS = ["tracking_number", "destination_address", "status", "ship_date", "estimated_delivery_date", "createdAt"]

# ---------- Accounts Domain ----------


def valid_username() -> str:
    """Generate usernames matching ^[A-Za-z0-9_]+$ within 3-50 chars."""
    base = "".join(ch for ch in fake.user_name() if ch.isalnum() or ch == "_")[:30] or "coord"
    return f"{base}_{uuid.uuid4().hex[:8]}"


def valid_email() -> str:
    """Generate emails that pass EmailAddress VO validation."""
    local = "".join(ch for ch in fake.user_name() if ch.isalnum())[:20] or "coordinator"
    return f"{local}.{uuid.uuid4().hex[:4]}@{fake.free_email_domain()}"


def registration_data() -> dict:
    return {
        "username": valid_username(),
        "email": valid_email(),
        "password": fake.password(length=12),
        "full_name": fake.name()[:100],
    }


# ---------- Logistics Domain ----------


def unique_tracking_number() -> str:
    """Generate globally unique tracking numbers like 'TRK-LT-A1B2C3D4E5'."""
    return f"TRK-LT-{uuid.uuid4().hex[:10].upper()}"


def shipment_data() -> dict:
    """Generate CreateShipmentRequest payload matching schema field names."""
    ship_date = date.today() - timedelta(days=random.randint(0, 20))
    return {
        "tracking_number": unique_tracking_number(),
        "destination_address": fake.address().replace("\n", ", "),
        "status": random.choice(SHIPMENT_STATUSES),
        "is_fragile": random.random() < 0.3,
        "ship_date": ship_date.isoformat(),
        "estimated_delivery_date": (ship_date + timedelta(days=random.randint(2, 10))).isoformat(),
        "notes": fake.sentence()[:1000] if random.random() < 0.5 else "",
    }


def shipment_changes() -> dict:
    """Generate a partial UpdateShipmentRequest touching one or two fields."""
    candidates = {
        "status": random.choice(SHIPMENT_STATUSES),
        "notes": fake.sentence()[:1000],
        "is_fragile": random.random() < 0.5,
    }
    fields = random.sample(list(candidates), k=random.randint(1, 2))
    return {name: candidates[name] for name in fields}


def listing_params() -> dict:
    """Generate dashboard listing query parameters."""
    params = {
        "page": str(random.randint(1, 3)),
        "limit": str(random.choice([5, 10, 25])),
        "sortBy": random.choice(SORTABLE_FIELDS),
        "sortOrder": random.choice(["asc", "desc"]),
    }
    if random.random() < 0.4:
        params["status"] = random.choice(SHIPMENT_STATUSES + ["ALL"])
    if random.random() < 0.3:
        params["search"] = random.choice(["TRK", "st", "ave", "lt-"])
    return params
