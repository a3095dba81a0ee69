"""Shipment aggregate (CQRS) — one tracked delivery in a coordinator's register.

A shipment belongs to exactly one coordinator (``owner_id``) and is only ever
read or changed through that owner. Tracking numbers are unique across the
whole register, not per owner.

Status values:
    PENDING, IN_TRANSIT, OUT_FOR_DELIVERY, DELIVERED, DELAYED

Any status may be set directly; the dashboard lets coordinators correct a
status in either direction, so there is no transition table.
"""

import json
from datetime import UTC, date, datetime
from enum import Enum

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, Date, DateTime, Identifier, String, Text

from logistics.domain import logistics
from logistics.shipment.events import ShipmentCreated, ShipmentRevised


class ShipmentStatus(Enum):
    PENDING = "PENDING"
    IN_TRANSIT = "IN_TRANSIT"
    OUT_FOR_DELIVERY = "OUT_FOR_DELIVERY"
    DELIVERED = "DELIVERED"
    DELAYED = "DELAYED"


# Fields a coordinator may change after the shipment is registered
REVISABLE_FIELDS = (
    "tracking_number",
    "destination_address",
    "status",
    "is_fragile",
    "ship_date",
    "estimated_delivery_date",
    "notes",
)

_TRIMMED_FIELDS = ("tracking_number", "destination_address")


def _trim(value):
    return value.strip() if isinstance(value, str) else value


@logistics.aggregate
class Shipment:
    owner_id = Identifier(required=True)
    tracking_number = String(required=True, max_length=50, unique=True)
    destination_address = Text(required=True)
    status = String(
        max_length=20,
        choices=ShipmentStatus,
        default=ShipmentStatus.PENDING.value,
    )
    is_fragile = Boolean(default=False)
    ship_date = Date(required=True)
    estimated_delivery_date = Date(required=True)
    notes = String(max_length=1000, default="")
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def tracking_number_and_destination_are_not_blank(self):
        errors = {}
        if not (self.tracking_number or "").strip():
            errors["tracking_number"] = ["Tracking number is required"]
        if not (self.destination_address or "").strip():
            errors["destination_address"] = ["Destination address cannot be empty"]
        if errors:
            raise ValidationError(errors)

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def create(
        cls,
        owner_id: str,
        tracking_number: str,
        destination_address: str,
        ship_date,
        estimated_delivery_date,
        status: str | None = None,
        is_fragile: bool | None = None,
        notes: str | None = None,
    ):
        """Register a new shipment for ``owner_id`` with register defaults applied."""
        now = datetime.now(UTC)
        shipment = cls(
            owner_id=owner_id,
            tracking_number=_trim(tracking_number),
            destination_address=_trim(destination_address),
            status=status or ShipmentStatus.PENDING.value,
            is_fragile=bool(is_fragile),
            ship_date=ship_date,
            estimated_delivery_date=estimated_delivery_date,
            notes=notes or "",
            created_at=now,
            updated_at=now,
        )
        shipment.raise_(
            ShipmentCreated(
                shipment_id=str(shipment.id),
                owner_id=str(owner_id),
                tracking_number=shipment.tracking_number,
                status=shipment.status,
                created_at=now,
            )
        )
        return shipment

    # -------------------------------------------------------------------
    # Partial update
    # -------------------------------------------------------------------
    def revise(self, **changes) -> None:
        """Apply only the supplied field changes; untouched fields keep their values."""
        if not changes:
            raise ValidationError({"_entity": ["No fields to update"]})

        unknown = sorted(set(changes) - set(REVISABLE_FIELDS))
        if unknown:
            raise ValidationError({field: ["Field cannot be updated"] for field in unknown})

        now = datetime.now(UTC)
        with atomic_change(self):
            for field, value in changes.items():
                if field in _TRIMMED_FIELDS:
                    value = _trim(value)
                elif field == "is_fragile":
                    value = bool(value)
                elif field == "notes" and value is None:
                    value = ""
                setattr(self, field, value)
            self.updated_at = now

        self.raise_(
            ShipmentRevised(
                shipment_id=str(self.id),
                owner_id=str(self.owner_id),
                changed_fields=json.dumps(sorted(changes)),
                status=self.status,
                revised_at=now,
            )
        )


def parse_calendar_date(field: str, value):
    """Turn an ISO ``YYYY-MM-DD`` string into a date, reporting bad input against ``field``."""
    if value is None or isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        raise ValidationError({field: [f"'{value}' is not a valid date"]}) from None
