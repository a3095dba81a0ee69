"""Shipment Manager database management CLI.

Creates and drops the database schemas of both domains and seeds a
demonstration coordinator with a handful of sample shipments.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
    python src/manage.py seed       # Add the demo coordinator and shipments
"""

import argparse
import sys

DEMO_USER = {
    "username": "coordinator",
    "email": "coordinator@shipsy.com",
    "password": "shipment123",
    "full_name": "Logistics Coordinator",
}

DEMO_SHIPMENTS = [
    {
        "tracking_number": "TRK001",
        "destination_address": "123 Main St, New York, NY 10001",
        "status": "IN_TRANSIT",
        "is_fragile": True,
        "ship_date": "2024-01-15",
        "estimated_delivery_date": "2024-01-20",
        "notes": "Handle with care - fragile electronics",
    },
    {
        "tracking_number": "TRK002",
        "destination_address": "456 Oak Ave, Los Angeles, CA 90210",
        "status": "DELIVERED",
        "is_fragile": False,
        "ship_date": "2024-01-10",
        "estimated_delivery_date": "2024-01-18",
        "notes": "Standard delivery completed",
    },
    {
        "tracking_number": "TRK003",
        "destination_address": "789 Pine Rd, Chicago, IL 60601",
        "status": "PENDING",
        "is_fragile": False,
        "ship_date": "2024-01-20",
        "estimated_delivery_date": "2024-01-25",
        "notes": "Awaiting pickup",
    },
    {
        "tracking_number": "TRK004",
        "destination_address": "321 Elm St, Houston, TX 77001",
        "status": "OUT_FOR_DELIVERY",
        "is_fragile": True,
        "ship_date": "2024-01-12",
        "estimated_delivery_date": "2024-01-19",
        "notes": "Fragile - glass items",
    },
    {
        "tracking_number": "TRK005",
        "destination_address": "654 Maple Dr, Phoenix, AZ 85001",
        "status": "DELAYED",
        "is_fragile": False,
        "ship_date": "2024-01-08",
        "estimated_delivery_date": "2024-01-16",
        "notes": "Weather delay",
    },
]


def _domains():
    from accounts.domain import accounts
    from logistics.domain import logistics

    return {"accounts": accounts, "logistics": logistics}


def setup_databases(domains=None):
    """Create database schemas for the specified (or all) domains."""
    from shared.db import setup_db

    all_domains = _domains()
    targets = {d: all_domains[d] for d in domains} if domains else all_domains

    for name, domain in targets.items():
        print(f"Initializing {name} domain...")
        domain.init()
        print(f"Creating {name} database schema...")
        setup_db(domain)
        print(f"  {name} schema ready.")

    print("Done.")


def drop_databases(domains=None):
    """Drop database schemas for the specified (or all) domains."""
    from shared.db import drop_db

    all_domains = _domains()
    targets = {d: all_domains[d] for d in domains} if domains else all_domains

    for name, domain in targets.items():
        print(f"Initializing {name} domain...")
        domain.init()
        print(f"Dropping {name} database schema...")
        drop_db(domain)
        print(f"  {name} schema dropped.")

    print("Done.")


def seed_demo_data(accounts, logistics):
    """Create the demo coordinator and sample shipments, skipping what already exists.

    Expects both domains to be initialized. Returns ``(user_id, created)`` where
    ``created`` lists the tracking numbers added by this run.
    """
    from accounts.user.registration import RegisterUser
    from accounts.user.user import User
    from logistics.shipment.creation import CreateShipment
    from logistics.shipment.shipment import Shipment

    with accounts.domain_context():
        user = accounts.repository_for(User).find_by_username(DEMO_USER["username"])
        if user is None:
            user_id = accounts.process(RegisterUser(**DEMO_USER), asynchronous=False)
        else:
            user_id = str(user.id)

    created = []
    with logistics.domain_context():
        repo = logistics.repository_for(Shipment)
        for sample in DEMO_SHIPMENTS:
            if repo.find_by_tracking_number(sample["tracking_number"]) is not None:
                continue
            logistics.process(CreateShipment(owner_id=user_id, **sample), asynchronous=False)
            created.append(sample["tracking_number"])

    return user_id, created


def seed():
    all_domains = _domains()
    for domain in all_domains.values():
        domain.init()

    _, created = seed_demo_data(all_domains["accounts"], all_domains["logistics"])
    print(f"Seeded user '{DEMO_USER['username']}' with {len(created)} new shipment(s).")
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="Shipment Manager database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    setup_parser = subparsers.add_parser("setup-db", help="Create all database tables")
    setup_parser.add_argument(
        "--domain",
        choices=["accounts", "logistics"],
        nargs="*",
        help="Specific domain(s) to set up (default: all)",
    )

    drop_parser = subparsers.add_parser("drop-db", help="Drop all database tables")
    drop_parser.add_argument(
        "--domain",
        choices=["accounts", "logistics"],
        nargs="*",
        help="Specific domain(s) to drop (default: all)",
    )

    subparsers.add_parser("seed", help="Add the demo coordinator and sample shipments")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_databases(args.domain)
    elif args.command == "drop-db":
        drop_databases(args.domain)
    elif args.command == "seed":
        seed()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
