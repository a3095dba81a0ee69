"""Logistics bounded context — Shipment Tracking for logistics coordinators.

Handles the shipment register: creation, partial edits and removal of
shipments owned by a single coordinator, plus the read paths used by the
dashboard (filtered listing, per-status summary, delivery forecasts).
Uses CQRS without event sourcing because every operation touches one
shipment document.
"""

from protean.domain import Domain

from logistics.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

logistics = Domain(name="logistics")
