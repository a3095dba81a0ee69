"""Shipment revision — partial update command and handler.

The command carries only the fields the coordinator actually sent, encoded as
a JSON object, so "not sent" and "sent" stay distinguishable all the way to
the aggregate.
"""

import json

import structlog
from protean import handle
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from logistics.domain import logistics
from logistics.shipment.shipment import Shipment, parse_calendar_date
from shared.exceptions import ConflictError

logger = structlog.get_logger(__name__)

_DATE_FIELDS = ("ship_date", "estimated_delivery_date")


@logistics.command(part_of="Shipment")
class UpdateShipment:
    shipment_id: Identifier(required=True)
    owner_id: Identifier(required=True)
    changes: Text(required=True)  # JSON object of field -> new value


@logistics.command_handler(part_of=Shipment)
class UpdateShipmentHandler:
    @handle(UpdateShipment)
    def update_shipment(self, command):
        repo = current_domain.repository_for(Shipment)
        shipment = repo.get_owned(command.shipment_id, command.owner_id)

        changes = json.loads(command.changes)
        for field in _DATE_FIELDS:
            if field in changes:
                changes[field] = parse_calendar_date(field, changes[field])

        if "tracking_number" in changes and isinstance(changes["tracking_number"], str):
            candidate = changes["tracking_number"].strip()
            holder = repo.find_by_tracking_number(candidate)
            if holder is not None and str(holder.id) != str(shipment.id):
                raise ConflictError({"tracking_number": ["Tracking number already exists"]})

        shipment.revise(**changes)
        repo.add(shipment)

        logger.info(
            "Shipment revised",
            shipment_id=str(shipment.id),
            owner_id=str(command.owner_id),
            fields=sorted(changes),
        )
        return str(shipment.id)
