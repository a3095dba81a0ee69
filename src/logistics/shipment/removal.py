"""Shipment removal — command and handler."""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from logistics.domain import logistics
from logistics.shipment.shipment import Shipment

logger = structlog.get_logger(__name__)


@logistics.command(part_of="Shipment")
class DeleteShipment:
    shipment_id: Identifier(required=True)
    owner_id: Identifier(required=True)


@logistics.command_handler(part_of=Shipment)
class DeleteShipmentHandler:
    @handle(DeleteShipment)
    def delete_shipment(self, command):
        repo = current_domain.repository_for(Shipment)
        shipment = repo.get_owned(command.shipment_id, command.owner_id)
        repo.remove(shipment)
        logger.info("Shipment removed", shipment_id=str(shipment.id), owner_id=str(command.owner_id))
