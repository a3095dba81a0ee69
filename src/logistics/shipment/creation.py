"""Shipment registration — command and handler."""

import structlog
from protean import handle
from protean.fields import Boolean, Identifier, String, Text
from protean.utils.globals import current_domain

from logistics.domain import logistics
from logistics.shipment.shipment import Shipment, parse_calendar_date
from shared.exceptions import ConflictError

logger = structlog.get_logger(__name__)


@logistics.command(part_of="Shipment")
class CreateShipment:
    """Register a new shipment in the coordinator's register."""

    owner_id: Identifier(required=True)
    tracking_number: String(required=True, max_length=50)
    destination_address: Text(required=True)
    status: String(max_length=20)
    is_fragile: Boolean(default=False)
    ship_date: String(required=True, max_length=10)
    estimated_delivery_date: String(required=True, max_length=10)
    notes: String(max_length=1000)


@logistics.command_handler(part_of=Shipment)
class CreateShipmentHandler:
    @handle(CreateShipment)
    def create_shipment(self, command):
        repo = current_domain.repository_for(Shipment)
        tracking_number = command.tracking_number.strip()
        if repo.find_by_tracking_number(tracking_number) is not None:
            raise ConflictError({"tracking_number": ["Tracking number already exists"]})

        shipment = Shipment.create(
            owner_id=command.owner_id,
            tracking_number=tracking_number,
            destination_address=command.destination_address,
            status=command.status,
            is_fragile=command.is_fragile,
            ship_date=parse_calendar_date("ship_date", command.ship_date),
            estimated_delivery_date=parse_calendar_date(
                "estimated_delivery_date", command.estimated_delivery_date
            ),
            notes=command.notes,
        )
        repo.add(shipment)

        logger.info(
            "Shipment registered",
            shipment_id=str(shipment.id),
            owner_id=str(command.owner_id),
            tracking_number=shipment.tracking_number,
        )
        return str(shipment.id)
