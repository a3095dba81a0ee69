"""Shipment domain events — immutable facts about changes to the shipment register."""

from protean.fields import DateTime, Identifier, String, Text

from logistics.domain import logistics


@logistics.event(part_of="Shipment")
class ShipmentCreated:
    """A coordinator registered a new shipment."""

    __version__ = 1

    shipment_id = Identifier(required=True)
    owner_id = Identifier(required=True)
    tracking_number = String(required=True, max_length=50)
    status = String(required=True, max_length=20)
    created_at = DateTime(required=True)


@logistics.event(part_of="Shipment")
class ShipmentRevised:
    """One or more shipment details were edited by the owning coordinator."""

    __version__ = 1

    shipment_id = Identifier(required=True)
    owner_id = Identifier(required=True)
    changed_fields = Text(required=True)  # JSON list of field names
    status = String(required=True, max_length=20)
    revised_at = DateTime(required=True)
