"""Repository for the Shipment aggregate.

Every lookup that serves a coordinator request is scoped by owner. A shipment
that exists but belongs to someone else is reported exactly like one that
does not exist.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.query import Q

from logistics.domain import logistics
from logistics.shipment.shipment import Shipment


@logistics.repository(part_of=Shipment)
class ShipmentRepository:
    def get_owned(self, shipment_id: str, owner_id: str) -> Shipment:
        """Fetch a shipment by id, visible only to its owner."""
        shipment = self._dao.query.filter(id=str(shipment_id), owner_id=str(owner_id)).all().first
        if shipment is None:
            raise ObjectNotFoundError({"_entity": [f"Shipment `{shipment_id}` not found"]})
        return shipment

    def find_by_tracking_number(self, tracking_number: str) -> Shipment | None:
        """Look up a tracking number across all owners."""
        return self._dao.query.filter(tracking_number=tracking_number).all().first

    def search(self, criteria: Q, ordering: str, offset: int, limit: int):
        """Return one page of shipments matching ``criteria``.

        The returned result set carries the page in ``items`` and the number
        of matching shipments across all pages in ``total``.
        """
        return self._dao.query.filter(criteria).order_by(ordering).offset(offset).limit(limit).all()

    def count(self, criteria: Q) -> int:
        return self._dao.query.filter(criteria).all().total

    def remove(self, shipment: Shipment) -> None:
        self._dao.delete(shipment)
