"""Application tests for shipment removal via domain.process()."""

import pytest
from logistics.shipment.creation import CreateShipment
from logistics.shipment.removal import DeleteShipment
from logistics.shipment.shipment import Shipment
from protean import current_domain
from protean.exceptions import ObjectNotFoundError


def _create(owner_id, tracking_number="TRK001"):
    command = CreateShipment(
        owner_id=owner_id,
        tracking_number=tracking_number,
        destination_address="789 Pine Rd, Chicago, IL 60601",
        ship_date="2024-01-20",
        estimated_delivery_date="2024-01-25",
    )
    return current_domain.process(command, asynchronous=False)


def _delete(shipment_id, owner_id):
    current_domain.process(DeleteShipment(shipment_id=shipment_id, owner_id=owner_id), asynchronous=False)


class TestDeleteShipmentFlow:
    def test_delete_removes_the_shipment(self, owner_id):
        shipment_id = _create(owner_id)
        _delete(shipment_id, owner_id)

        with pytest.raises(ObjectNotFoundError):
            current_domain.repository_for(Shipment).get_owned(shipment_id, owner_id)

    def test_repeated_delete_is_not_found(self, owner_id):
        shipment_id = _create(owner_id)
        _delete(shipment_id, owner_id)
        with pytest.raises(ObjectNotFoundError):
            _delete(shipment_id, owner_id)

    def test_other_owner_cannot_delete(self, owner_id, other_owner_id):
        shipment_id = _create(owner_id)
        with pytest.raises(ObjectNotFoundError):
            _delete(shipment_id, other_owner_id)
        assert current_domain.repository_for(Shipment).get_owned(shipment_id, owner_id) is not None

    def test_tracking_number_is_free_again(self, owner_id):
        shipment_id = _create(owner_id)
        _delete(shipment_id, owner_id)
        assert _create(owner_id) != shipment_id
