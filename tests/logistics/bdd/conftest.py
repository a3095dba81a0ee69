"""Shared BDD fixtures and step definitions for the Logistics domain."""

import pytest
from logistics.shipment.creation import CreateShipment
from logistics.shipment.shipment import Shipment
from protean import current_domain
from protean.exceptions import ObjectNotFoundError
from pytest_bdd import given, parsers, then
from shared.exceptions import ConflictError


@pytest.fixture()
def error():
    """Container for captured domain errors."""
    return {"exc": None}


@pytest.fixture()
def register_shipment():
    def _register(owner, tracking_number, destination="123 Main St, New York, NY 10001", status=None):
        command = CreateShipment(
            owner_id=owner,
            tracking_number=tracking_number,
            destination_address=destination,
            status=status,
            ship_date="2024-01-15",
            estimated_delivery_date="2024-01-20",
        )
        return current_domain.process(command, asynchronous=False)

    return _register


@pytest.fixture()
def find_shipment():
    def _find(tracking_number) -> Shipment:
        return current_domain.repository_for(Shipment).find_by_tracking_number(tracking_number)

    return _find


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('coordinator "{owner}" has registered shipment "{tracking_number}"'))
def registered_shipment(owner, tracking_number, register_shipment):
    register_shipment(owner, tracking_number)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the shipment "{tracking_number}" has status "{status}"'))
def shipment_has_status(tracking_number, status, find_shipment):
    assert find_shipment(tracking_number).status == status


@then("the request is rejected as a conflict")
def rejected_as_conflict(error):
    assert isinstance(error["exc"], ConflictError)


@then("the shipment is reported as not found")
def reported_not_found(error):
    assert isinstance(error["exc"], ObjectNotFoundError)
