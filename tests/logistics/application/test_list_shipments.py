"""Application tests for filtered, sorted, paginated shipment listings."""

import pytest
from logistics.listing.criteria import ShipmentQuery
from logistics.listing.listing import list_shipments
from logistics.listing.pagination import PageRequest
from logistics.shipment.creation import CreateShipment
from protean import current_domain


def _create(owner_id, tracking_number, destination="1 Harbour Rd, Oslo", status="PENDING"):
    command = CreateShipment(
        owner_id=owner_id,
        tracking_number=tracking_number,
        destination_address=destination,
        status=status,
        ship_date="2024-01-10",
        estimated_delivery_date="2024-01-18",
    )
    current_domain.process(command, asynchronous=False)


def _tracking_numbers(page):
    return [shipment.tracking_number for shipment in page.shipments]


def _list(owner_id, page=None, limit=None, **query):
    return list_shipments(ShipmentQuery(owner_id=owner_id, **query), PageRequest.from_params(page, limit))


class TestOwnerScoping:
    def test_only_own_shipments_are_listed(self, owner_id, other_owner_id):
        _create(owner_id, "TRK001")
        _create(other_owner_id, "TRK002")

        result = _list(owner_id)
        assert _tracking_numbers(result) == ["TRK001"]
        assert result.pagination.total_items == 1

    def test_owner_without_shipments(self, owner_id):
        result = _list(owner_id)
        assert result.shipments == []
        assert result.pagination.total_items == 0
        assert result.pagination.total_pages == 0
        assert result.pagination.current_page == 1
        assert result.pagination.items_per_page == 10


class TestSearch:
    def test_matches_tracking_number_case_insensitively(self, owner_id):
        _create(owner_id, "TRK001")
        _create(owner_id, "trk-ABC")
        _create(owner_id, "PKG-777")

        result = _list(owner_id, search="trk", sort_by="tracking_number", sort_order="asc")
        assert sorted(_tracking_numbers(result)) == ["TRK001", "trk-ABC"]

    def test_matches_destination_address(self, owner_id):
        _create(owner_id, "TRK001", destination="123 Main St, New York, NY 10001")
        _create(owner_id, "TRK002", destination="456 Oak Ave, Los Angeles, CA 90210")

        assert _tracking_numbers(_list(owner_id, search="new york")) == ["TRK001"]

    def test_search_text_is_not_a_pattern(self, owner_id):
        _create(owner_id, "TRK001")
        assert _list(owner_id, search="TRK.*").shipments == []

    def test_blank_search_matches_everything(self, owner_id):
        _create(owner_id, "TRK001")
        _create(owner_id, "TRK002")
        assert _list(owner_id, search="   ").pagination.total_items == 2


class TestStatusFilter:
    @pytest.fixture(autouse=True)
    def shipments(self, owner_id):
        _create(owner_id, "TRK001", status="PENDING")
        _create(owner_id, "TRK002", status="DELIVERED")
        _create(owner_id, "TRK003", status="DELIVERED")

    def test_exact_status(self, owner_id):
        result = _list(owner_id, status="DELIVERED", sort_by="tracking_number", sort_order="asc")
        assert _tracking_numbers(result) == ["TRK002", "TRK003"]

    @pytest.mark.parametrize("status", [None, "ALL"])
    def test_all_or_absent_returns_everything(self, owner_id, status):
        assert _list(owner_id, status=status).pagination.total_items == 3

    def test_search_and_status_combine(self, owner_id):
        result = _list(owner_id, search="003", status="DELIVERED")
        assert _tracking_numbers(result) == ["TRK003"]


class TestSorting:
    def test_tracking_number_ascending(self, owner_id):
        for tracking_number in ["TRK003", "TRK001", "TRK002"]:
            _create(owner_id, tracking_number)

        result = _list(owner_id, sort_by="tracking_number", sort_order="asc")
        assert _tracking_numbers(result) == ["TRK001", "TRK002", "TRK003"]

    def test_tracking_number_descending(self, owner_id):
        for tracking_number in ["TRK003", "TRK001", "TRK002"]:
            _create(owner_id, tracking_number)

        result = _list(owner_id, sort_by="tracking_number", sort_order="desc")
        assert _tracking_numbers(result) == ["TRK003", "TRK002", "TRK001"]

    def test_default_is_newest_first(self, owner_id):
        for tracking_number in ["TRK001", "TRK002", "TRK003"]:
            _create(owner_id, tracking_number)

        assert _tracking_numbers(_list(owner_id)) == ["TRK003", "TRK002", "TRK001"]


class TestPagination:
    def test_pages_concatenate_to_the_full_set(self, owner_id):
        expected = [f"TRK{n:03d}" for n in range(1, 24)]
        for tracking_number in reversed(expected):
            _create(owner_id, tracking_number)

        first = _list(owner_id, page="1", limit="5", sort_by="tracking_number", sort_order="asc")
        assert first.pagination.total_pages == 5
        assert first.pagination.total_items == 23

        collected = []
        for page in range(1, first.pagination.total_pages + 1):
            result = _list(owner_id, page=str(page), limit="5", sort_by="tracking_number", sort_order="asc")
            assert len(result.shipments) <= 5
            assert result.pagination.current_page == page
            collected.extend(_tracking_numbers(result))

        assert collected == expected

    def test_page_past_the_end_is_empty(self, owner_id):
        _create(owner_id, "TRK001")
        result = _list(owner_id, page="3", limit="10")
        assert result.shipments == []
        assert result.pagination.total_items == 1
        assert result.pagination.total_pages == 1

    def test_unparseable_parameters_use_defaults(self, owner_id):
        _create(owner_id, "TRK001")
        result = _list(owner_id, page="first", limit="lots")
        assert result.pagination.current_page == 1
        assert result.pagination.items_per_page == 10
