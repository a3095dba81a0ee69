"""Paginated, filtered, sorted shipment listings for one owner."""

from dataclasses import dataclass, field

from protean.utils.globals import current_domain

from logistics.listing.criteria import ShipmentQuery
from logistics.listing.pagination import PageInfo, PageRequest
from logistics.shipment.shipment import Shipment


@dataclass(frozen=True)
class ShipmentPage:
    shipments: list = field(default_factory=list)
    pagination: PageInfo | None = None


def list_shipments(query: ShipmentQuery, page: PageRequest) -> ShipmentPage:
    repo = current_domain.repository_for(Shipment)
    results = repo.search(
        query.criteria(),
        ordering=query.ordering(),
        offset=page.skip,
        limit=page.limit,
    )
    return ShipmentPage(
        shipments=list(results.items),
        pagination=PageInfo.build(page, results.total),
    )
