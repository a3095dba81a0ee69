"""Dashboard summary — per-owner shipment counts."""

from dataclasses import dataclass

from protean.utils.globals import current_domain
from protean.utils.query import Q

from logistics.shipment.shipment import Shipment, ShipmentStatus


@dataclass(frozen=True)
class ShipmentSummary:
    total: int = 0
    pending: int = 0
    in_transit: int = 0
    out_for_delivery: int = 0
    delivered: int = 0
    delayed: int = 0


def summarize_shipments(owner_id: str) -> ShipmentSummary:
    """Count an owner's shipments in total and per status.

    An owner with no shipments gets all zeros.
    """
    repo = current_domain.repository_for(Shipment)
    owned = Q(owner_id=str(owner_id))

    def with_status(status: ShipmentStatus) -> int:
        return repo.count(owned & Q(status=status.value))

    return ShipmentSummary(
        total=repo.count(owned),
        pending=with_status(ShipmentStatus.PENDING),
        in_transit=with_status(ShipmentStatus.IN_TRANSIT),
        out_for_delivery=with_status(ShipmentStatus.OUT_FOR_DELIVERY),
        delivered=with_status(ShipmentStatus.DELIVERED),
        delayed=with_status(ShipmentStatus.DELAYED),
    )
