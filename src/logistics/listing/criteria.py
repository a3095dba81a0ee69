"""Shipment query builder — turns dashboard listing parameters into a filter and a sort key.

The dashboard sends ``search``, ``status``, ``sortBy`` and ``sortOrder``. The
filter is always scoped to the requesting owner. Search matches the tracking
number or the destination address, case-insensitively. A status of ``ALL``
(or none at all) applies no status filter.

Unrecognised sort fields fall back to newest-first by creation time, whatever
order was asked for.
"""

from dataclasses import dataclass

from protean.utils.query import Q

ALL_STATUSES = "ALL"

DEFAULT_SORT_FIELD = "created_at"

# Public sort names accepted from clients -> stored field names
_SORTABLE_FIELDS = {
    "tracking_number": "tracking_number",
    "destination_address": "destination_address",
    "status": "status",
    "ship_date": "ship_date",
    "estimated_delivery_date": "estimated_delivery_date",
    "createdAt": "created_at",
    "created_at": "created_at",
}


@dataclass(frozen=True)
class ShipmentQuery:
    owner_id: str
    search: str | None = None
    status: str | None = None
    sort_by: str | None = None
    sort_order: str | None = None

    def criteria(self) -> Q:
        """Owner scope, combined with the optional search text and status filter."""
        criteria = Q(owner_id=str(self.owner_id))

        term = (self.search or "").strip()
        if term:
            criteria = criteria & (
                Q(tracking_number__icontains=term) | Q(destination_address__icontains=term)
            )

        if self.status and self.status != ALL_STATUSES:
            criteria = criteria & Q(status=self.status)

        return criteria

    def ordering(self) -> str:
        """Sort key in QuerySet form, e.g. ``-created_at`` for newest first."""
        field = _SORTABLE_FIELDS.get(self.sort_by or DEFAULT_SORT_FIELD)
        if field is None:
            return f"-{DEFAULT_SORT_FIELD}"

        descending = (self.sort_order or "desc").lower() != "asc"
        return f"-{field}" if descending else field
