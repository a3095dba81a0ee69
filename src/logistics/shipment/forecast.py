"""Delivery forecast — the timeliness label shown next to every shipment.

The forecast is derived from the shipment's status and estimated delivery date
at the moment it is rendered. It is never stored, so it cannot go stale.

Rules, first match wins:
    1. DELIVERED                         -> "Delivered successfully"
    2. now is past the estimated date    -> "Overdue"
    3. IN_TRANSIT                        -> "On schedule"
    4. DELAYED                           -> "Delayed"
    5. anything else                     -> "Pending"

A date-only estimate means the start of that day in UTC, so a shipment that is
not yet delivered becomes overdue once its estimated delivery day begins.
OUT_FOR_DELIVERY shipments that are not overdue fall through to "Pending".
"""

from dataclasses import dataclass
from datetime import UTC, date, datetime, time
from enum import Enum

from logistics.shipment.shipment import ShipmentStatus


class ForecastLabel(Enum):
    DELIVERED = "Delivered successfully"
    OVERDUE = "Overdue"
    ON_SCHEDULE = "On schedule"
    DELAYED = "Delayed"
    PENDING = "Pending"


# Dashboard styling bucket for each label
_TONES = {
    ForecastLabel.DELIVERED: "delivered",
    ForecastLabel.OVERDUE: "overdue",
    ForecastLabel.ON_SCHEDULE: "on-schedule",
    ForecastLabel.DELAYED: "overdue",
    ForecastLabel.PENDING: "on-schedule",
}


@dataclass(frozen=True)
class DeliveryForecast:
    label: ForecastLabel

    @property
    def text(self) -> str:
        return self.label.value

    @property
    def tone(self) -> str:
        return _TONES[self.label]


def _as_utc(value: date | datetime | str) -> datetime:
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=UTC)
    return datetime.combine(value, time.min, tzinfo=UTC)


def classify_delivery(
    status: str,
    estimated_delivery_date: date | datetime | str,
    now: datetime | None = None,
) -> DeliveryForecast:
    """Classify a shipment's delivery timeliness relative to ``now``."""
    if status == ShipmentStatus.DELIVERED.value:
        return DeliveryForecast(ForecastLabel.DELIVERED)

    current = _as_utc(now) if now is not None else datetime.now(UTC)
    if current > _as_utc(estimated_delivery_date):
        return DeliveryForecast(ForecastLabel.OVERDUE)

    if status == ShipmentStatus.IN_TRANSIT.value:
        return DeliveryForecast(ForecastLabel.ON_SCHEDULE)

    if status == ShipmentStatus.DELAYED.value:
        return DeliveryForecast(ForecastLabel.DELAYED)

    return DeliveryForecast(ForecastLabel.PENDING)


def forecast_for(shipment, now: datetime | None = None) -> DeliveryForecast:
    return classify_delivery(shipment.status, shipment.estimated_delivery_date, now)
