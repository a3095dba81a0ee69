"""Pydantic request/response schemas for the Logistics API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

# --- Request Schemas ---


class CreateShipmentRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "tracking_number": "TRK006",
                    "destination_address": "987 Cedar Ln, Seattle, WA 98101",
                    "status": "PENDING",
                    "is_fragile": True,
                    "ship_date": "2024-02-01",
                    "estimated_delivery_date": "2024-02-06",
                    "notes": "Leave at the front desk",
                }
            ]
        }
    }

    tracking_number: str = Field(..., max_length=50)
    destination_address: str = Field(...)
    status: str | None = Field(None, max_length=20)
    is_fragile: bool = False
    ship_date: str = Field(..., max_length=10)
    estimated_delivery_date: str = Field(..., max_length=10)
    notes: str | None = Field(None, max_length=1000)


class UpdateShipmentRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "IN_TRANSIT"}]}}

    tracking_number: str | None = Field(None, max_length=50)
    destination_address: str | None = None
    status: str | None = Field(None, max_length=20)
    is_fragile: bool | None = None
    ship_date: str | None = Field(None, max_length=10)
    estimated_delivery_date: str | None = Field(None, max_length=10)
    notes: str | None = Field(None, max_length=1000)

    def supplied_changes(self) -> dict:
        """Fields the client actually sent, without explicit nulls."""
        sent = self.model_dump(exclude_unset=True, mode="json")
        return {field: value for field, value in sent.items() if value is not None}


# --- Response Schemas ---


class ForecastResponse(BaseModel):
    text: str
    tone: str


class ShipmentResponse(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": "a1b2c3d4-e5f6-7890-abcd-ef1234567890",
                    "owner_id": "0f9e8d7c-6b5a-4321-9876-fedcba987654",
                    "tracking_number": "TRK001",
                    "destination_address": "123 Main St, New York, NY 10001",
                    "status": "IN_TRANSIT",
                    "is_fragile": True,
                    "ship_date": "2024-01-15",
                    "estimated_delivery_date": "2024-01-20",
                    "notes": "Handle with care - fragile electronics",
                    "created_at": "2024-01-15T09:30:00Z",
                    "updated_at": "2024-01-16T14:05:00Z",
                    "forecast": {"text": "On schedule", "tone": "on-schedule"},
                }
            ]
        }
    }

    id: str
    owner_id: str
    tracking_number: str
    destination_address: str
    status: str
    is_fragile: bool
    ship_date: str
    estimated_delivery_date: str
    notes: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
    forecast: ForecastResponse


class PaginationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    current_page: int = Field(..., alias="currentPage")
    total_pages: int = Field(..., alias="totalPages")
    total_items: int = Field(..., alias="totalItems")
    items_per_page: int = Field(..., alias="itemsPerPage")


class ShipmentListResponse(BaseModel):
    shipments: list[ShipmentResponse]
    pagination: PaginationResponse


class ShipmentSummaryResponse(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {"total": 5, "pending": 1, "in_transit": 1, "out_for_delivery": 1, "delivered": 1, "delayed": 1}
            ]
        }
    }

    total: int
    pending: int
    in_transit: int
    out_for_delivery: int
    delivered: int
    delayed: int


class StatusResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "deleted"}]}}

    status: str = "ok"
