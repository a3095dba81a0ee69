"""FastAPI endpoints for the Logistics domain.

All routes act on behalf of the coordinator identified by the bearer token and
only ever see that coordinator's shipments.
"""

import json
from typing import Literal

from fastapi import APIRouter, Depends, Query
from protean.utils.globals import current_domain

from logistics.api.schemas import (
    CreateShipmentRequest,
    ForecastResponse,
    PaginationResponse,
    ShipmentListResponse,
    ShipmentResponse,
    ShipmentSummaryResponse,
    StatusResponse,
    UpdateShipmentRequest,
)
from logistics.listing.criteria import ShipmentQuery
from logistics.listing.listing import list_shipments
from logistics.listing.pagination import PageRequest
from logistics.listing.summary import summarize_shipments
from logistics.shipment.creation import CreateShipment
from logistics.shipment.forecast import forecast_for
from logistics.shipment.removal import DeleteShipment
from logistics.shipment.revision import UpdateShipment
from logistics.shipment.shipment import Shipment
from shared.security import current_user_id

shipment_router = APIRouter(prefix="/api/shipments", tags=["shipments"])

StatusFilter = Literal["ALL", "PENDING", "IN_TRANSIT", "OUT_FOR_DELIVERY", "DELIVERED", "DELAYED"]


def _to_response(shipment: Shipment) -> ShipmentResponse:
    forecast = forecast_for(shipment)
    return ShipmentResponse(
        id=str(shipment.id),
        owner_id=str(shipment.owner_id),
        tracking_number=shipment.tracking_number,
        destination_address=shipment.destination_address,
        status=shipment.status,
        is_fragile=bool(shipment.is_fragile),
        ship_date=shipment.ship_date.isoformat(),
        estimated_delivery_date=shipment.estimated_delivery_date.isoformat(),
        notes=shipment.notes or "",
        created_at=shipment.created_at,
        updated_at=shipment.updated_at,
        forecast=ForecastResponse(text=forecast.text, tone=forecast.tone),
    )


def _owned(shipment_id: str, owner_id: str) -> Shipment:
    return current_domain.repository_for(Shipment).get_owned(shipment_id, owner_id)


@shipment_router.get("", response_model=ShipmentListResponse)
async def get_shipments(
    search: str | None = Query(None),
    status: StatusFilter | None = Query(None),
    sort_by: str | None = Query(None, alias="sortBy"),
    sort_order: str | None = Query(None, alias="sortOrder"),
    page: str | None = Query(None),
    limit: str | None = Query(None),
    owner_id: str = Depends(current_user_id),
) -> ShipmentListResponse:
    query = ShipmentQuery(
        owner_id=owner_id,
        search=search,
        status=status,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    result = list_shipments(query, PageRequest.from_params(page=page, limit=limit))
    info = result.pagination
    return ShipmentListResponse(
        shipments=[_to_response(shipment) for shipment in result.shipments],
        pagination=PaginationResponse(
            current_page=info.current_page,
            total_pages=info.total_pages,
            total_items=info.total_items,
            items_per_page=info.items_per_page,
        ),
    )


# Declared before /{shipment_id} so "stats" is not taken for an id
@shipment_router.get("/stats/summary", response_model=ShipmentSummaryResponse)
async def get_summary(owner_id: str = Depends(current_user_id)) -> ShipmentSummaryResponse:
    summary = summarize_shipments(owner_id)
    return ShipmentSummaryResponse(
        total=summary.total,
        pending=summary.pending,
        in_transit=summary.in_transit,
        out_for_delivery=summary.out_for_delivery,
        delivered=summary.delivered,
        delayed=summary.delayed,
    )


@shipment_router.get("/{shipment_id}", response_model=ShipmentResponse)
async def get_shipment(shipment_id: str, owner_id: str = Depends(current_user_id)) -> ShipmentResponse:
    return _to_response(_owned(shipment_id, owner_id))


@shipment_router.post("", status_code=201, response_model=ShipmentResponse)
async def create_shipment(
    body: CreateShipmentRequest, owner_id: str = Depends(current_user_id)
) -> ShipmentResponse:
    command = CreateShipment(
        owner_id=owner_id,
        tracking_number=body.tracking_number,
        destination_address=body.destination_address,
        status=body.status,
        is_fragile=body.is_fragile,
        ship_date=body.ship_date,
        estimated_delivery_date=body.estimated_delivery_date,
        notes=body.notes,
    )
    shipment_id = current_domain.process(command, asynchronous=False)
    return _to_response(_owned(shipment_id, owner_id))


@shipment_router.put("/{shipment_id}", response_model=ShipmentResponse)
async def update_shipment(
    shipment_id: str, body: UpdateShipmentRequest, owner_id: str = Depends(current_user_id)
) -> ShipmentResponse:
    command = UpdateShipment(
        shipment_id=shipment_id,
        owner_id=owner_id,
        changes=json.dumps(body.supplied_changes()),
    )
    current_domain.process(command, asynchronous=False)
    return _to_response(_owned(shipment_id, owner_id))


@shipment_router.delete("/{shipment_id}", response_model=StatusResponse)
async def delete_shipment(shipment_id: str, owner_id: str = Depends(current_user_id)) -> StatusResponse:
    current_domain.process(DeleteShipment(shipment_id=shipment_id, owner_id=owner_id), asynchronous=False)
    return StatusResponse(status="deleted")
