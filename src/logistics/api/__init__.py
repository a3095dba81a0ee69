"""Logistics domain API package."""

from logistics.api.routes import shipment_router

__all__ = ["shipment_router"]
