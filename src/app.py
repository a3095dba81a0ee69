"""Shipment Manager FastAPI application.

Web server for the shipment dashboard. Commands are processed synchronously
per request, and each request is wrapped in the domain context that owns its
URL prefix.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

import os
from datetime import UTC, datetime

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# Domains are initialized at module level so uvicorn workers share them.
# PROTEAN_ENV selects the config overlay from domain.toml:
#   - unset / "test" -> in-memory database
#   - "production"   -> PostgreSQL via DATABASE_URL
from accounts.domain import accounts  # noqa: E402
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from logistics.domain import logistics  # noqa: E402
from shared.http import log_requests, register_error_handlers

accounts.init()
logistics.init()

# ---------------------------------------------------------------------------
# Route-to-domain mapping
# ---------------------------------------------------------------------------
_ROUTE_DOMAIN_MAP = {
    "/api/auth": accounts,
    "/api/shipments": logistics,
}


def _resolve_domain(path: str):
    """Return the domain for the given request path, or None."""
    for prefix, domain in _ROUTE_DOMAIN_MAP.items():
        if path.startswith(prefix):
            return domain
    return None


def _allowed_origins() -> list[str]:
    origins = os.environ.get("FRONTEND_URL", "*")
    return [origin.strip() for origin in origins.split(",") if origin.strip()]


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Shipment Manager API",
    description="Shipment tracking for logistics coordinators — Accounts & Logistics domains",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the correct Protean domain context for each request."""
    domain = _resolve_domain(request.url.path)
    if domain is not None:
        with domain.domain_context():
            response = await call_next(request)
        return response
    # No domain match: health check and docs pass through
    return await call_next(request)


# Registered last so it wraps the domain context and sees every request
app.middleware("http")(log_requests)

register_error_handlers(app)

# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from accounts.api import auth_router  # noqa: E402
from logistics.api import shipment_router  # noqa: E402

app.include_router(auth_router)
app.include_router(shipment_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "message": "Shipment Manager API is running",
            "timestamp": datetime.now(UTC).isoformat(),
        }
    )
