from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from app.config import settings
from app.routers.webhooks import get_user_sync
from app.stores import UserSync


router = APIRouter(tags=["health"])

VERSION = "0.1.0"

_startup_time = datetime.now(timezone.utc)


class EndpointInfo(BaseModel):
    path: str
    description: str
    provider: str | None = None


class HealthResponse(BaseModel):
    status: str
    version: str
    uptime_seconds: float
    endpoints: list[EndpointInfo]


class IntegrationStatus(BaseModel):
    connected: bool
    status: str
    last_check: str | None = None


class IntegrationsResponse(BaseModel):
    clerk_webhook: IntegrationStatus
    user_store: IntegrationStatus


ENDPOINTS = [
    EndpointInfo(path="/health", description="Service status and API directory"),
    EndpointInfo(path="/health/integrations", description="Integration configuration status"),
    EndpointInfo(path="/clerk-webhook", description="User event ingestion", provider="Clerk (Svix)"),
]


def _check_clerk_webhook() -> IntegrationStatus:
    if not settings.clerk_webhook_secret:
        return IntegrationStatus(connected=False, status="signing secret not configured")
    return IntegrationStatus(
        connected=True,
        status="ok",
        last_check=datetime.now(timezone.utc).isoformat(),
    )


def _check_user_store(user_sync: UserSync) -> IntegrationStatus:
    if not user_sync.is_configured():
        return IntegrationStatus(connected=False, status=f"{user_sync.store_name} not configured")
    return IntegrationStatus(
        connected=True,
        status=f"{user_sync.store_name} ok",
        last_check=datetime.now(timezone.utc).isoformat(),
    )


@router.get("/health", response_model=HealthResponse)
async def health_check():
    uptime = (datetime.now(timezone.utc) - _startup_time).total_seconds()

    return HealthResponse(
        status="ok",
        version=VERSION,
        uptime_seconds=round(uptime, 2),
        endpoints=ENDPOINTS,
    )


@router.get("/health/integrations", response_model=IntegrationsResponse)
async def get_integrations(user_sync: UserSync = Depends(get_user_sync)):
    return IntegrationsResponse(
        clerk_webhook=_check_clerk_webhook(),
        user_store=_check_user_store(user_sync),
    )
