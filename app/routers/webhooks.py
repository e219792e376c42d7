"""Webhook ingestion endpoint - Clerk user events delivered through Svix."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from app.clerk import ClerkWebhookHandler
from app.config import settings
from app.stores import UserSync, build_user_sync

router = APIRouter()

_user_sync: UserSync | None = None


def get_user_sync() -> UserSync:
    global _user_sync
    if _user_sync is None:
        _user_sync = build_user_sync(settings)
    return _user_sync


async def close_user_sync() -> None:
    global _user_sync
    if _user_sync is not None:
        await _user_sync.close()
        _user_sync = None


def get_webhook_handler(user_sync: UserSync = Depends(get_user_sync)) -> ClerkWebhookHandler:
    return ClerkWebhookHandler(secret=settings.clerk_webhook_secret, user_sync=user_sync)


@router.post("/clerk-webhook", response_class=PlainTextResponse)
async def clerk_webhook(
    request: Request,
    handler: ClerkWebhookHandler = Depends(get_webhook_handler),
):
    """Verify a Clerk webhook and sync the user it describes."""
    body = await request.body()
    result = await handler.handle(request.headers, body)
    return PlainTextResponse(result.message, status_code=result.status_code)
