"""Clerk webhook sync - FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.routers import health, webhooks

logging.basicConfig(
    level=logging.DEBUG if settings.debug else settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Fail at startup on an unknown USER_STORE rather than on the first webhook
    user_sync = webhooks.get_user_sync()
    if not settings.clerk_webhook_secret:
        logger.error("CLERK_WEBHOOK_SECRET is not set; webhooks will be rejected")
    logger.info(f"Syncing users to {user_sync.store_name}")
    yield
    await webhooks.close_user_sync()


app = FastAPI(
    title="Clerk Webhook Sync",
    description="Verifies Clerk user webhooks and syncs users to the application store",
    version=health.VERSION,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers (all public; webhook authenticity comes from the Svix signature)
app.include_router(health.router)
app.include_router(webhooks.router, tags=["webhooks"])
