"""
User Stores

Downstream adapters that persist users synced from identity-provider webhooks.
"""

from app.config import Settings

from .base import UserSync, UserSyncRequest
from .convex import ConvexUserSync
from .postgres import PostgresUserSync

__all__ = [
    "UserSync",
    "UserSyncRequest",
    "ConvexUserSync",
    "PostgresUserSync",
    "build_user_sync",
]


def build_user_sync(settings: Settings) -> UserSync:
    """Create the user store selected by ``settings.user_store``."""
    store = settings.user_store.lower()
    if store == "convex":
        return ConvexUserSync(
            url=settings.convex_url,
            deploy_key=settings.convex_deploy_key,
            mutation=settings.convex_sync_mutation,
        )
    if store == "postgres":
        return PostgresUserSync(settings.database_url)
    raise ValueError(f"Unknown user store: {settings.user_store!r}")
