"""Shared test fixtures."""

import base64
import json
from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient
from svix.webhooks import Webhook

from app.clerk import ClerkWebhookHandler
from app.stores.base import UserSync, UserSyncRequest

TEST_SECRET = "whsec_" + base64.b64encode(b"clerk-webhook-sync-test-secret!!").decode()


class FakeUserSync(UserSync):
    """Records sync calls; optionally fails them."""

    def __init__(self, fail: bool = False, configured: bool = True):
        self.calls: list[UserSyncRequest] = []
        self.fail = fail
        self.configured = configured
        self.closed = False

    @property
    def store_name(self) -> str:
        return "fake"

    def is_configured(self) -> bool:
        return self.configured

    async def sync_user(self, request: UserSyncRequest) -> None:
        self.calls.append(request)
        if self.fail:
            raise RuntimeError("user store is down")

    async def close(self) -> None:
        self.closed = True


def user_created_event(**data) -> dict:
    """A Clerk user.created envelope; keyword args replace data fields."""
    event_data = {
        "id": "u1",
        "object": "user",
        "email_addresses": [{"id": "idn_1", "email_address": "a@b.com"}],
        "first_name": "Jane",
        "last_name": "Doe",
        "image_url": "http://x/img.png",
    }
    event_data.update(data)
    return {"object": "event", "type": "user.created", "data": event_data}


def sign_headers(
    body: str,
    msg_id: str = "msg_2abc",
    timestamp: datetime | None = None,
    secret: str = TEST_SECRET,
) -> dict:
    """Svix headers for ``body`` exactly as given."""
    ts = timestamp or datetime.now(timezone.utc)
    return {
        "svix-id": msg_id,
        "svix-timestamp": str(int(ts.timestamp())),
        "svix-signature": Webhook(secret).sign(msg_id, ts, body),
    }


def signed_request(payload: dict) -> tuple[str, dict]:
    body = json.dumps(payload)
    return body, sign_headers(body)


@pytest.fixture
def user_sync():
    return FakeUserSync()


@pytest.fixture
def app(user_sync):
    """Application with the user store replaced by a fake."""
    from app.main import app as _app
    from app.routers.webhooks import get_user_sync, get_webhook_handler

    _app.dependency_overrides[get_user_sync] = lambda: user_sync
    _app.dependency_overrides[get_webhook_handler] = lambda: ClerkWebhookHandler(
        secret=TEST_SECRET, user_sync=user_sync
    )
    yield _app
    _app.dependency_overrides.clear()


@pytest.fixture
async def client(app):
    """Async HTTP test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
