"""Clerk webhook ingestion - verifies Svix-signed events and syncs users."""

import json
import logging
from typing import Mapping

from pydantic import BaseModel, ValidationError

from app.errors import WebhookVerificationFailed
from app.stores.base import UserSync, UserSyncRequest

from .events import UserCreatedEvent, parse_event
from .verification import SignatureVerifier, SvixVerifier, extract_svix_headers

logger = logging.getLogger(__name__)


class WebhookResult(BaseModel):
    status_code: int
    message: str


CONFIGURATION_ERROR = WebhookResult(status_code=500, message="Configuration error")
MISSING_HEADERS = WebhookResult(status_code=400, message="Missing required headers")
INVALID_JSON = WebhookResult(status_code=400, message="Invalid JSON payload")
INVALID_SIGNATURE = WebhookResult(status_code=400, message="Invalid webhook signature")
INVALID_EVENT_DATA = WebhookResult(status_code=400, message="Invalid event data")
SYNC_FAILED = WebhookResult(status_code=500, message="Error syncing user data")
PROCESSED = WebhookResult(status_code=200, message="Webhook processed successfully")


class ClerkWebhookHandler:
    """Linear guard pipeline for one inbound Clerk webhook.

    Each stage either passes to the next or returns a terminal result:
    secret check, Svix headers, JSON body, signature, event dispatch.
    ``handle`` never raises.
    """

    def __init__(
        self,
        secret: str,
        user_sync: UserSync,
        verifier: SignatureVerifier | None = None,
    ):
        self.secret = secret
        self.user_sync = user_sync
        self.verifier = verifier or SvixVerifier()

    async def handle(self, headers: Mapping[str, str], body: bytes) -> WebhookResult:
        if not self.secret:
            logger.error("Missing CLERK_WEBHOOK_SECRET environment variable")
            return CONFIGURATION_ERROR

        svix_headers = extract_svix_headers(headers)
        if svix_headers is None:
            logger.error("Missing Svix headers")
            return MISSING_HEADERS

        # Decoded as strict UTF-8, matching what the verifier signs over
        try:
            json.loads(body.decode("utf-8"))
        except ValueError as e:
            logger.error(f"Failed to parse request payload: {e}")
            return INVALID_JSON

        try:
            payload = self.verifier.verify(self.secret, body, svix_headers)
        except WebhookVerificationFailed as e:
            logger.error(f"Error verifying webhook {svix_headers.svix_id}: {e}")
            return INVALID_SIGNATURE

        try:
            event = parse_event(payload)
        except ValidationError as e:
            logger.error(f"Malformed event envelope {svix_headers.svix_id}: {e}")
            return INVALID_EVENT_DATA

        if isinstance(event, UserCreatedEvent):
            return await self._on_user_created(event)

        logger.warning(f"Unhandled event type: {event.type}")
        return PROCESSED

    async def _on_user_created(self, event: UserCreatedEvent) -> WebhookResult:
        data = event.data
        missing = data.missing_fields()
        if missing:
            logger.error(f"Missing required user data in event: {', '.join(missing)}")
            return INVALID_EVENT_DATA

        request = UserSyncRequest(
            external_id=data.id,
            email=data.primary_email,
            name=data.full_name,
            image_url=data.image_url,
        )

        try:
            await self.user_sync.sync_user(request)
        except Exception:
            logger.exception(f"Error syncing user {data.id} to {self.user_sync.store_name}")
            return SYNC_FAILED

        return PROCESSED
