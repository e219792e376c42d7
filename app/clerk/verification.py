"""Svix signature verification for Clerk webhooks."""

import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Mapping

from pydantic import BaseModel
from svix.webhooks import Webhook

from app.errors import WebhookVerificationFailed

logger = logging.getLogger(__name__)

SVIX_ID_HEADER = "svix-id"
SVIX_TIMESTAMP_HEADER = "svix-timestamp"
SVIX_SIGNATURE_HEADER = "svix-signature"


class SvixHeaders(BaseModel):
    svix_id: str
    svix_timestamp: str
    svix_signature: str

    def as_dict(self) -> dict[str, str]:
        return {
            SVIX_ID_HEADER: self.svix_id,
            SVIX_TIMESTAMP_HEADER: self.svix_timestamp,
            SVIX_SIGNATURE_HEADER: self.svix_signature,
        }


def extract_svix_headers(headers: Mapping[str, str]) -> SvixHeaders | None:
    """Pull the three Svix headers, or None if any is missing or empty."""
    lowered = {k.lower(): v for k, v in headers.items()}
    svix_id = lowered.get(SVIX_ID_HEADER)
    svix_timestamp = lowered.get(SVIX_TIMESTAMP_HEADER)
    svix_signature = lowered.get(SVIX_SIGNATURE_HEADER)

    if not svix_id or not svix_timestamp or not svix_signature:
        return None

    return SvixHeaders(
        svix_id=svix_id,
        svix_timestamp=svix_timestamp,
        svix_signature=svix_signature,
    )


class SignatureVerifier(ABC):
    """Verifies a signed webhook body and returns its payload."""

    @abstractmethod
    def verify(self, secret: str, raw_body: bytes, headers: SvixHeaders) -> Any:
        """Return the verified payload or raise WebhookVerificationFailed."""
        pass


class SvixVerifier(SignatureVerifier):
    """HMAC-SHA256 verification via the svix library.

    The signed content is ``"{svix-id}.{svix-timestamp}.{body}"`` and the
    signature header carries space-separated ``v1,<base64>`` entries. svix
    rejects timestamps more than five minutes from now in either direction.
    The body is verified exactly as received.
    """

    def verify(self, secret: str, raw_body: bytes, headers: SvixHeaders) -> Any:
        if not secret:
            raise WebhookVerificationFailed("Signing secret is empty")

        try:
            webhook = Webhook(secret)
            webhook.verify(raw_body, headers.as_dict())
        except Exception as e:
            # svix raises ValueError/binascii.Error for malformed signature
            # entries or secrets, not only WebhookVerificationError
            raise WebhookVerificationFailed(f"{type(e).__name__}: {e}") from e

        # svix 1.x returns the parsed body, 2.x returns None
        return json.loads(raw_body.decode("utf-8"))
