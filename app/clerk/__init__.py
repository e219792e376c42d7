"""
Clerk Webhooks

Svix verification, typed events and the ingestion handler.
"""

from .events import UnhandledEvent, UserCreatedEvent, parse_event
from .handler import ClerkWebhookHandler, WebhookResult
from .verification import SignatureVerifier, SvixVerifier, extract_svix_headers

__all__ = [
    "ClerkWebhookHandler",
    "WebhookResult",
    "SignatureVerifier",
    "SvixVerifier",
    "extract_svix_headers",
    "UserCreatedEvent",
    "UnhandledEvent",
    "parse_event",
]
