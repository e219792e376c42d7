"""Shared errors and error-parsing utilities for webhook ingestion."""

import json


class WebhookVerificationFailed(Exception):
    """Inbound webhook could not be authenticated."""


class UserSyncError(Exception):
    """Downstream user store rejected or failed a sync."""


def parse_convex_error(response_text: str) -> str:
    """Extract a readable message from a Convex HTTP API error response.

    Convex returns JSON like {"status": "error", "errorMessage": "...", "errorData": ...}.
    Returns the error message when parseable, raw text otherwise.
    """
    try:
        body = json.loads(response_text)
        if isinstance(body, dict):
            msg = body.get("errorMessage", "")
            code = body.get("code", "")
            if msg:
                return f"{code}: {msg}" if code else msg
    except ValueError:
        pass
    return response_text
