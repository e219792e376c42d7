#!/usr/bin/env python3
"""
Clerk Test Webhook Sender

Signs a sample Clerk event with CLERK_WEBHOOK_SECRET (the same way Svix does)
and POSTs it to a running instance of the service.

Usage:
    python scripts/send_test_webhook.py [--url URL] [--type EVENT_TYPE] [--user-id ID]

Examples:
    python scripts/send_test_webhook.py
    python scripts/send_test_webhook.py --type session.created
    python scripts/send_test_webhook.py --url https://example.run.app/clerk-webhook
"""

import argparse
import asyncio
import json
import sys
import uuid
from datetime import datetime, timezone
from pathlib import Path

# Add parent directory to path so we can import from app
sys.path.insert(0, str(Path(__file__).parent.parent))

import httpx
from dotenv import load_dotenv

# Load environment variables before settings are created
load_dotenv()

from svix.webhooks import Webhook

from app.config import settings


def build_event(event_type: str, user_id: str) -> dict:
    return {
        "object": "event",
        "type": event_type,
        "data": {
            "id": user_id,
            "object": "user",
            "email_addresses": [
                {"id": "idn_test", "email_address": "test.user@example.com"},
            ],
            "first_name": "Test",
            "last_name": "User",
            "image_url": "https://img.clerk.com/test.png",
        },
    }


async def main():
    parser = argparse.ArgumentParser(description="Send a signed test Clerk webhook")
    parser.add_argument("--url", default="http://localhost:8000/clerk-webhook")
    parser.add_argument("--type", dest="event_type", default="user.created")
    parser.add_argument("--user-id", default="user_test_123")
    args = parser.parse_args()

    if not settings.clerk_webhook_secret:
        print("ERROR: CLERK_WEBHOOK_SECRET is not set in the environment or .env")
        sys.exit(1)

    body = json.dumps(build_event(args.event_type, args.user_id))
    msg_id = f"msg_{uuid.uuid4().hex}"
    now = datetime.now(timezone.utc)
    signature = Webhook(settings.clerk_webhook_secret).sign(msg_id, now, body)

    headers = {
        "content-type": "application/json",
        "svix-id": msg_id,
        "svix-timestamp": str(int(now.timestamp())),
        "svix-signature": signature,
    }

    print(f"POST {args.url}  ({args.event_type}, {msg_id})")

    try:
        async with httpx.AsyncClient(timeout=30.0) as client:
            response = await client.post(args.url, content=body, headers=headers)
    except httpx.HTTPError as e:
        print("ERROR:", str(e))
        sys.exit(1)

    print(f"{response.status_code} {response.text}")
    if response.status_code != 200:
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
