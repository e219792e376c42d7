"""Convex user store - runs the sync mutation over the Convex HTTP API."""

import logging

import httpx

from app.errors import UserSyncError, parse_convex_error

from .base import UserSync, UserSyncRequest

logger = logging.getLogger(__name__)

_TIMEOUT = 15.0


class ConvexUserSync(UserSync):
    """Convex HTTP API client for the ``users:syncUser`` mutation."""

    def __init__(
        self,
        url: str,
        deploy_key: str = "",
        mutation: str = "users:syncUser",
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.url = url
        self.deploy_key = deploy_key
        self.mutation = mutation
        self._transport = transport

    @property
    def store_name(self) -> str:
        return "convex"

    def is_configured(self) -> bool:
        return bool(self.url)

    def _get_headers(self) -> dict:
        headers = {"Content-Type": "application/json"}
        if self.deploy_key:
            headers["Authorization"] = f"Convex {self.deploy_key}"
        return headers

    def _mutation_args(self, request: UserSyncRequest) -> dict:
        args = {
            "clerkId": request.external_id,
            "email": request.email,
            "name": request.name,
        }
        # Convex optional validators reject null, so absent fields are omitted
        if request.image_url is not None:
            args["image"] = request.image_url
        return args

    async def sync_user(self, request: UserSyncRequest) -> None:
        if not self.is_configured():
            raise UserSyncError("Convex not configured (CONVEX_URL not set)")

        payload = {
            "path": self.mutation,
            "args": self._mutation_args(request),
            "format": "json",
        }

        try:
            async with httpx.AsyncClient(timeout=_TIMEOUT, transport=self._transport) as client:
                response = await client.post(
                    f"{self.url.rstrip('/')}/api/mutation",
                    headers=self._get_headers(),
                    json=payload,
                )
        except httpx.TimeoutException as e:
            raise UserSyncError("Convex mutation timed out") from e
        except httpx.HTTPError as e:
            raise UserSyncError(f"Convex unreachable: {e}") from e

        if response.status_code != 200:
            raise UserSyncError(
                f"Convex API error ({response.status_code}): {parse_convex_error(response.text)}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise UserSyncError(f"Convex returned non-JSON response: {response.text[:200]}") from e

        if not isinstance(data, dict) or data.get("status") != "success":
            raise UserSyncError(f"Convex mutation failed: {parse_convex_error(response.text)}")

        logger.info(f"Synced user {request.external_id} via {self.mutation}")
