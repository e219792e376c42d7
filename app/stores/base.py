"""Base interface for downstream user stores."""

from abc import ABC, abstractmethod

from pydantic import BaseModel


class UserSyncRequest(BaseModel):
    """Fields forwarded from a verified user event."""
    external_id: str
    email: str
    name: str
    image_url: str | None = None


class UserSync(ABC):
    """Abstract base class for user stores.

    Implementations create or update a user keyed by ``external_id`` and raise
    ``UserSyncError`` on any failure.
    """

    @property
    @abstractmethod
    def store_name(self) -> str:
        """Return store identifier."""
        pass

    @abstractmethod
    def is_configured(self) -> bool:
        """Check whether the store has the settings it needs."""
        pass

    @abstractmethod
    async def sync_user(self, request: UserSyncRequest) -> None:
        """Create or update the user record."""
        pass

    async def close(self) -> None:
        """Release any held connections."""
        return None
