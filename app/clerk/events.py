"""Typed Clerk webhook events."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

USER_CREATED = "user.created"


class EmailAddress(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    email_address: str | None = None


class UserData(BaseModel):
    """Subset of Clerk's user object used for syncing."""
    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    email_addresses: list[EmailAddress] = Field(default_factory=list)
    first_name: str | None = None
    last_name: str | None = None
    image_url: str | None = None

    @field_validator("email_addresses", mode="before")
    @classmethod
    def _null_as_empty(cls, v):
        return [] if v is None else v

    @property
    def primary_email(self) -> str | None:
        if not self.email_addresses:
            return None
        return self.email_addresses[0].email_address

    @property
    def full_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()

    def missing_fields(self) -> list[str]:
        missing = []
        if not self.id:
            missing.append("id")
        if not self.primary_email:
            missing.append("email")
        return missing


class UserCreatedEvent(BaseModel):
    type: Literal["user.created"]
    data: UserData


class UnhandledEvent(BaseModel):
    """Any event type without a dedicated handler."""
    type: str
    data: dict


ClerkEvent = UserCreatedEvent | UnhandledEvent


def parse_event(payload: Any) -> ClerkEvent:
    """Build a typed event from a verified payload.

    Raises pydantic.ValidationError if the envelope has no string ``type`` or
    a handled type carries malformed data.
    """
    if isinstance(payload, dict) and payload.get("type") == USER_CREATED:
        return UserCreatedEvent.model_validate(payload)
    return UnhandledEvent.model_validate(payload)
