"""Application configuration via pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # App
    debug: bool = False
    log_level: str = "INFO"
    allowed_origins: list[str] = ["http://localhost:3000", "http://localhost:3001"]

    # Clerk (Svix-signed webhooks); empty means not configured
    clerk_webhook_secret: str = ""

    # User store: "convex" or "postgres"
    user_store: str = "convex"

    # Convex
    convex_url: str = ""
    convex_deploy_key: str = ""
    convex_sync_mutation: str = "users:syncUser"

    # Postgres
    database_url: str = ""


settings = Settings()
