from __future__ import annotations

import os

from pydantic import BaseModel, field_validator


class Settings(BaseModel):
    """Typed application settings built from environment variables."""

    # Database settings
    database_url: str = "redis://localhost:6379/0"

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False
    api_workers: int = 1
    api_cors_origins: list[str] = ["*"]

    # Application settings
    app_name: str = "Storefront"
    app_version: str = "1.0.0"
    log_level: str = "info"

    # Store settings
    store_slug: str = "docimdagringa"
    whatsapp_number: str = "5535991154125"

    # PIX merchant data; an empty key disables PIX charges
    pix_key: str = ""
    pix_merchant_name: str = "GRINGA STORE"
    pix_merchant_city: str = "SAO PAULO"

    @field_validator("whatsapp_number")
    @classmethod
    def validate_whatsapp_number(cls, v: str) -> str:
        if not v.isdigit():
            raise ValueError(
                "WhatsApp number must contain digits only (country code + area code + number)"
            )
        return v

    @property
    def pix_enabled(self) -> bool:
        return bool(self.pix_key)


def get_settings() -> Settings:
    """Return typed settings instance sourced from env vars."""
    return Settings(
        database_url=os.environ.get("DATABASE_URL", "redis://localhost:6379/0"),
        api_host=os.environ.get("API_HOST", "0.0.0.0"),
        api_port=int(os.environ.get("API_PORT", "8000")),
        api_debug=os.environ.get("API_DEBUG", "false").lower() == "true",
        api_workers=int(os.environ.get("API_WORKERS", "1")),
        api_cors_origins=os.environ.get("API_CORS_ORIGINS", "*").split(","),
        app_name=os.environ.get("APP_NAME", "Storefront"),
        app_version=os.environ.get("APP_VERSION", "1.0.0"),
        log_level=os.environ.get("LOG_LEVEL", "info").lower(),
        store_slug=os.environ.get("STORE_SLUG", "docimdagringa"),
        whatsapp_number=os.environ.get("WHATSAPP_NUMBER", "5535991154125"),
        pix_key=os.environ.get("PIX_KEY", ""),
        pix_merchant_name=os.environ.get("PIX_MERCHANT_NAME", "GRINGA STORE"),
        pix_merchant_city=os.environ.get("PIX_MERCHANT_CITY", "SAO PAULO"),
    )
