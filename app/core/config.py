"""Application configuration with strict environment validation."""

import json
from pathlib import Path
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


_ENV_FILE = Path(__file__).resolve().parents[2] / ".env"
_DEFAULT_BUCKETS = [0.05, 0.1, 0.25, 0.5, 1.0, 2.0, 5.0, 10.0]


class Settings(BaseSettings):
    """Settings loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE if _ENV_FILE.exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # --- WordPress / WooCommerce ---
    WP_URL: str
    WC_CONSUMER_KEY: str = ""
    WC_CONSUMER_SECRET: str = ""
    WC_API_PATH: str = "/wp-json/wc/v3"
    WP_UPLOAD_PATH: str = "/wp-json/custom/v1/upload-image"
    WC_TIMEOUT_SECONDS: float = 30.0
    WC_PAGE_SIZE: int = 100

    # Attribute ids as registered in the shop
    WC_COUNTRY_ATTRIBUTE_ID: int = 6
    WC_YEAR_ATTRIBUTE_ID: int = 7
    WC_QUALITY_ATTRIBUTE_ID: int = 8

    # --- Cache ---
    PRODUCT_CACHE_TTL_SECONDS: int = 300

    # --- Observability ---
    LOG_LEVEL: str = "INFO"
    METRICS_ENABLED: bool = True
    METRICS_NAMESPACE: str = "vault"
    METRICS_LATENCY_BUCKETS: Annotated[list[float], NoDecode] = Field(default_factory=lambda: list(_DEFAULT_BUCKETS))

    # --- HTTP hardening ---
    STRICT_TRANSPORT_SECURITY: str = "max-age=63072000; includeSubDomains; preload"
    CONTENT_SECURITY_POLICY: str = "default-src 'self'; frame-ancestors 'none'; object-src 'none'; base-uri 'self'"
    X_FRAME_OPTIONS: str = "DENY"
    X_CONTENT_TYPE_OPTIONS: str = "nosniff"
    REFERRER_POLICY: str = "no-referrer"
    PERMISSIONS_POLICY: str = "camera=(), microphone=(), geolocation=(), payment=()"
    MAX_REQUEST_SIZE_BYTES: int = 10 * 1024 * 1024  # image uploads
    MAX_JSON_BODY_BYTES: int = 1024 * 1024
    CORS_ORIGINS: Annotated[list[str], NoDecode] = Field(default_factory=lambda: ["*"])

    # --- API metadata ---
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "Coin & Banknote Vault API"

    @staticmethod
    def _items(value: str) -> list:
        # Env lists come raw: "a,b" or a JSON array
        value = value.strip()
        if value.startswith("["):
            return json.loads(value)
        return value.split(",")

    @staticmethod
    def _split_list(value: str | list[str] | None) -> list[str]:
        if not value:
            return []
        if isinstance(value, str):
            value = Settings._items(value)
        return [item.strip() for item in value if isinstance(item, str) and item.strip()]

    @staticmethod
    def _split_float_list(value: str | list[float] | None) -> list[float]:
        if value is None:
            return []
        items = Settings._items(value) if isinstance(value, str) else value
        floats: list[float] = []
        for item in items:
            try:
                floats.append(float(item))
            except (TypeError, ValueError):
                continue
        return floats

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def validate_origins(cls, value: str | list[str] | None) -> list[str]:
        return cls._split_list(value) or ["*"]

    @field_validator("METRICS_LATENCY_BUCKETS", mode="before")
    @classmethod
    def validate_metric_buckets(cls, value: str | list[float] | None) -> list[float]:
        return cls._split_float_list(value) or list(_DEFAULT_BUCKETS)

    @field_validator("WP_URL")
    @classmethod
    def validate_wp_url(cls, value: str) -> str:
        value = value.strip()
        if not value.startswith(("http://", "https://")):
            raise ValueError("WP_URL must be an http(s) URL.")
        return value.rstrip("/")

    @field_validator("WC_API_PATH", "WP_UPLOAD_PATH", "API_PREFIX")
    @classmethod
    def validate_path(cls, value: str) -> str:
        value = value.strip()
        if not value.startswith("/"):
            value = f"/{value}"
        return value.rstrip("/")

    @field_validator("WC_PAGE_SIZE")
    @classmethod
    def validate_page_size(cls, value: int) -> int:
        if not 1 <= value <= 100:
            raise ValueError("WC_PAGE_SIZE must be between 1 and 100.")
        return value

    @field_validator("PRODUCT_CACHE_TTL_SECONDS")
    @classmethod
    def validate_cache_ttl(cls, value: int) -> int:
        if value < 0:
            raise ValueError("PRODUCT_CACHE_TTL_SECONDS cannot be negative.")
        return value

    @field_validator("MAX_REQUEST_SIZE_BYTES", "MAX_JSON_BODY_BYTES")
    @classmethod
    def validate_request_size(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("Request size limits must be positive.")
        return value

    @property
    def woo_api_url(self) -> str:
        return f"{self.WP_URL}{self.WC_API_PATH}"

    @property
    def upload_url(self) -> str:
        return f"{self.WP_URL}{self.WP_UPLOAD_PATH}"

    @property
    def has_credentials(self) -> bool:
        return bool(self.WC_CONSUMER_KEY) and bool(self.WC_CONSUMER_SECRET)


settings = Settings()
