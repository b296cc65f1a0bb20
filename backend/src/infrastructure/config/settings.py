"""Application configuration settings."""

from functools import lru_cache
from typing import Dict, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

from shared import ConfigurationError, normalize_store_domain


SET = "SET"
MISSING = "MISSING"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True
    )

    # Application
    app_name: str = "Shopify Tool Router"
    app_version: str = "1.0.0"
    app_env: str = Field(default="development", alias="APP_ENV")
    app_port: int = Field(default=8000, alias="APP_PORT")
    debug: bool = Field(default=False, alias="DEBUG")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_json: bool = Field(default=True, alias="LOG_JSON")

    # Shopify Storefront. Both credentials are optional at startup and
    # checked per invocation.
    shopify_store_domain: Optional[str] = Field(default=None, alias="SHOPIFY_STORE_DOMAIN")
    shopify_storefront_access_token: Optional[str] = Field(
        default=None,
        alias="SHOPIFY_STOREFRONT_ACCESS_TOKEN"
    )
    shopify_api_version: str = Field(default="2026-01", alias="SHOPIFY_STOREFRONT_API_VERSION")
    shopify_timeout: float = Field(default=10.0, alias="SHOPIFY_TIMEOUT")  # seconds

    @property
    def is_development(self) -> bool:
        """Check if running in development."""
        return self.app_env == "development"

    @property
    def store_domain(self) -> Optional[str]:
        """Store domain without scheme, or None when unset."""
        if not self.shopify_store_domain:
            return None
        return normalize_store_domain(self.shopify_store_domain) or None

    def credential_status(self) -> Dict[str, str]:
        """Presence report for the Storefront credentials.

        The domain is echoed as-is; the token only ever as SET/MISSING.
        """
        return {
            "domain": self.store_domain or MISSING,
            "token": SET if self.shopify_storefront_access_token else MISSING,
        }

    def require_storefront_credentials(self) -> None:
        """Raise ConfigurationError unless domain and token are both set."""
        missing = []
        if not self.store_domain:
            missing.append("SHOPIFY_STORE_DOMAIN")
        if not self.shopify_storefront_access_token:
            missing.append("SHOPIFY_STOREFRONT_ACCESS_TOKEN")

        if missing:
            raise ConfigurationError(missing=missing, status=self.credential_status())

    def mask_sensitive(self) -> Dict[str, object]:
        """Settings safe to log."""
        return {
            "app_env": self.app_env,
            "log_level": self.log_level,
            "shopify_api_version": self.shopify_api_version,
            "shopify_timeout": self.shopify_timeout,
            **self.credential_status(),
        }


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
