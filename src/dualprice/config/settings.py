# src/dualprice/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides the host configuration boundary using Pydantic Settings. Values
mirror the keys a storefront module persists (primary currency, fixed rate,
display styles, feature toggles) and are read from environment variables
or a ``.env`` file.

Files that USE this module:
- dualprice.config.resolver (loads Settings when no raw config is supplied)
- dualprice.app (logging options and default host configuration)

Files that this module USES:
- dualprice.shared.validators (currency code validation)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from pathlib import Path  # Object-oriented filesystem paths
from typing import Any, Dict, Optional  # Type hints for mappings and optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from dualprice.shared.validators import validate_iso_code


class Settings(BaseSettings):
    """Storefront configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- Currencies ---
    primary: str = Field(default="BGN", alias="DUALPRICE_PRIMARY")
    fixed_rate: float = Field(default=1.95583, alias="DUALPRICE_FIXED_RATE")
    currency_symbols: Dict[str, str] = Field(
        default_factory=lambda: {"BGN": "лв", "EUR": "€"}, alias="DUALPRICE_CURRENCY_SYMBOLS"
    )
    currency_codes: Dict[str, str] = Field(
        default_factory=lambda: {"BGN": "BGN", "EUR": "EUR"}, alias="DUALPRICE_CURRENCY_CODES"
    )

    # --- Display ---
    show_secondary: bool = Field(default=True, alias="DUALPRICE_SHOW_SECONDARY")
    display_format: str = Field(default="paren", alias="DUALPRICE_FORMAT")
    tag_style: str = Field(default="symbol", alias="DUALPRICE_TAG_STYLE")
    default_locale: str = Field(default="en", alias="DUALPRICE_DEFAULT_LOCALE")
    extraction_order: str = Field(default="attributes", alias="DUALPRICE_EXTRACTION_ORDER")

    # --- Feature toggles ---
    enable_product: bool = Field(default=True, alias="DUALPRICE_ENABLE_PRODUCT")
    enable_cart: bool = Field(default=True, alias="DUALPRICE_ENABLE_CART")
    enable_emails: bool = Field(default=True, alias="DUALPRICE_ENABLE_EMAILS")

    # --- HTTP Settings ---
    http_timeout_seconds: int = Field(default=10, alias="DUALPRICE_HTTP_TIMEOUT_SECONDS", ge=1, le=60)

    # --- Logging ---
    log_level: str = Field(default="INFO", alias="DUALPRICE_LOG_LEVEL")
    log_file: Optional[Path] = Field(default=None, alias="DUALPRICE_LOG_FILE")
    log_dir: Optional[Path] = Field(default=None, alias="DUALPRICE_LOG_DIR")
    log_stdout: bool = Field(default=True, alias="DUALPRICE_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="DUALPRICE_LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="DUALPRICE_LOG_BACKUP_COUNT")

    @field_validator("primary")
    @classmethod
    def validate_primary(cls, v: str) -> str:
        """Validate primary currency code format."""
        v = v.strip().upper()
        if not validate_iso_code(v):
            raise ValueError("DUALPRICE_PRIMARY must be a three-letter ISO currency code")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate logging level name."""
        v = v.strip().upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("DUALPRICE_LOG_LEVEL must be a standard logging level name")
        return v

    def to_host_config(self) -> Dict[str, Any]:
        """
        Render the flat key/value structure the storefront exposes to its pages.

        Returns:
            Raw configuration mapping consumed by the configuration resolver
        """
        return {
            "primary": self.primary,
            "rate": self.fixed_rate,
            "showSecondary": self.show_secondary,
            "format": self.display_format,
            "tagStyle": self.tag_style,
            "enableProduct": self.enable_product,
            "enableCart": self.enable_cart,
            "enableEmails": self.enable_emails,
            "currencySymbols": dict(self.currency_symbols),
            "currencyCodes": dict(self.currency_codes),
            "locale": self.default_locale,
            "extractionOrder": self.extraction_order,
        }
