"""
Centralized configuration with environment variable overrides.

Business name, server binding, seed loading, and dashboard limits are
configurable here. Nothing is hardcoded in ingestion or stats logic.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from crm.logging_context import install_request_id_filter

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_SEED_PATH = str(Path(__file__).parent / "data" / "seed.json")


def _safe_int(env_var: str, default: str) -> int:
    """Parse an integer from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return int(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid integer for {env_var}: {raw!r}"
        ) from None


def _safe_bool(env_var: str, default: str) -> bool:
    """Parse a boolean flag from an env var (1/true/yes, 0/false/no)."""
    raw = os.getenv(env_var, default).strip().lower()
    if raw in ("1", "true", "yes", "on"):
        return True
    if raw in ("0", "false", "no", "off", ""):
        return False
    raise ValueError(f"Invalid boolean for {env_var}: {raw!r}")


@dataclass(frozen=True)
class BusinessConfig:
    """Business-specific settings loaded from environment or defaults."""

    name: str = os.getenv("BUSINESS_NAME", "Immaculate Car Wash")


@dataclass(frozen=True)
class ServerConfig:
    """HTTP server binding."""

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = _safe_int("PORT", "8000")


@dataclass(frozen=True)
class StoreConfig:
    """In-memory record store bootstrap."""

    seed_enabled: bool = _safe_bool("SEED_ENABLED", "true")
    seed_path: str = os.getenv("SEED_PATH", DEFAULT_SEED_PATH)


@dataclass(frozen=True)
class StatsConfig:
    """Dashboard aggregation limits."""

    popular_services_limit: int = _safe_int("POPULAR_SERVICES_LIMIT", "8")
    top_zip_codes_limit: int = _safe_int("TOP_ZIP_CODES_LIMIT", "10")
    recent_bookings_limit: int = _safe_int("RECENT_BOOKINGS_LIMIT", "10")
    booking_history_months: int = _safe_int("BOOKING_HISTORY_MONTHS", "12")


@dataclass(frozen=True)
class AppConfig:
    """Root configuration aggregating all sub-configs."""

    business: BusinessConfig = field(default_factory=BusinessConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    store: StoreConfig = field(default_factory=StoreConfig)
    stats: StatsConfig = field(default_factory=StatsConfig)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    version: str = os.getenv("APP_VERSION", "0.1.0")


def _validate_config(config: AppConfig) -> None:
    """Validate configuration values are within acceptable ranges."""
    if not 1 <= config.server.port <= 65535:
        raise ValueError(f"PORT must be between 1 and 65535, got {config.server.port}")

    for limit_name, limit_value in [
        ("POPULAR_SERVICES_LIMIT", config.stats.popular_services_limit),
        ("TOP_ZIP_CODES_LIMIT", config.stats.top_zip_codes_limit),
        ("RECENT_BOOKINGS_LIMIT", config.stats.recent_bookings_limit),
        ("BOOKING_HISTORY_MONTHS", config.stats.booking_history_months),
    ]:
        if limit_value < 1:
            raise ValueError(f"{limit_name} must be >= 1, got {limit_value}")


def load_config() -> AppConfig:
    """Load and validate application configuration."""
    config = AppConfig()
    _validate_config(config)
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(name)s] [%(request_id)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    install_request_id_filter()
    logger.info("Configuration loaded for '%s'", config.business.name)
    return config


# Singleton instance
settings = load_config()
