"""Application configuration helpers."""

from __future__ import annotations

from .aem import (
    DEFAULT_MAX_REQUESTS_PER_SECOND,
    AemConfig,
    get_aem_config,
    normalize_base_url,
)
from .env import require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .resynch import (
    DEFAULT_REPLICATION_DELAY_SECONDS,
    ResynchConfig,
    get_resynch_config,
    normalize_start_path,
)

__all__ = [
    "DEFAULT_MAX_REQUESTS_PER_SECOND",
    "DEFAULT_REPLICATION_DELAY_SECONDS",
    "AemConfig",
    "ConfigurationError",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "ResynchConfig",
    "RetryPolicy",
    "configure_logging",
    "get_aem_config",
    "get_resynch_config",
    "normalize_base_url",
    "normalize_start_path",
    "require_env_vars",
]
