"""Connection settings for the author and publish repositories."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from urllib.parse import urlsplit

from .env import require_env_vars
from .errors import ConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy

AEM_USER_ENV = "AEM_USER"
AEM_PASSWORD_ENV = "AEM_PASSWORD"  # noqa: S105
AEM_TIMEOUT_SECONDS = 30.0
DEFAULT_MAX_REQUESTS_PER_SECOND = 10.0


@dataclass(frozen=True, slots=True)
class AemConfig:
    """Where the two repositories live and how to talk to them."""

    author_url: str
    publish_url: str
    user: str
    password: str = field(repr=False)
    proxy: str | None = None
    verify_tls: bool = True
    resilience: ResilienceConfig = field(
        default_factory=lambda: ResilienceConfig(name="aem"), repr=False
    )


def normalize_base_url(value: str, *, label: str) -> str:
    """Validate an ``http(s)://host[:port]`` URL and strip trailing slashes."""

    candidate = value.strip().rstrip("/")
    parts = urlsplit(candidate)
    if parts.scheme not in {"http", "https"} or not parts.netloc:
        raise ConfigurationError(f"Invalid {label} URL: {value!r}")
    return candidate


def get_aem_config(
    *,
    author_url: str,
    publish_url: str,
    user: str | None = None,
    password: str | None = None,
    proxy: str | None = None,
    allow_insecure: bool = False,
    retry: RetryPolicy | None = None,
    max_requests_per_second: float = DEFAULT_MAX_REQUESTS_PER_SECOND,
) -> AemConfig:
    """Build the repository configuration.

    Credentials not given explicitly are read from ``AEM_USER`` and
    ``AEM_PASSWORD``. One credential pair is shared by both repositories.
    Requests to either repository share one limit of
    ``max_requests_per_second``.
    """

    missing = [
        name
        for name, given in ((AEM_USER_ENV, user), (AEM_PASSWORD_ENV, password))
        if given is None
    ]
    values = require_env_vars(missing) if missing else {}
    user = user if user is not None else values[AEM_USER_ENV]
    password = password if password is not None else values[AEM_PASSWORD_ENV]

    if not math.isfinite(max_requests_per_second) or max_requests_per_second <= 0:
        raise ConfigurationError(
            f"Request rate must be a positive number: {max_requests_per_second!r}"
        )

    normalized_proxy = normalize_base_url(proxy, label="proxy") if proxy else None
    verify_tls = not allow_insecure
    resilience = ResilienceConfig(
        name="aem",
        timeout_seconds=AEM_TIMEOUT_SECONDS,
        retry=retry or RetryPolicy(),
        ratelimit=RateLimit(max_calls=max_requests_per_second, per_seconds=1.0),
        basic_auth=(user, password),
        proxy=normalized_proxy,
        verify_tls=verify_tls,
    )

    return AemConfig(
        author_url=normalize_base_url(author_url, label="author"),
        publish_url=normalize_base_url(publish_url, label="publish"),
        user=user,
        password=password,
        proxy=normalized_proxy,
        verify_tls=verify_tls,
        resilience=resilience,
    )
