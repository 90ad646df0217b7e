from __future__ import annotations

import pytest

from damsync.config import (
    DEFAULT_MAX_REQUESTS_PER_SECOND,
    ConfigurationError,
    MissingConfigurationError,
    RateLimit,
    get_aem_config,
    get_resynch_config,
    normalize_start_path,
    require_env_vars,
)


def test_require_env_vars_returns_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "value")

    assert require_env_vars(["EXAMPLE_VAR"]) == {"EXAMPLE_VAR": "value"}


def test_require_env_vars_rejects_blank_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "   ")

    with pytest.raises(MissingConfigurationError, match="EXAMPLE_VAR"):
        require_env_vars(["EXAMPLE_VAR"])


def test_aem_config_uses_explicit_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("AEM_USER", raising=False)
    monkeypatch.delenv("AEM_PASSWORD", raising=False)

    config = get_aem_config(
        author_url="http://localhost:4502/",
        publish_url="https://publish.example",
        user="admin",
        password="secret",  # noqa: S106
    )

    assert config.author_url == "http://localhost:4502"
    assert config.publish_url == "https://publish.example"
    assert config.resilience.basic_auth == ("admin", "secret")
    assert config.resilience.verify_tls is True
    assert "secret" not in repr(config)


def test_aem_config_falls_back_to_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AEM_USER", "replicator")
    monkeypatch.setenv("AEM_PASSWORD", "from-env")

    config = get_aem_config(author_url="http://a:4502", publish_url="http://p:4503")

    assert (config.user, config.password) == ("replicator", "from-env")


def test_aem_config_reports_missing_password(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("AEM_PASSWORD", raising=False)

    with pytest.raises(MissingConfigurationError, match="AEM_PASSWORD"):
        get_aem_config(author_url="http://a:4502", publish_url="http://p:4503", user="admin")


def test_aem_config_proxy_and_insecure_flags() -> None:
    config = get_aem_config(
        author_url="https://a.example",
        publish_url="https://p.example",
        user="u",
        password="p",  # noqa: S106
        proxy="http://localhost:9999/",
        allow_insecure=True,
    )

    assert config.resilience.proxy == "http://localhost:9999"
    assert config.resilience.verify_tls is False


def test_aem_config_limits_request_rate_by_default() -> None:
    config = get_aem_config(
        author_url="http://a:4502",
        publish_url="http://p:4503",
        user="u",
        password="p",  # noqa: S106
    )

    assert config.resilience.ratelimit == RateLimit(
        max_calls=DEFAULT_MAX_REQUESTS_PER_SECOND, per_seconds=1.0
    )


def test_aem_config_accepts_custom_request_rate() -> None:
    config = get_aem_config(
        author_url="http://a:4502",
        publish_url="http://p:4503",
        user="u",
        password="p",  # noqa: S106
        max_requests_per_second=2.5,
    )

    assert config.resilience.ratelimit == RateLimit(max_calls=2.5, per_seconds=1.0)


@pytest.mark.parametrize("rate", [0.0, -3.0, float("nan"), float("inf")])
def test_aem_config_rejects_unusable_request_rate(rate: float) -> None:
    with pytest.raises(ConfigurationError, match="Request rate"):
        get_aem_config(
            author_url="http://a:4502",
            publish_url="http://p:4503",
            user="u",
            password="p",  # noqa: S106
            max_requests_per_second=rate,
        )


@pytest.mark.parametrize("url", ["localhost:4502", "ftp://a.example", "http://"])
def test_aem_config_rejects_invalid_urls(url: str) -> None:
    with pytest.raises(ConfigurationError, match="Invalid author URL"):
        get_aem_config(
            author_url=url,
            publish_url="http://p:4503",
            user="u",
            password="p",  # noqa: S106
        )


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("/myfolder", "/myfolder"), ("myfolder/", "/myfolder"), ("/", ""), ("", ""), ("/a/b", "/a/b")],
)
def test_normalize_start_path(raw: str, expected: str) -> None:
    assert normalize_start_path(raw) == expected


def test_start_path_rejects_parent_segments() -> None:
    with pytest.raises(ConfigurationError):
        normalize_start_path("/a/../b")


def test_resynch_config_converts_delay_to_seconds() -> None:
    config = get_resynch_config(start_path="/photos", dry_run=False, delay_ms=250)

    assert config.replication_delay_seconds == 0.25
    assert config.dry_run is False


def test_resynch_config_defaults() -> None:
    config = get_resynch_config(start_path="photos")

    assert config.start_path == "/photos"
    assert config.dry_run is True
    assert config.replication_delay_seconds == 5.0
    assert config.strict_status is False


@pytest.mark.parametrize("delay_ms", [-1.0, float("nan"), float("inf"), float("-inf")])
def test_resynch_config_rejects_unusable_delay(delay_ms: float) -> None:
    with pytest.raises(ConfigurationError, match="non-negative number"):
        get_resynch_config(start_path="/photos", delay_ms=delay_ms)
