"""Run settings for a reconciliation pass."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .errors import ConfigurationError

DEFAULT_REPLICATION_DELAY_SECONDS = 5.0


@dataclass(frozen=True, slots=True)
class ResynchConfig:
    start_path: str
    dry_run: bool = True
    replication_delay_seconds: float = DEFAULT_REPLICATION_DELAY_SECONDS
    strict_status: bool = False


def normalize_start_path(value: str) -> str:
    """Return ``value`` with exactly one leading slash and no trailing slash.

    The start path is relative to ``/content/dam``; the empty path and ``/``
    both select the DAM root.
    """

    stripped = value.strip().strip("/")
    if ".." in stripped.split("/"):
        raise ConfigurationError(f"Start path must not contain '..': {value!r}")
    return f"/{stripped}" if stripped else ""


def get_resynch_config(
    *,
    start_path: str,
    dry_run: bool = True,
    delay_ms: float | None = None,
    strict_status: bool = False,
) -> ResynchConfig:
    delay_seconds = DEFAULT_REPLICATION_DELAY_SECONDS if delay_ms is None else delay_ms / 1000
    if not math.isfinite(delay_seconds) or delay_seconds < 0:
        raise ConfigurationError(f"Replication delay must be a non-negative number: {delay_ms!r}")
    return ResynchConfig(
        start_path=normalize_start_path(start_path),
        dry_run=dry_run,
        replication_delay_seconds=delay_seconds,
        strict_status=strict_status,
    )
