"""Errors that abort a reconciliation run.

Every fatal condition is one of the two ``ResynchError`` variants below.
Failed activation status checks are not errors; they fold into
``ActivationStatus.UNKNOWN`` or ``ActivationStatus.INACTIVE``.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


class ResynchError(RuntimeError):
    """Base class for errors that end a run."""


class TransportFailure(ResynchError):
    """A listing, status or replication request did not succeed."""

    def __init__(
        self,
        url: str,
        *,
        status_code: int | None = None,
        reason: str | None = None,
    ) -> None:
        detail = f"{status_code} {reason or ''}".strip() if status_code is not None else reason
        super().__init__(f"HTTP error for {url}: {detail or 'unknown error'}")
        self.url = url
        self.status_code = status_code
        self.reason = reason


class DataIntegrityError(ResynchError):
    """A listed entity cannot be given an unambiguous identity and type."""

    def __init__(self, reason: str, *, entity: Mapping[str, object] | None = None) -> None:
        rendered = json.dumps(entity, default=str, sort_keys=True) if entity is not None else ""
        super().__init__(f"Entity assertion failed: {reason} {rendered}".rstrip())
        self.reason = reason
        self.entity = entity
