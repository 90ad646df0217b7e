"""Ports through which the reconciliation core reaches the repositories."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .model import ActivationStatus, ListingPage, ReplicationAction


@runtime_checkable
class PageFetcher(Protocol):
    """Fetch one page of a listing endpoint."""

    async def fetch_page(self, href: str) -> ListingPage: ...


@runtime_checkable
class ActivationReader(Protocol):
    """Report the activation state author holds for ``path``."""

    async def fetch_activation(self, path: str) -> ActivationStatus: ...


@runtime_checkable
class Replicator(Protocol):
    """Send a replication command for ``path`` to author."""

    async def replicate(self, path: str, action: ReplicationAction) -> None: ...


__all__ = ["ActivationReader", "PageFetcher", "Replicator"]
