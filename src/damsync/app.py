"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from damsync.adapters.aem import AemClient
from damsync.adapters.http_resilience import ResilientClient
from damsync.domain.dispatch import ActionDispatcher
from damsync.domain.normalize import listing_root_href
from damsync.domain.resynch import resynch

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from damsync.config.aem import AemConfig
    from damsync.config.http_resilience import ResilienceConfig
    from damsync.config.resynch import ResynchConfig
    from damsync.domain.dispatch import Sleep
    from damsync.domain.model import CombinedRecord, ResynchReport

log = getLogger(__name__)


def resynch_assets(  # noqa: PLR0913
    *,
    aem: AemConfig,
    settings: ResynchConfig,
    client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    sleep: Sleep | None = None,
    tick: Callable[[str], None] | None = None,
    on_inventory: Callable[[Sequence[CombinedRecord]], None] | None = None,
) -> ResynchReport:
    """Reconcile publish with author below ``settings.start_path``."""

    log.info(
        "Starting resynch: author=%s, publish=%s, path=%s, dry_run=%s, delay=%ss",
        aem.author_url,
        aem.publish_url,
        settings.start_path or "/",
        settings.dry_run,
        settings.replication_delay_seconds,
    )
    return asyncio.run(
        _resynch_assets_async(
            aem=aem,
            settings=settings,
            client_factory=client_factory or ResilientClient,
            sleep=sleep or asyncio.sleep,
            tick=tick,
            on_inventory=on_inventory,
        )
    )


async def _resynch_assets_async(  # noqa: PLR0913
    *,
    aem: AemConfig,
    settings: ResynchConfig,
    client_factory: Callable[[ResilienceConfig], ResilientClient],
    sleep: Sleep,
    tick: Callable[[str], None] | None,
    on_inventory: Callable[[Sequence[CombinedRecord]], None] | None,
) -> ResynchReport:
    async with client_factory(aem.resilience) as http:
        client = AemClient(config=aem, http=http)
        dispatcher = ActionDispatcher(
            replicator=client,
            delay_seconds=settings.replication_delay_seconds,
            dry_run=settings.dry_run,
            sleep=sleep,
        )
        return await resynch(
            listing=client,
            reader=client,
            dispatcher=dispatcher,
            author_root=listing_root_href(aem.author_url, settings.start_path),
            publish_root=listing_root_href(aem.publish_url, settings.start_path),
            strict_status=settings.strict_status,
            tick=tick,
            on_inventory=on_inventory,
        )
