"""End-to-end reconciliation of one author/publish pair."""

from __future__ import annotations

from functools import partial
from logging import getLogger
from typing import TYPE_CHECKING

from .decide import decide, detect_drift
from .merge import merge_inventories
from .model import ActivationStatus, ReplicationAction, ResynchReport
from .traversal import traverse

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from .dispatch import ActionDispatcher
    from .model import CombinedInventory, CombinedRecord
    from .ports import ActivationReader, PageFetcher

log = getLogger(__name__)

type Tick = Callable[[str], None]


async def enrich_activation(
    combined: CombinedInventory,
    reader: ActivationReader,
    *,
    tick: Tick | None = None,
) -> None:
    """Fill in the activation state of every record author knows about.

    Paths missing on author have no status to read and stay inactive.
    """

    for record in combined.values():
        if not record.on_author:
            continue
        log.debug("Checking status of %s", record.path)
        if tick is not None:
            tick("d")
        record.activation = await reader.fetch_activation(record.path)


async def resynch(  # noqa: PLR0913
    *,
    listing: PageFetcher,
    reader: ActivationReader,
    dispatcher: ActionDispatcher,
    author_root: str,
    publish_root: str,
    strict_status: bool = False,
    tick: Tick | None = None,
    on_inventory: Callable[[Sequence[CombinedRecord]], None] | None = None,
) -> ResynchReport:
    """Traverse both roots, merge, read activation status, decide and dispatch.

    Phases run strictly one after the other; the first fatal error ends the
    run without dispatching anything further.
    """

    author = await traverse(listing, author_root, on_page=_ticker(tick, "a"))
    publish = await traverse(listing, publish_root, on_page=_ticker(tick, "p"))
    log.info("Found %d entities on author and %d on publish", len(author), len(publish))

    combined = merge_inventories(author, publish)
    await enrich_activation(combined, reader, tick=tick)

    records = list(combined.values())
    if on_inventory is not None:
        on_inventory(records)

    skipped: list[CombinedRecord] = []
    for record in records:
        if strict_status and record.on_author and record.activation is ActivationStatus.UNKNOWN:
            log.warning("Activation status of %s is unknown, leaving it untouched", record.path)
            skipped.append(record)
            continue
        action = decide(record)
        if action is ReplicationAction.NONE:
            continue
        await dispatcher.dispatch(record.path, action, drift=detect_drift(record))

    log.info(
        "Dispatched %d actions (dry_run=%s, skipped=%d)",
        len(dispatcher.dispatched),
        dispatcher.dry_run,
        len(skipped),
    )
    return ResynchReport(
        records=records,
        dispatched=list(dispatcher.dispatched),
        dry_run=dispatcher.dry_run,
        skipped=skipped,
    )


def _ticker(tick: Tick | None, marker: str) -> Callable[[], None] | None:
    if tick is None:
        return None
    return partial(tick, marker)
