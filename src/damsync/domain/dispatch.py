"""Serialised, throttled execution of replication commands."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from damsync.config.resynch import DEFAULT_REPLICATION_DELAY_SECONDS

from .model import DispatchedAction, ReplicationAction

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from .model import Drift
    from .ports import Replicator

log = getLogger(__name__)

type Sleep = Callable[[float], Awaitable[None]]


@dataclass(slots=True)
class ActionDispatcher:
    """Send one replication command at a time, each after a fixed pause.

    The pause keeps the author replication queue from being flooded during
    production hours. In dry-run mode the pause and the log line still
    happen, only the command itself is withheld, so a preview shows the
    real pacing of a live run.
    """

    replicator: Replicator
    delay_seconds: float = DEFAULT_REPLICATION_DELAY_SECONDS
    dry_run: bool = True
    sleep: Sleep = field(default=asyncio.sleep)
    dispatched: list[DispatchedAction] = field(default_factory=list)

    async def dispatch(
        self,
        path: str,
        action: ReplicationAction,
        *,
        drift: Drift | None = None,
    ) -> DispatchedAction | None:
        """Execute ``action`` for ``path``; ``NONE`` returns without waiting.

        A failed command raises and is not retried.
        """

        if action is ReplicationAction.NONE:
            return None

        label = drift.value if drift is not None else action.value.lower()
        log.info("%s%s: %s", "DRYRUN " if self.dry_run else "", label, path)

        await self.sleep(self.delay_seconds)
        if not self.dry_run:
            await self.replicator.replicate(path, action)

        outcome = DispatchedAction(path=path, action=action, drift=drift, dry_run=self.dry_run)
        self.dispatched.append(outcome)
        return outcome
