"""Decide the corrective action for one combined record.

Rules are checked in priority order and the first match wins:

1. activated on author but missing on publish -> activate
2. on publish but gone from author -> deactivate
3. on publish but not activated on author -> deactivate
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .model import Drift, ReplicationAction

if TYPE_CHECKING:
    from .model import CombinedRecord

DRIFT_ACTIONS: dict[Drift, ReplicationAction] = {
    Drift.MISSING_ON_PUBLISH: ReplicationAction.ACTIVATE,
    Drift.ORPHANED: ReplicationAction.DEACTIVATE,
    Drift.STALE: ReplicationAction.DEACTIVATE,
}


def detect_drift(record: CombinedRecord) -> Drift | None:
    if record.activated and not record.on_publish:
        return Drift.MISSING_ON_PUBLISH
    if record.on_publish and not record.on_author:
        return Drift.ORPHANED
    if record.on_publish and not record.activated:
        return Drift.STALE
    return None


def decide(record: CombinedRecord) -> ReplicationAction:
    drift = detect_drift(record)
    if drift is None:
        return ReplicationAction.NONE
    return DRIFT_ACTIONS[drift]
