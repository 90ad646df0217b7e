"""Reconciliation core: traversal, merge, decision and dispatch."""

from __future__ import annotations

from .decide import decide, detect_drift
from .dispatch import ActionDispatcher
from .errors import DataIntegrityError, ResynchError, TransportFailure
from .merge import merge_inventories
from .model import (
    ActivationStatus,
    CombinedRecord,
    DispatchedAction,
    Drift,
    EntityClass,
    EntityLink,
    ListingPage,
    NormalizedEntity,
    RawEntity,
    ReplicationAction,
    ResynchReport,
)
from .normalize import build_self_href, listing_root_href, normalize_entity, path_from_self_href
from .resynch import enrich_activation, resynch
from .traversal import traverse

__all__ = [
    "ActionDispatcher",
    "ActivationStatus",
    "CombinedRecord",
    "DataIntegrityError",
    "DispatchedAction",
    "Drift",
    "EntityClass",
    "EntityLink",
    "ListingPage",
    "NormalizedEntity",
    "RawEntity",
    "ReplicationAction",
    "ResynchError",
    "ResynchReport",
    "TransportFailure",
    "build_self_href",
    "decide",
    "detect_drift",
    "enrich_activation",
    "listing_root_href",
    "merge_inventories",
    "normalize_entity",
    "path_from_self_href",
    "resynch",
    "traverse",
]
