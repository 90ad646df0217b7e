"""Value types shared by the reconciliation stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


class EntityClass(StrEnum):
    ASSET = "assets/asset"
    FOLDER = "assets/folder"


class ActivationStatus(StrEnum):
    """Last replication action recorded on author for one path."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    UNKNOWN = "unknown"


class ReplicationAction(StrEnum):
    """Corrective action; mutating members carry the replication command."""

    NONE = "None"
    ACTIVATE = "Activate"
    DEACTIVATE = "Deactivate"


class Drift(StrEnum):
    MISSING_ON_PUBLISH = "re-replicate"
    ORPHANED = "orphaned"
    STALE = "deactivated"


@dataclass(frozen=True, slots=True)
class EntityLink:
    rel: tuple[str, ...]
    href: str


@dataclass(frozen=True, slots=True)
class RawEntity:
    """One listed entity as the Assets API returned it."""

    classes: tuple[str, ...]
    links: tuple[EntityLink, ...]
    payload: Mapping[str, object] = field(default_factory=dict, compare=False, repr=False)

    def link_href(self, rel: str) -> str | None:
        for link in self.links:
            if rel in link.rel:
                return link.href
        return None


@dataclass(frozen=True, slots=True)
class ListingPage:
    entities: tuple[RawEntity, ...] = ()
    next_href: str | None = None


@dataclass(frozen=True, slots=True)
class NormalizedEntity:
    entity_class: EntityClass
    href: str
    path: str

    @property
    def is_folder(self) -> bool:
        return self.entity_class is EntityClass.FOLDER


@dataclass(slots=True)
class CombinedRecord:
    """Presence and activation facts for one path across both repositories."""

    path: str
    entity_class: EntityClass
    on_author: bool = False
    on_publish: bool = False
    activation: ActivationStatus = ActivationStatus.INACTIVE

    @property
    def activated(self) -> bool:
        return self.activation is ActivationStatus.ACTIVE


@dataclass(frozen=True, slots=True)
class DispatchedAction:
    path: str
    action: ReplicationAction
    drift: Drift | None
    dry_run: bool


@dataclass(slots=True)
class ResynchReport:
    """Outcome of one reconciliation run."""

    records: list[CombinedRecord]
    dispatched: list[DispatchedAction]
    dry_run: bool
    skipped: list[CombinedRecord] = field(default_factory=list)


type Inventory = list[NormalizedEntity]
type CombinedInventory = dict[str, CombinedRecord]
