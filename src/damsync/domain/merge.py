"""Combine the author and publish inventories by logical path."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .model import CombinedRecord

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .model import CombinedInventory, NormalizedEntity


def merge_inventories(
    author: Iterable[NormalizedEntity],
    publish: Iterable[NormalizedEntity],
) -> CombinedInventory:
    """Return one record per path with a presence flag for each side.

    Author entries come first in the result, followed by paths only publish
    knows about.
    """

    combined: CombinedInventory = {}
    for entity in author:
        combined[entity.path] = CombinedRecord(
            path=entity.path,
            entity_class=entity.entity_class,
            on_author=True,
            on_publish=False,
        )

    for entity in publish:
        record = combined.get(entity.path)
        if record is None:
            record = CombinedRecord(
                path=entity.path,
                entity_class=entity.entity_class,
                on_author=False,
            )
            combined[entity.path] = record
        record.on_publish = True

    return combined
