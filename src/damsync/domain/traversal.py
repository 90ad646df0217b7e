"""Depth-first walk of an Assets API folder tree.

Pages are followed through their ``next`` link until none is left; every
folder found on a node is then walked in turn, so the result is a flat,
pre-order list that holds folder markers as well as assets.

Folder hrefs are produced by the repository from its own tree, so the walk
assumes the API cannot link back to an ancestor and does not track visited
nodes.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from .normalize import normalize_entity

if TYPE_CHECKING:
    from collections.abc import Callable

    from .model import Inventory, RawEntity
    from .ports import PageFetcher

log = getLogger(__name__)


async def traverse(
    fetcher: PageFetcher,
    root_href: str,
    *,
    on_page: Callable[[], None] | None = None,
) -> Inventory:
    """Return every entity below ``root_href``.

    Any failed page fetch propagates; a partial inventory would make unseen
    paths look deleted.
    """

    raw_entities = await _fetch_all_pages(fetcher, root_href, on_page=on_page)
    entities = [normalize_entity(raw) for raw in raw_entities]

    for folder in [entity for entity in entities if entity.is_folder]:
        entities.extend(await traverse(fetcher, folder.href, on_page=on_page))

    return entities


async def _fetch_all_pages(
    fetcher: PageFetcher,
    href: str,
    *,
    on_page: Callable[[], None] | None,
) -> list[RawEntity]:
    collected: list[RawEntity] = []
    next_href: str | None = href
    while next_href:
        log.debug("Fetching %s", next_href)
        if on_page is not None:
            on_page()
        page = await fetcher.fetch_page(next_href)
        collected.extend(page.entities)
        next_href = page.next_href
    return collected
