"""Translate Assets API payloads into domain listing pages."""

from __future__ import annotations

from typing import TYPE_CHECKING

from damsync.domain.model import EntityLink, ListingPage, RawEntity

if TYPE_CHECKING:
    from .schema import SirenEntity, SirenLink, SirenPage

NEXT_REL = "next"


def translate_page(page: SirenPage) -> ListingPage:
    return ListingPage(
        entities=tuple(translate_entity(entity) for entity in page.entities),
        next_href=_find_href(page.links, NEXT_REL),
    )


def translate_entity(entity: SirenEntity) -> RawEntity:
    return RawEntity(
        classes=tuple(entity.classes),
        links=tuple(EntityLink(rel=tuple(link.rel), href=link.href) for link in entity.links),
        payload=entity.model_dump(by_alias=True, exclude_none=True),
    )


def _find_href(links: list[SirenLink], rel: str) -> str | None:
    for link in links:
        if rel in link.rel:
            return link.href
    return None
