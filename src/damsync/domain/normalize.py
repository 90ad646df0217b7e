"""Turn listed entities into path-keyed records.

The Assets API addresses every entity as ``/api/assets/<path>.json``; the
``<path>`` part (relative to ``/content/dam``, percent-decoded) is the
logical identity used to line up author and publish.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote, unquote, urlsplit

from .errors import DataIntegrityError
from .model import EntityClass, NormalizedEntity

if TYPE_CHECKING:
    from .model import RawEntity

ASSETS_API_PREFIX = "/api/assets/"
ASSETS_API_SUFFIX = ".json"
SELF_REL = "self"


def normalize_entity(entity: RawEntity) -> NormalizedEntity:
    """Reduce ``entity`` to its class, canonical href and logical path."""

    self_href = entity.link_href(SELF_REL)
    if not self_href:
        raise DataIntegrityError("no self href found", entity=entity.payload)

    if len(entity.classes) != 1:
        raise DataIntegrityError("class not unique", entity=entity.payload)
    try:
        entity_class = EntityClass(entity.classes[0])
    except ValueError:
        raise DataIntegrityError(
            f"unsupported class {entity.classes[0]!r}", entity=entity.payload
        ) from None

    parts = urlsplit(self_href)
    path = _path_from_url_path(parts.path)
    if path is None:
        raise DataIntegrityError(
            f"self href outside the assets API: {self_href}", entity=entity.payload
        )

    href = f"{parts.scheme}://{parts.netloc}{parts.path}" if parts.netloc else parts.path
    return NormalizedEntity(entity_class=entity_class, href=href, path=path)


def path_from_self_href(href: str) -> str:
    """Return the logical path encoded in an Assets API self href."""

    path = _path_from_url_path(urlsplit(href).path)
    if path is None:
        raise DataIntegrityError(f"self href outside the assets API: {href}")
    return path


def build_self_href(base_url: str, path: str) -> str:
    """Inverse of :func:`path_from_self_href` for well-formed paths."""

    return f"{base_url.rstrip('/')}{ASSETS_API_PREFIX}{quote(path)}{ASSETS_API_SUFFIX}"


def listing_root_href(base_url: str, start_path: str) -> str:
    """Listing URL of the folder at ``start_path`` below ``/content/dam``."""

    return f"{base_url.rstrip('/')}{ASSETS_API_PREFIX.rstrip('/')}{quote(start_path)}"


def _path_from_url_path(url_path: str) -> str | None:
    if not url_path.startswith(ASSETS_API_PREFIX) or not url_path.endswith(ASSETS_API_SUFFIX):
        return None
    inner = url_path[len(ASSETS_API_PREFIX) : -len(ASSETS_API_SUFFIX)]
    if not inner:
        return None
    return unquote(inner)
