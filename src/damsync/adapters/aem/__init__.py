"""Adapter for the AEM Assets HTTP API and replication servlet."""

from __future__ import annotations

from .client import AemClient
from .schema import JcrContentStatus, SirenEntity, SirenLink, SirenPage
from .translator import translate_entity, translate_page

__all__ = [
    "AemClient",
    "JcrContentStatus",
    "SirenEntity",
    "SirenLink",
    "SirenPage",
    "translate_entity",
    "translate_page",
]
