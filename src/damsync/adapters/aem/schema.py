"""Pydantic models describing the Assets API and JCR status payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

LAST_REPLICATION_ACTION_KEY = "cq:lastReplicationAction"


def _none_to_list(value: object) -> object:
    return [] if value is None else value


class AemBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class SirenLink(AemBaseModel):
    rel: list[str]
    href: str

    @field_validator("rel", mode="before")
    @classmethod
    def _single_rel_to_list(cls, value: object) -> object:
        if isinstance(value, str):
            return [value]
        return value


class SirenEntity(AemBaseModel):
    classes: list[str] = Field(default_factory=list, alias="class")
    links: list[SirenLink] = Field(default_factory=list)

    _normalize_lists = field_validator("classes", "links", mode="before")(_none_to_list)


class SirenPage(AemBaseModel):
    """One page of a folder listing.

    The API answers with at most one page worth of entities (20 by default)
    and a ``next`` link when more remain.
    """

    classes: list[str] = Field(default_factory=list, alias="class")
    entities: list[SirenEntity] = Field(default_factory=list)
    links: list[SirenLink] = Field(default_factory=list)

    _normalize_lists = field_validator("classes", "entities", "links", mode="before")(
        _none_to_list
    )


class JcrContentStatus(AemBaseModel):
    last_replication_action: str | None = Field(default=None, alias=LAST_REPLICATION_ACTION_KEY)
