"""Console rendering of reconciliation results."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from collections.abc import Sequence

    from damsync.domain.model import CombinedRecord, DispatchedAction

INVENTORY_COLUMNS = ("path", "activated", "onAuthor", "onPublish")


def format_inventory_table(records: Sequence[CombinedRecord]) -> str:
    rows = [
        (record.path, _flag(record.activated), _flag(record.on_author), _flag(record.on_publish))
        for record in records
    ]
    widths = [
        max([len(header), *(len(row[index]) for row in rows)])
        for index, header in enumerate(INVENTORY_COLUMNS)
    ]
    lines = [
        _render_row(INVENTORY_COLUMNS, widths),
        "  ".join("-" * width for width in widths),
        *(_render_row(row, widths) for row in rows),
    ]
    return "\n".join(lines)


def format_actions(actions: Sequence[DispatchedAction], *, dry_run: bool) -> str:
    if not actions:
        return "No drift found, nothing to do."
    heading = "Actions that would be taken:" if dry_run else "Actions taken:"
    width = max(len(action.action.value) for action in actions)
    lines = [heading]
    lines.extend(
        f"  {action.action.value:<{width}}  {action.path}"
        + (f"  ({action.drift.value})" if action.drift is not None else "")
        for action in actions
    )
    return "\n".join(lines)


@dataclass(slots=True)
class ProgressTicker:
    """Write one marker character per remote call.

    ``a``/``p``: listing page on author/publish, ``d``: status check.
    """

    stream: TextIO = field(default_factory=lambda: sys.stderr)
    written: int = 0

    def __call__(self, marker: str) -> None:
        self.stream.write(marker)
        self.stream.flush()
        self.written += 1

    def finish(self) -> None:
        if self.written:
            self.stream.write("\n")
            self.stream.flush()


def _flag(value: bool) -> str:  # noqa: FBT001
    return "true" if value else "false"


def _render_row(values: Sequence[str], widths: Sequence[int]) -> str:
    cells = (value.ljust(width) for value, width in zip(values, widths, strict=True))
    return "  ".join(cells).rstrip()
