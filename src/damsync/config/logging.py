"""Log output of a reconciliation run."""

from __future__ import annotations

import logging


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Send run progress (traversal, merge, dispatch) to stderr with a clock prefix.

    Per-request lines from httpx only appear at DEBUG. ``--debug`` calls this a
    second time with ``force=True`` once the arguments have been parsed.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    # httpx logs every request at INFO; keep that for --debug only
    httpx_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    logging.getLogger("httpx").setLevel(httpx_level)
