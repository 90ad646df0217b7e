# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from damsync.app import resynch_assets
from damsync.config import (
    DEFAULT_MAX_REQUESTS_PER_SECOND,
    ConfigurationError,
    configure_logging,
    get_aem_config,
    get_resynch_config,
)
from damsync.ui.report import ProgressTicker, format_actions, format_inventory_table

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from damsync.domain.model import CombinedRecord

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Find and fix asset replication drift between author and publish",
    )
    parser.add_argument(
        "--author",
        type=str,
        required=True,
        help="Base URL of the author system, e.g. http://localhost:4502",
    )
    parser.add_argument(
        "--publish",
        type=str,
        required=True,
        help="Base URL of the publish system, e.g. http://localhost:4503",
    )
    parser.add_argument(
        "--path",
        type=str,
        required=True,
        help="Folder below /content/dam where the comparison starts, e.g. /myfolder",
    )
    parser.add_argument(
        "--user",
        type=str,
        help="User with replication privileges (defaults to $AEM_USER)",
    )
    parser.add_argument(
        "--password",
        type=str,
        help="Password of that user (defaults to $AEM_PASSWORD)",
    )
    parser.add_argument(
        "--resynch",
        action="store_true",
        help="Actually send replication commands; without it the run is a dry-run",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=None,
        help="Milliseconds to wait before each activation or deactivation (default: 5000)",
    )
    parser.add_argument(
        "--strict-status",
        action="store_true",
        help="Leave paths whose activation status cannot be read untouched",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Print progress tics: a/p listing on author/publish, d status check on author",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Verbose logging of every request",
    )
    parser.add_argument(
        "--proxy",
        type=str,
        help="Proxy URL to route all requests through, e.g. http://localhost:9999",
    )
    parser.add_argument(
        "--allow-insecure",
        action="store_true",
        help="Skip TLS certificate verification",
    )
    parser.add_argument(
        "--max-requests-per-second",
        type=float,
        default=DEFAULT_MAX_REQUESTS_PER_SECOND,
        help="Upper bound on requests sent to author and publish together (default: 10)",
    )
    return parser.parse_args(list(argv))


def _print_inventory(records: Sequence[CombinedRecord]) -> None:
    print(format_inventory_table(records))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        aem = get_aem_config(
            author_url=parsed_args.author,
            publish_url=parsed_args.publish,
            user=parsed_args.user,
            password=parsed_args.password,
            proxy=parsed_args.proxy,
            allow_insecure=parsed_args.allow_insecure,
            max_requests_per_second=parsed_args.max_requests_per_second,
        )
        settings = get_resynch_config(
            start_path=parsed_args.path,
            dry_run=not parsed_args.resynch,
            delay_ms=parsed_args.delay,
            strict_status=parsed_args.strict_status,
        )
    except ConfigurationError:
        log.exception("CLI validation error")
        sys.exit(2)

    if parsed_args.debug:
        configure_logging(level=logging.DEBUG, force=True)
    ticker = ProgressTicker() if parsed_args.progress and not parsed_args.debug else None

    try:
        report = resynch_assets(
            aem=aem,
            settings=settings,
            tick=ticker,
            on_inventory=_print_inventory,
        )
    except Exception:
        log.exception("Fatal error during resynch")
        sys.exit(1)
    finally:
        if ticker is not None:
            ticker.finish()

    print(format_actions(report.dispatched, dry_run=report.dry_run))
    if report.skipped:
        print(f"Skipped {len(report.skipped)} paths with unknown activation status.")
    log.info("Done")


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
