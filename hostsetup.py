#!/usr/bin/env python3
"""Hostsetup - Host Network Diagnostics Tool.

Main entry point for the hostsetup command-line tool.
"""

import argparse
import sys
import threading
import traceback
from pathlib import Path

import config
from commands import find_missing_executables
from config import ExitCode
from display import ProgressBar, confirm_collection, copy_to_clipboard
from export import export_to_json
from host_info import get_os_id
from logging_config import get_logger, setup_logging
from orchestrator import collect_diagnostics
from report import build_report
from tables import load_tables
from utils import sanitize_for_log


def positive_float(value: str) -> float:
    """argparse type for timeouts."""
    try:
        number = float(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"not a number: {value}") from e
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0: {value}")
    return number


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Argument list (default: sys.argv[1:])

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        prog=config.TOOL_NAME,
        description=f"{config.TITLE}: routing, public IP, interfaces and OS commands",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  hostsetup                          # Confirm, collect, print report
  hostsetup -y --copy                # No prompt, copy report to clipboard
  hostsetup --export json            # JSON to stdout
  hostsetup -y --output report.txt   # Report to file
  hostsetup --config probes.json     # Override probe tables

Exit codes:
  0 - Success
  1 - General error
  3 - Collection declined
  4 - Invalid arguments or config file
        """,
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        metavar="PATH",
        help="Write logs to file",
    )

    parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Collect without asking for confirmation",
    )

    parser.add_argument(
        "--config",
        type=Path,
        metavar="PATH",
        help="JSON file overriding the probe tables",
    )

    parser.add_argument(
        "--timeout",
        type=positive_float,
        default=config.TIMEOUT_SECONDS,
        metavar="SECONDS",
        help=f"Network timeout per probe (default: {config.TIMEOUT_SECONDS:g})",
    )

    parser.add_argument(
        "--command-timeout",
        type=positive_float,
        default=config.COMMAND_TIMEOUT_SECONDS,
        metavar="SECONDS",
        help=f"Timeout per command (default: {config.COMMAND_TIMEOUT_SECONDS:g})",
    )

    parser.add_argument(
        "--export",
        choices=["json"],
        metavar="FORMAT",
        help="Export format instead of the text report (json)",
    )

    parser.add_argument(
        "--output",
        type=Path,
        metavar="PATH",
        help="Write report to file instead of stdout",
    )

    parser.add_argument(
        "--copy",
        action="store_true",
        help="Copy the text report to the clipboard",
    )

    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Do not draw the progress bar",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main execution flow.

    Exit codes:
        0: Success
        1: General error
        3: User declined collection
        4: Invalid config file
    """
    args = parse_arguments(argv)

    # Setup logging (must be called before any logger usage)
    setup_logging(
        verbose=args.verbose,
        log_file=args.log_file,
        use_colors=True,
    )

    logger = get_logger(__name__)

    try:
        tables = load_tables(args.config)
    except ValueError as e:
        logger.error("%s", sanitize_for_log(str(e)))
        sys.exit(ExitCode.INVALID_ARGUMENTS)

    plan = tables.plan_for(get_os_id())

    cancel_event = threading.Event()
    progress = None if args.no_progress else ProgressBar()

    try:
        if not args.yes and not confirm_collection(plan):
            logger.info("Collection declined by user")
            sys.exit(ExitCode.USER_DECLINED)

        find_missing_executables(list(plan.commands))

        logger.info("Starting diagnostics collection...")
        try:
            data = collect_diagnostics(
                plan,
                on_progress=progress,
                timeout=args.timeout,
                command_timeout=args.command_timeout,
                cancel_event=cancel_event,
            )
        finally:
            if progress is not None:
                progress.finish()

        report = build_report(data)
        rendered = export_to_json(data) if args.export == "json" else report

        if args.output:
            args.output.write_text(rendered, encoding="utf-8")
            logger.info("Report written to %s", sanitize_for_log(str(args.output)))
        else:
            sys.stdout.write(rendered if rendered.endswith("\n") else rendered + "\n")

        if args.copy:
            copy_to_clipboard(report)

        sys.exit(ExitCode.SUCCESS)

    except KeyboardInterrupt:
        cancel_event.set()
        logger.error("Interrupted by user")
        sys.exit(ExitCode.GENERAL_ERROR)
    except (OSError, ValueError, RuntimeError) as e:
        logger.error("Error during execution: %s", sanitize_for_log(str(e)))
        if args.verbose:
            traceback.print_exc()
        sys.exit(ExitCode.GENERAL_ERROR)


if __name__ == "__main__":
    main()
