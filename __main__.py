"""CLI entry point for resume-insights.

This module acts as the central entry point for the project's CLI tools.
It delegates commands to the appropriate submodules or runs specific tasks.
"""

import argparse
import json
import subprocess
import sys
from pathlib import Path

from dotenv import load_dotenv

from resume_insights.config import get_history_file, get_log_level
from resume_insights.core import get_logger, setup_logging
from resume_insights.feedback import parse_feedback
from resume_insights.history import (
    HistoryFormatError,
    ResumeRecord,
    SortKey,
    SortOrder,
    dashboard_stats,
    find_record,
    load_history_file,
    search_records,
    sort_records,
)
from resume_insights.report import build_report

# Load environment variables from .env file
load_dotenv()

logger = get_logger("cli")


def _load_records(path: Path | None) -> list[ResumeRecord]:
    """Load history records from path or the configured history file."""
    history_file = get_history_file(path)
    logger.info(f"Reading history from {history_file}")
    return load_history_file(history_file)


# =============================================================================
# Parse Command
# =============================================================================


def cmd_parse(args: argparse.Namespace) -> int:
    """Handle the parse command."""
    try:
        if args.file:
            text = args.file.read_text(encoding="utf-8")
        else:
            text = sys.stdin.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not read feedback: {e}")
        return 1

    parsed = parse_feedback(text)
    print(json.dumps(parsed.to_display_dict(), indent=2))
    return 0


def handle_parse_command(argv: list[str]) -> int:
    """Handle parse-specific arguments."""
    parser = argparse.ArgumentParser(
        prog="python . parse",
        description="Parse review feedback text into structured sections",
    )
    parser.add_argument(
        "file",
        nargs="?",
        type=Path,
        help="Feedback text file (reads stdin when omitted)",
    )
    args = parser.parse_args(argv)
    return cmd_parse(args)


# =============================================================================
# History Commands
# =============================================================================


def cmd_history(args: argparse.Namespace) -> int:
    """Handle the history listing command."""
    try:
        records = _load_records(args.file)
    except (OSError, RuntimeError, HistoryFormatError) as e:
        logger.error(f"Could not load history: {e}")
        return 1

    if args.search:
        records = search_records(records, args.search)
    records = sort_records(records, args.sort, args.order)

    for record in records:
        score = "N/A" if record.ats_score is None else f"{record.ats_score:g}"
        created = record.created_at.date().isoformat() if record.created_at else "-"
        print(
            f"{record.id}\t{created}\t{score}\t{record.file_name}\t{record.job_role}"
        )

    logger.info(f"{len(records)} record(s)")
    return 0


def handle_history_command(argv: list[str]) -> int:
    """Handle history-specific arguments."""
    parser = argparse.ArgumentParser(
        prog="python . history",
        description="List resumes from a history export",
    )
    parser.add_argument("file", nargs="?", type=Path, help="History JSON file")
    parser.add_argument("--search", "-s", default="", help="Filter by name or role")
    parser.add_argument(
        "--sort",
        choices=[key.value for key in SortKey],
        default=SortKey.DATE.value,
        help="Sort field (default: date)",
    )
    parser.add_argument(
        "--order",
        choices=[order.value for order in SortOrder],
        default=SortOrder.DESC.value,
        help="Sort direction (default: desc)",
    )
    args = parser.parse_args(argv)
    return cmd_history(args)


def cmd_stats(args: argparse.Namespace) -> int:
    """Handle the dashboard stats command."""
    try:
        records = _load_records(args.file)
    except (OSError, RuntimeError, HistoryFormatError) as e:
        logger.error(f"Could not load history: {e}")
        return 1

    stats = dashboard_stats(records, recent_limit=args.recent)
    print(json.dumps(stats.to_dict(), indent=2))
    return 0


def handle_stats_command(argv: list[str]) -> int:
    """Handle stats-specific arguments."""
    parser = argparse.ArgumentParser(
        prog="python . stats",
        description="Show dashboard statistics for a history export",
    )
    parser.add_argument("file", nargs="?", type=Path, help="History JSON file")
    parser.add_argument(
        "--recent",
        type=int,
        default=None,
        help="Number of recent uploads (default: DASHBOARD_RECENT_LIMIT)",
    )
    args = parser.parse_args(argv)
    return cmd_stats(args)


def cmd_report(args: argparse.Namespace) -> int:
    """Handle the report command."""
    try:
        records = _load_records(args.file)
    except (OSError, RuntimeError, HistoryFormatError) as e:
        logger.error(f"Could not load history: {e}")
        return 1

    record = find_record(records, args.id)
    if record is None:
        logger.error(f"Resume not found: {args.id}")
        return 1

    print(json.dumps(build_report(record).to_dict(), indent=2))
    return 0


def handle_report_command(argv: list[str]) -> int:
    """Handle report-specific arguments."""
    parser = argparse.ArgumentParser(
        prog="python . report",
        description="Show the feedback report for one resume",
    )
    parser.add_argument("id", help="Resume record id")
    parser.add_argument("file", nargs="?", type=Path, help="History JSON file")
    args = parser.parse_args(argv)
    return cmd_report(args)


# =============================================================================
# Development Commands
# =============================================================================


def cmd_test(extra_args: list[str]) -> int:
    """Run pytest with provided arguments and test tier options.

    Usage:
        python . dev test                # Run all tests
        python . dev test --unit         # Run only unit tests (fast, no I/O)
        python . dev test --integration  # Run integration tests (files, subprocess)
        python . dev test -k "feedback"  # Run tests matching pattern

    Test Tiers:
        unit        - Fast tests with no I/O or external dependencies
        integration - Tests touching the file system or spawning the CLI
    """
    tier_markers = {
        "--unit": ["-m", "unit"],
        "--integration": ["-m", "integration"],
        "--all": [],
    }

    pytest_args: list[str] = []
    remaining_args: list[str] = []

    for arg in extra_args:
        if arg in tier_markers:
            pytest_args.extend(tier_markers[arg])
        else:
            remaining_args.append(arg)

    cmd = [sys.executable, "-m", "pytest", *pytest_args, *remaining_args]
    logger.info(f"Running: {' '.join(cmd)}")

    try:
        return subprocess.call(cmd)
    except KeyboardInterrupt:
        return 130


def handle_dev_command(argv: list[str]) -> int:
    """Handle development workflow commands."""
    if not argv or argv[0] in ("-h", "--help"):
        print("Usage: python . dev {command} [args]")
        print("\nCommands:")
        print("  test       Run the test suite (--unit, --integration, --all)")
        return 0 if argv else 1

    command, rest = argv[0], argv[1:]
    if command == "test":
        return cmd_test(rest)

    logger.error(f"Unknown dev command: {command}")
    return 1


# =============================================================================
# Main
# =============================================================================


def show_help() -> None:
    """Display CLI help message."""
    print("Usage: python . {command} [args]")
    print("\n=== Feedback ===")
    print("  parse      Parse review feedback text into sections")
    print("\n=== History ===")
    print("  history    List resumes from a history export")
    print("  stats      Dashboard statistics for a history export")
    print("  report     Feedback report for one resume")
    print("\n=== Development ===")
    print("  dev        Development workflows (test)")
    print("\nExamples:")
    print("  python . parse feedback.txt")
    print("  cat feedback.txt | python . parse")
    print("  python . history history.json --sort score --order asc")
    print("  python . stats history.json --recent 5")
    print("  python . report 64f1c2 history.json")
    print("  python . dev test --unit")
    print("\nHISTORY_FILE supplies the default history export path.")


def main() -> int:
    """Main entry point for the CLI."""
    if len(sys.argv) < 2:
        show_help()
        return 1

    command = sys.argv[1]
    rest_args = sys.argv[2:]

    if command in ("-h", "--help"):
        show_help()
        return 0

    commands = {
        "parse": lambda: handle_parse_command(rest_args),
        "history": lambda: handle_history_command(rest_args),
        "stats": lambda: handle_stats_command(rest_args),
        "report": lambda: handle_report_command(rest_args),
    }

    if command == "dev":
        return handle_dev_command(rest_args)

    if command in commands:
        setup_logging(get_log_level())
        return commands[command]()

    logger.error(f"Unknown command: {command}")
    show_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
