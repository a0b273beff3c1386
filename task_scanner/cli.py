"""
CLI interface for task_scanner.

Provides the command-line interface for scanning files for open tasks.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

from task_scanner import __version__
from task_scanner.config import (
    DEFAULT_CONFIG,
    get_config_template,
    get_exclude_patterns,
    load_config,
)
from task_scanner.model import Priority
from task_scanner.scanners import TaskScanner, WorkspaceScanner

if TYPE_CHECKING:
    from typing import Any

    from task_scanner.container import AnnotationContainer

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_TASKS_FOUND = 2


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="task-scanner",
        description="Find open tasks (FIXME, TODO, ...) in source files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  task-scanner .                              # FIXME=high, TODO=normal
  task-scanner src -o tasks.json              # Write the report to a file
  task-scanner . --low "XXX, NOTE" --summary  # Add low priority tags
  task-scanner . --pattern "**/*.py" --fail-on high

Tags are case-sensitive and matched as whole words. Passing any of
--high/--normal/--low replaces the configured value for that priority;
an empty value ("") disables it.
        """,
    )

    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="File or directory to scan (default: current directory)",
    )
    parser.add_argument(
        "-o", "--output",
        help="Output file (default: stdout)",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Only output counts",
    )
    parser.add_argument(
        "--fail-on",
        metavar="PRIORITY",
        help="Exit with status 2 if a task of this priority or higher is found",
    )

    tags_group = parser.add_argument_group("Task Tags")
    tags_group.add_argument(
        "--high",
        metavar="TAGS",
        help="Comma-separated tags for high priority tasks (default: FIXME)",
    )
    tags_group.add_argument(
        "--normal",
        metavar="TAGS",
        help="Comma-separated tags for normal priority tasks (default: TODO)",
    )
    tags_group.add_argument(
        "--low",
        metavar="TAGS",
        help="Comma-separated tags for low priority tasks (default: none)",
    )

    files_group = parser.add_argument_group("Files")
    files_group.add_argument(
        "--pattern",
        nargs="+",
        metavar="GLOB",
        help="Glob patterns of files to scan (default: **/*)",
    )
    files_group.add_argument(
        "--exclude",
        nargs="+",
        help="Additional patterns to exclude",
    )

    config_group = parser.add_argument_group("Configuration")
    config_group.add_argument(
        "--config",
        metavar="FILE",
        help="Load config from YAML file",
    )
    config_group.add_argument(
        "--init-config",
        action="store_true",
        help="Print a starter config file and exit",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def apply_tag_overrides(config: dict[str, Any], args: argparse.Namespace) -> dict[str, Any]:
    """
    Replace configured tiers with the ones given on the command line.

    Args:
        config: Loaded configuration.
        args: Parsed arguments.

    Returns:
        Configuration with the overridden "tasks" section.
    """
    tasks = dict(config.get("tasks", DEFAULT_CONFIG["tasks"]))
    for tier in ("high", "normal", "low"):
        value = getattr(args, tier)
        if value is not None:
            tasks[tier] = value
    return {**config, "tasks": tasks}


def build_report(
    root: Path,
    container: AnnotationContainer,
    workspace: WorkspaceScanner,
    summary_only: bool = False,
) -> dict[str, Any]:
    """
    Build the JSON report for a scan.

    Args:
        root: Scanned path.
        container: Tasks found.
        workspace: Scanner that produced the container (for file counts).
        summary_only: Leave out per-file counts and the task list.

    Returns:
        Report dictionary.
    """
    report: dict[str, Any] = {
        "meta": {
            "root": str(root),
            "scanned_at": datetime.now(timezone.utc).isoformat(),
            "version": __version__,
            "files_scanned": workspace.files_scanned,
            "files_skipped": workspace.files_skipped,
        },
        "summary": container.to_dict(),
    }
    if summary_only:
        return report

    report["files"] = {
        name: child.to_dict() for name, child in container.files().items()
    }
    report["tasks"] = [task.to_dict() for task in container]
    return report


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    # Handle --init-config: just output the template and exit
    if args.init_config:
        print(get_config_template())
        return EXIT_OK

    fail_on = None
    if args.fail_on:
        try:
            fail_on = Priority.from_string(args.fail_on)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_ERROR

    # Load config if specified
    config = DEFAULT_CONFIG
    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: Config file '{config_path}' does not exist", file=sys.stderr)
            return EXIT_ERROR
        try:
            config = load_config(config_path)
        except (OSError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_ERROR
        logger.debug("Loaded config: %s", config_path)

    root = Path(args.path)
    if not root.exists():
        print(f"Error: Path '{root}' does not exist", file=sys.stderr)
        return EXIT_ERROR

    config = apply_tag_overrides(config, args)
    task_scanner = TaskScanner.from_config(config)
    if not task_scanner.has_tags():
        logger.warning("No task tags configured, nothing to find")

    workspace = WorkspaceScanner(
        task_scanner=task_scanner,
        patterns=args.pattern or config.get("files", {}).get("patterns"),
        exclude=get_exclude_patterns(config, args.exclude),
    )
    container = workspace.scan(root)
    report = build_report(root, container, workspace, summary_only=args.summary)

    output = json.dumps(report, indent=2)
    if args.output:
        try:
            Path(args.output).write_text(output + "\n", encoding="utf-8")
        except OSError as e:
            print(f"Error: Could not write '{args.output}': {e}", file=sys.stderr)
            return EXIT_ERROR
        print(f"Wrote {len(container)} task(s) to {args.output}", file=sys.stderr)
    else:
        print(output)

    if fail_on is not None:
        for priority in Priority.ordered():
            if priority.is_at_least(fail_on) and container.has_annotations(priority):
                return EXIT_TASKS_FOUND
    return EXIT_OK
