"""Command-line interface and main entry point for dashify."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .options import DashifyOptions
from .renamer import execute_plan, format_plan_summary
from .scanner import build_rename_plan


def create_parser() -> argparse.ArgumentParser:
    """Create and return the argument parser."""

    parser = argparse.ArgumentParser(
        prog="dashify",
        description=(
            "Lowercase file names and replace spaces and other characters with "
            "dashes. CamelCase and letter/number boundaries are split, "
            "extensions are lowercased, and conventional names such as "
            "README.md or __init__.py are left alone."
        ),
    )
    parser.add_argument(
        "paths",
        metavar="PATH",
        nargs="*",
        type=Path,
        default=[Path(".")],
        help="Files or directories to process (default: current directory).",
    )
    parser.add_argument(
        "--recursive",
        "-r",
        action="store_true",
        default=False,
        help="Descend into subdirectories. Directory names themselves are never renamed.",
    )
    parser.add_argument(
        "--force-dash",
        "-f",
        action="store_true",
        default=False,
        help="Treat underscores as dashes instead of keeping them.",
    )
    parser.add_argument(
        "--dry-run",
        "-n",
        action="store_true",
        default=False,
        help="Only show what would be renamed.",
    )
    parser.add_argument(
        "--follow-symlinks",
        action="store_true",
        default=False,
        help="Follow symbolic links. By default, symlinks are reported but not renamed.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Write a JSON log of the performed renames to this path.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=False,
        help="Show detailed information about each rename.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to ``sys.argv[1:]``).

    Returns:
        Exit code: 0 on success, 1 on error.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    # Extract typed values from argparse namespace.
    paths: list[Path] = args.paths
    recursive: bool = args.recursive
    force_dash: bool = args.force_dash
    dry_run: bool = args.dry_run
    follow_symlinks: bool = args.follow_symlinks
    log_file: Path | None = args.log_file
    verbose: bool = args.verbose

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    # Validate paths.
    for path in paths:
        expanded = path.expanduser()
        if not expanded.is_file() and not expanded.is_dir():
            print(f"Error: '{path}' is not a file or directory.", file=sys.stderr)
            return 1

    plan = build_rename_plan(
        paths,
        options=DashifyOptions(force_dash=force_dash),
        recursive=recursive,
        follow_symlinks=follow_symlinks,
    )

    if dry_run or verbose:
        print(format_plan_summary(plan, verbose=verbose))

    if not plan.has_changes:
        if dry_run or verbose:
            print("\nNo renames needed. All file names are already dashified.")
        return 0

    if dry_run:
        print("\nDry-run mode. Nothing was renamed.")
        return 0

    results = execute_plan(plan, log_file=log_file)

    failures = [r for r in results if not r.success]
    for r in failures:
        print(f"Error: {r.action.source} -> {r.error_message}", file=sys.stderr)

    if verbose:
        print(f"\nDone: {len(results) - len(failures)} renamed, {len(failures)} errors.")
    if log_file is not None:
        print(f"Log written to: {log_file}")

    return 1 if failures else 0
