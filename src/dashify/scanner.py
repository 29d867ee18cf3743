"""Filesystem walking and rename plan building.

This module collects the files under the given paths, computes the dashified
name of every file, and produces a plan of rename actions.  Only file names
are rewritten; directories are walked but never renamed.  Name collisions are
detected and reported, never resolved.
"""

from __future__ import annotations

import logging
import os
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from .classifier import exemption_reason
from .options import DEFAULT_OPTIONS, DashifyOptions
from .transform import dashify

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenameAction:
    """A single planned rename operation."""

    source: Path
    destination: Path
    original_name: str
    final_name: str
    issues: tuple[str, ...] = ()


@dataclass
class RenamePlan:
    """Complete rename plan for one or more paths."""

    roots: list[Path] = field(default_factory=list)
    actions: list[RenameAction] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    skipped_symlinks: list[Path] = field(default_factory=list)
    total_entries_scanned: int = 0
    total_renames_needed: int = 0

    @property
    def has_changes(self) -> bool:
        """Return ``True`` if any renames are needed."""
        return self.total_renames_needed > 0


@dataclass(frozen=True)
class RenameResult:
    """Result of executing a single rename action."""

    action: RenameAction
    success: bool
    error_message: str | None = None


def _collect_files(
    path: Path,
    *,
    recursive: bool,
    follow_symlinks: bool,
    plan: RenamePlan,
) -> dict[Path, list[str]]:
    """Group the file names found under *path* by parent directory."""
    files: dict[Path, list[str]] = defaultdict(list)

    if not path.is_dir():
        files[path.parent].append(path.name)
        return files

    for dirpath_str, dirnames, filenames in os.walk(path, followlinks=follow_symlinks):
        dirpath = Path(dirpath_str)

        for fname in sorted(filenames):
            fpath = dirpath / fname
            if fpath.is_symlink() and not follow_symlinks:
                plan.skipped_symlinks.append(fpath)
                continue
            files[dirpath].append(fname)

        if not recursive:
            dirnames[:] = []
        elif not follow_symlinks:
            for dname in dirnames:
                if (dirpath / dname).is_symlink():
                    plan.skipped_symlinks.append(dirpath / dname)
        dirnames.sort()

    return files


def _execution_order(planned: dict[str, str]) -> tuple[list[str], set[str]]:
    """Order the sources of one directory so each file moves out of the way
    before another file is renamed onto its name.

    Every source has exactly one target, so following ``source -> target``
    while the target is itself a planned source gives a chain that must run
    deepest first.  Returns the order and the sources caught in a cycle.
    """
    order: list[str] = []
    done: set[str] = set()
    cyclic: set[str] = set()

    for start in planned:
        chain: list[str] = []
        name = start
        while name in planned and name not in done and name not in chain:
            chain.append(name)
            name = planned[name]
        if name in chain:
            cyclic.update(chain[chain.index(name) :])
        for original in reversed(chain):
            order.append(original)
            done.add(original)

    return order, cyclic


def _plan_directory(
    dirpath: Path,
    names: Iterable[str],
    options: DashifyOptions,
    plan: RenamePlan,
) -> None:
    """Append the actions for the files of one directory to *plan*."""
    planned: dict[str, str] = {}  # original_name -> final_name

    for name in sorted(set(names)):
        plan.total_entries_scanned += 1
        final = dashify(name, options)
        if final == name:
            logger.debug(
                "Unchanged: %s (%s)", dirpath / name, exemption_reason(name, options) or "no exemption"
            )
            continue
        planned[name] = final

    if not planned:
        return

    # Entries staying put (including subdirectories) occupy their names.
    try:
        occupied = {entry.name for entry in dirpath.iterdir()} - planned.keys()
    except OSError:
        occupied = set()

    claimants: dict[str, list[str]] = defaultdict(list)
    for original, final in planned.items():
        claimants[final].append(original)

    order, cyclic = _execution_order(planned)

    for original in order:
        final = planned[original]
        issues: list[str] = []
        others = [o for o in claimants[final] if o != original]
        if others:
            issues.append(f"Name collision: {', '.join(map(repr, others))} also becomes {final!r}")
        if final in occupied:
            issues.append(f"Name collision: {final!r} already exists")
        if original in cyclic:
            issues.append(f"Rename cycle: {final!r} is itself being renamed")
        for issue in issues:
            plan.warnings.append(f"{issue} in {dirpath}")

        logger.debug("Planned: %s -> %s", dirpath / original, final)
        plan.actions.append(
            RenameAction(
                source=dirpath / original,
                destination=dirpath / final,
                original_name=original,
                final_name=final,
                issues=tuple(issues),
            )
        )
        plan.total_renames_needed += 1


def build_rename_plan(
    paths: Iterable[Path | str],
    *,
    options: DashifyOptions = DEFAULT_OPTIONS,
    recursive: bool = False,
    follow_symlinks: bool = False,
) -> RenamePlan:
    """Collect the files under *paths* and build a rename plan.

    Args:
        paths: Files or directories.  A leading ``~`` is expanded.
        options: Options passed to :func:`dashify` for every file name.
        recursive: Descend into subdirectories of directory paths.
        follow_symlinks: Rename symlinked files and descend into symlinked
            directories instead of skipping them.

    Returns:
        A ``RenamePlan`` whose actions rename files within their own parent
        directory.

    Raises:
        ValueError: If a path is neither a file nor a directory.
    """
    plan = RenamePlan()
    by_directory: dict[Path, set[str]] = defaultdict(set)

    for raw in paths:
        path = Path(raw).expanduser()
        if not path.is_file() and not path.is_dir():
            raise ValueError(f"Path is not a file or directory: {path}")
        if path.is_dir():
            path = path.resolve()
        else:
            path = path.parent.resolve() / path.name
        plan.roots.append(path)

        collected = _collect_files(
            path, recursive=recursive, follow_symlinks=follow_symlinks, plan=plan
        )
        for dirpath, names in collected.items():
            by_directory[dirpath].update(names)

    for dirpath in sorted(by_directory):
        _plan_directory(dirpath, by_directory[dirpath], options, plan)

    return plan
