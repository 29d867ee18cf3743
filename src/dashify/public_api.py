"""Public API — re-exports all public symbols from the package.

The package ``__init__.py`` re-exports everything from here via
``from .public_api import *``.  The Textual TUI lives in ``dashify.tui``
and is only importable with the 'tui' extra installed.
"""

from __future__ import annotations

# CLI entry point
from .cli import main

# Classifier — exemption rules and predicates
from .classifier import (
    BLACKLISTED_CHARS,
    COMPRESSED_ARCHIVE_SUFFIXES,
    EXEMPTION_RULES,
    exemption_reason,
    has_camel_case,
    has_letter_number_transition,
    is_already_clean,
    is_clean_name,
    should_leave_alone,
)

# Options
from .options import DEFAULT_OPTIONS, DashifyOptions

# Renamer — plan execution and logging
from .renamer import (
    execute_plan,
    format_plan_summary,
    generate_log_filename,
    write_rename_log,
)

# Scanner — filesystem walking and data classes
from .scanner import (
    RenameAction,
    RenamePlan,
    RenameResult,
    build_rename_plan,
)

# Transform — splitter, rewrite stages and the entry point
from .transform import (
    BRACKET_CHARS,
    DASH_CHARS,
    collapse_dashes,
    collapse_dots,
    collapse_mixed_separators,
    collapse_underscores,
    dashify,
    force_dashes,
    process_name,
    remove_brackets,
    replace_punctuation,
    split_camel_case,
    split_name_and_extension,
    split_numbers,
    trim_trailing_separators,
)

__all__ = [
    # CLI
    "main",
    # Engine
    "dashify",
    "DashifyOptions",
    "DEFAULT_OPTIONS",
    # Classifier
    "should_leave_alone",
    "exemption_reason",
    "is_clean_name",
    "is_already_clean",
    "has_camel_case",
    "has_letter_number_transition",
    "EXEMPTION_RULES",
    "BLACKLISTED_CHARS",
    "COMPRESSED_ARCHIVE_SUFFIXES",
    # Transform
    "split_name_and_extension",
    "process_name",
    "split_camel_case",
    "split_numbers",
    "remove_brackets",
    "replace_punctuation",
    "force_dashes",
    "collapse_mixed_separators",
    "collapse_dashes",
    "collapse_underscores",
    "collapse_dots",
    "trim_trailing_separators",
    "BRACKET_CHARS",
    "DASH_CHARS",
    # Scanner
    "RenameAction",
    "RenamePlan",
    "RenameResult",
    "build_rename_plan",
    # Renamer
    "execute_plan",
    "format_plan_summary",
    "generate_log_filename",
    "write_rename_log",
]

if __name__ == "__main__":
    raise SystemExit(main())
