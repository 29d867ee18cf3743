__all__ = (  # noqa: F405
    "main",
    "dashify",
    "DashifyOptions",
    "DEFAULT_OPTIONS",
    "should_leave_alone",
    "exemption_reason",
    "is_clean_name",
    "is_already_clean",
    "has_camel_case",
    "has_letter_number_transition",
    "EXEMPTION_RULES",
    "BLACKLISTED_CHARS",
    "COMPRESSED_ARCHIVE_SUFFIXES",
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
    "RenameAction",
    "RenamePlan",
    "RenameResult",
    "build_rename_plan",
    "execute_plan",
    "format_plan_summary",
    "generate_log_filename",
    "write_rename_log",
)

from .public_api import *  # noqa: F403
