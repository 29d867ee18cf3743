"""Exemption rules deciding whether a filename is left untouched.

This module contains no filesystem access — only string predicates.

Rules are evaluated in a fixed order and the first match wins:
  1. Leading or trailing space
  2. Dunder names (``__init__.py``)
  3. Non-ASCII characters anywhere
  4. Hidden files whose remainder is already clean
  5. Extension-only names (``.txt``)
  6. Leading dot runs (``...txt``)
  7. Names that are already dashified
  8. ALL-CAPS conventions (``README.md``)
  9. Semver-style names (``v2.0.1-release.txt``)
 10. Compressed archives with a clean stem (``backup.tar.gz``)
"""

from __future__ import annotations

import re
from collections.abc import Callable

from .options import DashifyOptions

# Characters that force a rewrite when present.
BLACKLISTED_CHARS: frozenset[str] = frozenset(" +,()[]{}'\"@#$%&!")

COMPRESSED_ARCHIVE_SUFFIXES: tuple[str, ...] = (".tar.gz", ".tar.bz2", ".tar.xz")

_CLEAN_RE: re.Pattern[str] = re.compile(r"[a-z0-9._-]*")
_CAMEL_RE: re.Pattern[str] = re.compile(r"[a-z][A-Z]")
_LETTER_DIGIT_RE: re.Pattern[str] = re.compile(r"[A-Za-z][0-9]|[0-9][A-Za-z]")
_DUNDER_RE: re.Pattern[str] = re.compile(r"__[A-Za-z0-9](?:[A-Za-z0-9_]*[A-Za-z0-9])?__")
_ALL_CAPS_RE: re.Pattern[str] = re.compile(r"[A-Z_-]*[A-Z][A-Z_-]*")
_SEMVER_RE: re.Pattern[str] = re.compile(r"v?[0-9]+\.[0-9]+(?:\.[0-9]+)?(?:-[a-z0-9-]+)?\.[a-z]+")
_LOWERCASE_RE: re.Pattern[str] = re.compile(r"[a-z]*")
_UPPERCASE_RE: re.Pattern[str] = re.compile(r"[A-Z]")

Rule = Callable[[str, DashifyOptions], bool]


def is_clean_name(name: str) -> bool:
    """Return ``True`` if *name* holds only ``a-z``, digits, ``-``, ``_`` and ``.``."""
    return _CLEAN_RE.fullmatch(name) is not None


def has_camel_case(name: str) -> bool:
    """Return ``True`` if an uppercase letter directly follows a lowercase one."""
    return _CAMEL_RE.search(name) is not None


def has_letter_number_transition(name: str) -> bool:
    """Return ``True`` if a letter touches a digit, in either order."""
    return _LETTER_DIGIT_RE.search(name) is not None


def _stem(filename: str) -> str:
    """Everything before the first dot."""
    return filename.split(".", 1)[0]


def _has_surrounding_space(filename: str, options: DashifyOptions) -> bool:
    return filename.startswith(" ") or filename.endswith(" ")


def _is_dunder(filename: str, options: DashifyOptions) -> bool:
    return _DUNDER_RE.fullmatch(_stem(filename)) is not None


def _is_non_ascii(filename: str, options: DashifyOptions) -> bool:
    return not filename.isascii()


def _is_clean_hidden_file(filename: str, options: DashifyOptions) -> bool:
    if not filename.startswith(".") or " " in filename:
        return False
    rest = filename[1:]
    return is_clean_name(rest) and not has_camel_case(_stem(rest))


def _is_extension_only(filename: str, options: DashifyOptions) -> bool:
    if not filename.startswith("."):
        return False
    rest = filename[1:]
    return "." not in rest and is_clean_name(rest)


def _is_all_dots(filename: str, options: DashifyOptions) -> bool:
    if not filename.startswith("...") or " " in filename:
        return False
    return _LOWERCASE_RE.fullmatch(filename.replace(".", "")) is not None


def is_already_clean(filename: str, options: DashifyOptions) -> bool:
    """Return ``True`` if *filename* is already lowercase and dash-separated."""
    if _UPPERCASE_RE.search(filename):
        return False

    if options.force_dash and "_" in filename:
        return False

    if "--" in filename or "___" in filename:
        return False

    # A leading dot run (``...txt``) is tolerated.
    if ".." in filename and not filename.startswith(".."):
        return False

    if any(c in BLACKLISTED_CHARS for c in filename):
        return False

    if "-_" in filename or "_-" in filename:
        return False

    return not has_letter_number_transition(_stem(filename))


def _is_all_caps(filename: str, options: DashifyOptions) -> bool:
    return " " not in filename and _ALL_CAPS_RE.fullmatch(_stem(filename)) is not None


def _is_semver_style(filename: str, options: DashifyOptions) -> bool:
    return _SEMVER_RE.fullmatch(filename) is not None


def _is_clean_compressed_archive(filename: str, options: DashifyOptions) -> bool:
    if not filename.endswith(COMPRESSED_ARCHIVE_SUFFIXES):
        return False
    # Drop the two trailing extension segments, e.g. ``.tar`` and ``.gz``.
    name_part = filename.rsplit(".", 2)[0]
    return is_clean_name(name_part)


EXEMPTION_RULES: tuple[tuple[str, Rule], ...] = (
    ("surrounding-space", _has_surrounding_space),
    ("dunder", _is_dunder),
    ("non-ascii", _is_non_ascii),
    ("hidden-clean", _is_clean_hidden_file),
    ("extension-only", _is_extension_only),
    ("all-dots", _is_all_dots),
    ("already-clean", is_already_clean),
    ("all-caps", _is_all_caps),
    ("semver", _is_semver_style),
    ("compressed-archive", _is_clean_compressed_archive),
)


def exemption_reason(filename: str, options: DashifyOptions) -> str | None:
    """Return the name of the first exemption rule matching *filename*, or ``None``."""
    for rule_name, rule in EXEMPTION_RULES:
        if rule(filename, options):
            return rule_name
    return None


def should_leave_alone(filename: str, options: DashifyOptions) -> bool:
    """Return ``True`` if *filename* must be returned unchanged."""
    return exemption_reason(filename, options) is not None
