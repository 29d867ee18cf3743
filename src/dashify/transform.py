"""Pure functions rewriting filenames into lowercase, dash-separated form.

This module contains no filesystem access — only string transformations.

The rewrite pipeline, applied to the name half of a filename:
  1. Strip a leading hidden-file dot (reattached at the end)
  2. Split camelCase / PascalCase and acronym boundaries
  3. Split letter/digit boundaries
  4. Drop square and curly brackets
  5. Replace punctuation with dashes
  6. Turn underscores into dashes (``force_dash`` only)
  7. Collapse separator runs and doubled dots
  8. Trim trailing separators (unless the name already ended in one)
  9. Lowercase
"""

from __future__ import annotations

import re
import string

from .classifier import should_leave_alone
from .options import DEFAULT_OPTIONS, DashifyOptions

# Removed outright, with no replacement.
BRACKET_CHARS: frozenset[str] = frozenset("[]{}")

# Each of these becomes a dash.
DASH_CHARS: frozenset[str] = frozenset(" +,()'\"@#$%&!")

_LOWER: frozenset[str] = frozenset(string.ascii_lowercase)
_UPPER: frozenset[str] = frozenset(string.ascii_uppercase)
_LETTERS: frozenset[str] = frozenset(string.ascii_letters)
_DIGITS: frozenset[str] = frozenset(string.digits)

# Pre-compiled regexes matching any single bracket / dash-replaced character.
_BRACKET_RE: re.Pattern[str] = re.compile("[" + re.escape("".join(sorted(BRACKET_CHARS))) + "]")
_DASH_CHAR_RE: re.Pattern[str] = re.compile("[" + re.escape("".join(sorted(DASH_CHARS))) + "]")

_SEPARATOR_RUN_RE: re.Pattern[str] = re.compile(r"[-_]+")
_DASH_RUN_RE: re.Pattern[str] = re.compile(r"-{2,}")
_UNDERSCORE_RUN_RE: re.Pattern[str] = re.compile(r"_{2,}")


def split_name_and_extension(filename: str) -> tuple[str, str]:
    """Split *filename* at its last dot into ``(name, extension)``.

    A leading dot marks a hidden file and never counts as the extension
    separator: ``.bashrc`` has no extension, ``.Hidden File.txt`` splits
    into ``(".Hidden File", "txt")``.  The extension is ``""`` when there
    is none.
    """
    if filename.startswith("."):
        rest = filename[1:]
        dot_idx = rest.rfind(".")
        if dot_idx == -1:
            return filename, ""
        return "." + rest[:dot_idx], rest[dot_idx + 1 :]

    dot_idx = filename.rfind(".")
    if dot_idx > 0:
        return filename[:dot_idx], filename[dot_idx + 1 :]
    return filename, ""


def split_camel_case(name: str) -> str:
    """Insert dashes at camelCase and acronym-to-word boundaries.

    A lowercase-to-uppercase transition only splits when at least two
    lowercase characters precede it, so ``iPhone`` stays whole while
    ``camelCase`` becomes ``camel-Case``.  An uppercase letter followed by
    a lowercase one after another uppercase letter starts a new word:
    ``XMLParser`` becomes ``XML-Parser``.
    """
    result: list[str] = []
    lowercase_run = 0

    for i, c in enumerate(name):
        if i > 0:
            prev = name[i - 1]
            if prev in _LOWER and c in _UPPER:
                if lowercase_run >= 2:
                    result.append("-")
            elif (
                prev in _UPPER
                and c in _UPPER
                and i + 1 < len(name)
                and name[i + 1] in _LOWER
            ):
                result.append("-")
        result.append(c)
        lowercase_run = lowercase_run + 1 if c in _LOWER else 0

    return "".join(result)


def split_numbers(name: str) -> str:
    """Insert dashes between letters and digits.

    Letter-to-digit and digit-to-letter boundaries both get a dash, so
    ``file123name`` becomes ``file-123-name``.
    """
    result: list[str] = []

    for i, c in enumerate(name):
        if i > 0:
            prev = name[i - 1]
            if (prev in _LETTERS and c in _DIGITS) or (prev in _DIGITS and c in _LETTERS):
                result.append("-")
        result.append(c)

    return "".join(result)


def remove_brackets(name: str) -> str:
    """Drop ``[``, ``]``, ``{`` and ``}``."""
    return _BRACKET_RE.sub("", name)


def replace_punctuation(name: str) -> str:
    """Replace spaces and punctuation such as ``+``, ``,`` and ``(`` with dashes."""
    return _DASH_CHAR_RE.sub("-", name)


def force_dashes(name: str) -> str:
    return name.replace("_", "-")


def collapse_mixed_separators(name: str) -> str:
    """Collapse every run of dashes and underscores into one separator.

    A run containing any dash becomes ``-``; a run of underscores only
    becomes ``_``.
    """
    return _SEPARATOR_RUN_RE.sub(lambda m: "-" if "-" in m.group() else "_", name)


def collapse_dashes(name: str) -> str:
    return _DASH_RUN_RE.sub("-", name)


def collapse_underscores(name: str) -> str:
    return _UNDERSCORE_RUN_RE.sub("_", name)


def collapse_dots(name: str) -> str:
    while ".." in name:
        name = name.replace("..", ".")
    return name


def trim_trailing_separators(name: str) -> str:
    return name.rstrip("-").rstrip("_")


def process_name(name: str, options: DashifyOptions = DEFAULT_OPTIONS) -> str:
    """Run the rewrite pipeline on the name half of a filename.

    Pipeline order:
      1. Strip a leading hidden-file dot
      2. Split camelCase, then letter/digit boundaries
      3. Drop brackets, replace punctuation with dashes
      4. Turn underscores into dashes when ``force_dash`` is set
      5. Collapse mixed separator runs, then dash and underscore runs
      6. Collapse doubled dots
      7. Trim trailing separators, unless the name already ended in one
      8. Lowercase and reattach the hidden-file dot
    """
    prefix = ""
    if name.startswith("."):
        prefix, name = ".", name[1:]

    # A name that already ends in a separator keeps it.
    keep_trailing = name.endswith(("-", "_"))

    processed = split_camel_case(name)
    processed = split_numbers(processed)
    processed = remove_brackets(processed)
    processed = replace_punctuation(processed)

    if options.force_dash:
        processed = force_dashes(processed)

    processed = collapse_mixed_separators(processed)
    processed = collapse_dashes(processed)

    if not options.force_dash:
        processed = collapse_underscores(processed)

    processed = collapse_dots(processed)

    if not keep_trailing:
        processed = trim_trailing_separators(processed)

    return prefix + processed.lower()


def dashify(filename: str, options: DashifyOptions = DEFAULT_OPTIONS) -> str:
    """Return the canonical form of a single filename (not a path).

    Names matched by an exemption rule are returned unchanged.  Otherwise
    the name half is rewritten and the lowercased extension reattached:
    ``camelCaseFileName.TXT`` becomes ``camel-case-file-name.txt``.
    """
    if should_leave_alone(filename, options):
        return filename

    name, ext = split_name_and_extension(filename)
    processed = process_name(name, options)

    if not ext:
        return processed
    return f"{processed}.{ext.lower()}"
