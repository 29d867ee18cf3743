"""Tests for the classifier module — exemption rules and predicates."""

from __future__ import annotations

import pytest

from dashify.classifier import (
    EXEMPTION_RULES,
    exemption_reason,
    has_camel_case,
    has_letter_number_transition,
    is_already_clean,
    is_clean_name,
    should_leave_alone,
)
from dashify.options import DashifyOptions
from dashify.transform import dashify

DEFAULT = DashifyOptions()
FORCE = DashifyOptions(force_dash=True)

# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


class TestIsCleanName:
    def test_empty_is_clean(self) -> None:
        assert is_clean_name("")

    def test_lowercase_with_separators(self) -> None:
        assert is_clean_name("some-file_name.v2.txt")

    def test_uppercase(self) -> None:
        assert not is_clean_name("File.txt")

    def test_space(self) -> None:
        assert not is_clean_name("file name")

    def test_punctuation(self) -> None:
        assert not is_clean_name("file+name")


class TestHasCamelCase:
    def test_camel(self) -> None:
        assert has_camel_case("camelCase")

    def test_pascal_word(self) -> None:
        assert not has_camel_case("Pascal")

    def test_all_caps(self) -> None:
        assert not has_camel_case("README")


class TestHasLetterNumberTransition:
    def test_letter_digit(self) -> None:
        assert has_letter_number_transition("v2")

    def test_digit_letter(self) -> None:
        assert has_letter_number_transition("2d")

    def test_separated(self) -> None:
        assert not has_letter_number_transition("v-2_d")


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


class TestExemptionRules:
    def test_rule_order(self) -> None:
        names = [name for name, _ in EXEMPTION_RULES]
        assert names == [
            "surrounding-space",
            "dunder",
            "non-ascii",
            "hidden-clean",
            "extension-only",
            "all-dots",
            "already-clean",
            "all-caps",
            "semver",
            "compressed-archive",
        ]

    @pytest.mark.parametrize(
        ("filename", "rule"),
        [
            (" file.txt", "surrounding-space"),
            ("file.txt ", "surrounding-space"),
            (" .txt", "surrounding-space"),
            ("__init__.py", "dunder"),
            ("__anything__.py", "dunder"),
            ("__Main__", "dunder"),
            ("café.txt", "non-ascii"),
            ("naïve.txt", "non-ascii"),
            ("日本語.txt", "non-ascii"),
            ("Über-Datei.txt", "non-ascii"),
            (".hidden_file", "hidden-clean"),
            (".txt", "hidden-clean"),
            ("...txt", "hidden-clean"),
            ("already-dashified.txt", "already-clean"),
            ("no_extension", "already-clean"),
            ("file.tar.gz", "already-clean"),
            ("a.txt", "already-clean"),
            ("-.txt", "already-clean"),
            ("README.md", "all-caps"),
            ("CHANGELOG.md", "all-caps"),
            ("CODE_OF-CONDUCT", "all-caps"),
            ("v2.0.1-release.txt", "semver"),
            ("1.2.txt", "already-clean"),
            ("10.4.2.md", "already-clean"),
            ("v1.2.md", "semver"),
            ("backup2024.tar.xz", "compressed-archive"),
        ],
    )
    def test_first_matching_rule(self, filename: str, rule: str) -> None:
        assert exemption_reason(filename, DEFAULT) == rule

    @pytest.mark.parametrize(
        "filename",
        [
            "camelCaseFileName.txt",
            "file name.txt",
            "file--name.txt",
            "file___name.txt",
            "file..name.txt",
            "file-_name.txt",
            "file123.txt",
            "File.txt",
            ".Hidden File.txt",
            "___file___.txt",
            "_____.py",
            "v2.0.1-Release.txt",
            "Backup.tar.gz",
            "!!!",
        ],
    )
    def test_not_exempt(self, filename: str) -> None:
        assert exemption_reason(filename, DEFAULT) is None
        assert not should_leave_alone(filename, DEFAULT)

    def test_dunder_requires_word_interior(self) -> None:
        is_dunder = dict(EXEMPTION_RULES)["dunder"]
        assert not is_dunder("___init__.py", DEFAULT)
        assert not is_dunder("__init___.py", DEFAULT)
        assert not is_dunder("__in-it__.py", DEFAULT)
        assert not is_dunder("____", DEFAULT)

    def test_hidden_file_with_camel_case_is_rewritten(self) -> None:
        assert exemption_reason(".camelCase", DEFAULT) is None

    def test_all_dots_rule(self) -> None:
        # Only reached when the hidden-file rules do not match first.
        rules = dict(EXEMPTION_RULES)
        assert rules["all-dots"]("...txt", DEFAULT)
        assert rules["all-dots"]("....", DEFAULT)
        assert not rules["all-dots"]("...Txt", DEFAULT)
        assert not rules["all-dots"]("..txt", DEFAULT)

    def test_leading_dot_run_tolerated_by_already_clean(self) -> None:
        assert is_already_clean("..a..b", DEFAULT)
        assert not is_already_clean("a..b", DEFAULT)


class TestForceDash:
    def test_underscore_no_longer_clean(self) -> None:
        assert should_leave_alone("file_name.txt", DEFAULT)
        assert not should_leave_alone("file_name.txt", FORCE)

    def test_dashes_still_clean(self) -> None:
        assert should_leave_alone("file-name.txt", FORCE)

    def test_hidden_file_with_underscore_still_exempt(self) -> None:
        assert should_leave_alone(".hidden_file", FORCE)


# ---------------------------------------------------------------------------
# Exempt names come back unchanged from dashify
# ---------------------------------------------------------------------------


class TestExemptNamesUnchanged:
    @pytest.mark.parametrize(
        "filename",
        [
            "__init__.py",
            "README.md",
            "v2.0.1-release.txt",
            "café.txt",
            "...txt",
            "file.tar.gz",
            " file.txt",
            "file.txt ",
            ".hidden_file",
            ".txt",
            "no_extension",
            "FILE.TXT",
        ],
    )
    def test_unchanged(self, filename: str) -> None:
        assert dashify(filename) == filename
