"""Options recognised by the dashify engine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DashifyOptions:
    """Switches controlling how names are rewritten.

    When *force_dash* is ``True``, underscores are treated as dashes
    throughout the rewrite pipeline instead of being kept as a separate
    separator.
    """

    force_dash: bool = False


DEFAULT_OPTIONS: DashifyOptions = DashifyOptions()
