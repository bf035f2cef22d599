from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class FormatOptions:
    """Controls how option sets are rendered as argument strings."""

    acronym_prefix: str = "-"
    long_prefix: str = "--"
    separator: str = " "
    group_acronyms: bool = True


DEFAULT_FORMAT_OPTIONS = FormatOptions()
