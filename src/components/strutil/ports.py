"""
Strutil component port definitions.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from typing import Protocol

Pattern = str | re.Pattern[str]


class RegexEnginePort(Protocol):
    """Port for the regular expression engine used by the regex operations."""

    def finditer(self, pattern: Pattern, text: str) -> Iterator[re.Match[str]]:
        """Iterate over all non-overlapping matches, left to right."""
        ...

    def fullmatch(self, pattern: Pattern, text: str) -> bool:
        """Return True if the whole of text matches pattern."""
        ...


class RandomSourcePort(Protocol):
    """Port for the random source used by the random string generators."""

    def choices(self, population: Sequence[str], k: int) -> list[str]:
        """Draw k elements uniformly, with replacement."""
        ...


class RulesPort(Protocol):
    """Port for accessing strutil rules configuration."""

    def get_ellipsis(self) -> str:
        """Get the default truncation ellipsis."""
        ...

    def get_preview_max_length(self) -> int:
        """Get the default preview length."""
        ...

    def get_random_default_length(self) -> int:
        """Get the default random string length."""
        ...

    def get_hex_uppercase(self) -> bool:
        """Get whether hex output is uppercase by default."""
        ...
