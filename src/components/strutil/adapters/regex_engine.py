"""
Regex engine adapter backed by the standard library ``re`` module.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from functools import lru_cache

from ..ports import Pattern


@lru_cache(maxsize=256)
def _compile(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern)


class StdlibRegexEngine:
    """Adapter for Python's ``re`` engine. Compiled patterns are cached."""

    def _pattern(self, pattern: Pattern) -> re.Pattern[str]:
        if isinstance(pattern, re.Pattern):
            return pattern
        return _compile(pattern)

    def finditer(self, pattern: Pattern, text: str) -> Iterator[re.Match[str]]:
        """Iterate over all non-overlapping matches, left to right."""
        return self._pattern(pattern).finditer(text)

    def fullmatch(self, pattern: Pattern, text: str) -> bool:
        """Return True if the whole of text matches pattern."""
        return self._pattern(pattern).fullmatch(text) is not None


default_regex_engine = StdlibRegexEngine()
