"""
Rules adapter for the strutil component.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.rules.models import Rules


class RulesAdapter:
    """Implements RulesPort over a validated Rules model."""

    def __init__(self, rules: Rules) -> None:
        self._text = rules.text

    def get_ellipsis(self) -> str:
        return self._text.truncation.ellipsis

    def get_preview_max_length(self) -> int:
        return self._text.truncation.preview_max_length

    def get_random_default_length(self) -> int:
        return self._text.random.default_length

    def get_hex_uppercase(self) -> bool:
        return self._text.hex.uppercase
