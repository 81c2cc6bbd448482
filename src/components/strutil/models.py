"""
Strutil component models.

Holds the mutable text buffer used by the in-place operations, the parse
error, the component configuration and the shell input/output dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# --- Core Types ---


@dataclass
class TextBuffer:
    """
    Mutable holder for a string.

    In-place operations (trim, replace) rebind ``value``; callers keep the
    same buffer object. A buffer is always truthy; check ``value`` for
    emptiness.
    """

    value: str = ""

    def __str__(self) -> str:
        return self.value


class ParseError(ValueError):
    """Raised when text cannot be converted to the requested type."""

    def __init__(self, text: str, target: type, reason: str | None = None) -> None:
        self.text = text
        self.target = target
        message = f"Cannot parse {text!r} as {target.__name__}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


# --- Configuration ---


@dataclass(frozen=True)
class StrutilConfig:
    """Defaults applied by the component shell."""

    ellipsis: str = "..."
    preview_max_length: int = 80
    random_default_length: int = 16
    hex_uppercase: bool = True


DEFAULT_CONFIG = StrutilConfig()


# --- Operation Error ---


@dataclass(frozen=True)
class StrutilOperationError:
    """Error reported by a component entry point."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class SplitInput:
    """
    Input for splitting text.

    mode is one of "literal", "any", "regex", "lines", "lines_clean", "words".
    """

    text: str
    delimiter: str = ""
    mode: str = "literal"
    drop_empty: bool = False


@dataclass(frozen=True)
class JoinInput:
    """Input for joining tokens."""

    tokens: list[Any]
    delimiter: str = ""


@dataclass(frozen=True)
class ReplaceInput:
    """
    Input for replacing occurrences of a target.

    which is one of "first", "last", "all".
    """

    text: str
    target: str
    replacement: str
    which: str = "all"


@dataclass(frozen=True)
class TruncateInput:
    """Input for truncation. None fields fall back to configured defaults."""

    text: str
    max_length: int
    ellipsis: str | None = None


@dataclass(frozen=True)
class PreviewInput:
    """Input for an escaped, truncated preview."""

    text: str | bytes
    max_length: int | None = None
    ellipsis: str | None = None


@dataclass(frozen=True)
class EncodeBytesInput:
    """
    Input for byte encoding.

    encoding is one of "hex", "binary".
    """

    data: bytes | None
    encoding: str = "hex"
    uppercase: bool | None = None


@dataclass(frozen=True)
class ParseInput:
    """Input for parsing text into a primitive value."""

    text: str
    target: type = int


@dataclass(frozen=True)
class RandomStringInput:
    """
    Input for random string generation.

    alphabet is one of "lowercase", "alphanumeric".
    """

    length: int | None = None
    alphabet: str = "alphanumeric"


# --- Output Models ---


@dataclass(frozen=True)
class TextOutput:
    """Output carrying a single string."""

    text: str
    errors: list[StrutilOperationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class TokensOutput:
    """Output carrying a token sequence."""

    tokens: list[str]
    total: int
    errors: list[StrutilOperationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class ReplaceOutput:
    """Output from a replacement."""

    text: str
    replaced: bool
    errors: list[StrutilOperationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class ParseOutput:
    """Output from parsing."""

    value: Any
    errors: list[StrutilOperationError] = field(default_factory=list)
    success: bool = True
