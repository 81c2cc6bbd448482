"""
Strutil - string manipulation utilities.

Case conversion, predicates, trimming, replacement, splitting and joining,
truncation, escaping and byte encoding.

Functional Core - pure logic, no I/O.

Mutating operations come in pairs: the in-place function works on a
TextBuffer (or a list of tokens) and the ``_copy`` function clones its
argument and delegates to it.
"""

from __future__ import annotations

import re
import string
from collections.abc import Iterable
from typing import Any

from .adapters.random_source import default_random_source
from .adapters.regex_engine import default_regex_engine
from .models import ParseError, TextBuffer
from .ports import Pattern, RandomSourcePort, RegexEnginePort

# C locale isspace() set
WHITESPACE = " \t\n\r\f\v"

LOWERCASE_SYMBOLS = string.ascii_lowercase
ALPHANUMERIC_SYMBOLS = string.digits + string.ascii_uppercase + string.ascii_lowercase

_ALNUM = frozenset(string.ascii_letters + string.digits)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_WHITESPACE_RUN = re.compile(f"[{re.escape(WHITESPACE)}]+")
_INTEGER = re.compile(r"[+-]?[0-9]+")
_FLOAT_SUFFIXES = "fFlL"

_ESCAPES = {
    0x5C: "\\\\",
    0x0A: "\\n",
    0x0D: "\\r",
    0x09: "\\t",
    0x00: "\\0",
    0x08: "\\b",
    0x0C: "\\f",
    0x0B: "\\v",
}


# --- Case Transforms ---


def to_lower(text: str) -> str:
    """Lowercase ASCII letters; everything else is left as is."""
    return text.translate(_TO_LOWER)


def to_upper(text: str) -> str:
    """Uppercase ASCII letters; everything else is left as is."""
    return text.translate(_TO_UPPER)


def capitalize(text: str) -> str:
    """
    Uppercase the first character and lowercase the rest.

    Example:
        >>> capitalize("heLlo StRUTIL")
        'Hello strutil'
    """
    if not text:
        return text
    return to_upper(text[0]) + to_lower(text[1:])


def capitalize_first_char(text: str) -> str:
    """Lowercase the whole string, then uppercase its first character."""
    result = to_lower(text)
    if not result:
        return result
    return to_upper(result[0]) + result[1:]


# --- Predicates ---


def contains(text: str, needle: str) -> bool:
    """True if needle (substring or character) occurs in text."""
    return needle in text


def compare_ignore_case(first: str, second: str) -> bool:
    """Compare two strings, ignoring ASCII case."""
    return len(first) == len(second) and to_lower(first) == to_lower(second)


def starts_with(text: str, prefix: str) -> bool:
    return text.startswith(prefix)


def ends_with(text: str, suffix: str) -> bool:
    return text.endswith(suffix)


def _check_char(char: str) -> None:
    if len(char) != 1:
        raise ValueError(f"Expected a single character, got {char!r}")


def starts_with_char(text: str, char: str) -> bool:
    """True if the first character of text is char. Never true for ""."""
    _check_char(char)
    return bool(text) and text[0] == char


def ends_with_char(text: str, char: str) -> bool:
    """True if the last character of text is char. Never true for ""."""
    _check_char(char)
    return bool(text) and text[-1] == char


def is_alphanumeric(text: str) -> bool:
    """True if text holds only ASCII letters and digits (or is empty)."""
    return all(c in _ALNUM for c in text)


def matches(
    text: str,
    pattern: Pattern,
    *,
    engine: RegexEnginePort | None = None,
) -> bool:
    """
    Check whether the whole of text matches a regular expression.

    Args:
        text: String to check.
        pattern: Pattern string or compiled pattern.
        engine: Regex engine to use. Defaults to the stdlib engine.

    Returns:
        True on a full match, False otherwise (a partial match is False).
    """
    engine = engine or default_regex_engine
    return engine.fullmatch(pattern, text)


# --- Trimming ---


def trim_left(buffer: TextBuffer) -> None:
    """Remove leading whitespace in place."""
    buffer.value = buffer.value.lstrip(WHITESPACE)


def trim_right(buffer: TextBuffer) -> None:
    """Remove trailing whitespace in place."""
    buffer.value = buffer.value.rstrip(WHITESPACE)


def trim(buffer: TextBuffer) -> None:
    """Remove leading and trailing whitespace in place."""
    trim_left(buffer)
    trim_right(buffer)


def trim_left_copy(text: str) -> str:
    buffer = TextBuffer(text)
    trim_left(buffer)
    return buffer.value


def trim_right_copy(text: str) -> str:
    buffer = TextBuffer(text)
    trim_right(buffer)
    return buffer.value


def trim_copy(text: str) -> str:
    buffer = TextBuffer(text)
    trim(buffer)
    return buffer.value


# --- Replacement ---


def _replace_at(buffer: TextBuffer, start: int, length: int, replacement: str) -> None:
    value = buffer.value
    buffer.value = value[:start] + replacement + value[start + length :]


def replace_first(buffer: TextBuffer, target: str, replacement: str) -> bool:
    """
    Replace the first occurrence of target in place.

    Returns:
        True if a replacement was made. The buffer is untouched on False.
    """
    start = buffer.value.find(target)
    if start == -1:
        return False

    _replace_at(buffer, start, len(target), replacement)
    return True


def replace_last(buffer: TextBuffer, target: str, replacement: str) -> bool:
    """
    Replace the last occurrence of target in place.

    Returns:
        True if a replacement was made. The buffer is untouched on False.
    """
    start = buffer.value.rfind(target)
    if start == -1:
        return False

    _replace_at(buffer, start, len(target), replacement)
    return True


def replace_all(buffer: TextBuffer, target: str, replacement: str) -> bool:
    """
    Replace every non-overlapping occurrence of target in place.

    The scan resumes right after each inserted replacement, so text inside
    a replacement is never matched again.

    Returns:
        True if at least one replacement was made. False, with the buffer
        untouched, if the buffer or target is empty or target is absent.
    """
    if not buffer.value or not target:
        return False

    value = buffer.value
    parts: list[str] = []
    pos = 0
    start = value.find(target)
    if start == -1:
        return False

    while start != -1:
        parts.append(value[pos:start])
        parts.append(replacement)
        pos = start + len(target)
        start = value.find(target, pos)

    parts.append(value[pos:])
    buffer.value = "".join(parts)
    return True


def replace_first_copy(text: str, target: str, replacement: str) -> tuple[str, bool]:
    buffer = TextBuffer(text)
    replaced = replace_first(buffer, target, replacement)
    return buffer.value, replaced


def replace_last_copy(text: str, target: str, replacement: str) -> tuple[str, bool]:
    buffer = TextBuffer(text)
    replaced = replace_last(buffer, target, replacement)
    return buffer.value, replaced


def replace_all_copy(text: str, target: str, replacement: str) -> tuple[str, bool]:
    """
    Copying form of replace_all.

    Example:
        >>> replace_all_copy("$x and $x", "$x", "Y")
        ('Y and Y', True)
    """
    buffer = TextBuffer(text)
    replaced = replace_all(buffer, target, replacement)
    return buffer.value, replaced


# --- Splitting ---


def split(text: str, delimiter: str) -> list[str]:
    """
    Split text on every occurrence of a character or literal substring.

    Always yields one more token than there are delimiter occurrences, so
    leading, trailing and consecutive delimiters produce empty tokens.

    Example:
        >>> split("a;b;;c", ";")
        ['a', 'b', '', 'c']
        >>> split("", ";")
        ['']

    Raises:
        ValueError: If delimiter is empty.
    """
    if not delimiter:
        raise ValueError("Delimiter must not be empty")
    return text.split(delimiter)


def split_lines(text: str) -> list[str]:
    """Split on LF, dropping a CR left at the end of each line."""
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def split_lines_clean(text: str) -> list[str]:
    """Split into lines, trim each one and drop the ones left empty."""
    lines = (trim_copy(line) for line in text.split("\n"))
    return [line for line in lines if line]


def split_words(text: str) -> list[str]:
    """Split on runs of whitespace. Only non-empty words are returned."""
    return [word for word in _WHITESPACE_RUN.split(text) if word]


def split_any(text: str, delimiters: str) -> list[str]:
    """
    Split wherever any of the delimiter characters occurs.

    An empty delimiter set leaves text as the only token.
    """
    tokens: list[str] = []
    start = 0
    for pos, char in enumerate(text):
        if char in delimiters:
            tokens.append(text[start:pos])
            start = pos + 1

    tokens.append(text[start:])
    return tokens


def regex_split(
    text: str,
    pattern: Pattern,
    *,
    engine: RegexEnginePort | None = None,
) -> list[str]:
    """
    Split text using a regular expression as the delimiter.

    The text before each match is a token, even when empty. The text after
    the last match is a token only if it is non-empty. Without any match
    the whole text is the only token. An empty pattern matches at every
    position:

        >>> regex_split("abc;def", "")
        ['', 'a', 'b', 'c', ';', 'd', 'e', 'f']

    Args:
        text: String to split.
        pattern: Delimiter pattern.
        engine: Regex engine to use. Defaults to the stdlib engine.

    Returns:
        List of tokens in left-to-right order.
    """
    engine = engine or default_regex_engine
    tokens: list[str] = []
    pos = 0
    found = False

    for match in engine.finditer(pattern, text):
        found = True
        tokens.append(text[pos : match.start()])
        pos = match.end()

    if not found:
        return [text]

    if pos < len(text):
        tokens.append(text[pos:])
    return tokens


def regex_split_map(
    text: str,
    pattern: Pattern,
    *,
    engine: RegexEnginePort | None = None,
) -> dict[str, str]:
    """
    Map each regex match to the text that follows it, up to the next match.

    Values are not trimmed. A space is appended to text before scanning so
    the value of the last match is never empty. When a key repeats, the
    last value wins. Keys are returned in sorted order.

    Example:
        >>> regex_split_map("[a] x [b] y", r"\\[[^\\]]+\\]")
        {'[a]': ' x ', '[b]': ' y '}
    """
    engine = engine or default_regex_engine
    padded = text + " "
    found = list(engine.finditer(pattern, padded))

    result: dict[str, str] = {}
    for index, match in enumerate(found):
        end = found[index + 1].start() if index + 1 < len(found) else len(padded)
        result[match.group(0)] = padded[match.end() : end]

    return dict(sorted(result.items()))


# --- Joining ---


def _render_token(token: Any) -> str:
    if isinstance(token, str):
        return token
    if isinstance(token, (bool, int, float)):
        return to_string(token)
    return str(token)


def join(tokens: Iterable[Any], delimiter: str) -> str:
    """
    Join tokens with delimiter between consecutive elements.

    Non-string tokens are rendered with to_string; iterating bytes yields
    ints, so byte values come out in decimal. Only a top-level bytes
    argument gets that treatment: a bytes element inside a list is not
    iterated and renders through str(), as in "b'ab'".

    Example:
        >>> join(["Col1", "Col2"], ";")
        'Col1;Col2'
        >>> join(bytes([1, 2, 42]), "|")
        '1|2|42'
    """
    return delimiter.join(_render_token(token) for token in tokens)


# --- Token Lists ---


def drop_empty(tokens: list[str]) -> None:
    """Remove empty tokens in place, keeping order."""
    tokens[:] = [token for token in tokens if token != ""]


def drop_empty_copy(tokens: Iterable[str]) -> list[str]:
    result = list(tokens)
    drop_empty(result)
    return result


def drop_duplicate(tokens: list[str]) -> None:
    """
    Remove duplicate tokens in place.

    The result is sorted; original order is not kept.
    """
    tokens[:] = sorted(set(tokens))


def drop_duplicate_copy(tokens: Iterable[str]) -> list[str]:
    result = list(tokens)
    drop_duplicate(result)
    return result


def sorting_ascending(tokens: list[str]) -> None:
    tokens.sort()


def sorting_descending(tokens: list[str]) -> None:
    tokens.sort(reverse=True)


def reverse_inplace(tokens: list[Any]) -> None:
    tokens.reverse()


def reverse_copy(tokens: Iterable[Any]) -> list[Any]:
    result = list(tokens)
    reverse_inplace(result)
    return result


# --- Generation ---


def repeat(unit: str, count: int) -> str:
    """Repeat a string or character count times."""
    if count < 0:
        raise ValueError(f"Repeat count must be non-negative, got {count}")
    return unit * count


def _random_string(symbols: str, size: int, source: RandomSourcePort | None) -> str:
    if size < 0:
        raise ValueError(f"Size must be non-negative, got {size}")
    source = source or default_random_source
    return "".join(source.choices(symbols, k=size))


def random_lowercase_string(size: int, *, source: RandomSourcePort | None = None) -> str:
    """Random string of lowercase latin letters."""
    return _random_string(LOWERCASE_SYMBOLS, size, source)


def random_alphanumeric_string(size: int, *, source: RandomSourcePort | None = None) -> str:
    """Random string of digits and upper/lowercase latin letters."""
    return _random_string(ALPHANUMERIC_SYMBOLS, size, source)


random_string = random_alphanumeric_string


# --- Truncation & Escaping ---


def truncate(text: str, max_length: int, ellipsis: str = "...") -> str:
    """
    Shorten text to at most max_length characters.

    If text is cut, ellipsis is appended within the limit. When the limit
    leaves no room for any source text, a prefix of ellipsis is returned.

    Example:
        >>> truncate("hello world", 5)
        'he...'
        >>> truncate("hello", 2)
        '..'

    Raises:
        ValueError: If max_length is negative.
    """
    if max_length < 0:
        raise ValueError(f"max_length must be non-negative, got {max_length}")

    if len(text) <= max_length:
        return text

    if max_length <= len(ellipsis):
        return ellipsis[:max_length]

    return text[: max_length - len(ellipsis)] + ellipsis


def escape_non_printable(data: str | bytes) -> str:
    """
    Escape non-printable bytes.

    Text is encoded as UTF-8 first. Backslash and the common control
    characters get two-character escapes, other bytes outside printable
    ASCII get a \\xHH escape.
    """
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)

    parts: list[str] = []
    for byte in raw:
        escape = _ESCAPES.get(byte)
        if escape is not None:
            parts.append(escape)
        elif 0x20 <= byte < 0x7F:
            parts.append(chr(byte))
        else:
            parts.append(f"\\x{byte:02x}")
    return "".join(parts)


def preview(data: str | bytes, max_length: int, ellipsis: str = "...") -> str:
    """
    Escape non-printable bytes, then truncate the escaped text.

    The length limit applies to the escaped form.

    Example:
        >>> preview("A\\0B", 100)
        'A\\\\0B'
    """
    return truncate(escape_non_printable(data), max_length, ellipsis)


# --- Byte Encoding ---


def to_hex_string(data: bytes | bytearray | memoryview | None, uppercase: bool = True) -> str:
    """Two hex digits per byte, no separators."""
    if not data:
        return ""
    hex_string = bytes(data).hex()
    return hex_string.upper() if uppercase else hex_string


def to_binary_string(data: bytes | bytearray | memoryview | None) -> str:
    """Eight binary digits per byte, most significant bit first."""
    if not data:
        return ""
    return "".join(f"{byte:08b}" for byte in bytes(data))


# --- Conversion ---


def to_string(value: bool | int | float | str) -> str:
    """
    Render a primitive value as text.

    bool renders as "1"/"0", int in decimal, float in its shortest
    round-trip form and str as itself.

    Raises:
        TypeError: For any other type.
    """
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, str):
        return value
    raise TypeError(f"Unsupported type for to_string: {type(value).__name__}")


def _parse_float(text: str, stripped: str) -> float:
    try:
        return float(stripped)
    except ValueError:
        pass

    # C float literal suffix, as in "5.245f"
    if len(stripped) > 1 and stripped[-1] in _FLOAT_SUFFIXES:
        try:
            return float(stripped[:-1])
        except ValueError as e:
            raise ParseError(text, float) from e

    raise ParseError(text, float)


def parse_string(text: str, target: type = int) -> Any:
    """
    Parse text into a value of the target type.

    Surrounding whitespace is ignored.

    Args:
        text: Text to parse.
        target: One of int, float, bool or str.

    Returns:
        int for decimal integers, float for Python float syntax (a trailing
        f/F/l/L suffix is accepted, and so are Python-only spellings such
        as "1_000", "infinity" and "nan"), bool for "1"/"0", and the first
        non-whitespace character for str.

    Raises:
        ParseError: If text is not valid for target.
        TypeError: If target is not supported.
    """
    stripped = trim_copy(text)

    if target is bool:
        if stripped == "1":
            return True
        if stripped == "0":
            return False
        raise ParseError(text, bool, "expected '1' or '0'")

    if target is int:
        if not _INTEGER.fullmatch(stripped):
            raise ParseError(text, int)
        return int(stripped)

    if target is float:
        return _parse_float(text, stripped)

    if target is str:
        if not stripped:
            raise ParseError(text, str, "no character")
        return stripped[0]

    raise TypeError(f"Unsupported parse target: {getattr(target, '__name__', target)!r}")
