"""
Strutil component - String utilities behind input/output models.

Shell Layer - applies configured defaults, converts errors to outputs
and logs.

Entry points never raise for bad data; failures come back as
StrutilOperationError entries with success=False.
"""

from __future__ import annotations

import logging
import re

from . import _impl
from .models import (
    DEFAULT_CONFIG,
    EncodeBytesInput,
    JoinInput,
    ParseError,
    ParseInput,
    ParseOutput,
    PreviewInput,
    RandomStringInput,
    ReplaceInput,
    ReplaceOutput,
    SplitInput,
    StrutilConfig,
    StrutilOperationError,
    TextBuffer,
    TextOutput,
    TokensOutput,
    TruncateInput,
)
from .ports import RandomSourcePort, RegexEnginePort, RulesPort

logger = logging.getLogger(__name__)

SPLIT_MODES = ("literal", "any", "regex", "lines", "lines_clean", "words")
REPLACE_MODES = ("first", "last", "all")
ENCODINGS = ("hex", "binary")
ALPHABETS = ("lowercase", "alphanumeric")


def _build_config(rules: RulesPort | None) -> StrutilConfig:
    """Build strutil config from rules port."""
    if rules is None:
        return DEFAULT_CONFIG

    return StrutilConfig(
        ellipsis=rules.get_ellipsis(),
        preview_max_length=rules.get_preview_max_length(),
        random_default_length=rules.get_random_default_length(),
        hex_uppercase=rules.get_hex_uppercase(),
    )


def _error(code: str, message: str, field: str | None = None) -> list[StrutilOperationError]:
    return [StrutilOperationError(code=code, message=message, field=field)]


# --- Component Entry Points ---


def run_split(
    inp: SplitInput,
    *,
    engine: RegexEnginePort | None = None,
) -> TokensOutput:
    """
    Split text according to the requested mode.

    Args:
        inp: Text, delimiter and mode.
        engine: Regex engine for "regex" mode.

    Returns:
        TokensOutput with the tokens, empty ones removed if drop_empty is set.
    """
    logger.debug("split mode=%s delimiter=%r", inp.mode, inp.delimiter)

    if inp.mode == "literal":
        if not inp.delimiter:
            return TokensOutput(
                tokens=[],
                total=0,
                errors=_error("delimiter_required", "Delimiter is required", "delimiter"),
                success=False,
            )
        tokens = _impl.split(inp.text, inp.delimiter)
    elif inp.mode == "any":
        tokens = _impl.split_any(inp.text, inp.delimiter)
    elif inp.mode == "regex":
        try:
            tokens = _impl.regex_split(inp.text, inp.delimiter, engine=engine)
        except re.error as e:
            return TokensOutput(
                tokens=[],
                total=0,
                errors=_error("pattern_invalid", f"Invalid pattern: {e}", "delimiter"),
                success=False,
            )
    elif inp.mode == "lines":
        tokens = _impl.split_lines(inp.text)
    elif inp.mode == "lines_clean":
        tokens = _impl.split_lines_clean(inp.text)
    elif inp.mode == "words":
        tokens = _impl.split_words(inp.text)
    else:
        return TokensOutput(
            tokens=[],
            total=0,
            errors=_error("mode_invalid", f"Unknown split mode: {inp.mode}", "mode"),
            success=False,
        )

    if inp.drop_empty:
        _impl.drop_empty(tokens)

    return TokensOutput(tokens=tokens, total=len(tokens))


def run_join(inp: JoinInput) -> TextOutput:
    """Join tokens with the delimiter."""
    return TextOutput(text=_impl.join(inp.tokens, inp.delimiter))


def run_replace(inp: ReplaceInput) -> ReplaceOutput:
    """
    Replace the first, last or every occurrence of a target.

    A missing target is not an error: the output has replaced=False and
    the original text.
    """
    if inp.which not in REPLACE_MODES:
        return ReplaceOutput(
            text=inp.text,
            replaced=False,
            errors=_error("mode_invalid", f"Unknown replace mode: {inp.which}", "which"),
            success=False,
        )

    buffer = TextBuffer(inp.text)
    if inp.which == "first":
        replaced = _impl.replace_first(buffer, inp.target, inp.replacement)
    elif inp.which == "last":
        replaced = _impl.replace_last(buffer, inp.target, inp.replacement)
    else:
        replaced = _impl.replace_all(buffer, inp.target, inp.replacement)

    if not replaced:
        logger.debug("replace %s: target %r not found", inp.which, inp.target)

    return ReplaceOutput(text=buffer.value, replaced=replaced)


def run_truncate(
    inp: TruncateInput,
    *,
    rules: RulesPort | None = None,
) -> TextOutput:
    """Truncate text, using the configured ellipsis unless one is given."""
    if inp.max_length < 0:
        return TextOutput(
            text="",
            errors=_error(
                "max_length_negative", "max_length must be non-negative", "max_length"
            ),
            success=False,
        )

    config = _build_config(rules)
    ellipsis = config.ellipsis if inp.ellipsis is None else inp.ellipsis
    return TextOutput(text=_impl.truncate(inp.text, inp.max_length, ellipsis))


def run_preview(
    inp: PreviewInput,
    *,
    rules: RulesPort | None = None,
) -> TextOutput:
    """Escape and truncate text for display, with configured defaults."""
    config = _build_config(rules)
    max_length = config.preview_max_length if inp.max_length is None else inp.max_length
    ellipsis = config.ellipsis if inp.ellipsis is None else inp.ellipsis

    if max_length < 0:
        return TextOutput(
            text="",
            errors=_error(
                "max_length_negative", "max_length must be non-negative", "max_length"
            ),
            success=False,
        )

    return TextOutput(text=_impl.preview(inp.text, max_length, ellipsis))


def run_encode(
    inp: EncodeBytesInput,
    *,
    rules: RulesPort | None = None,
) -> TextOutput:
    """Render bytes as hex or binary digits."""
    if inp.encoding == "hex":
        config = _build_config(rules)
        uppercase = config.hex_uppercase if inp.uppercase is None else inp.uppercase
        return TextOutput(text=_impl.to_hex_string(inp.data, uppercase))

    if inp.encoding == "binary":
        return TextOutput(text=_impl.to_binary_string(inp.data))

    return TextOutput(
        text="",
        errors=_error("encoding_invalid", f"Unknown encoding: {inp.encoding}", "encoding"),
        success=False,
    )


def run_parse(inp: ParseInput) -> ParseOutput:
    """Parse text into int, float, bool or a single character."""
    try:
        value = _impl.parse_string(inp.text, inp.target)
    except ParseError as e:
        logger.warning("Parse failed: %s", e)
        return ParseOutput(
            value=None,
            errors=_error("parse_failed", str(e), "text"),
            success=False,
        )
    except TypeError as e:
        return ParseOutput(
            value=None,
            errors=_error("target_unsupported", str(e), "target"),
            success=False,
        )

    return ParseOutput(value=value)


def run_random(
    inp: RandomStringInput,
    *,
    rules: RulesPort | None = None,
    source: RandomSourcePort | None = None,
) -> TextOutput:
    """Generate a random string; length defaults to the configured value."""
    config = _build_config(rules)
    length = config.random_default_length if inp.length is None else inp.length

    if length < 0:
        return TextOutput(
            text="",
            errors=_error("length_negative", "length must be non-negative", "length"),
            success=False,
        )

    if inp.alphabet == "lowercase":
        text = _impl.random_lowercase_string(length, source=source)
    elif inp.alphabet == "alphanumeric":
        text = _impl.random_alphanumeric_string(length, source=source)
    else:
        return TextOutput(
            text="",
            errors=_error("alphabet_invalid", f"Unknown alphabet: {inp.alphabet}", "alphabet"),
            success=False,
        )

    return TextOutput(text=text)


def run(
    inp: SplitInput
    | JoinInput
    | ReplaceInput
    | TruncateInput
    | PreviewInput
    | EncodeBytesInput
    | ParseInput
    | RandomStringInput,
    *,
    rules: RulesPort | None = None,
    engine: RegexEnginePort | None = None,
    source: RandomSourcePort | None = None,
) -> TextOutput | TokensOutput | ReplaceOutput | ParseOutput:
    """
    Main entry point for the strutil component.

    Dispatches to the appropriate handler based on input type.

    Args:
        inp: Input object determining the operation.
        rules: Optional rules port for configured defaults.
        engine: Optional regex engine for regex splitting.
        source: Optional random source for random strings.

    Returns:
        Output object matching the input type.
    """
    if isinstance(inp, SplitInput):
        return run_split(inp, engine=engine)
    elif isinstance(inp, JoinInput):
        return run_join(inp)
    elif isinstance(inp, ReplaceInput):
        return run_replace(inp)
    elif isinstance(inp, TruncateInput):
        return run_truncate(inp, rules=rules)
    elif isinstance(inp, PreviewInput):
        return run_preview(inp, rules=rules)
    elif isinstance(inp, EncodeBytesInput):
        return run_encode(inp, rules=rules)
    elif isinstance(inp, ParseInput):
        return run_parse(inp)
    elif isinstance(inp, RandomStringInput):
        return run_random(inp, rules=rules, source=source)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
