"""
Strutil component - String manipulation utilities.

Trimming, splitting, joining, case conversion, searching, truncation and
byte-to-string encoding.
"""

from ._impl import (
    ALPHANUMERIC_SYMBOLS,
    LOWERCASE_SYMBOLS,
    WHITESPACE,
    capitalize,
    capitalize_first_char,
    compare_ignore_case,
    contains,
    drop_duplicate,
    drop_duplicate_copy,
    drop_empty,
    drop_empty_copy,
    ends_with,
    ends_with_char,
    escape_non_printable,
    is_alphanumeric,
    join,
    matches,
    parse_string,
    preview,
    random_alphanumeric_string,
    random_lowercase_string,
    random_string,
    regex_split,
    regex_split_map,
    repeat,
    replace_all,
    replace_all_copy,
    replace_first,
    replace_first_copy,
    replace_last,
    replace_last_copy,
    reverse_copy,
    reverse_inplace,
    sorting_ascending,
    sorting_descending,
    split,
    split_any,
    split_lines,
    split_lines_clean,
    split_words,
    starts_with,
    starts_with_char,
    to_binary_string,
    to_hex_string,
    to_lower,
    to_string,
    to_upper,
    trim,
    trim_copy,
    trim_left,
    trim_left_copy,
    trim_right,
    trim_right_copy,
    truncate,
)
from .adapters import (
    ProcessRandomSource,
    RulesAdapter,
    SeededRandomSource,
    StdlibRegexEngine,
)
from .component import (
    run,
    run_encode,
    run_join,
    run_parse,
    run_preview,
    run_random,
    run_replace,
    run_split,
    run_truncate,
)
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

__all__ = [
    # Case
    "to_lower",
    "to_upper",
    "capitalize",
    "capitalize_first_char",
    # Predicates
    "contains",
    "compare_ignore_case",
    "starts_with",
    "ends_with",
    "starts_with_char",
    "ends_with_char",
    "is_alphanumeric",
    "matches",
    # Trimming
    "WHITESPACE",
    "trim_left",
    "trim_right",
    "trim",
    "trim_left_copy",
    "trim_right_copy",
    "trim_copy",
    # Replacement
    "replace_first",
    "replace_last",
    "replace_all",
    "replace_first_copy",
    "replace_last_copy",
    "replace_all_copy",
    # Splitting & joining
    "split",
    "split_lines",
    "split_lines_clean",
    "split_words",
    "split_any",
    "regex_split",
    "regex_split_map",
    "join",
    "drop_empty",
    "drop_empty_copy",
    "drop_duplicate",
    "drop_duplicate_copy",
    "sorting_ascending",
    "sorting_descending",
    "reverse_inplace",
    "reverse_copy",
    # Generation & encoding
    "LOWERCASE_SYMBOLS",
    "ALPHANUMERIC_SYMBOLS",
    "repeat",
    "random_lowercase_string",
    "random_alphanumeric_string",
    "random_string",
    "truncate",
    "escape_non_printable",
    "preview",
    "to_hex_string",
    "to_binary_string",
    "to_string",
    "parse_string",
    # Entry points
    "run",
    "run_split",
    "run_join",
    "run_replace",
    "run_truncate",
    "run_preview",
    "run_encode",
    "run_parse",
    "run_random",
    # Models
    "TextBuffer",
    "ParseError",
    "StrutilConfig",
    "DEFAULT_CONFIG",
    "StrutilOperationError",
    "SplitInput",
    "JoinInput",
    "ReplaceInput",
    "TruncateInput",
    "PreviewInput",
    "EncodeBytesInput",
    "ParseInput",
    "RandomStringInput",
    "TextOutput",
    "TokensOutput",
    "ReplaceOutput",
    "ParseOutput",
    # Ports
    "RegexEnginePort",
    "RandomSourcePort",
    "RulesPort",
    # Adapters
    "StdlibRegexEngine",
    "ProcessRandomSource",
    "SeededRandomSource",
    "RulesAdapter",
]
