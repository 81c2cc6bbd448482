"""
Adapters for the strutil component ports.
"""

from .random_source import ProcessRandomSource, SeededRandomSource, default_random_source
from .regex_engine import StdlibRegexEngine, default_regex_engine
from .rules import RulesAdapter

__all__ = [
    "ProcessRandomSource",
    "RulesAdapter",
    "SeededRandomSource",
    "StdlibRegexEngine",
    "default_random_source",
    "default_regex_engine",
]
