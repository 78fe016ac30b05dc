"""staticize domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, abc, dataclasses, enum, re, pathlib, collections.abc
"""

from staticize.domain.exceptions import (
    ConfigurationError,
    ParsingError,
    StaticizeError,
    SyntaxTreeError,
)

__all__ = [
    "StaticizeError",
    "ParsingError",
    "SyntaxTreeError",
    "ConfigurationError",
]
