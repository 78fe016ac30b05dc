"""Domain exceptions."""

from staticize.domain.exceptions.base import StaticizeError
from staticize.domain.exceptions.parsing import ParsingError, SyntaxTreeError
from staticize.domain.exceptions.validation import ConfigurationError

__all__ = [
    "StaticizeError",
    "ParsingError",
    "SyntaxTreeError",
    "ConfigurationError",
]
