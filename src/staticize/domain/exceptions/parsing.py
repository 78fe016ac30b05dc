"""Parsing exceptions."""

from __future__ import annotations

from staticize.domain.exceptions.base import StaticizeError


class ParsingError(StaticizeError):
    """Error during source code parsing.

    Attributes:
        source: File path or other label of the source that failed
        reason: Why parsing failed
    """

    def __init__(self, source: str, reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if source is None:
            raise TypeError("source must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.source = source
        self.reason = reason
        super().__init__(f"Failed to parse {source}: {reason}")


class SyntaxTreeError(ParsingError):
    """Source parsed with syntax errors.

    Attributes:
        source: Source label
        line: 1-based line of the first error
        column: 0-based column of the first error
        reason: Error description
    """

    def __init__(self, source: str, line: int, column: int, reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if line < 1:
            raise ValueError(f"line must be >= 1, got {line}")
        if column < 0:
            raise ValueError(f"column must be >= 0, got {column}")

        self.line = line
        self.column = column
        super().__init__(source, f"{reason} at {line}:{column}")
