"""Base reporter class for stream output.

Concrete reporters inherit from this.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from staticize.domain.model.verdict import PromotionResult, Verdict


class BaseReporter(ABC):
    """Base class for reporters writing to a text stream.

    Concrete reporters must implement the report() method.

    Example:
        class CountReporter(BaseReporter):
            def report(self, result: PromotionResult) -> None:
                self._output.write(f"{result.promoted_count}\\n")
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
        """
        self._output = output if output is not None else sys.stdout

    @abstractmethod
    def report(self, result: PromotionResult) -> None:
        """Report promotion results.

        Args:
            result: Rewritten unit with per-class reports
        """


def describe_reasons(verdict: Verdict) -> str:
    """Comma-separated reason texts of a verdict."""
    return ", ".join(reason.value for reason in verdict.reasons)
