"""Reporter protocol: contract for string-returning reporters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from staticize.domain.model.verdict import PromotionResult


class ReporterProtocol(Protocol):
    """Protocol for promotion result reporters.

    Output is str, not print(). Caller decides destination.
    """

    def report(self, result: PromotionResult) -> str:
        """Format promotion result as string.

        Args:
            result: Promotion result to format.

        Returns:
            Formatted string representation.
        """
        ...
