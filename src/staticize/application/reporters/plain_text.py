"""Plain text reporter using print().

Stdlib-only reporter for simple text output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from staticize.application.reporters._base import BaseReporter, describe_reasons

if TYPE_CHECKING:
    from staticize.domain.model.verdict import ClassReport, PromotionResult


class PlainTextReporter(BaseReporter):
    """Plain text reporter using print().

    Outputs to stdout by default, can be configured for any TextIO.
    """

    def report(self, result: PromotionResult) -> None:
        """Report promotion results as plain text.

        Args:
            result: Promotion result
        """
        self._report_header()
        self._report_summary(result)

        for class_report in result.reports:
            self._report_class(class_report)

        self._report_footer(result)

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)

    def _report_header(self) -> None:
        self._write("=" * 70)
        self._write("Static Modifier Results")
        self._write("=" * 70)

    def _report_summary(self, result: PromotionResult) -> None:
        self._write()
        self._write("Summary:")
        self._write(f"  Classes analyzed: {len(result.reports)}")
        self._write(f"  Methods promoted: {result.promoted_count}")

    def _report_class(self, report: ClassReport) -> None:
        """Print one class section with every verdict."""
        self._write()
        self._write("-" * 70)
        self._write(f"{report.qualified_name} (passes: {report.passes})")
        self._write("-" * 70)

        for verdict in report.verdicts:
            if verdict.promote:
                self._write(f"  [static] {verdict.name} (member {verdict.index})")
                continue

            self._write(f"  [keep]   {verdict.name} (member {verdict.index}): {describe_reasons(verdict)}")
            if verdict.evidence:
                self._write(f"           Evidence: {', '.join(verdict.evidence)}")

    def _report_footer(self, result: PromotionResult) -> None:
        self._write()
        self._write("=" * 70)
        status = "CHANGED" if result.changed else "UNCHANGED"
        self._write(f"Result: {status}")
        self._write("=" * 70)
