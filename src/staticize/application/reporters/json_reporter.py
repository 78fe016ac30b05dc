"""JSON reporter for machine-readable output."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, TextIO

from staticize.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from staticize.domain.model.verdict import ClassReport, PromotionResult, Verdict


class JSONReporter(BaseReporter):
    """JSON reporter for machine-readable output.

    Outputs verdicts as JSON for CI/CD integration or parsing by other
    tools.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        super().__init__(output)
        self._indent = indent

    def report(self, result: PromotionResult) -> None:
        """Report promotion results as JSON.

        Args:
            result: Promotion result
        """
        json.dump(self._result_to_dict(result), self._output, indent=self._indent)
        self._output.write("\n")

    def _result_to_dict(self, result: PromotionResult) -> dict[str, object]:
        return {
            "changed": result.changed,
            "promoted_count": result.promoted_count,
            "classes": [self._class_to_dict(report) for report in result.reports],
        }

    def _class_to_dict(self, report: ClassReport) -> dict[str, object]:
        return {
            "qualified_name": report.qualified_name,
            "passes": report.passes,
            "verdicts": [self._verdict_to_dict(verdict) for verdict in report.verdicts],
        }

    def _verdict_to_dict(self, verdict: Verdict) -> dict[str, object]:
        return {
            "index": verdict.index,
            "name": verdict.name,
            "state": verdict.state.name,
            "reasons": [reason.value for reason in verdict.reasons],
            "evidence": list(verdict.evidence),
            "resolved_in_pass": verdict.resolved_in_pass,
        }
