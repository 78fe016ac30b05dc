"""Console reporter: PromotionResult → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from staticize.application.reporters._base import describe_reasons

if TYPE_CHECKING:
    from staticize.domain.model.verdict import ClassReport, PromotionResult


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        show_ineligible: Include methods that stay non-static.
        show_evidence: Add the blocking names column.
        width: Console width in characters.
    """

    show_ineligible: bool = True
    show_evidence: bool = True
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, result: PromotionResult) -> str:
        """Format promotion result as rich formatted string.

        Args:
            result: Promotion result to format.

        Returns:
            Formatted string with colors and tables.
        """
        output = StringIO()
        console = Console(file=output, force_terminal=True, width=self._config.width)

        self._render_header(console, result)
        for class_report in result.reports:
            self._render_class(console, class_report)

        return output.getvalue()

    def _render_header(self, console: Console, result: PromotionResult) -> None:
        console.print()
        console.rule("[bold]STATIC MODIFIER[/bold]")
        console.print()
        console.print(
            f"[bold]Classes:[/bold] {len(result.reports)}  [bold]Promoted:[/bold] {result.promoted_count}"
        )
        console.print()

    def _render_class(self, console: Console, report: ClassReport) -> None:
        """Render one verdict table per analyzed class."""
        table = Table(title=f"{report.qualified_name} (passes: {report.passes})", title_justify="left")
        table.add_column("#", justify="right")
        table.add_column("Method")
        table.add_column("Verdict")
        table.add_column("Reasons")
        if self._config.show_evidence:
            table.add_column("Evidence")

        for verdict in report.verdicts:
            if not verdict.promote and not self._config.show_ineligible:
                continue

            state = "[green]static[/green]" if verdict.promote else "[yellow]keep[/yellow]"
            row = [str(verdict.index), verdict.name, state, describe_reasons(verdict)]
            if self._config.show_evidence:
                row.append(", ".join(verdict.evidence))
            table.add_row(*row)

        console.print(table)
        console.print()
