"""Tests for reporters/plain_text.py."""

import io

from staticize.application.reporters.plain_text import PlainTextReporter
from staticize.application.services.promoter import StaticPromoter
from staticize.domain.model.configuration import PromotionConfig
from staticize.domain.model.verdict import PromotionResult
from tests.factories import make_class, make_field, make_method, make_unit


def _result() -> PromotionResult:
    unit = make_unit(make_class("A", make_field("x"), make_method("f", "x"), make_method("g")))
    return StaticPromoter(PromotionConfig("com.yourorg.A")).run(unit)


class TestPlainTextReporter:
    """Tests for PlainTextReporter."""

    def test_reports_changed_result(self) -> None:
        output = io.StringIO()
        PlainTextReporter(output).report(_result())

        text = output.getvalue()
        assert "CHANGED" in text
        assert "Methods promoted: 1" in text
        assert "com.yourorg.A (passes: 2)" in text

    def test_reports_every_verdict(self) -> None:
        output = io.StringIO()
        PlainTextReporter(output).report(_result())

        text = output.getvalue()
        assert "[static] g" in text
        assert "[keep]   f" in text
        assert "uses instance field" in text
        assert "Evidence: x" in text

    def test_reports_unchanged_result(self) -> None:
        output = io.StringIO()
        PlainTextReporter(output).report(PromotionResult(unit=make_unit()))

        text = output.getvalue()
        assert "UNCHANGED" in text
        assert "Classes analyzed: 0" in text
