"""Reporters for promotion results."""

from staticize.application.reporters._base import BaseReporter
from staticize.application.reporters.console import ConsoleConfig, ConsoleReporter
from staticize.application.reporters.json_reporter import JSONReporter
from staticize.application.reporters.plain_text import PlainTextReporter
from staticize.application.reporters.protocol import ReporterProtocol

__all__ = [
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
    "ReporterProtocol",
]
