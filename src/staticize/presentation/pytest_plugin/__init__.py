"""pytest plugin for staticize.

Provides fixtures for recipe testing:
    staticize_parser: Shared tree-sitter Java parser
    staticize_recipe: Recipe under test (override in conftest.py)
    rewrite_run: Before/after rewrite assertion

Configuration (pytest.ini or pyproject.toml):
    staticize_target: Fully qualified class name (default: "com.yourorg.A")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Register fixtures from fixtures module
from staticize.presentation.pytest_plugin.fixtures import (
    RewriteRun,
    rewrite_run,
    staticize_parser,
    staticize_recipe,
)

if TYPE_CHECKING:
    import pytest

# Export fixtures for pytest discovery
__all__ = [
    "RewriteRun",
    "rewrite_run",
    "staticize_parser",
    "staticize_recipe",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini("staticize_target", "Fully qualified class name for rewrite_run", default="")


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "rewrite: mark test as recipe rewrite test",
    )
