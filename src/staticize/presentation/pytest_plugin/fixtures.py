"""pytest fixtures for recipe testing.

Provides a before/after harness for Java rewrite tests.
User overrides staticize_recipe in their conftest.py.
"""

from __future__ import annotations

import textwrap
from collections.abc import Callable
from dataclasses import dataclass

import pytest

from staticize.infrastructure.adapters.treesitter_parser import TreeSitterJavaParser
from staticize.presentation.api.recipe import AddStaticModifierRecipe


def _get_ini_value(config: pytest.Config, name: str, default: str) -> str:
    """Get ini value from pytest config with fallback.

    Args:
        config: pytest Config object
        name: ini option name
        default: default value if not set

    Returns:
        String value of ini option
    """
    value = config.getini(name)
    if value:
        return str(value)
    return default


@dataclass(frozen=True, slots=True)
class RewriteRun:
    """Callable harness asserting one rewrite.

    Sources are dedented before use, so tests may indent them freely.

    Attributes:
        recipe: Recipe under test
    """

    recipe: AddStaticModifierRecipe

    def __call__(self, before: str, after: str | None = None) -> str:
        """Run recipe on ``before`` and compare with ``after``.

        Args:
            before: Java source
            after: Expected source; None asserts the source is unchanged

        Returns:
            Actual rewritten source

        Raises:
            AssertionError: If the result differs from the expectation
        """
        source = textwrap.dedent(before)
        expected = source if after is None else textwrap.dedent(after)
        actual = self.recipe.run_source(source)

        if actual != expected:
            raise AssertionError(f"Unexpected rewrite result.\n--- expected\n{expected}\n--- actual\n{actual}")

        if after is not None and self.recipe.run_source(actual) != actual:
            raise AssertionError("Recipe is not idempotent: second run changed the result")

        return actual


@pytest.fixture(scope="session")
def staticize_parser() -> TreeSitterJavaParser:
    """Shared tree-sitter Java parser."""
    return TreeSitterJavaParser()


@pytest.fixture
def staticize_recipe(request: pytest.FixtureRequest, staticize_parser: TreeSitterJavaParser) -> AddStaticModifierRecipe:
    """Recipe under test.

    Reads staticize_target from pytest.ini (default: "com.yourorg.A").
    User overrides this fixture in their conftest.py for other targets.

    Returns:
        AddStaticModifierRecipe
    """
    target = _get_ini_value(request.config, "staticize_target", "com.yourorg.A")
    return AddStaticModifierRecipe(target, parser=staticize_parser)


@pytest.fixture
def rewrite_run(staticize_recipe: AddStaticModifierRecipe) -> Callable[..., str]:
    """Before/after assertion for the configured recipe.

    Example:
        def test_promotes(rewrite_run):
            rewrite_run(BEFORE, AFTER)

    Returns:
        RewriteRun harness
    """
    return RewriteRun(staticize_recipe)
