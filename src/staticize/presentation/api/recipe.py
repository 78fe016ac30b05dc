"""Recipe facade: one-option entry point for the static modifier rewrite."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from staticize.application.services.promoter import StaticPromoter
from staticize.domain.exceptions.validation import ConfigurationError
from staticize.domain.model.configuration import PromotionConfig
from staticize.infrastructure.adapters.printer import print_tree
from staticize.infrastructure.adapters.treesitter_parser import TreeSitterJavaParser

if TYPE_CHECKING:
    from collections.abc import Mapping

    from staticize.domain.model.tree import CompilationUnit
    from staticize.domain.model.verdict import PromotionResult
    from staticize.domain.ports.source_parser import SourceParserPort
    from staticize.domain.ports.tracer import TracerProtocol

OPTION_NAME = "fullyQualifiedClassName"


class AddStaticModifierRecipe:
    """Add ``static`` to methods of one class that never use instance data.

    Example:
        recipe = AddStaticModifierRecipe("com.yourorg.A")
        rewritten = recipe.run_source(source)
    """

    display_name = "Add Static Modifier To Class Level Method"
    description = "Add static modifier to class level method that does not access instance data"

    def __init__(
        self,
        fully_qualified_class_name: str,
        *,
        parser: SourceParserPort | None = None,
        tracer: TracerProtocol | None = None,
    ) -> None:
        """Initialize recipe.

        Args:
            fully_qualified_class_name: Class to run against, e.g. "com.yourorg.FooBar"
            parser: Source parser (default: TreeSitterJavaParser)
            tracer: Analysis observer (default: no-op)

        Raises:
            ConfigurationError: If the class name is empty or malformed
        """
        self._config = PromotionConfig(fully_qualified_class_name)
        self._promoter = StaticPromoter(self._config, tracer)
        self._parser = parser if parser is not None else TreeSitterJavaParser()

    @classmethod
    def from_options(cls, options: Mapping[str, object]) -> AddStaticModifierRecipe:
        """Build recipe from its serialized options.

        Raises:
            ConfigurationError: If the option is missing or not a string
        """
        value = options.get(OPTION_NAME)
        if not isinstance(value, str):
            raise ConfigurationError(OPTION_NAME, "required string option")
        return cls(value)

    @property
    def fully_qualified_class_name(self) -> str:
        return self._config.fully_qualified_class_name

    @property
    def options(self) -> dict[str, object]:
        """Serialized options, accepted by from_options()."""
        return {OPTION_NAME: self._config.fully_qualified_class_name}

    def run(self, unit: CompilationUnit) -> PromotionResult:
        """Rewrite a parsed unit."""
        return self._promoter.run(unit)

    def run_source(self, source: str, label: str = "<string>") -> str:
        """Parse, rewrite and print Java source.

        Args:
            source: Java source text
            label: Name used in parse error messages

        Returns:
            Rewritten source (equal to input when nothing changed)

        Raises:
            ParsingError: If the source has syntax errors
        """
        result = self.run(self._parser.parse(source, label))
        if not result.changed:
            return source
        return print_tree(result.unit)

    def run_file(self, path: Path) -> str:
        """Rewrite a Java file and return the new text. The file is not written."""
        return print_tree(self.run(self._parser.parse_file(Path(path))).unit)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._config.fully_qualified_class_name!r})"
