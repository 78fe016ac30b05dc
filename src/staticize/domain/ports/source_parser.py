"""Source parser port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from staticize.domain.model.tree import CompilationUnit


class SourceParserPort(ABC):
    """Port for parsing Java source into a syntax tree.

    Infrastructure layer must provide implementation.
    """

    @abstractmethod
    def parse(self, source: str, label: str = "<string>") -> CompilationUnit:
        """Parse source text.

        Args:
            source: Java source text
            label: Name used in error messages

        Returns:
            Parsed CompilationUnit

        Raises:
            ParsingError: If source cannot be parsed
        """
        ...

    @abstractmethod
    def parse_file(self, path: Path) -> CompilationUnit:
        """Parse single Java file.

        Args:
            path: Path to .java file

        Returns:
            Parsed CompilationUnit

        Raises:
            ParsingError: If file cannot be read or parsed
        """
        ...
