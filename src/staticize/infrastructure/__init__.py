"""Infrastructure: parsing, printing and tracing."""

from staticize.infrastructure.adapters import TreeSitterJavaParser, print_tree
from staticize.infrastructure.tracing import LoggingTracer

__all__ = ["LoggingTracer", "TreeSitterJavaParser", "print_tree"]
