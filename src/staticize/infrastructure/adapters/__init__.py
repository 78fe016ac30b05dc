"""Adapters: tree-sitter parser and source printer."""

from staticize.infrastructure.adapters.printer import print_tree
from staticize.infrastructure.adapters.treesitter_parser import TreeSitterJavaParser

__all__ = ["TreeSitterJavaParser", "print_tree"]
