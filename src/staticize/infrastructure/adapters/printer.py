"""Source printer: domain tree back to Java text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from staticize.domain.model.tree import CompilationUnit, Identifier, Modifier, Token, iter_leaves

if TYPE_CHECKING:
    from staticize.domain.model.tree import Leaf, Tree


def print_tree(tree: Tree | CompilationUnit) -> str:
    """Render a tree as source text.

    For a unit produced by the parser and not rewritten, the result equals
    the parsed source byte for byte.

    Args:
        tree: Compilation unit or any subtree

    Returns:
        Source text
    """
    parts = [leaf.prefix + _leaf_text(leaf) for leaf in iter_leaves(tree)]
    if isinstance(tree, CompilationUnit):
        parts.append(tree.eof)
    return "".join(parts)


def _leaf_text(leaf: Leaf) -> str:
    match leaf:
        case Token():
            return leaf.text
        case Identifier():
            return leaf.name
        case Modifier():
            return leaf.keyword
