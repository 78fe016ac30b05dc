"""Rewriter: append ``static`` to eligible methods.

Side-effect free. Every change produces new nodes; untouched nodes keep
their identity, so an unchanged tree is the very same object.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from staticize.domain.model.tree import (
    STATIC,
    Annotation,
    MethodDeclaration,
    Modifier,
    Modifiers,
    leading_prefix,
    map_members,
    with_leading_prefix,
)
from staticize.domain.model.verdict import Verdict

if TYPE_CHECKING:
    from collections.abc import Iterable

    from staticize.domain.model.tree import ClassDeclaration, Tree


def promote(method: MethodDeclaration, verdict: Verdict | bool) -> MethodDeclaration:
    """Apply one verdict to a method declaration.

    Args:
        method: Method declaration
        verdict: Verdict, or a plain promote flag

    Returns:
        New declaration with ``static`` appended to its modifiers when the
        verdict promotes; the same object otherwise
    """
    should_promote = verdict.promote if isinstance(verdict, Verdict) else verdict
    if not should_promote:
        return method

    modifiers = method.modifiers
    if modifiers is None or not modifiers.children:
        # 'static' takes over the declaration's indentation
        indent = leading_prefix(method)
        shifted = cast("MethodDeclaration", with_leading_prefix(method, " "))
        return shifted.with_modifiers(Modifiers(children=(Modifier(STATIC, prefix=indent),)))

    position = next(i for i, child in enumerate(method.children) if child is modifiers)
    following = method.children[position + 1] if position + 1 < len(method.children) else None
    next_prefix = leading_prefix(following) if following is not None else ""

    if isinstance(modifiers.children[-1], Annotation) and "\n" in next_prefix and following is not None:
        # Annotation on its own line: keep it there, start the signature with 'static'
        children = list(method.children)
        children[position] = modifiers.appended(Modifier(STATIC, prefix=next_prefix))
        children[position + 1] = with_leading_prefix(following, " ")
        return method.with_children(tuple(children))

    return method.with_modifiers(modifiers.appended(Modifier(STATIC, prefix=" ")))


def rewrite_class(decl: ClassDeclaration, promoted: Iterable[int]) -> ClassDeclaration:
    """Promote the methods at the given member indices.

    Args:
        decl: Class declaration that was analyzed
        promoted: Member indices of eligible methods

    Returns:
        Rewritten declaration; decl itself when nothing is promoted

    Raises:
        ValueError: If an index does not point at a method (FAIL-FIRST)
    """
    targets = frozenset(promoted)
    if not targets:
        return decl

    seen: set[int] = set()

    def transform(index: int, member: Tree) -> Tree:
        if index not in targets:
            return member
        if not isinstance(member, MethodDeclaration):
            raise ValueError(f"member {index} of {decl.qualified_name} is not a method")
        seen.add(index)
        return promote(member, True)

    rewritten = map_members(decl, transform)

    missing = targets - seen
    if missing:
        raise ValueError(f"no members at indices {sorted(missing)} in {decl.qualified_name}")

    return rewritten
