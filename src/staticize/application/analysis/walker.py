"""Usage walker: what a method body touches.

Resolution is by literal name, not by declaration. A parameter or local
that shares a field's name counts as a field reference, and any identifier
that shares a blocked sibling's name counts as a call. Unknown names never
block.

Inner member classes see the instance members of their enclosing classes,
so a method of ``A$B`` that names a field of ``A`` is bound to an instance
just like one that names a field of ``B``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from staticize.application.analysis.context import ANONYMOUS_CLASS, FrameType, TraversalContext
from staticize.domain.model.tree import (
    Annotation,
    ClassDeclaration,
    Identifier,
    MethodDeclaration,
    Modifier,
    Modifiers,
    Node,
    Token,
    VariableDeclarations,
)

if TYPE_CHECKING:
    from staticize.domain.model.scope import ClassScope, MethodRecord
    from staticize.domain.model.tree import Tree
    from staticize.domain.model.verdict import MethodUsage

SUPER_KEYWORD = "super"
THIS_KEYWORD = "this"
NEW_KEYWORD = "new"
OBJECT_CREATION = "object_creation_expression"


@dataclass(frozen=True, slots=True)
class InstanceMembers:
    """Instance members a method body can name without a qualifier.

    Attributes:
        fields: Instance field names, own and enclosing
        outer_methods: Non-static method names of enclosing classes
        inner_classes: Inner member class names, own and enclosing
    """

    fields: frozenset[str] = frozenset()
    outer_methods: frozenset[str] = frozenset()
    inner_classes: frozenset[str] = frozenset()


def reachable_members(scope: ClassScope, enclosing: Sequence[ClassScope] = ()) -> InstanceMembers:
    """Collect the instance members visible inside a class body.

    Enclosing classes contribute only while the chain stays inner: a static
    member class has no enclosing instance, so nothing outside it counts.
    A name declared by a closer class shadows the same name further out.

    Args:
        scope: Scope of the class declaring the walked methods
        enclosing: Scopes of the enclosing classes, outermost first

    Returns:
        InstanceMembers
    """
    fields = set(scope.instance_fields)
    methods: set[str] = set()
    inner = set(scope.inner_classes)

    declared_fields = set(scope.instance_fields)
    declared_methods = {m.name for m in scope.methods}
    declared_classes = {s.name for s in scope.nested if s.name}

    current = scope
    for outer in reversed(enclosing):
        if not current.is_inner:
            break
        fields.update(outer.instance_fields - declared_fields)
        methods.update(outer.non_static_methods - declared_methods)
        inner.update(outer.inner_classes - declared_classes)

        declared_fields |= outer.instance_fields
        declared_methods |= {m.name for m in outer.methods}
        declared_classes |= {s.name for s in outer.nested if s.name}
        current = outer

    return InstanceMembers(
        fields=frozenset(fields),
        outer_methods=frozenset(methods),
        inner_classes=frozenset(inner),
    )


class _Leave:
    """Stack marker: pop the frame pushed when the node was entered."""

    __slots__ = ()


_LEAVE = _Leave()


class UsageWalker:
    """Walks one method and reports instance-state and sibling usage.

    Stateless between walk_method() calls: every call builds a fresh
    TraversalContext, so a re-walk inside the closure loop never sees an
    earlier walk's accumulators.
    """

    def walk_method(
        self,
        record: MethodRecord,
        scope: ClassScope,
        ineligible_names: Iterable[str] = (),
        enclosing: Sequence[ClassScope] = (),
    ) -> MethodUsage:
        """Walk a method declaration.

        Modifiers and annotations are metadata and are skipped. Everything
        else, parameters and nested class bodies included, is visited.

        Args:
            record: Method to walk
            scope: Scope of the class declaring the method
            ineligible_names: Sibling names that block promotion when referenced
            enclosing: Scopes of the enclosing classes, outermost first

        Returns:
            MethodUsage with the evidence found
        """
        members = reachable_members(scope, enclosing)
        blocked = frozenset(ineligible_names) | members.outer_methods
        top = scope.qualified_name or scope.name or ANONYMOUS_CLASS
        context = TraversalContext(top_class=top)

        context.push(FrameType.CLASS, top)
        context.push(FrameType.METHOD, record.name)
        self._walk(_declaration_parts(record.node), context, members, blocked)
        context.pop()
        context.pop()

        return context.to_usage()

    def _walk(
        self,
        nodes: Iterable[Tree],
        context: TraversalContext,
        members: InstanceMembers,
        blocked: frozenset[str],
    ) -> None:
        """Depth-first walk with an explicit stack.

        Entering a class or method pushes a frame; a _LEAVE marker queued
        behind its children pops it once they are done.
        """
        stack: list[Tree | _Leave] = list(reversed(list(nodes)))

        while stack:
            node = stack.pop()

            match node:
                case _Leave():
                    context.pop()

                case Identifier(name=name):
                    self._resolve(name, context, members, blocked)

                case Token() | Modifier() | Modifiers() | Annotation():
                    pass

                case ClassDeclaration():
                    context.push(FrameType.CLASS, node.name or ANONYMOUS_CLASS)
                    stack.append(_LEAVE)
                    stack.extend(reversed(node.children))

                case MethodDeclaration():
                    context.push(FrameType.METHOD, node.name)
                    stack.append(_LEAVE)
                    stack.extend(reversed(_declaration_parts(node)))

                case Node(kind=kind) if kind == OBJECT_CREATION:
                    created = _created_class(node)
                    if created is not None and created in members.inner_classes:
                        context.inner_classes.add(created)
                    stack.extend(reversed(node.children))

                case VariableDeclarations() | Node():
                    stack.extend(reversed(node.children))

                case _:
                    raise TypeError(f"unknown tree node {type(node).__name__}")

    def _resolve(
        self,
        name: str,
        context: TraversalContext,
        members: InstanceMembers,
        blocked: frozenset[str],
    ) -> None:
        """Classify one identifier and update the accumulators."""
        if not context.in_method:
            return

        if name in members.fields:
            context.instance_fields.add(name)

        lowered = name.lower()
        if lowered == SUPER_KEYWORD:
            context.uses_super = True
        elif lowered == THIS_KEYWORD:
            context.uses_this = True
        elif name in blocked:
            context.ineligible_calls.add(name)


def _declaration_parts(method: MethodDeclaration) -> tuple[Tree, ...]:
    """Method children without the modifier list."""
    return tuple(child for child in method.children if not isinstance(child, Modifiers))


def _created_class(node: Node) -> str | None:
    """Simple name of the class an unqualified ``new`` creates.

    ``outer.new Inner()`` names its enclosing instance explicitly and
    yields None.
    """
    children = node.children
    if not children or not (isinstance(children[0], Token) and children[0].text == NEW_KEYWORD):
        return None

    for child in children[1:]:
        match child:
            case Annotation():
                continue
            case Node(kind="type_arguments"):
                continue
            case _:
                return _type_name(child)
    return None


def _type_name(node: Tree) -> str | None:
    match node:
        case Token(text=text):
            return text
        case Node(kind="generic_type", children=(head, *_)):
            return _type_name(head)
        case Node(kind="scoped_type_identifier", children=(*_, last)):
            return _type_name(last)
    return None
