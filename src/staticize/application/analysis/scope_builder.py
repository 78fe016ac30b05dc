"""Scope model: declared fields and methods of one class."""

from __future__ import annotations

from collections.abc import Iterable

from staticize.domain.model.configuration import DEFAULT_OVERRIDE_ANNOTATIONS
from staticize.domain.model.scope import ClassScope, MethodRecord
from staticize.domain.model.tree import (
    STATIC,
    ClassDeclaration,
    ClassKind,
    MethodDeclaration,
    VariableDeclarations,
)

# Fields of these kinds are implicitly static
_STATIC_FIELD_KINDS = frozenset({ClassKind.INTERFACE, ClassKind.ANNOTATION})


def build_class_scope(
    decl: ClassDeclaration,
    override_annotations: Iterable[str] = DEFAULT_OVERRIDE_ANNOTATIONS,
    *,
    inner: bool = False,
) -> ClassScope:
    """Build the scope of a class from its direct members.

    Only direct members count: field declarations met here are class-level
    by construction, never inside a method body. Member classes get their
    own nested scopes and never contribute to this one.

    Args:
        decl: Class declaration
        override_annotations: Annotation names marking overrides
        inner: The class is a non-static member class

    Returns:
        ClassScope with instance fields, method records and nested scopes

    Raises:
        TypeError: If decl is not a ClassDeclaration (FAIL-FIRST)
    """
    if not isinstance(decl, ClassDeclaration):
        raise TypeError(f"decl must be ClassDeclaration, got {type(decl).__name__}")

    overrides = frozenset(override_annotations)
    fields: set[str] = set(decl.record_components)
    methods: list[MethodRecord] = []
    nested: list[ClassScope] = []

    for index, member in enumerate(decl.members):
        match member:
            case VariableDeclarations():
                if not member.is_static and decl.kind not in _STATIC_FIELD_KINDS:
                    fields.update(member.names)
            case MethodDeclaration():
                methods.append(make_method_record(index, member, decl.name, overrides))
            case ClassDeclaration():
                nested.append(build_class_scope(member, overrides, inner=_is_inner(member, decl)))

    return ClassScope(
        name=decl.name,
        qualified_name=decl.qualified_name,
        kind=decl.kind,
        instance_fields=frozenset(fields),
        methods=tuple(methods),
        non_static_methods={m.name for m in methods if not m.is_static and not m.is_constructor},
        nested=tuple(nested),
        is_inner=inner,
    )


def _is_inner(member: ClassDeclaration, owner: ClassDeclaration) -> bool:
    """Member classes are inner unless static, implicitly or explicitly."""
    if member.kind is not ClassKind.CLASS or owner.kind in _STATIC_FIELD_KINDS:
        return False
    modifiers = member.modifiers
    return modifiers is None or not modifiers.has(STATIC)


def make_method_record(
    index: int,
    method: MethodDeclaration,
    class_name: str | None,
    override_annotations: frozenset[str] = DEFAULT_OVERRIDE_ANNOTATIONS,
) -> MethodRecord:
    """Read method metadata once.

    Args:
        index: Member position inside the class body
        method: Method declaration
        class_name: Simple name of the enclosing class (None if anonymous)
        override_annotations: Annotation names marking overrides

    Returns:
        MethodRecord
    """
    annotations = method.annotation_names
    return MethodRecord(
        index=index,
        name=method.name,
        modifiers=method.modifier_keywords,
        annotations=annotations,
        body=method.body,
        is_constructor=class_name is not None and method.name == class_name,
        is_override=any(name in override_annotations for name in annotations),
        is_abstract=method.is_abstract,
        is_static=method.is_static,
        is_default=method.is_default,
        node=method,
    )
