"""Per-class scope: instance fields and method records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from staticize.domain.model.tree import ClassKind, MethodDeclaration, Node


@dataclass(frozen=True, slots=True)
class MethodRecord:
    """Method metadata read once from a class declaration.

    Attributes:
        index: Member position inside the class body (identity among overloads)
        name: Simple method name
        modifiers: Keyword modifiers in source order
        annotations: Annotation simple names in source order
        body: Method body, None when bodiless
        is_constructor: Name equals enclosing class simple name
        is_override: Carries an override annotation
        is_abstract: Has ``abstract`` modifier or no body
        is_static: Has ``static`` modifier
        is_default: Interface default method
        node: Source declaration
    """

    index: int
    name: str
    modifiers: tuple[str, ...]
    annotations: tuple[str, ...]
    body: Node | None
    is_constructor: bool
    is_override: bool
    is_abstract: bool
    is_static: bool
    is_default: bool
    node: MethodDeclaration

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.index < 0:
            raise ValueError(f"index must be >= 0, got {self.index}")
        if not self.name:
            raise ValueError("method name must not be empty")
        if self.is_static != ("static" in self.modifiers):
            raise ValueError(f"is_static contradicts modifiers {self.modifiers}")


@dataclass(slots=True)
class ClassScope:
    """Declared members of one class.

    Built once per analysis run. ``instance_fields`` is fixed after
    construction; ``non_static_methods`` only shrinks, as methods are
    proven eligible.

    Attributes:
        name: Simple class name (None for anonymous classes)
        qualified_name: Fully qualified name, None when unresolvable
        kind: Declaration kind
        instance_fields: Names of non-static class-level fields
        methods: Method records in declaration order
        non_static_methods: Names of methods not (yet) static
        nested: Scopes of member classes, never merged into this one
        promoted: Indices of methods proven eligible
        is_inner: Non-static member class, bound to an enclosing instance
    """

    name: str | None
    qualified_name: str | None
    kind: ClassKind
    instance_fields: frozenset[str] = frozenset()
    methods: tuple[MethodRecord, ...] = ()
    non_static_methods: set[str] = field(default_factory=set)
    nested: tuple[ClassScope, ...] = ()
    promoted: set[int] = field(default_factory=set)
    is_inner: bool = False

    def is_instance_field(self, name: str) -> bool:
        return name in self.instance_fields

    def is_non_static_method(self, name: str) -> bool:
        return name in self.non_static_methods

    def declares_method(self, name: str) -> bool:
        return any(m.name == name for m in self.methods)

    @property
    def inner_classes(self) -> frozenset[str]:
        """Simple names of member classes that need an enclosing instance."""
        return frozenset(s.name for s in self.nested if s.is_inner and s.name)

    def record_at(self, index: int) -> MethodRecord:
        """Get method record by member index.

        Raises:
            KeyError: If no method is declared at that index
        """
        for record in self.methods:
            if record.index == index:
                return record
        raise KeyError(f"no method at member index {index} in {self.qualified_name}")

    def mark_static(self, record: MethodRecord) -> None:
        """Remove a method proven eligible from the non-static set.

        An overloaded name stays while another non-static, non-constructor
        overload has not been promoted.

        Args:
            record: Method just proven eligible

        Raises:
            ValueError: If record does not belong to this scope or is
                already static (FAIL-FIRST)
        """
        try:
            owned = self.record_at(record.index)
        except KeyError as e:
            raise ValueError(f"method '{record.name}' is not declared in {self.qualified_name}") from e
        if owned is not record:
            raise ValueError(f"method '{record.name}' is not declared in {self.qualified_name}")
        if record.is_static:
            raise ValueError(f"method '{record.name}' is already static")

        self.promoted.add(record.index)
        remaining = [
            m
            for m in self.methods
            if m.name == record.name
            and not m.is_static
            and not m.is_constructor
            and m.index not in self.promoted
        ]
        if not remaining:
            self.non_static_methods.discard(record.name)

    def find_nested(self, qualified_name: str) -> ClassScope | None:
        """Find a member class scope at any depth."""
        for scope in self.nested:
            if scope.qualified_name == qualified_name:
                return scope
            found = scope.find_nested(qualified_name)
            if found is not None:
                return found
        return None
