"""Java syntax tree: closed set of immutable node variants.

Leaves keep their leading whitespace in ``prefix``. Printing a tree is the
in-order concatenation of ``prefix + text`` over its leaves, so a tree built
by the parser prints back to the exact source.

Composite nodes keep children in source order. Updates always build new
nodes (``with_children``, ``dataclasses.replace``); nothing is mutated.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, replace
from enum import Enum

# Construct kinds the domain needs to recognize inside generic nodes
CLASS_BODY = "class_body"
ENUM_BODY_DECLARATIONS = "enum_body_declarations"
BODY_KINDS = frozenset({"block", "constructor_body"})

# Modifier keywords with meaning for eligibility
STATIC = "static"
ABSTRACT = "abstract"
DEFAULT = "default"

MODIFIER_KEYWORDS = frozenset(
    {
        "public",
        "protected",
        "private",
        "static",
        "final",
        "abstract",
        "default",
        "synchronized",
        "native",
        "transient",
        "volatile",
        "strictfp",
        "sealed",
        "non-sealed",
    }
)


class ClassKind(Enum):
    """Kind of type declaration."""

    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"
    RECORD = "record"
    ANNOTATION = "annotation"
    ANONYMOUS = "anonymous"


# =============================================================================
# LEAVES
# =============================================================================


@dataclass(frozen=True, slots=True)
class Token:
    """Any leaf with no analysis meaning (keyword, punctuation, literal, comment).

    Attributes:
        text: Token text
        prefix: Whitespace preceding the token
    """

    text: str
    prefix: str = ""


@dataclass(frozen=True, slots=True)
class Identifier:
    """Simple-name reference. ``this`` and ``super`` are identifiers too.

    Attributes:
        name: Literal name
        prefix: Whitespace preceding the name
    """

    name: str
    prefix: str = ""

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("identifier name must not be empty")


@dataclass(frozen=True, slots=True)
class Modifier:
    """Keyword modifier (``public``, ``static``, ...).

    Attributes:
        keyword: Modifier keyword
        prefix: Whitespace preceding the keyword
    """

    keyword: str
    prefix: str = ""

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.keyword:
            raise ValueError("modifier keyword must not be empty")


# =============================================================================
# COMPOSITES
# =============================================================================


@dataclass(frozen=True, slots=True)
class Annotation:
    """Annotation usage such as ``@Override``.

    Attributes:
        name: Simple annotation name (last segment of a qualified name)
        children: Annotation tokens in source order
    """

    name: str
    children: tuple[Tree, ...] = ()

    def with_children(self, children: tuple[Tree, ...]) -> Annotation:
        return replace(self, children=children)


@dataclass(frozen=True, slots=True)
class Modifiers:
    """Ordered modifier list: keyword modifiers and annotations."""

    children: tuple[Tree, ...] = ()

    @property
    def keywords(self) -> tuple[str, ...]:
        """Keyword modifiers in source order."""
        return tuple(child.keyword for child in self.children if isinstance(child, Modifier))

    @property
    def annotation_names(self) -> tuple[str, ...]:
        """Simple names of annotations in source order."""
        return tuple(child.name for child in self.children if isinstance(child, Annotation))

    def has(self, keyword: str) -> bool:
        """Check if keyword modifier is present."""
        return keyword in self.keywords

    def appended(self, item: Modifier | Annotation) -> Modifiers:
        """Return new list with item added at the end."""
        return Modifiers(children=(*self.children, item))

    def with_children(self, children: tuple[Tree, ...]) -> Modifiers:
        return replace(self, children=children)


@dataclass(frozen=True, slots=True)
class VariableDeclarations:
    """Field, constant or local variable declaration.

    Attributes:
        names: Declared variable names in source order
        children: Declaration nodes in source order
    """

    names: tuple[str, ...]
    children: tuple[Tree, ...] = ()

    @property
    def modifiers(self) -> Modifiers | None:
        return _first_modifiers(self.children)

    @property
    def is_static(self) -> bool:
        modifiers = self.modifiers
        return modifiers is not None and modifiers.has(STATIC)

    def with_children(self, children: tuple[Tree, ...]) -> VariableDeclarations:
        return replace(self, children=children)


@dataclass(frozen=True, slots=True)
class MethodDeclaration:
    """Method or constructor declaration.

    The declared name is kept as a Token among the children; it is a
    declaration, not a reference.

    Attributes:
        name: Simple method name
        children: Declaration nodes in source order
    """

    name: str
    children: tuple[Tree, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("method name must not be empty")

    @property
    def modifiers(self) -> Modifiers | None:
        return _first_modifiers(self.children)

    @property
    def modifier_keywords(self) -> tuple[str, ...]:
        modifiers = self.modifiers
        return modifiers.keywords if modifiers is not None else ()

    @property
    def annotation_names(self) -> tuple[str, ...]:
        modifiers = self.modifiers
        return modifiers.annotation_names if modifiers is not None else ()

    @property
    def body(self) -> Node | None:
        """Method body block, None for abstract/native/interface methods."""
        for child in self.children:
            if isinstance(child, Node) and child.kind in BODY_KINDS:
                return child
        return None

    @property
    def is_static(self) -> bool:
        return STATIC in self.modifier_keywords

    @property
    def is_abstract(self) -> bool:
        return ABSTRACT in self.modifier_keywords or self.body is None

    @property
    def is_default(self) -> bool:
        return DEFAULT in self.modifier_keywords

    def with_children(self, children: tuple[Tree, ...]) -> MethodDeclaration:
        return replace(self, children=children)

    def with_modifiers(self, modifiers: Modifiers) -> MethodDeclaration:
        """Replace the modifier list, or insert one in front if absent."""
        for i, child in enumerate(self.children):
            if isinstance(child, Modifiers):
                return self.with_children((*self.children[:i], modifiers, *self.children[i + 1 :]))
        return self.with_children((modifiers, *self.children))


@dataclass(frozen=True, slots=True)
class ClassDeclaration:
    """Type declaration: class, interface, enum, record, annotation or anonymous body.

    Attributes:
        kind: Declaration kind
        name: Simple name (None for anonymous classes)
        qualified_name: ``package.Outer$Inner`` for member classes,
            None for anonymous and method-local classes
        children: Declaration nodes in source order
        record_components: Record component names (records only)
    """

    kind: ClassKind
    name: str | None
    qualified_name: str | None
    children: tuple[Tree, ...] = ()
    record_components: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.kind is ClassKind.ANONYMOUS and self.name is not None:
            raise ValueError("anonymous class must not have a name")
        if self.kind is not ClassKind.ANONYMOUS and not self.name:
            raise ValueError(f"{self.kind.value} declaration requires a name")
        if self.record_components and self.kind is not ClassKind.RECORD:
            raise ValueError("record_components only allowed on records")

    @property
    def modifiers(self) -> Modifiers | None:
        return _first_modifiers(self.children)

    @property
    def body(self) -> Node | None:
        for child in self.children:
            if isinstance(child, Node) and child.kind == CLASS_BODY:
                return child
        return None

    @property
    def members(self) -> Iterator[Tree]:
        """Direct members in declaration order.

        Enum body declarations are flattened into the enum's members.
        """
        body = self.body
        if body is None:
            return
        for child in body.children:
            if isinstance(child, Node) and child.kind == ENUM_BODY_DECLARATIONS:
                yield from child.children
            else:
                yield child

    def with_children(self, children: tuple[Tree, ...]) -> ClassDeclaration:
        return replace(self, children=children)


@dataclass(frozen=True, slots=True)
class Node:
    """Any other construct (statement, expression, block, body, ...).

    Attributes:
        kind: Construct name
        children: Child nodes in source order
    """

    kind: str
    children: tuple[Tree, ...] = ()

    def with_children(self, children: tuple[Tree, ...]) -> Node:
        return replace(self, children=children)


@dataclass(frozen=True, slots=True)
class CompilationUnit:
    """Root of a parsed source file.

    Attributes:
        children: Top-level nodes in source order
        package: Declared package name, None for the default package
        eof: Trailing text after the last node
    """

    children: tuple[Tree, ...] = ()
    package: str | None = None
    eof: str = ""

    @property
    def classes(self) -> tuple[ClassDeclaration, ...]:
        """Top-level type declarations."""
        return tuple(child for child in self.children if isinstance(child, ClassDeclaration))

    def with_children(self, children: tuple[Tree, ...]) -> CompilationUnit:
        return replace(self, children=children)


Leaf = Token | Identifier | Modifier
Composite = Annotation | Modifiers | VariableDeclarations | MethodDeclaration | ClassDeclaration | Node
Tree = Leaf | Composite


# =============================================================================
# ALGORITHMS - Pure functions over the closed set of variants
# =============================================================================


def _first_modifiers(children: tuple[Tree, ...]) -> Modifiers | None:
    for child in children:
        if isinstance(child, Modifiers):
            return child
    return None


def map_members(
    decl: ClassDeclaration,
    transform: Callable[[int, Tree], Tree],
) -> ClassDeclaration:
    """Rebuild a class with each direct member passed through ``transform``.

    Members are numbered exactly as ``ClassDeclaration.members`` yields
    them. When ``transform`` returns every member unchanged (same object),
    the input declaration is returned.

    Args:
        decl: Class declaration
        transform: Called with (member index, member), returns the new member

    Returns:
        Rebuilt declaration, or decl itself when nothing changed
    """
    body = decl.body
    if body is None:
        return decl

    index = 0

    def apply(child: Tree) -> Tree:
        nonlocal index
        updated = transform(index, child)
        index += 1
        return updated

    children: list[Tree] = []
    for child in body.children:
        if isinstance(child, Node) and child.kind == ENUM_BODY_DECLARATIONS:
            inner = tuple(apply(c) for c in child.children)
            changed = any(a is not b for a, b in zip(inner, child.children, strict=True))
            children.append(child.with_children(inner) if changed else child)
        else:
            children.append(apply(child))

    if all(a is b for a, b in zip(children, body.children, strict=True)):
        return decl

    new_body = body.with_children(tuple(children))
    return decl.with_children(tuple(new_body if c is body else c for c in decl.children))


def iter_leaves(tree: Tree | CompilationUnit) -> Iterator[Leaf]:
    """Yield leaves in source order.

    Args:
        tree: Any node

    Yields:
        Token, Identifier and Modifier leaves depth-first, left to right
    """
    stack: list[Tree] = [tree] if not isinstance(tree, CompilationUnit) else list(reversed(tree.children))
    while stack:
        node = stack.pop()
        match node:
            case Token() | Identifier() | Modifier():
                yield node
            case _:
                stack.extend(reversed(node.children))


def leading_prefix(tree: Tree) -> str:
    """Whitespace before the first leaf of a subtree ("" for empty subtrees)."""
    for leaf in iter_leaves(tree):
        return leaf.prefix
    return ""


def with_leading_prefix(tree: Tree, prefix: str) -> Tree:
    """Return subtree whose first leaf carries the given prefix.

    Args:
        tree: Any node
        prefix: Replacement whitespace

    Returns:
        New subtree (same object if it has no leaves)
    """
    match tree:
        case Token() | Identifier() | Modifier():
            return replace(tree, prefix=prefix)
        case _:
            for i, child in enumerate(tree.children):
                if any(True for _ in iter_leaves(child)):
                    updated = with_leading_prefix(child, prefix)
                    return tree.with_children((*tree.children[:i], updated, *tree.children[i + 1 :]))
            return tree
