"""tree-sitter based Java source parser adapter.

Implements SourceParserPort with tree-sitter-java. The concrete syntax tree
is converted into the domain tree: every byte of the source ends up in a
leaf prefix, a leaf text, or the unit's trailing text, so printing the
result reproduces the input exactly.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import tree_sitter_java as tsjava
from tree_sitter import Language, Parser

from staticize.domain.exceptions.parsing import ParsingError, SyntaxTreeError
from staticize.domain.model.tree import (
    CLASS_BODY,
    MODIFIER_KEYWORDS,
    Annotation,
    ClassDeclaration,
    ClassKind,
    CompilationUnit,
    Identifier,
    MethodDeclaration,
    Modifier,
    Modifiers,
    Node,
    Token,
    VariableDeclarations,
)
from staticize.domain.ports.source_parser import SourceParserPort

if TYPE_CHECKING:
    from tree_sitter import Node as SyntaxNode

    from staticize.domain.model.tree import Tree

JAVA_LANGUAGE = Language(tsjava.language())

_CLASS_KINDS = {
    "class_declaration": ClassKind.CLASS,
    "interface_declaration": ClassKind.INTERFACE,
    "enum_declaration": ClassKind.ENUM,
    "record_declaration": ClassKind.RECORD,
    "annotation_type_declaration": ClassKind.ANNOTATION,
}
_CLASS_BODIES = frozenset({"class_body", "interface_body", "enum_body", "annotation_type_body"})
_METHOD_KINDS = frozenset({"method_declaration", "constructor_declaration", "compact_constructor_declaration"})
_VARIABLE_KINDS = frozenset({"field_declaration", "constant_declaration", "local_variable_declaration"})
_ANNOTATION_KINDS = frozenset({"marker_annotation", "annotation"})
_REFERENCE_KINDS = frozenset({"identifier", "this", "super"})
# Constructs whose local classes have no resolvable qualified name
_LOCAL_SCOPES = frozenset({"block", "constructor_body", "lambda_expression"})


class TreeSitterJavaParser(SourceParserPort):
    """Parser using tree-sitter-java to build the domain tree.

    Stateless between parse() calls.

    FAIL-FIRST: raises ParsingError on unreadable files and SyntaxTreeError
    on any syntax error reported by tree-sitter.
    """

    def __init__(self) -> None:
        self._parser = Parser(JAVA_LANGUAGE)

    def parse(self, source: str, label: str = "<string>") -> CompilationUnit:
        """Parse Java source text.

        Args:
            source: Java source
            label: Name used in error messages

        Returns:
            CompilationUnit

        Raises:
            TypeError: If source is not a string (FAIL-FIRST)
            SyntaxTreeError: If the source has syntax errors
        """
        if not isinstance(source, str):
            raise TypeError(f"source must be str, got {type(source).__name__}")

        data = source.encode("utf-8")
        syntax_tree = self._parser.parse(data)
        root = syntax_tree.root_node

        if root.has_error:
            raise _syntax_error(root, label)

        return _TreeBuilder(data, label).build(root)

    def parse_file(self, path: Path) -> CompilationUnit:
        """Parse single Java file.

        FAIL-FIRST: raises ParsingError on file errors, syntax errors.

        Args:
            path: Path to .java file

        Returns:
            CompilationUnit

        Raises:
            ParsingError: If file cannot be read or parsed
        """
        try:
            source = Path(path).read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise ParsingError(str(path), "file not found") from e
        except PermissionError as e:
            raise ParsingError(str(path), "permission denied") from e
        except UnicodeDecodeError as e:
            raise ParsingError(str(path), f"encoding error: {e}") from e

        return self.parse(source, str(path))


class _TreeBuilder:
    """One-shot converter from a tree-sitter tree to the domain tree.

    Keeps a byte cursor: the text between the previous leaf and the next
    one becomes the next leaf's prefix.
    """

    def __init__(self, source: bytes, label: str) -> None:
        self._source = source
        self._label = label
        self._pos = 0
        self._package: str | None = None
        self._owners: list[str | None] = []
        self._local_depth = 0

    def build(self, root: SyntaxNode) -> CompilationUnit:
        children = self._children(root)
        eof = self._text(self._pos, len(self._source))
        self._pos = len(self._source)
        return CompilationUnit(children=children, package=self._package, eof=eof)

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    def _convert(self, node: SyntaxNode) -> Tree:
        kind = node.type

        if kind in _CLASS_KINDS:
            return self._class(node, _CLASS_KINDS[kind])
        if kind == "class_body":
            # Declared class bodies are handled by _class; this one is anonymous
            return self._anonymous(node)
        if kind in _METHOD_KINDS:
            return self._method(node)
        if kind in _VARIABLE_KINDS:
            return self._variables(node)
        if kind == "modifiers":
            return self._modifiers(node)
        if kind in _ANNOTATION_KINDS:
            return self._annotation(node)
        if kind == "package_declaration":
            self._package = _package_name(node)
        if node.child_count == 0:
            return self._leaf(node)

        if kind in _LOCAL_SCOPES:
            self._local_depth += 1
            try:
                return Node(kind=kind, children=self._children(node))
            finally:
                self._local_depth -= 1

        return Node(kind=kind, children=self._children(node))

    def _children(self, node: SyntaxNode) -> tuple[Tree, ...]:
        children = [self._convert(child) for child in node.children]
        children.extend(self._trailing(node.end_byte))
        return tuple(children)

    # -------------------------------------------------------------------------
    # Declarations
    # -------------------------------------------------------------------------

    def _class(self, node: SyntaxNode, kind: ClassKind) -> ClassDeclaration:
        name_node = node.child_by_field_name("name")
        if name_node is None:
            raise self._error(node, "type without name")

        name = self._slice(name_node)
        qualified_name = self._qualify(name)
        components = _record_components(node, self._source) if kind is ClassKind.RECORD else ()

        children: list[Tree] = []
        self._owners.append(qualified_name)
        saved_depth, self._local_depth = self._local_depth, 0
        try:
            for child in node.children:
                if _same(child, name_node):
                    children.append(self._token(child))
                elif child.type in _CLASS_BODIES:
                    children.append(Node(kind=CLASS_BODY, children=self._children(child)))
                else:
                    children.append(self._convert(child))
            children.extend(self._trailing(node.end_byte))
        finally:
            self._owners.pop()
            self._local_depth = saved_depth

        return ClassDeclaration(
            kind=kind,
            name=name,
            qualified_name=qualified_name,
            children=tuple(children),
            record_components=components,
        )

    def _anonymous(self, node: SyntaxNode) -> ClassDeclaration:
        self._owners.append(None)
        saved_depth, self._local_depth = self._local_depth, 0
        try:
            body = Node(kind=CLASS_BODY, children=self._children(node))
        finally:
            self._owners.pop()
            self._local_depth = saved_depth

        return ClassDeclaration(kind=ClassKind.ANONYMOUS, name=None, qualified_name=None, children=(body,))

    def _method(self, node: SyntaxNode) -> MethodDeclaration:
        name_node = node.child_by_field_name("name")
        if name_node is None:
            raise self._error(node, "method without name")

        children: list[Tree] = []
        for child in node.children:
            if _same(child, name_node):
                children.append(self._token(child))
            else:
                children.append(self._convert(child))
        children.extend(self._trailing(node.end_byte))

        return MethodDeclaration(name=self._slice(name_node), children=tuple(children))

    def _variables(self, node: SyntaxNode) -> VariableDeclarations:
        names: list[str] = []
        for child in node.named_children:
            if child.type == "variable_declarator":
                name_node = child.child_by_field_name("name")
                if name_node is not None:
                    names.append(self._slice(name_node))

        return VariableDeclarations(names=tuple(names), children=self._children(node))

    def _modifiers(self, node: SyntaxNode) -> Modifiers:
        children: list[Tree] = []
        for child in node.children:
            if child.child_count == 0 and self._slice(child) in MODIFIER_KEYWORDS:
                prefix = self._text(self._pos, child.start_byte)
                children.append(Modifier(keyword=self._slice(child), prefix=prefix))
                self._pos = child.end_byte
            else:
                children.append(self._convert(child))
        children.extend(self._trailing(node.end_byte))
        return Modifiers(children=tuple(children))

    def _annotation(self, node: SyntaxNode) -> Annotation:
        name_node = node.child_by_field_name("name")
        name = self._slice(name_node).rsplit(".", 1)[-1] if name_node is not None else ""
        return Annotation(name=name, children=self._children(node))

    # -------------------------------------------------------------------------
    # Leaves
    # -------------------------------------------------------------------------

    def _leaf(self, node: SyntaxNode) -> Tree:
        if node.type in _REFERENCE_KINDS:
            prefix = self._text(self._pos, node.start_byte)
            self._pos = node.end_byte
            return Identifier(name=self._slice(node), prefix=prefix)
        return self._token(node)

    def _token(self, node: SyntaxNode) -> Token:
        prefix = self._text(self._pos, node.start_byte)
        self._pos = node.end_byte
        return Token(text=self._slice(node), prefix=prefix)

    def _trailing(self, end: int) -> list[Tree]:
        """Text inside a node that no child covers."""
        if self._pos >= end:
            return []
        chunk = self._text(self._pos, end)
        self._pos = end
        text = chunk.lstrip()
        return [Token(text=text, prefix=chunk[: len(chunk) - len(text)])]

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _qualify(self, name: str) -> str | None:
        if self._local_depth > 0:
            return None
        if self._owners:
            outer = self._owners[-1]
            return f"{outer}${name}" if outer is not None else None
        return f"{self._package}.{name}" if self._package else name

    def _error(self, node: SyntaxNode, reason: str) -> SyntaxTreeError:
        return SyntaxTreeError(self._label, node.start_point[0] + 1, node.start_point[1], reason)

    def _slice(self, node: SyntaxNode) -> str:
        return self._text(node.start_byte, node.end_byte)

    def _text(self, start: int, end: int) -> str:
        return self._source[start:end].decode("utf-8")


def _same(a: SyntaxNode, b: SyntaxNode) -> bool:
    return a.type == b.type and a.start_byte == b.start_byte and a.end_byte == b.end_byte


def _package_name(node: SyntaxNode) -> str | None:
    for child in node.named_children:
        if child.type in ("scoped_identifier", "identifier") and child.text is not None:
            return child.text.decode("utf-8")
    return None


def _record_components(node: SyntaxNode, source: bytes) -> tuple[str, ...]:
    parameters = node.child_by_field_name("parameters")
    if parameters is None:
        return ()

    names: list[str] = []
    for child in parameters.named_children:
        if child.type == "formal_parameter":
            name_node = child.child_by_field_name("name")
            if name_node is not None:
                names.append(source[name_node.start_byte : name_node.end_byte].decode("utf-8"))
    return tuple(names)


def _syntax_error(root: SyntaxNode, label: str) -> SyntaxTreeError:
    """Locate the first ERROR or MISSING node."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            row, column = node.start_point[0], node.start_point[1]
            reason = f"missing '{node.type}'" if node.is_missing else "syntax error"
            return SyntaxTreeError(label, row + 1, column, reason)
        stack.extend(reversed(node.children))
    return SyntaxTreeError(label, 1, 0, "syntax error")
