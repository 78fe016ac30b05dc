"""Tests for domain/model/tree.py."""

import pytest

from staticize.domain.model.tree import (
    ENUM_BODY_DECLARATIONS,
    ClassDeclaration,
    ClassKind,
    Identifier,
    MethodDeclaration,
    Modifier,
    Modifiers,
    Node,
    Token,
    VariableDeclarations,
    iter_leaves,
    leading_prefix,
    map_members,
    with_leading_prefix,
)
from tests.factories import make_class, make_field, make_method, make_unit


class TestLeaves:
    """Tests for leaf validation."""

    def test_identifier_requires_name(self) -> None:
        with pytest.raises(ValueError, match="identifier name must not be empty"):
            Identifier("")

    def test_modifier_requires_keyword(self) -> None:
        with pytest.raises(ValueError, match="modifier keyword must not be empty"):
            Modifier("")

    def test_token_may_be_empty(self) -> None:
        assert Token("", "\n").text == ""

    def test_is_frozen(self) -> None:
        token = Token("x")
        with pytest.raises(AttributeError):
            token.text = "y"  # type: ignore[misc]


class TestModifiers:
    """Tests for Modifiers queries."""

    def test_keywords_and_annotations(self) -> None:
        method = make_method("f", modifiers=("public", "final"), annotations=("Override", "Deprecated"))
        assert method.modifier_keywords == ("public", "final")
        assert method.annotation_names == ("Override", "Deprecated")

    def test_appended_returns_new_list(self) -> None:
        mods = Modifiers(children=(Modifier("private"),))
        longer = mods.appended(Modifier("static", " "))
        assert mods.keywords == ("private",)
        assert longer.keywords == ("private", "static")
        assert longer.has("static")


class TestMethodDeclaration:
    """Tests for MethodDeclaration properties."""

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="method name must not be empty"):
            MethodDeclaration(name="")

    def test_body_found(self) -> None:
        method = make_method("f", "x")
        assert method.body is not None
        assert method.body.kind == "block"
        assert method.is_abstract is False

    def test_bodiless_is_abstract(self) -> None:
        method = make_method("f", bodiless=True)
        assert method.body is None
        assert method.is_abstract is True

    def test_static_and_default_flags(self) -> None:
        assert make_method("f", modifiers=("static",)).is_static is True
        assert make_method("f", modifiers=("default",)).is_default is True
        assert make_method("f").is_static is False

    def test_no_modifiers(self) -> None:
        method = make_method("f", modifiers=())
        assert method.modifiers is None
        assert method.modifier_keywords == ()
        assert method.annotation_names == ()

    def test_with_modifiers_inserts_when_absent(self) -> None:
        method = make_method("f", modifiers=())
        updated = method.with_modifiers(Modifiers(children=(Modifier("static"),)))
        assert isinstance(updated.children[0], Modifiers)
        assert updated.is_static is True

    def test_with_modifiers_replaces_existing(self) -> None:
        method = make_method("f", modifiers=("private",))
        updated = method.with_modifiers(Modifiers(children=(Modifier("public"),)))
        assert updated.modifier_keywords == ("public",)
        assert len(updated.children) == len(method.children)


class TestVariableDeclarations:
    """Tests for VariableDeclarations."""

    def test_names_and_static(self) -> None:
        assert make_field("a", "b").names == ("a", "b")
        assert make_field("a").is_static is False
        assert make_field("a", static=True).is_static is True

    def test_without_modifiers_is_not_static(self) -> None:
        decl = VariableDeclarations(names=("x",), children=(Token("int"), Identifier("x", " "), Token(";")))
        assert decl.modifiers is None
        assert decl.is_static is False


class TestClassDeclaration:
    """Tests for ClassDeclaration validation and members."""

    def test_anonymous_with_name_raises(self) -> None:
        with pytest.raises(ValueError, match="anonymous class must not have a name"):
            ClassDeclaration(kind=ClassKind.ANONYMOUS, name="A", qualified_name=None)

    def test_named_kind_requires_name(self) -> None:
        with pytest.raises(ValueError, match="class declaration requires a name"):
            ClassDeclaration(kind=ClassKind.CLASS, name=None, qualified_name=None)

    def test_record_components_only_on_records(self) -> None:
        with pytest.raises(ValueError, match="record_components only allowed on records"):
            ClassDeclaration(kind=ClassKind.CLASS, name="A", qualified_name="A", record_components=("x",))

    def test_members_in_order(self) -> None:
        field = make_field("x")
        method = make_method("f")
        decl = make_class("A", field, method)
        members = list(decl.members)
        assert members[1] is field
        assert members[2] is method

    def test_members_flatten_enum_declarations(self) -> None:
        method = make_method("f")
        decls = Node(kind=ENUM_BODY_DECLARATIONS, children=(Token(";"), method))
        decl = make_class("E", Token("RED", " "), decls, kind=ClassKind.ENUM)
        assert method in list(decl.members)

    def test_no_body_has_no_members(self) -> None:
        decl = ClassDeclaration(kind=ClassKind.CLASS, name="A", qualified_name="A")
        assert list(decl.members) == []


class TestMapMembers:
    """Tests for map_members()."""

    def test_identity_when_unchanged(self) -> None:
        decl = make_class("A", make_method("f"))
        assert map_members(decl, lambda _, member: member) is decl

    def test_transform_receives_member_indices(self) -> None:
        decl = make_class("A", make_field("x"), make_method("f"))
        seen: list[int] = []

        def record(index: int, member):
            seen.append(index)
            return member

        map_members(decl, record)
        assert seen == list(range(len(list(decl.members))))

    def test_rebuilds_changed_member(self) -> None:
        method = make_method("f")
        decl = make_class("A", method)
        replacement = make_method("g")

        updated = map_members(decl, lambda _, m: replacement if m is method else m)

        assert updated is not decl
        assert replacement in list(updated.members)
        assert method in list(decl.members)

    def test_enum_declarations_indexed_like_members(self) -> None:
        method = make_method("f")
        decls = Node(kind=ENUM_BODY_DECLARATIONS, children=(Token(";"), method))
        decl = make_class("E", Token("RED", " "), decls, kind=ClassKind.ENUM)
        index = list(decl.members).index(method)
        replacement = make_method("g")

        updated = map_members(decl, lambda i, m: replacement if i == index else m)

        assert list(updated.members)[index] is replacement


class TestLeafHelpers:
    """Tests for iter_leaves(), leading_prefix(), with_leading_prefix()."""

    def test_iter_leaves_source_order(self) -> None:
        node = Node(kind="x", children=(Token("a"), Node(kind="y", children=(Identifier("b"),)), Modifier("c")))
        assert [type(leaf).__name__ for leaf in iter_leaves(node)] == ["Token", "Identifier", "Modifier"]

    def test_iter_leaves_of_unit(self) -> None:
        unit = make_unit(make_class("A"))
        assert next(iter(iter_leaves(unit))) == Token("class", "\n")

    def test_leading_prefix(self) -> None:
        node = Node(kind="x", children=(Node(kind="empty"), Token("a", "  ")))
        assert leading_prefix(node) == "  "
        assert leading_prefix(Node(kind="empty")) == ""

    def test_with_leading_prefix_skips_empty_children(self) -> None:
        node = Node(kind="x", children=(Node(kind="empty"), Token("a", "  "), Token("b", " ")))
        updated = with_leading_prefix(node, "\n")
        assert leading_prefix(updated) == "\n"
        assert updated.children[2] == Token("b", " ")

    def test_with_leading_prefix_on_empty_tree(self) -> None:
        node = Node(kind="empty")
        assert with_leading_prefix(node, " ") is node
