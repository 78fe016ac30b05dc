"""Tests for application/analysis/rewriter.py."""

import pytest

from staticize.application.analysis.rewriter import promote, rewrite_class
from staticize.domain.model.tree import (
    Annotation,
    Identifier,
    MethodDeclaration,
    Modifiers,
    Node,
    Token,
)
from staticize.domain.model.verdict import IneligibilityReason, MethodState, Verdict
from staticize.infrastructure.adapters.printer import print_tree
from tests.factories import INDENT, make_class, make_field, make_method


def _annotated_on_own_line() -> MethodDeclaration:
    annotation = Annotation(name="Deprecated", children=(Token("@", INDENT), Identifier("Deprecated")))
    return MethodDeclaration(
        name="f",
        children=(
            Modifiers(children=(annotation,)),
            Token("void", INDENT),
            Token("f", " "),
            Node(kind="formal_parameters", children=(Token("("), Token(")"))),
            Node(kind="block", children=(Token("{", " "), Token("}", " "))),
        ),
    )


class TestPromote:
    """Tests for promote()."""

    def test_appends_after_keywords(self) -> None:
        method = make_method("f", modifiers=("private", "final"))
        promoted = promote(method, True)
        assert promoted.modifier_keywords == ("private", "final", "static")
        assert print_tree(promoted) == "\n    private final static void f() { }"

    def test_no_modifiers_takes_indentation(self) -> None:
        method = make_method("f", modifiers=())
        assert print_tree(method) == "\n    void f() { }"

        promoted = promote(method, True)

        assert promoted.is_static is True
        assert print_tree(promoted) == "\n    static void f() { }"

    def test_annotation_on_own_line_stays(self) -> None:
        promoted = promote(_annotated_on_own_line(), True)
        assert print_tree(promoted) == "\n    @Deprecated\n    static void f() { }"

    def test_inline_annotation(self) -> None:
        method = make_method("f", modifiers=(), annotations=("Deprecated",))
        promoted = promote(method, True)
        assert print_tree(promoted) == "\n    @Deprecated static void f() { }"

    def test_ineligible_verdict_returns_same_object(self) -> None:
        method = make_method("f")
        verdict = Verdict(
            index=1,
            name="f",
            state=MethodState.INELIGIBLE,
            reasons=(IneligibilityReason.INSTANCE_FIELD,),
        )
        assert promote(method, verdict) is method
        assert promote(method, False) is method

    def test_eligible_verdict(self) -> None:
        method = make_method("f")
        verdict = Verdict(index=1, name="f", state=MethodState.ELIGIBLE)
        assert promote(method, verdict).is_static is True

    def test_input_untouched(self) -> None:
        method = make_method("f")
        promote(method, True)
        assert method.is_static is False


class TestRewriteClass:
    """Tests for rewrite_class()."""

    def test_promotes_selected_members(self) -> None:
        decl = make_class("A", make_method("f"), make_method("g"))
        members = list(decl.members)
        f_index = members.index(decl.body.children[1])

        rewritten = rewrite_class(decl, {f_index})
        methods = [m for m in rewritten.members if isinstance(m, MethodDeclaration)]

        assert [m.is_static for m in methods] == [True, False]

    def test_no_indices_returns_same_object(self) -> None:
        decl = make_class("A", make_method("f"))
        assert rewrite_class(decl, ()) is decl

    def test_non_method_index_raises(self) -> None:
        decl = make_class("A", make_field("x"))
        with pytest.raises(ValueError, match="member 1 of com.yourorg.A is not a method"):
            rewrite_class(decl, {1})

    def test_missing_index_raises(self) -> None:
        decl = make_class("A", make_method("f"))
        with pytest.raises(ValueError, match=r"no members at indices \[42\]"):
            rewrite_class(decl, {42})
