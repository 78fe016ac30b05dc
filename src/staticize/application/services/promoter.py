"""Promoter service: find the target class, analyze it, rewrite it.

Classes whose qualified name does not match the configuration are only
traversed to reach member classes; they are never analyzed or rewritten.
Their scopes still travel down as the enclosing chain of a nested target.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from staticize.application.analysis.engine import EligibilityEngine
from staticize.application.analysis.rewriter import rewrite_class
from staticize.application.analysis.scope_builder import build_class_scope
from staticize.application.analysis.walker import UsageWalker
from staticize.domain.model.tree import ClassDeclaration, map_members
from staticize.domain.model.verdict import PromotionResult

if TYPE_CHECKING:
    from staticize.domain.model.configuration import PromotionConfig
    from staticize.domain.model.scope import ClassScope
    from staticize.domain.model.tree import CompilationUnit, Tree
    from staticize.domain.model.verdict import ClassReport
    from staticize.domain.ports.tracer import TracerProtocol


class StaticPromoter:
    """Orchestrates scope building, eligibility analysis and rewriting.

    Stateless between run() calls.
    """

    def __init__(
        self,
        config: PromotionConfig,
        tracer: TracerProtocol | None = None,
    ) -> None:
        """Initialize promoter.

        Args:
            config: Run configuration (target class)
            tracer: Progress observer passed to the engine (default: no-op)

        Raises:
            TypeError: If config is None (FAIL-FIRST)
        """
        if config is None:
            raise TypeError("config must not be None")

        self._config = config
        self._engine = EligibilityEngine(UsageWalker(), tracer)

    @property
    def config(self) -> PromotionConfig:
        return self._config

    def run(self, unit: CompilationUnit) -> PromotionResult:
        """Analyze and rewrite the target class in a compilation unit.

        Args:
            unit: Parsed compilation unit

        Returns:
            PromotionResult; its unit is the input object when nothing changed
        """
        reports: list[ClassReport] = []
        children = tuple(self._visit(child, reports) for child in unit.children)

        if all(new is old for new, old in zip(children, unit.children, strict=True)):
            return PromotionResult(unit=unit, reports=tuple(reports))

        return PromotionResult(unit=unit.with_children(children), reports=tuple(reports))

    def _visit(
        self,
        tree: Tree,
        reports: list[ClassReport],
        enclosing: tuple[ClassScope, ...] = (),
    ) -> Tree:
        """Rewrite a top-level or member node.

        Args:
            tree: Node to visit
            reports: Collected reports, appended in traversal order
            enclosing: Scopes of the classes around tree, outermost first
        """
        if not isinstance(tree, ClassDeclaration):
            return tree

        scope = self._scope_of(tree, enclosing)
        if self._config.matches(tree.qualified_name):
            return self._promote(tree, scope, enclosing, reports)

        chain = (*enclosing, scope)
        return map_members(tree, lambda _, member: self._visit(member, reports, chain))

    def _scope_of(self, decl: ClassDeclaration, enclosing: tuple[ClassScope, ...]) -> ClassScope:
        """Member scopes come from the outer scope, built once per top-level class."""
        if enclosing and decl.qualified_name is not None:
            found = enclosing[-1].find_nested(decl.qualified_name)
            if found is not None:
                return found
        return build_class_scope(decl, self._config.override_annotations)

    def _promote(
        self,
        decl: ClassDeclaration,
        scope: ClassScope,
        enclosing: tuple[ClassScope, ...],
        reports: list[ClassReport],
    ) -> ClassDeclaration:
        """Analyze one target class and apply its verdicts."""
        report = self._engine.analyze(scope, enclosing)
        reports.append(report)
        return rewrite_class(decl, report.promoted_indices)
