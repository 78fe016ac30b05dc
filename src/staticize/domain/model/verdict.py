"""Eligibility analysis results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from staticize.domain.model.tree import CompilationUnit


class MethodState(Enum):
    """Candidate lifecycle inside the closure loop."""

    UNVISITED = auto()
    VISITING = auto()  # walked, assumed eligible until the fixed point
    ELIGIBLE = auto()
    INELIGIBLE = auto()

    @property
    def is_resolved(self) -> bool:
        return self in (MethodState.ELIGIBLE, MethodState.INELIGIBLE)


class IneligibilityReason(Enum):
    """Why a method keeps its instance binding."""

    # Excluded before any walk
    CONSTRUCTOR = "constructor"
    OVERRIDE = "override annotation"
    ABSTRACT = "abstract or bodiless"
    ALREADY_STATIC = "already static"
    DEFAULT_METHOD = "interface default method"

    # Found by the usage walker
    INSTANCE_FIELD = "uses instance field"
    SUPER_REFERENCE = "references super"
    THIS_REFERENCE = "references this"
    INELIGIBLE_CALL = "calls non-static method"
    INNER_CLASS = "creates inner class instance"


@dataclass(frozen=True, slots=True)
class MethodUsage:
    """Result of walking one method body.

    Attributes:
        instance_fields: Instance field names referenced
        ineligible_calls: Non-static sibling names referenced
        uses_super: ``super`` referenced
        uses_this: ``this`` referenced
        inner_classes: Inner member classes instantiated with an implicit
            enclosing instance
    """

    instance_fields: frozenset[str] = frozenset()
    ineligible_calls: frozenset[str] = frozenset()
    uses_super: bool = False
    uses_this: bool = False
    inner_classes: frozenset[str] = frozenset()

    @property
    def touches_instance_state(self) -> bool:
        return bool(self.instance_fields) or bool(self.inner_classes)

    @property
    def calls_ineligible_method(self) -> bool:
        return bool(self.ineligible_calls) or self.uses_super or self.uses_this

    @property
    def is_eligible(self) -> bool:
        return not self.touches_instance_state and not self.calls_ineligible_method

    def reasons(self) -> tuple[IneligibilityReason, ...]:
        """Reasons in fixed order, empty when eligible."""
        reasons: list[IneligibilityReason] = []
        if self.instance_fields:
            reasons.append(IneligibilityReason.INSTANCE_FIELD)
        if self.uses_super:
            reasons.append(IneligibilityReason.SUPER_REFERENCE)
        if self.uses_this:
            reasons.append(IneligibilityReason.THIS_REFERENCE)
        if self.ineligible_calls:
            reasons.append(IneligibilityReason.INELIGIBLE_CALL)
        if self.inner_classes:
            reasons.append(IneligibilityReason.INNER_CLASS)
        return tuple(reasons)

    def evidence(self) -> tuple[str, ...]:
        """Referenced names that block promotion, sorted."""
        return tuple(sorted(self.instance_fields | self.ineligible_calls | self.inner_classes))


@dataclass(frozen=True, slots=True)
class Verdict:
    """Final decision for one method.

    Attributes:
        index: Member position inside the class body
        name: Method name
        state: ELIGIBLE or INELIGIBLE
        reasons: Why the method stays non-static (empty when eligible)
        evidence: Blocking names (fields, callees, inner classes)
        resolved_in_pass: Closure pass that settled the method (0 = excluded upfront)
    """

    index: int
    name: str
    state: MethodState
    reasons: tuple[IneligibilityReason, ...] = ()
    evidence: tuple[str, ...] = ()
    resolved_in_pass: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.state.is_resolved:
            raise ValueError(f"verdict requires resolved state, got {self.state.name}")

        if self.state is MethodState.ELIGIBLE and self.reasons:
            raise ValueError(f"eligible verdict must not have reasons: {self.reasons}")

        if self.state is MethodState.INELIGIBLE and not self.reasons:
            raise ValueError("ineligible verdict requires at least one reason")

        if self.resolved_in_pass < 0:
            raise ValueError(f"resolved_in_pass must be >= 0, got {self.resolved_in_pass}")

    @property
    def promote(self) -> bool:
        return self.state is MethodState.ELIGIBLE


@dataclass(frozen=True, slots=True)
class ClassReport:
    """Verdicts for one analyzed class.

    Attributes:
        qualified_name: Analyzed class
        verdicts: One verdict per declared method, declaration order
        passes: Closure passes run (including the final quiet pass)
    """

    qualified_name: str
    verdicts: tuple[Verdict, ...] = ()
    passes: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.qualified_name:
            raise ValueError("qualified_name must not be empty")

        indices = [v.index for v in self.verdicts]
        if len(indices) != len(set(indices)):
            raise ValueError(f"duplicate verdicts in {self.qualified_name}")

    @property
    def promoted(self) -> tuple[Verdict, ...]:
        return tuple(v for v in self.verdicts if v.promote)

    @property
    def promoted_indices(self) -> frozenset[int]:
        return frozenset(v.index for v in self.verdicts if v.promote)

    def verdict_for(self, name: str) -> tuple[Verdict, ...]:
        """All verdicts for a method name (several when overloaded)."""
        return tuple(v for v in self.verdicts if v.name == name)


@dataclass(frozen=True, slots=True)
class PromotionResult:
    """Rewritten unit and per-class reports.

    Attributes:
        unit: Rewritten compilation unit (same object when unchanged)
        reports: Reports of analyzed classes, traversal order
    """

    unit: CompilationUnit
    reports: tuple[ClassReport, ...] = ()

    @property
    def changed(self) -> bool:
        return any(report.promoted for report in self.reports)

    @property
    def promoted_count(self) -> int:
        return sum(len(report.promoted) for report in self.reports)
