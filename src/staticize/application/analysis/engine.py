"""Eligibility engine: candidate filtering and the closure loop.

Candidates start optimistically assumed eligible. Each pass walks every
pending candidate in declaration order; a candidate that touches instance
state, or references a sibling that is known to stay non-static, is resolved
INELIGIBLE on the spot and blocks its callers from then on. When a pass
resolves nothing, the remaining candidates are ELIGIBLE.

This is the greatest fixed point: self-recursive methods and clusters of
methods calling only each other are promoted together, while one
field-touching member keeps its whole cluster non-static.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from staticize.application.analysis.walker import UsageWalker
from staticize.domain.model.verdict import (
    ClassReport,
    IneligibilityReason,
    MethodState,
    Verdict,
)
from staticize.domain.ports.tracer import NullTracer

if TYPE_CHECKING:
    from staticize.domain.model.scope import ClassScope, MethodRecord
    from staticize.domain.ports.tracer import TracerProtocol

_PENDING = frozenset({MethodState.UNVISITED, MethodState.VISITING})


def exclusion_reasons(record: MethodRecord) -> tuple[IneligibilityReason, ...]:
    """Reasons that rule a method out before any walk.

    Args:
        record: Method record

    Returns:
        Permanent exclusion reasons, empty for candidates
    """
    reasons: list[IneligibilityReason] = []
    if record.is_static:
        reasons.append(IneligibilityReason.ALREADY_STATIC)
    if record.is_constructor:
        reasons.append(IneligibilityReason.CONSTRUCTOR)
    if record.is_override:
        reasons.append(IneligibilityReason.OVERRIDE)
    if record.is_abstract:
        reasons.append(IneligibilityReason.ABSTRACT)
    if record.is_default:
        reasons.append(IneligibilityReason.DEFAULT_METHOD)
    return tuple(reasons)


class EligibilityEngine:
    """Decides which methods of one class can become static.

    Runs single-threaded over one ClassScope. The scope's
    ``non_static_methods`` set is updated when methods are proven eligible.
    """

    def __init__(
        self,
        walker: UsageWalker | None = None,
        tracer: TracerProtocol | None = None,
    ) -> None:
        """Initialize engine.

        Args:
            walker: Usage walker (default: new UsageWalker)
            tracer: Progress observer (default: NullTracer)
        """
        self._walker = walker or UsageWalker()
        self._tracer: TracerProtocol = tracer or NullTracer()

    def analyze(self, scope: ClassScope, enclosing: Sequence[ClassScope] = ()) -> ClassReport:
        """Run candidate filtering and the closure loop.

        Args:
            scope: Scope of the class under analysis
            enclosing: Scopes of the enclosing classes, outermost first

        Returns:
            ClassReport with one verdict per declared method
        """
        self._tracer.scope_built(scope)

        states: dict[int, MethodState] = {}
        verdicts: dict[int, Verdict] = {}

        for record in scope.methods:
            reasons = exclusion_reasons(record)
            if reasons:
                states[record.index] = MethodState.INELIGIBLE
                verdicts[record.index] = self._resolve(
                    Verdict(
                        index=record.index,
                        name=record.name,
                        state=MethodState.INELIGIBLE,
                        reasons=reasons,
                    )
                )
            else:
                states[record.index] = MethodState.UNVISITED

        passes = 0
        while any(state in _PENDING for state in states.values()):
            passes += 1
            resolved = self._run_pass(scope, enclosing, states, verdicts, passes)
            self._tracer.pass_completed(passes, resolved)
            if not resolved:
                break

        for record in scope.methods:
            if states[record.index] is MethodState.VISITING:
                states[record.index] = MethodState.ELIGIBLE
                scope.mark_static(record)
                verdicts[record.index] = self._resolve(
                    Verdict(
                        index=record.index,
                        name=record.name,
                        state=MethodState.ELIGIBLE,
                        resolved_in_pass=passes,
                    )
                )

        return ClassReport(
            qualified_name=scope.qualified_name or scope.name or "<anonymous>",
            verdicts=tuple(verdicts[record.index] for record in scope.methods),
            passes=passes,
        )

    def _run_pass(
        self,
        scope: ClassScope,
        enclosing: Sequence[ClassScope],
        states: dict[int, MethodState],
        verdicts: dict[int, Verdict],
        pass_number: int,
    ) -> int:
        """Walk every pending candidate once.

        Returns:
            Number of candidates resolved INELIGIBLE in this pass
        """
        resolved = 0

        for record in scope.methods:
            if states[record.index] not in _PENDING:
                continue

            states[record.index] = MethodState.VISITING
            usage = self._walker.walk_method(record, scope, blocking_names(scope, states), enclosing)
            self._tracer.method_walked(pass_number, record, usage)

            if usage.is_eligible:
                continue

            states[record.index] = MethodState.INELIGIBLE
            verdicts[record.index] = self._resolve(
                Verdict(
                    index=record.index,
                    name=record.name,
                    state=MethodState.INELIGIBLE,
                    reasons=usage.reasons(),
                    evidence=usage.evidence(),
                    resolved_in_pass=pass_number,
                )
            )
            resolved += 1

        return resolved

    def _resolve(self, verdict: Verdict) -> Verdict:
        self._tracer.method_resolved(verdict)
        return verdict


def blocking_names(scope: ClassScope, states: dict[int, MethodState]) -> frozenset[str]:
    """Names of non-static methods not assumed eligible.

    A name blocks when at least one non-static, non-constructor method with
    that name is no longer pending.

    Args:
        scope: Class scope
        states: Current state per member index

    Returns:
        Names whose reference forces ineligibility
    """
    return frozenset(
        record.name
        for record in scope.methods
        if record.name in scope.non_static_methods
        and not record.is_static
        and not record.is_constructor
        and states[record.index] not in _PENDING
        and record.index not in scope.promoted
    )
