"""Tracer protocol: optional observer of an analysis run.

The engine reports progress to a tracer instead of printing. The default
tracer does nothing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from staticize.domain.model.scope import ClassScope, MethodRecord
    from staticize.domain.model.verdict import MethodUsage, Verdict


class TracerProtocol(Protocol):
    """Contract for analysis tracers.

    All hooks are called synchronously from the single analysis thread.
    """

    def scope_built(self, scope: ClassScope) -> None:
        """Called once per analyzed class, before the closure loop."""
        ...

    def method_walked(self, pass_number: int, record: MethodRecord, usage: MethodUsage) -> None:
        """Called after each walk of a candidate body."""
        ...

    def method_resolved(self, verdict: Verdict) -> None:
        """Called when a method reaches ELIGIBLE or INELIGIBLE."""
        ...

    def pass_completed(self, pass_number: int, changed: int) -> None:
        """Called after each closure pass with the number of methods it resolved."""
        ...


class NullTracer:
    """Tracer that ignores every event."""

    def scope_built(self, scope: ClassScope) -> None:
        pass

    def method_walked(self, pass_number: int, record: MethodRecord, usage: MethodUsage) -> None:
        pass

    def method_resolved(self, verdict: Verdict) -> None:
        pass

    def pass_completed(self, pass_number: int, changed: int) -> None:
        pass
