"""Tracer that forwards analysis events to the logging module."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from staticize.domain.model.scope import ClassScope, MethodRecord
    from staticize.domain.model.verdict import MethodUsage, Verdict

logger = logging.getLogger(__name__)


class LoggingTracer:
    """Tracer writing one log record per event.

    Scope and verdict events go to INFO, per-walk and per-pass events to
    DEBUG.
    """

    def __init__(self, log: logging.Logger | None = None) -> None:
        """Initialize tracer.

        Args:
            log: Target logger (default: this module's logger)
        """
        self._log = log or logger

    def scope_built(self, scope: ClassScope) -> None:
        self._log.info(
            "Analyzing %s: %d methods, %d instance fields",
            scope.qualified_name or "<anonymous>",
            len(scope.methods),
            len(scope.instance_fields),
        )

    def method_walked(self, pass_number: int, record: MethodRecord, usage: MethodUsage) -> None:
        self._log.debug(
            "Pass %d: walked %s#%d (fields=%s, calls=%s, super=%s, this=%s, inner=%s)",
            pass_number,
            record.name,
            record.index,
            sorted(usage.instance_fields),
            sorted(usage.ineligible_calls),
            usage.uses_super,
            usage.uses_this,
            sorted(usage.inner_classes),
        )

    def method_resolved(self, verdict: Verdict) -> None:
        if verdict.promote:
            self._log.info("%s#%d can be static", verdict.name, verdict.index)
        else:
            self._log.info(
                "%s#%d stays non-static: %s",
                verdict.name,
                verdict.index,
                ", ".join(reason.value for reason in verdict.reasons),
            )

    def pass_completed(self, pass_number: int, changed: int) -> None:
        self._log.debug("Pass %d resolved %d methods", pass_number, changed)
