"""Eligibility analysis: scope model, usage walker, engine and rewriter."""

from staticize.application.analysis.context import FrameType, TraversalContext
from staticize.application.analysis.engine import EligibilityEngine, blocking_names, exclusion_reasons
from staticize.application.analysis.rewriter import promote, rewrite_class
from staticize.application.analysis.scope_builder import build_class_scope, make_method_record
from staticize.application.analysis.walker import InstanceMembers, UsageWalker, reachable_members

__all__ = [
    "EligibilityEngine",
    "FrameType",
    "InstanceMembers",
    "TraversalContext",
    "UsageWalker",
    "blocking_names",
    "build_class_scope",
    "exclusion_reasons",
    "make_method_record",
    "promote",
    "reachable_members",
    "rewrite_class",
]
