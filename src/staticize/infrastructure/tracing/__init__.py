"""Tracer implementations."""

from staticize.infrastructure.tracing.logging_tracer import LoggingTracer

__all__ = ["LoggingTracer"]
