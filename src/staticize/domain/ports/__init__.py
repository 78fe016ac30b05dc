"""Domain ports (interfaces)."""

from staticize.domain.ports.source_parser import SourceParserPort
from staticize.domain.ports.tracer import NullTracer, TracerProtocol

__all__ = [
    "SourceParserPort",
    "TracerProtocol",
    "NullTracer",
]
