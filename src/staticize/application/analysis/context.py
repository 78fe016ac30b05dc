"""Stack-based traversal context for one method walk."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from staticize.domain.model.verdict import MethodUsage

ANONYMOUS_CLASS = "<anonymous>"


class FrameType(Enum):
    """Scope kinds entered during a walk."""

    CLASS = auto()
    METHOD = auto()


@dataclass(slots=True)
class ContextFrame:
    """Single context frame on the stack.

    Attributes:
        type: Frame type
        name: Class or method name
    """

    type: FrameType
    name: str


@dataclass(slots=True)
class TraversalContext:
    """Explicit context threaded through one method walk.

    Owned by exactly one walk. Nested classes push a CLASS frame on entry
    and pop it on exit, so the stack mirrors the walk.
    Mutable - push/pop during traversal, accumulators only grow.

    Attributes:
        top_class: Class whose method is being analyzed
        instance_fields: Instance field names referenced so far
        ineligible_calls: Non-static sibling names referenced so far
        uses_super: ``super`` referenced so far
        uses_this: ``this`` referenced so far
        inner_classes: Inner member classes instantiated so far
        _stack: Frame stack
        _method_depth: Nesting depth in methods
    """

    top_class: str
    instance_fields: set[str] = field(default_factory=set)
    ineligible_calls: set[str] = field(default_factory=set)
    uses_super: bool = False
    uses_this: bool = False
    inner_classes: set[str] = field(default_factory=set)
    _stack: list[ContextFrame] = field(default_factory=list)
    _method_depth: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.top_class:
            raise ValueError("top_class must be non-empty string")

    def push(self, frame_type: FrameType, name: str) -> None:
        """Enter new frame. O(1).

        Args:
            frame_type: Type of frame to enter
            name: Class or method name

        Raises:
            TypeError: If frame_type is not a FrameType (FAIL-FIRST)
            ValueError: If name is empty, or the first frame is not the top class
        """
        # FAIL-FIRST: frame_type must be valid FrameType
        if not isinstance(frame_type, FrameType):
            raise TypeError(f"frame_type must be FrameType, got {type(frame_type).__name__}")

        if not name:
            raise ValueError("frame name must be non-empty string")

        if not self._stack and (frame_type is not FrameType.CLASS or name != self.top_class):
            raise ValueError(f"first frame must be CLASS '{self.top_class}', got {frame_type.name} '{name}'")

        self._stack.append(ContextFrame(frame_type, name))

        if frame_type is FrameType.METHOD:
            self._method_depth += 1

    def pop(self) -> ContextFrame:
        """Exit current frame. O(1).

        Returns:
            The popped frame

        Raises:
            IndexError: If stack is empty
        """
        if not self._stack:
            raise IndexError("cannot pop from empty context stack")

        frame = self._stack.pop()

        if frame.type is FrameType.METHOD:
            self._method_depth -= 1

        return frame

    @property
    def in_method(self) -> bool:
        """Check if inside a method body. O(1)."""
        return self._method_depth > 0

    def to_usage(self) -> MethodUsage:
        """Freeze accumulators into a MethodUsage.

        Raises:
            RuntimeError: If frames are still open (FAIL-FIRST)
        """
        if self._stack:
            raise RuntimeError(f"walk ended with {len(self._stack)} open frames")

        return MethodUsage(
            instance_fields=frozenset(self.instance_fields),
            ineligible_calls=frozenset(self.ineligible_calls),
            uses_super=self.uses_super,
            uses_this=self.uses_this,
            inner_classes=frozenset(self.inner_classes),
        )
