"""Promotion configuration.

The one option a run needs: which class to analyze. Everything else has
defaults the user may override.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from staticize.domain.exceptions.validation import ConfigurationError

# Java identifier segment; '$' is a legal identifier character
_SEGMENT = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

DEFAULT_OVERRIDE_ANNOTATIONS = frozenset({"Override"})


@dataclass(frozen=True, slots=True)
class PromotionConfig:
    """Immutable run configuration with FAIL-FIRST validation.

    Attributes:
        fully_qualified_class_name: Class to analyze, e.g. ``com.yourorg.FooBar``.
            Nested classes may be written ``Outer$Inner`` or ``Outer.Inner``.
        override_annotations: Annotation simple names that mark overrides.
    """

    fully_qualified_class_name: str
    override_annotations: frozenset[str] = field(default=DEFAULT_OVERRIDE_ANNOTATIONS)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        name = self.fully_qualified_class_name
        if name is None:
            raise ConfigurationError("fully_qualified_class_name", "must not be None")
        if not name:
            raise ConfigurationError("fully_qualified_class_name", "must not be empty")

        for segment in name.split("."):
            if not _SEGMENT.match(segment):
                raise ConfigurationError(
                    "fully_qualified_class_name",
                    f"'{name}' has invalid segment '{segment}'",
                )

        if not self.override_annotations:
            raise ConfigurationError("override_annotations", "must not be empty")

    def matches(self, qualified_name: str | None) -> bool:
        """Check if a declaration's qualified name designates the target.

        Args:
            qualified_name: Declaration name in ``package.Outer$Inner`` form

        Returns:
            True for the target class; False for unresolvable names
        """
        if qualified_name is None:
            return False
        target = self.fully_qualified_class_name
        return qualified_name == target or qualified_name.replace("$", ".") == target
