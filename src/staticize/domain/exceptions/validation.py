"""Configuration validation exceptions."""

from staticize.domain.exceptions.base import StaticizeError


class ConfigurationError(StaticizeError):
    """Error in run configuration.

    Raised when a configuration option is invalid.
    FAIL-FIRST: validates inputs immediately.

    Attributes:
        option: Name of invalid option (must not be empty)
        reason: Why option is invalid (must not be empty)
    """

    def __init__(self, option: str, reason: str) -> None:
        # FAIL-FIRST validation
        if not option:
            raise ValueError("option must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.option = option
        self.reason = reason
        super().__init__(f"Invalid option '{option}': {reason}")
