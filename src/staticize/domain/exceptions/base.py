"""Base exceptions for staticize domain."""


class StaticizeError(Exception):
    """Root exception for all staticize errors.

    All domain exceptions inherit from this.
    Allows catching all staticize-specific errors.
    """
