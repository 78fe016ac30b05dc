"""Application services."""

from staticize.application.services.promoter import StaticPromoter

__all__ = ["StaticPromoter"]
