"""Public API.

Public exports:
    AddStaticModifierRecipe: Recipe facade
"""

from staticize.presentation.api.recipe import AddStaticModifierRecipe

__all__ = ["AddStaticModifierRecipe"]
