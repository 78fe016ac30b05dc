"""staticize - add the static modifier to Java methods that never use instance data."""

__version__ = "0.1.0"

from staticize.presentation.api.recipe import AddStaticModifierRecipe

__all__ = ["AddStaticModifierRecipe", "__version__"]
