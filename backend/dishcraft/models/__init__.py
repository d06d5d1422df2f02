from .records import Category, ComponentType, Ingredient, RecipeComponent

__all__ = [
    "Category",
    "ComponentType",
    "Ingredient",
    "RecipeComponent",
]
