from .spoonacular import fetch_random_recipes, SOURCE_NAME

__all__ = ["fetch_random_recipes", "SOURCE_NAME"]
