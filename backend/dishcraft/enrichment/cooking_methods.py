"""Cooking techniques added to the component candidates of every enrichment run."""
from dishcraft.models.records import ComponentType, RecipeComponent

_COOKING_METHODS = (
    ("Air Frying", "Quick cooking with circulated hot air"),
    ("Slow Cooking", "Long, low-temperature cooking"),
    ("Pressure Cooking", "Fast cooking under pressure"),
    ("Smoking", "Cooking with wood smoke for flavor"),
    ("Sous Vide", "Precise temperature water bath cooking"),
    ("Blanching", "Brief boiling followed by ice bath"),
    ("Marinating", "Soaking in seasoned liquid"),
    ("Fermenting", "Controlled bacterial or yeast breakdown"),
    ("Dehydrating", "Removing moisture to preserve"),
    ("Pickling", "Preserving in acidic solution"),
    ("Confit", "Slow cooking in fat"),
    ("Flambéing", "Igniting alcohol for flavor"),
)


def additional_cooking_methods() -> list[RecipeComponent]:
    return [
        RecipeComponent(name=name, type=ComponentType.COOKING_METHOD, description=description)
        for name, description in _COOKING_METHODS
    ]
