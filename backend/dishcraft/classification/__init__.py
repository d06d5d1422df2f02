from .normalizer import clean_ingredient_name, normalize_ingredient_name
from .classifier import classify_category, component_type_for
from .rules import CATEGORY_RULES, SAUCE_BASE_KEYWORDS

__all__ = [
    "clean_ingredient_name",
    "normalize_ingredient_name",
    "classify_category",
    "component_type_for",
    "CATEGORY_RULES",
    "SAUCE_BASE_KEYWORDS",
]
