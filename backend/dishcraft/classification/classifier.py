"""
Deterministic keyword classification: ingredient category, then recipe component type.
Substring matching only, first matching rule wins.
"""
from dishcraft.models.records import Category, ComponentType
from .rules import CATEGORY_RULES, SAUCE_BASE_KEYWORDS, CategoryRules

_DIRECT_TYPES = {
    Category.PROTEIN: ComponentType.PROTEIN,
    Category.GRAIN: ComponentType.CARB,
    Category.VEGETABLE: ComponentType.VEGETABLE,
}


def _contains_any(text: str, literals) -> bool:
    return any(lit in text for lit in literals)


def classify_category(name: str, rules: CategoryRules = CATEGORY_RULES) -> Category:
    """Category of the first rule (in table order) with a literal found in the name; OTHER if none."""
    text = (name or "").lower()
    for category, literals in rules:
        if _contains_any(text, literals):
            return category
    return Category.OTHER


def component_type_for(
    name: str,
    category: Category,
    sauce_keywords: tuple[str, ...] = SAUCE_BASE_KEYWORDS,
) -> ComponentType:
    """
    protein -> protein, grain -> carb, vegetable -> vegetable.
    Everything else is a sauce/base: liquids and condiments, spice, dairy, and the
    fruit/other remainder alike.
    """
    direct = _DIRECT_TYPES.get(category)
    if direct is not None:
        return direct
    text = (name or "").lower()
    if _contains_any(text, sauce_keywords) or category in (Category.SPICE, Category.DAIRY):
        return ComponentType.SAUCE_BASE
    return ComponentType.SAUCE_BASE
