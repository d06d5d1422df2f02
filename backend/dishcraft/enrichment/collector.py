"""
Batch collector: normalized, classified ingredients and components for one
enrichment run, deduplicated by identity tuple.

Ingredient identity is (name, category); component identity is (name, type, description).
Both are case-sensitive on name; case-insensitive collapsing happens in the merge.
"""
import json
import logging
from typing import Any, Iterable, Optional

from dishcraft.classification import classify_category, component_type_for, normalize_ingredient_name
from dishcraft.external_apis import SOURCE_NAME
from dishcraft.models.records import Ingredient, RecipeComponent

logger = logging.getLogger(__name__)

PROGRESS_EVERY = 10


def _identity(record: dict) -> str:
    return json.dumps(record, sort_keys=True, ensure_ascii=False)


def raw_ingredient_name(item: Any) -> Optional[str]:
    """name, falling back to originalName; None when neither is a non-empty string."""
    if not isinstance(item, dict):
        return None
    name = item.get("name") or item.get("originalName")
    if isinstance(name, str) and name:
        return name
    return None


class BatchCollector:
    """Process-local accumulator; discarded after the merge."""

    def __init__(self, source_name: str = SOURCE_NAME):
        self._source_name = source_name
        self._ingredients: dict[str, Ingredient] = {}
        self._components: dict[str, RecipeComponent] = {}
        self.recipes_seen = 0
        self.items_dropped = 0

    def add_ingredient_name(self, raw_name: str) -> bool:
        """Normalize, classify and collect one name. False if the name was filtered out."""
        name = normalize_ingredient_name(raw_name)
        if name is None:
            self.items_dropped += 1
            return False
        category = classify_category(name)
        ingredient = Ingredient(name=name, category=category)
        component = RecipeComponent(
            name=name,
            type=component_type_for(name, category),
            description=f"{name} - sourced from {self._source_name}",
        )
        self._ingredients.setdefault(_identity(ingredient.to_dict()), ingredient)
        # tags are always empty here, so they stay out of the identity
        key = _identity({"name": component.name, "type": component.type.value, "description": component.description})
        self._components.setdefault(key, component)
        return True

    def add_recipe(self, recipe: dict) -> None:
        self.recipes_seen += 1
        for item in recipe.get("extendedIngredients") or []:
            raw = raw_ingredient_name(item)
            if raw is None:
                continue
            self.add_ingredient_name(raw)

    @property
    def ingredients(self) -> list[Ingredient]:
        return list(self._ingredients.values())

    @property
    def components(self) -> list[RecipeComponent]:
        return list(self._components.values())


def collect_batch(recipes: Iterable[dict], source_name: str = SOURCE_NAME) -> BatchCollector:
    recipes = list(recipes)
    collector = BatchCollector(source_name=source_name)
    logger.info("ENRICHMENT processing recipes=%d", len(recipes))
    for index, recipe in enumerate(recipes):
        if not isinstance(recipe, dict):
            continue
        if index % PROGRESS_EVERY == 0:
            logger.info(
                "ENRICHMENT recipe %d/%d title=%s",
                index + 1, len(recipes), str(recipe.get("title") or "")[:80],
            )
        collector.add_recipe(recipe)
    logger.info(
        "ENRICHMENT collected ingredients=%d components=%d dropped=%d",
        len(collector.ingredients), len(collector.components), collector.items_dropped,
    )
    return collector
