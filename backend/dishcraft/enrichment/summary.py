"""
Report for one enrichment run: what was fetched, what was new, what landed, final totals.
"""
import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


@dataclass
class EnrichmentSummary:
    recipes_fetched: int = 0
    unique_ingredients: int = 0
    unique_components: int = 0
    existing_ingredients: int = 0
    existing_components: int = 0
    new_ingredients: int = 0
    new_components: int = 0
    inserted_ingredients: int = 0
    inserted_components: int = 0
    ingredients_by_category: Dict[str, int] = field(default_factory=dict)
    components_by_type: Dict[str, int] = field(default_factory=dict)
    total_ingredients: Optional[int] = None
    total_components: Optional[int] = None
    dry_run: bool = False

    @property
    def nothing_new(self) -> bool:
        return self.new_ingredients == 0 and self.new_components == 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "recipes_fetched": self.recipes_fetched,
            "unique_ingredients": self.unique_ingredients,
            "unique_components": self.unique_components,
            "existing_ingredients": self.existing_ingredients,
            "existing_components": self.existing_components,
            "new_ingredients": self.new_ingredients,
            "new_components": self.new_components,
            "inserted_ingredients": self.inserted_ingredients,
            "inserted_components": self.inserted_components,
            "ingredients_by_category": dict(self.ingredients_by_category),
            "components_by_type": dict(self.components_by_type),
            "total_ingredients": self.total_ingredients,
            "total_components": self.total_components,
            "dry_run": self.dry_run,
        }

    def log(self) -> None:
        logger.info(
            "ENRICHMENT fetched recipes=%d unique_ingredients=%d unique_components=%d",
            self.recipes_fetched, self.unique_ingredients, self.unique_components,
        )
        if self.nothing_new:
            logger.info("ENRICHMENT store already well-populated, no new items to add")
            return
        verb = "would insert" if self.dry_run else "inserted"
        logger.info(
            "ENRICHMENT %s ingredients=%d components=%d",
            verb, self.new_ingredients if self.dry_run else self.inserted_ingredients,
            self.new_components if self.dry_run else self.inserted_components,
        )
        for category, count in sorted(self.ingredients_by_category.items()):
            logger.info("ENRICHMENT   ingredients category=%s count=%d", category, count)
        for ctype, count in sorted(self.components_by_type.items()):
            logger.info("ENRICHMENT   components type=%s count=%d", ctype, count)
        if self.total_ingredients is not None:
            logger.info(
                "ENRICHMENT totals ingredients=%d components=%d",
                self.total_ingredients, self.total_components or 0,
            )


def breakdown(records, key: str) -> Dict[str, int]:
    """Count records (dicts) by one field."""
    return dict(Counter(str(r.get(key)) for r in records))
