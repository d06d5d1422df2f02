"""
Hand-curated starter ingredients. Categories here are editorial and do not always
agree with the keyword classifier (Garlic is a vegetable, Almond Milk is dairy).
"""
import logging
from typing import List

from dishcraft.enrichment.merge import filter_new
from dishcraft.models.records import Category, Ingredient
from dishcraft.storage.base import Record, RecordStore

logger = logging.getLogger(__name__)

SEED_INGREDIENTS: tuple[Ingredient, ...] = (
    # Proteins
    Ingredient("Chicken Breast", Category.PROTEIN),
    Ingredient("Salmon Fillet", Category.PROTEIN),
    Ingredient("Tofu", Category.PROTEIN),
    Ingredient("Eggs", Category.PROTEIN),
    Ingredient("Lentils", Category.PROTEIN),
    Ingredient("Chickpeas", Category.PROTEIN),
    Ingredient("Ground Beef", Category.PROTEIN),
    # Vegetables
    Ingredient("Broccoli", Category.VEGETABLE),
    Ingredient("Spinach", Category.VEGETABLE),
    Ingredient("Carrot", Category.VEGETABLE),
    Ingredient("Bell Pepper", Category.VEGETABLE),
    Ingredient("Onion", Category.VEGETABLE),
    Ingredient("Garlic", Category.VEGETABLE),
    Ingredient("Tomato", Category.VEGETABLE),
    Ingredient("Potato", Category.VEGETABLE),
    Ingredient("Sweet Potato", Category.VEGETABLE),
    Ingredient("Zucchini", Category.VEGETABLE),
    Ingredient("Mushrooms", Category.VEGETABLE),
    # Grains
    Ingredient("Pasta", Category.GRAIN),
    Ingredient("Rice", Category.GRAIN),
    Ingredient("Quinoa", Category.GRAIN),
    Ingredient("Bread", Category.GRAIN),
    # Dairy & alternatives
    Ingredient("Parmesan Cheese", Category.DAIRY),
    Ingredient("Cheddar Cheese", Category.DAIRY),
    Ingredient("Milk", Category.DAIRY),
    Ingredient("Yogurt", Category.DAIRY),
    Ingredient("Almond Milk", Category.DAIRY),
    # Spices, herbs, oils
    Ingredient("Olive Oil", Category.OTHER),
    Ingredient("Salt", Category.SPICE),
    Ingredient("Black Pepper", Category.SPICE),
    Ingredient("Paprika", Category.SPICE),
    Ingredient("Cumin", Category.SPICE),
    Ingredient("Oregano", Category.SPICE),
    Ingredient("Basil", Category.SPICE),
    Ingredient("Thyme", Category.SPICE),
    Ingredient("Rosemary", Category.SPICE),
    Ingredient("Chili Powder", Category.SPICE),
    # Other
    Ingredient("Soy Sauce", Category.OTHER),
    Ingredient("Lemon", Category.FRUIT),
    Ingredient("Lime", Category.FRUIT),
    Ingredient("Honey", Category.OTHER),
    Ingredient("Maple Syrup", Category.OTHER),
)


def seed_ingredients(store: RecordStore) -> List[Record]:
    """Insert the seed ingredients whose names are not in the store yet (case-insensitive)."""
    fresh = filter_new(SEED_INGREDIENTS, store.find_all())
    if not fresh:
        logger.info("SEED nothing to add, %d seed ingredients already present", len(SEED_INGREDIENTS))
        return []
    inserted = store.insert_many([i.to_dict() for i in fresh])
    logger.info("SEED inserted ingredients=%d", len(inserted))
    return inserted
