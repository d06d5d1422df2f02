#!/usr/bin/env python3
"""
Seed the ingredient store with the starter ingredient list. Safe to re-run.
Usage: cd backend && python scripts/seed_database.py
"""
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from dotenv import load_dotenv
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main() -> int:
    from dishcraft.errors import DishCraftError
    from dishcraft.seed import seed_ingredients
    from dishcraft.storage import open_stores

    try:
        ingredient_store, component_store = open_stores()
    except DishCraftError as e:
        logger.error("Seeding aborted: %s", e)
        return 1
    try:
        inserted = seed_ingredients(ingredient_store)
        logger.info("Seeded %d ingredients (total %d)", len(inserted), ingredient_store.count())
    except DishCraftError as e:
        logger.error("Seeding failed: %s", e)
        return 1
    finally:
        ingredient_store.close()
        component_store.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
