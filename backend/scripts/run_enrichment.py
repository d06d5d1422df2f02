#!/usr/bin/env python3
"""
One-off enrichment: fetch a batch of random Spoonacular recipes, classify their
ingredients and add the ones not yet stored to the ingredient and recipe-component stores.
Usage: cd backend && python scripts/run_enrichment.py [--batch-size 100] [--dry-run] [--json]
Exit 0 on success (including "nothing new"); 1 on configuration, fetch or store failure.
"""
import argparse
import json
import logging
import sys
from pathlib import Path

# Ensure backend is on path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from dotenv import load_dotenv
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Enrich the ingredient and component stores from Spoonacular")
    parser.add_argument("--batch-size", type=int, default=None, help="Recipes to fetch (1-100, default from config)")
    parser.add_argument("--dry-run", action="store_true", help="Compute insert sets but do not write")
    parser.add_argument("--json", action="store_true", help="Print the run summary as JSON")
    args = parser.parse_args(argv)

    from dishcraft.config import log_config
    from dishcraft.errors import DishCraftError
    from dishcraft.enrichment import require_spoonacular_api_key, run_enrichment
    from dishcraft.storage import open_stores

    log_config()
    try:
        api_key = require_spoonacular_api_key()
        ingredient_store, component_store = open_stores()
    except DishCraftError as e:
        logger.error("Enrichment aborted before any I/O: %s", e)
        return 1

    try:
        summary = run_enrichment(
            ingredient_store,
            component_store,
            api_key=api_key,
            batch_size=args.batch_size,
            dry_run=args.dry_run,
        )
    except DishCraftError as e:
        logger.error("Enrichment failed: %s", e)
        return 1
    finally:
        ingredient_store.close()
        component_store.close()
        logger.info("Store connections closed")

    if args.json:
        print(json.dumps(summary.to_dict(), indent=2))
    logger.info("Enrichment run complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())
