"""
One enrichment run: fetch -> normalize/classify -> collect -> merge -> summary.
Single pass, no retry. Any fetch failure aborts before the stores are touched.
"""
import logging
from typing import Any, Callable, List, Optional

from dishcraft.config import SPOONACULAR_MAX_BATCH, get_spoonacular_api_key, get_spoonacular_batch_size
from dishcraft.errors import ConfigurationError, UpstreamFetchError
from dishcraft.external_apis import fetch_random_recipes
from dishcraft.storage.base import RecordStore
from .collector import collect_batch
from .cooking_methods import additional_cooking_methods
from .merge import merge_batch
from .summary import EnrichmentSummary, breakdown

logger = logging.getLogger(__name__)

Fetcher = Callable[..., List[dict[str, Any]]]

QUOTA_GUIDANCE = (
    "Spoonacular API quota exceeded (free tier: 150 requests/day). "
    "Upgrade the plan or try again tomorrow."
)


def require_spoonacular_api_key(api_key: Optional[str] = None) -> str:
    key = (api_key or get_spoonacular_api_key()).strip()
    if not key:
        raise ConfigurationError(
            "SPOONACULAR_API_KEY not found in environment variables. Add it to backend/.env."
        )
    return key


def run_enrichment(
    ingredient_store: RecordStore,
    component_store: RecordStore,
    api_key: Optional[str] = None,
    batch_size: Optional[int] = None,
    fetch: Fetcher = fetch_random_recipes,
    dry_run: bool = False,
) -> EnrichmentSummary:
    """
    Run one enrichment pass against the given stores. Raises ConfigurationError or
    UpstreamFetchError; the caller owns closing the stores.
    """
    key = require_spoonacular_api_key(api_key)
    number = batch_size if batch_size is not None else get_spoonacular_batch_size()
    number = max(1, min(int(number), SPOONACULAR_MAX_BATCH))
    logger.info("ENRICHMENT start batch_size=%d dry_run=%s", number, dry_run)

    try:
        recipes = fetch(key, number=number)
    except UpstreamFetchError as e:
        logger.error("ENRICHMENT fetch failed status=%s error=%s", e.status_code, e)
        if e.is_quota_exceeded:
            logger.error("ENRICHMENT %s", QUOTA_GUIDANCE)
        raise

    collector = collect_batch(recipes)
    ingredients = collector.ingredients
    components = collector.components + additional_cooking_methods()

    summary = EnrichmentSummary(
        recipes_fetched=len(recipes),
        unique_ingredients=len(ingredients),
        unique_components=len(components),
        dry_run=dry_run,
    )
    merged = merge_batch(ingredients, components, ingredient_store, component_store, dry_run=dry_run)
    summary.existing_ingredients = merged.existing_ingredients
    summary.existing_components = merged.existing_components
    summary.new_ingredients = len(merged.new_ingredients)
    summary.new_components = len(merged.new_components)

    if dry_run:
        summary.ingredients_by_category = breakdown([i.to_dict() for i in merged.new_ingredients], "category")
        summary.components_by_type = breakdown([c.to_dict() for c in merged.new_components], "type")
    else:
        summary.inserted_ingredients = len(merged.inserted_ingredients)
        summary.inserted_components = len(merged.inserted_components)
        summary.ingredients_by_category = breakdown(merged.inserted_ingredients, "category")
        summary.components_by_type = breakdown(merged.inserted_components, "type")
        summary.total_ingredients = ingredient_store.count()
        summary.total_components = component_store.count()

    summary.log()
    return summary
