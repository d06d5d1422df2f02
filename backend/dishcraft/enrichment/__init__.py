"""
Enrichment run: grow the ingredient and recipe-component stores from a batch of
external recipes.
"""
from .collector import BatchCollector, collect_batch
from .merge import MergeResult, filter_new, merge_batch
from .cooking_methods import additional_cooking_methods
from .summary import EnrichmentSummary
from .pipeline import run_enrichment, require_spoonacular_api_key

__all__ = [
    "BatchCollector",
    "collect_batch",
    "MergeResult",
    "filter_new",
    "merge_batch",
    "additional_cooking_methods",
    "EnrichmentSummary",
    "run_enrichment",
    "require_spoonacular_api_key",
]
