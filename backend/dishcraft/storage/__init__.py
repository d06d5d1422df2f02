"""
Record stores for ingredients and recipe components.
Backend is chosen by DISHCRAFT_STORE (json | supabase).
"""
import logging
from typing import Optional, Tuple

from dishcraft.config import get_components_path, get_ingredients_path, get_store_backend
from .base import Record, RecordStore
from .json_store import JsonRecordStore

logger = logging.getLogger(__name__)

INGREDIENTS = "ingredients"
RECIPE_COMPONENTS = "recipe_components"


def open_stores(backend: Optional[str] = None) -> Tuple[RecordStore, RecordStore]:
    """Return (ingredient_store, component_store) for the configured backend."""
    backend = backend or get_store_backend()
    if backend == "supabase":
        from .supabase_store import SupabaseRecordStore, create_supabase_client
        client = create_supabase_client()
        logger.info("STORE backend=supabase")
        return SupabaseRecordStore(client, INGREDIENTS), SupabaseRecordStore(client, RECIPE_COMPONENTS)
    logger.info("STORE backend=json ingredients=%s components=%s", get_ingredients_path(), get_components_path())
    return (
        JsonRecordStore(get_ingredients_path(), INGREDIENTS, unique_name=True),
        JsonRecordStore(get_components_path(), RECIPE_COMPONENTS),
    )


__all__ = [
    "Record",
    "RecordStore",
    "JsonRecordStore",
    "open_stores",
    "INGREDIENTS",
    "RECIPE_COMPONENTS",
]
