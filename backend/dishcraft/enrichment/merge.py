"""
Incremental merge of collected candidates into the persisted stores.

A lowercase name index of the existing records decides what is new. Read-index then
bulk-insert is not isolated from concurrent writers.
"""
import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Union

from dishcraft.models.records import Ingredient, RecipeComponent
from dishcraft.storage.base import Record, RecordStore

logger = logging.getLogger(__name__)

Candidate = Union[Ingredient, RecipeComponent]


def name_index(records: Iterable[Record]) -> set[str]:
    return {str(r.get("name", "")).lower() for r in records if r.get("name")}


def filter_new(candidates: Sequence[Candidate], existing: Iterable[Record]) -> List[Candidate]:
    """
    Candidates whose lowercase name is not yet taken. Accepted names join the index,
    so case variants inside one batch collapse to the first seen.
    """
    taken = name_index(existing)
    fresh: List[Candidate] = []
    for candidate in candidates:
        key = candidate.name.lower()
        if key in taken:
            continue
        taken.add(key)
        fresh.append(candidate)
    return fresh


@dataclass
class MergeResult:
    existing_ingredients: int = 0
    existing_components: int = 0
    new_ingredients: List[Ingredient] = field(default_factory=list)
    new_components: List[RecipeComponent] = field(default_factory=list)
    inserted_ingredients: List[Record] = field(default_factory=list)
    inserted_components: List[Record] = field(default_factory=list)


def merge_batch(
    ingredients: Sequence[Ingredient],
    components: Sequence[RecipeComponent],
    ingredient_store: RecordStore,
    component_store: RecordStore,
    dry_run: bool = False,
) -> MergeResult:
    existing_ingredients = ingredient_store.find_all()
    existing_components = component_store.find_all()
    result = MergeResult(
        existing_ingredients=len(existing_ingredients),
        existing_components=len(existing_components),
    )
    logger.info(
        "MERGE existing ingredients=%d components=%d",
        result.existing_ingredients, result.existing_components,
    )
    result.new_ingredients = filter_new(ingredients, existing_ingredients)
    result.new_components = filter_new(components, existing_components)
    logger.info(
        "MERGE new ingredients=%d components=%d dry_run=%s",
        len(result.new_ingredients), len(result.new_components), dry_run,
    )
    if dry_run:
        return result

    if result.new_ingredients:
        result.inserted_ingredients = ingredient_store.insert_many([i.to_dict() for i in result.new_ingredients])
    if result.new_components:
        result.inserted_components = component_store.insert_many([c.to_dict() for c in result.new_components])
    return result
