"""
Record store interface shared by the JSON-file and Supabase backends.
Records are plain dicts as produced by Ingredient.to_dict / RecipeComponent.to_dict.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List

Record = Dict[str, Any]


class RecordStore(ABC):
    """A named collection supporting bulk find / insert / count."""

    name: str = ""

    @abstractmethod
    def find_all(self) -> List[Record]:
        """Every record in the collection."""

    @abstractmethod
    def insert_many(self, records: List[Record]) -> List[Record]:
        """Insert all records and return what was written."""

    def count(self) -> int:
        return len(self.find_all())

    def close(self) -> None:
        pass

    def __enter__(self) -> "RecordStore":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
