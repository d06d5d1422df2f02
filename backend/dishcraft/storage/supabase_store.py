"""
Supabase-backed record store: one table per collection (ingredients, recipe_components).
Uniqueness of ingredients.name is left to the table's own constraint.
"""
import logging
from typing import List, Optional

from supabase import create_client, Client

from dishcraft.config import get_supabase_key, get_supabase_url
from dishcraft.errors import ConfigurationError, StoreError
from .base import Record, RecordStore

logger = logging.getLogger(__name__)

_COLUMNS = {
    "ingredients": ("name", "category"),
    "recipe_components": ("name", "type", "tags", "description"),
}


def create_supabase_client() -> Client:
    url = get_supabase_url()
    key = get_supabase_key()
    if not url or not key:
        raise ConfigurationError("Supabase credentials missing (set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY)")
    return create_client(url, key)


class SupabaseRecordStore(RecordStore):

    def __init__(self, client: Client, table: str):
        self._client = client
        self.name = table
        self._columns = _COLUMNS.get(table)

    def _row(self, record: Record) -> Record:
        if not self._columns:
            return dict(record)
        return {k: record[k] for k in self._columns if k in record}

    def find_all(self) -> List[Record]:
        select = ",".join(self._columns) if self._columns else "*"
        try:
            res = self._client.table(self.name).select(select).execute()
        except Exception as e:
            raise StoreError(f"Supabase select from {self.name} failed: {e}") from e
        return list(res.data or [])

    def insert_many(self, records: List[Record]) -> List[Record]:
        if not records:
            return []
        rows = [self._row(r) for r in records]
        try:
            res = self._client.table(self.name).insert(rows).execute()
        except Exception as e:
            raise StoreError(f"Supabase insert into {self.name} failed: {e}") from e
        logger.info("STORE inserted %s records=%d", self.name, len(rows))
        return list(res.data or rows)

    def count(self) -> int:
        try:
            res = self._client.table(self.name).select("name", count="exact").limit(1).execute()
        except Exception as e:
            raise StoreError(f"Supabase count on {self.name} failed: {e}") from e
        count: Optional[int] = getattr(res, "count", None)
        return count if count is not None else len(self.find_all())
