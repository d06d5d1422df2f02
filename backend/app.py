"""
DishCraft FastAPI application.

Endpoints:
    GET  /                  Welcome / health check
    GET  /api/ingredients   All ingredients, sorted by name
    GET  /api/components    Recipe components, optional ?type= filter
"""
from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel
from typing import Annotated, List, Optional
import logging
from dotenv import load_dotenv
from pathlib import Path

# Load env vars
load_dotenv(Path(__file__).parent / ".env")

# Initialize App
app = FastAPI(title="DishCraft API")

# Logger
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

from dishcraft.config import log_config
from dishcraft.errors import DishCraftError
from dishcraft.models.records import ComponentType
from dishcraft.storage import INGREDIENTS, RECIPE_COMPONENTS, open_stores

log_config()


# --- Response Models ---
class IngredientOut(BaseModel):
    name: str
    category: str


class ComponentOut(BaseModel):
    name: str
    type: str
    tags: List[str] = []
    description: Optional[str] = None


# --- Helper Functions ---

def _read_collection(collection: str) -> List[dict]:
    """All records of one collection, sorted by name. Both stores are closed afterwards."""
    ingredient_store, component_store = open_stores()
    try:
        store = ingredient_store if collection == INGREDIENTS else component_store
        records = store.find_all()
    finally:
        ingredient_store.close()
        component_store.close()
    return sorted(records, key=lambda r: r.get("name", ""))


# --- Endpoints ---

@app.get("/")
def health_check():
    return {"status": "ok", "message": "Welcome to DishCraft API!"}


@app.get("/api/ingredients", response_model=List[IngredientOut])
def list_ingredients():
    try:
        return _read_collection(INGREDIENTS)
    except DishCraftError as e:
        logger.error("Fetching ingredients failed: %s", e)
        raise HTTPException(status_code=500, detail="Server Error fetching ingredients")


@app.get("/api/components", response_model=List[ComponentOut])
def list_components(component_type: Annotated[Optional[str], Query(alias="type")] = None):
    if component_type is not None:
        try:
            ComponentType(component_type)
        except ValueError:
            raise HTTPException(status_code=400, detail=f"Unknown component type: {component_type}")
    try:
        records = _read_collection(RECIPE_COMPONENTS)
    except DishCraftError as e:
        logger.error("Fetching components failed: %s", e)
        raise HTTPException(status_code=500, detail="Server Error fetching components")
    if component_type is not None:
        records = [r for r in records if r.get("type") == component_type]
    return records
