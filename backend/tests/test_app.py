"""
Tests for the listing API route functions, backed by temporary JSON stores.
"""
import tempfile
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from fastapi import HTTPException

from dishcraft.errors import StoreError
from dishcraft.storage.json_store import JsonRecordStore


def _stores(tmp):
    ing_store = JsonRecordStore(Path(tmp) / "ingredients.json", "ingredients", unique_name=True)
    comp_store = JsonRecordStore(Path(tmp) / "recipe_components.json", "recipe_components")
    ing_store.insert_many([
        {"name": "Tomato", "category": "vegetable"},
        {"name": "Basil", "category": "spice"},
    ])
    comp_store.insert_many([
        {"name": "Sous Vide", "type": "cooking_method", "tags": [], "description": "water bath"},
        {"name": "Rice", "type": "carb", "tags": [], "description": "Rice - sourced from Spoonacular API"},
    ])
    return ing_store, comp_store


def test_health_check():
    import app
    assert app.health_check()["status"] == "ok"


def test_ingredients_sorted_by_name():
    import app
    with tempfile.TemporaryDirectory() as tmp:
        stores = _stores(tmp)
        with patch("app.open_stores", return_value=stores):
            result = app.list_ingredients()
    assert [r["name"] for r in result] == ["Basil", "Tomato"]


def test_components_filtered_by_type():
    import app
    with tempfile.TemporaryDirectory() as tmp:
        stores = _stores(tmp)
        with patch("app.open_stores", return_value=stores):
            assert [r["name"] for r in app.list_components()] == ["Rice", "Sous Vide"]
            assert [r["name"] for r in app.list_components(component_type="carb")] == ["Rice"]


def test_unknown_component_type_is_400():
    import app
    with pytest.raises(HTTPException) as excinfo:
        app.list_components(component_type="dessert")
    assert excinfo.value.status_code == 400


def test_store_failure_is_500_and_closes_stores():
    import app
    ing_store, comp_store = MagicMock(), MagicMock()
    ing_store.find_all.side_effect = StoreError("disk gone")
    with patch("app.open_stores", return_value=(ing_store, comp_store)):
        with pytest.raises(HTTPException) as excinfo:
            app.list_ingredients()
    assert excinfo.value.status_code == 500
    ing_store.close.assert_called_once()
    comp_store.close.assert_called_once()


def test_components_filter_keeps_type_query_name():
    import app
    route = next(r for r in app.app.routes if getattr(r, "path", None) == "/api/components")
    assert [p.alias for p in route.dependant.query_params] == ["type"]
