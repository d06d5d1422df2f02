"""
Tests for the command-line entry points: exit codes and store side effects.
"""
import json
import tempfile
from pathlib import Path
from unittest.mock import MagicMock, patch

import requests


def _spoonacular_response():
    return MagicMock(
        status_code=200,
        json=lambda: {"recipes": [
            {"title": "Stir Fry", "extendedIngredients": [{"name": "beef"}, {"name": "soy sauce"}]},
        ]},
    )


def test_run_enrichment_without_key_exits_1():
    from scripts.run_enrichment import main
    with patch.dict("os.environ", {"SPOONACULAR_API_KEY": ""}):
        with patch("dishcraft.external_apis.spoonacular.requests.get") as mock_get:
            assert main([]) == 1
            mock_get.assert_not_called()


def test_run_enrichment_writes_stores(capsys):
    from scripts.run_enrichment import main
    with tempfile.TemporaryDirectory() as tmp:
        env = {"SPOONACULAR_API_KEY": "k", "DISHCRAFT_STORE": "json", "DISHCRAFT_DATA_DIR": tmp}
        with patch.dict("os.environ", env):
            with patch("dishcraft.external_apis.spoonacular.requests.get", return_value=_spoonacular_response()):
                assert main(["--json", "--batch-size", "1"]) == 0
        data = json.loads((Path(tmp) / "ingredients.json").read_text())
        assert {r["name"] for r in data["ingredients"]} == {"beef", "soy sauce"}
    summary = json.loads(capsys.readouterr().out)
    assert summary["inserted_ingredients"] == 2
    assert summary["components_by_type"]["cooking_method"] == 12


def test_run_enrichment_fetch_failure_exits_1_without_writes():
    from scripts.run_enrichment import main
    with tempfile.TemporaryDirectory() as tmp:
        env = {"SPOONACULAR_API_KEY": "k", "DISHCRAFT_STORE": "json", "DISHCRAFT_DATA_DIR": tmp}
        with patch.dict("os.environ", env):
            with patch("dishcraft.external_apis.spoonacular.requests.get",
                       side_effect=requests.ConnectionError("down")):
                assert main([]) == 1
        assert not (Path(tmp) / "ingredients.json").exists()
        assert not (Path(tmp) / "recipe_components.json").exists()


def test_seed_database_script():
    from scripts.seed_database import main
    with tempfile.TemporaryDirectory() as tmp:
        with patch.dict("os.environ", {"DISHCRAFT_STORE": "json", "DISHCRAFT_DATA_DIR": tmp}):
            assert main() == 0
            assert main() == 0
        data = json.loads((Path(tmp) / "ingredients.json").read_text())
        assert len(data["ingredients"]) == 42


def test_check_recipe_api_exit_codes():
    from scripts.check_recipe_api import main
    with patch("scripts.check_recipe_api.check_spoonacular", return_value=(True, "ok")):
        assert main() == 0
    with patch("scripts.check_recipe_api.check_spoonacular", return_value=(False, "no API key")):
        assert main() == 1


def test_check_spoonacular_reports_quota():
    from scripts.check_recipe_api import check_spoonacular
    assert check_spoonacular("")[0] is False
    with patch("dishcraft.external_apis.spoonacular.requests.get",
               return_value=MagicMock(status_code=402, text="limit")):
        ok, msg = check_spoonacular("k")
    assert not ok
    assert "quota" in msg
