"""
Unit tests for path resolution and environment-driven configuration.
"""
from pathlib import Path
from unittest.mock import patch


def test_repo_root_resolution():
    from dishcraft import config
    assert config._BACKEND_DIR.is_dir()
    assert (config._BACKEND_DIR / "dishcraft").is_dir()
    assert config._REPO_ROOT == config._BACKEND_DIR.parent


def test_default_data_paths():
    from dishcraft.config import get_components_path, get_ingredients_path, _REPO_ROOT
    with patch.dict("os.environ", {"DISHCRAFT_DATA_DIR": ""}):
        assert get_ingredients_path() == _REPO_ROOT / "data" / "ingredients.json"
        assert get_components_path() == _REPO_ROOT / "data" / "recipe_components.json"


def test_data_dir_override():
    from dishcraft.config import get_ingredients_path
    with patch.dict("os.environ", {"DISHCRAFT_DATA_DIR": "/tmp/dishcraft-data"}):
        assert get_ingredients_path() == Path("/tmp/dishcraft-data") / "ingredients.json"


def test_batch_size_default_and_clamp():
    import os
    from dishcraft.config import get_spoonacular_batch_size
    with patch.dict(os.environ):
        os.environ.pop("SPOONACULAR_BATCH_SIZE", None)
        assert get_spoonacular_batch_size() == 100
    with patch.dict("os.environ", {"SPOONACULAR_BATCH_SIZE": "250"}):
        assert get_spoonacular_batch_size() == 100
    with patch.dict("os.environ", {"SPOONACULAR_BATCH_SIZE": "0"}):
        assert get_spoonacular_batch_size() == 1
    with patch.dict("os.environ", {"SPOONACULAR_BATCH_SIZE": "lots"}):
        assert get_spoonacular_batch_size() == 100


def test_api_key_is_stripped():
    from dishcraft.config import get_spoonacular_api_key
    with patch.dict("os.environ", {"SPOONACULAR_API_KEY": "  abc123 \n"}):
        assert get_spoonacular_api_key() == "abc123"


def test_base_url_trailing_slash_removed():
    from dishcraft.config import get_spoonacular_base_url
    with patch.dict("os.environ", {"SPOONACULAR_BASE_URL": "http://localhost:9000/"}):
        assert get_spoonacular_base_url() == "http://localhost:9000"


def test_log_config_does_not_leak_key(caplog):
    import logging
    from dishcraft.config import log_config
    with patch.dict("os.environ", {"SPOONACULAR_API_KEY": "super-secret"}):
        with caplog.at_level(logging.INFO, logger="dishcraft.config"):
            log_config()
    assert "spoonacular_key_set=True" in caplog.text
    assert "super-secret" not in caplog.text
