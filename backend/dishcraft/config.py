"""
Paths and centralized configuration.
Values are read lazily from the environment so that load_dotenv() in entry points
and patch.dict(os.environ) in tests both take effect.
"""
import os
import logging
from pathlib import Path

from dishcraft.errors import ConfigurationError

logger = logging.getLogger(__name__)

# backend/dishcraft/config.py -> parent=dishcraft, parent.parent=backend, parent.parent.parent=repo
_BACKEND_DIR = Path(__file__).resolve().parent.parent
_REPO_ROOT = _BACKEND_DIR.parent

SPOONACULAR_MAX_BATCH = 100
STORE_BACKENDS = ("json", "supabase")


# --- Data paths ---
def get_data_dir() -> Path:
    override = os.environ.get("DISHCRAFT_DATA_DIR", "").strip()
    if override:
        return Path(override)
    return _REPO_ROOT / "data"


def get_ingredients_path() -> Path:
    return get_data_dir() / "ingredients.json"


def get_components_path() -> Path:
    return get_data_dir() / "recipe_components.json"


# --- Spoonacular ---
def get_spoonacular_api_key() -> str:
    return os.environ.get("SPOONACULAR_API_KEY", "").strip()


def get_spoonacular_base_url() -> str:
    return os.environ.get("SPOONACULAR_BASE_URL", "https://api.spoonacular.com").rstrip("/")


def get_spoonacular_batch_size() -> int:
    raw = os.environ.get("SPOONACULAR_BATCH_SIZE", str(SPOONACULAR_MAX_BATCH))
    try:
        size = int(raw)
    except ValueError:
        logger.warning("CONFIG invalid SPOONACULAR_BATCH_SIZE=%r, using %d", raw, SPOONACULAR_MAX_BATCH)
        return SPOONACULAR_MAX_BATCH
    return max(1, min(size, SPOONACULAR_MAX_BATCH))


def get_spoonacular_timeout() -> int:
    return int(os.environ.get("SPOONACULAR_TIMEOUT", "10"))


# --- Storage ---
def get_store_backend() -> str:
    backend = os.environ.get("DISHCRAFT_STORE", "json").strip().lower() or "json"
    if backend not in STORE_BACKENDS:
        raise ConfigurationError(
            f"DISHCRAFT_STORE={backend!r} is not supported (expected one of {', '.join(STORE_BACKENDS)})"
        )
    return backend


def get_supabase_url() -> str:
    return (os.environ.get("SUPABASE_URL") or "").strip()


def get_supabase_key() -> str:
    return (os.environ.get("SUPABASE_SERVICE_ROLE_KEY") or "").strip()


# --- Startup logging ---
def log_config() -> None:
    logger.info(
        "CONFIG: store=%s data_dir=%s spoonacular_base=%s spoonacular_key_set=%s batch_size=%s timeout=%ss",
        os.environ.get("DISHCRAFT_STORE", "json"),
        get_data_dir(),
        get_spoonacular_base_url(),
        bool(get_spoonacular_api_key()),
        get_spoonacular_batch_size(),
        get_spoonacular_timeout(),
    )
