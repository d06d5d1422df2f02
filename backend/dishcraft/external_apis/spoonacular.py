"""
Spoonacular recipe API connector.
Random recipes: GET {base}/recipes/random?number=N&apiKey=KEY -> {"recipes": [...]}
Free tier allows 150 points/day; quota exhaustion is answered with HTTP 402.
One attempt only: any failure aborts the enrichment run.
"""
import logging
from typing import Any, Optional

import requests

from dishcraft.config import (
    SPOONACULAR_MAX_BATCH,
    get_spoonacular_base_url,
    get_spoonacular_timeout,
)
from dishcraft.errors import UpstreamFetchError

logger = logging.getLogger(__name__)

RANDOM_RECIPES_PATH = "/recipes/random"
SOURCE_NAME = "Spoonacular API"


def fetch_random_recipes(
    api_key: str,
    number: int = SPOONACULAR_MAX_BATCH,
    base_url: Optional[str] = None,
    timeout: Optional[int] = None,
) -> list[dict[str, Any]]:
    """
    Fetch one batch of random recipes. Raises UpstreamFetchError on network error,
    non-2xx status or a body without a recipes list.
    """
    url = (base_url or get_spoonacular_base_url()) + RANDOM_RECIPES_PATH
    number = max(1, min(int(number), SPOONACULAR_MAX_BATCH))
    timeout = timeout if timeout is not None else get_spoonacular_timeout()
    logger.info("SPOONACULAR fetch random recipes number=%d timeout=%ss", number, timeout)
    try:
        resp = requests.get(
            url,
            params={"number": number, "apiKey": api_key},
            timeout=timeout,
        )
    except requests.Timeout as e:
        raise UpstreamFetchError(f"Read timed out: {e}") from e
    except requests.RequestException as e:
        raise UpstreamFetchError(f"{type(e).__name__}: {e}") from e

    if not 200 <= resp.status_code < 300:
        body = (resp.text or "")[:500]
        logger.error("SPOONACULAR response status=%s body=%s", resp.status_code, body)
        raise UpstreamFetchError(
            f"Spoonacular returned HTTP {resp.status_code}",
            status_code=resp.status_code,
            body=body,
        )

    try:
        data = resp.json()
    except ValueError as e:
        raise UpstreamFetchError(f"Spoonacular returned invalid JSON: {e}", status_code=resp.status_code) from e

    recipes = data.get("recipes") if isinstance(data, dict) else None
    if not isinstance(recipes, list):
        raise UpstreamFetchError("Spoonacular response has no recipes list", status_code=resp.status_code)
    logger.info("SPOONACULAR fetched recipes=%d", len(recipes))
    return recipes
