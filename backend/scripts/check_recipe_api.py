#!/usr/bin/env python3
"""
Check that the Spoonacular recipe API is reachable with the configured key.
Run from backend: python scripts/check_recipe_api.py
Exit 0 if a one-recipe fetch succeeds; 1 if no key is configured or the fetch fails.
Costs one request against the daily quota.
"""
import sys
from pathlib import Path
from typing import Tuple

# Add backend to path when run as script
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from dotenv import load_dotenv
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

# Short timeout for health check
HEALTH_TIMEOUT = 8


def check_spoonacular(api_key: str) -> Tuple[bool, str]:
    """Return (success, message)."""
    if not (api_key or "").strip():
        return False, "no API key (set SPOONACULAR_API_KEY)"
    from dishcraft.errors import UpstreamFetchError
    from dishcraft.external_apis.spoonacular import fetch_random_recipes
    try:
        recipes = fetch_random_recipes(api_key.strip(), number=1, timeout=HEALTH_TIMEOUT)
    except UpstreamFetchError as e:
        if e.is_quota_exceeded:
            return False, "quota exceeded (HTTP 402)"
        return False, str(e)
    return True, f"ok (recipes={len(recipes)})"


def main() -> int:
    from dishcraft.config import get_spoonacular_api_key
    print("Checking Spoonacular recipe API...")
    ok, msg = check_spoonacular(get_spoonacular_api_key())
    print(f"  Spoonacular: {'OK' if ok else 'FAIL'} - {msg}")
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
