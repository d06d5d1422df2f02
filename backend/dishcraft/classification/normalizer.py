"""
Ingredient name cleanup for the enrichment batch.
Strips punctuation/emoji and applies the length policy; out-of-bounds names are
filtered, not reported as errors.
"""
import re
import logging
from typing import Optional

logger = logging.getLogger(__name__)

# ASCII letters, digits and underscore survive, as do hyphen and any Unicode whitespace
_DISALLOWED_CHARS = re.compile(r"[^A-Za-z0-9_\s-]")

MIN_NAME_LENGTH = 2  # exclusive
MAX_NAME_LENGTH = 50  # exclusive


def clean_ingredient_name(raw: str) -> str:
    """Remove disallowed characters and trim. No length check."""
    if not raw or not isinstance(raw, str):
        return ""
    return _DISALLOWED_CHARS.sub("", raw).strip()


def normalize_ingredient_name(raw: str) -> Optional[str]:
    """
    Return the cleaned name if MIN_NAME_LENGTH < len < MAX_NAME_LENGTH, else None.
    Letter case is preserved.
    """
    name = clean_ingredient_name(raw)
    if MIN_NAME_LENGTH < len(name) < MAX_NAME_LENGTH:
        return name
    logger.debug("NORMALIZE dropped raw=%r cleaned=%r length=%d", raw, name, len(name))
    return None
