"""
Normalization of raw model output into asset records.

Handles:
- Dropping items that are not JSON objects
- Reducing each object to the five asset fields
- Coercing stray scalar values to strings
"""

import logging
from typing import Any

from ...models import ASSET_FIELD_NAMES, ExtractedAsset

logger = logging.getLogger(__name__)


def _normalize_value(value: Any) -> str | None:
    """Coerce a raw field value to a string or None."""
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    # Nested objects/arrays are not meaningful for a flat asset field
    return None


def normalize_asset(item: Any) -> ExtractedAsset | None:
    """
    Normalize one raw item from the model response.

    Returns None if the item is not an object.
    """
    if not isinstance(item, dict):
        return None

    values = {name: _normalize_value(item.get(name)) for name in ASSET_FIELD_NAMES}
    return ExtractedAsset.model_validate(values)


def normalize_assets(items: list[Any]) -> list[ExtractedAsset]:
    """Normalize every item of the model's array, preserving order."""
    assets: list[ExtractedAsset] = []
    dropped = 0

    for item in items:
        asset = normalize_asset(item)
        if asset is None:
            dropped += 1
            continue
        assets.append(asset)

    if dropped:
        logger.warning("Dropped %d non-object item(s) from extraction response", dropped)

    return assets
