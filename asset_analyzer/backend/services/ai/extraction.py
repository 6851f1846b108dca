"""
Asset extraction from PDF documents.

Holds the fixed instruction and output schema sent to the model, and
turns the model's JSON text into a list of asset records.
"""

import json
import logging
from typing import Any

from ...models import ASSET_FIELD_NAMES, ExtractedAsset
from .exceptions import AIServiceError
from .validation import normalize_assets

logger = logging.getLogger(__name__)


DEFAULT_MIME_TYPE = "application/pdf"


# =============================================================================
# Extraction Prompt and Output Schema
# =============================================================================

ASSET_EXTRACTION_PROMPT = """Analyze the attached PDF document, which describes property assets.
Your task is to extract every asset listed in the document, in detail.

For each asset, extract the following:
1. Asset ID (the asset registration code)
2. Asset type (e.g. PC, Monitor, Printer, Notebook)
3. Model, series or brand
4. Serial Number (SN, S/N)
5. Location (look for an office or branch name, e.g. after "กฟส." or "กฟภ.")

Return the data as a JSON array following the given schema.
If any value cannot be found, use null for it. DO NOT HALLUCINATE."""


_FIELD_DESCRIPTIONS: dict[str, str] = {
    "assetId": "Asset registration code of the equipment",
    "type": "Type of equipment, e.g. PC, Monitor, Printer, Notebook",
    "model": "Model name, series or brand of the equipment",
    "serialNumber": "Serial Number or S/N of the equipment",
    "location": "Location of the equipment, e.g. the branch named after กฟส. or กฟภ.",
}

ASSET_LIST_SCHEMA: dict[str, Any] = {
    "type": "array",
    "items": {
        "type": "object",
        "properties": {
            name: {"type": ["string", "null"], "description": _FIELD_DESCRIPTIONS[name]}
            for name in ASSET_FIELD_NAMES
        },
        # Every key must be present; its value may still be null
        "required": list(ASSET_FIELD_NAMES),
        "additionalProperties": False,
    },
}


# =============================================================================
# Response Parsing
# =============================================================================


def parse_asset_payload(payload: str) -> list[ExtractedAsset]:
    """
    Parse the model's JSON text into asset records.

    A top-level value that is not an array yields an empty list.

    Raises:
        AIServiceError: If the text is not valid JSON.
    """
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        logger.error("Failed to parse extraction response: %s", payload[:500])
        raise AIServiceError(f"Invalid JSON in extraction response: {e}") from e

    if not isinstance(data, list):
        logger.warning(
            "Extraction response is a %s, not an array; returning no assets",
            type(data).__name__,
        )
        return []

    return normalize_assets(data)


async def extract_assets(
    file_bytes: bytes,
    mime_type: str,
    service: Any,  # anything with an async generate_json(), e.g. AIService
    filename: str | None = None,
) -> list[ExtractedAsset]:
    """
    Extract asset records from one document.

    Args:
        file_bytes: Raw document content.
        mime_type: MIME type of the document.
        service: Inference service used to run the model.
        filename: Original filename, for logging and the model request.

    Returns:
        The extracted assets, possibly empty.
    """
    logger.info(
        "Extracting assets from '%s' (%d bytes, %s)",
        filename or "<unnamed>",
        len(file_bytes),
        mime_type,
    )

    payload = await service.generate_json(
        file_bytes,
        mime_type,
        ASSET_EXTRACTION_PROMPT,
        ASSET_LIST_SCHEMA,
        filename=filename,
    )
    assets = parse_asset_payload(payload)

    logger.info("Extracted %d asset(s) from '%s'", len(assets), filename or "<unnamed>")
    return assets
