"""
Batch processing of user-selected files.

Every file is sent to the extraction client concurrently. A failing file
contributes no assets instead of aborting the batch; results are merged
in submission order regardless of completion order.
"""

import asyncio
import logging
import uuid
from typing import Any

from ..backend.models import ExtractedAsset
from .config import get_client_settings
from .models import Asset, BatchResult, SourceDocument

logger = logging.getLogger(__name__)

NO_ASSETS_FOUND_MESSAGE = (
    "No asset data was found in the uploaded files, or the files could not be processed."
)
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."


def make_asset_id(source_file: str, asset_id: str | None) -> str:
    """
    Build the record key for an asset.

    Falls back to a random suffix when the asset has no ID.
    """
    return f"{source_file}-{asset_id or uuid.uuid4().hex}"


def tag_assets(source_file: str, extracted: list[ExtractedAsset]) -> list[Asset]:
    """Attach a record key and the source file name to extracted assets."""
    return [
        Asset(
            **item.model_dump(),
            id=make_asset_id(source_file, item.asset_id),
            source_file=source_file,
        )
        for item in extracted
    ]


async def _process_document(
    document: SourceDocument,
    client: Any,  # ExtractionClient or anything with async extract_assets()
    timeout: float | None,
    failures: dict[str, str],
) -> list[Asset]:
    """Extract and tag one document, converting any failure into no assets."""
    try:
        extracted = await asyncio.wait_for(client.extract_assets(document), timeout)
    except asyncio.TimeoutError:
        logger.error("Timed out after %.1fs processing file %s", timeout, document.name)
        failures[document.name] = f"Timed out after {timeout:g} seconds"
        return []
    except Exception as e:
        logger.error("Error in file %s: %s", document.name, e)
        failures[document.name] = str(e)
        return []

    return tag_assets(document.name, extracted)


async def process_batch(
    documents: list[SourceDocument],
    client: Any,
    timeout: float | None = None,
) -> BatchResult:
    """
    Process a batch of documents concurrently and merge the results.

    Args:
        documents: Files to process, already filtered to PDFs.
        client: Extraction client used for every file.
        timeout: Deadline in seconds per file. Defaults to the configured
            per-file timeout.

    Returns:
        BatchResult with merged assets in submission order. Its error is set
        when no assets were produced at all.
    """
    if timeout is None:
        timeout = get_client_settings().per_file_timeout

    failures: dict[str, str] = {}
    logger.info("Starting batch: %d file(s), %.1fs per-file timeout", len(documents), timeout)

    try:
        results = await asyncio.gather(
            *(_process_document(doc, client, timeout, failures) for doc in documents)
        )
    except Exception as e:
        logger.exception("Batch processing failed")
        return BatchResult(error=str(e) or UNKNOWN_ERROR_MESSAGE, failures=failures)

    assets = [asset for file_assets in results for asset in file_assets]

    logger.info(
        "Batch completed: %d asset(s) from %d file(s), %d failed",
        len(assets),
        len(documents),
        len(failures),
    )

    if not assets:
        return BatchResult(error=NO_ASSETS_FOUND_MESSAGE, failures=failures)
    return BatchResult(assets=assets, failures=failures)
