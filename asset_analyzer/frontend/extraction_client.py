"""
HTTP client for the asset extraction endpoint.

Sends one file per request and translates every failure into a single
ExtractionClientError naming the file.
"""

import logging

import httpx
from pydantic import ValidationError

from ..backend.models import ExtractedAsset
from .config import get_client_settings
from .models import PDF_MIME_TYPE, SourceDocument

logger = logging.getLogger(__name__)

PROCESS_PDF_PATH = "/api/process-pdf"
UPLOAD_FIELD_NAME = "pdfFile"


class ExtractionClientError(Exception):
    """Raised when a file could not be processed by the backend."""

    def __init__(self, filename: str, reason: str):
        self.filename = filename
        self.reason = reason
        super().__init__(f"Failed to process {filename}. Reason: {reason}")


def _error_message(response: httpx.Response) -> str:
    """Build an error message from a non-success response."""
    fallback = f"Server error: {response.status_code} {response.reason_phrase}"
    try:
        data = response.json()
    except ValueError:
        # Body was not JSON, stick with the status line
        return fallback
    if isinstance(data, dict) and data.get("error"):
        return str(data["error"])
    return fallback


class ExtractionClient:
    """
    Client for POST /api/process-pdf.

    Can be used as an async context manager. An injected httpx client is
    left open for its owner to close.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ):
        settings = get_client_settings()
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(
            timeout=timeout if timeout is not None else settings.request_timeout,
        )

    async def __aenter__(self) -> "ExtractionClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._http.aclose()

    async def extract_assets(self, document: SourceDocument) -> list[ExtractedAsset]:
        """
        Upload one document and return the assets found in it.

        Args:
            document: The file to process.

        Returns:
            Extracted assets, possibly empty.

        Raises:
            ExtractionClientError: For any transport, status or parse failure.
        """
        files = {
            UPLOAD_FIELD_NAME: (
                document.name,
                document.content,
                document.content_type or PDF_MIME_TYPE,
            )
        }

        try:
            response = await self._http.post(f"{self.base_url}{PROCESS_PDF_PATH}", files=files)

            if not response.is_success:
                raise ExtractionClientError(document.name, _error_message(response))

            data = response.json()
            raw_assets = data.get("assets") if isinstance(data, dict) else None
            return [ExtractedAsset.model_validate(item) for item in raw_assets or []]

        except ExtractionClientError as e:
            logger.error("Error uploading or processing file %s: %s", document.name, e.reason)
            raise
        except (httpx.HTTPError, ValueError, ValidationError) as e:
            logger.error("Error uploading or processing file %s: %s", document.name, e)
            raise ExtractionClientError(document.name, str(e) or type(e).__name__) from e
