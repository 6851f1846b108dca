"""
AI service package for asset extraction.

This package provides:
- extraction: The fixed prompt/schema and parsing of the model response
- validation: Normalization of raw model output into asset records

The AIService class wraps the OpenAI SDK behind a single narrow call,
generate_json(), so the rest of the application never touches the
provider directly.
"""

import base64
import json
import logging
from typing import Any

from fastapi import Depends

from ...config import Settings, get_settings
from .exceptions import AIServiceError, ConfigurationError
from .extraction import (
    ASSET_EXTRACTION_PROMPT,
    ASSET_LIST_SCHEMA,
    DEFAULT_MIME_TYPE,
    extract_assets,
    parse_asset_payload,
)
from .validation import normalize_asset, normalize_assets

logger = logging.getLogger(__name__)

__all__ = [
    "AIService",
    "AIServiceError",
    "ConfigurationError",
    "ASSET_EXTRACTION_PROMPT",
    "ASSET_LIST_SCHEMA",
    "DEFAULT_MIME_TYPE",
    "extract_assets",
    "get_ai_service",
    "normalize_asset",
    "normalize_assets",
    "parse_asset_payload",
]

# Key used to wrap array schemas, since structured outputs need an object root
_ROOT_KEY = "assets"


def _file_to_data_url(file_bytes: bytes, mime_type: str) -> str:
    """Encode file bytes as a base64 data URL for the API."""
    encoded = base64.b64encode(file_bytes).decode("utf-8")
    return f"data:{mime_type};base64,{encoded}"


def _wrap_schema(schema: dict[str, Any]) -> tuple[dict[str, Any], bool]:
    """Wrap a non-object schema in an object with a single required key."""
    if schema.get("type") == "object":
        return schema, False
    wrapped = {
        "type": "object",
        "properties": {_ROOT_KEY: schema},
        "required": [_ROOT_KEY],
        "additionalProperties": False,
    }
    return wrapped, True


def _unwrap_content(content: str) -> str:
    """Return the JSON text of the wrapped value, or the content unchanged."""
    try:
        data = json.loads(content)
    except json.JSONDecodeError:
        # Left for the caller to report
        return content
    if isinstance(data, dict) and _ROOT_KEY in data:
        return json.dumps(data[_ROOT_KEY], ensure_ascii=False)
    return content


# =============================================================================
# AIService Class
# =============================================================================


class AIService:
    """
    Service for AI-powered document extraction.

    Uses an OpenAI model with file input and structured outputs to turn a
    PDF into JSON constrained by a fixed schema.
    """

    def __init__(
        self,
        api_key: str | None,
        model: str = "gpt-4.1",
        client: Any = None,
    ):
        """
        Initialize the AI service.

        Args:
            api_key: OpenAI API key.
            model: OpenAI model to use (must accept PDF file input).
            client: Pre-built AsyncOpenAI client, mostly for tests.

        Raises:
            ConfigurationError: If no API key is provided.
        """
        if not api_key:
            raise ConfigurationError("API key not configured on the server.")

        self.api_key = api_key
        self.model = model
        self._client = client

    @property
    def client(self):
        """Lazy-load the OpenAI client."""
        if self._client is None:
            from openai import AsyncOpenAI

            self._client = AsyncOpenAI(api_key=self.api_key)
        return self._client

    async def generate_json(
        self,
        file_bytes: bytes,
        mime_type: str,
        instruction: str,
        schema: dict[str, Any],
        filename: str | None = None,
    ) -> str:
        """
        Submit a document with an instruction and output schema.

        Args:
            file_bytes: Raw document content.
            mime_type: MIME type of the document.
            instruction: Natural-language task description.
            schema: JSON schema the response must follow.
            filename: Filename reported to the model.

        Returns:
            The model's JSON text, matching the given schema.

        Raises:
            AIServiceError: If the model refuses, returns nothing, or the call fails.
        """
        response_schema, wrapped = _wrap_schema(schema)

        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {
                                "type": "file",
                                "file": {
                                    "filename": filename or "document.pdf",
                                    "file_data": _file_to_data_url(file_bytes, mime_type),
                                },
                            },
                            {"type": "text", "text": instruction},
                        ],
                    },
                ],
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": "asset_extraction",
                        "strict": True,
                        "schema": response_schema,
                    },
                },
            )
        except Exception as e:
            logger.exception("OpenAI request failed")
            raise AIServiceError(f"OpenAI request failed: {e}") from e

        message = response.choices[0].message
        refusal = getattr(message, "refusal", None)
        if refusal:
            raise AIServiceError(f"Model refused the request: {refusal}")

        content = message.content
        if not content:
            raise AIServiceError("Empty response from OpenAI")

        return _unwrap_content(content) if wrapped else content


# =============================================================================
# Dependency Factory
# =============================================================================


def get_ai_service(settings: Settings = Depends(get_settings)) -> AIService:
    """
    Build an AI service for the current request.

    A new service is created per request so no state is shared between
    requests.

    Raises:
        ConfigurationError: If the OpenAI API key is not configured.
    """
    return AIService(api_key=settings.openai_api_key, model=settings.openai_model)
