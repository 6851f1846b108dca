"""
Client-side models for asset records, sorting and charting.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..backend.models import ExtractedAsset

PDF_MIME_TYPE = "application/pdf"


class Asset(ExtractedAsset):
    """
    An extracted asset tagged with its origin.

    Attributes:
        id: Unique key within one processing run.
        source_file: Name of the file the asset was extracted from.
    """

    id: str = Field(..., description="Unique record key")
    source_file: str = Field(
        ...,
        alias="sourceFile",
        description="Name of the originating file",
    )


class SortKey(str, Enum):
    """Asset fields the table can be sorted by."""

    ASSET_ID = "assetId"
    TYPE = "type"
    MODEL = "model"
    SERIAL_NUMBER = "serialNumber"
    LOCATION = "location"

    @property
    def attribute(self) -> str:
        """Python attribute name on Asset for this key."""
        return _SORT_KEY_ATTRIBUTES[self]


_SORT_KEY_ATTRIBUTES: dict[SortKey, str] = {
    SortKey.ASSET_ID: "asset_id",
    SortKey.TYPE: "type",
    SortKey.MODEL: "model",
    SortKey.SERIAL_NUMBER: "serial_number",
    SortKey.LOCATION: "location",
}


class SortDirection(str, Enum):
    """Sort direction of the table."""

    ASCENDING = "ascending"
    DESCENDING = "descending"


class SortConfig(BaseModel):
    """Active (field, direction) pair governing table order."""

    model_config = ConfigDict(frozen=True)

    key: SortKey = SortKey.ASSET_ID
    direction: SortDirection = SortDirection.ASCENDING


class ChartSlice(BaseModel):
    """One slice of the asset type pie chart."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: int = Field(..., ge=1)
    percent: int = Field(..., ge=0, le=100, description="Share of all assets, rounded")
    color: str


class SourceDocument(BaseModel):
    """A file selected by the user for processing."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    content: bytes
    content_type: str | None = None

    @property
    def is_pdf(self) -> bool:
        """Whether the document declares itself as a PDF."""
        return self.content_type == PDF_MIME_TYPE


class BatchResult(BaseModel):
    """Outcome of processing one batch of files."""

    assets: list[Asset] = Field(default_factory=list)
    error: str | None = Field(
        default=None,
        description="User-facing error, set when no assets were produced",
    )
    failures: dict[str, str] = Field(
        default_factory=dict,
        description="File name to failure reason, for files that failed",
    )
