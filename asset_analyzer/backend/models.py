"""
Pydantic models for the asset extraction API.

Defines the wire shape of extracted asset records and of the
endpoint responses. Field names are camelCase on the wire and
snake_case in Python.
"""

from pydantic import BaseModel, ConfigDict, Field

ASSET_FIELD_NAMES: tuple[str, ...] = (
    "assetId",
    "type",
    "model",
    "serialNumber",
    "location",
)


class ExtractedAsset(BaseModel):
    """
    One asset as returned by the AI model.

    Every field may be absent: the model returns null for anything it
    could not find in the document.

    Attributes:
        asset_id: Asset registration code printed on the document.
        type: Kind of equipment (PC, Monitor, Printer, Notebook...).
        model: Model, series or brand name.
        serial_number: Manufacturer serial number (S/N).
        location: Office or branch where the asset is located.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    asset_id: str | None = Field(
        default=None,
        alias="assetId",
        description="Asset registration code",
        examples=["1000012345-0"],
    )
    type: str | None = Field(
        default=None,
        description="Type of equipment",
        examples=["PC", "Monitor", "Printer"],
    )
    model: str | None = Field(
        default=None,
        description="Model, series or brand",
        examples=["Dell OptiPlex 7090"],
    )
    serial_number: str | None = Field(
        default=None,
        alias="serialNumber",
        description="Serial number (S/N)",
    )
    location: str | None = Field(
        default=None,
        description="Location of the equipment",
    )


class ProcessPdfResponse(BaseModel):
    """Response model for the process-pdf endpoint."""

    assets: list[ExtractedAsset] = Field(
        default_factory=list,
        description="Assets extracted from the uploaded document",
    )


class ErrorResponse(BaseModel):
    """Body of every error response returned by the API."""

    error: str = Field(..., description="Human-readable error message")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    message: str = Field(..., description="Status message")
    version: str = Field(..., description="API version")
