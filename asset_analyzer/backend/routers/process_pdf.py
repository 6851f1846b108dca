"""
Router for the document submission endpoint.

Accepts one uploaded PDF, forwards it to the AI model and returns the
extracted asset records.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from ..models import ErrorResponse, ProcessPdfResponse
from ..services.ai import DEFAULT_MIME_TYPE, AIService, extract_assets, get_ai_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["process-pdf"])

# Multipart field the client must put the file under
UPLOAD_FIELD_NAME = "pdfFile"


@router.post(
    "/process-pdf",
    response_model=ProcessPdfResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_405_METHOD_NOT_ALLOWED: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def process_pdf(
    ai_service: Annotated[AIService, Depends(get_ai_service)],
    pdf_files: Annotated[
        list[UploadFile] | None,
        File(alias=UPLOAD_FIELD_NAME, description="PDF file to analyze"),
    ] = None,
) -> ProcessPdfResponse:
    """
    Extract asset records from an uploaded PDF.

    The content type is passed through as received; the client is not
    trusted to have validated it. The uploaded file is always closed,
    releasing its temporary storage. If several parts are sent under the
    field, only the first one is processed.
    """
    if not pdf_files:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No PDF file uploaded.",
        )

    pdf_file = pdf_files[0]

    try:
        file_bytes = await pdf_file.read()
        mime_type = pdf_file.content_type or DEFAULT_MIME_TYPE

        logger.info("Processing upload: %s (%d bytes)", pdf_file.filename, len(file_bytes))

        assets = await extract_assets(
            file_bytes,
            mime_type,
            ai_service,
            filename=pdf_file.filename,
        )
        return ProcessPdfResponse(assets=assets)

    except Exception as e:
        logger.exception("Error in process-pdf handler")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"An internal server error occurred: {e}",
        )
    finally:
        for upload in pdf_files:
            await upload.close()
