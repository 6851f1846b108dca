"""
Routers package for FastAPI endpoints.

- process_pdf: Document upload and asset extraction
"""

from . import process_pdf

__all__ = ["process_pdf"]
