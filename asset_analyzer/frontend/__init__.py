"""
Client-side core of the asset analyzer.

Contains:
- extraction_client: httpx client for the process-pdf endpoint
- orchestrator: Concurrent batch processing and merging
- view_model: Table sorting and chart aggregation
- selection / session: File selection and UI state
"""

from .extraction_client import ExtractionClient, ExtractionClientError
from .models import Asset, BatchResult, ChartSlice, SortConfig, SortDirection, SortKey, SourceDocument
from .orchestrator import NO_ASSETS_FOUND_MESSAGE, process_batch
from .selection import FileSelection
from .session import AnalysisSession
from .view_model import aggregate_by_type, chart_slices, next_sort_config, sort_assets

__all__ = [
    "AnalysisSession",
    "Asset",
    "BatchResult",
    "ChartSlice",
    "ExtractionClient",
    "ExtractionClientError",
    "FileSelection",
    "NO_ASSETS_FOUND_MESSAGE",
    "SortConfig",
    "SortDirection",
    "SortKey",
    "SourceDocument",
    "aggregate_by_type",
    "chart_slices",
    "next_sort_config",
    "process_batch",
    "sort_assets",
]
