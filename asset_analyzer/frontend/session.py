"""
State of one analysis session as seen by the UI.

Assets and sort configuration are only ever replaced wholesale.
"""

import logging
from typing import Any

from .models import Asset, ChartSlice, SortConfig, SortKey, SourceDocument
from .orchestrator import UNKNOWN_ERROR_MESSAGE, process_batch
from .selection import FileSelection
from .view_model import chart_slices, next_sort_config, sort_assets

logger = logging.getLogger(__name__)


class AnalysisSession:
    """
    Holds the current results, error banner and table sort state.

    Args:
        client: Extraction client used for every batch.
        timeout: Per-file deadline passed to the orchestrator.
    """

    def __init__(self, client: Any, timeout: float | None = None):
        self.client = client
        self.timeout = timeout
        self.assets: list[Asset] = []
        self.error: str | None = None
        self.notices: list[str] = []
        self.is_processing = False
        self.sort_config = SortConfig()

    async def run(self, documents: list[SourceDocument]) -> None:
        """
        Process a new batch, replacing any previous results.

        Non-PDF documents are skipped with a notice.
        """
        self.is_processing = True
        self.error = None
        self.assets = []
        selection = FileSelection()
        self.notices = selection.add(documents)

        try:
            result = await process_batch(
                selection.documents,
                self.client,
                timeout=self.timeout,
            )
            self.assets = result.assets
            self.error = result.error
        except Exception as e:
            logger.exception("Analysis run failed")
            self.error = str(e) or UNKNOWN_ERROR_MESSAGE
        finally:
            self.is_processing = False

    def sort_by(self, key: SortKey) -> SortConfig:
        """Apply a header click and return the new sort config."""
        self.sort_config = next_sort_config(self.sort_config, key)
        return self.sort_config

    @property
    def sorted_assets(self) -> list[Asset]:
        return sort_assets(self.assets, self.sort_config)

    @property
    def chart(self) -> list[ChartSlice]:
        return chart_slices(self.assets)
