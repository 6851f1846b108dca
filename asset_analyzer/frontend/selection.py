"""
Accumulation of user-selected files before processing.
"""

import logging

from .models import SourceDocument

logger = logging.getLogger(__name__)


def rejection_notice(document: SourceDocument) -> str:
    """Message shown to the user for a file that is not a PDF."""
    return f"{document.name} was not added: only PDF files are supported."


class FileSelection:
    """
    Files the user has picked, in the order they were added.

    Only PDF documents are accepted. Everything else is rejected with a
    notice instead of being dropped silently.
    """

    def __init__(self) -> None:
        self._documents: list[SourceDocument] = []

    @property
    def documents(self) -> list[SourceDocument]:
        return list(self._documents)

    def __len__(self) -> int:
        return len(self._documents)

    def add(self, documents: list[SourceDocument]) -> list[str]:
        """
        Add documents to the selection.

        Returns:
            One rejection notice per non-PDF document.
        """
        notices = []
        for document in documents:
            if document.is_pdf:
                self._documents.append(document)
            else:
                logger.info("Rejected non-PDF file %s (%s)", document.name, document.content_type)
                notices.append(rejection_notice(document))
        return notices

    def remove(self, name: str) -> None:
        """Remove every selected document with this name."""
        self._documents = [d for d in self._documents if d.name != name]

    def clear(self) -> None:
        self._documents = []
