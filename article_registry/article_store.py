"""
Abstract interface for article document storage backends.

Defines load/replace over the single JSON document holding every article.
Implementations can keep the document on local disk, in distributed
storage (Tigris/S3), or in memory.
"""
from abc import ABC, abstractmethod

from article_registry.models import Document


class ArticleStore(ABC):
    """Abstract base class for article document storage."""

    @abstractmethod
    def load(self) -> Document:
        """
        Load the whole document.

        Returns:
            The stored document, or an empty document if it is missing,
            unreadable, or not shaped like a document.
        """

    @abstractmethod
    def replace(self, document: Document) -> bool:
        """
        Overwrite the stored document in full.

        Args:
            document: The document to persist.

        Returns:
            True if the document was written, False if the write failed.
            On failure the previously stored document is left in place.
        """
