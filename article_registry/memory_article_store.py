"""
In-memory implementation of article storage.

Keeps the serialized document in memory. Nothing touches the filesystem,
which makes it the store of choice for tests and throwaway instances.
"""
import json
from typing import Optional

from article_registry.article_store import ArticleStore
from article_registry.base_json_store import decode_document
from article_registry.models import Document


class InMemoryArticleStore(ArticleStore):
    """Article store backed by a JSON string held in memory."""

    def __init__(self, document: Optional[Document] = None, fail_writes: bool = False):
        """
        Initialize the in-memory store.

        Args:
            document: Initial document (default: empty)
            fail_writes: When True, every replace() reports failure
        """
        self.fail_writes = fail_writes
        self.load_count = 0
        self.replace_count = 0
        self._content = json.dumps((document or Document.empty()).to_dict(), indent=2, ensure_ascii=False)

    @property
    def content(self) -> str:
        """The serialized document as it would appear on disk."""
        return self._content

    def load(self) -> Document:
        self.load_count += 1
        return decode_document(json.loads(self._content), "memory")

    def replace(self, document: Document) -> bool:
        self.replace_count += 1
        if self.fail_writes:
            return False
        self._content = json.dumps(document.to_dict(), indent=2, ensure_ascii=False)
        return True
