"""
Record service implementing list/create/update/delete over an article store.

Every operation reloads the document from the store; mutating operations
replace it in full. There is no locking: two concurrent mutations can race
and one of them may be lost.
"""
import logging
from typing import Optional

from article_registry.article_store import ArticleStore
from article_registry.errors import (
    ArticleNotFoundError,
    BadRequestError,
    IncompleteDocumentError,
    StorageWriteError,
)
from article_registry.models import Article, ArticleFields, Document

logger = logging.getLogger(__name__)


def parse_article_id(raw: Optional[str]) -> Optional[int]:
    """
    Parse an article id from a query string value.

    Args:
        raw: The raw value, possibly missing or empty

    Returns:
        The id as an int, or None if the value isn't an integer
    """
    if raw is None:
        return None
    try:
        return int(str(raw).strip())
    except ValueError:
        return None


class RecordService:
    """CRUD operations on articles backed by an injected store."""

    def __init__(self, store: ArticleStore):
        """
        Initialize the record service.

        Args:
            store: Store holding the article document
        """
        self.store = store

    def _load_for_write(self) -> Document:
        document = self.store.load()
        if not document.is_complete:
            logger.error("Refusing to overwrite a document with unreadable records")
            raise IncompleteDocumentError()
        return document

    def _replace(self, document: Document) -> None:
        if not self.store.replace(document):
            raise StorageWriteError()

    def list_articles(self) -> Document:
        """
        Get the whole document.

        Returns:
            The stored document, unfiltered and unsorted
        """
        return self.store.load()

    def get_article(self, article_id: int) -> Article:
        """
        Get a single article by id.

        Raises:
            ArticleNotFoundError: If no article has this id
        """
        document = self.store.load()
        index = document.find_index(article_id)
        if index is None:
            raise ArticleNotFoundError()
        return document.articles[index]

    def create_article(self, fields: ArticleFields) -> Article:
        """
        Create an article with the next free id and append it.

        Args:
            fields: Article fields without an id

        Returns:
            The created article, including its assigned id

        Raises:
            IncompleteDocumentError: If the stored document has unreadable records
            StorageWriteError: If the document couldn't be written
        """
        document = self._load_for_write()
        article = fields.with_id(document.next_id())
        document.articles.append(article)
        self._replace(document)
        logger.info("Created article %d", article.id)
        return article

    def update_article(self, article: Article) -> Article:
        """
        Replace the stored article that has the same id.

        The whole record is replaced, not merged, and keeps its position.

        Raises:
            ArticleNotFoundError: If no article has this id
            IncompleteDocumentError: If the stored document has unreadable records
            StorageWriteError: If the document couldn't be written
        """
        document = self._load_for_write()
        index = document.find_index(article.id)
        if index is None:
            raise ArticleNotFoundError()

        document.articles[index] = article
        self._replace(document)
        logger.info("Updated article %d", article.id)
        return article

    def delete_article(self, article_id: Optional[int]) -> None:
        """
        Delete the article with the given id.

        Raises:
            BadRequestError: If the id is missing, zero or negative
            ArticleNotFoundError: If no article has this id
            IncompleteDocumentError: If the stored document has unreadable records
            StorageWriteError: If the document couldn't be written
        """
        if not article_id or article_id < 0:
            raise BadRequestError()

        document = self._load_for_write()
        remaining = [a for a in document.articles if a.id != article_id]
        if len(remaining) == len(document.articles):
            raise ArticleNotFoundError()

        self._replace(Document(articles=remaining))
        logger.info("Deleted article %d", article_id)
