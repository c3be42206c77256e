"""
Exceptions raised by the record service.

Each one carries the HTTP status and client-facing message the server
answers with.
"""
from typing import Optional


class ArticleRegistryError(Exception):
    """Base class for record service failures."""

    status_code = 500
    message = "Server error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class ArticleNotFoundError(ArticleRegistryError):
    """The targeted article id is not in the document."""

    status_code = 404
    message = "Article not found"


class BadRequestError(ArticleRegistryError):
    """The request is missing a usable article id."""

    status_code = 400
    message = "Missing ID"


class StorageWriteError(ArticleRegistryError):
    """The store could not persist the updated document."""

    status_code = 500
    message = "Failed to write data file"


class IncompleteDocumentError(ArticleRegistryError):
    """The stored document has records that couldn't be decoded."""

    status_code = 500
    message = "Data file contains unreadable records"
