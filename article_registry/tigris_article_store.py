"""
Tigris/S3-compatible storage implementation of article storage.

Stores the article document in an S3-compatible object storage service,
so several server instances can share the same data.
Default object key: data/data.json
"""
from article_registry.base_json_store import BaseTigrisStore


class TigrisArticleStore(BaseTigrisStore):
    """
    Tigris/S3-compatible storage implementation of article storage.

    Default object key: data/data.json
    """

    def __init__(self, object_key: str = "data/data.json", **kwargs):
        """
        Initialize the Tigris article store.

        Args:
            object_key: S3 key of the document object.
            **kwargs: Additional keyword arguments passed to BaseTigrisStore.
        """
        super().__init__(**kwargs)
        self.object_key = object_key

    def _get_object_key(self) -> str:
        """Get the S3 object key for article storage."""
        return self.object_key
