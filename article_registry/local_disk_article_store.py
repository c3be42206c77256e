"""
Local disk implementation of article storage.

Stores the article document as a JSON file on the local filesystem.
Default location: data/data.json
"""
from article_registry.base_json_store import BaseLocalDiskStore


class LocalDiskArticleStore(BaseLocalDiskStore):
    """
    Local disk implementation of article storage.

    Stores the article document in a JSON file on the local filesystem.
    Default location: data/data.json
    """

    def __init__(self, data_dir: str = "data", filename: str = "data.json"):
        """
        Initialize the local disk article store.

        Args:
            data_dir: Directory for the data file (default: "data")
            filename: Name of the data file (default: "data.json")
        """
        self.filename = filename
        super().__init__(data_dir=data_dir)

    def _get_filename(self) -> str:
        """Get the filename for article storage."""
        return self.filename
