"""
Configuration management for the article registry.
Loads environment variables and provides access to configuration settings.
"""
import logging
import os
from dotenv import load_dotenv

logger = logging.getLogger(__name__)


class Config:
    """Configuration settings loaded from environment variables."""

    def __init__(self):
        """Initialize configuration by loading environment variables."""
        load_dotenv()

    @property
    def storage_type(self) -> str:
        """Get the article storage backend ('local', 'tigris' or 'memory')."""
        return os.getenv("ARTICLE_STORAGE_TYPE", "local").lower()

    @property
    def data_dir(self) -> str:
        """Get the directory holding the local data file."""
        return os.getenv("DATA_DIR", "data")

    @property
    def data_filename(self) -> str:
        """Get the name of the local data file."""
        return os.getenv("DATA_FILENAME", "data.json")

    @property
    def tigris_object_key(self) -> str:
        """Get the S3 object key of the document when using Tigris storage."""
        return os.getenv("TIGRIS_OBJECT_KEY", "data/data.json")

    @property
    def server_host(self) -> str:
        """Get server host."""
        return os.getenv("SERVER_HOST", "127.0.0.1")

    @property
    def server_port(self) -> int:
        """Get server port."""
        value = os.getenv("SERVER_PORT", "5000")
        try:
            return int(value)
        except ValueError:
            logger.warning("Invalid SERVER_PORT %r, using 5000", value)
            return 5000

    @property
    def log_level(self) -> str:
        """Get the log level name."""
        return os.getenv("LOG_LEVEL", "INFO").upper()
