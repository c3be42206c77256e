"""
Factory function for creating article stores.
"""
import logging
from typing import Optional

from article_registry.article_store import ArticleStore
from article_registry.config import Config
from article_registry.local_disk_article_store import LocalDiskArticleStore
from article_registry.memory_article_store import InMemoryArticleStore
from article_registry.tigris_article_store import TigrisArticleStore

logger = logging.getLogger(__name__)


def create_article_store(config: Optional[Config] = None) -> ArticleStore:
    """
    Create an article store based on environment configuration.

    Reads the ARTICLE_STORAGE_TYPE environment variable to determine
    which implementation to use:
    - 'local' or unset: LocalDiskArticleStore (default)
    - 'tigris': TigrisArticleStore
    - 'memory': InMemoryArticleStore

    Args:
        config: Configuration to read from (default: a fresh Config)

    Returns:
        ArticleStore: Configured article store instance
    """
    config = config or Config()
    storage_type = config.storage_type

    if storage_type == 'tigris':
        return TigrisArticleStore(object_key=config.tigris_object_key)
    if storage_type == 'memory':
        return InMemoryArticleStore()
    if storage_type != 'local':
        logger.warning("Unknown ARTICLE_STORAGE_TYPE %r, using local disk", storage_type)
    return LocalDiskArticleStore(data_dir=config.data_dir, filename=config.data_filename)
