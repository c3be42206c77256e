"""
Base classes for JSON-based article stores (local disk and Tigris/S3).

Provides common functionality for storage backends that persist the
document as a JSON object.
"""
import json
import logging
import os
from abc import abstractmethod
from typing import Any, Dict, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError

from article_registry.article_store import ArticleStore
from article_registry.file_utils import load_json_file, save_json_file
from article_registry.models import Article, Document

logger = logging.getLogger(__name__)


def decode_document(data: Any, source: str) -> Document:
    """
    Decode raw JSON data into a Document.

    Each article is decoded on its own. Records that don't validate are
    skipped and the document is marked incomplete, so it must not be
    written back over the stored one.

    Args:
        data: Parsed JSON content (None when nothing is stored)
        source: Description of where the data came from, for logging

    Returns:
        The decoded document
    """
    document = Document.empty()
    if data is None:
        return document

    articles = data.get("articles", []) if isinstance(data, dict) else None
    if not isinstance(articles, list):
        logger.error("Stored document at %s is not shaped like a document, treating as empty", source)
        document.mark_incomplete()
        return document

    for position, raw in enumerate(articles):
        try:
            document.articles.append(Article.model_validate(raw))
        except ValidationError as exc:
            logger.error("Skipping malformed article #%d in %s: %s", position, source, exc)
            document.mark_incomplete()
    return document


class BaseLocalDiskStore(ArticleStore):
    """
    Base class for local disk article stores.

    Provides common functionality for storing JSON data on local filesystem.
    """

    def __init__(self, data_dir: str = "data"):
        """
        Initialize local disk store.

        Args:
            data_dir: Directory for storing data files (default: "data")
        """
        self.data_dir = data_dir
        os.makedirs(self.data_dir, exist_ok=True)

    @abstractmethod
    def _get_filename(self) -> str:
        """
        Get the filename for this store's document.

        Returns:
            Filename (e.g., "data.json")
        """

    def _get_filepath(self) -> str:
        """Get the full file path for storage."""
        return os.path.join(self.data_dir, self._get_filename())

    def _load_data(self) -> Optional[Dict[str, Any]]:
        """
        Load JSON data from file.

        Returns:
            Loaded JSON data, or None if the file is missing or unreadable
        """
        return load_json_file(self._get_filepath(), None)

    def _save_data(self, data: Dict[str, Any], ensure_dir: bool = True) -> None:
        """
        Save JSON data to file.

        Args:
            data: Data to save
            ensure_dir: Whether to create parent directory if it doesn't exist
        """
        save_json_file(self._get_filepath(), data, ensure_dir=ensure_dir)

    def load(self) -> Document:
        """Load the document from local disk."""
        return decode_document(self._load_data(), self._get_filepath())

    def replace(self, document: Document) -> bool:
        """Overwrite the document on local disk."""
        try:
            self._save_data(document.to_dict())
        except (OSError, TypeError, ValueError) as exc:
            logger.error("Failed to write %s: %s", self._get_filepath(), exc)
            return False
        return True


class BaseTigrisStore(ArticleStore):
    """
    Base class for Tigris/S3-compatible article stores.

    Provides common functionality for S3-compatible object storage.
    """

    def __init__(
        self,
        access_key_id: Optional[str] = None,
        secret_access_key: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        bucket_name: Optional[str] = None,
        region: Optional[str] = None
    ):
        """
        Initialize Tigris store.

        Args:
            access_key_id: AWS access key ID (defaults to AWS_ACCESS_KEY_ID env var)
            secret_access_key: AWS secret access key (defaults to AWS_SECRET_ACCESS_KEY env var)
            endpoint_url: S3 endpoint URL (defaults to AWS_ENDPOINT_URL_S3 or
                         https://fly.storage.tigris.dev)
            bucket_name: S3 bucket name (defaults to TIGRIS_BUCKET_NAME env var)
            region: AWS region (defaults to AWS_REGION or 'auto')

        Raises:
            ValueError: If credentials are given without a secret or bucket
        """
        self.access_key_id = access_key_id or os.getenv('AWS_ACCESS_KEY_ID')
        self.secret_access_key = secret_access_key or os.getenv('AWS_SECRET_ACCESS_KEY')
        self.endpoint_url = (
            endpoint_url or
            os.getenv('AWS_ENDPOINT_URL_S3', 'https://fly.storage.tigris.dev')
        )
        self.bucket_name = bucket_name or os.getenv('TIGRIS_BUCKET_NAME')
        self.region = region or os.getenv('AWS_REGION', 'auto')

        if self.access_key_id is not None:
            if not self.access_key_id or not self.secret_access_key:
                raise ValueError(
                    "AWS credentials are required. Set AWS_ACCESS_KEY_ID and "
                    "AWS_SECRET_ACCESS_KEY environment variables or pass them as parameters."
                )

            if not self.bucket_name:
                raise ValueError(
                    "Bucket name is required. Set TIGRIS_BUCKET_NAME environment variable "
                    "or pass it as a parameter."
                )

        self.s3_client = boto3.client(
            's3',
            aws_access_key_id=self.access_key_id,
            aws_secret_access_key=self.secret_access_key,
            endpoint_url=self.endpoint_url,
            region_name=self.region
        )

    @abstractmethod
    def _get_object_key(self) -> str:
        """
        Get the S3 object key for this store's document.

        Returns:
            Object key (e.g., "data/data.json")
        """

    def _load_from_s3(self) -> Optional[Dict[str, Any]]:
        """
        Load JSON data from S3 object.

        Returns:
            Parsed JSON data or None if object doesn't exist

        Raises:
            ClientError: For S3 errors other than a missing key
        """
        try:
            response = self.s3_client.get_object(
                Bucket=self.bucket_name,
                Key=self._get_object_key()
            )
            content = response['Body'].read()
            return json.loads(content.decode('utf-8'))
        except ClientError as e:
            if e.response['Error']['Code'] == 'NoSuchKey':
                return None
            raise

    def _save_to_s3(self, data: Dict[str, Any]) -> None:
        """
        Save JSON data to S3 object.

        Args:
            data: Data to save (will be JSON encoded)
        """
        json_content = json.dumps(data, indent=2, ensure_ascii=False)
        self.s3_client.put_object(
            Bucket=self.bucket_name,
            Key=self._get_object_key(),
            Body=json_content,
            ContentType='application/json',
            CacheControl='no-cache, no-store, must-revalidate'
        )

    def load(self) -> Document:
        """Load the document from S3."""
        source = f"s3://{self.bucket_name}/{self._get_object_key()}"
        try:
            data = self._load_from_s3()
        except (ClientError, BotoCoreError, ValueError, RecursionError) as exc:
            logger.error("Failed to read %s: %s", source, exc)
            return Document.empty()
        return decode_document(data, source)

    def replace(self, document: Document) -> bool:
        """Overwrite the document in S3."""
        try:
            self._save_to_s3(document.to_dict())
        except (ClientError, BotoCoreError) as exc:
            logger.error("Failed to write s3://%s/%s: %s", self.bucket_name, self._get_object_key(), exc)
            return False
        return True
