"""
File utility functions for the article registry.
Common JSON file operations shared by the local disk store.
"""
import json
import logging
import os
import tempfile
from typing import Any, Dict

logger = logging.getLogger(__name__)


def load_json_file(filepath: str, default: Dict[str, Any]) -> Dict[str, Any]:
    """
    Load a JSON file with a default fallback.

    A missing, unreadable or non-JSON file yields the default instead of
    raising.

    Args:
        filepath: Path to the JSON file
        default: Default value if file doesn't exist or can't be parsed

    Returns:
        Loaded JSON data or default value
    """
    if not os.path.exists(filepath):
        return default
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            return json.load(f)
    except (OSError, ValueError, RecursionError) as exc:
        logger.error("Failed to read JSON file %s: %s", filepath, exc)
        return default


def save_json_file(filepath: str, data: Dict[str, Any], ensure_dir: bool = True) -> None:
    """
    Save data to a JSON file, replacing it in full.

    The data is written to a temporary file next to the target and moved
    over it, so a failed write leaves the previous file untouched.

    Args:
        filepath: Path to save the JSON file
        data: Data to save
        ensure_dir: Whether to create parent directory if it doesn't exist

    Raises:
        OSError: If the file can't be written
        TypeError: If the data isn't JSON serializable
    """
    directory = os.path.dirname(filepath) or "."
    if ensure_dir:
        os.makedirs(directory, exist_ok=True)

    fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".tmp-", suffix=".json")
    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        os.replace(tmp_path, filepath)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise
