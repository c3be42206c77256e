"""
Unit tests for JSON file utilities.
"""
import json
import os

import pytest

from article_registry.file_utils import load_json_file, save_json_file


class TestLoadJsonFile:
    """Test suite for load_json_file."""

    def test_missing_file_returns_default(self, tmp_path):
        """Test default is returned when the file doesn't exist."""
        default = {"articles": []}
        assert load_json_file(str(tmp_path / "missing.json"), default) is default

    def test_invalid_json_returns_default(self, tmp_path):
        """Test default is returned when the file isn't JSON."""
        path = tmp_path / "bad.json"
        path.write_text("not json", encoding="utf-8")
        assert load_json_file(str(path), None) is None

    def test_loads_content(self, tmp_path):
        """Test a valid file is parsed."""
        path = tmp_path / "ok.json"
        path.write_text('{"a": 1}', encoding="utf-8")
        assert load_json_file(str(path), {}) == {"a": 1}


class TestSaveJsonFile:
    """Test suite for save_json_file."""

    def test_creates_parent_directory(self, tmp_path):
        """Test parent directories are created when requested."""
        path = tmp_path / "nested" / "dir" / "data.json"
        save_json_file(str(path), {"a": 1})
        assert json.loads(path.read_text(encoding="utf-8")) == {"a": 1}

    def test_writes_indented_unicode(self, tmp_path):
        """Test output is indented and keeps non-ASCII text readable."""
        path = tmp_path / "data.json"
        save_json_file(str(path), {"authors": "Émile Zola"})
        content = path.read_text(encoding="utf-8")
        assert content == '{\n  "authors": "Émile Zola"\n}'

    def test_unserializable_data_keeps_previous_file(self, tmp_path):
        """Test a failed serialization leaves the old file and no temp file behind."""
        path = tmp_path / "data.json"
        save_json_file(str(path), {"a": 1})

        with pytest.raises(TypeError):
            save_json_file(str(path), {"a": object()})

        assert json.loads(path.read_text(encoding="utf-8")) == {"a": 1}
        assert os.listdir(tmp_path) == ["data.json"]
