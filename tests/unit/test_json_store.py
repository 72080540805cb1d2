"""
Unit tests for the DocumentStore storage layer.
"""
import json
import pytest

from jsonserver.errors import StorageFailure
from jsonserver.storage.json_store import DocumentStore


@pytest.mark.unit
class TestDocumentStore:
    """Tests for whole-document load/save."""

    def test_init_creates_parent_directory(self, tmp_path):
        """Test that DocumentStore creates the directory holding the database file."""
        db_file = tmp_path / "nested" / "dir" / "db.json"
        assert not db_file.parent.exists()

        DocumentStore(db_file)

        assert db_file.parent.is_dir()

    def test_load_missing_file_creates_empty_document(self, document_store, db_file):
        """Test that a missing database file is synthesized as {} and persisted."""
        assert not db_file.exists()

        doc = document_store.load()

        assert doc == {}
        assert db_file.exists()
        assert json.loads(db_file.read_text()) == {}

    def test_load_existing_document(self, document_store, seed_db):
        seed_db({"widgets": [{"id": 1, "name": "A"}]})

        doc = document_store.load()

        assert doc == {"widgets": [{"id": 1, "name": "A"}]}

    def test_load_corrupt_file_raises_storage_failure(self, document_store, db_file):
        """Test that unparseable JSON is a storage failure, not an empty document."""
        db_file.write_text("{not json", encoding="utf-8")

        with pytest.raises(StorageFailure, match="Failed to read database"):
            document_store.load()

        # The corrupt file is left alone
        assert db_file.read_text(encoding="utf-8") == "{not json"

    def test_load_directory_raises_storage_failure(self, tmp_path):
        db_path = tmp_path / "db.json"
        db_path.mkdir()
        store = DocumentStore(db_path)

        with pytest.raises(StorageFailure):
            store.load()

    def test_save_replaces_whole_document(self, document_store):
        document_store.save({"a": [1], "b": []})
        document_store.save({"c": []})

        assert document_store.load() == {"c": []}

    def test_save_is_pretty_printed_in_insertion_order(self, document_store, db_file):
        """Test that the file is indented and keeps key insertion order."""
        document_store.save({"zebras": [], "apples": [{"id": 1}]})

        content = db_file.read_text(encoding="utf-8")

        assert "\n" in content
        assert '  "zebras"' in content
        assert content.index("zebras") < content.index("apples")

    def test_save_leaves_no_temp_file(self, document_store, db_file):
        document_store.save({"a": []})

        assert not db_file.with_name(db_file.name + ".tmp").exists()

    def test_save_unserializable_raises_storage_failure(self, document_store):
        with pytest.raises(StorageFailure, match="Failed to write database"):
            document_store.save({"bad": object()})

    def test_unicode_support(self, document_store, db_file):
        """Test that non-ASCII text is stored as-is."""
        document_store.save({"products": [{"title": "日本語タイトル", "emoji": "🎨"}]})

        assert "日本語タイトル" in db_file.read_text(encoding="utf-8")
        assert document_store.load()["products"][0]["emoji"] == "🎨"

    def test_lock_is_reentrant(self, document_store):
        with document_store.lock:
            with document_store.lock:
                document_store.save({"x": []})

        assert document_store.load() == {"x": []}
