"""Tests for the storage layer — JsonBackend, MemoryBackend, factory."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from wordtally.config.settings import Settings
from wordtally.storage import create_settings_store
from wordtally.storage.base import OPTION_KEYS
from wordtally.storage.json_backend import JsonBackend
from wordtally.storage.memory_backend import MemoryBackend


# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------


class TestOptionKeys:
    def test_keys(self) -> None:
        assert OPTION_KEYS == ("countOnlyActualWords", "excludeFrontmatter")


# ---------------------------------------------------------------------------
# JSON backend
# ---------------------------------------------------------------------------


@pytest.fixture()
def json_backend(tmp_path: Path) -> JsonBackend:
    """Create a JsonBackend pointing into a temp directory."""
    return JsonBackend(tmp_path / "config" / "wordtally.json")


class TestJsonBackend:
    """Tests for the JSON file store."""

    def test_load_missing_file_returns_none(self, json_backend: JsonBackend) -> None:
        assert json_backend.load() is None

    def test_save_creates_parent_dirs(self, json_backend: JsonBackend) -> None:
        json_backend.save({"countOnlyActualWords": False})
        assert json_backend.path.exists()

    def test_save_then_load(self, json_backend: JsonBackend) -> None:
        blob = {"countOnlyActualWords": False, "excludeFrontmatter": True}
        json_backend.save(blob)
        assert json_backend.load() == blob

    def test_save_overwrites(self, json_backend: JsonBackend) -> None:
        json_backend.save({"excludeFrontmatter": True})
        json_backend.save({"excludeFrontmatter": False})
        assert json_backend.load() == {"excludeFrontmatter": False}

    def test_file_is_plain_json(self, json_backend: JsonBackend) -> None:
        json_backend.save({"excludeFrontmatter": False})
        data = json.loads(json_backend.path.read_text(encoding="utf-8"))
        assert data == {"excludeFrontmatter": False}

    def test_corrupt_file_raises(self, json_backend: JsonBackend) -> None:
        json_backend.path.parent.mkdir(parents=True)
        json_backend.path.write_text("{not json", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            json_backend.load()

    def test_non_object_raises(self, json_backend: JsonBackend) -> None:
        json_backend.path.parent.mkdir(parents=True)
        json_backend.path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ValueError, match="Expected a JSON object"):
            json_backend.load()


# ---------------------------------------------------------------------------
# Memory backend
# ---------------------------------------------------------------------------


class TestMemoryBackend:
    """Tests for the in-process store."""

    def test_empty_returns_none(self) -> None:
        assert MemoryBackend().load() is None

    def test_initial_blob(self) -> None:
        store = MemoryBackend({"excludeFrontmatter": False})
        assert store.load() == {"excludeFrontmatter": False}

    def test_save_replaces(self) -> None:
        store = MemoryBackend({"excludeFrontmatter": False})
        store.save({"countOnlyActualWords": False})
        assert store.data == {"countOnlyActualWords": False}

    def test_load_returns_copy(self) -> None:
        store = MemoryBackend({"excludeFrontmatter": False})
        store.load()["excludeFrontmatter"] = True  # type: ignore[index]
        assert store.data == {"excludeFrontmatter": False}


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------


class TestCreateSettingsStore:
    """Backend selection from Settings."""

    def test_memory_backend(self, settings: Settings) -> None:
        assert isinstance(create_settings_store(settings), MemoryBackend)

    def test_json_backend(self, settings: Settings, tmp_path: Path) -> None:
        cfg = settings.model_copy(
            update={
                "storage_backend": "json",
                "settings_file_path": str(tmp_path / "nested" / "opts.json"),
            }
        )
        store = create_settings_store(cfg)
        assert isinstance(store, JsonBackend)
        assert store.path == tmp_path / "nested" / "opts.json"
        assert store.path.parent.is_dir()

    def test_json_falls_back_to_memory(
        self, settings: Settings, tmp_path: Path
    ) -> None:
        cfg = settings.model_copy(
            update={
                "storage_backend": "json",
                "settings_file_path": str(tmp_path / "opts.json"),
            }
        )
        with patch.object(Path, "mkdir", side_effect=PermissionError("denied")):
            store = create_settings_store(cfg)
        assert isinstance(store, MemoryBackend)
