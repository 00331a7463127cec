"""
Tests for ExportConfig and the JSON-backed SettingsStore.
"""

import json

import pytest

from photodoc.config import ExportConfig
from photodoc.errors import SettingsError
from photodoc.layout import PageSize
from photodoc.settings import SettingsStore


class TestExportConfig:

    def test_init_when_defaults_then_valid(self):
        config = ExportConfig()

        assert config.page_size is PageSize.A4
        assert config.default_filename == "Images.pdf"
        assert config.selection_limit == 20

    def test_init_when_filename_not_pdf_then_raises(self):
        with pytest.raises(ValueError, match="must end in .pdf"):
            ExportConfig(default_filename="Images.png")

    def test_init_when_filename_has_directory_then_raises(self):
        with pytest.raises(ValueError, match="bare file name"):
            ExportConfig(default_filename="out/Images.pdf")

    def test_init_when_limit_zero_then_raises(self):
        with pytest.raises(ValueError, match="selection_limit"):
            ExportConfig(selection_limit=0)

    def test_init_when_page_size_is_string_then_raises(self):
        with pytest.raises(ValueError, match="page_size"):
            ExportConfig(page_size="A4")


class TestSettingsStore:

    def test_init_when_file_missing_then_defaults(self, tmp_path):
        store = SettingsStore(tmp_path / "settings.json")

        assert store.load_error is None
        assert store.to_config() == ExportConfig()

    def test_setters_when_saved_then_reloaded(self, tmp_path):
        # Arrange
        path = tmp_path / "nested" / "settings.json"
        store = SettingsStore(path)

        # Act
        store.set_page_size(PageSize.AUTO)
        store.set_default_filename("Scans")
        store.set_selection_limit(5)
        reloaded = SettingsStore(path)

        # Assert
        assert json.loads(path.read_text())["page_size"] == "AUTO"
        config = reloaded.to_config()
        assert config.page_size is PageSize.AUTO
        assert config.default_filename == "Scans.pdf"
        assert config.selection_limit == 5

    def test_init_when_corrupted_json_then_defaults_and_error(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("{not json")

        store = SettingsStore(path)

        assert "corrupted" in store.load_error
        assert store.to_config() == ExportConfig()

    def test_init_when_top_level_not_object_then_defaults_and_error(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("[1, 2, 3]")

        store = SettingsStore(path)

        assert store.load_error is not None
        assert store.get_page_size() is PageSize.A4

    @pytest.mark.parametrize(
        "payload",
        [
            {"page_size": "tabloid"},
            {"page_size": 3},
            {"default_filename": "x.png"},
            {"selection_limit": "many"},
            {"selection_limit": -4},
            {"selection_limit": True},
        ],
    )
    def test_getters_when_bad_values_then_defaults(self, tmp_path, payload):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps(payload))

        config = SettingsStore(path).to_config()

        assert config == ExportConfig()

    def test_selection_limit_when_null_then_unlimited(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"selection_limit": None}))

        assert SettingsStore(path).get_selection_limit() is None

    def test_save_when_parent_is_file_then_settings_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        store = SettingsStore(blocker / "settings.json")

        with pytest.raises(SettingsError):
            store.set_page_size(PageSize.LETTER)
