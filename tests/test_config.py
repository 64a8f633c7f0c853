"""
Tests for formatting configuration and export options.
"""

import pytest

from figvex.config import (
    DEFAULT_FORMAT,
    ColorFormat,
    ExportOptions,
    FormatConfig,
    Unit,
    load_options,
    options_from_dict,
    overlay,
)
from figvex.errors import ConfigError, FigvexError


class TestFormatConfig:
    """Test the two-layer format configuration."""

    def test_defaults(self):
        assert DEFAULT_FORMAT == FormatConfig(unit=Unit.PX, rem_base=16, color_format=ColorFormat.HEX)

    def test_overlay_returns_new_config(self):
        result = overlay(DEFAULT_FORMAT, {"unit": Unit.REM})
        assert result.unit is Unit.REM
        assert DEFAULT_FORMAT.unit is Unit.PX

    def test_empty_overlay_is_base(self):
        assert overlay(DEFAULT_FORMAT, {}) is DEFAULT_FORMAT


class TestExportOptions:
    """Test ExportOptions defaults and overrides."""

    def test_defaults(self):
        options = ExportOptions()
        assert options.selector == ":root"
        assert options.include_collection_comments
        assert not options.use_modes_as_selectors
        assert options.prefix is None
        assert options.qualify_names

    def test_with_overrides_freezes_selection(self):
        options = ExportOptions().with_overrides(selected_collections=["a", "b"], prefix="ds")
        assert options.selected_collections == frozenset({"a", "b"})
        assert options.prefix == "ds"


class TestOptionsFromDict:
    """Test validation of option mappings."""

    def test_valid(self):
        assert options_from_dict({"prefix": "ds", "use_modes_as_selectors": True}) == {
            "prefix": "ds",
            "use_modes_as_selectors": True,
        }

    def test_unknown_key(self):
        with pytest.raises(ConfigError, match="colour"):
            options_from_dict({"colour": "red"})

    def test_strings_are_not_booleans(self):
        with pytest.raises(ConfigError, match="use_modes_as_selectors"):
            options_from_dict({"use_modes_as_selectors": "true"})

    def test_collection_ids_must_be_strings(self):
        with pytest.raises(ConfigError, match="selected_collections"):
            options_from_dict({"selected_collections": "c-colors"})

    def test_blank_selector(self):
        with pytest.raises(ConfigError, match="selector"):
            options_from_dict({"selector": "   "})

    def test_explicit_null_prefix_kept(self):
        assert options_from_dict({"prefix": None}) == {"prefix": None}

    def test_unset_keys_omitted(self):
        assert options_from_dict({}) == {}

    def test_wrong_type(self):
        with pytest.raises(ConfigError, match="include_mode_comments"):
            options_from_dict({"include_mode_comments": "yes"})


class TestLoadOptions:
    """Test reading options from YAML files."""

    def test_load(self, tmp_path):
        path = tmp_path / "figvex.yaml"
        path.write_text("prefix: ds\nselected_collections: [c-colors]\n", encoding="utf-8")
        assert load_options(path) == {"prefix": "ds", "selected_collections": ["c-colors"]}

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_options(path) == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_options(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("prefix: [ds\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_options(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- prefix\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="mapping"):
            load_options(path)

    def test_errors_share_base_class(self):
        assert issubclass(ConfigError, FigvexError)
