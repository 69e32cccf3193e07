"""Tests for workbook and layout configuration."""

import json
from pathlib import Path

import pytest

from chord_sheet.config import STRUCTURAL_CHANGES, WorkbookConfig
from chord_sheet.errors import ConfigurationError
from chord_sheet.geometry import Point
from chord_sheet.layout import LayoutConfig


class TestWorkbookConfig:
    """Test workbook configuration loading."""

    def test_defaults(self) -> None:
        config = WorkbookConfig()
        assert config.lyrics_sheet == "Lyrics"
        assert config.side_tray_range == "Side_Tray"
        assert (config.horizontal_padding, config.vertical_padding) == (2, 1)

    def test_from_mapping_overrides(self) -> None:
        config = WorkbookConfig.from_mapping({"chords_sheet": "Acordes", "margin_top": 0})
        assert config.chords_sheet == "Acordes"
        assert config.margin_top == 0
        assert config.lyrics_sheet == "Lyrics"

    def test_unknown_keys_raise(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown configuration keys: colour"):
            WorkbookConfig.from_mapping({"colour": "red"})

    @pytest.mark.parametrize(
        "data",
        [{"margin_top": "1"}, {"margin_top": True}, {"print_sheet": 3}],
    )
    def test_wrong_types_raise(self, data: dict) -> None:
        with pytest.raises(ConfigurationError, match="must be"):
            WorkbookConfig.from_mapping(data)

    def test_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"vertical_padding": 0}))
        assert WorkbookConfig.from_file(path).vertical_padding == 0

    def test_configuration_error_is_a_lookup_error(self) -> None:
        with pytest.raises(LookupError):
            WorkbookConfig.from_mapping({"nope": 1})

    def test_structural_change_types(self) -> None:
        assert "INSERT_ROW" in STRUCTURAL_CHANGES
        assert "EDIT" not in STRUCTURAL_CHANGES


class TestLayoutConfig:
    """Test page geometry derived values and validation."""

    def test_available_size(self) -> None:
        config = LayoutConfig(
            page_width=46, page_height=51, margin_left=1, margin_right=1, margin_top=1
        )
        assert config.available_width == 44
        assert config.available_height == 50

    def test_header_only_on_first_page(self) -> None:
        config = LayoutConfig(page_width=45, page_height=50, header_height=5, margin_top=1)
        assert config.height_on(0) == 44
        assert config.height_on(1) == 49
        assert config.origin_of(0) == Point(0, 6)
        assert config.origin_of(2) == Point(90, 1)

    def test_negative_padding_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="Negative spacing"):
            LayoutConfig(page_width=10, page_height=10, vertical_padding=-1)

    def test_no_room_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="No room for content"):
            LayoutConfig(page_width=2, page_height=10, margin_left=1, margin_right=1)
