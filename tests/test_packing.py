"""Tests for the page layout engine."""

from dataclasses import dataclass

import pytest

from chord_sheet.errors import LayoutError
from chord_sheet.geometry import Point
from chord_sheet.layout import (
    LayoutConfig,
    Section,
    calculate_layout,
    calculate_positions,
    plan_layout,
)


@dataclass(eq=False)
class Box:
    """A bare section rectangle; identity-compared like a host range."""

    width: int
    height: int


def config(
    page_width: int = 45,
    page_height: int = 50,
    header_height: int = 5,
    horizontal_padding: int = 0,
    vertical_padding: int = 0,
) -> LayoutConfig:
    return LayoutConfig(
        page_width=page_width,
        page_height=page_height,
        header_height=header_height,
        horizontal_padding=horizontal_padding,
        vertical_padding=vertical_padding,
    )


class TestCalculateLayout:
    """Test grouping sections into pages and columns."""

    def test_no_sections(self) -> None:
        assert calculate_layout([], config()) == []

    def test_single_section(self) -> None:
        s1 = Box(10, 20)
        assert calculate_layout([s1], config()) == [[[s1]]]

    def test_stack_in_same_column(self) -> None:
        s1, s2 = Box(10, 10), Box(10, 10)
        assert calculate_layout([s1, s2], config()) == [[[s1, s2]]]

    def test_new_column_when_height_exceeded(self) -> None:
        s1, s2 = Box(10, 30), Box(10, 20)
        assert calculate_layout([s1, s2], config()) == [[[s1], [s2]]]

    def test_new_page_when_width_exceeded(self) -> None:
        s1, s2 = Box(25, 30), Box(25, 30)
        assert calculate_layout([s1, s2], config()) == [[[s1]], [[s2]]]

    def test_first_page_header_height(self) -> None:
        s1, s2 = Box(10, 44), Box(10, 2)
        assert calculate_layout([s1, s2], config()) == [[[s1], [s2]]]

    def test_second_page_when_first_is_full(self) -> None:
        s1, s2 = Box(45, 45), Box(10, 45)
        assert calculate_layout([s1, s2], config()) == [[[s1]], [[s2]]]

    def test_second_page_has_no_header(self) -> None:
        s1, s2 = Box(45, 45), Box(10, 48)
        assert calculate_layout([s1, s2], config()) == [[[s1]], [[s2]]]

    def test_more_stacking_on_second_page(self) -> None:
        s1, s2, s3 = Box(45, 45), Box(10, 24), Box(10, 24)
        assert calculate_layout([s1, s2, s3], config()) == [[[s1]], [[s2, s3]]]

    def test_fill_columns_before_new_page(self) -> None:
        sections = [Box(15, 30), Box(15, 30), Box(15, 30)]
        result = calculate_layout(sections, config())
        assert len(result) == 1
        assert len(result[0]) == 3

    def test_complex_layout(self) -> None:
        s1, s2, s3, s4 = Box(20, 25), Box(20, 25), Box(20, 20), Box(20, 20)
        assert calculate_layout([s1, s2, s3, s4], config()) == [[[s1], [s2, s3]], [[s4]]]

    def test_horizontal_padding(self) -> None:
        s1, s2 = Box(20, 30), Box(20, 30)
        assert calculate_layout([s1, s2], config(horizontal_padding=6)) == [[[s1]], [[s2]]]
        assert calculate_layout([s1, s2], config(horizontal_padding=0)) == [[[s1], [s2]]]

    def test_vertical_padding(self) -> None:
        s1, s2 = Box(10, 22), Box(10, 22)
        assert calculate_layout([s1, s2], config(vertical_padding=5)) == [[[s1], [s2]]]

    def test_no_padding_before_first_column_or_section(self) -> None:
        s1 = Box(43, 43)
        assert calculate_layout([s1], config(horizontal_padding=2, vertical_padding=2)) == [[[s1]]]

    def test_column_width_growth_blocks_new_column(self) -> None:
        s1, s2, s3, s4 = Box(10, 40), Box(15, 4), Box(15, 44), Box(15, 44)
        result = calculate_layout([s1, s2, s3, s4], config(horizontal_padding=2))
        assert result == [[[s1, s2], [s3]], [[s4]]]

    def test_stacking_cannot_widen_column_past_page(self) -> None:
        s1, s2, s3, s4 = Box(14, 44), Box(15, 30), Box(13, 16), Box(15, 8)
        layout_config = config(
            page_width=46, page_height=51, horizontal_padding=2, vertical_padding=2
        )
        assert calculate_layout([s1, s2, s3, s4], layout_config) == [[[s1], [s2], [s3]], [[s4]]]

    def test_section_too_tall_for_first_page_only(self) -> None:
        s1 = Box(10, 48)
        assert calculate_layout([s1], config()) == [[], [[s1]]]

    def test_returns_input_objects(self) -> None:
        sections = [Section(start_row=0, end_row=2, width=3), Section(start_row=4, end_row=6, width=3)]
        assert calculate_layout(sections, config()) == [[sections]]


class TestOversizeSections:
    """Test sections that fit on no page."""

    def test_too_wide(self) -> None:
        with pytest.raises(LayoutError, match="Section 2 is 46 columns wide") as info:
            calculate_layout([Box(10, 10), Box(46, 10)], config())
        assert info.value.index == 1

    def test_too_tall(self) -> None:
        with pytest.raises(LayoutError, match="51 rows tall") as info:
            plan_layout([Box(10, 51)], config())
        assert info.value.index == 0


class TestPositions:
    """Test section positions and column justification."""

    def test_stacked_positions(self) -> None:
        positions = calculate_positions([Box(10, 10), Box(10, 10)], config(vertical_padding=1))
        assert positions == [Point(0, 5), Point(0, 16)]

    def test_justified_columns(self) -> None:
        # two 20 wide columns on a 45 wide page: 5 spare cells, all in the gap
        positions = calculate_positions([Box(20, 30), Box(20, 30)], config())
        assert positions == [Point(0, 5), Point(25, 5)]

    def test_justification_keeps_minimum_padding(self) -> None:
        layout_config = config(horizontal_padding=2)
        positions = calculate_positions([Box(15, 30), Box(10, 30), Box(10, 30)], layout_config)
        # spare = 45 - 35 - 2 * 2 = 6, padding = 2 + 6 // 2 = 5
        assert positions == [Point(0, 5), Point(20, 5), Point(35, 5)]

    def test_single_column_page_is_not_justified(self) -> None:
        positions = calculate_positions([Box(10, 10)], config(horizontal_padding=3))
        assert positions == [Point(0, 5)]

    def test_later_pages_are_offset(self) -> None:
        layout_config = LayoutConfig(
            page_width=45,
            page_height=50,
            header_height=5,
            margin_left=1,
            margin_right=1,
            margin_top=2,
        )
        positions = calculate_positions([Box(25, 30), Box(25, 30)], layout_config)
        assert positions == [Point(1, 7), Point(46, 2)]

    def test_plan(self) -> None:
        plan = plan_layout([Box(20, 25), Box(20, 25), Box(20, 20), Box(20, 20)], config())
        assert plan.pages == (((0,), (1, 2)), ((3,),))
        assert plan.page_count == 2
        assert plan.positions == (Point(0, 5), Point(25, 5), Point(25, 30), Point(45, 0))

    def test_empty_plan_has_one_page(self) -> None:
        plan = plan_layout([], config())
        assert plan.pages == ()
        assert plan.page_count == 1
