"""Section detection and page layout for printing.

Examples
--------
>>> from chord_sheet.layout import LayoutConfig, calculate_layout, detect_sections
>>> sections = detect_sections([["C", "", "", "G"], ["Hello", "", "World", ""]])
>>> len(calculate_layout(sections, LayoutConfig(page_width=45, page_height=50)))
1
"""

from chord_sheet.layout.models import LayoutConfig, LayoutPlan, Section, SectionColumn
from chord_sheet.layout.packing import calculate_layout, calculate_positions, plan_layout
from chord_sheet.layout.render import layout_config_for, render_print_sheet
from chord_sheet.layout.sections import (
    calculate_section_width,
    detect_sections,
    split_into_section_columns,
    split_into_sections,
)

__all__ = [
    "LayoutConfig",
    "LayoutPlan",
    "Section",
    "SectionColumn",
    "calculate_layout",
    "calculate_positions",
    "calculate_section_width",
    "detect_sections",
    "layout_config_for",
    "plan_layout",
    "render_print_sheet",
    "split_into_section_columns",
    "split_into_sections",
]
