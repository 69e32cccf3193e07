"""Render the chords sheet onto the print sheet.

The print sheet holds pages side by side. Its ``Print_Header`` region
spans exactly one page width at the top of the first page; its
``Print_Footer`` region marks the row where every page ends and where
page numbers go.
"""

from __future__ import annotations

import logging

from chord_sheet.cells import blank_grid
from chord_sheet.config import WorkbookConfig
from chord_sheet.geometry import Area, Point
from chord_sheet.layout.models import LayoutConfig
from chord_sheet.layout.packing import plan_layout
from chord_sheet.layout.sections import detect_sections
from chord_sheet.spaces import PrintSheet, Space, Workbook

logger = logging.getLogger(__name__)


def layout_config_for(print_sheet: PrintSheet, config: WorkbookConfig) -> LayoutConfig:
    """Derive the page geometry from the print sheet's header and footer.

    Raises
    ------
    ConfigurationError
        If a region is missing or leaves no room for content.
    """
    header = print_sheet.header.area
    footer = print_sheet.footer.area
    return LayoutConfig(
        page_width=header.width,
        page_height=footer.y - header.y,
        header_height=header.height,
        horizontal_padding=config.horizontal_padding,
        vertical_padding=config.vertical_padding,
        margin_left=config.margin_left,
        margin_right=config.margin_right,
        margin_top=config.margin_top,
        margin_bottom=config.margin_bottom,
    )


def _clear(space: Space, area: Area) -> None:
    if not area.is_empty:
        space.sub(lambda _: area).set_values(blank_grid(area.height, area.width))


def render_print_sheet(book: Workbook) -> int:
    """Lay the song out on the print sheet.

    Detects the sections of the chords working area, places them on pages,
    clears whatever a previous run printed, copies every section to its
    place and numbers the pages as ``n/N``.

    Parameters
    ----------
    book : Workbook
        Workbook to print.

    Returns
    -------
    int
        Number of pages. A song without sections still has one page.

    Raises
    ------
    LayoutError
        If a section does not fit on a page. The print sheet is left
        untouched in that case.
    """
    chords = book.chords.main
    printed = book.print
    config = layout_config_for(printed, book.config)
    sections = detect_sections(chords.get_values())
    plan = plan_layout(sections, config)

    header = printed.header.area
    footer = printed.footer.area
    pages = plan.page_count
    body_top = header.y + header.height
    later_pages_width = max(
        printed.width - header.x - config.page_width,
        (pages - 1) * config.page_width,
    )
    _clear(printed, Area(header.x, body_top, config.page_width, footer.y - body_top))
    _clear(
        printed,
        Area(
            header.x + config.page_width,
            header.y,
            max(0, later_pages_width),
            footer.y + footer.height - header.y,
        ),
    )

    for section, position in zip(sections, plan.positions):
        values = chords.sub(lambda area, s=section: s.area.translate(area.start)).get_values()
        target = position.add(header.start)
        printed.sub(lambda _, t=target, s=section: t.by(Point(s.width, s.height))).set_values(
            values
        )

    for page in range(pages):
        label = Area(footer.x + page * config.page_width, footer.y, 1, 1)
        printed.sub(lambda _, a=label: a).set_values([[f"{page + 1}/{pages}"]])

    logger.info("Printed %d sections on %d pages", len(sections), pages)
    return pages
