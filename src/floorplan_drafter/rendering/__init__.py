# File: src/floorplan_drafter/rendering/__init__.py

"""SVG output for drafted floor plans."""

from .svg_renderer import (
    RenderOptions,
    render_svg,
    to_svg_string,
    save_svg,
    sheet_size,
)

__all__ = [
    "RenderOptions",
    "render_svg",
    "to_svg_string",
    "save_svg",
    "sheet_size",
]
