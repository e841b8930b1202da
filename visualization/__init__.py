"""
Visualization Tools

Provides drawing utilities for:
- The accumulator
- Detected lines and the rasterized line map
"""

from .draw_accumulator import render_accumulator
from .draw_lines import keep_line, line_endpoints, draw_lines, build_line_map
from .save_outputs import (
    save_all_outputs,
    save_accumulator,
    save_lines,
    save_line_map,
)

__all__ = [
    "render_accumulator",
    "keep_line",
    "line_endpoints",
    "draw_lines",
    "build_line_map",
    "save_all_outputs",
    "save_accumulator",
    "save_lines",
    "save_line_map",
]
