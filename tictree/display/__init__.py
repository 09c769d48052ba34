"""Plain-text rendering of boards and game trees."""

from .text import cell_symbol, render_board, render_summary, render_tree

__all__ = ["cell_symbol", "render_board", "render_summary", "render_tree"]
