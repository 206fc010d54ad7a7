"""ASCII terminal renderer for search grids."""

from __future__ import annotations

import sys
from typing import Any, List, TextIO

from ..observer import GOAL, OPEN, PATH, PLAIN, START, WALL, cell_visual


# Basic ANSI colour codes used by :class:`TerminalView`
_COLOURS = {
    "black": "\x1b[30m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "magenta": "\x1b[35m",
    "cyan": "\x1b[36m",
    "white": "\x1b[37m",
    "reset": "\x1b[0m",
}

# (glyph, colour) per visual state
_GLYPHS = {
    WALL: ("#", "white"),
    PLAIN: (".", "reset"),
    OPEN: ("o", "green"),
    PATH: ("*", "cyan"),
    START: ("S", "yellow"),
    GOAL: ("G", "yellow"),
}


class TerminalView:
    """Minimal grid viewer using ANSI colours."""

    def __init__(self, colour: bool = True, stream: TextIO | None = None) -> None:
        self.enabled: bool = False
        self.colour = colour
        self.stream = stream

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def toggle(self) -> bool:
        """Toggle rendering; returns the new state."""

        self.enabled = not self.enabled
        return self.enabled

    def render_lines(self, session: Any) -> List[str]:
        """Return one string per grid row for ``session``'s current search."""

        grid = session.grid
        if grid is None:
            return []

        lines: list[str] = []
        for row in range(grid.rows):
            parts: list[str] = []
            for col in range(grid.cols):
                glyph, colour = _GLYPHS[cell_visual(session, grid.cell_at(row, col))]
                if self.colour:
                    parts.append(f"{_COLOURS[colour]}{glyph}")
                else:
                    parts.append(glyph)
            if self.colour:
                parts.append(_COLOURS["reset"])
            lines.append("".join(parts))
        return lines

    def render(self, session: Any, force: bool = False) -> None:
        """Draw the grid to the output stream when enabled."""

        if not (self.enabled or force):
            return
        out = self.stream or sys.stdout
        if self.colour:
            out.write("\x1b[H\x1b[2J")  # clear screen
        out.write("\n".join(self.render_lines(session)) + "\n")
        out.flush()


_view = TerminalView()


def get_view() -> TerminalView:
    """Return the singleton :class:`TerminalView` instance."""

    return _view


__all__ = ["TerminalView", "get_view"]
