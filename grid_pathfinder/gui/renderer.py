"""Renderer drawing a search session to a :class:`Window`."""

from __future__ import annotations

from typing import Any

from ..config import CONFIG
from ..utils import observer
from .window import Window

# Colours per visual state of a cell
CELL_COLOR_MAP = {
    observer.PLAIN: (225, 225, 225),
    observer.WALL: (40, 40, 40),
    observer.OPEN: (90, 200, 120),
    observer.PATH: (70, 130, 230),
    observer.START: (240, 200, 60),
    observer.GOAL: (230, 90, 70),
}
BACKGROUND_COLOR = (10, 10, 10)
HUD_HEIGHT = 24
HUD_TEXT_COLOR = (200, 200, 200)


class Renderer:
    """Draw every cell of the session grid, coloured by its visual state."""

    def __init__(self, window: Window | None = None, cell_gap: int | None = None) -> None:
        self.window = window if window is not None else Window()
        self.cell_gap = CONFIG.gui.cell_gap if cell_gap is None else cell_gap

    def cell_size(self, rows: int, cols: int) -> int:
        """Largest square cell that fits the window below the HUD line."""

        width, height = self.window.size
        usable_h = max(1, height - HUD_HEIGHT)
        return max(1, min(width // cols, usable_h // rows))

    def _render_cells(self, session: Any) -> None:
        grid = session.grid
        size = self.cell_size(grid.rows, grid.cols)
        gap = self.cell_gap if size > 2 * self.cell_gap else 0
        for cell in grid:
            colour = CELL_COLOR_MAP[observer.cell_visual(session, cell)]
            self.window.draw_rect(
                cell.col * size,
                HUD_HEIGHT + cell.row * size,
                size - gap,
                size - gap,
                colour,
            )

    def hud_text(self, session: Any) -> str:
        search = session.search
        if search is None:
            return "No search"
        text = f"{search.state.value}  extracted:{search.extractions}  frontier:{len(search.frontier)}"
        result = search.result()
        if result.found:
            text += f"  path:{len(result.path)} cost:{result.cost:.2f}"
        if getattr(session, "fps_enabled", False):
            text += f"  {observer.rate_text()}"
        return text

    def update(self, session: Any) -> None:
        if self.window is None or session.grid is None:
            return
        self.window.clear(BACKGROUND_COLOR)
        self._render_cells(session)
        self.window.draw_text(self.hud_text(session), 5, 4, HUD_TEXT_COLOR)
        self.window.refresh()


__all__ = ["Renderer", "CELL_COLOR_MAP"]
