"""Holder for the grid, the running search and front-end flags."""

from __future__ import annotations

import logging
from typing import List, Optional

from ..config import Config
from .events import Listener
from ..search.astar import AStarSearch
from ..utils.observer import CellStateTracker
from .grid import Grid
from .passability import random_passability
from .time_manager import TimeManager

logger = logging.getLogger(__name__)


class Session:
    """Lightweight holder for one grid and the search running on it."""

    def __init__(self, config: Config) -> None:
        self.config = config
        self.grid: Grid | None = None
        self.search: AStarSearch | None = None
        self.time_manager = TimeManager(config.search.step_rate)
        self.tracker = CellStateTracker()
        self.seed: Optional[int] = config.grid.seed

        # Extra listeners re-attached to every new search
        self.listeners: List[Listener] = []

        # Front-end state
        self.gui_enabled: bool = config.gui.enabled
        self.fps_enabled: bool = False

    def add_listener(self, listener: Listener) -> None:
        if listener not in self.listeners:
            self.listeners.append(listener)
        if self.search is not None:
            self.search.subscribe(listener)

    def new_search(self, seed: Optional[int] = None) -> AStarSearch:
        """Build a fresh grid and search, replacing the current one."""

        if seed is not None:
            self.seed = seed
        grid_cfg = self.config.grid
        if self.search is not None and not self.search.state.terminal:
            self.search.cancel()

        self.grid = Grid(grid_cfg.rows, grid_cfg.cols).build(
            random_passability(grid_cfg.obstacle_ratio, self.seed)
        )
        self.tracker.clear()
        self.time_manager.reset()
        self.search = AStarSearch(
            self.grid,
            start=grid_cfg.start,
            goal=grid_cfg.goal_or_corner(),
            listeners=[self.tracker, *self.listeners],
        )
        self.search.start()
        logger.info(
            "New %sx%s grid (seed=%s, obstacle_ratio=%.2f)",
            grid_cfg.rows,
            grid_cfg.cols,
            self.seed,
            grid_cfg.obstacle_ratio,
        )
        return self.search


__all__ = ["Session"]
