"""Simple configuration loader for grid_pathfinder."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class GridConfig:
    """Configuration values for the grid section."""

    rows: int = 50
    cols: int = 50
    obstacle_ratio: float = 0.4
    seed: Optional[int] = None
    start: tuple[int, int] = (0, 0)
    # ``None`` means the bottom-right corner.
    goal: Optional[tuple[int, int]] = None

    def goal_or_corner(self) -> tuple[int, int]:
        if self.goal is None:
            return (self.rows - 1, self.cols - 1)
        return self.goal


@dataclass
class SearchConfig:
    """Pacing of animated searches."""

    step_rate: float = 1000.0
    max_steps: Optional[int] = None


@dataclass
class GUIConfig:
    enabled: bool = True
    window_size: tuple[int, int] = (800, 800)
    cell_gap: int = 1
    terminal_view: bool = False


@dataclass
class LoggingConfig:
    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    grid: GridConfig
    search: SearchConfig
    gui: GUIConfig
    logging: LoggingConfig


def _optional_pair(value: Any) -> Optional[tuple[int, int]]:
    if value is None:
        return None
    return (int(value[0]), int(value[1]))


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    grid_data = data.get("grid", {}) or {}
    seed = grid_data.get("seed")
    grid = GridConfig(
        rows=int(grid_data.get("rows", 50)),
        cols=int(grid_data.get("cols", 50)),
        obstacle_ratio=float(grid_data.get("obstacle_ratio", 0.4)),
        seed=int(seed) if seed is not None else None,
        start=_optional_pair(grid_data.get("start")) or (0, 0),
        goal=_optional_pair(grid_data.get("goal")),
    )

    search_data = data.get("search", {}) or {}
    max_steps = search_data.get("max_steps")
    search = SearchConfig(
        step_rate=float(search_data.get("step_rate", 1000)),
        max_steps=int(max_steps) if max_steps is not None else None,
    )

    gui_data = data.get("gui", {}) or {}
    gui = GUIConfig(
        enabled=bool(gui_data.get("enabled", True)),
        window_size=tuple(gui_data.get("window_size", [800, 800])),
        cell_gap=int(gui_data.get("cell_gap", 1)),
        terminal_view=bool(gui_data.get("terminal_view", False)),
    )

    logging_data = data.get("logging", {}) or {}
    logging_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    return Config(grid=grid, search=search, gui=gui, logging=logging_cfg)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "GridConfig",
    "SearchConfig",
    "GUIConfig",
    "LoggingConfig",
    "load_config",
]
