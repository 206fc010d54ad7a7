"""Session bootstrap and the animated / headless search loops."""

from __future__ import annotations

import logging
import os
import time
from pathlib import Path
from typing import Any, Dict

import pygame
from dotenv import load_dotenv

from .config import CONFIG, CONFIG_PATH, load_config
from .core.session import Session
from .gui import input as gui_input
from .gui.renderer import Renderer
from .search.astar import SearchResult
from .utils.cli.command_parser import poll_command, start_cli_thread, stop_cli_thread
from .utils.cli.commands import execute
from .utils.cli.terminal_view import get_view


log_level_str = CONFIG.logging.global_level
numeric_level = getattr(logging, log_level_str, logging.INFO)
logging.basicConfig(
    level=numeric_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    force=True
)
logger = logging.getLogger(__name__)

# Apply per-module levels if defined
if CONFIG.logging.module_levels:
    for module_name, level_str in CONFIG.logging.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)

CONFIG_ENV = "GRID_PATHFINDER_CONFIG"
HEADLESS_ENV = "GRID_PATHFINDER_HEADLESS"
SEED_ENV = "GRID_PATHFINDER_SEED"

# Redraw at most this often while stepping
FRAME_INTERVAL = 1.0 / 60.0
IDLE_SLEEP = 0.016


def bootstrap(config_path: str | Path | None = None) -> Session:
    """Load ``.env`` and config, then build a session with a fresh search."""

    env_path = Path(".env")
    if env_path.exists(): load_dotenv(env_path)

    if config_path is None:
        config_path = os.getenv(CONFIG_ENV) or Path("config.yaml")
    actual_config_path = Path(config_path)
    if not actual_config_path.is_file():
        actual_config_path = CONFIG_PATH
    cfg = load_config(actual_config_path)

    if os.getenv(HEADLESS_ENV, "0").lower() in ("1", "true", "yes"):
        cfg.gui.enabled = False
    seed_env = os.getenv(SEED_ENV)
    if seed_env:
        try:
            cfg.grid.seed = int(seed_env)
        except ValueError:
            logger.warning("Ignoring non-integer %s=%r", SEED_ENV, seed_env)

    session = Session(cfg)
    session.new_search()
    if cfg.gui.terminal_view:
        get_view().enabled = True
    logger.info("[Bootstrap] Config loaded from %s", actual_config_path)
    return session


def run_headless(session: Session) -> SearchResult:
    """Run the search to completion without pacing."""

    search = session.search
    result = search.run(session.config.search.max_steps)
    get_view().render(session)
    _log_result(result)
    return result


def run_gui(session: Session) -> SearchResult:
    """Animate the search in a ``pygame`` window, one step per tick."""

    pygame.init()
    pygame.font.init()

    renderer = Renderer()
    cli_input_thread = start_cli_thread()
    tm = session.time_manager
    view = get_view()
    state: Dict[str, Any] = {
        "paused": False,
        "step": False,
        "running": True,
        "fps_enabled": session.fps_enabled,
    }
    last_draw = 0.0
    reported = None

    logger.info("Application started. Type /help for commands; space pauses, right arrow steps.")

    try:
        while state["running"]:
            gui_input.handle_events(session, renderer, state)
            if not state["running"]: break

            cmd = poll_command()
            if cmd:
                execute(cmd.name, cmd.args, session, state)
            if not state["running"]: break

            search = session.search
            if not search.state.terminal and (not state["paused"] or state["step"]):
                search.step()
                state["step"] = False
                tm.sleep_until_next_step()
            else:
                time.sleep(IDLE_SLEEP)

            if search.state.terminal and reported is not search:
                _log_result(search.result())
                reported = search

            now = time.perf_counter()
            if now - last_draw >= FRAME_INTERVAL or search.state.terminal:
                renderer.update(session)
                view.render(session)
                last_draw = now

    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt caught. Shutting down...")
    finally:
        logger.info("Application shutting down...")
        stop_cli_thread()
        if cli_input_thread.is_alive():
            cli_input_thread.join(timeout=0.1)
        if pygame.get_init():
            pygame.quit()

    return session.search.result()


def _log_result(result: SearchResult) -> None:
    if result.found:
        logger.info(
            "Route of %s cells, cost %.3f: %s",
            len(result.path),
            result.cost,
            result.route(),
        )
    else:
        logger.info("Search ended %s after %s extractions.", result.state.value, result.extractions)


def main() -> None:
    session = bootstrap()
    if session.gui_enabled:
        run_gui(session)
    else:
        run_headless(session)


if __name__ == "__main__":
    main()
