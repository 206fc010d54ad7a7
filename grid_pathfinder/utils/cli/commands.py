"""Implementations of development CLI commands."""

from __future__ import annotations

import logging
import random
from typing import Any, Dict

from ..observer import install_step_observer, print_rate, toggle_live_rate
from .terminal_view import get_view

logger = logging.getLogger(__name__)


def pause(state: Dict[str, Any]) -> None:
    state["paused"] = True
    logger.info("Search paused.")


def resume(state: Dict[str, Any]) -> None:
    state["paused"] = False
    logger.info("Search resumed.")


def step(state: Dict[str, Any]) -> None:
    if state.get("paused", False):
        state["step"] = True
        logger.info("Stepping once.")
    else:
        logger.info("Search is not paused. Use /pause first.")


def cancel(session: Any) -> None:
    search = getattr(session, "search", None)
    if search is None or search.state.terminal:
        logger.info("No running search to cancel.")
        return
    search.cancel()
    logger.info("Cancel requested; the search stops at its next step.")


def status(session: Any) -> Dict[str, Any]:
    """Log and return a summary of the current search."""

    search = getattr(session, "search", None)
    if search is None:
        logger.info("No search.")
        return {}
    info = {
        "state": search.state.value,
        "extractions": search.extractions,
        "frontier": len(search.frontier),
        "seed": getattr(session, "seed", None),
    }
    result = search.result()
    if result.found:
        info["path_length"] = len(result.path)
        info["cost"] = result.cost
    logger.info(
        "Search %s: %s extractions, %s in frontier%s",
        info["state"],
        info["extractions"],
        info["frontier"],
        f", path of {info['path_length']} cells (cost {info['cost']:.3f})"
        if result.found
        else "",
    )
    return info


def fps(session: Any, state: Dict[str, Any]) -> None:
    tm = getattr(session, "time_manager", None)
    if tm is None:
        return
    install_step_observer(tm)
    enabled = toggle_live_rate()
    state["fps_enabled"] = enabled
    session.fps_enabled = enabled
    if enabled:
        logger.info("Live step rate enabled.")
        print_rate()
    else:
        logger.info("Live step rate disabled.")


def view(session: Any, state: Dict[str, Any]) -> None:
    terminal = get_view()
    state["view"] = terminal.toggle()
    if terminal.enabled:
        terminal.render(session)


def restart(session: Any, seed_str: str | None, state: Dict[str, Any]) -> None:
    """Build a new grid and search; without ``seed_str`` a fresh seed is drawn."""

    if seed_str is None:
        seed = random.randrange(2**32)
    else:
        try:
            seed = int(seed_str)
        except ValueError:
            logger.error("Invalid seed: %s", seed_str)
            return
    session.new_search(seed)
    state["paused"] = False
    logger.info("Restarted search with seed %s.", session.seed)


def help_command(state: Dict[str, Any]) -> None:
    help_lines = [
        "\nAvailable commands:",
        "  /help                - Show this help message.",
        "  /pause               - Pause the search.",
        "  /resume              - Resume a paused search.",
        "  /step                - Advance one step if paused.",
        "  /cancel              - Cancel the running search.",
        "  /status              - Print search progress.",
        "  /fps                 - Toggle live steps/s logging.",
        "  /view                - Toggle the ANSI terminal view.",
        "  /restart [seed]      - Build a new grid and search again.",
        "  /quit                - Exit the application.\n",
    ]
    for line in help_lines:
        logger.info(line)


def execute(command: str, args: list[str], session: Any, state: Dict[str, Any]) -> Any:
    if "running" not in state:
        state["running"] = True
    cmd_lower = command.lower()

    return_value: Any = None

    if cmd_lower == "help":
        help_command(state)
    elif cmd_lower == "pause":
        pause(state)
    elif cmd_lower == "resume":
        resume(state)
    elif cmd_lower == "step":
        step(state)
    elif cmd_lower == "cancel":
        cancel(session)
    elif cmd_lower == "status":
        return_value = status(session)
    elif cmd_lower == "fps":
        fps(session, state)
    elif cmd_lower == "view":
        view(session, state)
    elif cmd_lower == "restart":
        restart(session, args[0] if args else None, state)
    elif cmd_lower == "quit":
        state["running"] = False
        logger.info("Quit command received. Shutting down...")
    else:
        logger.error("Unknown command: /%s. Type /help for available commands.", command)

    return return_value
