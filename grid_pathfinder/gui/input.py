"""Handle ``pygame`` input events for the search window."""

from __future__ import annotations

from typing import Any, Dict

import pygame

from ..utils.cli import commands


def handle_events(session: Any, renderer: Any, state: Dict[str, Any]) -> None:
    """Process ``pygame`` events and apply hot-key commands to ``state``."""

    for ev in pygame.event.get():
        if ev.type == pygame.QUIT:
            state["running"] = False
            return

        if ev.type == pygame.VIDEORESIZE and renderer is not None:
            renderer.window.resize(ev.size)
            continue

        if ev.type != pygame.KEYDOWN:
            continue

        if ev.key == pygame.K_ESCAPE:
            state["running"] = False
            return
        if ev.key == pygame.K_SPACE:
            if state.get("paused", False):
                commands.resume(state)
            else:
                commands.pause(state)
        elif ev.key == pygame.K_RIGHT:
            state["paused"] = True
            state["step"] = True
        elif ev.key == pygame.K_f:
            commands.fps(session, state)
        elif ev.key == pygame.K_c:
            commands.cancel(session)
        elif ev.key == pygame.K_r:
            commands.restart(session, None, state)


__all__ = ["handle_events"]
