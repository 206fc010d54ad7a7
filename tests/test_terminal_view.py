import io
import types

from grid_pathfinder.core.grid import Grid
from grid_pathfinder.search.astar import AStarSearch
from grid_pathfinder.utils.cli.terminal_view import TerminalView
from grid_pathfinder.utils.observer import CellStateTracker


def _session(mask):
    grid = Grid.from_mask(mask)
    tracker = CellStateTracker()
    search = AStarSearch(grid, listeners=[tracker])
    return types.SimpleNamespace(grid=grid, search=search, tracker=tracker)


def test_render_lines_before_search():
    view = TerminalView(colour=False)
    session = _session(["..#", "...", "#.."])
    assert view.render_lines(session) == ["S.#", "...", "#.G"]


def test_render_lines_after_search():
    view = TerminalView(colour=False)
    session = _session(["...", "...", "..."])
    session.search.run()
    lines = view.render_lines(session)
    assert lines[0][0] == "S" and lines[2][2] == "G"
    assert lines[1][1] == "*"
    # cells still in the frontier are drawn open
    assert "o" in "".join(lines)


def test_render_only_when_enabled():
    out = io.StringIO()
    view = TerminalView(colour=False, stream=out)
    session = _session([".."])
    view.render(session)
    assert out.getvalue() == ""
    assert view.toggle() is True
    view.render(session)
    assert out.getvalue() == "SG\n"


def test_colour_output_wraps_glyphs():
    view = TerminalView(colour=True)
    lines = view.render_lines(_session(["#."]))
    assert lines[0].endswith("\x1b[0m")
    assert "\x1b[33mS" in lines[0]


def test_no_grid():
    view = TerminalView(colour=False)
    assert view.render_lines(types.SimpleNamespace(grid=None, search=None)) == []
