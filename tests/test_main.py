import importlib
import logging

from grid_pathfinder.search.astar import SearchState


def test_logging_configured():
    logging.basicConfig(level=logging.WARNING, force=True)
    import grid_pathfinder.main as main
    importlib.reload(main)
    assert logging.getLogger().getEffectiveLevel() == logging.INFO


def test_bootstrap_headless_env(monkeypatch, tmp_path):
    import grid_pathfinder.main as main

    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text("grid:\n  rows: 5\n  cols: 5\n  obstacle_ratio: 0\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv(main.HEADLESS_ENV, "1")
    monkeypatch.setenv(main.SEED_ENV, "17")
    session = main.bootstrap(cfg_path)
    assert session.gui_enabled is False
    assert session.seed == 17
    assert session.grid.shape == (5, 5)


def test_bootstrap_config_from_env(monkeypatch, tmp_path):
    import grid_pathfinder.main as main

    cfg_path = tmp_path / "custom.yaml"
    cfg_path.write_text("grid:\n  rows: 3\n  cols: 4\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv(main.CONFIG_ENV, str(cfg_path))
    session = main.bootstrap()
    assert session.grid.shape == (3, 4)


def test_run_headless(monkeypatch, tmp_path):
    import grid_pathfinder.main as main

    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text("grid:\n  rows: 4\n  cols: 4\n  obstacle_ratio: 0\ngui:\n  enabled: false\n")
    monkeypatch.chdir(tmp_path)
    session = main.bootstrap(cfg_path)
    result = main.run_headless(session)
    assert result.state is SearchState.SUCCEEDED
    assert result.route() == [(0, 0), (1, 1), (2, 2), (3, 3)]


def test_main_dispatches_headless(monkeypatch, tmp_path):
    import grid_pathfinder.main as main

    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text("grid:\n  rows: 3\n  cols: 3\ngui:\n  enabled: false\n")
    monkeypatch.chdir(tmp_path)
    calls = []
    monkeypatch.setattr(main, "run_gui", lambda s: calls.append("gui"))
    monkeypatch.setattr(main, "run_headless", lambda s: calls.append("headless"))
    main.main()
    assert calls == ["headless"]
