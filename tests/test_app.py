import logging

from run import print_routes
from team_tracker_api.app.core.config import _env_flag
from team_tracker_api.app.core.logging_config import setup_logging
from team_tracker_api.app.main import create_app


def test_apps_do_not_share_stores():
    first, second = create_app(seed=True), create_app(seed=True)
    first.state.people.clear()
    assert len(second.state.people) == 2


def test_seed_can_be_disabled():
    app = create_app(seed=False)
    assert len(app.state.tasks) == 0
    assert len(app.state.projects) == 0


def test_env_flag(monkeypatch):
    monkeypatch.setenv("SEED_DATA", "No")
    assert _env_flag("SEED_DATA", "true") is False
    monkeypatch.setenv("SEED_DATA", "1")
    assert _env_flag("SEED_DATA", "false") is True
    monkeypatch.delenv("SEED_DATA")
    assert _env_flag("SEED_DATA", "yes") is True


def test_setup_logging_is_idempotent():
    logger = setup_logging("DEBUG")
    handlers = list(logger.handlers)
    assert setup_logging("warning") is logger
    assert logger.handlers == handlers
    assert logger.level == logging.WARNING
    setup_logging("INFO")


def test_print_routes(capsys):
    print_routes("0.0.0.0", 3000)
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Server running at: http://localhost:3000"
    assert out[2:] == ["  /api/v1/people", "  /api/v1/projects", "  /api/v1/tasks"]
