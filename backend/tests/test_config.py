"""Tests for settings and logging setup."""
import logging

from eventgraph.config import Settings
from eventgraph.logging_config import setup_logging
from eventgraph.main import create_app


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("SEED_ON_STARTUP", "false")
    s = Settings()
    assert s.LOG_LEVEL == "DEBUG"
    assert s.SEED_ON_STARTUP is False
    assert s.GRAPHQL_PATH == "/graphql"


def test_setup_logging_is_idempotent():
    root = logging.getLogger()
    setup_logging("INFO")
    handlers = list(root.handlers)
    setup_logging("DEBUG")
    assert root.handlers == handlers


def test_create_app_seeds_by_default():
    app = create_app()
    assert len(app.state.store.events) == 10


def test_setup_logging_adds_file_handler(monkeypatch, tmp_path):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    logfile = tmp_path / "eventgraph.log"

    setup_logging("WARNING", str(logfile))
    try:
        file_handlers = [h for h in root.handlers if isinstance(h, logging.FileHandler)]
        assert [h.baseFilename for h in file_handlers] == [str(logfile.resolve())]
        assert root.level == logging.WARNING
    finally:
        for handler in root.handlers:
            handler.close()


def test_create_app_passes_log_file(monkeypatch, tmp_path):
    import eventgraph.main as main_module

    calls = []
    monkeypatch.setattr(main_module.settings, "LOG_FILE", str(tmp_path / "app.log"))
    monkeypatch.setattr(main_module, "setup_logging", lambda level, logfile=None: calls.append((level, logfile)))

    main_module.create_app()
    assert calls == [(main_module.settings.LOG_LEVEL, str(tmp_path / "app.log"))]
