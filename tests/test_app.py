import logging

import run
from problem_service.core.config import Settings
from problem_service.core.logging_config import configure_logging


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///test.db")
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.example, http://b.example")
    monkeypatch.setenv("MAX_PAGE_LIMIT", "5")

    settings = Settings()

    assert settings.DATABASE_URL == "sqlite:///test.db"
    assert settings.ALLOWED_ORIGINS == ["http://a.example", "http://b.example"]
    assert settings.MAX_PAGE_LIMIT == 5
    assert settings.MASK_PLACEHOLDER == "Student Input"


def test_configure_logging_sets_level():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        configure_logging("debug")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)


def test_run_passes_arguments_to_uvicorn(monkeypatch):
    captured = {}

    def fake_run(app, **kwargs):
        captured["app"] = app
        captured.update(kwargs)

    monkeypatch.setattr(run.uvicorn, "run", fake_run)

    run.main(["--host", "0.0.0.0", "--port", "8080", "--reload"])

    assert captured == {"app": "problem_service.main:app", "host": "0.0.0.0", "port": 8080, "reload": True}
