# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tasklist.config import Settings
from tasklist.logging_setup import _ConsoleNoiseFilter, setup_logging

_VARS = [
    "TASKLIST_APP_NAME",
    "TASKLIST_LOG_LEVEL",
    "TASKLIST_LOG_TO_FILE",
    "TASKLIST_STORE",
    "TASKLIST_DATA_DIR",
    "TASKLIST_TASKS_PATH",
]


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env) -> None:
    s = Settings.from_env()
    assert s.app_name == "tasklist"
    assert s.log_level == "INFO"
    assert s.log_to_file is True
    assert s.store_backend == "memory"
    assert s.data_dir == Path(".local/tasklist")
    assert s.tasks_path == Path(".local/tasklist/tasks.txt")


def test_overrides(clean_env, tmp_path: Path) -> None:
    clean_env.setenv("TASKLIST_STORE", " File ")
    clean_env.setenv("TASKLIST_DATA_DIR", str(tmp_path))
    clean_env.setenv("TASKLIST_LOG_LEVEL", "debug")
    clean_env.setenv("TASKLIST_LOG_TO_FILE", "no")

    s = Settings.from_env()
    assert s.store_backend == "file"
    assert s.tasks_path == tmp_path / "tasks.txt"
    assert s.log_level == "DEBUG"
    assert s.log_to_file is False


def test_explicit_tasks_path_wins(clean_env, tmp_path: Path) -> None:
    clean_env.setenv("TASKLIST_DATA_DIR", str(tmp_path / "data"))
    clean_env.setenv("TASKLIST_TASKS_PATH", str(tmp_path / "mine.txt"))
    assert Settings.from_env().tasks_path == tmp_path / "mine.txt"


def test_unknown_backend_falls_back(clean_env, caplog: pytest.LogCaptureFixture) -> None:
    clean_env.setenv("TASKLIST_STORE", "postgres")
    with caplog.at_level(logging.WARNING, logger="tasklist.config"):
        s = Settings.from_env()
    assert s.store_backend == "memory"
    assert "TASKLIST_STORE" in caplog.text


def test_setup_logging_writes_file(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved = list(root.handlers), root.level
    try:
        setup_logging(log_dir=tmp_path, console_level=logging.WARNING)
        logging.getLogger("tasklist.test").debug("hello file")
        for h in root.handlers:
            h.flush()
        assert "hello file" in (tmp_path / "tasklist.log").read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved[0]:
            root.addHandler(h)
        root.setLevel(saved[1])
        logging.captureWarnings(False)


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_passes_own_logs_and_only_foreign_errors() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("tasklist.tasks.task_store", logging.DEBUG))
    assert f.filter(_record("tasklist", logging.INFO))
    assert not f.filter(_record("tasklistish", logging.WARNING))
    assert not f.filter(_record("py.warnings", logging.WARNING))
    assert f.filter(_record("urllib3", logging.ERROR))
