from __future__ import annotations

import builtins
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("PEBBLE_CONFIG", "PEBBLE_PRICE_PER_TFLOP", "PEBBLE_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def scripted_input(monkeypatch: pytest.MonkeyPatch):
    """Replace input() with a script of answers; returns the prompts shown.

    An exception class or instance in the script is raised instead of answered.
    Running past the end of the script behaves like Ctrl+D.
    """
    asked: list[str] = []

    def _install(answers):
        pending = list(answers)

        def _input(q=""):
            asked.append(q)
            if not pending:
                raise EOFError
            answer = pending.pop(0)
            if isinstance(answer, BaseException) or (
                isinstance(answer, type) and issubclass(answer, BaseException)
            ):
                raise answer
            return answer

        monkeypatch.setattr(builtins, "input", _input)
        return asked

    return _install


@pytest.fixture
def cfg() -> dict:
    return {"price_per_tflop": 0.004, "log_level": "WARNING"}


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A working directory holding two files and one sub-directory."""
    (tmp_path / "train.py").write_text("print('training')\n")
    (tmp_path / "Dockerfile").write_text("FROM python:3.12-slim\n")
    (tmp_path / "data").mkdir()
    monkeypatch.chdir(tmp_path)
    return tmp_path
