from __future__ import annotations

from pathlib import Path

import pytest

from config_loader import DEFAULTS, load_config


def _write(tmp_path: Path, text: str) -> str:
    path = tmp_path / "pebble.yaml"
    path.write_text(text)
    return str(path)


def test_defaults_without_config_file() -> None:
    cfg = load_config()
    assert cfg == {"price_per_tflop": 0.004, "log_level": "WARNING"}
    assert set(cfg) == set(DEFAULTS)


def test_values_from_yaml(tmp_path: Path) -> None:
    path = _write(tmp_path, "price_per_tflop: 0.01\nlog_level: debug\nunknown_key: 1\n")

    cfg = load_config(path)

    assert cfg == {"price_per_tflop": 0.01, "log_level": "DEBUG"}


def test_empty_yaml_keeps_defaults(tmp_path: Path) -> None:
    assert load_config(_write(tmp_path, "")) == load_config()


def test_environment_overrides_yaml(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = _write(tmp_path, "price_per_tflop: 0.01\n")
    monkeypatch.setenv("PEBBLE_PRICE_PER_TFLOP", "0.5")
    monkeypatch.setenv("PEBBLE_LOG_LEVEL", "info")

    cfg = load_config(path)

    assert cfg["price_per_tflop"] == 0.5
    assert cfg["log_level"] == "INFO"


def test_config_path_from_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PEBBLE_CONFIG", _write(tmp_path, "price_per_tflop: 2\n"))
    assert load_config()["price_per_tflop"] == 2.0


def test_missing_explicit_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "absent.yaml"))

    monkeypatch.setenv("PEBBLE_CONFIG", str(tmp_path / "absent.yaml"))
    with pytest.raises(FileNotFoundError):
        load_config()


@pytest.mark.parametrize(
    "text, match",
    [
        ("price_per_tflop: [1, 2\n", "not valid YAML"),
        ("- a\n- b\n", "must contain a mapping"),
        ("price_per_tflop: cheap\n", "must be a number"),
        ("price_per_tflop: 0\n", "greater than 0"),
        ("price_per_tflop: -1\n", "greater than 0"),
        ("log_level: LOUD\n", "log_level must be one of"),
    ],
)
def test_invalid_config(tmp_path: Path, text: str, match: str) -> None:
    with pytest.raises(ValueError, match=match):
        load_config(_write(tmp_path, text))


def test_relative_config_path_uses_working_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _write(tmp_path, "price_per_tflop: 0.02\n")
    monkeypatch.chdir(tmp_path)

    assert load_config("pebble.yaml")["price_per_tflop"] == 0.02

    monkeypatch.setenv("PEBBLE_CONFIG", "./pebble.yaml")
    assert load_config()["price_per_tflop"] == 0.02
