#!/usr/bin/env python3
"""
Config Loader - Pebble CLI
==========================
Loads optional settings from pebble.yaml and merges environment overrides.

Every setting has a default, so the wizard runs with no config at all.

Usage:
  from config_loader import load_config
  cfg = load_config()
  print(cfg["price_per_tflop"])

Environment variables (set in .env or shell, all optional):
  PEBBLE_CONFIG           - path to an alternative YAML config file
  PEBBLE_PRICE_PER_TFLOP  - USD per TFLOP used in the training price estimate
  PEBBLE_LOG_LEVEL        - DEBUG / INFO / WARNING / ERROR / CRITICAL
"""
import os
import sys
from pathlib import Path
from typing import Any, Optional

try:
    import yaml
except ImportError:
    print("pyyaml not installed. Run: pip install -e .")
    sys.exit(1)

from dotenv import load_dotenv

from pricing import PRICE_PER_TFLOP

DEFAULTS: dict[str, Any] = {
    "price_per_tflop": PRICE_PER_TFLOP,
    "log_level":       "WARNING",
}
ENV_OVERRIDES = {
    "price_per_tflop": "PEBBLE_PRICE_PER_TFLOP",
    "log_level":       "PEBBLE_LOG_LEVEL",
}
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_config(config_path: Optional[str] = None) -> dict[str, Any]:
    """
    Load configuration from YAML and the environment.

    Args:
        config_path: YAML file (relative to the working directory or absolute).
            Defaults to $PEBBLE_CONFIG, then pebble.yaml next to this file.

    Returns:
        Dict with every key of DEFAULTS, validated.

    Raises:
        FileNotFoundError: If an explicitly named config file does not exist
        ValueError: If the YAML is malformed or a value is invalid
    """
    base = Path(__file__).parent

    # Load .env file if present; real environment variables win
    env_file = base / ".env"
    if env_file.exists():
        load_dotenv(env_file)

    explicit = config_path or os.environ.get("PEBBLE_CONFIG")
    # Explicit paths are relative to the working directory; the default sits next to this file
    cfg_file = Path(explicit) if explicit else base / "pebble.yaml"

    cfg = dict(DEFAULTS)
    if cfg_file.exists():
        with open(cfg_file) as f:
            try:
                loaded = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"{cfg_file} is not valid YAML: {e}") from e
        if not isinstance(loaded, dict):
            raise ValueError(f"{cfg_file} must contain a mapping, got {type(loaded).__name__}")
        cfg.update({k: loaded[k] for k in DEFAULTS if k in loaded})
    elif explicit:
        raise FileNotFoundError(f"Config file not found: {cfg_file}")

    for cfg_key, env_var in ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if value:
            cfg[cfg_key] = value

    return _validate(cfg, cfg_file)


def _validate(cfg: dict[str, Any], source: Path) -> dict[str, Any]:
    raw_price = cfg["price_per_tflop"]
    try:
        price = float(raw_price)
    except (TypeError, ValueError):
        raise ValueError(f"price_per_tflop must be a number, got {raw_price!r} ({source})") from None
    if price <= 0:
        raise ValueError(f"price_per_tflop must be greater than 0, got {price} ({source})")
    cfg["price_per_tflop"] = price

    level = str(cfg["log_level"]).upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {cfg['log_level']!r}")
    cfg["log_level"] = level
    return cfg


if __name__ == "__main__":
    """Quick validation - run: python3 config_loader.py"""
    try:
        cfg = load_config()
        print("Configuration loaded successfully")
        print(f"   Price per TFLOP: ${cfg['price_per_tflop']}")
        print(f"   Log level:       {cfg['log_level']}")
    except (FileNotFoundError, ValueError) as e:
        print(f"Configuration error: {e}")
        sys.exit(1)
