"""
Settings for EchoPath.

Sources, lowest to highest precedence:
- GameSettings defaults
- optional YAML file (config_path argument or ECHOPATH_CONFIG)
- ECHOPATH_* environment variables (a .env file is loaded first)
"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

PROJECT_ROOT = Path(__file__).parent.parent
ENV_PREFIX = "ECHOPATH_"

DEFAULT_SUCCESS_MESSAGE = "Correct!"
DEFAULT_FAILURE_MESSAGE = "Incorrect. Try again."


class GameSettings(BaseModel):
    default_theme: str = Field(default="Dog", min_length=1)
    animals: list[str] = Field(default=["Dog", "Cat", "Horse"], min_length=1)  # picker choices
    success_message: str = DEFAULT_SUCCESS_MESSAGE
    failure_message: str = DEFAULT_FAILURE_MESSAGE
    shuffle_seed: Optional[int] = None     # None -> fresh shuffle every run
    lesson_templates_path: Optional[Path] = None
    log_level: str = Field(default="INFO", pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$')


def _env_overrides() -> dict[str, Any]:
    """Collect ECHOPATH_<FIELD> variables that are set."""
    overrides: dict[str, Any] = {}
    for name in GameSettings.model_fields:
        raw = os.environ.get(ENV_PREFIX + name.upper())
        if raw is None:
            continue
        if name == "animals":
            overrides[name] = [a.strip() for a in raw.split(",") if a.strip()]
        elif name in ("shuffle_seed", "lesson_templates_path") and not raw.strip():
            overrides[name] = None
        elif name == "log_level":
            overrides[name] = raw.strip().upper()
        else:
            overrides[name] = raw
    return overrides


def load_settings(
    config_path: Optional[Path] = None,
    env_file: Optional[Path] = None,
) -> GameSettings:
    """
    Load settings from YAML and the environment.

    Args:
        config_path: YAML settings file (default: $ECHOPATH_CONFIG, if set)
        env_file: .env file to load (default: <project root>/.env)

    Returns:
        Validated GameSettings

    Raises:
        FileNotFoundError: If the settings file doesn't exist
        yaml.YAMLError: If YAML parsing fails
        ValueError: If the file isn't a mapping or a value is invalid
    """
    load_dotenv(env_file or PROJECT_ROOT / ".env")

    data: dict[str, Any] = {}
    path = config_path or os.environ.get(ENV_PREFIX + "CONFIG")
    if path:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Settings file not found: {path}")
        with open(path, "r", encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Settings file must contain a mapping: {path}")
        data.update(loaded)

    data.update(_env_overrides())
    return GameSettings(**data)
