from __future__ import annotations

import json
import logging
from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def _config_dir() -> Path:
    xdg = os.getenv("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "ytmusic-lyrics"
    return Path.home() / ".config" / "ytmusic-lyrics"


def _config_file() -> Path:
    return _config_dir() / "config.json"


@dataclass(frozen=True)
class AppConfig:
    config_dir: Path

    # YouTube Music locale
    language: str
    location: str

    # Requests
    search_limit: int
    request_timeout_s: float


def load_config() -> AppConfig:
    config_dir = _config_dir()
    stored = _load_stored(config_dir)

    # Priority: config.json → env → default
    language = stored.get("language") or os.getenv("YTMUSIC_LYRICS_LANGUAGE") or "en"
    location = stored.get("location") or os.getenv("YTMUSIC_LYRICS_LOCATION") or ""

    return AppConfig(
        config_dir=config_dir,
        language=str(language),
        location=str(location).upper(),
        search_limit=_env_number("YTMUSIC_LYRICS_SEARCH_LIMIT", int, 20),
        request_timeout_s=_env_number("YTMUSIC_LYRICS_TIMEOUT", float, 10.0),
    )


def _env_number(name: str, cast, default):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = cast(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number, using %s", name, raw, default)
        return default
    if value <= 0:
        logger.warning("Ignoring %s=%r: must be positive, using %s", name, raw, default)
        return default
    return value


def _load_stored(config_dir: Path) -> dict[str, Any]:
    cfg_path = config_dir / "config.json"
    if not cfg_path.exists():
        return {}
    try:
        data = json.loads(cfg_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(*, language: str | None = None, location: str | None = None) -> Path:
    cfg_path = _config_file()
    cfg_path.parent.mkdir(parents=True, exist_ok=True)
    data = _load_stored(cfg_path.parent)
    if language is not None:
        data["language"] = language
    if location is not None:
        data["location"] = location.upper()
    cfg_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    return cfg_path
