from __future__ import annotations

import yaml
from pathlib import Path
from typing import Dict, Any

USER_CONFIG_PATH = Path.home() / ".todo_tui_config.yaml"


def _load_config() -> Dict[str, Any]:
    if not USER_CONFIG_PATH.exists():
        return {}
    try:
        data = yaml.safe_load(USER_CONFIG_PATH.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def _save_config(data: Dict[str, Any]) -> None:
    if not data:
        if USER_CONFIG_PATH.exists():
            USER_CONFIG_PATH.unlink()
        return
    USER_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    USER_CONFIG_PATH.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")


def get_user_theme() -> str:
    return str(_load_config().get("theme", "") or "").strip()


def set_user_theme(value: str) -> None:
    data = _load_config()
    value = (value or "").strip()
    if value:
        data["theme"] = value
    else:
        data.pop("theme", None)
    _save_config(data)


def get_user_log_level() -> str:
    return str(_load_config().get("log_level", "") or "").strip().upper()
