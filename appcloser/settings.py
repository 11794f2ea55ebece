#===============================================================================
#  AppCloser | settings.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Load/save of the small JSON settings file (accessory toggle, delays,
#  extra protected names). Selection state is deliberately not stored here.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from .constants import (
    DEFAULT_CLOSE_DELAY_MS,
    DEFAULT_EXIT_DELAY_MS,
    DEFAULT_QUIT_TIMEOUT_S,
    SETTINGS_ENV_VAR,
    SETTINGS_FILE_NAME,
)

log = logging.getLogger(__name__)


def default_settings() -> Dict[str, Any]:
    return {
        "include_accessory": False,
        "close_delay_ms": DEFAULT_CLOSE_DELAY_MS,
        "quit_timeout_s": DEFAULT_QUIT_TIMEOUT_S,
        "exit_when_done": True,
        "exit_delay_ms": DEFAULT_EXIT_DELAY_MS,
        "extra_protected_names": [],  # added on top of the platform defaults
        "log_level": "INFO",
    }


def settings_path(base_dir: Path) -> Path:
    """Settings file location; the env var wins over <base_dir>/appcloser_settings.json."""
    override = os.environ.get(SETTINGS_ENV_VAR, "").strip()
    if override:
        return Path(override)
    return base_dir / SETTINGS_FILE_NAME


def load_settings(path: Path) -> Dict[str, Any]:
    """Load settings from disk (or defaults)."""
    d = default_settings()
    if not path.exists():
        return d
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        log.warning("Ignoring unreadable settings file %s: %s", path, e)
        return d
    if not isinstance(data, dict):
        log.warning("Ignoring settings file %s: expected a JSON object", path)
        return d
    for k in d:
        if k not in data:
            data[k] = d[k]
    return data


def save_settings(path: Path, settings: Dict[str, Any]) -> None:
    """Persist settings to disk. Failures are logged only."""
    try:
        path.write_text(json.dumps(settings, indent=2), encoding="utf-8")
    except OSError as e:
        log.warning("Could not save settings to %s: %s", path, e)


def get_int(settings: Dict[str, Any], key: str, minimum: int = 0) -> int:
    """Read an integer setting, falling back to the default when malformed."""
    try:
        return max(minimum, int(settings.get(key, default_settings()[key])))
    except (TypeError, ValueError):
        return int(default_settings()[key])


def protected_names(settings: Optional[Dict[str, Any]], builtin: tuple) -> frozenset:
    """Built-in protected names plus any configured extras, case-folded."""
    extra = (settings or {}).get("extra_protected_names") or []
    if isinstance(extra, str):
        extra = [extra]
    elif not isinstance(extra, (list, tuple)):
        extra = []
    names = list(builtin) + [str(n) for n in extra if str(n).strip()]
    return frozenset(n.strip().casefold() for n in names)
