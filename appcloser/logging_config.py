#===============================================================================
#  AppCloser | logging_config.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Application-wide logging: rich console output plus a rotating log file
#  under ./.appcloser/logs.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional, Union

from rich.logging import RichHandler

from .constants import LOG_DIR_NAME, LOG_FILE_ENV_VAR, LOG_FILE_NAME


def default_log_file(base_dir: Path) -> Path:
    """APPCLOSER_LOG_FILE if set, else <base_dir>/.appcloser/logs/appcloser.log."""
    env_file = os.environ.get(LOG_FILE_ENV_VAR, "").strip()
    if env_file:
        return Path(env_file)
    logs_dir = base_dir / LOG_DIR_NAME / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    return logs_dir / LOG_FILE_NAME


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[Path] = None) -> None:
    """Configure the root logger: rich console output, plus a rotating file when `log_file` is given."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    handlers: List[logging.Handler] = [RichHandler(rich_tracebacks=True, markup=False)]

    if log_file:
        file_handler = RotatingFileHandler(log_file, maxBytes=5_000_000, backupCount=5, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
        handlers.append(file_handler)

    logging.basicConfig(level=level, handlers=handlers, format="%(message)s", force=True)
