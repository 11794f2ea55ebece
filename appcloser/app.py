#===============================================================================
#  AppCloser | app.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Startup: settings, logging, QApplication and the main window.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

from .app_state import build_state
from .logging_config import default_log_file, setup_logging
from .main_window import MainWindow
from .settings import load_settings, settings_path

log = logging.getLogger(__name__)


def main() -> int:
    base_dir = Path(__file__).resolve().parent.parent
    path = settings_path(base_dir)
    settings = load_settings(path)
    setup_logging(settings.get("log_level", "INFO"), default_log_file(base_dir))
    log.info("Starting on %s; settings from %s", sys.platform, path)

    app = QApplication(sys.argv)
    w = MainWindow(build_state(settings), settings, path)
    w.show()
    return app.exec()
