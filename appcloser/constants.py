#===============================================================================
#  AppCloser | constants.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Central place for UI sizing, theme, protected process names and
#  file/folder naming conventions.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import sys

from PySide6.QtCore import QSize

APP_TITLE = "App Closer"
SETTINGS_FILE_NAME = "appcloser_settings.json"
SETTINGS_ENV_VAR = "APPCLOSER_SETTINGS"
LOG_DIR_NAME = ".appcloser"
LOG_FILE_NAME = "appcloser.log"
LOG_FILE_ENV_VAR = "APPCLOSER_LOG_FILE"

# Desktop shell processes that are never offered for closing.
PROTECTED_NAMES_MAC = ("Finder",)
PROTECTED_NAMES_WIN = ("explorer",)
PROTECTED_NAMES_LINUX = ("gnome-shell", "plasmashell", "nautilus", "Xorg", "Xwayland")


def platform_protected_names(platform: str = sys.platform) -> tuple:
    if platform == "darwin":
        return PROTECTED_NAMES_MAC
    if platform.startswith("win"):
        return PROTECTED_NAMES_WIN
    return PROTECTED_NAMES_LINUX


# Pause between quit requests so the user can follow along
DEFAULT_CLOSE_DELAY_MS = 100
DEFAULT_QUIT_TIMEOUT_S = 120
DEFAULT_EXIT_DELAY_MS = 500

# --- Theme ---
WINDOW_SIZE = QSize(800, 600)
ICON_SIZE = QSize(48, 48)
ROW_FONT_PT = 18
STATUS_COLOR = "#E81123"
