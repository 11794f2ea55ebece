#===============================================================================
#  AppCloser | appcloser/main_window.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Main window:
#    - Checkable list of running apps (regular apps pre-checked)
#    - "Include menu bar / accessory apps" toggle (persisted)
#    - Refresh / Check All / Uncheck All
#    - "Close Selected Apps" asks each checked app to quit, one at a time,
#      on a background thread, with live "Closing app i of N" status
#    - Exits when done (configurable)
#===============================================================================

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

from PySide6.QtCore import QTimer
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QApplication,
    QCheckBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from .app_state import AppState
from .close_worker import CloseWorker
from .constants import APP_TITLE, STATUS_COLOR, WINDOW_SIZE
from .models import CloseProgress, CloseReport
from .settings import get_int, save_settings
from .ui_widgets import AppListWidget

log = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, state: AppState, settings: Dict[str, Any], settings_path: Path):
        super().__init__()
        self.setWindowTitle(APP_TITLE)
        self.resize(WINDOW_SIZE)

        self.state = state
        self.settings = settings
        self.settings_path = settings_path
        self.worker = CloseWorker(state)
        self.worker.signals.progress.connect(self._on_progress)
        self.worker.signals.finished.connect(self._on_finished)

        root = QWidget()
        self.setCentralWidget(root)
        layout = QVBoxLayout(root)
        layout.setContentsMargins(14, 14, 14, 14)
        layout.setSpacing(8)

        headline = QLabel("Select apps to close:")
        f = QFont()
        f.setBold(True)
        f.setPointSize(f.pointSize() + 2)
        headline.setFont(f)
        layout.addWidget(headline)

        self.chk_accessory = QCheckBox("Include menu bar / accessory apps")
        self.chk_accessory.setChecked(self.state.include_accessory)
        self.chk_accessory.toggled.connect(self._on_accessory_toggled)
        layout.addWidget(self.chk_accessory)

        actions = QHBoxLayout()
        self.btn_refresh = QPushButton("Refresh App List")
        self.btn_refresh.clicked.connect(self.refresh)
        actions.addWidget(self.btn_refresh)

        self.btn_check_all = QPushButton("Check All")
        self.btn_check_all.clicked.connect(lambda: self._set_all(True))
        actions.addWidget(self.btn_check_all)

        self.btn_uncheck_all = QPushButton("Uncheck All")
        self.btn_uncheck_all.clicked.connect(lambda: self._set_all(False))
        actions.addWidget(self.btn_uncheck_all)
        actions.addStretch(1)
        layout.addLayout(actions)

        self.app_list = AppListWidget()
        self.app_list.checkToggled.connect(self._on_check_toggled)
        layout.addWidget(self.app_list, 1)

        self.status = QLabel("")
        self.status.setStyleSheet(f"color: {STATUS_COLOR};")
        self.status.setVisible(False)
        layout.addWidget(self.status)

        bottom = QHBoxLayout()
        bottom.addStretch(1)
        self.btn_cancel = QPushButton("Cancel")
        self.btn_cancel.clicked.connect(QApplication.quit)
        bottom.addWidget(self.btn_cancel)

        self.btn_close = QPushButton("Close Selected Apps")
        self.btn_close.setDefault(True)
        self.btn_close.setAutoDefault(True)
        self.btn_close.clicked.connect(self.close_selected)
        bottom.addWidget(self.btn_close)
        layout.addLayout(bottom)

        self.refresh()

    # ----------------------------
    # List
    # ----------------------------
    def refresh(self) -> None:
        if self.state.is_closing:
            return
        entries = self.state.refresh()
        self.app_list.set_entries(entries)
        self._update_buttons()

    def _set_all(self, value: bool) -> None:
        self.state.set_all(value)
        self.app_list.set_entries(self.state.entries)
        self._update_buttons()

    def _on_check_toggled(self, name: str, checked: bool) -> None:
        self.state.set_one(name, checked)
        self._update_buttons()

    def _on_accessory_toggled(self, checked: bool) -> None:
        self.state.include_accessory = checked
        self.settings["include_accessory"] = checked
        save_settings(self.settings_path, self.settings)
        self.refresh()

    def _update_buttons(self) -> None:
        busy = self.state.is_closing
        for w in (self.btn_refresh, self.btn_check_all, self.btn_uncheck_all, self.chk_accessory, self.app_list):
            w.setEnabled(not busy)
        self.btn_close.setEnabled(not busy)
        n = self.state.selected_count()
        self.btn_close.setText(f"Close Selected Apps ({n})" if n else "Close Selected Apps")

    # ----------------------------
    # Close run
    # ----------------------------
    def close_selected(self) -> None:
        if not self.worker.start():
            return
        self._set_status("Closing apps...")
        self._update_buttons()

    def _set_status(self, text: str) -> None:
        self.status.setText(text)
        self.status.setVisible(bool(text))

    def _on_progress(self, index: int, total: int, name: str) -> None:
        self._set_status(CloseProgress(index, total, name).message())

    def _on_finished(self, report: CloseReport) -> None:
        self.state.is_closing = False
        if self.settings.get("exit_when_done", True):
            self._set_status(f"Done. {report.summary()} Exiting...")
            QTimer.singleShot(get_int(self.settings, "exit_delay_ms"), QApplication.quit)
            return
        self._set_status(f"Done. {report.summary()}")
        self.refresh()
