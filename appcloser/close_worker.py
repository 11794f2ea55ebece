#===============================================================================
#  AppCloser | close_worker.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Runs the close loop on a background thread and hands progress back to
#  the UI thread through Qt signals.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import threading
from typing import Optional

from PySide6.QtCore import QObject, Signal

from .app_state import AppState
from .models import CloseReport

log = logging.getLogger(__name__)


class CloseSignals(QObject):
    progress = Signal(int, int, str)
    finished = Signal(object)   # CloseReport


class CloseWorker:
    def __init__(self, state: AppState):
        self.state = state
        self.signals = CloseSignals()
        self._thread: Optional[threading.Thread] = None

    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> bool:
        if self.is_running():
            return False
        self.state.is_closing = True
        self._thread = threading.Thread(target=self._work, name="close-worker", daemon=True)
        self._thread.start()
        return True

    def _work(self) -> None:
        finished = False

        def on_complete(report: CloseReport) -> None:
            nonlocal finished
            finished = True
            self.signals.finished.emit(report)

        try:
            self.state.run_close(
                on_progress=lambda i, total, name: self.signals.progress.emit(i, total, name),
                on_complete=on_complete,
            )
        except Exception:
            log.exception("Close run failed")
        if not finished:
            self.signals.finished.emit(CloseReport())
