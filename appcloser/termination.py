#===============================================================================
#  AppCloser | termination.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Sequential close loop. Each selected app gets exactly one quit request;
#  apps that already exited are skipped, and nothing one app does can stop
#  the rest of the batch.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import time
from typing import Callable, Generator, Optional, Sequence, Union

from .constants import DEFAULT_CLOSE_DELAY_MS
from .models import CloseProgress, CloseReport, CloseResult, QuitOutcome
from .quit_executor import QuitRequestExecutor

log = logging.getLogger(__name__)

CloseEvent = Union[CloseProgress, CloseResult]
ProgressCallback = Callable[[int, int, str], None]
CompleteCallback = Callable[[CloseReport], None]


def _log_result(result: CloseResult) -> None:
    if result.skipped:
        log.info("%s already exited; skipped", result.name)
    elif result.outcome == QuitOutcome.ACKNOWLEDGED:
        log.info("Asked %s to quit", result.name)
    elif result.outcome == QuitOutcome.DECLINED:
        log.info("User canceled quit for %s", result.name)
    elif result.outcome == QuitOutcome.ALREADY_GONE:
        log.info("%s exited before the quit request arrived", result.name)
    else:
        log.warning("Could not quit %s%s", result.name, f": {result.detail}" if result.detail else "")


class TerminationDriver:
    """Closes apps one by one, never in parallel.

    Quit requests may block on the app's own save/quit dialog, so this is
    meant to run off the UI thread.
    """

    def __init__(self, delay_ms: int = DEFAULT_CLOSE_DELAY_MS, sleep: Callable[[float], None] = time.sleep):
        self.delay_ms = max(0, int(delay_ms))
        self._sleep = sleep

    def close_one(self, name: str, executor: QuitRequestExecutor) -> CloseResult:
        try:
            if not executor.is_still_running(name):
                return CloseResult(name, QuitOutcome.ALREADY_GONE, skipped=True)
            return CloseResult(name, executor.request_quit(name))
        except Exception as e:
            return CloseResult(name, QuitOutcome.FAILED, detail=str(e))

    def iter_close(
        self, names: Sequence[str], executor: QuitRequestExecutor
    ) -> Generator[CloseEvent, None, CloseReport]:
        """Yield a CloseProgress before and a CloseResult after each attempt.

        The generator's return value is the CloseReport. Closing the
        generator early stops before the next app.
        """
        names = list(names)
        total = len(names)
        report = CloseReport()
        for index, name in enumerate(names, start=1):
            yield CloseProgress(index, total, name)
            result = self.close_one(name, executor)
            _log_result(result)
            report.results.append(result)
            yield result
            if self.delay_ms > 0:
                self._sleep(self.delay_ms / 1000.0)
        return report

    def run(
        self,
        names: Sequence[str],
        executor: QuitRequestExecutor,
        on_progress: Optional[ProgressCallback] = None,
        on_complete: Optional[CompleteCallback] = None,
    ) -> CloseReport:
        """Callback form of iter_close. `on_complete` fires exactly once, last."""
        events = self.iter_close(names, executor)
        while True:
            try:
                event = next(events)
            except StopIteration as stop:
                report = stop.value
                break
            if isinstance(event, CloseProgress) and on_progress is not None:
                try:
                    on_progress(event.index, event.total, event.name)
                except Exception:
                    log.exception("Progress callback failed for %s", event.name)

        log.info("Close run finished. %s", report.summary())
        if on_complete is not None:
            try:
                on_complete(report)
            except Exception:
                log.exception("Completion callback failed")
        return report
