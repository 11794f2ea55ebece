#===============================================================================
#  AppCloser | quit_executor.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Graceful quit requests and liveness checks, addressed by app name.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from typing import Callable, Optional

from .constants import DEFAULT_QUIT_TIMEOUT_S
from .models import QuitOutcome
from .snapshot import ProcessSnapshotProvider, load_backend

log = logging.getLogger(__name__)

QuitFn = Callable[[str, float], QuitOutcome]


class QuitRequestExecutor:
    """Asks one app at a time to quit. Never raises; errors become FAILED."""

    def __init__(
        self,
        provider: ProcessSnapshotProvider,
        quit_fn: Optional[QuitFn] = None,
        timeout_s: float = DEFAULT_QUIT_TIMEOUT_S,
    ):
        self.provider = provider
        self.timeout_s = timeout_s
        self._quit_fn = quit_fn

    def is_still_running(self, name: str) -> bool:
        """False only when a successful listing lacks `name`; a failed listing counts as running."""
        try:
            handles = self.provider.query()
        except Exception as e:
            log.warning("Liveness check for %s failed (%s); asking it to quit anyway", name, e)
            return True
        key = name.casefold()
        return any(h.name.casefold() == key for h in handles)

    def request_quit(self, name: str) -> QuitOutcome:
        if self._quit_fn is None:
            self._quit_fn = load_backend().request_quit
        try:
            return QuitOutcome(self._quit_fn(name, self.timeout_s))
        except Exception as e:
            log.warning("Quit request for %s raised: %s", name, e)
            return QuitOutcome.FAILED
