#===============================================================================
#  AppCloser | snapshot.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Point-in-time snapshot of running processes from the platform backend.
#  A failing OS query degrades to an empty list instead of an error.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
import sys
from types import ModuleType
from typing import Callable, Iterable, List, Optional, Tuple

from .models import ProcessHandle

log = logging.getLogger(__name__)


def load_backend(platform: str = sys.platform) -> ModuleType:
    """Return the helper module for the current OS (mac_utils / win_utils / linux_utils)."""
    if platform == "darwin":
        from . import mac_utils as backend
    elif platform.startswith("win"):
        from . import win_utils as backend
    else:
        from . import linux_utils as backend
    return backend


def own_identity() -> Tuple[Optional[str], int]:
    """(executable path, pid) of this running instance.

    The path is only meaningful for a frozen build; under a plain interpreter
    it is shared with every other Python program, so it is None and the pid
    alone identifies us.
    """
    if not getattr(sys, "frozen", False):
        return None, os.getpid()
    try:
        exe = os.path.realpath(sys.executable) if sys.executable else None
    except OSError:
        exe = sys.executable or None
    return exe, os.getpid()


class ProcessSnapshotProvider:
    """Wraps a `() -> Iterable[ProcessHandle]` lister; every call is a fresh query."""

    def __init__(self, lister: Optional[Callable[[], Iterable[ProcessHandle]]] = None):
        self._lister = lister

    def _resolve_lister(self) -> Callable[[], Iterable[ProcessHandle]]:
        if self._lister is None:
            self._lister = load_backend().list_running_processes
        return self._lister

    def query(self) -> List[ProcessHandle]:
        """Like snapshot() but lets OS errors propagate."""
        return list(self._resolve_lister()())

    def snapshot(self) -> List[ProcessHandle]:
        try:
            handles = self.query()
        except Exception:
            log.exception("Listing running processes failed; showing no apps")
            return []
        log.debug("Snapshot: %d processes", len(handles))
        return handles
