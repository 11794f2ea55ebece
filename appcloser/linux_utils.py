#===============================================================================
#  AppCloser | linux_utils.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Linux/X11 helpers. Processes owning a window (per `wmctrl -lp`) are
#  regular apps; everything else is background. Quitting sends SIGTERM via
#  psutil, never SIGKILL.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from typing import List, Set

import psutil

from .constants import DEFAULT_QUIT_TIMEOUT_S
from .models import Classification, ProcessHandle, QuitOutcome

log = logging.getLogger(__name__)


def parse_wmctrl(output: str) -> Set[int]:
    """PIDs from `wmctrl -lp` lines: '<hwnd> <desktop> <pid> <host> <title>'."""
    pids: Set[int] = set()
    for line in (output or "").splitlines():
        parts = line.split(None, 3)
        if len(parts) < 3:
            continue
        try:
            pid = int(parts[2])
        except ValueError:
            continue
        if pid > 0:
            pids.add(pid)
    return pids


def windowed_pids(timeout_s: float = 5) -> Set[int]:
    if not shutil.which("wmctrl"):
        log.debug("wmctrl not found; no process will be treated as a windowed app")
        return set()
    p = subprocess.run(["wmctrl", "-lp"], capture_output=True, text=True, timeout=timeout_s, check=True)
    return parse_wmctrl(p.stdout)


def list_running_processes() -> List[ProcessHandle]:
    windowed = windowed_pids()
    handles: List[ProcessHandle] = []
    for proc in psutil.process_iter(attrs=["pid", "name", "exe"]):
        info = proc.info
        name = (info.get("name") or "").strip()
        if not name:
            continue
        handles.append(ProcessHandle(
            name=name,
            classification=Classification.REGULAR if info["pid"] in windowed else Classification.OTHER,
            icon_ref=None,
            executable_identity=info.get("exe"),
            pid=info["pid"],
        ))
    return handles


def request_quit(name: str, timeout_s: float = DEFAULT_QUIT_TIMEOUT_S) -> QuitOutcome:
    """SIGTERM every process called `name`, except this one. Does not wait for it to exit."""
    target = (name or "").casefold()
    own_pid = os.getpid()
    matches = [
        p for p in psutil.process_iter(attrs=["pid", "name"])
        if (p.info.get("name") or "").casefold() == target and p.info["pid"] != own_pid
    ]
    if not matches:
        return QuitOutcome.ALREADY_GONE

    signalled = 0
    denied = 0
    for proc in matches:
        try:
            proc.terminate()
            signalled += 1
        except psutil.NoSuchProcess:
            continue
        except psutil.AccessDenied:
            denied += 1

    if signalled:
        return QuitOutcome.ACKNOWLEDGED
    if denied:
        log.warning("Permission denied terminating %s", name)
        return QuitOutcome.FAILED
    return QuitOutcome.ALREADY_GONE
