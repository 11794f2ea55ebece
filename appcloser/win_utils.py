#===============================================================================
#  AppCloser | win_utils.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Windows helpers (pywin32 + psutil). A process with a visible, unowned
#  top-level window is a regular app; one whose only windows are tool
#  windows counts as a tray/accessory app. Quitting posts WM_CLOSE, the
#  same message the title-bar X button sends.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

import psutil
import pywintypes
import win32con
import win32gui
import win32process

from .constants import DEFAULT_QUIT_TIMEOUT_S
from .models import Classification, ProcessHandle, QuitOutcome

log = logging.getLogger(__name__)


@dataclass
class WindowInfo:
    hwnd: int
    title: str
    pid: Optional[int]
    tool_window: bool


def display_name(process_name: str) -> str:
    """'WINWORD.EXE' -> 'WINWORD'"""
    p = Path(process_name or "")
    return p.stem if p.suffix.lower() == ".exe" else p.name


def top_level_windows() -> List[WindowInfo]:
    """Visible, titled, unowned top-level windows."""
    found: List[WindowInfo] = []

    def on_window(hwnd, _):
        try:
            if not win32gui.IsWindowVisible(hwnd):
                return True
            if win32gui.GetWindow(hwnd, win32con.GW_OWNER):
                return True
            title = win32gui.GetWindowText(hwnd) or ""
            if not title.strip():
                return True
            ex_style = win32gui.GetWindowLong(hwnd, win32con.GWL_EXSTYLE)
            _, pid = win32process.GetWindowThreadProcessId(hwnd)
        except pywintypes.error:
            return True
        found.append(WindowInfo(
            hwnd=hwnd,
            title=title,
            pid=pid,
            tool_window=bool(ex_style & win32con.WS_EX_TOOLWINDOW),
        ))
        return True

    win32gui.EnumWindows(on_window, None)
    return found


def classify_pids(windows: List[WindowInfo]) -> Dict[int, Classification]:
    """A single normal window makes the whole process regular."""
    out: Dict[int, Classification] = {}
    for w in windows:
        if w.pid is None:
            continue
        if w.tool_window:
            out.setdefault(w.pid, Classification.ACCESSORY)
        else:
            out[w.pid] = Classification.REGULAR
    return out


def list_running_processes() -> List[ProcessHandle]:
    classes = classify_pids(top_level_windows())
    handles: List[ProcessHandle] = []
    for proc in psutil.process_iter(attrs=["pid", "name", "exe"]):
        info = proc.info
        name = display_name(info.get("name") or "")
        if not name:
            continue
        exe = info.get("exe")
        handles.append(ProcessHandle(
            name=name,
            classification=classes.get(info["pid"], Classification.OTHER),
            icon_ref=exe,
            executable_identity=exe,
            pid=info["pid"],
        ))
    return handles


def windows_for_name(name: str) -> List[WindowInfo]:
    """Windows owned by processes called `name`; never our own."""
    target = (name or "").casefold()
    own_pid = os.getpid()
    pids = set()
    for proc in psutil.process_iter(attrs=["pid", "name"]):
        if proc.info["pid"] == own_pid:
            continue
        if display_name(proc.info.get("name") or "").casefold() == target:
            pids.add(proc.info["pid"])
    return [w for w in top_level_windows() if w.pid in pids]


def request_quit(name: str, timeout_s: float = DEFAULT_QUIT_TIMEOUT_S) -> QuitOutcome:
    """Post WM_CLOSE to every top-level window of `name`.

    Windows gives no signal when the user cancels an unsaved-changes prompt,
    so a delivered message is reported as acknowledged.
    """
    windows = windows_for_name(name)
    if not windows:
        return QuitOutcome.ALREADY_GONE

    delivered = 0
    for w in windows:
        try:
            win32gui.PostMessage(w.hwnd, win32con.WM_CLOSE, 0, 0)
            delivered += 1
        except pywintypes.error as e:
            # window closed between enumeration and posting
            log.debug("WM_CLOSE to %s (hwnd=%s) failed: %s", name, w.hwnd, e)

    if delivered:
        return QuitOutcome.ACKNOWLEDGED
    if not windows_for_name(name):
        return QuitOutcome.ALREADY_GONE
    return QuitOutcome.FAILED
