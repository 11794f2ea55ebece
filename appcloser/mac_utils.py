#===============================================================================
#  AppCloser | mac_utils.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  macOS helpers. Running apps come from NSWorkspace (queried through
#  osascript's JavaScript bridge so no extra bindings are needed); quitting
#  uses the regular AppleScript "quit" event, which lets the app show its
#  own save prompts.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import json
import logging
import re
import subprocess
from typing import List, Optional

from .constants import DEFAULT_QUIT_TIMEOUT_S
from .models import Classification, ProcessHandle, QuitOutcome

log = logging.getLogger(__name__)

# NSApplicationActivationPolicy values
_POLICY_MAP = {
    0: Classification.REGULAR,
    1: Classification.ACCESSORY,
    2: Classification.OTHER,
}

# AppleScript error numbers
ERR_USER_CANCELED = -128
ERR_NOT_RUNNING = -600
ERR_CANT_GET = -1728
_GONE_ERRORS = {ERR_NOT_RUNNING, ERR_CANT_GET}

_ERROR_NUMBER_RE = re.compile(r"\((-?\d+)\)\s*$")

LIST_APPS_JXA = """
ObjC.import('AppKit');
var apps = $.NSWorkspace.sharedWorkspace.runningApplications;
var out = [];
for (var i = 0; i < apps.count; i++) {
    var a = apps.objectAtIndex(i);
    out.push({
        name: a.localizedName.isNil() ? null : ObjC.unwrap(a.localizedName),
        policy: a.activationPolicy,
        pid: a.processIdentifier,
        bundle: a.bundleURL.isNil() ? null : ObjC.unwrap(a.bundleURL.path),
        exe: a.executableURL.isNil() ? null : ObjC.unwrap(a.executableURL.path)
    });
}
JSON.stringify(out);
"""


def parse_running_apps(payload: str) -> List[ProcessHandle]:
    """Turn the JSON emitted by LIST_APPS_JXA into handles. Nameless apps are dropped."""
    handles: List[ProcessHandle] = []
    for item in json.loads(payload or "[]"):
        name = (item.get("name") or "").strip()
        if not name:
            continue
        try:
            policy = int(item.get("policy"))
        except (TypeError, ValueError):
            policy = 2
        pid = item.get("pid")
        handles.append(
            ProcessHandle(
                name=name,
                classification=_POLICY_MAP.get(policy, Classification.OTHER),
                icon_ref=item.get("bundle") or item.get("exe"),
                executable_identity=item.get("exe"),
                pid=int(pid) if isinstance(pid, (int, float)) else None,
            )
        )
    return handles


def list_running_processes(timeout_s: float = 15) -> List[ProcessHandle]:
    """Running GUI apps as seen by NSWorkspace. Raises on osascript failure."""
    p = subprocess.run(
        ["osascript", "-l", "JavaScript", "-e", LIST_APPS_JXA],
        capture_output=True,
        text=True,
        timeout=timeout_s,
        check=True,
    )
    return parse_running_apps(p.stdout.strip())


def applescript_string(value: str) -> str:
    """Quote a value as an AppleScript string literal."""
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


def quit_script(name: str) -> List[str]:
    """Script lines that quit `name` only if it is running (never launches it)."""
    app = f"application {applescript_string(name)}"
    return [
        f"if {app} is running then",
        f"tell {app} to quit",
        'return "quit"',
        "end if",
        'return "gone"',
    ]


def error_number(stderr: str) -> Optional[int]:
    """Extract the trailing '(-128)' style error number from osascript stderr."""
    m = _ERROR_NUMBER_RE.search((stderr or "").strip())
    return int(m.group(1)) if m else None


def request_quit(name: str, timeout_s: float = DEFAULT_QUIT_TIMEOUT_S) -> QuitOutcome:
    """Ask `name` to quit. Blocks while the app shows its own quit/save dialog."""
    cmd = ["osascript"]
    for line in quit_script(name):
        cmd += ["-e", line]
    log.debug("osascript quit for %s", name)

    try:
        p = subprocess.run(cmd, capture_output=True, text=True, timeout=timeout_s)
    except subprocess.TimeoutExpired:
        log.warning("Quit request for %s timed out after %ss", name, timeout_s)
        return QuitOutcome.FAILED
    except OSError as e:
        log.warning("Could not run osascript for %s: %s", name, e)
        return QuitOutcome.FAILED

    if p.returncode == 0:
        if p.stdout.strip() == "gone":
            return QuitOutcome.ALREADY_GONE
        return QuitOutcome.ACKNOWLEDGED

    code = error_number(p.stderr)
    if code == ERR_USER_CANCELED:
        return QuitOutcome.DECLINED
    if code in _GONE_ERRORS:
        return QuitOutcome.ALREADY_GONE
    log.warning("osascript error quitting %s: %s", name, p.stderr.strip())
    return QuitOutcome.FAILED
