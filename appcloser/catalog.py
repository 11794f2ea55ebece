#===============================================================================
#  AppCloser | catalog.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Builds the ordered list of closable apps from a process snapshot:
#  filtering, de-duplication by name, sorting, and carrying the user's
#  checkbox state forward across refreshes.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
from dataclasses import replace
from typing import Dict, Iterable, List, Optional, Sequence

from .constants import platform_protected_names
from .models import CatalogEntry, Classification, ProcessHandle
from .snapshot import ProcessSnapshotProvider, own_identity

log = logging.getLogger(__name__)


def _same_path(a: Optional[str], b: Optional[str]) -> bool:
    if not a or not b:
        return False
    return os.path.normcase(os.path.abspath(a)) == os.path.normcase(os.path.abspath(b))


def is_self(handle: ProcessHandle, own_exe: Optional[str], own_pid: Optional[int]) -> bool:
    """PID when both sides have one; the executable path (set only for frozen builds) otherwise."""
    if own_pid is not None and handle.pid is not None:
        return handle.pid == own_pid
    return _same_path(handle.executable_identity, own_exe)


def is_visible(handle: ProcessHandle, include_accessory: bool) -> bool:
    if handle.classification == Classification.REGULAR:
        return True
    return include_accessory and handle.classification == Classification.ACCESSORY


def build_entries(
    handles: Iterable[ProcessHandle],
    previous: Sequence[CatalogEntry],
    include_accessory: bool,
    protected: Iterable[str] = (),
    own_exe: Optional[str] = None,
    own_pid: Optional[int] = None,
) -> List[CatalogEntry]:
    """Pure part of a refresh.

    Two handles with the same (case-insensitive) name collapse into one
    entry; the last one seen wins.
    """
    protected_keys = {n.casefold() for n in protected}
    prior = {e.key: e.should_close for e in previous}

    by_key: Dict[str, CatalogEntry] = {}
    for h in handles:
        if not (h.name or "").strip():
            continue
        if not is_visible(h, include_accessory):
            continue
        if is_self(h, own_exe, own_pid):
            continue
        if h.name.casefold() in protected_keys:
            continue
        entry = CatalogEntry.from_handle(h)
        if entry.key in prior:
            entry.should_close = prior[entry.key]
        by_key[entry.key] = entry

    return sorted(by_key.values(), key=lambda e: e.key)


class AppCatalog:
    def __init__(
        self,
        provider: ProcessSnapshotProvider,
        protected: Optional[Iterable[str]] = None,
        own_exe: Optional[str] = None,
        own_pid: Optional[int] = None,
    ):
        self.provider = provider
        self.protected = frozenset(n.casefold() for n in (protected if protected is not None else platform_protected_names()))
        if own_exe is None and own_pid is None:
            own_exe, own_pid = own_identity()
        self.own_exe = own_exe
        self.own_pid = own_pid

    def refresh(self, previous: Sequence[CatalogEntry], include_accessory: bool) -> List[CatalogEntry]:
        entries = build_entries(
            self.provider.snapshot(),
            previous,
            include_accessory,
            protected=self.protected,
            own_exe=self.own_exe,
            own_pid=self.own_pid,
        )
        log.debug(
            "Loaded apps: %s",
            ", ".join(f"{e.name}: {'[x]' if e.should_close else '[ ]'}" for e in entries),
        )
        return entries


def set_all(entries: Sequence[CatalogEntry], value: bool) -> List[CatalogEntry]:
    return [replace(e, should_close=value) for e in entries]


def set_one(entries: Sequence[CatalogEntry], name: str, value: bool) -> List[CatalogEntry]:
    key = name.casefold()
    return [replace(e, should_close=value) if e.key == key else e for e in entries]


def toggle_one(entries: Sequence[CatalogEntry], name: str) -> List[CatalogEntry]:
    key = name.casefold()
    return [replace(e, should_close=not e.should_close) if e.key == key else e for e in entries]


def selected_count(entries: Sequence[CatalogEntry]) -> int:
    return sum(1 for e in entries if e.should_close)


def selected_names(entries: Sequence[CatalogEntry]) -> List[str]:
    """Names to close, in display order. A copy; safe to hand to another thread."""
    return [e.name for e in entries if e.should_close]
