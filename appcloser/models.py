#===============================================================================
#  AppCloser | models.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Shared data models: running-process handles, catalog rows and the
#  progress/result records produced while closing apps.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class Classification(str, Enum):
    REGULAR = "regular"        # normal app with a dock/taskbar presence
    ACCESSORY = "accessory"    # menu bar / tray-only utility
    OTHER = "other"            # daemons, helpers, agents


class QuitOutcome(str, Enum):
    ACKNOWLEDGED = "acknowledged"
    DECLINED = "declined"          # user cancelled a save/quit prompt
    ALREADY_GONE = "already_gone"
    FAILED = "failed"


@dataclass(frozen=True)
class ProcessHandle:
    """A running process as reported by the OS. Read-only."""
    name: str
    classification: Classification
    icon_ref: Optional[str] = None            # bundle / exe path, rendered by the UI
    executable_identity: Optional[str] = None
    pid: Optional[int] = None


@dataclass
class CatalogEntry:
    """One selectable row. `should_close` is the only mutable field that matters."""
    name: str
    classification: Classification
    icon_ref: Optional[str] = None
    should_close: bool = False

    @property
    def key(self) -> str:
        return self.name.casefold()

    @staticmethod
    def from_handle(handle: ProcessHandle) -> "CatalogEntry":
        return CatalogEntry(
            name=handle.name,
            classification=handle.classification,
            icon_ref=handle.icon_ref,
            should_close=handle.classification == Classification.REGULAR,
        )


@dataclass(frozen=True)
class CloseProgress:
    index: int   # 1-based
    total: int
    name: str

    def message(self) -> str:
        return f"Closing app {self.index} of {self.total}: {self.name}"


@dataclass(frozen=True)
class CloseResult:
    name: str
    outcome: QuitOutcome
    skipped: bool = False   # True when the liveness check found it gone
    detail: str = ""


@dataclass
class CloseReport:
    results: List[CloseResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.results)

    def _count(self, outcome: QuitOutcome) -> int:
        return sum(1 for r in self.results if r.outcome == outcome)

    @property
    def closed(self) -> int:
        return self._count(QuitOutcome.ACKNOWLEDGED)

    @property
    def declined(self) -> int:
        return self._count(QuitOutcome.DECLINED)

    @property
    def gone(self) -> int:
        return self._count(QuitOutcome.ALREADY_GONE)

    @property
    def failed(self) -> int:
        return self._count(QuitOutcome.FAILED)

    def summary(self) -> str:
        parts = [f"Closed {self.closed} of {self.total}"]
        if self.declined:
            parts.append(f"{self.declined} declined")
        if self.gone:
            parts.append(f"{self.gone} already gone")
        if self.failed:
            parts.append(f"{self.failed} failed")
        return ", ".join(parts) + "."
