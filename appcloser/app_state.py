#===============================================================================
#  AppCloser | app_state.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  In-memory state owned by the window: the current app list, the
#  accessory toggle and whether a close run is in flight.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from . import catalog
from .catalog import AppCatalog
from .constants import platform_protected_names
from .models import CatalogEntry, CloseReport
from .quit_executor import QuitRequestExecutor
from .settings import get_int, protected_names
from .snapshot import ProcessSnapshotProvider
from .termination import CompleteCallback, ProgressCallback, TerminationDriver


@dataclass
class AppState:
    catalog: AppCatalog
    executor: QuitRequestExecutor
    driver: TerminationDriver
    entries: List[CatalogEntry] = field(default_factory=list)
    include_accessory: bool = False
    is_closing: bool = False

    # Callers must not refresh while a close run is in flight; the window
    # disables its controls for that.
    def refresh(self, include_accessory: Optional[bool] = None) -> List[CatalogEntry]:
        if include_accessory is not None:
            self.include_accessory = include_accessory
        self.entries = self.catalog.refresh(self.entries, self.include_accessory)
        return self.entries

    def set_all(self, value: bool) -> None:
        self.entries = catalog.set_all(self.entries, value)

    def set_one(self, name: str, value: bool) -> None:
        self.entries = catalog.set_one(self.entries, name, value)

    def toggle_one(self, name: str) -> None:
        self.entries = catalog.toggle_one(self.entries, name)

    def selected_count(self) -> int:
        return catalog.selected_count(self.entries)

    def run_close(
        self,
        on_progress: Optional[ProgressCallback] = None,
        on_complete: Optional[CompleteCallback] = None,
    ) -> CloseReport:
        names = catalog.selected_names(self.entries)
        self.is_closing = True
        try:
            return self.driver.run(names, self.executor, on_progress=on_progress, on_complete=on_complete)
        finally:
            self.is_closing = False


def build_state(settings: Dict[str, Any], provider: Optional[ProcessSnapshotProvider] = None) -> AppState:
    """Wire catalog, executor and driver from the settings dict."""
    provider = provider or ProcessSnapshotProvider()
    return AppState(
        catalog=AppCatalog(provider, protected=protected_names(settings, platform_protected_names())),
        executor=QuitRequestExecutor(provider, timeout_s=get_int(settings, "quit_timeout_s", minimum=1)),
        driver=TerminationDriver(delay_ms=get_int(settings, "close_delay_ms")),
        include_accessory=bool(settings.get("include_accessory", False)),
    )
