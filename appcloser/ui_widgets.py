#===============================================================================
#  AppCloser | ui_widgets.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Reusable UI widgets (checkable app list). Keeps the main window smaller.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import Dict, List, Optional

from PySide6.QtCore import QFileInfo, Qt, Signal
from PySide6.QtGui import QFont, QIcon
from PySide6.QtWidgets import QFileIconProvider, QListWidget, QListWidgetItem

from .constants import ICON_SIZE, ROW_FONT_PT
from .models import CatalogEntry


class AppListWidget(QListWidget):
    """One checkable row per app, with its icon."""

    checkToggled = Signal(str, bool)   # name, checked

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setIconSize(ICON_SIZE)
        self.setSpacing(6)
        self.setSelectionMode(QListWidget.NoSelection)
        self.setUniformItemSizes(True)

        self._icon_provider = QFileIconProvider()
        self._icons: Dict[str, QIcon] = {}
        self._font = QFont()
        self._font.setPointSize(ROW_FONT_PT)

        self.itemChanged.connect(self._on_item_changed)

    def icon_for(self, icon_ref: Optional[str]) -> QIcon:
        if not icon_ref:
            return QIcon()
        if icon_ref not in self._icons:
            self._icons[icon_ref] = self._icon_provider.icon(QFileInfo(icon_ref))
        return self._icons[icon_ref]

    def set_entries(self, entries: List[CatalogEntry]) -> None:
        self.blockSignals(True)
        try:
            self.clear()
            for e in entries:
                it = QListWidgetItem(self.icon_for(e.icon_ref), e.name)
                it.setFont(self._font)
                it.setFlags((it.flags() | Qt.ItemIsUserCheckable | Qt.ItemIsEnabled) & ~Qt.ItemIsSelectable)
                it.setCheckState(Qt.Checked if e.should_close else Qt.Unchecked)
                it.setData(Qt.UserRole, e.name)
                self.addItem(it)
        finally:
            self.blockSignals(False)

    def _on_item_changed(self, item: QListWidgetItem) -> None:
        name = item.data(Qt.UserRole)
        if name:
            self.checkToggled.emit(name, item.checkState() == Qt.Checked)
