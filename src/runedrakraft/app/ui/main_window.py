"""
Main Application Window
=======================
Tab bar of calculator systems on top, the selected variant panel below and a
console dock that mirrors the package log.
"""
from __future__ import annotations

import logging
from datetime import datetime

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction, QCloseEvent
from PySide6.QtWidgets import (
    QDockWidget, QLabel, QMainWindow, QPlainTextEdit, QScrollArea, QStackedWidget,
    QTabBar, QVBoxLayout, QWidget
)

from runedrakraft.app.state import Store
from runedrakraft.app.ui.panels.infusion import InfusionPanel
from runedrakraft.config import APP_TAGLINE, VISIBLE_APP_NAME
from runedrakraft.logging_config import attach_sink

logger = logging.getLogger(__name__)


class Console(QPlainTextEdit):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setReadOnly(True)
        self.setPlaceholderText("Log output will appear here…")

    def log(self, level: str, msg: str) -> None:
        self.appendPlainText(f"{datetime.now().strftime('%d.%m.%Y %H:%M:%S')} [{level}] {msg}")


class MainWindow(QMainWindow):
    def __init__(self, store: Store | None = None):
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(900, 1000)

        # Global store
        self.store = store or Store()

        # ---- Central: header + TabBar on top + panel stack below ----
        central = QWidget(self)
        v = QVBoxLayout(central)
        v.setContentsMargins(0, 0, 0, 0)
        v.setSpacing(0)

        tagline = QLabel(APP_TAGLINE, central)
        tagline.setStyleSheet("color: gray; padding: 6px;")
        v.addWidget(tagline, 0)

        self.tabs = QTabBar(central)
        self.tabs.setExpanding(True)
        self.tabs.setMovable(False)
        self.tabs.setTabsClosable(False)
        self.tabs.setDrawBase(True)
        self.tabs.setShape(QTabBar.Shape.RoundedNorth)
        v.addWidget(self.tabs, 0)

        self.panel_stack = QStackedWidget(central)
        v.addWidget(self.panel_stack, 1)
        self.setCentralWidget(central)

        self.panels: list[InfusionPanel] = []
        for key in self.store.keys():
            panel = InfusionPanel(self.store, key, parent=self)
            scroll = QScrollArea(self)
            scroll.setWidgetResizable(True)
            scroll.setWidget(panel)
            self.panel_stack.addWidget(scroll)
            self.panels.append(panel)
            self.tabs.addTab(panel.variant.title)

        self.tabs.currentChanged.connect(self.panel_stack.setCurrentIndex)

        # ---- Console dock ----
        self.console = Console(self)
        self.dock_console = QDockWidget("Console", self)
        self.dock_console.setWidget(self.console)
        self.addDockWidget(Qt.DockWidgetArea.BottomDockWidgetArea, self.dock_console)
        self._log_handler = attach_sink(self.console.log)

        self._create_actions()
        self._create_menus()

        self.store.alert_raised.connect(lambda key, alert: self.statusBar().showMessage(alert.message, 4000))
        logger.info(f"{len(self.panels)} systems loaded.")

    def _create_actions(self) -> None:
        self.act_copy = QAction("Copy Results", self)
        self.act_copy.setShortcut("Ctrl+C")
        self.act_copy.triggered.connect(self.on_copy)

        self.act_help = QAction("Manual", self)
        self.act_help.setShortcut("F1")
        self.act_help.triggered.connect(lambda: self.store.show_help(self.current_panel().key))

        self.act_reset = QAction("Reset", self)
        self.act_reset.setShortcut("Ctrl+R")
        self.act_reset.triggered.connect(lambda: self.store.reset(self.current_panel().key))

        self.act_exit = QAction("Exit", self)
        self.act_exit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")
        file_menu.addAction(self.act_exit)

        system_menu = menu_bar.addMenu("&System")
        system_menu.addAction(self.act_copy)
        system_menu.addAction(self.act_reset)
        system_menu.addSeparator()
        system_menu.addAction(self.act_help)

    def current_panel(self) -> InfusionPanel:
        return self.panels[self.tabs.currentIndex()]

    def on_copy(self) -> None:
        panel = self.current_panel()
        if not panel.copy_results():
            self.statusBar().showMessage("No results to copy yet.", 4000)

    def closeEvent(self, e: QCloseEvent) -> None:
        logging.getLogger("runedrakraft").removeHandler(self._log_handler)
        super().closeEvent(e)
