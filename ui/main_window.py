"""Main application window."""

import logging

from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QTabWidget, QStatusBar, QMessageBox, QSplitter
)
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction

from config import APP_NAME, APP_VERSION, DEFAULT_ROW_COUNT
from editor import DetailEditor, PricingService, QuoteItemStore, Tab
from editor.pricing import DatabasePriceSource, PriceSource
from .qt_host import QtEditorHost
from .tabs import LocationTab, FabricTab, OptionsTab, DriveAccessoriesTab, DualChainTab
from .widgets.item_grid import ItemGridWidget

logger = logging.getLogger(__name__)

TAB_ORDER = (
    (Tab.LOCATION, "Location"),
    (Tab.FABRIC, "Fabric"),
    (Tab.OPTIONS, "Options"),
    (Tab.DRIVE_ACCESSORIES, "Drive / Acc."),
    (Tab.DUAL_CHAIN, "Dual / Chain"),
)


class MainWindow(QMainWindow):
    """Detail editor window: tab panels on the left, item grid on the right."""

    def __init__(self, items: QuoteItemStore = None, price_source: PriceSource = None):
        super().__init__()
        self.setWindowTitle(f"{APP_NAME} v{APP_VERSION}")
        self.setMinimumSize(1200, 700)

        self.items = items if items is not None else QuoteItemStore(row_count=DEFAULT_ROW_COUNT)
        self.host = QtEditorHost(self)
        pricing = PricingService(price_source if price_source is not None else DatabasePriceSource())
        self.editor = DetailEditor(self.items, pricing, self.host)

        # Setup UI
        self._setup_statusbar()
        self._setup_ui()
        self._setup_menubar()

        self.editor.store.subscribe(lambda state: self._refresh())
        self.items.subscribe(self._refresh)
        self._refresh()

    def _setup_ui(self):
        """Setup the main UI layout."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        layout = QVBoxLayout(central_widget)
        layout.setContentsMargins(5, 5, 5, 5)

        splitter = QSplitter(Qt.Orientation.Horizontal)
        layout.addWidget(splitter)

        self.tab_widget = QTabWidget()
        self.panels = {
            Tab.LOCATION: LocationTab(self.editor),
            Tab.FABRIC: FabricTab(self.editor),
            Tab.OPTIONS: OptionsTab(self.editor),
            Tab.DRIVE_ACCESSORIES: DriveAccessoriesTab(self.editor),
            Tab.DUAL_CHAIN: DualChainTab(self.editor),
        }
        for tab, label in TAB_ORDER:
            self.tab_widget.addTab(self.panels[tab], label)
        self.tab_widget.currentChanged.connect(self._on_tab_changed)
        splitter.addWidget(self.tab_widget)

        for panel in (self.panels[Tab.LOCATION], self.panels[Tab.DUAL_CHAIN]):
            for target, widget in panel.focus_targets.items():
                self.host.register_focus_target(target, widget)

        self.grid = ItemGridWidget()
        self.grid.cell_activated.connect(self.editor.handle_cell_click)
        splitter.addWidget(self.grid)
        splitter.setSizes([450, 750])

    def _setup_menubar(self):
        """Setup the menu bar."""
        menubar = self.menuBar()

        file_menu = menubar.addMenu("&File")
        exit_action = QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        help_menu = menubar.addMenu("&Help")
        about_action = QAction("&About", self)
        about_action.triggered.connect(self._show_about)
        help_menu.addAction(about_action)

    def _setup_statusbar(self):
        """Setup the status bar."""
        self.statusbar = QStatusBar()
        self.setStatusBar(self.statusbar)
        self.statusbar.showMessage("Ready")

    def _on_tab_changed(self, index: int):
        tab = TAB_ORDER[index][0]
        if tab == self.editor.session.active_tab:
            return
        logger.debug("Tab bar switched to %s", tab.value)
        self.editor.activate_tab(tab)

    def _sync_tab_bar(self):
        active_index = [tab for tab, _ in TAB_ORDER].index(self.editor.session.active_tab)
        if self.tab_widget.currentIndex() != active_index:
            self.tab_widget.blockSignals(True)
            self.tab_widget.setCurrentIndex(active_index)
            self.tab_widget.blockSignals(False)

    def _refresh(self):
        """Re-render everything from the editor state."""
        state = self.editor.state
        self._sync_tab_bar()
        self.grid.refresh(self.items.get_items(), state)
        self.panels[state.session.active_tab].refresh(state)

    def _show_about(self):
        """Show about dialog."""
        QMessageBox.about(
            self, f"About {APP_NAME}",
            f"<h3>{APP_NAME}</h3>"
            f"<p>Version {APP_VERSION}</p>"
            "<p>Product detail editor for roller blind quotes</p>"
            "<ul>"
            "<li>Sequential location entry</li>"
            "<li>HD winder, motor and accessory pricing</li>"
            "<li>Dual bracket pairing and chain lengths</li>"
            "</ul>"
        )
