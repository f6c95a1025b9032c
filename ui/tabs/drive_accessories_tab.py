"""Drive/accessories tab panel."""

from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QGridLayout, QPushButton, QLabel, QGroupBox
)

from editor import AccessoryKind, CounterDirection, DetailEditor, DriveMode, Tab, COUNTER_KINDS, DRIVE_KINDS
from editor.state import EditorState
from ui.widgets.price_display import ReadOnlyDisplay

MODE_LABELS = {
    AccessoryKind.WINDER: "HD Winder",
    AccessoryKind.MOTOR: "Motor",
    AccessoryKind.REMOTE: "Remote",
    AccessoryKind.CHARGER: "Charger",
    AccessoryKind.CORD: "3M Cord",
}


class DriveAccessoriesTab(QWidget):
    """Sub-mode buttons, accessory counters and the price breakdown."""

    def __init__(self, editor: DetailEditor, parent=None):
        super().__init__(parent)
        self.editor = editor
        self.mode_buttons = {}
        self.count_displays = {}
        self.add_buttons = {}
        self.subtract_buttons = {}
        self.price_displays = {}
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)

        group = QGroupBox("Drive / Accessories")
        grid = QGridLayout(group)
        grid.addWidget(QLabel("Mode"), 0, 0)
        grid.addWidget(QLabel("Quantity"), 0, 1, 1, 3)
        grid.addWidget(QLabel("Price"), 0, 4)

        for row, kind in enumerate(DRIVE_KINDS, start=1):
            btn = QPushButton(MODE_LABELS[kind])
            btn.setCheckable(True)
            btn.clicked.connect(
                lambda checked=False, k=kind: self.editor.handle_mode_toggle(Tab.DRIVE_ACCESSORIES, k))
            grid.addWidget(btn, row, 0)
            self.mode_buttons[kind] = btn

            if kind in COUNTER_KINDS:
                minus = QPushButton("-")
                minus.setMinimumWidth(30)
                minus.clicked.connect(
                    lambda checked=False, k=kind: self.editor.handle_counter_change(k, CounterDirection.SUBTRACT))
                plus = QPushButton("+")
                plus.setMinimumWidth(30)
                plus.clicked.connect(
                    lambda checked=False, k=kind: self.editor.handle_counter_change(k, CounterDirection.ADD))
                count = ReadOnlyDisplay(width=50)
                grid.addWidget(minus, row, 1)
                grid.addWidget(count, row, 2)
                grid.addWidget(plus, row, 3)
                self.subtract_buttons[kind] = minus
                self.add_buttons[kind] = plus
                self.count_displays[kind] = count

            price = ReadOnlyDisplay()
            grid.addWidget(price, row, 4)
            self.price_displays[kind] = price

        total_row = len(DRIVE_KINDS) + 1
        grid.addWidget(QLabel("Total"), total_row, 0)
        self.total_display = ReadOnlyDisplay()
        grid.addWidget(self.total_display, total_row, 4)

        layout.addWidget(group)

        hint = QLabel("Prices are updated when you leave a mode.")
        hint.setStyleSheet("color: #666; font-size: 10pt; padding: 5px;")
        layout.addWidget(hint)
        layout.addStretch()

    def refresh(self, state: EditorState):
        mode = state.session.mode
        active_kind = mode.kind if isinstance(mode, DriveMode) else None

        for kind, btn in self.mode_buttons.items():
            btn.setChecked(kind == active_kind)

        for kind in COUNTER_KINDS:
            own_mode = kind == active_kind
            self.add_buttons[kind].setEnabled(own_mode)
            self.subtract_buttons[kind].setEnabled(own_mode)
            self.count_displays[kind].set_count(state.counter(kind))

        summary = state.drive_summary
        for kind, display in self.price_displays.items():
            display.set_price(summary.price(kind))
        self.total_display.set_price(summary.grand_total)
