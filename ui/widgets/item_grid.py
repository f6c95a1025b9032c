"""Grid of quoted blinds, one row per line item."""

from typing import Sequence

from PyQt6.QtWidgets import QTableWidget, QTableWidgetItem, QHeaderView, QAbstractItemView
from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QColor

from editor.models import LineItem
from editor.state import EditorState

COLUMN_LABELS = {
    'sequence': '#',
    'fabric': 'Fabric',
    'location': 'Location',
    'over': 'Over',
    'oi': 'O/I',
    'lr': 'L/R',
    'dual': 'Dual',
    'chain': 'Chain',
    'winder': 'Winder',
    'motor': 'Motor',
}

COLOR_TARGET_BG = QColor("#FFD54F")  # Amber, cell receiving keyboard input
COLOR_SENTINEL_BG = QColor("#F0F0F0")


def cell_text(item: LineItem, row_index: int, column: str) -> str:
    if column == 'sequence':
        return str(row_index + 1)
    value = getattr(item, column)
    if value is None:
        return ""
    return value.value if hasattr(value, 'value') else str(value)


class ItemGridWidget(QTableWidget):
    """Read-only table; clicks are reported as (row, column key)."""

    cell_activated = pyqtSignal(int, str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._columns: Sequence[str] = ()
        self.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        self.verticalHeader().setVisible(False)
        self.cellClicked.connect(self._on_cell_clicked)

    def refresh(self, items: Sequence[LineItem], state: EditorState):
        columns = state.visible_columns
        if tuple(columns) != tuple(self._columns):
            self._columns = tuple(columns)
            self.setColumnCount(len(columns))
            self.setHorizontalHeaderLabels([COLUMN_LABELS.get(c, c) for c in columns])
            self.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Stretch)

        target = state.session.target_cell
        self.setRowCount(len(items))
        last_row = len(items) - 1
        for row, item in enumerate(items):
            for col, column in enumerate(columns):
                cell = QTableWidgetItem(cell_text(item, row, column))
                cell.setTextAlignment(Qt.AlignmentFlag.AlignCenter)
                if target is not None and target.row_index == row and target.column == column:
                    cell.setBackground(COLOR_TARGET_BG)
                elif row == last_row:
                    cell.setBackground(COLOR_SENTINEL_BG)
                self.setItem(row, col, cell)

    def _on_cell_clicked(self, row: int, col: int):
        if 0 <= col < len(self._columns):
            self.cell_activated.emit(row, self._columns[col])
