"""Fabric and options tab panels."""

from PyQt6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QLabel

from editor import DetailEditor, OptionsEdit, Tab
from editor.state import EditorState

OPTION_BUTTONS = (('over', 'Over'), ('oi', 'O/I'), ('lr', 'L/R'))


class FabricTab(QWidget):
    """Fabric columns only; fabric editing lives outside this editor."""

    def __init__(self, editor: DetailEditor, parent=None):
        super().__init__(parent)
        self.editor = editor
        layout = QVBoxLayout(self)
        label = QLabel("Fabric and location columns are shown in the grid.")
        label.setStyleSheet("color: #666; font-size: 10pt; padding: 5px;")
        layout.addWidget(label)
        layout.addStretch()

    def refresh(self, state: EditorState):
        pass


class OptionsTab(QWidget):
    """Edit toggle; while on, clicking an option cell cycles its value."""

    def __init__(self, editor: DetailEditor, parent=None):
        super().__init__(parent)
        self.editor = editor
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)

        self.btn_edit = QPushButton("Edit Options")
        self.btn_edit.setCheckable(True)
        self.btn_edit.clicked.connect(lambda: self.editor.handle_mode_toggle(Tab.OPTIONS))
        layout.addWidget(self.btn_edit)

        batch_row = QHBoxLayout()
        batch_row.addWidget(QLabel("Set all:"))
        self.batch_buttons = {}
        for column, label in OPTION_BUTTONS:
            btn = QPushButton(label)
            btn.clicked.connect(lambda checked=False, c=column: self.editor.handle_batch_cycle(c))
            batch_row.addWidget(btn)
            self.batch_buttons[column] = btn
        batch_row.addStretch()
        layout.addLayout(batch_row)
        layout.addStretch()

    def refresh(self, state: EditorState):
        active = isinstance(state.session.mode, OptionsEdit)
        self.btn_edit.setChecked(active)
        for btn in self.batch_buttons.values():
            btn.setEnabled(active)
