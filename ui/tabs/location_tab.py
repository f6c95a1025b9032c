"""Location tab panel."""

from PyQt6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QLineEdit, QLabel

from editor import DetailEditor, FocusTarget, LocationEntry, Tab
from editor.state import EditorState


class LocationTab(QWidget):
    """Toggle button for sequential entry plus the location input box."""

    def __init__(self, editor: DetailEditor, parent=None):
        super().__init__(parent)
        self.editor = editor
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)

        row = QHBoxLayout()
        self.btn_location = QPushButton("#Location")
        self.btn_location.setCheckable(True)
        self.btn_location.clicked.connect(lambda: self.editor.handle_mode_toggle(Tab.LOCATION))
        row.addWidget(self.btn_location)

        self.location_input = QLineEdit()
        self.location_input.setPlaceholderText("Type a location and press Enter")
        self.location_input.returnPressed.connect(
            lambda: self.editor.handle_text_confirm(self.location_input.text()))
        self.location_input.textEdited.connect(self.editor.handle_text_edited)
        row.addWidget(self.location_input)
        layout.addLayout(row)

        hint = QLabel("Enter moves to the next blind; click a row to jump to it.")
        hint.setStyleSheet("color: #666; font-size: 10pt; padding: 5px;")
        layout.addWidget(hint)
        layout.addStretch()

    @property
    def focus_targets(self):
        return {FocusTarget.LOCATION_INPUT: self.location_input}

    def refresh(self, state: EditorState):
        session = state.session
        active = isinstance(session.mode, LocationEntry)
        self.btn_location.setChecked(active)
        self.location_input.setEnabled(active)
        if self.location_input.text() != session.pending_text:
            self.location_input.setText(session.pending_text)
