"""Dual/chain tab panel."""

from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QFormLayout, QPushButton, QLineEdit, QLabel, QGroupBox
)

from editor import DetailEditor, DualChainKind, DualChainMode, FocusTarget, Tab, DRIVE_KINDS
from editor.state import EditorState
from ui.widgets.price_display import ReadOnlyDisplay
from ui.tabs.drive_accessories_tab import MODE_LABELS


class DualChainTab(QWidget):
    """Dual/chain buttons, chain length input and the accessories summary."""

    def __init__(self, editor: DetailEditor, parent=None):
        super().__init__(parent)
        self.editor = editor
        self.summary_displays = {}
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)

        row = QHBoxLayout()
        self.btn_dual = QPushButton("Dual")
        self.btn_dual.setCheckable(True)
        self.btn_dual.clicked.connect(lambda: self._on_mode_clicked(DualChainKind.DUAL))
        row.addWidget(self.btn_dual)

        self.btn_chain = QPushButton("Chain")
        self.btn_chain.setCheckable(True)
        self.btn_chain.clicked.connect(lambda: self._on_mode_clicked(DualChainKind.CHAIN))
        row.addWidget(self.btn_chain)

        self.chain_input = QLineEdit()
        self.chain_input.setPlaceholderText("Chain length")
        self.chain_input.setMaximumWidth(120)
        self.chain_input.returnPressed.connect(
            lambda: self.editor.handle_text_confirm(self.chain_input.text()))
        self.chain_input.textEdited.connect(self.editor.handle_text_edited)
        row.addWidget(self.chain_input)

        row.addWidget(QLabel("Dual price:"))
        self.dual_price_display = ReadOnlyDisplay()
        row.addWidget(self.dual_price_display)
        row.addStretch()
        layout.addLayout(row)

        group = QGroupBox("Accessories Summary")
        form = QFormLayout(group)
        for kind in DRIVE_KINDS:
            display = ReadOnlyDisplay()
            form.addRow(MODE_LABELS[kind], display)
            self.summary_displays[kind] = display
        self.accessories_total_display = ReadOnlyDisplay()
        form.addRow("Accessories Total", self.accessories_total_display)
        layout.addWidget(group)
        layout.addStretch()

    def _on_mode_clicked(self, kind: DualChainKind):
        self.editor.handle_mode_toggle(Tab.DUAL_CHAIN, kind)
        # A refused exit dispatches nothing, so the checked state needs restoring here
        self.refresh(self.editor.state)

    @property
    def focus_targets(self):
        return {FocusTarget.CHAIN_INPUT: self.chain_input}

    def refresh(self, state: EditorState):
        session = state.session
        mode = session.mode
        active_kind = mode.kind if isinstance(mode, DualChainMode) else None

        self.btn_dual.setChecked(active_kind == DualChainKind.DUAL)
        self.btn_chain.setChecked(active_kind == DualChainKind.CHAIN)

        chain_live = active_kind == DualChainKind.CHAIN and session.target_cell is not None
        self.chain_input.setEnabled(chain_live)
        if self.chain_input.text() != session.pending_text:
            self.chain_input.setText(session.pending_text)

        self.dual_price_display.set_price(state.dual.price)
        for kind, display in self.summary_displays.items():
            display.set_price(state.summary_prices.get(kind, 0.0))
        self.accessories_total_display.set_price(state.accessories_total)
