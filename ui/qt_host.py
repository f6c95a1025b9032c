"""Qt implementations of the editor's host capabilities."""

import logging
from typing import Dict

from PyQt6.QtWidgets import QMainWindow, QMessageBox, QLineEdit
from PyQt6.QtCore import QTimer

from editor.host import EditorHost, FocusTarget, NoticeLevel, PendingConfirmation

logger = logging.getLogger(__name__)

STATUS_MESSAGE_MS = 5000


class QtEditorHost(EditorHost):
    """Confirmations via QMessageBox, notices via the status bar, focus via QTimer."""

    def __init__(self, window: QMainWindow):
        self.window = window
        self._focus_targets: Dict[FocusTarget, QLineEdit] = {}

    def register_focus_target(self, target: FocusTarget, widget: QLineEdit):
        self._focus_targets[target] = widget

    def request_confirmation(self, message, on_confirm, on_cancel=None):
        pending = PendingConfirmation(message, on_confirm, on_cancel)
        reply = QMessageBox.question(
            self.window, "Please Confirm", message,
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No
        )
        if reply == QMessageBox.StandardButton.Yes:
            pending.accept()
        else:
            pending.decline()
        return pending

    def notify(self, message, level=NoticeLevel.INFO):
        self.window.statusBar().showMessage(message, STATUS_MESSAGE_MS)
        if level == NoticeLevel.ERROR:
            QMessageBox.warning(self.window, "Invalid Input", message)

    def schedule_focus(self, target, delay_ms, select=True):
        widget = self._focus_targets.get(target)
        if widget is None:
            logger.debug("No widget registered for focus target %s", target.value)
            return

        def apply_focus():
            if not widget.isEnabled():
                return
            widget.setFocus()
            if select:
                widget.selectAll()

        # Runs after the repaint triggered by the current event
        QTimer.singleShot(delay_ms, apply_focus)
