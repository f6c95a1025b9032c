"""Read-only boxes for prices and counters."""

from PyQt6.QtWidgets import QLineEdit
from PyQt6.QtCore import Qt


def format_price(price: float) -> str:
    """Blank for zero, otherwise dollars with cents."""
    return f"${price:,.2f}" if price else ""


class ReadOnlyDisplay(QLineEdit):
    """Right-aligned, non-editable value box."""

    def __init__(self, parent=None, width: int = 110):
        super().__init__(parent)
        self.setReadOnly(True)
        self.setAlignment(Qt.AlignmentFlag.AlignRight)
        self.setMaximumWidth(width)
        self.setFocusPolicy(Qt.FocusPolicy.NoFocus)

    def set_price(self, price: float):
        self.setText(format_price(price))

    def set_count(self, count: int):
        self.setText(str(count or 0))
