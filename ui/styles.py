"""Qt stylesheets for the detail editor."""

# Main application stylesheet
MAIN_STYLE = """
QMainWindow {
    background-color: #f5f5f5;
}

QTabWidget::pane {
    border: 1px solid #c0c0c0;
    background-color: white;
}

QTabBar::tab {
    background-color: #e0e0e0;
    padding: 8px 16px;
    margin-right: 2px;
    border: 1px solid #c0c0c0;
    border-bottom: none;
    border-top-left-radius: 4px;
    border-top-right-radius: 4px;
}

QTabBar::tab:selected {
    background-color: white;
    border-bottom: 1px solid white;
}

QPushButton {
    background-color: #4472C4;
    color: white;
    border: none;
    padding: 6px 16px;
    border-radius: 4px;
    min-width: 60px;
}

QPushButton:hover {
    background-color: #3461b3;
}

/* Mode buttons stay highlighted while their mode is live */
QPushButton:checked {
    background-color: #FFC000;
    color: black;
    font-weight: bold;
}

QPushButton:disabled {
    background-color: #a0a0a0;
}

QTableWidget {
    background-color: white;
    gridline-color: #e0e0e0;
}

QHeaderView::section {
    background-color: #4472C4;
    color: white;
    padding: 6px;
    border: none;
    font-weight: bold;
}

QLineEdit {
    padding: 6px;
    border: 1px solid #c0c0c0;
    border-radius: 4px;
    background-color: white;
}

QLineEdit:focus {
    border: 2px solid #4472C4;
}

QLineEdit:disabled {
    background-color: #eeeeee;
    color: #808080;
}

QLineEdit[readOnly="true"] {
    background-color: #f7f7f7;
}

QGroupBox {
    font-weight: bold;
    border: 1px solid #c0c0c0;
    border-radius: 4px;
    margin-top: 12px;
    padding-top: 8px;
}

QStatusBar {
    background-color: #4472C4;
    color: white;
}

QMessageBox {
    background-color: white;
}

QMessageBox QPushButton {
    min-width: 80px;
}
"""
