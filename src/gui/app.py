"""PySide6 window for the line calculator."""

from __future__ import annotations

import sys

from PySide6 import QtCore, QtGui, QtWidgets

from linecalc.prelude import default_environment
from linecalc.repl import PROMPT, describe, evaluate_text, format_value

from .completions import CompletionProvider
from .highlighter import CalcHighlighter
from .theme import Scheme, ThemeManager


class StatementInput(QtWidgets.QLineEdit):
    """Input line that completes names on Tab and walks history with Up/Down."""

    def __init__(self, provider: CompletionProvider, parent=None):
        super().__init__(parent)
        self.provider = provider
        self.history: list[str] = []
        self._history_pos = 0

    def remember(self, text: str) -> None:
        if text and (not self.history or self.history[-1] != text):
            self.history.append(text)
        self._history_pos = len(self.history)

    def event(self, e: QtCore.QEvent) -> bool:
        # Tab never reaches keyPressEvent; focus traversal eats it first.
        if e.type() == QtCore.QEvent.KeyPress and e.key() == QtCore.Qt.Key_Tab:
            text, cursor = self.provider.complete(self.text(), self.cursorPosition())
            self.setText(text)
            self.setCursorPosition(cursor)
            return True
        return super().event(e)

    def keyPressEvent(self, e: QtGui.QKeyEvent):
        if e.key() == QtCore.Qt.Key_Up and self.history:
            self._history_pos = max(0, self._history_pos - 1)
            self.setText(self.history[self._history_pos])
            return
        if e.key() == QtCore.Qt.Key_Down and self.history:
            self._history_pos = min(len(self.history), self._history_pos + 1)
            if self._history_pos == len(self.history):
                self.clear()
            else:
                self.setText(self.history[self._history_pos])
            return
        super().keyPressEvent(e)


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("linecalc")
        self.env = default_environment()
        self.provider = CompletionProvider(self.env)
        self.theme_manager = ThemeManager()
        self.theme_manager.apply(QtWidgets.QApplication.instance())
        self._base_font_size = None
        self._build_ui()
        self._setup_menu()
        self._refresh_names()

    def _build_ui(self):
        mono_font = QtGui.QFont("Consolas", 13)
        mono_font.setStyleHint(QtGui.QFont.Monospace)
        self._base_font_size = mono_font.pointSize()

        self.transcript = QtWidgets.QPlainTextEdit()
        self.transcript.setReadOnly(True)
        self.transcript.setPlaceholderText("Results appear here…")
        self.transcript.setFont(mono_font)
        self.highlighter = CalcHighlighter(
            self.transcript.document(), self.theme_manager.colors().transcript()
        )
        self.highlighter.set_names(self.env.functions, self.env.constants)

        self.input = StatementInput(self.provider)
        self.input.setFont(mono_font)
        self.input.setPlaceholderText("Statement, e.g. sqrt(2)*pi > r")
        self.input.returnPressed.connect(self.evaluate_input)

        eval_btn = QtWidgets.QPushButton("Evaluate")
        eval_btn.clicked.connect(self.evaluate_input)

        input_row = QtWidgets.QHBoxLayout()
        input_row.addWidget(QtWidgets.QLabel(PROMPT.strip()))
        input_row.addWidget(self.input, 1)
        input_row.addWidget(eval_btn)

        self.names_table = QtWidgets.QTableWidget(0, 3)
        self.names_table.setHorizontalHeaderLabels(["Name", "Kind", "Value"])
        self.names_table.verticalHeader().setVisible(False)
        self.names_table.setEditTriggers(QtWidgets.QAbstractItemView.NoEditTriggers)
        self.names_table.horizontalHeader().setStretchLastSection(True)

        clear_btn = QtWidgets.QPushButton("Clear Transcript")
        clear_btn.clicked.connect(self.transcript.clear)
        reset_btn = QtWidgets.QPushButton("Reset Variables")
        reset_btn.clicked.connect(self.reset_variables)

        buttons = QtWidgets.QHBoxLayout()
        buttons.addWidget(clear_btn)
        buttons.addWidget(reset_btn)
        buttons.addStretch(1)

        left = QtWidgets.QWidget()
        left_layout = QtWidgets.QVBoxLayout(left)
        left_layout.setContentsMargins(0, 0, 0, 0)
        left_layout.addWidget(self.transcript, 1)
        left_layout.addLayout(input_row)

        splitter = QtWidgets.QSplitter()
        splitter.setOrientation(QtCore.Qt.Horizontal)
        splitter.addWidget(left)
        splitter.addWidget(self.names_table)
        splitter.setSizes([3, 1])

        central = QtWidgets.QWidget()
        layout = QtWidgets.QVBoxLayout(central)
        layout.addLayout(buttons)
        layout.addWidget(splitter)
        self.setCentralWidget(central)
        self.input.setFocus()

    def _setup_menu(self):
        menubar = self.menuBar()
        view_menu = menubar.addMenu("View")

        inc_font = QtGui.QAction("Increase Font", self)
        inc_font.triggered.connect(lambda: self._adjust_font(1))
        dec_font = QtGui.QAction("Decrease Font", self)
        dec_font.triggered.connect(lambda: self._adjust_font(-1))
        reset_font = QtGui.QAction("Reset Font", self)
        reset_font.triggered.connect(self._reset_font)
        view_menu.addAction(inc_font)
        view_menu.addAction(dec_font)
        view_menu.addAction(reset_font)
        view_menu.addSeparator()

        theme_menu = view_menu.addMenu("Theme")
        group = QtGui.QActionGroup(self)
        for mode in Scheme:
            action = QtGui.QAction(mode.value.title(), self, checkable=True)
            action.setChecked(mode == self.theme_manager.scheme)
            action.triggered.connect(lambda checked, m=mode: self._set_theme(m))
            group.addAction(action)
            theme_menu.addAction(action)

    # --- evaluation ---
    def evaluate_input(self):
        text = self.input.text()
        if not text.strip():
            return
        self.input.remember(text)
        self.input.clear()
        self.transcript.appendPlainText(PROMPT + text)
        for result in evaluate_text(text, self.env):
            self.transcript.appendPlainText(describe(result))
        self._refresh_names()

    def reset_variables(self):
        self.env.clear_variables()
        self.transcript.appendPlainText("# variables cleared")
        self._refresh_names()

    def _refresh_names(self):
        rows = [(name, "constant", v) for name, v in sorted(self.env.constants.items())]
        rows += [(name, "variable", v) for name, v in sorted(self.env.variables.items())]
        self.names_table.setRowCount(len(rows))
        for i, (name, kind, value) in enumerate(rows):
            self.names_table.setItem(i, 0, QtWidgets.QTableWidgetItem(name))
            self.names_table.setItem(i, 1, QtWidgets.QTableWidgetItem(kind))
            self.names_table.setItem(
                i, 2, QtWidgets.QTableWidgetItem(format_value(value, 15))
            )

    # --- view helpers ---
    def _set_theme(self, mode: Scheme):
        self.theme_manager.select(mode)
        self.theme_manager.apply(QtWidgets.QApplication.instance())
        self.highlighter.set_colors(self.theme_manager.colors().transcript())

    def _adjust_font(self, delta: int):
        font = self.transcript.font()
        size = font.pointSize() or self._base_font_size or 10
        font.setPointSize(max(6, size + delta))
        self.transcript.setFont(font)
        self.input.setFont(font)

    def _reset_font(self):
        if not self._base_font_size:
            return
        font = self.transcript.font()
        font.setPointSize(self._base_font_size)
        self.transcript.setFont(font)
        self.input.setFont(font)


def main():
    app = QtWidgets.QApplication(sys.argv)
    window = MainWindow()
    window.resize(820, 560)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
