"""Syntax highlighting for the calculator transcript."""

from __future__ import annotations

import re
from typing import Iterable

from PySide6 import QtCore, QtGui

NUMBER_PATTERN = r"\b\d+(?:\.\d+)?(?:e[+-]?\d+)?\b"
RESULT_PATTERN = r"^= .*$"
ERROR_PATTERN = r"^(?:parse|execution) error: .*$"


def names_pattern(names: Iterable[str]) -> str | None:
    """Whole-word alternation matching any of ``names`` (None if empty)."""
    words = sorted(set(names), key=len, reverse=True)
    if not words:
        return None
    return r"\b(?:" + "|".join(re.escape(w) for w in words) + r")\b"


class CalcHighlighter(QtGui.QSyntaxHighlighter):
    def __init__(self, parent=None, colors: dict[str, str] | None = None):
        super().__init__(parent)
        self.colors = colors or {
            "function": "#0057b7",
            "number": "#b71c1c",
            "constant": "#6a1b9a",
            "result": "#2e7d32",
            "error": "#c62828",
        }
        self.rules: list[tuple[QtCore.QRegularExpression, QtGui.QTextCharFormat]] = []
        self._functions: list[str] = []
        self._constants: list[str] = []
        self._rebuild()

    def set_names(self, functions: Iterable[str], constants: Iterable[str]) -> None:
        self._functions = list(functions)
        self._constants = list(constants)
        self._rebuild()

    def set_colors(self, colors: dict[str, str]) -> None:
        self.colors = dict(colors)
        self._rebuild()

    def _format(self, key: str, bold: bool = False) -> QtGui.QTextCharFormat:
        fmt = QtGui.QTextCharFormat()
        fmt.setForeground(QtGui.QColor(self.colors[key]))
        if bold:
            fmt.setFontWeight(QtGui.QFont.Bold)
        return fmt

    def _rebuild(self) -> None:
        self.rules = []
        self.rules.append(
            (QtCore.QRegularExpression(NUMBER_PATTERN), self._format("number"))
        )
        fn_pattern = names_pattern(self._functions)
        if fn_pattern:
            self.rules.append(
                (
                    QtCore.QRegularExpression(fn_pattern + r"(?=\s*\()"),
                    self._format("function", bold=True),
                )
            )
        const_pattern = names_pattern(self._constants)
        if const_pattern:
            self.rules.append(
                (QtCore.QRegularExpression(const_pattern), self._format("constant"))
            )
        # Whole-line rules last so they win over token colors.
        self.rules.append(
            (QtCore.QRegularExpression(RESULT_PATTERN), self._format("result"))
        )
        self.rules.append(
            (QtCore.QRegularExpression(ERROR_PATTERN), self._format("error"))
        )
        self.rehighlight()

    def highlightBlock(self, text: str):
        for pattern, fmt in self.rules:
            it = pattern.globalMatch(text)
            while it.hasNext():
                match = it.next()
                self.setFormat(match.capturedStart(), match.capturedLength(), fmt)
