"""Window palette and transcript colors, with the chosen scheme remembered."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from PySide6 import QtCore, QtGui, QtWidgets


class Scheme(Enum):
    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"


@dataclass(frozen=True)
class Colors:
    window: str
    text: str
    base: str
    button: str
    highlight: str
    # transcript
    function: str
    number: str
    constant: str
    result: str
    error: str

    def transcript(self) -> dict[str, str]:
        return {
            "function": self.function,
            "number": self.number,
            "constant": self.constant,
            "result": self.result,
            "error": self.error,
        }


COLORS = {
    Scheme.LIGHT: Colors(
        window="#fafafa",
        text="#1a1a1a",
        base="#ffffff",
        button="#ececec",
        highlight="#0078d4",
        function="#0057b7",
        number="#b71c1c",
        constant="#6a1b9a",
        result="#2e7d32",
        error="#c62828",
    ),
    Scheme.DARK: Colors(
        window="#1e1e1e",
        text="#dcdcdc",
        base="#252526",
        button="#333337",
        highlight="#264f78",
        function="#569cd6",
        number="#ce9178",
        constant="#c586c0",
        result="#6a9955",
        error="#f44747",
    ),
}


def build_palette(colors: Colors) -> QtGui.QPalette:
    roles = {
        QtGui.QPalette.Window: colors.window,
        QtGui.QPalette.Base: colors.base,
        QtGui.QPalette.Button: colors.button,
        QtGui.QPalette.Highlight: colors.highlight,
        QtGui.QPalette.HighlightedText: colors.base,
    }
    for role in (QtGui.QPalette.WindowText, QtGui.QPalette.Text, QtGui.QPalette.ButtonText):
        roles[role] = colors.text
    palette = QtGui.QPalette()
    for role, color in roles.items():
        palette.setColor(role, QtGui.QColor(color))
    return palette


class ThemeManager:
    """Tracks the selected scheme in QSettings and resolves SYSTEM."""

    KEY = "scheme"

    def __init__(self, settings: QtCore.QSettings | None = None):
        self.settings = settings or QtCore.QSettings("LineCalc", "linecalc")
        try:
            self.scheme = Scheme(self.settings.value(self.KEY, Scheme.SYSTEM.value))
        except ValueError:
            self.scheme = Scheme.SYSTEM

    def select(self, scheme: Scheme) -> None:
        self.scheme = scheme
        self.settings.setValue(self.KEY, scheme.value)

    def resolved(self) -> Scheme:
        if self.scheme != Scheme.SYSTEM:
            return self.scheme
        app = QtWidgets.QApplication.instance()
        if app is None:
            return Scheme.LIGHT
        window = app.style().standardPalette().color(QtGui.QPalette.Window)
        return Scheme.DARK if window.lightness() < 128 else Scheme.LIGHT

    def colors(self) -> Colors:
        return COLORS[self.resolved()]

    def apply(self, app: QtWidgets.QApplication) -> None:
        app.setPalette(build_palette(self.colors()))
