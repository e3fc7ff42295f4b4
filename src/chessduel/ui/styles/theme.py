"""Visual theme constants and QSS styles for chessduel."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor

from chessduel.game.render import Shade


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_from: QColor  # selected move origin
    highlight_cursor: QColor  # keyboard cursor
    piece: QColor  # glyph colour

    def background(self, shade: Shade) -> QColor:
        """Fill colour for a rendered square."""
        return {
            Shade.SELECTED: self.highlight_from,
            Shade.CURSOR: self.highlight_cursor,
            Shade.LIGHT: self.light_square,
            Shade.DARK: self.dark_square,
        }[shade]

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_from=QColor(205, 170, 0),  # dark yellow
            highlight_cursor=QColor(255, 240, 120),  # light yellow
            piece=QColor(0, 0, 0),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            highlight_from=QColor(205, 170, 0),
            highlight_cursor=QColor(255, 240, 120),
            piece=QColor(0, 0, 0),
        )

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(
            light_square=QColor(236, 238, 220),
            dark_square=QColor(112, 149, 120),
            highlight_from=QColor(205, 170, 0),
            highlight_cursor=QColor(255, 240, 120),
            piece=QColor(0, 0, 0),
        )

    @classmethod
    def by_name(cls, name: str) -> BoardTheme:
        themes = {
            "Classic": cls.default,
            "Blue": cls.blue,
            "Green": cls.green,
        }
        factory = themes.get(name)
        if factory is None:
            raise ValueError(f"Unknown board theme: {name!r}")
        return factory()


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
}

QPushButton {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #505050;
}
QPushButton:pressed {
    background: #264f78;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}
"""
