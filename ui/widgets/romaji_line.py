# ui/widgets/romaji_line.py
from __future__ import annotations
from html import escape

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel

from services.typing_engine import Placement, RoundView


class RomajiLine(QLabel):
    """Renders a RoundView: typed part green, cursor highlighted, rest gray."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("lblRomaji")
        self.setTextFormat(Qt.RichText)
        self.setAlignment(Qt.AlignCenter)
        self.setStyleSheet("font-size: 30px; font-family: monospace;")
        self._colors = {
            "ok": "#22c55e",
            "mut": "#9aa1a9",
            "pending": "#4b5563",
            "caret_fg": "#111111",
            "caret_bg": "#e5e7eb",
            "err_fg": "#ffffff",
            "err_bg": "#ef4444",
        }

    def set_view(self, view: RoundView):
        c = self._colors
        parts: list[str] = []

        def span(txt: str, color: str, bg: str | None = None):
            style = f"color:{color}"
            if bg:
                style += f"; background:{bg}"
            return f'<span style="{style}">{escape(txt)}</span>'

        for u in view.units:
            if u.placement is Placement.TYPED:
                parts.append(span(u.romaji, c["ok"]))
            elif u.placement is Placement.CURRENT:
                typed, rest = u.romaji[:u.typed], u.romaji[u.typed:]
                if typed:
                    parts.append(span(typed, c["ok"]))
                if rest:
                    if view.is_error:
                        parts.append(span(rest[0], c["err_fg"], c["err_bg"]))
                    else:
                        parts.append(span(rest[0], c["caret_fg"], c["caret_bg"]))
                    if len(rest) > 1:
                        parts.append(span(rest[1:], c["mut"]))
            else:
                parts.append(span(u.romaji, c["pending"]))

        self.setText("".join(parts))
