# ui/main_window.py
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QLabel, QProgressBar
)
from PySide6.QtCore import Qt

from services.session import TrainerSession
from ui.widgets import RomajiLine


class MainWindow(QMainWindow):
    def __init__(self, session: TrainerSession):
        super().__init__()
        self.session = session
        self.setWindowTitle("Type Wiz")
        self.resize(1000, 480)

        root = QWidget(self)
        root_v = QVBoxLayout(root)
        root_v.setContentsMargins(24, 24, 24, 24)
        root_v.setSpacing(18)

        # level / xp gauge
        self.gauge = QProgressBar(root)
        self.gauge.setRange(0, 1000)
        self.gauge.setTextVisible(True)
        self.gauge.setFocusPolicy(Qt.NoFocus)
        root_v.addWidget(self.gauge)

        # last round result, two lines
        self.lblResult = QLabel("", root)
        self.lblResult.setObjectName("lblResult")
        self.lblResult.setAlignment(Qt.AlignCenter)
        self.lblResult.setStyleSheet("color: #eab308;")
        root_v.addWidget(self.lblResult)

        self.lblDisplay = QLabel("", root)
        self.lblDisplay.setAlignment(Qt.AlignCenter)
        self.lblDisplay.setStyleSheet("font-size: 34px; font-weight: bold;")
        root_v.addWidget(self.lblDisplay)

        self.lblKana = QLabel("", root)
        self.lblKana.setAlignment(Qt.AlignCenter)
        self.lblKana.setStyleSheet("font-size: 20px; color: #9aa1a9;")
        root_v.addWidget(self.lblKana)

        self.romaji = RomajiLine(root)
        root_v.addWidget(self.romaji, 1)

        self.setCentralWidget(root)
        self.setStyleSheet("QWidget { background: #0f1115; color: #e5e7eb; }")
        self.setFocusPolicy(Qt.StrongFocus)
        self.refresh()

    def refresh(self):
        ledger = self.session.ledger
        req = ledger.required_xp()
        self.gauge.setValue(int(ledger.xp_ratio() * 1000))
        self.gauge.setFormat(f"Lv.{ledger.level} ({ledger.current_xp} / {req})")

        r = self.session.last_result
        if r is not None:
            lines = [
                f"CPS: {r.cps:.2f} / Time: {r.elapsed:.2f}s",
                f"Score: {r.score:.0f} / Miss: {r.misses}",
            ]
            if self.session.last_leveled_up:
                lines.append("Level up!")
            self.lblResult.setText("\n".join(lines))

        phrase = self.session.current_phrase
        self.lblDisplay.setText(phrase.display)
        self.lblKana.setText(phrase.kana)
        self.romaji.set_view(self.session.engine.view())

    def keyPressEvent(self, ev):
        key = ev.key()
        if key == Qt.Key_Escape:
            self.session.abandon_round()
            self.close()
            return
        if key == Qt.Key_Backspace:
            self.session.backspace()
            self.refresh()
            return
        if ev.modifiers() & (Qt.ControlModifier | Qt.AltModifier | Qt.MetaModifier):
            return super().keyPressEvent(ev)
        t = ev.text()
        if len(t) == 1 and t.isascii() and t.isprintable() and t != " ":
            self.session.type_char(t.lower())
            self.refresh()
            return
        super().keyPressEvent(ev)
