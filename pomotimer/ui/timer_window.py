"""Main window: one row per timer plus start/pause and reset.

Layout (top → bottom):
    - Caption naming the timer that may run
    - One row per timer: "−" button, "<name>: <remaining>", "+" button
    - Start / Pause and Reset buttons
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QFrame,
)

from ..timer.engine import TimerEngine
from ..timer.models import Session
from .formatting import format_timer


# ── palette ───────────────────────────────────────────────────────────────

PALETTE: dict[str, str] = {
    "bg":         "#1A1A2E",
    "surface":    "#2A2A4A",
    "accent":     "#CBA6F7",
    "text":       "#E2E2F0",
    "text_muted": "#7A7A9A",
}

STYLESHEET = f"""
QWidget {{
    background-color: {PALETTE["bg"]};
    color: {PALETTE["text"]};
    font-size: 15px;
}}
QFrame#card {{
    background-color: {PALETTE["surface"]};
    border-radius: 12px;
}}
QLabel#activeTimer {{
    color: {PALETTE["text_muted"]};
    font-size: 12px;
    letter-spacing: 2px;
}}
QLabel#timerLabel[running="true"] {{
    color: {PALETTE["accent"]};
    font-weight: bold;
}}
QPushButton {{
    background-color: {PALETTE["surface"]};
    border: 1px solid {PALETTE["text_muted"]};
    border-radius: 6px;
    padding: 6px 14px;
}}
QPushButton:disabled {{
    color: {PALETTE["text_muted"]};
}}
"""


class _TimerRow(QWidget):
    """Label for one timer flanked by its nudge buttons."""

    def __init__(self, engine: TimerEngine, idx: int, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._idx = idx

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        self.decrement_btn = QPushButton("−", self)
        self.decrement_btn.setToolTip("Shorten this timer")
        self.increment_btn = QPushButton("+", self)
        self.increment_btn.setToolTip("Lengthen this timer")
        self.label = QLabel(self)
        self.label.setObjectName("timerLabel")
        self.label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.label.setMinimumWidth(180)

        layout.addWidget(self.decrement_btn)
        layout.addWidget(self.label, 1)
        layout.addWidget(self.increment_btn)

        self.decrement_btn.clicked.connect(lambda: engine.decrement(self._idx))
        self.increment_btn.clicked.connect(lambda: engine.increment(self._idx))

    def refresh(self, session: Session) -> None:
        timer = session.timers[self._idx]
        self.label.setText(format_timer(timer))
        self.label.setProperty("running", timer.active)
        self.label.style().unpolish(self.label)
        self.label.style().polish(self.label)
        # Durations can only change while the timer is stopped.
        self.decrement_btn.setEnabled(not timer.active)
        self.increment_btn.setEnabled(not timer.active)


class TimerWindow(QWidget):
    """Renders the engine's session and forwards button presses to it."""

    def __init__(self, engine: TimerEngine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._engine = engine
        self.setWindowTitle("PomoTimer")
        self.setStyleSheet(STYLESHEET)
        self._build_ui()
        self._connect_signals()
        self._refresh(engine.session)

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(16, 16, 16, 16)

        card = QFrame(self)
        card.setObjectName("card")
        root.addWidget(card)

        layout = QVBoxLayout(card)
        layout.setContentsMargins(24, 20, 24, 20)
        layout.setSpacing(12)

        self._active_label = QLabel(card)
        self._active_label.setObjectName("activeTimer")
        self._active_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._active_label)

        self._rows: list[_TimerRow] = []
        for idx in range(len(self._engine.session.timers)):
            row = _TimerRow(self._engine, idx, card)
            self._rows.append(row)
            layout.addWidget(row)

        btn_row = QHBoxLayout()
        btn_row.setSpacing(12)
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._start_pause_btn = QPushButton("Start", card)
        self._reset_btn = QPushButton("Reset", card)
        btn_row.addWidget(self._start_pause_btn)
        btn_row.addWidget(self._reset_btn)
        layout.addLayout(btn_row)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._start_pause_btn.clicked.connect(self._engine.toggle)
        self._reset_btn.clicked.connect(self._engine.reset)
        self._engine.session_changed.connect(self._refresh)

    # ── slots ─────────────────────────────────────────────────────────────

    def _refresh(self, session: Session) -> None:
        self._active_label.setText(f"NOW: {session.current.name.upper()}")
        self._start_pause_btn.setText("Pause" if session.running else "Start")
        for row in self._rows:
            row.refresh(session)

    # ── accessors ─────────────────────────────────────────────────────────

    @property
    def start_pause_button(self) -> QPushButton:
        return self._start_pause_btn

    @property
    def reset_button(self) -> QPushButton:
        return self._reset_btn

    @property
    def rows(self) -> list[_TimerRow]:
        return list(self._rows)

    def closeEvent(self, event) -> None:  # noqa: N802 - Qt override
        self._engine.shutdown()
        super().closeEvent(event)
