"""
Status bar widget — displays status messages and the last entered code.
"""
from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel
from PySide6.QtCore import Qt, QTimer

from core.app_signals import app_signals
from utils.formatters import format_masked_code


_LEVEL_STYLES = {
    'info':    "color: #333; background: transparent;",
    'success': "color: #1a7a1a; background: transparent;",
    'warning': "color: #856200; background: transparent;",
    'error':   "color: #c0392b; background: transparent;",
}


class StatusBarWidget(QWidget):
    """
    Persistent status strip at the bottom of the window.

    Left side:  status messages (auto-clears after 6 s)
    Right side: last completed code, masked
    """

    _AUTO_CLEAR_MS = 6_000

    def __init__(self, parent=None):
        super().__init__(parent)
        self._setup_ui()
        self._wire_signals()

    def _setup_ui(self):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(6, 2, 6, 2)
        layout.setSpacing(8)

        self._msg_label = QLabel("")
        self._msg_label.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter)
        layout.addWidget(self._msg_label, 1)

        self._code_label = QLabel("Last code: N/A")
        self._code_label.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        self._code_label.setStyleSheet("color: gray; font-size: 11px;")
        layout.addWidget(self._code_label)

        self._clear_timer = QTimer(self)
        self._clear_timer.setSingleShot(True)
        self._clear_timer.timeout.connect(self._clear_message)

    def _wire_signals(self):
        app_signals.status_message.connect(self.show_message)
        app_signals.otp_completed.connect(self._on_otp_completed)
        app_signals.otp_cleared.connect(self._on_otp_cleared)

    # ------------------------------------------------------------------
    # Slots
    # ------------------------------------------------------------------

    def show_message(self, message: str, level: str = 'info'):
        style = _LEVEL_STYLES.get(level, _LEVEL_STYLES['info'])
        self._msg_label.setStyleSheet(style)
        self._msg_label.setText(message)
        self._clear_timer.start(self._AUTO_CLEAR_MS)

    def message(self) -> str:
        return self._msg_label.text()

    def code_text(self) -> str:
        return self._code_label.text()

    def _clear_message(self):
        self._msg_label.setText("")
        self._msg_label.setStyleSheet("")

    def _on_otp_completed(self, code: str):
        self._code_label.setText(f"Last code: {format_masked_code(code)}")

    def _on_otp_cleared(self):
        self._code_label.setText("Last code: N/A")
