"""
AppWindow — QMainWindow hosting a single OTP input.

Manages:
  - OtpInputWidget (configured from settings)
  - Clear / submit buttons
  - Status bar widget
"""
from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
)
from PySide6.QtCore import Qt

from ui.components.otp_input_widget import OtpInputWidget
from ui.components.status_bar_widget import StatusBarWidget
from core.app_signals import app_signals
from config.settings import settings
from utils.formatters import format_uppercase
from utils.validators import validate_otp_code
from utils.logger import logger


class AppWindow(QMainWindow):
    """Root application window."""

    def __init__(self, count: Optional[int] = None):
        super().__init__()
        self._count = settings.OTP_DEFAULT_COUNT if count is None else count
        self._setup_ui()
        self._wire_signals()

    # ------------------------------------------------------------------
    # UI setup
    # ------------------------------------------------------------------

    def _setup_ui(self):
        self.setWindowTitle(settings.APP_TITLE)
        self.setMinimumSize(settings.MIN_WINDOW_WIDTH, settings.MIN_WINDOW_HEIGHT)
        self.resize(settings.WINDOW_WIDTH, settings.WINDOW_HEIGHT)

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(10)

        instruction = QLabel(f"Enter the {self._count}-character code:")
        instruction.setWordWrap(True)
        layout.addWidget(instruction)

        self._otp_widget = OtpInputWidget(count=self._count, formatter=format_uppercase)
        layout.addWidget(self._otp_widget, alignment=Qt.AlignmentFlag.AlignCenter)

        btn_row = QHBoxLayout()
        self._submit_btn = QPushButton("Submit")
        self._submit_btn.setFixedHeight(34)
        self._submit_btn.setStyleSheet(
            "background-color: #28a745; color: white; border-radius: 4px;"
        )
        self._submit_btn.clicked.connect(self._on_submit_clicked)
        btn_row.addWidget(self._submit_btn)

        self._clear_btn = QPushButton("Clear")
        self._clear_btn.setFixedHeight(34)
        self._clear_btn.clicked.connect(self._on_clear_clicked)
        btn_row.addWidget(self._clear_btn)

        layout.addLayout(btn_row)
        layout.addStretch()
        self.setCentralWidget(central)

        # Status bar
        self._status_bar = StatusBarWidget()
        self.statusBar().addPermanentWidget(self._status_bar, 1)

    def _wire_signals(self):
        self._otp_widget.value_changed.connect(self._on_code_completed)

    @property
    def otp_widget(self) -> OtpInputWidget:
        return self._otp_widget

    @property
    def status_bar_widget(self) -> StatusBarWidget:
        return self._status_bar

    # ------------------------------------------------------------------
    # Slots
    # ------------------------------------------------------------------

    def _on_code_completed(self, code: str):
        logger.info(f"Code entered ({len(code)} chars)")
        app_signals.otp_completed.emit(code)
        self._report(code)

    def _on_submit_clicked(self):
        self._report(self._otp_widget.get_value())

    def _on_clear_clicked(self):
        self._otp_widget.clear()
        self._otp_widget.set_status("")
        app_signals.otp_cleared.emit()
        app_signals.status_message.emit("Code cleared.", "info")

    def _report(self, code: str):
        ok, error = validate_otp_code(code, self._count)
        if ok:
            self._otp_widget.set_status("")
            app_signals.status_message.emit("Code complete.", "success")
        else:
            logger.debug(f"Code rejected: {error}")
            self._otp_widget.set_status("error")
            app_signals.status_message.emit(error, "error")
