"""
OTP cell — one single-character field that reports edits and navigation keys.
"""
from typing import Optional

from PySide6.QtWidgets import QWidget, QLineEdit
from PySide6.QtCore import Signal, Qt, QTimer
from PySide6.QtGui import QFont

from config.settings import settings
from utils.validators import sanitize_cell_text


_VARIANT_STYLES = {
    'outlined':   "border: 2px solid {border}; border-radius: 4px; background: #fafafa;",
    'filled':     "border: 2px solid transparent; border-radius: 4px; background: #ececec;",
    'borderless': "border: none; background: transparent;",
}

_STATUS_BORDERS = {
    '':        "#aaa",
    'error':   "#c0392b",
    'warning': "#856200",
}


class OtpCellEdit(QLineEdit):
    """
    Single OTP cell.

    The cell never edits the shared value itself: it reports the full text
    it now holds and lets the owning widget push the reconciled value back.
    """

    cell_changed = Signal(int, str)    # index, raw text
    back_requested = Signal(int)       # index
    next_requested = Signal(int)       # index

    def __init__(self, index: int, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._index = index
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.textEdited.connect(self._on_text_edited)

    @property
    def index(self) -> int:
        return self._index

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def set_cell_value(self, value: str):
        """Show value without reporting it as a user edit."""
        if self.text() != value:
            self.setText(value)
        if self.hasFocus():
            self.selectAll()

    def apply_appearance(self, size: str, variant: str, status: str, mask: bool):
        width, height, point_size = settings.get_cell_geometry(size)
        font = QFont()
        font.setPointSize(point_size)
        font.setBold(True)
        self.setFont(font)
        self.setFixedSize(width, height)

        self.setEchoMode(QLineEdit.EchoMode.Password if mask else QLineEdit.EchoMode.Normal)

        border = _STATUS_BORDERS.get(status, _STATUS_BORDERS[''])
        style = _VARIANT_STYLES.get(variant, _VARIANT_STYLES['outlined'])
        self.setStyleSheet(style.format(border=border))

        # Kept as dynamic properties for external stylesheets
        self.setProperty("otpSize", size)
        self.setProperty("otpVariant", variant)
        self.setProperty("otpStatus", status)

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def _on_text_edited(self, text: str):
        self.cell_changed.emit(self._index, sanitize_cell_text(text))

    def keyPressEvent(self, event):
        key = event.key()
        if key == Qt.Key.Key_Left:
            self.back_requested.emit(self._index)
            return
        if key == Qt.Key.Key_Right:
            self.next_requested.emit(self._index)
            return
        if key == Qt.Key.Key_Backspace and not self.text():
            self.back_requested.emit(self._index)
            return
        super().keyPressEvent(event)

    def focusInEvent(self, event):
        super().focusInEvent(event)
        # Deferred so the click that focused the cell does not drop the selection
        QTimer.singleShot(0, self.selectAll)
