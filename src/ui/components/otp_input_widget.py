"""
OTP input widget — N single-character cells backed by one logical value.

Emits value_changed(str) only when every cell is filled and the code changed.
"""
from typing import Callable, List, Optional

from PySide6.QtWidgets import QWidget, QHBoxLayout
from PySide6.QtCore import Signal

from config.settings import settings
from core.otp_controller import OtpController
from ui.components.otp_cell_edit import OtpCellEdit
from utils.logger import logger


class OtpInputWidget(QWidget):
    """
    Segmented one-time-passcode input.

    Passing ``value`` puts the widget in controlled mode: later calls to
    set_value() replace the cells whenever the value changes.
    """

    value_changed = Signal(str)

    def __init__(
        self,
        count: Optional[int] = None,
        default_value: Optional[str] = None,
        value: Optional[str] = None,
        formatter: Optional[Callable[[str], str]] = None,
        size: str = "middle",
        variant: str = "outlined",
        disabled: bool = False,
        status: str = "",
        mask: Optional[bool] = None,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self._size = size
        self._variant = variant
        self._status = status
        self._mask = settings.OTP_MASK if mask is None else mask
        self._external_value = value
        self._cells: List[OtpCellEdit] = []

        self._controller = OtpController(
            count=settings.OTP_DEFAULT_COUNT if count is None else count,
            default_value=default_value,
            value=value,
            on_change=self.value_changed.emit,
            formatter=formatter,
            focus_cell=self._focus_cell,
            strict_formatter=settings.DEBUG,
        )

        self._setup_ui()
        self.set_enabled(not disabled)
        self._refresh_cells()

    def _setup_ui(self):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(6)

        for i in range(self._controller.count):
            cell = OtpCellEdit(i)
            cell.setObjectName(f"otp-{i}")
            cell.apply_appearance(self._size, self._variant, self._status, self._mask)
            cell.cell_changed.connect(self._on_cell_changed)
            cell.back_requested.connect(self._controller.handle_back)
            cell.next_requested.connect(self._controller.handle_next)
            self._cells.append(cell)
            layout.addWidget(cell)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def count(self) -> int:
        return self._controller.count

    def cell(self, index: int) -> OtpCellEdit:
        return self._cells[index]

    def get_value(self) -> str:
        return self._controller.value

    def set_value(self, value: Optional[str]):
        """Controlled update; ignored when the value has not changed."""
        if value == self._external_value:
            return
        self._external_value = value
        self._controller.sync_external_value(value)
        self._refresh_cells()

    def clear(self):
        self._external_value = None
        self._controller.clear()
        self._refresh_cells()
        self.focus()

    def focus(self):
        self._cells[0].setFocus()

    def blur(self):
        self._cells[0].clearFocus()

    def set_enabled(self, enabled: bool):
        for cell in self._cells:
            cell.setEnabled(enabled)

    def set_status(self, status: str):
        self._status = status
        for cell in self._cells:
            cell.apply_appearance(self._size, self._variant, status, self._mask)

    # ------------------------------------------------------------------
    # Slots
    # ------------------------------------------------------------------

    def _on_cell_changed(self, index: int, text: str):
        try:
            self._controller.handle_change(index, text)
        finally:
            self._refresh_cells()

    def _focus_cell(self, index: int):
        if 0 <= index < len(self._cells):
            self._cells[index].setFocus()
        else:
            logger.debug(f"No OTP cell at index {index}")

    def _refresh_cells(self):
        for i, cell in enumerate(self._cells):
            cell.set_cell_value(self._controller.cell_value(i))
