"""
OTP controller — dispatches cell events through reconcile, commit and focus.

State machine per event:
  cell_changed(index, text) → reconcile → focus on_edit target → commit (maybe emit)
  back_requested(index)     → focus on_backward target (ignored when out of range)
  next_requested(index)     → focus on_forward target (ignored when out of range)
"""
from typing import Callable, List, Optional

from core.edit_reconciler import Formatter, reconcile
from core.focus_router import FocusRouter
from state.value_store import ValueStore
from utils.logger import logger


class OtpController:
    """
    Owns the value store and focus router for one OTP input.

    Has no Qt dependency: the widget passes a focus_cell hook and
    re-reads cell values after each event.
    """

    def __init__(
        self,
        count: int = 6,
        default_value: Optional[str] = None,
        value: Optional[str] = None,
        on_change: Optional[Callable[[str], None]] = None,
        formatter: Optional[Formatter] = None,
        focus_cell: Optional[Callable[[int], None]] = None,
        strict_formatter: bool = False,
    ):
        if count < 1:
            raise ValueError(f"OTP cell count must be positive, got {count}")

        self._formatter = formatter
        self._focus_cell = focus_cell
        self._strict_formatter = strict_formatter
        self._router = FocusRouter(count)
        self._store = ValueStore(count, on_change=on_change, default_value=default_value)
        self._store.sync_external_value(value)

    # ------------------------------------------------------------------
    # Cell events
    # ------------------------------------------------------------------

    def handle_change(self, index: int, text: str) -> Optional[int]:
        """
        Apply the text a cell now holds.

        Returns:
            Index that received focus, or None if focus stayed put
        """
        next_cells = reconcile(
            self._store.cells,
            index,
            text,
            self._store.count,
            formatter=self._formatter,
            strict=self._strict_formatter,
        )
        logger.debug(f"Cell {index} edited: {len(text)} char(s) in, {len(next_cells)} cells filled")

        target = self._router.on_edit(index, len(text))
        if target != index:
            self._apply_focus(target)

        self._store.commit(next_cells)
        return target if target != index else None

    def handle_back(self, index: int) -> Optional[int]:
        return self._navigate(self._router.on_backward(index))

    def handle_next(self, index: int) -> Optional[int]:
        return self._navigate(self._router.on_forward(index))

    def _navigate(self, target: int) -> Optional[int]:
        if not self._router.is_valid_target(target):
            logger.debug(f"Ignoring navigation to cell {target}")
            return None
        self._apply_focus(target)
        return target

    def _apply_focus(self, index: int) -> None:
        if self._focus_cell is not None:
            self._focus_cell(index)

    # ------------------------------------------------------------------
    # Value access
    # ------------------------------------------------------------------

    def sync_external_value(self, value: Optional[str]) -> List[str]:
        return self._store.sync_external_value(value)

    def clear(self) -> None:
        self._store.reset()

    def cell_value(self, index: int) -> str:
        cells = self._store.cells
        if 0 <= index < len(cells):
            return cells[index]
        return ""

    @property
    def count(self) -> int:
        return self._store.count

    @property
    def cells(self) -> List[str]:
        return self._store.cells

    @property
    def value(self) -> str:
        return self._store.value

    def is_complete(self) -> bool:
        return self._store.is_complete()
