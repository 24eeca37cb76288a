"""
OTP value state — the authoritative per-cell character list.

Only the OTP controller writes here; all access happens on the GUI thread.
"""
from typing import Callable, List, Optional

from core.edit_reconciler import split_cells
from utils.logger import logger


class ValueStore:
    """
    Per-cell value state for one OTP input.

    The change callback fires only when every cell is filled and the
    commit actually changed something, not on every keystroke.
    """

    def __init__(
        self,
        count: int,
        on_change: Optional[Callable[[str], None]] = None,
        default_value: Optional[str] = None,
    ):
        self._count = count
        self._on_change = on_change
        self._cells: List[str] = []
        self.initialize(default_value)

    def initialize(self, default_value: Optional[str] = None) -> List[str]:
        self._cells = split_cells(default_value)
        return self.cells

    def sync_external_value(self, value: Optional[str]) -> List[str]:
        """Replace all cells with the controlled value, if one is given."""
        if value:
            self._cells = split_cells(value)
            logger.debug(f"Controlled value applied ({len(self._cells)} cells)")
        return self.cells

    def commit(self, next_cells: List[str]) -> Optional[str]:
        """
        Adopt next_cells and emit the joined value on completion.

        Args:
            next_cells: Reconciled cell list

        Returns:
            The emitted value, or None when nothing was emitted
        """
        previous = self._cells
        self._cells = list(next_cells)

        if self._on_change is None:
            return None
        if len(next_cells) != self._count or not all(next_cells):
            return None
        if not any(
            (previous[i] if i < len(previous) else None) != cell
            for i, cell in enumerate(next_cells)
        ):
            return None

        value = "".join(next_cells)
        logger.debug(f"OTP complete ({len(value)} chars), notifying listener")
        self._on_change(value)
        return value

    def reset(self) -> None:
        self._cells = []

    def is_complete(self) -> bool:
        return len(self._cells) == self._count and all(self._cells)

    @property
    def count(self) -> int:
        return self._count

    @property
    def cells(self) -> List[str]:
        return list(self._cells)

    @property
    def value(self) -> str:
        return "".join(self._cells)
