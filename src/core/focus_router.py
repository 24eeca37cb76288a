"""
Focus routing — which cell gets focus after an edit or navigation key.
"""


class FocusRouter:
    """
    Stateless focus-target calculator for a fixed number of cells.

    Navigation targets are not clamped; callers check is_valid_target()
    and ignore anything outside the cell range.
    """

    def __init__(self, count: int):
        self.count = count

    def on_edit(self, index: int, inserted_length: int) -> int:
        """Move forward by the inserted length, stopping at the last cell."""
        return min(index + inserted_length, self.count - 1)

    def on_backward(self, index: int) -> int:
        return index - 1

    def on_forward(self, index: int) -> int:
        return index + 1

    def is_valid_target(self, index: int) -> bool:
        return 0 <= index < self.count
