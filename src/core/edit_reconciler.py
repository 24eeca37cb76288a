"""
Edit reconciliation — turns one cell edit into the next cell array.

Pure functions only; no Qt imports so the logic can run headless.
"""
from typing import Callable, List, Optional

from utils.logger import logger


Formatter = Callable[[str], str]

# Stand-in for an unfilled cell inside the string handed to a formatter
EMPTY_PLACEHOLDER = " "


def split_cells(text: Optional[str]) -> List[str]:
    """Split a string into one-character cells; None/empty gives []."""
    return list(text or "")


def trim_trailing_empty(cells: List[str]) -> List[str]:
    """Pop unfilled cells off the end, stopping at the last filled one."""
    trimmed = list(cells)
    while trimmed and not trimmed[-1]:
        trimmed.pop()
    return trimmed


def apply_formatter(
    cells: List[str],
    formatter: Formatter,
    count: int,
    strict: bool = False,
) -> List[str]:
    """
    Run the formatter over the joined cells and re-split its output.

    Unfilled cells are shown to the formatter as a single space. A space
    coming back at a position that was unfilled stays unfilled; any other
    character replaces the cell.

    Args:
        cells: Trimmed cells before formatting
        formatter: String transform that keeps every character in place
        count: Cell count bound
        strict: Raise ValueError when the output shrinks or exceeds count

    Returns:
        Formatted cells, truncated to count and trimmed
    """
    probe = "".join(c or EMPTY_PLACEHOLDER for c in cells)
    formatted = formatter(probe)

    # Growing up to count (padding out to a fixed decoration) keeps alignment
    if not len(probe) <= len(formatted) <= count:
        message = (
            f"Formatter returned {len(formatted)} chars for a {len(probe)}-char "
            f"value; expected between {len(probe)} and {count}"
        )
        if strict:
            raise ValueError(message)
        logger.warning(message)

    next_cells = []
    for i, char in enumerate(formatted[:count]):
        before = cells[i] if i < len(cells) else ""
        if char == EMPTY_PLACEHOLDER and not before:
            next_cells.append(before)
        else:
            next_cells.append(char)

    return trim_trailing_empty(next_cells)


def reconcile(
    current_cells: List[str],
    index: int,
    text: str,
    count: int,
    formatter: Optional[Formatter] = None,
    strict: bool = False,
) -> List[str]:
    """
    Compute the cell array after the cell at ``index`` now holds ``text``.

    A single character (or empty string, a delete) overwrites that cell.
    Longer text, typically a paste, replaces everything from ``index`` on
    with its characters. Excess characters beyond ``count`` are dropped.

    Args:
        current_cells: Cells before the edit (not mutated)
        index: Cell that reported the change
        text: Full text the cell now contains
        count: Number of cells
        formatter: Optional formatter applied to the result
        strict: Raise on formatter length violations

    Returns:
        New cell list
    """
    next_cells = list(current_cells)

    if len(text) <= 1:
        if index >= len(next_cells):
            next_cells.extend([""] * (index + 1 - len(next_cells)))
        next_cells[index] = text
    else:
        next_cells = next_cells[:index] + [""] * (index - len(next_cells)) + split_cells(text)

    next_cells = trim_trailing_empty(next_cells[:count])

    if formatter is not None:
        next_cells = apply_formatter(next_cells, formatter, count, strict=strict)

    return next_cells
