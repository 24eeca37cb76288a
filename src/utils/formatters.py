"""
Formatting utilities for OTP cells and for displaying codes in the UI.

Cell formatters receive the joined cells with a space for every unfilled
cell. They must keep every character in place; padding the result out
to the cell count is allowed.
"""
from typing import Callable, Dict


def format_uppercase(value: str) -> str:
    """
    Upper-case every character.

    Characters whose upper-case form is longer than one character (such as
    "ß") are left as typed so every character stays in its cell.

    Args:
        value: Joined cells

    Returns:
        Upper-cased string of the same length
    """
    chars = []
    for char in value:
        upper = char.upper()
        chars.append(upper if len(upper) == 1 else char)
    return "".join(chars)


def make_fixed_character_formatter(positions: Dict[int, str]) -> Callable[[str], str]:
    """
    Build a formatter that stamps fixed characters at given positions.

    Useful for separators such as a dash in the middle of the code. The
    probe is padded with spaces up to the highest position so the stamp
    lands even when the cells before it are still unfilled.

    Args:
        positions: Mapping of cell index to the character to place there

    Returns:
        Formatter function
    """
    if not positions:
        return lambda value: value

    width = max(positions) + 1

    def _formatter(value: str) -> str:
        chars = list(value.ljust(width))
        for index, char in positions.items():
            chars[index] = char
        return "".join(chars)

    return _formatter


def format_masked_code(code: str, visible: int = 2, mask_char: str = "•") -> str:
    """
    Mask a code for display, keeping only the last characters.

    Args:
        code: Full code
        visible: Number of trailing characters left readable
        mask_char: Replacement character

    Returns:
        Masked code
    """
    if not code:
        return "N/A"

    visible = max(0, min(visible, len(code)))
    hidden = len(code) - visible
    return mask_char * hidden + code[hidden:]
