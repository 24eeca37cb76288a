"""
Validation utilities for entered codes.
"""
import re
from typing import Tuple


def validate_otp_code(code: str, count: int = 6, digits_only: bool = False) -> Tuple[bool, str]:
    """
    Validate a completed OTP code.

    Args:
        code: Code to validate
        count: Expected number of characters
        digits_only: Require every character to be a digit

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not code:
        return False, "Code is required"

    if len(code) != count:
        return False, f"Code must be exactly {count} characters"

    if re.search(r'\s', code):
        return False, "Code must not contain spaces"

    if digits_only and not code.isdigit():
        return False, "Code must contain only digits"

    return True, ""


def sanitize_cell_text(text: str) -> str:
    """
    Strip characters a cell should never deliver.

    Removes null bytes and line breaks that can come along with pasted text.

    Args:
        text: Raw cell text

    Returns:
        Sanitized text
    """
    if not text:
        return ""

    return re.sub(r'[\x00\r\n\t]', '', text)
