"""
Central Qt signal hub for the OTP Entry frontend.
"""
from PySide6.QtCore import QObject, Signal


class AppSignals(QObject):
    """
    Singleton signal hub — connect slots in the main thread.
    """

    # OTP lifecycle
    otp_completed = Signal(str)        # full code
    otp_cleared = Signal()

    # Status bar
    status_message = Signal(str, str)  # message, level ('info'|'success'|'warning'|'error')


# Global singleton — import this everywhere
app_signals = AppSignals()
