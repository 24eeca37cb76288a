"""
Configuration settings for the OTP Entry desktop application (PySide6).
"""
import os
import sys
import configparser
from pathlib import Path


def get_config_path() -> Path:
    """Get the path to config.ini file."""
    if getattr(sys, 'frozen', False):
        exe_dir = Path(sys.executable).parent
        config_path = exe_dir / 'config.ini'
    else:
        # Go up from src/config/ to the project root
        config_path = Path(__file__).parent.parent.parent / 'config.ini'
    return config_path


def load_config() -> configparser.ConfigParser:
    """Load configuration from config.ini file."""
    config = configparser.ConfigParser()
    config_path = get_config_path()
    if config_path.exists():
        config.read(config_path)
    return config


def _as_bool(value: str) -> bool:
    return str(value).lower() in ("true", "1", "yes")


_config = load_config()


class AppSettings:
    """Application configuration settings."""

    # Application metadata
    APP_NAME = "OTP Entry"
    APP_VERSION = "1.0.0"
    APP_TITLE = "OTP Entry v1.0.0 (Qt)"

    # Window dimensions
    WINDOW_WIDTH = 420
    WINDOW_HEIGHT = 220
    MIN_WINDOW_WIDTH = 320
    MIN_WINDOW_HEIGHT = 180

    # OTP input
    OTP_DEFAULT_COUNT = int(_config.get('otp', 'count',
                                        fallback=os.getenv("OTP_COUNT", "6")))
    OTP_MASK = _as_bool(_config.get('otp', 'mask',
                                    fallback=os.getenv("OTP_MASK", "False")))

    # Cell geometry per size: (width, height, point size)
    OTP_CELL_SIZES = {
        'small': (32, 36, 14),
        'middle': (42, 48, 18),
        'large': (52, 60, 22),
    }

    # QSettings keys
    QSETTINGS_ORG = "OtpEntry"
    QSETTINGS_APP = "OtpEntryDemo"

    # Logging
    LOG_LEVEL = _config.get('logging', 'level',
                            fallback=os.getenv("LOG_LEVEL", "INFO"))
    LOG_FILE = os.getenv("LOG_FILE", "otp_entry.log")
    LOG_MAX_SIZE = int(os.getenv("LOG_MAX_SIZE", "10485760"))   # 10 MB
    LOG_BACKUP_COUNT = int(os.getenv("LOG_BACKUP_COUNT", "5"))
    LOG_TO_FILE = _as_bool(_config.get('logging', 'to_file',
                                       fallback=os.getenv("LOG_TO_FILE", "True")))

    # File paths
    CONFIG_DIR = Path(os.getenv("OTP_CONFIG_DIR", str(Path.home() / ".otp_entry")))
    LOG_DIR = CONFIG_DIR / "logs"

    # Debug: formatter length violations raise instead of warning
    DEBUG = _as_bool(os.getenv("DEBUG", "False"))

    @classmethod
    def ensure_directories(cls):
        """Ensure required directories exist."""
        for directory in [cls.CONFIG_DIR, cls.LOG_DIR]:
            directory.mkdir(parents=True, exist_ok=True)

    @classmethod
    def get_cell_geometry(cls, size: str):
        """Return (width, height, point size) for a cell size name."""
        return cls.OTP_CELL_SIZES.get(size, cls.OTP_CELL_SIZES['middle'])


# Global settings instance
settings = AppSettings()
