"""Application configuration.

Single source of truth for all configuration values.
Loads from environment variables with .env file support.
"""

import os
from pathlib import Path
from zoneinfo import ZoneInfo

from dotenv import load_dotenv

# Application version - single source of truth
VERSION = "1.2.0"

# Load .env file from project root
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"
load_dotenv(_ENV_FILE)


class Config:
    """Application configuration singleton.

    All configuration values should be accessed through this class.
    Values are loaded from environment variables with sensible defaults.
    """

    # Supabase (owns clients, profiles, promotions, orders)
    SUPABASE_URL: str = os.getenv("SUPABASE_URL", "")
    SUPABASE_KEY: str = os.getenv("SUPABASE_KEY", "")

    # Timezone used for {fecha_actual}, {hora_actual} and date rendering
    USER_TIMEZONE: str = os.getenv("USER_TIMEZONE", "America/Bogota")

    # Upper bound (seconds) for a single entity lookup during resolution
    LOOKUP_TIMEOUT: float = float(os.getenv("LOOKUP_TIMEOUT", "5.0"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_DIR: str = os.getenv("LOG_DIR", str(_PROJECT_ROOT / "logs"))

    # API
    API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
    API_PORT: int = int(os.getenv("API_PORT", "8000"))

    @classmethod
    def get_timezone(cls) -> ZoneInfo:
        """Get the user timezone as a ZoneInfo object."""
        return ZoneInfo(cls.USER_TIMEZONE)

    @classmethod
    def reload(cls) -> None:
        """Reload configuration from environment.

        Useful for testing or runtime config changes.
        """
        load_dotenv(_ENV_FILE, override=True)
        cls.SUPABASE_URL = os.getenv("SUPABASE_URL", "")
        cls.SUPABASE_KEY = os.getenv("SUPABASE_KEY", "")
        cls.USER_TIMEZONE = os.getenv("USER_TIMEZONE", "America/Bogota")
        cls.LOOKUP_TIMEOUT = float(os.getenv("LOOKUP_TIMEOUT", "5.0"))
        cls.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
        cls.LOG_DIR = os.getenv("LOG_DIR", str(_PROJECT_ROOT / "logs"))
        cls.API_HOST = os.getenv("API_HOST", "0.0.0.0")
        cls.API_PORT = int(os.getenv("API_PORT", "8000"))


def get_user_timezone() -> ZoneInfo:
    """Get the configured user timezone.

    Import this function wherever you need timezone.
    """
    return Config.get_timezone()
