import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Roman numerals (ASCII / Unicode letter forms)
ROMAN_MIN = 1
ROMAN_MAX = 3999

# Japanese numerals cover the unsigned 64-bit range
U64_MAX = 2 ** 64 - 1

TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    use_unicode: bool = False
    log_level: str = "WARNING"


def load_settings() -> Settings:
    """
    Read settings from the environment (and a .env file if present).

    NUMCONV_UNICODE: default Roman output style (1/true/yes/on)
    NUMCONV_LOG_LEVEL: logging level for the CLI
    """
    # Load .env file if exists
    load_dotenv()

    use_unicode = os.getenv("NUMCONV_UNICODE", "").strip().lower() in TRUTHY
    log_level = os.getenv("NUMCONV_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"
    return Settings(use_unicode=use_unicode, log_level=log_level)
