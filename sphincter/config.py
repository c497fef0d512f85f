# =======================================================================================
# sphincter/config.py - Configuration Management
# =======================================================================================
import os
from dotenv import load_dotenv
from .utils.exceptions import ConfigurationError

load_dotenv()


def _env_int(name: str, default: int) -> int:
    """Helper to parse integer environment variables."""
    v = os.getenv(name)
    if v is None or v == "":
        return default
    try:
        return int(v)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {v!r}") from None


def _env_float(name: str, default: float) -> float:
    """Helper to parse float environment variables."""
    v = os.getenv(name)
    if v is None or v == "":
        return default
    try:
        return float(v)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {v!r}") from None


class Config:
    # Authorized tokens
    TOKEN_LIST: str = os.getenv("TOKEN_LIST", "list.txt")

    # Serial Communication
    SERIAL_PORT: str = os.getenv("SERIAL_PORT", "/dev/ttyUSB0")
    SERIAL_BAUD: int = _env_int("SERIAL_BAUD", 9600)

    # GPIO (BCM numbering)
    OPEN_PIN: int = _env_int("OPEN_PIN", 22)
    CLOSE_PIN: int = _env_int("CLOSE_PIN", 27)
    STATUS_PIN_A: int = _env_int("STATUS_PIN_A", 4)
    STATUS_PIN_B: int = _env_int("STATUS_PIN_B", 17)

    # Timing
    DWELL_SECONDS: float = _env_float("DWELL_SECONDS", 1.0)
    DEBOUNCE_SECONDS: float = _env_float("DEBOUNCE_SECONDS", 5.0)

    # API Settings
    API_DEBUG: bool = os.getenv("API_DEBUG", "false").lower() == "true"
    API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
    API_PORT: int = _env_int("API_PORT", 8001)


config = Config()
