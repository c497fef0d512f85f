# =======================================================================================
# sphincter/models/enums.py - Enums and Constants
# =======================================================================================
from enum import Enum, IntEnum


class DoorState(IntEnum):
    """Door state derived from the two status lines."""
    UNKNOWN = 0  # no power?
    LOCKED = 1
    UNLOCKED = 2
    FAILURE = 3


class ActuationCommand(str, Enum):
    """Commands accepted by the actuation arbiter."""
    OPEN = "open"
    CLOSE = "close"


class Verdict(str, Enum):
    """Token validation results."""
    AUTHORIZED = "AUTHORIZED"
    UNAUTHORIZED = "UNAUTHORIZED"
    MALFORMED = "MALFORMED"


class ScanOutcome(str, Enum):
    """What the reader path did with a presented token."""
    MALFORMED = "MALFORMED"
    DENIED = "DENIED"
    DEBOUNCED = "DEBOUNCED"
    GRANTED = "GRANTED"
