# =======================================================================================
# sphincter/services/door_status.py - Door Status Monitor
# =======================================================================================
from ..models.enums import DoorState
from .hardware import InputPin

# (status A high, status B high) -> state
_STATE_TABLE = {
    (False, False): DoorState.UNKNOWN,
    (True, True): DoorState.FAILURE,
    (True, False): DoorState.UNLOCKED,
    (False, True): DoorState.LOCKED,
}


def door_state_from(a: bool, b: bool) -> DoorState:
    """Map a snapshot of the two status lines to a door state."""
    return _STATE_TABLE[(bool(a), bool(b))]


class DoorStatusMonitor:
    """Reads the two status lines on every call; nothing is cached."""

    def __init__(self, status_a: InputPin, status_b: InputPin):
        self.status_a = status_a
        self.status_b = status_b

    def current_state(self) -> DoorState:
        # Sample both lines first, then map the snapshot.
        a = bool(self.status_a.value)
        b = bool(self.status_b.value)
        return door_state_from(a, b)
