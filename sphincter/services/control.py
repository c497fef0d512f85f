# =======================================================================================
# sphincter/services/control.py - Remote Control Surface
# =======================================================================================
import logging
from typing import Optional
from ..models.enums import ActuationCommand, DoorState
from .arbiter import ActuationArbiter
from .door_status import DoorStatusMonitor

logger = logging.getLogger(__name__)

UNLOCKED_ACK = "UNLOCKED"
LOCKED_ACK = "LOCKED"


class ControlSurface:
    """Calls the remote interface makes into the core."""

    def __init__(self, arbiter: ActuationArbiter, monitor: DoorStatusMonitor):
        self.arbiter = arbiter
        self.monitor = monitor

    def query_state(self) -> DoorState:
        return self.monitor.current_state()

    def submit_open(self, timeout: Optional[float] = None) -> str:
        """Queue an Open behind any pending commands and wait for its pulse to finish."""
        done = self.arbiter.submit(ActuationCommand.OPEN).result(timeout)
        if not done:
            logger.warning("Remote open was rejected by the arbiter")
        return UNLOCKED_ACK

    def submit_close(self) -> str:
        # The close pin is not driven from the remote interface.
        return LOCKED_ACK
