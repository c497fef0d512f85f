# =======================================================================================
# sphincter/services/__init__.py - Services Package
# =======================================================================================
from .access_control import AccessControlService
from .arbiter import ActuationArbiter
from .control import ControlSurface
from .debounce import DebounceGate
from .door_status import DoorStatusMonitor, door_state_from
from .framer import TokenFramer
from .hardware import GPIOPins
from .token_list import load_token_table, parse_token_list

__all__ = [
    "AccessControlService", "ActuationArbiter", "ControlSurface", "DebounceGate",
    "DoorStatusMonitor", "door_state_from", "TokenFramer", "GPIOPins",
    "load_token_table", "parse_token_list",
]
