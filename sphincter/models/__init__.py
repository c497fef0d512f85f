# =======================================================================================
# sphincter/models/__init__.py - Models Package
# =======================================================================================
from .schemas import *
from .enums import *

__all__ = [
    "TokenVerdict", "StateResponse", "CommandResponse", "HealthResponse",
    "DoorState", "ActuationCommand", "Verdict", "ScanOutcome",
]
