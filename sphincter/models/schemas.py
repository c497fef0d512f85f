# =======================================================================================
# sphincter/models/schemas.py - Pydantic Models
# =======================================================================================
from typing import Optional
from pydantic import BaseModel, Field
from .enums import Verdict, DoorState

# ========== Token validation ==========
class TokenVerdict(BaseModel):
    """Result of checking a token against the authorized-token table."""
    verdict: Verdict
    owner: Optional[str] = Field(None, description="Owner label, set only when authorized")

    @property
    def authorized(self) -> bool:
        return self.verdict == Verdict.AUTHORIZED

# ========== Control surface ==========
class StateResponse(BaseModel):
    state: str                  # "UNKNOWN" | "LOCKED" | "UNLOCKED" | "FAILURE"
    code: int

    @classmethod
    def from_state(cls, state: DoorState) -> "StateResponse":
        return cls(state=state.name, code=int(state))

class CommandResponse(BaseModel):
    command: str
    result: str                 # "UNLOCKED" | "LOCKED" | "REJECTED"

# ========== Health ==========
class HealthResponse(BaseModel):
    status: str                 # "ok" | "degraded"
    reader: bool
    state: str
