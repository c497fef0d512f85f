# =======================================================================================
# sphincter/api/routes/door.py - Door Endpoints
# =======================================================================================
from fastapi import APIRouter, Depends
from ...models.enums import ActuationCommand
from ...models.schemas import StateResponse, CommandResponse
from ...services.control import ControlSurface
from ..dependencies import get_control

router = APIRouter()


@router.get("/state", response_model=StateResponse)
def get_state(control: ControlSurface = Depends(get_control)):
    return StateResponse.from_state(control.query_state())


@router.post("/open", response_model=CommandResponse)
def open_door(control: ControlSurface = Depends(get_control)):
    """Pulse the open pin; responds after the pulse has finished."""
    return CommandResponse(command=ActuationCommand.OPEN.value, result=control.submit_open())


@router.post("/close", response_model=CommandResponse)
def close_door(control: ControlSurface = Depends(get_control)):
    return CommandResponse(command=ActuationCommand.CLOSE.value, result=control.submit_close())
