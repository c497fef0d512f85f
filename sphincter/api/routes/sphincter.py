# =======================================================================================
# sphincter/api/routes/sphincter.py - Legacy Action Endpoint
# =======================================================================================
import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse, Response
from ...services.control import ControlSurface
from ..dependencies import get_control

logger = logging.getLogger(__name__)

router = APIRouter()

USAGE = "action parameter must be one of state, lock or unlock"


@router.get("/sphincter", response_class=PlainTextResponse)
def handle_action(action: str = "", control: ControlSurface = Depends(get_control)):
    """Plain-text endpoint: ?action=state|unlock|lock."""
    logger.info("action=%s", action)
    if action == "state":
        return control.query_state().name
    if action == "unlock":
        return control.submit_open()
    if action == "lock":
        return control.submit_close()
    return USAGE


@router.api_route("/sphincter", methods=["POST", "PUT", "PATCH", "DELETE"], include_in_schema=False)
def ignore_non_get(request: Request):
    logger.info("Ignoring non-GET request.")
    return Response(status_code=200)
