# =======================================================================================
# sphincter/api/dependencies.py - FastAPI Dependencies
# =======================================================================================
from fastapi import Request
from ..services.control import ControlSurface


def get_control(request: Request) -> ControlSurface:
    """Dependency to get the control surface bound to this app."""
    return request.app.state.control
