# =======================================================================================
# sphincter/main.py - FastAPI Application and Process Entry Point
# =======================================================================================
import argparse
import logging
import sys
from typing import Optional, Sequence
import uvicorn
from fastapi import FastAPI
from .config import config
from .api.routes.sphincter import router as sphincter_router
from .api.routes.door import router as door_router
from .models.enums import DoorState
from .models.schemas import HealthResponse
from .services.access_control import AccessControlService
from .services.arbiter import ActuationArbiter
from .services.control import ControlSurface
from .services.debounce import DebounceGate
from .services.door_status import DoorStatusMonitor
from .services.hardware import GPIOPins
from .services.token_list import load_token_table
from .utils.exceptions import ConfigurationError
from .utils.validators import TokenValidator
from .workers.reader_worker import ReaderWorker

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    )
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def create_app(control: ControlSurface, reader: Optional[ReaderWorker] = None) -> FastAPI:
    app = FastAPI(
        title="Sphincter Door API",
        version="1.0.0",
        description="Remote control surface for the RFID door lock",
        debug=config.API_DEBUG,
    )
    app.state.control = control
    app.state.reader = reader

    app.include_router(sphincter_router, tags=["sphincter"])
    app.include_router(door_router, prefix="/api", tags=["door"])

    @app.get("/api/health", response_model=HealthResponse, tags=["health"])
    def api_health():
        state = control.query_state()
        reader_ok = reader is not None and reader.running
        ok = reader_ok and state != DoorState.FAILURE
        return HealthResponse(status="ok" if ok else "degraded", reader=reader_ok, state=state.name)

    return app


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="RFID door lock controller")
    parser.add_argument("--list", default=config.TOKEN_LIST, help="account list")
    parser.add_argument("--port", default=config.SERIAL_PORT, help="reader device")
    parser.add_argument("--host", default=config.API_HOST, help="HTTP bind address")
    parser.add_argument("--http-port", type=int, default=config.API_PORT, help="HTTP port")
    parser.add_argument("-v", "--verbose", action="store_true", default=config.API_DEBUG)
    return parser.parse_args(argv)


def run(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)

    logger.info(":: Starting sphincter rfid token...")
    logger.info(":::: Reading %s", args.list)
    try:
        users = load_token_table(args.list)
    except ConfigurationError as e:
        logger.critical("%s", e)
        return 2

    logger.info(":::: Opening GPIO")
    pins = GPIOPins.from_config(config)
    arbiter = None
    try:
        arbiter = ActuationArbiter(pins.open_pin, pins.close_pin, dwell=config.DWELL_SECONDS)
        monitor = DoorStatusMonitor(pins.status_a, pins.status_b)
        access = AccessControlService(TokenValidator(users), DebounceGate(config.DEBOUNCE_SECONDS), arbiter)
        control = ControlSurface(arbiter, monitor)

        server: Optional[uvicorn.Server] = None

        def on_fault(exc):
            if server is not None:
                server.should_exit = True

        reader = ReaderWorker(access, port=args.port, on_fault=on_fault)
        app = create_app(control, reader)
        server = uvicorn.Server(uvicorn.Config(app, host=args.host, port=args.http_port, log_config=None))

        arbiter.start()
        logger.info(":::: Connecting to Serial")
        reader.start()
        logger.info(":::: Setting up webserver on %s:%s", args.host, args.http_port)
        server.run()
    finally:
        if arbiter is not None:
            arbiter.stop(timeout=config.DWELL_SECONDS + 1)
        pins.close()

    if reader.fault is not None:
        logger.critical(":: Reader fault, exiting for restart: %s", reader.fault)
        return 1
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
