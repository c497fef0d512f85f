# =======================================================================================
# sphincter/workers/reader_worker.py - Background Credential Reader
# =======================================================================================
import logging
import threading
from typing import Callable, Optional
import serial
from ..config import config
from ..services.access_control import AccessControlService
from ..services.framer import TokenFramer
from ..utils.exceptions import StreamFault

logger = logging.getLogger(__name__)


class ReaderWorker:
    """
    Background worker feeding reader tokens into the access pipeline.

    There is no reconnect loop: the first stream fault, or any other error
    escaping the pipeline, stops the worker and is handed to `on_fault` so the process can exit and be restarted.
    """

    def __init__(
        self,
        access_service: AccessControlService,
        port: Optional[str] = None,
        baud: Optional[int] = None,
        on_fault: Optional[Callable[[Exception], None]] = None,
        opener: Callable[..., object] = serial.Serial,
    ):
        self.access_service = access_service
        self.port = port or config.SERIAL_PORT
        self.baud = baud or config.SERIAL_BAUD
        self.on_fault = on_fault
        self.opener = opener
        self.fault: Optional[Exception] = None
        self._thread: Optional[threading.Thread] = None

    # ------------------------------------------------------------------
    # Start / Stop
    # ------------------------------------------------------------------
    def start(self):
        """Start the reader in a background thread."""
        self._thread = threading.Thread(target=self._run, name="reader-worker", daemon=True)
        self._thread.start()

    def join(self, timeout: Optional[float] = None):
        if self._thread is not None:
            self._thread.join(timeout)

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------
    def _run(self):
        try:
            self.run()
        except StreamFault as e:
            logger.critical("Reader stopped: %s", e)
            self._fail(e)
        except Exception as e:
            logger.exception("Reader crashed")
            self._fail(e)

    def _fail(self, exc: Exception):
        self.fault = exc
        if self.on_fault is not None:
            self.on_fault(exc)

    def run(self):
        """Read and handle tokens until the stream fails. Never returns normally."""
        logger.info("Connecting to serial %s @ %s", self.port, self.baud)
        try:
            port = self.opener(self.port, self.baud, timeout=None)
        except (serial.SerialException, OSError) as e:
            raise StreamFault(f"Cannot open {self.port}: {e}") from e

        with port:
            for token in TokenFramer(port):
                self.access_service.handle_token(token)
