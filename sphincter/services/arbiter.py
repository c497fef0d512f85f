# =======================================================================================
# sphincter/services/arbiter.py - Actuation Arbiter
# =======================================================================================
import logging
import queue
import threading
import time
from concurrent.futures import Future
from typing import Any, Optional
from ..models.enums import ActuationCommand
from ..utils.exceptions import UnknownCommandError
from .hardware import OutputPin

logger = logging.getLogger(__name__)

_STOP = object()


class ActuationArbiter:
    """
    Single owner of the two actuator pins.

    Commands from any thread are queued and executed one at a time, in
    submission order, by one worker thread. A pulse drives its pin high, holds
    it for `dwell` seconds and drives it low before the next command is taken,
    so pulses never overlap.
    """

    def __init__(self, open_pin: OutputPin, close_pin: OutputPin, dwell: float = 1.0):
        self.pins = {
            ActuationCommand.OPEN: open_pin,
            ActuationCommand.CLOSE: close_pin,
        }
        self.dwell = dwell
        self._queue: "queue.Queue" = queue.Queue()
        self._thread: Optional[threading.Thread] = None
        self._active: Optional[ActuationCommand] = None

    # ------------------------------------------------------------------
    # Start / Stop
    # ------------------------------------------------------------------
    def start(self) -> None:
        """Start the executor thread."""
        if self._thread is not None and self._thread.is_alive():
            return
        self._thread = threading.Thread(target=self._run_loop, name="actuation-arbiter", daemon=True)
        self._thread.start()
        logger.debug("Arbiter started (dwell=%ss)", self.dwell)

    def stop(self, timeout: Optional[float] = None) -> None:
        """Finish every command already queued, then stop the executor."""
        if self._thread is None:
            return
        self._queue.put(_STOP)
        self._thread.join(timeout)
        if not self._thread.is_alive():
            self._thread = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    @property
    def active_command(self) -> Optional[ActuationCommand]:
        """The command whose pin is currently high, or None while idle."""
        return self._active

    # ------------------------------------------------------------------
    # Producers
    # ------------------------------------------------------------------
    def submit(self, command: Any) -> Future:
        """
        Queue a command and return immediately.
        The returned future resolves to True once the pulse has completed, or
        False if the command was rejected. Waiting on it is optional.
        """
        future: Future = Future()
        self._queue.put((command, future))
        return future

    # ------------------------------------------------------------------
    # Executor
    # ------------------------------------------------------------------
    def _run_loop(self) -> None:
        while True:
            item = self._queue.get()
            if item is _STOP:
                break
            command, future = item
            try:
                self._execute(command)
            except UnknownCommandError as e:
                logger.warning("%s; dropped", e)
                future.set_result(False)
            except Exception as e:
                logger.exception("Actuation of %r failed", command)
                future.set_exception(e)
            else:
                future.set_result(True)

    def _execute(self, command: Any) -> None:
        """Run one pulse on the executor thread."""
        try:
            command = ActuationCommand(command)
        except ValueError:
            raise UnknownCommandError(f"unknown cmd received: {command!r}") from None

        pin = self.pins[command]
        logger.info("cmd: %s", command.value)
        self._active = command
        pin.on()
        try:
            time.sleep(self.dwell)
        finally:
            pin.off()
            self._active = None
