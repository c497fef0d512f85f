# =======================================================================================
# sphincter/services/hardware.py - GPIO Pins
# =======================================================================================
import logging
from dataclasses import dataclass
from typing import Protocol
from gpiozero import DigitalInputDevice, DigitalOutputDevice

logger = logging.getLogger(__name__)


class OutputPin(Protocol):
    """Digital output: the arbiter only ever drives it high or low."""

    def on(self) -> None: ...

    def off(self) -> None: ...


class InputPin(Protocol):
    """Digital input: `value` is truthy while the line is high."""

    @property
    def value(self) -> int: ...


@dataclass
class GPIOPins:
    """The four lines wired to the lock: two actuator outputs, two status inputs."""

    open_pin: OutputPin
    close_pin: OutputPin
    status_a: InputPin
    status_b: InputPin

    @classmethod
    def from_config(cls, config) -> "GPIOPins":
        logger.info(
            "Opening GPIO: open=%s close=%s status=%s,%s",
            config.OPEN_PIN, config.CLOSE_PIN, config.STATUS_PIN_A, config.STATUS_PIN_B,
        )
        opened = []
        try:
            for factory, pin, kwargs in (
                (DigitalOutputDevice, config.OPEN_PIN, {"active_high": True, "initial_value": False}),
                (DigitalOutputDevice, config.CLOSE_PIN, {"active_high": True, "initial_value": False}),
                (DigitalInputDevice, config.STATUS_PIN_A, {"pull_up": False}),
                (DigitalInputDevice, config.STATUS_PIN_B, {"pull_up": False}),
            ):
                opened.append(factory(pin, **kwargs))
        except Exception:
            for device in reversed(opened):
                device.close()
            raise
        return cls(*opened)

    def close(self) -> None:
        """Release the devices (outputs go low on close)."""
        for device in (self.open_pin, self.close_pin, self.status_a, self.status_b):
            close = getattr(device, "close", None)
            if close is not None:
                close()
