import pytest
from sphincter.services.arbiter import ActuationArbiter
from .fakes import PinLog, RecordingPin


@pytest.fixture
def pin_log():
    return PinLog()


@pytest.fixture
def open_pin(pin_log):
    return RecordingPin("open", pin_log)


@pytest.fixture
def close_pin(pin_log):
    return RecordingPin("close", pin_log)


@pytest.fixture
def arbiter(open_pin, close_pin):
    arb = ActuationArbiter(open_pin, close_pin, dwell=0.01)
    arb.start()
    yield arb
    arb.stop(timeout=5)
