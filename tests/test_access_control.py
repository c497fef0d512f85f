import logging
from sphincter.models.enums import ScanOutcome
from sphincter.services.access_control import AccessControlService
from sphincter.services.debounce import DebounceGate
from sphincter.services.token_list import parse_token_list
from sphincter.utils.validators import TokenValidator
from .fakes import FakeClock


def make_service(arbiter, clock):
    validator = TokenValidator(parse_token_list("A1B2 Alice\n"))
    gate = DebounceGate(window=5.0, clock=clock)
    return AccessControlService(validator, gate, arbiter), gate


def test_authorized_token_pulses_open_pin(arbiter, pin_log, caplog):
    clock = FakeClock()
    service, gate = make_service(arbiter, clock)
    with caplog.at_level(logging.INFO):
        assert service.handle_token("A1B2") == ScanOutcome.GRANTED
    arbiter.stop(timeout=5)

    assert pin_log.events == [("open", "high"), ("open", "low")]
    assert "Alice" in caplog.text
    assert gate.last_admitted == clock.now


def test_repeat_within_window_pulses_once(arbiter, pin_log):
    clock = FakeClock()
    service, _ = make_service(arbiter, clock)
    assert service.handle_token("A1B2") == ScanOutcome.GRANTED
    clock.now += 2
    assert service.handle_token("A1B2") == ScanOutcome.DEBOUNCED
    arbiter.stop(timeout=5)

    assert pin_log.pulses() == ["open"]


def test_noise_token_touches_nothing(arbiter, pin_log):
    service, gate = make_service(arbiter, FakeClock())
    assert service.handle_token("0000") == ScanOutcome.MALFORMED
    arbiter.stop(timeout=5)

    assert gate.last_admitted is None
    assert pin_log.events == []


def test_unknown_token_is_denied_without_debounce(arbiter, pin_log, caplog):
    clock = FakeClock()
    service, gate = make_service(arbiter, clock)
    with caplog.at_level(logging.INFO):
        assert service.handle_token("DEAD") == ScanOutcome.DENIED
    assert "Could not find key DEAD" in caplog.text
    assert gate.last_admitted is None

    # a denied read does not hold back the next valid one
    assert service.handle_token("A1B2") == ScanOutcome.GRANTED
    arbiter.stop(timeout=5)
    assert pin_log.pulses() == ["open"]
