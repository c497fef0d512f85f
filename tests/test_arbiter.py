import threading
from sphincter.models.enums import ActuationCommand
from sphincter.services.arbiter import ActuationArbiter


def test_open_and_close_drive_their_own_pin(arbiter, pin_log):
    assert arbiter.submit(ActuationCommand.OPEN).result(timeout=5)
    assert arbiter.submit("close").result(timeout=5)
    assert pin_log.events == [
        ("open", "high"), ("open", "low"),
        ("close", "high"), ("close", "low"),
    ]


def test_submit_does_not_wait_for_the_pulse(open_pin, close_pin):
    arb = ActuationArbiter(open_pin, close_pin, dwell=0.3)
    arb.start()
    try:
        future = arb.submit(ActuationCommand.OPEN)
        assert not future.done()
        assert future.result(timeout=5)
    finally:
        arb.stop(timeout=5)


def test_commands_queued_before_start_run_after_start(open_pin, close_pin, pin_log):
    arb = ActuationArbiter(open_pin, close_pin, dwell=0.01)
    future = arb.submit(ActuationCommand.OPEN)
    assert pin_log.events == []
    arb.start()
    try:
        assert future.result(timeout=5)
    finally:
        arb.stop(timeout=5)
    assert pin_log.pulses() == ["open"]


def test_unknown_command_is_dropped(arbiter, pin_log):
    assert arbiter.submit("unlock-everything").result(timeout=5) is False
    assert pin_log.events == []
    assert arbiter.submit(ActuationCommand.OPEN).result(timeout=5)
    assert pin_log.pulses() == ["open"]
    assert arbiter.active_command is None


def test_concurrent_submissions_are_serialized_in_order(arbiter, pin_log):
    submitted = []
    futures = []
    order_lock = threading.Lock()
    barrier = threading.Barrier(6)

    def producer(index):
        barrier.wait()
        for i in range(5):
            command = ActuationCommand.OPEN if (index + i) % 2 else ActuationCommand.CLOSE
            with order_lock:
                futures.append(arbiter.submit(command))
                submitted.append(command.value)

    threads = [threading.Thread(target=producer, args=(n,)) for n in range(6)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    for future in futures:
        assert future.result(timeout=10)

    assert pin_log.max_high == 1
    assert pin_log.pulses() == submitted


def test_stop_finishes_pending_commands(open_pin, close_pin, pin_log):
    arb = ActuationArbiter(open_pin, close_pin, dwell=0.01)
    arb.start()
    for _ in range(3):
        arb.submit(ActuationCommand.OPEN)
    arb.stop(timeout=5)
    assert not arb.running
    assert pin_log.pulses() == ["open", "open", "open"]


def test_stop_timeout_keeps_the_live_executor(open_pin, close_pin, pin_log):
    arb = ActuationArbiter(open_pin, close_pin, dwell=0.5)
    arb.start()
    arb.submit(ActuationCommand.OPEN)
    arb.stop(timeout=0.01)
    assert arb.running

    arb.start()
    arb.stop(timeout=5)
    assert not arb.running
    assert pin_log.max_high == 1
    assert pin_log.pulses() == ["open"]


def test_pins_are_driven_only_from_the_executor_thread(close_pin):
    threads = []

    class ThreadRecordingPin:
        def on(self):
            threads.append(threading.current_thread().name)

        def off(self):
            threads.append(threading.current_thread().name)

    arb = ActuationArbiter(ThreadRecordingPin(), close_pin, dwell=0.01)
    assert not hasattr(arb, "execute")
    arb.start()
    try:
        assert arb.submit(ActuationCommand.OPEN).result(timeout=5)
    finally:
        arb.stop(timeout=5)
    assert threads == ["actuation-arbiter", "actuation-arbiter"]
