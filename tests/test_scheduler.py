import logging

from deckview.errors import NetworkError
from deckview.events.bus import EVENT_TICK, EventBus
from deckview.net.scheduler import FetchScheduler
from tests.helpers import InlineExecutor, ManualExecutor


def test_results_are_delivered_only_when_pumped():
    scheduler = FetchScheduler(executor=InlineExecutor())
    seen = []

    scheduler.submit(lambda x: x * 2, 21, on_success=seen.append)
    assert seen == []

    assert scheduler.pump() == 1
    assert seen == [42]


def test_tick_pumps_the_scheduler():
    bus = EventBus()
    scheduler = FetchScheduler(bus, executor=InlineExecutor())
    seen = []

    scheduler.submit(lambda: "done", on_success=seen.append)
    bus.emit(EVENT_TICK, dt=1 / 60)

    assert seen == ["done"]


def test_errors_route_to_error_callback():
    scheduler = FetchScheduler(executor=InlineExecutor())
    errors = []

    def boom():
        raise NetworkError("Not Found", status_code=404)

    scheduler.submit(boom, on_success=lambda _: None, on_error=errors.append)
    scheduler.pump()

    assert len(errors) == 1
    assert errors[0].status_code == 404


def test_new_cycle_cancels_queued_work():
    executor = ManualExecutor()
    scheduler = FetchScheduler(executor=executor)
    ran = []

    scheduler.submit(lambda: ran.append("old"), on_success=lambda _: None)
    scheduler.begin_cycle()
    executor.run_all()
    scheduler.pump()

    assert ran == []


def test_results_of_abandoned_cycle_are_dropped():
    executor = ManualExecutor()
    scheduler = FetchScheduler(executor=executor)
    seen = []

    old_cycle = scheduler.begin_cycle()
    scheduler.submit(lambda: "stale", on_success=seen.append)
    # Already running when the next navigation starts.
    future, fn, args, kwargs = executor.queue.pop(0)
    future.set_running_or_notify_cancel()
    scheduler.begin_cycle()
    future.set_result(fn(*args, **kwargs))

    scheduler.submit(lambda: "fresh", on_success=seen.append)
    executor.run_all()
    scheduler.pump()

    assert old_cycle.cancelled
    assert seen == ["fresh"]


def test_submit_into_cancelled_cycle_is_refused():
    scheduler = FetchScheduler(executor=InlineExecutor())
    old = scheduler.begin_cycle()
    scheduler.begin_cycle()

    assert scheduler.submit(lambda: 1, on_success=lambda _: None, cycle=old) is None


def test_handler_exception_is_logged_and_does_not_stop_delivery(caplog):
    scheduler = FetchScheduler(executor=InlineExecutor())
    seen = []

    def bad_handler(_):
        raise RuntimeError("handler blew up")

    scheduler.submit(lambda: 1, on_success=bad_handler)
    scheduler.submit(lambda: 2, on_success=seen.append)
    with caplog.at_level(logging.ERROR):
        delivered = scheduler.pump()

    assert delivered == 2
    assert seen == [2]
    assert "completion handler failed" in caplog.text


def test_cycle_pending_counts_unfinished_futures():
    executor = ManualExecutor()
    scheduler = FetchScheduler(executor=executor)
    cycle = scheduler.begin_cycle()
    scheduler.submit(lambda: 1, on_success=lambda _: None)
    scheduler.submit(lambda: 2, on_success=lambda _: None)

    assert cycle.pending == 2
    executor.run_one()
    assert cycle.pending == 1
