from appcloser.models import CloseProgress, CloseResult, QuitOutcome
from appcloser.termination import TerminationDriver

from conftest import FakeExecutor


def run(driver, names, executor):
    progress, done = [], []
    report = driver.run(names, executor, on_progress=lambda *a: progress.append(a), on_complete=done.append)
    return report, progress, done


def test_zero_selection_is_noop(no_sleep):
    slept, sleep = no_sleep
    executor = FakeExecutor(set())
    report, progress, done = run(TerminationDriver(sleep=sleep), [], executor)
    assert progress == []
    assert done == [report]
    assert report.total == 0
    assert executor.calls == []
    assert slept == []


def test_gone_app_skipped(no_sleep):
    _, sleep = no_sleep
    executor = FakeExecutor({"B"})
    report, progress, done = run(TerminationDriver(sleep=sleep), ["A", "B"], executor)
    assert progress == [(1, 2, "A"), (2, 2, "B")]
    assert executor.quit_requests() == ["B"]
    assert report.results[0] == CloseResult("A", QuitOutcome.ALREADY_GONE, skipped=True)
    assert report.results[1].outcome == QuitOutcome.ACKNOWLEDGED
    assert len(done) == 1


def test_failure_does_not_stop_batch(no_sleep):
    _, sleep = no_sleep
    executor = FakeExecutor({"B", "C", "D"}, {"B": QuitOutcome.FAILED, "C": QuitOutcome.DECLINED})
    report, progress, done = run(TerminationDriver(sleep=sleep), ["A", "B", "C", "D"], executor)
    assert executor.quit_requests() == ["B", "C", "D"]
    assert [p[0] for p in progress] == [1, 2, 3, 4]
    assert (report.closed, report.declined, report.gone, report.failed) == (1, 1, 1, 1)
    assert done == [report]


def test_executor_exception_becomes_failed(no_sleep):
    _, sleep = no_sleep

    class Exploding(FakeExecutor):
        def request_quit(self, name):
            super().request_quit(name)
            if name == "A":
                raise RuntimeError("bridge crashed")
            return QuitOutcome.ACKNOWLEDGED

    executor = Exploding({"A", "B"})
    report, _, done = run(TerminationDriver(sleep=sleep), ["A", "B"], executor)
    assert report.results[0].outcome == QuitOutcome.FAILED
    assert "bridge crashed" in report.results[0].detail
    assert report.results[1].outcome == QuitOutcome.ACKNOWLEDGED
    assert done == [report]


def test_one_request_per_app_even_if_still_running(no_sleep):
    _, sleep = no_sleep
    executor = FakeExecutor({"A"}, {"A": QuitOutcome.FAILED})
    run(TerminationDriver(sleep=sleep), ["A"], executor)
    assert executor.quit_requests() == ["A"]


def test_delay_between_attempts(no_sleep):
    slept, sleep = no_sleep
    run(TerminationDriver(delay_ms=250, sleep=sleep), ["A", "B"], FakeExecutor({"A", "B"}))
    assert slept == [0.25, 0.25]


def test_zero_delay_never_sleeps(no_sleep):
    slept, sleep = no_sleep
    run(TerminationDriver(delay_ms=0, sleep=sleep), ["A", "B"], FakeExecutor({"A", "B"}))
    assert slept == []


def test_progress_emitted_before_attempt(no_sleep):
    _, sleep = no_sleep
    executor = FakeExecutor({"A"})
    seen = []
    TerminationDriver(sleep=sleep).run(["A"], executor, on_progress=lambda *a: seen.append(list(executor.calls)))
    assert seen == [[]]


def test_broken_progress_callback_is_tolerated(no_sleep):
    _, sleep = no_sleep
    executor = FakeExecutor({"A", "B"})

    def bad(*_):
        raise ValueError("ui went away")

    report = TerminationDriver(sleep=sleep).run(["A", "B"], executor, on_progress=bad)
    assert report.closed == 2


def test_iter_close_event_order(no_sleep):
    _, sleep = no_sleep
    events = list(TerminationDriver(sleep=sleep).iter_close(["A", "B"], FakeExecutor({"A"})))
    assert events[0] == CloseProgress(1, 2, "A")
    assert isinstance(events[1], CloseResult) and events[1].name == "A"
    assert events[2] == CloseProgress(2, 2, "B")
    assert events[3].skipped


def test_closing_iterator_stops_run(no_sleep):
    _, sleep = no_sleep
    executor = FakeExecutor({"A", "B"})
    events = TerminationDriver(sleep=sleep).iter_close(["A", "B"], executor)
    next(events)
    next(events)
    events.close()
    assert executor.quit_requests() == ["A"]


def test_progress_message():
    assert CloseProgress(2, 5, "Mail").message() == "Closing app 2 of 5: Mail"
