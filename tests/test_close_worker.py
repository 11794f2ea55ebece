from PySide6.QtCore import Qt

from appcloser.close_worker import CloseWorker
from appcloser.models import CloseReport, CloseResult, QuitOutcome


class StubState:
    def __init__(self, names=(), error=None, complete=True):
        self.names = list(names)
        self.error = error
        self.complete = complete
        self.is_closing = False

    def run_close(self, on_progress=None, on_complete=None):
        report = CloseReport()
        for i, name in enumerate(self.names, start=1):
            on_progress(i, len(self.names), name)
            report.results.append(CloseResult(name, QuitOutcome.ACKNOWLEDGED))
        if self.error is not None:
            raise self.error
        if self.complete:
            on_complete(report)
        return report


def connect(worker):
    progress, finished = [], []
    worker.signals.progress.connect(lambda *a: progress.append(a), Qt.DirectConnection)
    worker.signals.finished.connect(finished.append, Qt.DirectConnection)
    return progress, finished


def test_finished_emitted_once_with_report():
    worker = CloseWorker(StubState(["Mail", "Notes"]))
    progress, finished = connect(worker)
    worker._work()
    assert progress == [(1, 2, "Mail"), (2, 2, "Notes")]
    assert len(finished) == 1
    assert finished[0].closed == 2


def test_crashed_run_still_finishes():
    worker = CloseWorker(StubState(["Mail"], error=RuntimeError("boom")))
    _, finished = connect(worker)
    worker._work()
    assert len(finished) == 1
    assert finished[0].total == 0


def test_missing_completion_gets_empty_report():
    worker = CloseWorker(StubState(["Mail"], complete=False))
    _, finished = connect(worker)
    worker._work()
    assert len(finished) == 1
    assert isinstance(finished[0], CloseReport)
    assert finished[0].total == 0


def test_start_runs_on_background_thread():
    state = StubState(["Mail"])
    worker = CloseWorker(state)
    _, finished = connect(worker)
    assert worker.start() is True
    assert state.is_closing is True
    worker._thread.join(timeout=5)
    assert not worker.is_running()
    assert len(finished) == 1
