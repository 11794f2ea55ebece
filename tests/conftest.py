from typing import Dict, List, Set

import pytest

from appcloser.models import Classification, ProcessHandle, QuitOutcome


def handle(name, classification=Classification.REGULAR, exe=None, pid=None):
    return ProcessHandle(
        name=name,
        classification=classification,
        icon_ref=exe,
        executable_identity=exe,
        pid=pid,
    )


class FakeExecutor:
    """Records calls; `running` is the live set, `outcomes` maps name -> outcome."""

    def __init__(self, running: Set[str], outcomes: Dict[str, QuitOutcome] = None):
        self.running = set(running)
        self.outcomes = outcomes or {}
        self.calls: List[tuple] = []

    def is_still_running(self, name):
        self.calls.append(("alive", name))
        return name in self.running

    def request_quit(self, name):
        self.calls.append(("quit", name))
        outcome = self.outcomes.get(name, QuitOutcome.ACKNOWLEDGED)
        if outcome == QuitOutcome.ACKNOWLEDGED:
            self.running.discard(name)
        return outcome

    def quit_requests(self):
        return [n for kind, n in self.calls if kind == "quit"]


@pytest.fixture
def no_sleep():
    slept = []
    return slept, slept.append
