from appcloser.catalog import (
    AppCatalog,
    build_entries,
    selected_count,
    selected_names,
    set_all,
    set_one,
    toggle_one,
)
from appcloser.models import CatalogEntry, Classification
from appcloser.snapshot import ProcessSnapshotProvider

from conftest import handle

REG = Classification.REGULAR
ACC = Classification.ACCESSORY
OTH = Classification.OTHER


def names(entries):
    return [e.name for e in entries]


def test_sorted_case_insensitively():
    out = build_entries([handle("Zoom"), handle("TextEdit"), handle("activity monitor")], [], False)
    assert names(out) == ["activity monitor", "TextEdit", "Zoom"]


def test_other_never_listed():
    snap = [handle("Safari"), handle("mds", OTH), handle("Dropbox", ACC)]
    assert names(build_entries(snap, [], False)) == ["Safari"]
    assert names(build_entries(snap, [], True)) == ["Dropbox", "Safari"]


def test_default_selection_follows_classification():
    out = build_entries([handle("Safari"), handle("Dropbox", ACC)], [], True)
    flags = {e.name: e.should_close for e in out}
    assert flags == {"Dropbox": False, "Safari": True}


def test_protected_and_self_excluded():
    snap = [
        handle("Finder"),
        handle("finder"),
        handle("App Closer", exe="/opt/py", pid=42),
        handle("Notes"),
    ]
    out = build_entries(snap, [], True, protected=["Finder"], own_pid=42)
    assert names(out) == ["Notes"]


def test_same_executable_other_pid_is_listed():
    own_exe = "/usr/bin/python3"
    snap = [handle("Meld", exe=own_exe, pid=43), handle("App Closer", exe=own_exe, pid=42)]
    out = build_entries(snap, [], False, own_exe=own_exe, own_pid=42)
    assert names(out) == ["Meld"]


def test_frozen_exe_used_when_pid_unknown():
    snap = [handle("App Closer", exe="/Applications/AppCloser.app/Contents/MacOS/AppCloser"), handle("Notes")]
    out = build_entries(snap, [], False, own_exe="/Applications/AppCloser.app/Contents/MacOS/AppCloser", own_pid=42)
    assert names(out) == ["Notes"]


def test_selection_survives_refresh():
    previous = [CatalogEntry("Slack", REG, should_close=False), CatalogEntry("Mail", REG, should_close=True)]
    out = build_entries([handle("slack"), handle("Music")], previous, False)
    flags = {e.name: e.should_close for e in out}
    assert flags == {"Music": True, "slack": False}


def test_previous_true_kept_for_accessory():
    previous = [CatalogEntry("Dropbox", ACC, should_close=True)]
    out = build_entries([handle("Dropbox", ACC)], previous, True)
    assert out[0].should_close is True


def test_duplicate_names_last_seen_wins():
    out = build_entries([handle("Code", exe="/a"), handle("code", exe="/b")], [], False)
    assert len(out) == 1
    assert out[0].icon_ref == "/b"


def test_nameless_handles_dropped():
    assert build_entries([handle(""), handle("   ")], [], True) == []


def test_refresh_uses_fresh_snapshot():
    snaps = [[handle("A"), handle("B")], [handle("B"), handle("C")]]
    catalog = AppCatalog(ProcessSnapshotProvider(lambda: snaps.pop(0)), protected=[], own_exe="/x", own_pid=1)
    first = catalog.refresh([], False)
    first = set_one(first, "B", False)
    second = catalog.refresh(first, False)
    assert [(e.name, e.should_close) for e in second] == [("B", False), ("C", True)]


def test_refresh_with_failing_provider_is_empty():
    def boom():
        raise OSError("no process table")

    catalog = AppCatalog(ProcessSnapshotProvider(boom), protected=[], own_exe="/x", own_pid=1)
    assert catalog.refresh([CatalogEntry("A", REG, should_close=True)], True) == []


def test_set_all_is_idempotent_and_pure():
    entries = build_entries([handle("A"), handle("B", ACC)], [], True)
    once = set_all(entries, True)
    twice = set_all(once, True)
    assert once == twice
    assert selected_count(once) == 2
    assert [e.should_close for e in entries] == [True, False]


def test_toggle_and_selected_names():
    entries = build_entries([handle("A"), handle("B"), handle("C")], [], False)
    entries = toggle_one(entries, "b")
    assert selected_names(entries) == ["A", "C"]
    entries = toggle_one(entries, "B")
    assert selected_count(entries) == 3
