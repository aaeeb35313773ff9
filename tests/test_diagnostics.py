from rich.console import Console

from emitter import Emitter, EmitterConfig
from emitter.diagnostics import describe, render_table, run_checklist
from emitter.testing import EventNameFactory


def test_describe_counts_listeners(emitter):
    emitter.on("foo", print).once("foo", print).once("bar", len)
    assert describe(emitter) == {
        "foo": {"listeners": 2, "once": 1},
        "bar": {"listeners": 1, "once": 1},
    }


def test_render_table_prints_events(emitter):
    emitter.on("ready", print)
    console = Console(record=True, width=80)
    table = render_table(emitter, console)

    assert table.row_count == 1
    assert "ready" in console.export_text()


def test_checklist_reports_empty_emitter(emitter):
    issues = run_checklist(emitter)
    assert [issue.severity for issue in issues] == ["info"]


def test_checklist_flags_duplicates_and_threshold():
    emitter = Emitter(EmitterConfig(warn_threshold=2))
    emitter.on("foo", print).once("foo", print).on("foo", len)
    emitter.on("bar", len)

    messages = [issue.message for issue in run_checklist(emitter)]
    assert len(messages) == 2
    assert any("above threshold" in message for message in messages)
    assert any("more than once" in message for message in messages)


def test_event_name_factory_builds_unique_names():
    names = list(EventNameFactory().batch(20))
    assert len(set(names)) == 20

    emitter = Emitter()
    for name in names:
        emitter.on(name, print)
    assert sorted(emitter.event_names()) == sorted(names)
