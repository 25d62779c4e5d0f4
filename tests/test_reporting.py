import io
import json

from rich.console import Console

from dvplconv.logging import configure_logging, get_logger
from dvplconv.reporting import (
    JsonLinesReporter,
    PlainReporter,
    RichReporter,
    SilentReporter,
    TaskStatus,
    make_reporter,
    set_reporter,
    set_verbosity,
    task,
)


def test_plain_reporter_task_line():
    buf = io.StringIO()
    rep = PlainReporter(stream=buf, use_color=False)
    rep.start_task("t", "Compress files", total=2)
    rep.advance("t", current_item="a.txt")
    rep.advance("t", current_item="b.txt")
    rep.end_task("t", TaskStatus.SUCCESS, processed=2, failed=0)
    out = buf.getvalue()
    assert "✔ Compress files 2/2" in out
    assert "[processed=2 failed=0]" in out


def test_plain_reporter_verbose_gating():
    buf = io.StringIO()
    rep = PlainReporter(stream=buf, use_color=False)
    set_verbosity(0)
    rep.verbose("hidden")
    set_verbosity(1)
    rep.verbose("shown")
    set_verbosity(0)
    assert "hidden" not in buf.getvalue()
    assert "VERB1: shown" in buf.getvalue()


def test_jsonl_summary_event():
    buf = io.StringIO()
    rep = JsonLinesReporter(stream=buf)
    rep.status("Convert summary: mode=compress processed=3 failed=0")
    events = [json.loads(line) for line in buf.getvalue().splitlines()]
    assert events[0]["event"] == "summary"
    assert events[0]["summary_type"] == "convert"
    assert events[0]["processed"] == "3"
    assert events[1]["event"] == "status"


def test_task_context_marks_failure():
    buf = io.StringIO()
    set_reporter(JsonLinesReporter(stream=buf))
    try:
        with task("boom", "Exploding task", total=1):
            raise RuntimeError("boom")
    except RuntimeError:
        pass
    events = [json.loads(line) for line in buf.getvalue().splitlines()]
    assert events[-1]["event"] == "task_end"
    assert events[-1]["status"] == "failed"


def test_task_context_custom_status():
    buf = io.StringIO()
    set_reporter(JsonLinesReporter(stream=buf))
    with task("t", "Partial", total=1) as final:
        final.update(failed=1, status=TaskStatus.FAILED)
    end = json.loads(buf.getvalue().splitlines()[-1])
    assert end["status"] == "failed"
    assert end["failed"] == 1


def test_rich_reporter_prints_completion():
    console = Console(file=io.StringIO(), force_terminal=False, width=120)
    rep = RichReporter(console=console)
    rep.start_task("t", "Decompress files", total=1)
    rep.advance("t", current_item="x.dvpl")
    rep.end_task("t", TaskStatus.SUCCESS, processed=1)
    rep.error("bad [thing]")
    rep.flush()
    out = console.file.getvalue()
    assert "Decompress files 1/1" in out
    assert "processed=1" in out
    assert "bad [thing]" in out


def test_logging_routes_to_reporter():
    buf = io.StringIO()
    set_reporter(PlainReporter(stream=buf, use_color=False))
    configure_logging(0)
    get_logger().info("hello %s", "world")
    get_logger().error("broken")
    get_logger().debug("quiet")
    out = buf.getvalue()
    assert "INFO: hello world" in out
    assert "ERROR: broken" in out
    assert "quiet" not in out
    set_reporter(SilentReporter())


def test_make_reporter_choices():
    assert isinstance(make_reporter("json"), JsonLinesReporter)
    assert isinstance(make_reporter("silent"), SilentReporter)
    assert isinstance(make_reporter("plain"), PlainReporter)
