"""Rich rendering of check and tune results."""

import io

from rich.console import Console

from hosttune.protocol.errors import ReadError
from hosttune.protocol.result import CheckResult, Severity, TuneResult
from hosttune.ui.console import ConsoleUI


def _ui(quiet=False):
    buffer = io.StringIO()
    return ConsoleUI(quiet=quiet, console=Console(file=buffer, width=200)), buffer


def test_check_table():
    ui, buffer = _ui()

    ui.print_check_results([
        CheckResult(name="syn_backlog", severity=Severity.WARNING, current=12, required=4096),
        CheckResult(name="listen_backlog", is_ok=True, current=4096, required=4096),
        CheckResult(name="broken", error=ReadError("Unable to read '/proc/x[0]'", path="/proc/x[0]")),
    ])

    out = buffer.getvalue()
    assert "syn_backlog" in out and "warning" in out
    assert "ok" in out
    assert "/proc/x[0]" in out


def test_tune_table_mentions_script():
    ui, buffer = _ui()

    ui.print_tune_results(
        [TuneResult(name="syn_backlog", changed=True), TuneResult(name="listen_backlog")],
        script_path="/tmp/tune.sh",
    )

    out = buffer.getvalue()
    assert "scripted" in out
    assert "unchanged" in out
    assert "/tmp/tune.sh" in out


def test_quiet_still_prints_errors():
    ui, buffer = _ui(quiet=True)

    ui.print_tune_results([TuneResult(name="syn_backlog", changed=True)])
    ui.print_error("boom")

    assert buffer.getvalue().strip() == "Error: boom"
