"""Tests for the output sinks: TerminalOutput, LogfileOutput and OutputTee."""
from __future__ import annotations

import io

import pytest

from apptools.logfile import LogfileOutput
from apptools.output import OutputIface, OutputTee
from apptools.terminal import TerminalOutput


class RecordingOutput(OutputIface):
    """Collects (method, args) tuples."""

    def __init__(self):
        self.calls = []

    def error(self, message):
        self.calls.append(("error", message))

    def warning(self, message):
        self.calls.append(("warning", message))

    def info(self, message, path=None):
        self.calls.append(("info", message, path))

    def highlight(self, message):
        self.calls.append(("highlight", message))

    def write(self, message):
        self.calls.append(("write", message))


# ─────────────────────────────────────────────────────────────────────────────
# OutputIface
# ─────────────────────────────────────────────────────────────────────────────

def test_output_iface_is_abstract():
    with pytest.raises(TypeError):
        OutputIface()


# ─────────────────────────────────────────────────────────────────────────────
# TerminalOutput
# ─────────────────────────────────────────────────────────────────────────────

def test_terminal_splits_streams(terminal):
    terminal.info("Copying", "/tmp/x")
    terminal.highlight("Done")
    terminal.write("raw")
    terminal.warning("careful")
    terminal.error("boom")

    out = terminal.stream.getvalue()
    err = terminal.err_stream.getvalue()
    assert "Copying /tmp/x" in out
    assert "Done" in out
    assert out.endswith("raw")
    assert "careful" in err
    assert "boom" in err
    assert "boom" not in out


def test_terminal_quiet_keeps_errors_only():
    out, err = io.StringIO(), io.StringIO()
    t = TerminalOutput(stream=out, err_stream=err, quiet=True)
    t.info("hidden")
    t.highlight("hidden")
    t.write("hidden")
    t.warning("hidden")
    t.error("shown")
    assert out.getvalue() == ""
    assert "shown" in err.getvalue()
    assert "hidden" not in err.getvalue()


def test_terminal_singleton():
    first = TerminalOutput.get_instance()
    assert TerminalOutput.get_instance() is first
    TerminalOutput.reset_instance()
    assert TerminalOutput.get_instance() is not first


def test_terminal_default_streams_follow_sys(capsys):
    TerminalOutput.get_instance().info("hello")
    TerminalOutput.get_instance().error("oops")
    captured = capsys.readouterr()
    assert "hello" in captured.out
    assert "oops" in captured.err


# ─────────────────────────────────────────────────────────────────────────────
# LogfileOutput
# ─────────────────────────────────────────────────────────────────────────────

def test_logfile_appends_lines(tmp_path):
    path = tmp_path / "build.log"
    sink = LogfileOutput(path)
    assert sink.path == path
    assert not path.exists()   # nothing is written until the first message

    sink.info("one")
    sink.warning("two")
    sink.error("three")
    sink.highlight("four")
    sink.info("five", "/some/path")
    sink.write("six")

    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 6
    for word, line in zip(["one", "two", "three", "four", "five", "six"], lines):
        assert word in line
    assert "/some/path" in lines[4]


def test_logfile_appends_to_existing_content(tmp_path):
    path = tmp_path / "build.log"
    path.write_text("existing\n", encoding="utf-8")
    LogfileOutput(str(path)).info("more")
    assert path.read_text(encoding="utf-8").startswith("existing\n")


def test_logfile_handles_unicode(tmp_path):
    sink = LogfileOutput(tmp_path / "u.log")
    sink.info("✓ built")
    assert "✓ built" in (tmp_path / "u.log").read_text(encoding="utf-8")


# ─────────────────────────────────────────────────────────────────────────────
# OutputTee
# ─────────────────────────────────────────────────────────────────────────────

def test_tee_forwards_every_call_to_both():
    term, log = RecordingOutput(), RecordingOutput()
    tee = OutputTee(log, term)
    tee.error("e")
    tee.warning("w")
    tee.info("i", "p")
    tee.highlight("h")
    tee.write("x")
    expected = [("error", "e"), ("warning", "w"), ("info", "i", "p"),
                ("highlight", "h"), ("write", "x")]
    assert term.calls == expected
    assert log.calls == expected


def test_tee_swaps_logfile_but_keeps_terminal():
    term, first, second = RecordingOutput(), RecordingOutput(), RecordingOutput()
    tee = OutputTee(first, term)
    tee.info("a")
    tee.logfile_output = second
    tee.info("b")
    assert tee.logfile_output is second
    assert tee.terminal_output is term
    assert first.calls == [("info", "a", None)]
    assert second.calls == [("info", "b", None)]
    assert len(term.calls) == 2


def test_tee_terminal_is_read_only():
    tee = OutputTee(RecordingOutput(), RecordingOutput())
    with pytest.raises(AttributeError):
        tee.terminal_output = RecordingOutput()
