"""Tests for the console wrapper."""

import io

from wordsampler.sampler import SourceDiagnostic
from wordsampler.ui import Console


def test_info_suppressed_when_quiet():
    buf = io.StringIO()
    Console(quiet=True).info("hello", file=buf)
    assert buf.getvalue() == ""


def test_error_shown_when_quiet():
    buf = io.StringIO()
    Console(quiet=True).error("boom", file=buf)
    assert "boom" in buf.getvalue()


def test_debug_only_when_verbose():
    buf = io.StringIO()
    Console().debug("hidden", file=buf)
    Console(verbose=True).debug("shown", file=buf)
    assert buf.getvalue() == "shown\n"


def test_diagnostics_rendering():
    buf = io.StringIO()
    diags = [
        SourceDiagnostic(9, "/d/9.txt", "missing", "Dictionary file not found: 9.txt"),
        SourceDiagnostic("all", "/d/all.txt", "read_error", "Error reading dictionary file all.txt: denied"),
    ]
    Console().diagnostics(diags, file=buf)
    lines = buf.getvalue().splitlines()
    assert lines == [
        "warning: Dictionary file not found: 9.txt",
        "error: Error reading dictionary file all.txt: denied",
    ]


def test_quiet_diagnostics_keep_read_errors():
    buf = io.StringIO()
    diags = [
        SourceDiagnostic(9, "/d/9.txt", "missing", "missing 9"),
        SourceDiagnostic(5, "/d/5.txt", "read_error", "bad 5"),
    ]
    Console(quiet=True).diagnostics(diags, file=buf)
    assert buf.getvalue() == "error: bad 5\n"
