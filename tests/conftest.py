"""Pytest configuration for safeinput-toolkit tests."""

import logging
from io import StringIO

import pytest
from rich.console import Console

from safeinput_toolkit.logging_setup import JsonlHandler


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep log output and settings lookups inside the test's temp directory."""
    monkeypatch.setenv("SAFEINPUT_LOG_PATH", str(tmp_path / "safeinput.log.jsonl"))
    monkeypatch.delenv("SAFEINPUT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("SAFEINPUT_OUTPUT_DIR", raising=False)
    monkeypatch.delenv("SAFEINPUT_START_DIR", raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, JsonlHandler):
            root.removeHandler(handler)
            handler.close()


@pytest.fixture
def recording_console():
    """A plain-text console plus the buffer it writes to."""
    buf = StringIO()
    return Console(file=buf, force_terminal=False, no_color=True, width=200), buf


@pytest.fixture
def feed():
    """Build an input stream that yields each given line followed by a newline."""

    def _feed(*lines: str) -> StringIO:
        return StringIO("".join(line + "\n" for line in lines))

    return _feed
