"""Tests for the clipboard adapter."""

import subprocess

import pyperclip
import pytest

from prompt_selector import clipboard as clipboard_module
from prompt_selector.clipboard import (
    ClipboardError,
    ClipboardWriter,
    CommandClipboardWriter,
    PyperclipClipboardWriter,
    select_clipboard_writer,
)


@pytest.fixture
def pyperclip_calls(monkeypatch):
    calls = []
    monkeypatch.setattr(clipboard_module.pyperclip, "copy", calls.append)
    return calls


@pytest.fixture
def run_calls(monkeypatch):
    calls = []

    def fake_run(command, **kwargs):
        calls.append((command, kwargs))
        return subprocess.CompletedProcess(command, 0, b"", b"")

    monkeypatch.setattr(clipboard_module.subprocess, "run", fake_run)
    return calls


def failing(exc):
    def fake(*args, **kwargs):
        raise exc

    return fake


def test_pyperclip_writer_copies_text(pyperclip_calls):
    PyperclipClipboardWriter().copy("Hello ✓")
    assert pyperclip_calls == ["Hello ✓"]


def test_pyperclip_failure_becomes_clipboard_error(monkeypatch):
    error = pyperclip.PyperclipException("Pyperclip could not find a copy/paste mechanism for your system.")
    monkeypatch.setattr(clipboard_module.pyperclip, "copy", failing(error))

    with pytest.raises(ClipboardError, match="copy/paste mechanism") as excinfo:
        PyperclipClipboardWriter().copy("Hello")

    assert excinfo.value.__cause__ is error


def test_copy_pipes_text_to_command(run_calls):
    CommandClipboardWriter(["pbcopy"]).copy("Hello ✓")

    command, kwargs = run_calls[0]
    assert command == ("pbcopy",)
    assert kwargs["input"] == "Hello ✓".encode("utf-8")
    assert kwargs["check"] is True
    assert kwargs["timeout"] > 0


def test_failed_command_carries_stderr(monkeypatch):
    error = subprocess.CalledProcessError(1, ["xclip"], stderr=b"Error: Can't open display: (null)\n")
    monkeypatch.setattr(clipboard_module.subprocess, "run", failing(error))

    with pytest.raises(ClipboardError) as excinfo:
        CommandClipboardWriter(["xclip", "-selection", "clipboard"]).copy("Hello")

    message = str(excinfo.value)
    assert "xclip" in message
    assert "exit code 1" in message
    assert "Can't open display" in message


def test_missing_command(monkeypatch):
    monkeypatch.setattr(clipboard_module.subprocess, "run", failing(FileNotFoundError("xsel")))

    with pytest.raises(ClipboardError, match="not found: xsel"):
        CommandClipboardWriter(["xsel", "--clipboard", "--input"]).copy("Hello")


def test_timeout(monkeypatch):
    monkeypatch.setattr(clipboard_module.subprocess, "run", failing(subprocess.TimeoutExpired("wl-copy", 5)))

    with pytest.raises(ClipboardError, match="timed out"):
        CommandClipboardWriter(["wl-copy"], timeout=5).copy("Hello")


def test_other_os_errors_are_wrapped(monkeypatch):
    monkeypatch.setattr(clipboard_module.subprocess, "run", failing(PermissionError("denied")))

    with pytest.raises(ClipboardError, match="denied"):
        CommandClipboardWriter(["clip"]).copy("Hello")


def test_empty_command_is_rejected():
    with pytest.raises(ValueError):
        CommandClipboardWriter([])


def test_base_writer_is_abstract():
    with pytest.raises(TypeError):
        ClipboardWriter()


def test_default_writer_is_pyperclip():
    assert isinstance(select_clipboard_writer(), PyperclipClipboardWriter)
    assert isinstance(select_clipboard_writer(""), PyperclipClipboardWriter)


def test_configured_command_is_used_instead():
    assert select_clipboard_writer("xsel --clipboard --input").command == ("xsel", "--clipboard", "--input")
    assert select_clipboard_writer(["wl-copy", "-n"]).command == ("wl-copy", "-n")
