import pytest

from prompt_selector.catalog import Category
from prompt_selector.clipboard import ClipboardError, ClipboardWriter
from prompt_selector.logger import Logger


@pytest.fixture(autouse=True, scope="session")
def log_to_tmp(tmp_path_factory):
    """Send log records to a throwaway folder instead of the home directory."""
    Logger().configure(tmp_path_factory.mktemp("logs"), debug=True)


@pytest.fixture(autouse=True)
def no_user_config(tmp_path, monkeypatch):
    """Keep a real ~/.prompt_selector.json from leaking into tests."""
    monkeypatch.setattr("prompt_selector.config.DEFAULT_CONFIG_PATH", tmp_path / "missing.json")


@pytest.fixture
def catalog():
    """Three categories; the second one holds twelve prompts."""
    return (
        Category("Writing", ("Summarize this text.", "Rewrite this for a child.")),
        Category("Coding", tuple(f"Coding prompt number {i + 1}" for i in range(12))),
        Category("Learning", ("Explain this concept.",)),
    )


@pytest.fixture
def long_catalog():
    return tuple(Category(f"Category {i + 1}", (f"Prompt {i + 1}",)) for i in range(25))


class FakeClipboard(ClipboardWriter):
    def __init__(self, fail_with=None):
        self.copied = []
        self.fail_with = fail_with

    def copy(self, text):
        if self.fail_with:
            raise ClipboardError(self.fail_with)
        self.copied.append(text)


@pytest.fixture
def clipboard():
    return FakeClipboard()


@pytest.fixture
def broken_clipboard():
    return FakeClipboard(fail_with="xclip: Error: Can't open display: (null)")
