"""Tests for catalog loading and generation."""

import json

import pytest

from prompt_selector.catalog import (
    CatalogError,
    CatalogMissingError,
    Category,
    ensure_catalog,
    generate_catalog,
    load_catalog,
    parse_catalog,
    parse_markdown,
)

MARKDOWN = """\
Intro text that belongs to no category.

# Writing

- Summarize the text
  in three bullets.
- Rewrite this for a child.

## Coding ##

1. Review this function.
2) Write unit tests.

### Learning

Explain this concept
step by step.

Create a study plan.

## Empty

"""


def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_load_catalog(tmp_path):
    path = write_json(tmp_path / "prompts.json", [
        {"name": "Writing", "prompts": ["a", "b"]},
        {"name": "Coding", "prompts": []},
    ])

    catalog = load_catalog(path)

    assert catalog == (Category("Writing", ("a", "b")), Category("Coding", ()))


def test_category_is_immutable():
    category = Category("Writing", ("a",))
    with pytest.raises(AttributeError):
        category.name = "Other"


def test_missing_file(tmp_path):
    with pytest.raises(CatalogMissingError):
        load_catalog(tmp_path / "nope.json")


def test_invalid_json(tmp_path):
    path = tmp_path / "prompts.json"
    path.write_text("[{", encoding="utf-8")
    with pytest.raises(CatalogError, match="not valid JSON"):
        load_catalog(path)


def test_catalog_that_is_not_utf8(tmp_path):
    path = tmp_path / "prompts.json"
    path.write_bytes(b"\xff\xfe")
    with pytest.raises(CatalogError, match="Cannot read catalog file"):
        load_catalog(path)


def test_catalog_path_is_a_directory(tmp_path):
    path = tmp_path / "prompts.json"
    path.mkdir()
    with pytest.raises(CatalogError, match="Cannot read catalog file"):
        load_catalog(path)


@pytest.mark.parametrize(
    "data,match",
    [
        ({"name": "x"}, "must be a list"),
        (["x"], "Category #1"),
        ([{"prompts": []}], "Category #1"),
        ([{"name": "ok", "prompts": []}, {"name": "x", "prompts": "abc"}], "Category #2"),
        ([{"name": "x", "prompts": ["fine", 3]}], "Prompt #2 in category 'x'"),
    ],
)
def test_invalid_shapes(data, match):
    with pytest.raises(CatalogError, match=match):
        parse_catalog(data)


def test_missing_error_is_a_catalog_error():
    assert issubclass(CatalogMissingError, CatalogError)


def test_parse_markdown():
    catalog = parse_markdown(MARKDOWN)

    assert catalog == (
        Category("Writing", ("Summarize the text in three bullets.", "Rewrite this for a child.")),
        Category("Coding", ("Review this function.", "Write unit tests.")),
        Category("Learning", ("Explain this concept step by step.", "Create a study plan.")),
    )


def test_parse_markdown_without_headings():
    assert parse_markdown("just some text\n\n- and a list") == ()


def test_generate_catalog_writes_json(tmp_path):
    source = tmp_path / "prompts.md"
    source.write_text(MARKDOWN, encoding="utf-8")
    destination = tmp_path / "out" / "prompts.json"

    catalog = generate_catalog(source, destination)

    data = json.loads(destination.read_text(encoding="utf-8"))
    assert [entry["name"] for entry in data] == ["Writing", "Coding", "Learning"]
    assert load_catalog(destination) == catalog


def test_generate_catalog_without_source(tmp_path):
    with pytest.raises(CatalogMissingError, match="source not found"):
        generate_catalog(tmp_path / "prompts.md", tmp_path / "prompts.json")


def test_ensure_catalog_prefers_existing_file(tmp_path):
    path = write_json(tmp_path / "prompts.json", [{"name": "Existing", "prompts": ["a"]}])
    source = tmp_path / "prompts.md"
    source.write_text(MARKDOWN, encoding="utf-8")

    assert ensure_catalog(path, source) == (Category("Existing", ("a",)),)


def test_ensure_catalog_generates_once(tmp_path):
    source = tmp_path / "prompts.md"
    source.write_text(MARKDOWN, encoding="utf-8")
    path = tmp_path / "prompts.json"

    catalog = ensure_catalog(path, source)

    assert path.exists()
    assert [category.name for category in catalog] == ["Writing", "Coding", "Learning"]


def test_ensure_catalog_fails_without_source(tmp_path):
    with pytest.raises(CatalogMissingError):
        ensure_catalog(tmp_path / "prompts.json", tmp_path / "prompts.md")


def test_ensure_catalog_reports_invalid_existing_file(tmp_path):
    path = tmp_path / "prompts.json"
    path.write_text("{}", encoding="utf-8")
    with pytest.raises(CatalogError):
        ensure_catalog(path, tmp_path / "prompts.md")


def test_ensure_catalog_with_undecodable_source(tmp_path):
    source = tmp_path / "prompts.md"
    source.write_bytes(b"# Writing\n\n- Summarize \xff this.\n")
    with pytest.raises(CatalogMissingError, match="Could not generate"):
        ensure_catalog(tmp_path / "prompts.json", source)
    assert not (tmp_path / "prompts.json").exists()
