"""
Catalog loading for the prompt selector.

A catalog is an ordered tuple of categories, each holding an ordered tuple of
prompt strings. It is stored as JSON:

[
    { "name": "Writing", "prompts": ["Summarize this text...", "..."] },
    { "name": "Coding", "prompts": ["Review this function..."] }
]

When the JSON file is missing it is generated once from a Markdown source,
where every heading starts a category and every list item or paragraph below
it is one prompt.
"""

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple, Union

import prompt_selector.labels as LABELS
from prompt_selector.logger import Logger

log = Logger().setup_logger('Catalog')

HEADING_RE = re.compile(r'^\s{0,3}#{1,6}\s+(?P<text>.*?)\s*#*\s*$')
LIST_ITEM_RE = re.compile(r'^\s{0,3}(?:[-*+]|\d+[.)])\s+(?P<text>.*)$')


class CatalogError(Exception):
    """Raised when a catalog file exists but does not hold a valid catalog."""


class CatalogMissingError(CatalogError):
    """Raised when no catalog can be loaded or generated at startup."""


@dataclass(frozen=True)
class Category:
    name: str
    prompts: Tuple[str, ...] = ()


Catalog = Tuple[Category, ...]


def parse_catalog(data) -> Catalog:
    """Validate decoded JSON and build the catalog from it."""
    if not isinstance(data, list):
        raise CatalogError(LABELS.ERR_CATALOG_NOT_A_LIST)

    categories = []
    for index, entry in enumerate(data, start=1):
        if (
            not isinstance(entry, dict)
            or not isinstance(entry.get('name'), str)
            or not isinstance(entry.get('prompts', []), list)
        ):
            raise CatalogError(LABELS.ERR_CATEGORY_INVALID.format(index))

        prompts = entry.get('prompts', [])
        for prompt_index, prompt in enumerate(prompts, start=1):
            if not isinstance(prompt, str):
                raise CatalogError(LABELS.ERR_PROMPT_INVALID.format(prompt_index, entry['name']))

        categories.append(Category(entry['name'], tuple(prompts)))

    return tuple(categories)


def load_catalog(path: Union[str, Path]) -> Catalog:
    """Read a catalog from a JSON file.

    Raises:
        CatalogMissingError: The file does not exist.
        CatalogError: The file is unreadable, not valid JSON, or has the wrong shape.
    """
    path = Path(path)
    if not path.exists():
        raise CatalogMissingError(LABELS.ERR_CATALOG_NOT_FOUND.format(path))

    try:
        with open(path, encoding='utf-8') as json_file:
            data = json.load(json_file)
    except json.JSONDecodeError as e:
        raise CatalogError(LABELS.ERR_CATALOG_INVALID_JSON.format(e)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogError(LABELS.ERR_CATALOG_UNREADABLE.format(path, e)) from e

    catalog = parse_catalog(data)
    log.info('Loaded %d categories (%d prompts) from %s',
             len(catalog), sum(len(c.prompts) for c in catalog), path)
    return catalog


def parse_markdown(text: str) -> Catalog:
    """Turn a Markdown document into a catalog.

    Headings start categories. Below a heading, each list item or paragraph is
    one prompt; wrapped continuation lines are joined with single spaces.
    Text before the first heading and categories without prompts are dropped.
    """
    categories: List[Category] = []
    name: Optional[str] = None
    prompts: List[str] = []
    current: List[str] = []

    def flush_prompt():
        if current:
            prompts.append(' '.join(current))
            current.clear()

    def flush_category():
        flush_prompt()
        if name is not None and prompts:
            categories.append(Category(name, tuple(prompts)))
        prompts.clear()

    for raw_line in text.splitlines():
        heading = HEADING_RE.match(raw_line)
        if heading:
            flush_category()
            name = heading.group('text')
            continue

        if name is None:
            continue

        line = raw_line.strip()
        if not line:
            flush_prompt()
            continue

        item = LIST_ITEM_RE.match(raw_line)
        if item:
            flush_prompt()
            line = item.group('text').strip()

        if line:
            current.append(line)

    flush_category()
    return tuple(categories)


def generate_catalog(source: Union[str, Path], destination: Union[str, Path]) -> Catalog:
    """Convert the Markdown file at source into a JSON catalog at destination."""
    source = Path(source)
    destination = Path(destination)
    if not source.exists():
        raise CatalogMissingError(LABELS.ERR_SOURCE_NOT_FOUND.format(source))

    catalog = parse_markdown(source.read_text(encoding='utf-8'))
    data = [{'name': category.name, 'prompts': list(category.prompts)} for category in catalog]

    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(json.dumps(data, indent=2, ensure_ascii=False) + '\n', encoding='utf-8')
    log.info('Generated %s with %d categories from %s', destination, len(catalog), source)
    return catalog


def ensure_catalog(catalog_path: Union[str, Path], source_path: Union[str, Path]) -> Catalog:
    """Load the catalog, generating it from the Markdown source first if it is missing.

    Raises:
        CatalogMissingError: Neither the catalog nor its source could be used.
        CatalogError: The catalog file exists but is invalid.
    """
    catalog_path = Path(catalog_path)
    if not catalog_path.exists():
        log.warning(LABELS.MSG_CATALOG_GENERATING.format(catalog_path, source_path))
        try:
            generate_catalog(source_path, catalog_path)
        except (OSError, UnicodeDecodeError) as e:
            raise CatalogMissingError(LABELS.ERR_GENERATION_FAILED.format(source_path, e)) from e

    return load_catalog(catalog_path)
