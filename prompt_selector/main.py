#!/usr/bin/env python3
"""
Prompt Selector - command line entrypoint.

Reads settings, sets up logging, loads (or generates) the catalog and starts
the curses browser.
"""

import argparse
import sys

import prompt_selector.labels as LABELS
from prompt_selector import __version__
from prompt_selector.catalog import CatalogError, ensure_catalog
from prompt_selector.clipboard import select_clipboard_writer
from prompt_selector.config import Config, ConfigError
from prompt_selector.logger import Logger
from prompt_selector.menu_app import PromptSelectorApp
from prompt_selector.renderer import Layout

log = Logger().setup_logger('Main')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="prompt-selector", description=LABELS.CLI_DESCRIPTION)
    parser.add_argument("--catalog", help=LABELS.CLI_CATALOG_HELP)
    parser.add_argument("--source", help=LABELS.CLI_SOURCE_HELP)
    parser.add_argument("--config", help=LABELS.CLI_CONFIG_HELP)
    parser.add_argument("--visible-items", type=int, help=LABELS.CLI_VISIBLE_HELP)
    parser.add_argument("--debug", action="store_true", help=LABELS.CLI_DEBUG_HELP)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_config(args: argparse.Namespace) -> Config:
    """Settings file values with command-line flags applied on top."""
    config = Config(args.config)
    config.set(Config.CATALOG_PATH, args.catalog)
    config.set(Config.CATALOG_SOURCE, args.source)
    config.set(Config.LAYOUT_VISIBLE_ITEMS, args.visible_items)
    return config


def build_app(config: Config) -> PromptSelectorApp:
    catalog = ensure_catalog(config.get(Config.CATALOG_PATH), config.get(Config.CATALOG_SOURCE))
    layout = Layout(
        visible_items=config.get_int(Config.LAYOUT_VISIBLE_ITEMS),
        category_width=config.get_int(Config.LAYOUT_CATEGORY_WIDTH),
        prompt_width=config.get_int(Config.LAYOUT_PROMPT_WIDTH),
    )
    clipboard = select_clipboard_writer(command=config.get(Config.CLIPBOARD_COMMAND))
    log.info('Using %r, layout %s', clipboard, layout)
    return PromptSelectorApp(
        catalog,
        clipboard,
        layout=layout,
        banner_delay_ms=config.get_int(Config.BANNER_DELAY_MS, minimum=0),
    )


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args)
        log_file = Logger().configure(config.get(Config.LOGGING_FOLDER), debug=args.debug)
        log.info('Logging to %s', log_file)
        app = build_app(config)
    except (ConfigError, CatalogError) as e:
        log.error('Startup failed: %s', e)
        print(LABELS.ERROR_PREFIX.format(e), file=sys.stderr)
        return 1

    try:
        app.run()
    except KeyboardInterrupt:
        log.info('Interrupted')
    return 0


if __name__ == "__main__":
    sys.exit(main())
