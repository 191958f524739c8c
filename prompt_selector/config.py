import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

import jmespath  # http://jmespath.org/tutorial.html

import prompt_selector.labels as LABELS
from prompt_selector.logger import Logger

log = Logger().setup_logger('Configuration')

DEFAULT_CONFIG_PATH = Path.home() / '.prompt_selector.json'


class ConfigError(Exception):
    """Raised when a configuration file exists but cannot be parsed."""


class Config:
    """
    Settings for the prompt selector, read from an optional JSON file.

    Usage examples:
        config = Config()
        visible = config.get(Config.LAYOUT_VISIBLE_ITEMS)
        command = config.get(Config.CLIPBOARD_COMMAND)

    Example file:
        {
            "catalog": {"path": "prompts.json", "source": "prompts.md"},
            "layout": {"visible_items": 8},
            "clipboard": {"command": "wl-copy"}
        }
    """

    CATALOG_PATH = 'catalog.path'
    CATALOG_SOURCE = 'catalog.source'
    LAYOUT_VISIBLE_ITEMS = 'layout.visible_items'
    LAYOUT_CATEGORY_WIDTH = 'layout.category_width'
    LAYOUT_PROMPT_WIDTH = 'layout.prompt_width'
    CLIPBOARD_COMMAND = 'clipboard.command'
    BANNER_DELAY_MS = 'banner.delay_ms'
    LOGGING_FOLDER = 'logging.folder'

    DEFAULTS: Dict[str, Any] = {
        CATALOG_PATH: 'prompts.json',
        CATALOG_SOURCE: 'prompts.md',
        LAYOUT_VISIBLE_ITEMS: 10,
        LAYOUT_CATEGORY_WIDTH: 70,
        LAYOUT_PROMPT_WIDTH: 100,
        CLIPBOARD_COMMAND: None,
        BANNER_DELAY_MS: 1500,
        LOGGING_FOLDER: None,
    }

    def __init__(self, path: Union[str, Path, None] = None):
        self.values: Dict[str, Any] = {}
        self.overrides: Dict[str, Any] = {}
        self.path: Optional[Path] = None
        self.load_config(path)

    def load_config(self, path: Union[str, Path, None] = None) -> None:
        """Load the JSON file at path, or the default file when it exists.

        An explicitly given path must exist; the default one is optional.
        """
        explicit = path is not None
        config_path = Path(path).expanduser() if explicit else DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if explicit:
                raise ConfigError(LABELS.ERR_CONFIG_NOT_FOUND.format(config_path))
            log.debug('No configuration file at %s, using defaults', config_path)
            return

        try:
            with open(config_path, encoding='utf-8') as json_file:
                values = json.load(json_file)
        except json.JSONDecodeError as e:
            raise ConfigError(LABELS.ERR_CONFIG_INVALID_JSON.format(e)) from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(LABELS.ERR_CONFIG_UNREADABLE.format(config_path, e)) from e

        if not isinstance(values, dict):
            raise ConfigError(LABELS.ERR_CONFIG_INVALID_JSON.format("top level must be an object"))

        self.values = values
        self.path = config_path
        log.info('Configuration loaded from %s, sections: %s', config_path, ', '.join(values.keys()))

    def set(self, key: str, value: Any) -> None:
        """Override a value for this run, typically from a command-line flag."""
        if value is not None:
            self.overrides[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        if key in self.overrides:
            return self.overrides[key]
        value = jmespath.search(key, self.values)
        if value is not None:
            return value
        if default is not None:
            return default
        return self.DEFAULTS.get(key)

    def get_int(self, key: str, minimum: int = 1) -> int:
        """Integer setting, falling back to the default when unusable."""
        value = self.get(key)
        try:
            number = int(value)
        except (TypeError, ValueError):
            log.warning('Invalid value %r for %s, using %s', value, key, self.DEFAULTS[key])
            number = int(self.DEFAULTS[key])
        return max(minimum, number)
