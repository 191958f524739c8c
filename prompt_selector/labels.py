"""
User-facing strings for the prompt selector.

Centralizing them here keeps the renderer and the app free of literal text.
"""

# Titles and headers
TITLE = "PROMPT SELECTOR"
CATEGORY_HEADER = "Select a category:"
PROMPT_TITLE = "» {}"

# Placeholders
MSG_NO_CATEGORIES = "No categories found"
MSG_TERMINAL_TOO_SMALL = "Terminal too small!"
MSG_RESIZE_CONTINUE = "Please resize to continue"

# Scroll indicators
MORE_CATEGORIES_ABOVE = "↑ More categories above..."
MORE_CATEGORIES_BELOW = "↓ More categories below..."
MORE_PROMPTS_ABOVE = "↑ More prompts above..."
MORE_PROMPTS_BELOW = "↓ More prompts below..."

# Footer hints as (label, key) pairs
CATEGORY_HINTS = (
    ("Navigation", "↑↓"),
    ("Page", "PgUp/PgDn"),
    ("Jump", "Home/End"),
    ("Select", "Enter"),
)
PROMPT_HINTS = (
    ("Navigation", "↑↓"),
    ("Page", "PgUp/PgDn"),
    ("Jump", "Home/End"),
    ("Copy", "c"),
    ("Back", "←"),
)
EXIT_HINT = ("Exit", "q", "Ctrl+C")

# Copy banner
MSG_COPY_SUCCESS = "✓ Prompt copied to clipboard!"
MSG_COPY_FAILED = "✗ Failed to copy: {}"

# Clipboard errors
ERR_COMMAND_NOT_FOUND = "Clipboard command not found: {}"
ERR_COMMAND_FAILED = "Clipboard command '{}' failed with exit code {}: {}"
ERR_COMMAND_TIMEOUT = "Clipboard command '{}' timed out after {}s"

# Catalog errors
MSG_CATALOG_GENERATING = "{} not found. Generating it from {}..."
ERR_CATALOG_NOT_FOUND = "Catalog file not found: {}"
ERR_CATALOG_INVALID_JSON = "Catalog file is not valid JSON: {}"
ERR_CATALOG_UNREADABLE = "Cannot read catalog file {}: {}"
ERR_CATALOG_NOT_A_LIST = "Catalog must be a list of categories"
ERR_CATEGORY_INVALID = "Category #{} must be an object with a 'name' string and a 'prompts' list"
ERR_PROMPT_INVALID = "Prompt #{} in category '{}' must be a string"
ERR_SOURCE_NOT_FOUND = "Catalog source not found: {}"
ERR_GENERATION_FAILED = "Could not generate the catalog from {}: {}"

# Config errors
ERR_CONFIG_INVALID_JSON = "Configuration file is not valid JSON: {}"
ERR_CONFIG_NOT_FOUND = "Configuration file not found: {}"
ERR_CONFIG_UNREADABLE = "Cannot read configuration file {}: {}"

# Console prefixes
ERROR_PREFIX = "[ERROR] {}"

# Command line
CLI_DESCRIPTION = "Browse a prompt catalog in the terminal and copy prompts to the clipboard."
CLI_CATALOG_HELP = "JSON catalog file (default: prompts.json)"
CLI_SOURCE_HELP = "Markdown source used to generate the catalog when it is missing (default: prompts.md)"
CLI_CONFIG_HELP = "Settings file (default: ~/.prompt_selector.json when present)"
CLI_VISIBLE_HELP = "Number of items visible at once (default: 10)"
CLI_DEBUG_HELP = "Write debug records to the log file"
