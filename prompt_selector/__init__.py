"""
Prompt Selector
---------------
Curses-based browser for a two-level prompt catalog with clipboard copy.

This package can be executed directly via:
    python3 -m prompt_selector
or imported for custom front-ends:
    from prompt_selector.menu_app import PromptSelectorApp
"""

__version__ = "1.0.0"

from .menu_app import PromptSelectorApp
