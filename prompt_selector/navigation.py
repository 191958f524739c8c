"""
Navigation state machine for the prompt selector.

The state is an immutable value. handle_key() maps one key event to the next
state plus the action the app has to perform (re-render, copy, quit).
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Sequence, Tuple

from prompt_selector.catalog import Category
from prompt_selector.logger import Logger

log = Logger().setup_logger('Navigation')


class View(Enum):
    CATEGORIES = "categories"
    PROMPTS = "prompts"


class Key(Enum):
    UP = "up"
    DOWN = "down"
    PAGE_UP = "pageup"
    PAGE_DOWN = "pagedown"
    HOME = "home"
    END = "end"
    ENTER = "return"
    BACKSPACE = "backspace"
    LEFT = "left"
    COPY = "c"
    QUIT = "q"
    RESIZE = "resize"


class Action(Enum):
    NONE = "none"
    RENDER = "render"
    COPY = "copy"
    QUIT = "quit"


@dataclass(frozen=True)
class NavigationState:
    view: View = View.CATEGORIES
    selected_category_index: int = 0
    selected_prompt_index: int = 0
    category_scroll_offset: int = 0
    prompt_scroll_offset: int = 0
    current_category: Optional[Category] = None


def clamp(value: int, lowest: int, highest: int) -> int:
    return max(lowest, min(value, highest))


def follow_selection(index: int, offset: int, count: int, visible_items: int) -> int:
    """Return the scroll offset that keeps index inside the visible window."""
    if index < offset:
        offset = index
    elif index >= offset + visible_items:
        offset = index - visible_items + 1
    return clamp(offset, 0, max(0, count - visible_items))


def _move(index: int, key: Key, count: int, visible_items: int) -> int:
    if key == Key.UP:
        index -= 1
    elif key == Key.DOWN:
        index += 1
    elif key == Key.PAGE_UP:
        index -= visible_items
    elif key == Key.PAGE_DOWN:
        index += visible_items
    elif key == Key.HOME:
        index = 0
    elif key == Key.END:
        index = count - 1
    return clamp(index, 0, max(0, count - 1))


MOVEMENT_KEYS = (Key.UP, Key.DOWN, Key.PAGE_UP, Key.PAGE_DOWN, Key.HOME, Key.END)


def _handle_categories(state: NavigationState, key: Key, catalog: Sequence[Category], visible_items: int):
    count = len(catalog)

    if key in MOVEMENT_KEYS:
        index = _move(state.selected_category_index, key, count, visible_items)
        offset = 0 if key == Key.HOME else state.category_scroll_offset
        offset = follow_selection(index, offset, count, visible_items)
        return replace(state, selected_category_index=index, category_scroll_offset=offset), Action.RENDER

    if key == Key.ENTER:
        if not count:
            return state, Action.NONE
        category = catalog[state.selected_category_index]
        if not category.prompts:
            log.debug('Category %s has no prompts, staying in the category list', category.name)
            return state, Action.NONE
        log.debug('Entering category %s', category.name)
        return (
            replace(
                state,
                view=View.PROMPTS,
                current_category=category,
                selected_prompt_index=0,
                prompt_scroll_offset=0,
            ),
            Action.RENDER,
        )

    return state, Action.NONE


def _handle_prompts(state: NavigationState, key: Key, visible_items: int):
    count = len(state.current_category.prompts)

    if key in MOVEMENT_KEYS:
        index = _move(state.selected_prompt_index, key, count, visible_items)
        offset = 0 if key == Key.HOME else state.prompt_scroll_offset
        offset = follow_selection(index, offset, count, visible_items)
        return replace(state, selected_prompt_index=index, prompt_scroll_offset=offset), Action.RENDER

    if key in (Key.LEFT, Key.BACKSPACE):
        log.debug('Leaving category %s', state.current_category.name)
        return replace(state, view=View.CATEGORIES, current_category=None), Action.RENDER

    if key == Key.COPY:
        return state, Action.COPY

    return state, Action.NONE


def handle_key(
    state: NavigationState, key: Key, catalog: Sequence[Category], visible_items: int
) -> Tuple[NavigationState, Action]:
    """
    Apply one key event.

    Args:
        state (NavigationState): Current state.
        key (Key): Decoded key event.
        catalog (Sequence[Category]): Categories in display order.
        visible_items (int): Size of the visible window, at least 1.

    Returns:
        Tuple[NavigationState, Action]: The next state and what the caller must do.
    """
    visible_items = max(1, visible_items)

    if key == Key.QUIT:
        return state, Action.QUIT
    if key == Key.RESIZE:
        return state, Action.RENDER

    if state.view == View.PROMPTS and state.current_category is not None:
        return _handle_prompts(state, key, visible_items)
    return _handle_categories(state, key, catalog, visible_items)


def selected_prompt(state: NavigationState) -> Optional[str]:
    """The prompt under the cursor, or None outside the prompts view."""
    if state.view != View.PROMPTS or state.current_category is None:
        return None
    prompts = state.current_category.prompts
    if not 0 <= state.selected_prompt_index < len(prompts):
        return None
    return prompts[state.selected_prompt_index]
