#!/usr/bin/env python3
"""
PromptSelectorApp - curses front-end for browsing a prompt catalog.

This module runs the interactive loop:
- Decodes curses key codes into navigation keys (arrows, PgUp/PgDn, Home/End,
  Enter, Backspace/Left/ESC, `j`/`k`, `c` to copy, `q` to quit).
- Feeds them to the navigation state machine.
- Paints the lines computed by the renderer, shrinking the visible window
  when the terminal is too short for it.
- Shows a copy confirmation or error banner, then returns to the prompts view
  after a fixed delay.
"""

import curses
import os
from dataclasses import replace
from typing import Dict, List, Optional, Sequence

import prompt_selector.theme as THEME
import prompt_selector.labels as LABELS
from prompt_selector.catalog import Category
from prompt_selector.clipboard import ClipboardError, ClipboardWriter
from prompt_selector.logger import Logger
from prompt_selector.navigation import (
    Action,
    Key,
    NavigationState,
    View,
    follow_selection,
    handle_key,
    selected_prompt,
)
from prompt_selector.renderer import (
    MIN_FRAME_WIDTH,
    Layout,
    Line,
    render,
    render_banner,
    render_too_small,
)

log = Logger().setup_logger('App')

MIN_HEIGHT = 12
DEFAULT_BANNER_DELAY_MS = 1500
ESC = 27

KEYMAP: Dict[int, Key] = {
    curses.KEY_UP: Key.UP,
    ord("k"): Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    ord("j"): Key.DOWN,
    curses.KEY_PPAGE: Key.PAGE_UP,
    curses.KEY_NPAGE: Key.PAGE_DOWN,
    curses.KEY_HOME: Key.HOME,
    curses.KEY_END: Key.END,
    curses.KEY_ENTER: Key.ENTER,
    ord("\n"): Key.ENTER,
    ord("\r"): Key.ENTER,
    curses.KEY_BACKSPACE: Key.BACKSPACE,
    127: Key.BACKSPACE,
    8: Key.BACKSPACE,
    curses.KEY_LEFT: Key.LEFT,
    ESC: Key.LEFT,
    ord("c"): Key.COPY,
    ord("C"): Key.COPY,
    ord("q"): Key.QUIT,
    ord("Q"): Key.QUIT,
    curses.KEY_RESIZE: Key.RESIZE,
}


class PromptSelectorApp:
    """
    Core curses-based prompt browser.

    Attributes:
        catalog (tuple[Category]): Categories in display order.
        clipboard (ClipboardWriter): Destination of the `c` key.
        layout (Layout): Configured frame widths and visible window size.
        state (NavigationState): Current navigation state.
        visible_items (int): Visible window actually used, never above layout.visible_items.
    """

    def __init__(
        self,
        catalog: Sequence[Category],
        clipboard: ClipboardWriter,
        layout: Optional[Layout] = None,
        banner_delay_ms: int = DEFAULT_BANNER_DELAY_MS,
    ) -> None:
        self.catalog = tuple(catalog)
        self.clipboard = clipboard
        self.layout = layout or Layout()
        self.banner_delay_ms = max(0, banner_delay_ms)
        self.state = NavigationState()
        self.visible_items = self.layout.visible_items

    # -------------------------------------------------------------------------
    # Main Execution Loop
    # -------------------------------------------------------------------------
    def run(self) -> None:
        """Start the curses rendering loop."""
        os.environ.setdefault("ESCDELAY", "25")
        curses.wrapper(self._main_loop)

    def _main_loop(self, stdscr) -> None:
        """Render and handle input until the user quits."""
        try:
            curses.curs_set(0)  # Hide cursor
        except curses.error:
            pass
        stdscr.keypad(True)
        self._init_colors()

        log.info('Started with %d categories, visible window %d', len(self.catalog), self.visible_items)
        self._draw(stdscr)
        while True:
            if not self._handle_key_input(stdscr):
                break
        log.info('Quit requested')

    @staticmethod
    def _init_colors() -> None:
        if not curses.has_colors():
            return
        curses.start_color()
        try:
            curses.use_default_colors()
        except curses.error:
            pass
        for pair_id, (fg, bg, _) in THEME.DEFAULT_THEME.items():
            try:
                curses.init_pair(pair_id, fg, bg)
            except curses.error:
                # terminal without default-color support
                curses.init_pair(
                    pair_id,
                    fg if fg >= 0 else curses.COLOR_WHITE,
                    bg if bg >= 0 else curses.COLOR_BLACK,
                )

    def _handle_key_input(self, stdscr) -> bool:
        """Handle one key press. Returns False when the app should exit."""
        key = self.decode_key(stdscr.getch())
        if key is None:
            return True

        action = self.process_key(key)
        if action == Action.QUIT:
            return False
        if action == Action.RENDER:
            self._draw(stdscr)
        elif action == Action.COPY:
            error = self.copy_selection()
            self._show_copy_result(stdscr, error)
        return True

    @staticmethod
    def decode_key(code: int) -> Optional[Key]:
        """Map a curses key code to a navigation key; unknown codes give None."""
        return KEYMAP.get(code)

    def process_key(self, key: Key) -> Action:
        """Advance the navigation state by one key and return what to do next."""
        self.state, action = handle_key(self.state, key, self.catalog, self.visible_items)
        return action

    # -------------------------------------------------------------------------
    # Clipboard
    # -------------------------------------------------------------------------
    def copy_selection(self) -> Optional[ClipboardError]:
        """Copy the selected prompt. Returns the failure, or None on success."""
        text = selected_prompt(self.state)
        if text is None:
            return None
        try:
            self.clipboard.copy(text)
        except ClipboardError as e:
            log.error('Copy failed: %s', e)
            return e
        log.info('Copied prompt %d of %s', self.state.selected_prompt_index + 1, self.state.current_category.name)
        return None

    def _show_copy_result(self, stdscr, error: Optional[ClipboardError]) -> None:
        """Show the banner under the prompts view, wait, then redraw without it."""
        if error is None:
            banner = render_banner(LABELS.MSG_COPY_SUCCESS, ok=True)
        else:
            banner = render_banner(LABELS.MSG_COPY_FAILED.format(error), ok=False)

        self._draw(stdscr, banner)
        curses.napms(self.banner_delay_ms)
        curses.flushinp()  # keys typed during the banner are dropped
        self._draw(stdscr)

    # -------------------------------------------------------------------------
    # Drawing
    # -------------------------------------------------------------------------
    def fit_layout(self, height: int, width: int, reserved: int = 0) -> Optional[Layout]:
        """
        Layout for a terminal of the given size, or None when it is too small.

        Frame widths shrink to the terminal width. The visible window shrinks
        until the rendered screen plus `reserved` rows fits the height, and the
        scroll offsets are re-clamped to the new window.
        """
        if height < MIN_HEIGHT or width <= MIN_FRAME_WIDTH:
            return None

        layout = replace(
            self.layout,
            category_width=min(self.layout.category_width, width - 1),
            prompt_width=min(self.layout.prompt_width, width - 1),
        )
        visible = self.layout.visible_items
        while visible > 1:
            candidate = replace(layout, visible_items=visible)
            if len(render(self._clamped_state(visible), self.catalog, candidate)) + reserved <= height:
                break
            visible -= 1

        self.visible_items = visible
        self.state = self._clamped_state(visible)
        return replace(layout, visible_items=visible)

    def _clamped_state(self, visible: int) -> NavigationState:
        state = self.state
        category_offset = follow_selection(
            state.selected_category_index, state.category_scroll_offset, len(self.catalog), visible
        )
        prompt_offset = state.prompt_scroll_offset
        if state.view == View.PROMPTS and state.current_category is not None:
            prompt_offset = follow_selection(
                state.selected_prompt_index, prompt_offset, len(state.current_category.prompts), visible
            )
        return replace(state, category_scroll_offset=category_offset, prompt_scroll_offset=prompt_offset)

    def screen_lines(self, height: int, width: int, banner: Sequence[Line] = ()) -> List[Line]:
        """Everything to paint for a terminal of the given size."""
        layout = self.fit_layout(height, width, reserved=len(banner))
        if layout is None:
            return render_too_small()
        return render(self.state, self.catalog, layout) + list(banner)

    def _draw(self, stdscr, banner: Sequence[Line] = ()) -> None:
        """Full redraw of the current view."""
        h, w = stdscr.getmaxyx()
        stdscr.erase()

        for y, line in enumerate(self.screen_lines(h, w, banner)[:h]):
            x = 0
            for segment in line.segments:
                if x >= w - 1:
                    break
                text = segment.text[: w - 1 - x]
                try:
                    stdscr.addstr(y, x, text, self._attr(segment.style))
                except curses.error:
                    pass
                x += len(text)

        stdscr.refresh()

    @staticmethod
    def _attr(style: int) -> int:
        _, _, extra = THEME.DEFAULT_THEME.get(style, (0, 0, curses.A_NORMAL))
        if curses.has_colors():
            return curses.color_pair(style) | extra
        return extra
