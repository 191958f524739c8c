"""
Screen rendering for the prompt selector.

Every function here is pure: it turns navigation state and the catalog into
the list of lines to show. A line is a sequence of styled segments; the style
is a theme id and only affects how the app paints it.
"""

from dataclasses import dataclass
from typing import Iterable, List, NamedTuple, Sequence, Tuple

import prompt_selector.labels as LABELS
import prompt_selector.theme as THEME
from prompt_selector.catalog import Category
from prompt_selector.navigation import NavigationState, View, follow_selection
from prompt_selector.text_wrap import wrap

MIN_FRAME_WIDTH = 30
BANNER_WIDTH = 50


class Segment(NamedTuple):
    text: str
    style: int = THEME.NORMAL


@dataclass(frozen=True)
class Line:
    segments: Tuple[Segment, ...] = ()

    @property
    def text(self) -> str:
        return "".join(segment.text for segment in self.segments)

    def __len__(self) -> int:
        return len(self.text)


@dataclass(frozen=True)
class Layout:
    visible_items: int = 10
    category_width: int = 70
    prompt_width: int = 100

    def __post_init__(self):
        object.__setattr__(self, "visible_items", max(1, self.visible_items))
        object.__setattr__(self, "category_width", max(MIN_FRAME_WIDTH, self.category_width))
        object.__setattr__(self, "prompt_width", max(MIN_FRAME_WIDTH, self.prompt_width))

    @property
    def wrap_width(self) -> int:
        """Width available to prompt text inside a card."""
        return self.prompt_width - 12


# -------------------------------------------------------------------------
# Frame helpers
# -------------------------------------------------------------------------
def _border(left: str, right: str, width: int) -> Line:
    return Line((Segment(left + THEME.D_HOR * (width - 2) + right, THEME.FRAME),))


def _clip(segments: Sequence[Segment], width: int) -> Tuple[Segment, ...]:
    clipped = []
    for segment in segments:
        if width <= 0:
            break
        clipped.append(segment._replace(text=segment.text[:width]))
        width -= len(segment.text)
    return tuple(clipped)


def _row(width: int, *segments: Segment, clip: bool = True) -> Line:
    """Frame row with the given content, padded (or clipped) to the frame width.

    Card text rows pass clip=False so an overlong word stays whole.
    """
    if clip:
        segments = _clip(segments, width - 2)
    used = sum(len(segment.text) for segment in segments)
    padding = " " * max(0, width - 2 - used)
    return Line(
        (Segment(THEME.D_VERT, THEME.FRAME),)
        + tuple(segments)
        + (Segment(padding), Segment(THEME.D_VERT, THEME.FRAME))
    )


def _blank(width: int) -> Line:
    return _row(width)


def _fit(text: str, width: int) -> str:
    if len(text) <= width:
        return text
    return text[: max(0, width - 1)] + "…"


def _hints(pairs: Iterable[Tuple[str, str]]) -> List[Segment]:
    segments = []
    for index, (label, key) in enumerate(pairs):
        prefix = " " if index == 0 else " | "
        segments.append(Segment(f"{prefix}{label}: ", THEME.DIM))
        segments.append(Segment(key, THEME.KEY_HINT))
    return segments


def _footer(width: int, pairs: Iterable[Tuple[str, str]]) -> List[Line]:
    label, quit_key, interrupt_key = LABELS.EXIT_HINT
    return [
        _border(THEME.D_ML, THEME.D_MR, width),
        _row(width, *_hints(pairs)),
        _row(
            width,
            Segment(f" {label}: ", THEME.DIM),
            Segment(quit_key, THEME.KEY_HINT),
            Segment(" or ", THEME.DIM),
            Segment(interrupt_key, THEME.KEY_HINT),
        ),
        _border(THEME.D_BL, THEME.D_BR, width),
    ]


def _indicator(width: int, text: str) -> Line:
    return _row(width, Segment("  "), Segment(text, THEME.DIM))


# -------------------------------------------------------------------------
# Views
# -------------------------------------------------------------------------
def render_categories(state: NavigationState, catalog: Sequence[Category], layout: Layout) -> List[Line]:
    width = layout.category_width
    interior = width - 2
    total = len(catalog)

    title = _fit(LABELS.TITLE, interior)
    title_padding = (interior - len(title)) // 2
    lines = [
        _border(THEME.D_TL, THEME.D_TR, width),
        _row(width, Segment(" " * title_padding), Segment(title, THEME.TITLE)),
        _border(THEME.D_ML, THEME.D_MR, width),
        _row(width, Segment(" "), Segment(LABELS.CATEGORY_HEADER, THEME.HEADER)),
        _blank(width),
    ]

    if not total:
        lines.append(_row(width, Segment("  "), Segment(LABELS.MSG_NO_CATEGORIES, THEME.DIM)))
        return lines + _footer(width, LABELS.CATEGORY_HINTS)

    selected = min(max(0, state.selected_category_index), total - 1)
    offset = follow_selection(selected, state.category_scroll_offset, total, layout.visible_items)
    end = min(offset + layout.visible_items, total)

    if offset > 0:
        lines.append(_indicator(width, LABELS.MORE_CATEGORIES_ABOVE))
        lines.append(_blank(width))

    for i in range(offset, end):
        name = _fit(catalog[i].name, interior - 4)
        if i == selected:
            lines.append(_row(width, Segment("  "), Segment(THEME.POINTER + name, THEME.SELECTED)))
        else:
            lines.append(_row(width, Segment("    "), Segment(name)))
        if i < end - 1:
            lines.append(_blank(width))

    if end < total:
        lines.append(_blank(width))
        lines.append(_indicator(width, LABELS.MORE_CATEGORIES_BELOW))

    return lines + _footer(width, LABELS.CATEGORY_HINTS)


def _card(width: int, prompt: str, number: int, total: int, selected: bool, wrap_width: int) -> List[Line]:
    """Rounded box holding one wrapped prompt, with its k/total position on the bottom edge."""
    interior = width - 2
    border_style = THEME.CARD_SELECTED if selected else THEME.CARD
    text_style = THEME.PROMPT_SELECTED if selected else THEME.NORMAL
    margin = Segment("  ")

    lines = [_row(width, margin, Segment(THEME.R_TL + THEME.HOR * (interior - 6) + THEME.R_TR, border_style))]

    for line_index, text in enumerate(wrap(prompt, wrap_width) or [""]):
        if line_index == 0 and selected:
            prefix = Segment(THEME.POINTER, THEME.SELECTED)
        else:
            prefix = Segment("  ")
        lines.append(
            _row(
                width,
                margin,
                Segment(THEME.VERT, border_style),
                Segment(" "),
                prefix,
                Segment(text, text_style),
                Segment(" " * max(0, wrap_width - len(text))),
                Segment(" "),
                Segment(THEME.VERT, border_style),
                clip=False,
            )
        )

    position = f" {number}/{total} "
    lines.append(
        _row(
            width,
            margin,
            Segment(THEME.R_BL + THEME.HOR * max(0, interior - 7 - len(position)), border_style),
            Segment(position, THEME.DIM),
            Segment(THEME.HOR + THEME.R_BR, border_style),
        )
    )
    return lines


def render_prompts(state: NavigationState, layout: Layout) -> List[Line]:
    width = layout.prompt_width
    interior = width - 2
    category = state.current_category
    prompts = category.prompts if category is not None else ()
    total = len(prompts)
    title = LABELS.PROMPT_TITLE.format(category.name if category is not None else "")

    lines = [
        _border(THEME.D_TL, THEME.D_TR, width),
        _row(width, Segment(" "), Segment(_fit(title, interior - 1), THEME.TITLE)),
        _border(THEME.D_ML, THEME.D_MR, width),
    ]

    if total:
        selected = min(max(0, state.selected_prompt_index), total - 1)
        offset = follow_selection(selected, state.prompt_scroll_offset, total, layout.visible_items)
        end = min(offset + layout.visible_items, total)

        if offset > 0:
            lines.append(_indicator(width, LABELS.MORE_PROMPTS_ABOVE))
            lines.append(_blank(width))

        for i in range(offset, end):
            lines.extend(_card(width, prompts[i], i + 1, total, i == selected, layout.wrap_width))
            if i < end - 1:
                lines.append(_blank(width))

        if end < total:
            lines.append(_blank(width))
            lines.append(_indicator(width, LABELS.MORE_PROMPTS_BELOW))

    return lines + _footer(width, LABELS.PROMPT_HINTS)


def render(state: NavigationState, catalog: Sequence[Category], layout: Layout) -> List[Line]:
    """Lines of the screen for the current view."""
    if state.view == View.PROMPTS and state.current_category is not None:
        return render_prompts(state, layout)
    return render_categories(state, catalog, layout)


def render_banner(message: str, ok: bool, width: int = BANNER_WIDTH) -> List[Line]:
    """Small framed box reporting the outcome of a copy."""
    style = THEME.SUCCESS if ok else THEME.ERROR
    lines = [_border(THEME.D_TL, THEME.D_TR, width)]
    for text in wrap(message, width - 4) or [""]:
        lines.append(_row(width, Segment(" "), Segment(text, style)))
    lines.append(_border(THEME.D_BL, THEME.D_BR, width))
    return lines


def render_too_small() -> List[Line]:
    return [
        Line((Segment(LABELS.MSG_TERMINAL_TOO_SMALL, THEME.ERROR),)),
        Line((Segment(LABELS.MSG_RESIZE_CONTINUE),)),
    ]
