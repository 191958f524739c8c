"""Greedy word wrapping for prompt cards."""

from typing import List


def wrap(text: str, max_width: int) -> List[str]:
    """
    Break text into lines shorter than max_width, on word boundaries.

    Words are accumulated while the line (with its trailing space) plus the
    next word stays below max_width. A word that alone reaches max_width is
    kept whole on its own line.

    Args:
        text (str): Text to wrap. Runs of whitespace collapse to one space.
        max_width (int): Line width, at least 1.

    Returns:
        List[str]: The wrapped lines, empty for blank text.
    """
    if max_width < 1:
        raise ValueError(f"max_width must be at least 1, got {max_width}")

    lines = []
    current_line = ""

    for word in text.split():
        if current_line and len(current_line + word) >= max_width:
            lines.append(current_line.strip())
            current_line = word + " "
        else:
            current_line += word + " "

    if current_line.strip():
        lines.append(current_line.strip())
    return lines
