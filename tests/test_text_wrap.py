"""Tests for the greedy word wrapper."""

import random

import pytest

from prompt_selector.text_wrap import wrap

WORDS = ["a", "to", "the", "prompt", "selector", "clipboard", "categories", "supercalifragilistic"]


def random_texts(count=200, seed=7):
    rng = random.Random(seed)
    for _ in range(count):
        words = [rng.choice(WORDS) for _ in range(rng.randint(0, 30))]
        separators = [rng.choice([" ", "  ", "\t", "\n "]) for _ in words]
        yield "".join(w + s for w, s in zip(words, separators)), rng.randint(1, 40)


def test_empty_text_gives_no_lines():
    assert wrap("", 10) == []


def test_whitespace_only_text_gives_no_lines():
    assert wrap("   \n\t ", 10) == []


def test_short_text_stays_on_one_line():
    assert wrap("Hello world", 80) == ["Hello world"]


def test_breaks_before_reaching_width():
    # "aaa " + "bbb" is 7 characters, which reaches the width
    assert wrap("aaa bbb", 7) == ["aaa", "bbb"]
    assert wrap("aaa bbb", 8) == ["aaa bbb"]


def test_wraps_sentence_on_word_boundaries():
    lines = wrap("the quick brown fox jumps over the lazy dog", 12)
    assert lines == ["the quick", "brown fox", "jumps over", "the lazy", "dog"]


def test_overlong_word_sits_alone_untruncated():
    lines = wrap("see supercalifragilistic now", 10)
    assert lines == ["see", "supercalifragilistic", "now"]


def test_overlong_first_word_does_not_produce_empty_line():
    assert wrap("supercalifragilistic", 5) == ["supercalifragilistic"]


def test_width_must_be_positive():
    with pytest.raises(ValueError):
        wrap("text", 0)


@pytest.mark.parametrize("text,max_width", list(random_texts()))
def test_wrapping_preserves_words_and_respects_width(text, max_width):
    lines = wrap(text, max_width)

    assert " ".join(lines) == " ".join(text.split())
    for line in lines:
        assert line == line.strip()
        assert line
        if len(line) > max_width:
            assert " " not in line
