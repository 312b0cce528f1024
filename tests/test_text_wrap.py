from haunt.ui.text_wrap import (
    font_measure,
    layout_text,
    prepare_text_for_wrapping,
    wrap_text,
)


def measure(text: str) -> int:
    # one pixel per character keeps budgets readable
    return len(text)


def test_greedy_packs_two_words_per_line() -> None:
    assert wrap_text("aaa bbb ccc", 10, measure) == ["aaa bbb ", "ccc "]


def test_each_line_holds_the_longest_prefix_that_fits() -> None:
    lines = wrap_text("one two three four five six", 12, measure)

    assert lines == ["one two ", "three four ", "five six "]
    for line in lines:
        assert measure(line) < 12


def test_final_line_is_emitted_even_when_last_word_overflows() -> None:
    assert wrap_text("aaa bbb cccccc", 10, measure) == ["aaa bbb ", "cccccc "]


def test_words_are_never_split() -> None:
    lines = wrap_text("a verylongword b", 6, measure)

    assert lines == ["a ", "verylongword ", "b "]


def test_oversized_first_word_closes_an_empty_line_first() -> None:
    assert wrap_text("verylongword a", 6, measure) == ["", "verylongword ", "a "]


def test_explicit_breaks_are_flattened_before_wrapping() -> None:
    text = "aaa\nbbb ccc\nddd"

    assert prepare_text_for_wrapping(text) == "aaa bbb ccc ddd"
    assert wrap_text(prepare_text_for_wrapping(text), 10, measure) == wrap_text(
        "aaa bbb ccc ddd", 10, measure
    )


def test_wrap_is_pure() -> None:
    first = wrap_text("aaa bbb ccc", 10, measure)
    second = wrap_text("aaa bbb ccc", 10, measure)

    assert first == second


def test_layout_keeps_fitting_text_unwrapped() -> None:
    rows = layout_text("short\nlines", 40, measure)

    assert rows == [("short", 20), ("lines", 50)]


def test_layout_wraps_wide_text_at_width_minus_margin() -> None:
    rows = layout_text("aaa\nbbb ccc ddd", 14, measure, margin=4)

    assert rows == [("aaa bbb ", 20), ("ccc ddd ", 50)]


def test_layout_of_empty_text_draws_nothing() -> None:
    assert layout_text("", 100, measure) == []


def test_font_measure_uses_font_width(font) -> None:
    assert font_measure(font)("abcd") == 40
