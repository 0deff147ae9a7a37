from __future__ import annotations

import pytest

from caretdiag import Charset, Line, Source, Span


def test_lines_carry_absolute_byte_spans() -> None:
    src = Source("ab\ncd")
    assert list(src.lines()) == [
        Line(number=0, text="ab", span=Span(0, 2)),
        Line(number=1, text="cd", span=Span(3, 5)),
    ]


def test_lines_count_multibyte_characters_in_bytes() -> None:
    src = Source("π\nx")
    assert list(src.lines()) == [
        Line(number=0, text="π", span=Span(0, 2)),
        Line(number=1, text="x", span=Span(3, 4)),
    ]


def test_empty_lines_and_trailing_newline() -> None:
    src = Source("a\n\nb\n")
    assert list(src.lines()) == [
        Line(number=0, text="a", span=Span(0, 1)),
        Line(number=1, text="", span=Span(2, 2)),
        Line(number=2, text="b", span=Span(3, 4)),
    ]


def test_only_newline_splits_lines() -> None:
    src = Source("a\r\nb\x0cc")
    assert [ln.text for ln in src.lines()] == ["a\r", "b\x0cc"]


def test_lines_restart_on_every_call() -> None:
    src = Source("one\ntwo")
    assert list(src.lines()) == list(src.lines())


@pytest.mark.parametrize(
    ("text", "count"),
    [("", 0), ("a", 1), ("a\n", 1), ("a\n\n", 2), ("a\nb", 2), ("\n", 1)],
)
def test_line_count(text: str, count: int) -> None:
    assert Source(text).line_count == count


def test_char_boundaries_and_slices() -> None:
    src = Source("aπb")
    assert len(src) == 4
    assert [src.is_char_boundary(i) for i in range(6)] == [True, True, False, True, True, False]
    assert src.slice(1, 3) == "π"


def test_line_anchors_offsets_up_to_its_newline() -> None:
    line = next(Source("abc\ndef").lines())
    assert line.anchors(0)
    assert line.anchors(3)
    assert not line.anchors(4)


def test_span_helpers() -> None:
    assert Span.coerce(range(1, 3)) == Span(1, 3)
    assert Span.coerce((1, 3)) == Span(1, 3)
    assert Span(1, 3).contains(1)
    assert not Span(1, 3).contains(3)
    assert not Span(2, 2).contains(2)
    assert Span(2, 2).is_empty()
    assert len(Span(1, 4)) == 3
    assert Span(1, 4).format() == "1..4"


def test_charset_presets() -> None:
    ascii_ = Charset.ascii()
    assert (ascii_.column_broken_line, ascii_.spanning_out, ascii_.spanning_mid, ascii_.out_end) == (":", "-", ".", "\\")
    uni = Charset.unicode()
    assert (uni.column_broken_line, uni.spanning_out, uni.spanning_mid, uni.out_extension, uni.out_end) == (
        "¦",
        "─",
        "┬",
        "│",
        "╰",
    )
    assert ascii_.note == uni.note == ">"


def test_charset_glyphs_must_be_single_characters() -> None:
    with pytest.raises(ValueError) as e:
        Charset("|", ":", "^^", "-", ".", "|", "\\", ">")
    assert "spanning" in str(e.value)
