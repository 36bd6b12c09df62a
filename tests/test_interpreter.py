import pytest

from ansi_escapers.interpreter import (
    AnsiParser,
    AnsiParseResult,
    AnsiPoint,
    AnsiSpan,
    parse_ansi_annotated,
)
from ansi_escapers.types import (
    AnsiValue,
    Background,
    Color,
    CursorDirection,
    CursorMove,
    CursorPosition,
    DeviceControl,
    Erase,
    EraseMode,
    EraseTarget,
    Foreground,
    Rgb24,
    Style,
    UnderlineColor,
)


def _span_codes(result):
    return [code for span in result.spans for code in span.codes]


def test_parser_sgr_and_cursor():
    result = parse_ansi_annotated("A\x1b[31mB\x1b[0mC\x1b[2J")
    assert result.text == "ABC"
    assert result.spans == (AnsiSpan(1, 2, (Foreground(Color.RED),)),)
    assert result.points == (
        AnsiPoint(3, Erase(EraseTarget.DISPLAY, EraseMode.ALL)),
    )


def test_parser_basic_colors():
    result = parse_ansi_annotated("X\x1b[31mY\x1b[0mZ")
    assert result.text == "XYZ"
    assert Foreground(Color.RED) in _span_codes(result)
    assert result.spans == (AnsiSpan(1, 2, (Foreground(Color.RED),)),)
    assert result.points == ()


def test_parser_8bit_color():
    result = parse_ansi_annotated("A\x1b[38;5;123mB\x1b[0m")
    assert result.text == "AB"
    assert result.spans == (AnsiSpan(1, 2, (Foreground(AnsiValue(123)),)),)


def test_parser_24bit_color_fg_bg_underline():
    text = "A\x1b[38;2;10;20;30mB\x1b[48;2;40;50;60mC\x1b[58;2;70;80;90mD\x1b[0m"
    result = parse_ansi_annotated(text)
    assert result.text == "ABCD"
    fg = Foreground(Rgb24(10, 20, 30))
    bg = Background(Rgb24(40, 50, 60))
    ul = UnderlineColor(Rgb24(70, 80, 90))
    assert result.spans == (
        AnsiSpan(1, 2, (fg,)),
        AnsiSpan(2, 3, (fg, bg)),
        AnsiSpan(3, 4, (fg, bg, ul)),
    )


def test_parser_cursor_movement():
    result = parse_ansi_annotated("A\x1b[2BC")
    assert result.text == "AC"
    assert result.points == (AnsiPoint(1, CursorMove(CursorDirection.DOWN, 2)),)


def test_parser_erase_display_and_line():
    result = parse_ansi_annotated("A\x1b[2JB\x1b[1KC")
    assert result.text == "ABC"
    assert result.points == (
        AnsiPoint(1, Erase(EraseTarget.DISPLAY, EraseMode.ALL)),
        AnsiPoint(2, Erase(EraseTarget.LINE, EraseMode.TO_START)),
    )


def test_parser_device_control():
    result = parse_ansi_annotated("A\x1b[sB\x1b[uC\x1b[?25lD\x1b[?25hE")
    assert result.text == "ABCDE"
    assert result.points == (
        AnsiPoint(1, DeviceControl.SAVE_CURSOR),
        AnsiPoint(2, DeviceControl.RESTORE_CURSOR),
        AnsiPoint(3, DeviceControl.HIDE_CURSOR),
        AnsiPoint(4, DeviceControl.SHOW_CURSOR),
    )


def test_parser_malformed_sequences():
    result = parse_ansi_annotated("A\x1b[31B\x1b[999ZC\x1b[38;2;1;2mD")
    assert result.text == "ACD"
    assert result.points == (AnsiPoint(1, CursorMove(CursorDirection.DOWN, 31)),)
    assert result.spans == ()


def test_parser_multiple_sgr_in_one_sequence():
    result = parse_ansi_annotated("A\x1b[1;31;4mB\x1b[0m")
    assert result.text == "AB"
    assert result.spans == (
        AnsiSpan(1, 2, (Style.BOLD, Style.UNDERLINE, Foreground(Color.RED))),
    )


def test_plain_text_is_unchanged():
    result = parse_ansi_annotated("hello, world")
    assert result == AnsiParseResult("hello, world", (), ())


def test_empty_input():
    assert parse_ansi_annotated("") == AnsiParseResult("", (), ())


def test_unterminated_sequence_is_dropped_to_end():
    result = parse_ansi_annotated("AB\x1b[12;3")
    assert result.text == "AB"
    assert result.points == ()


def test_lone_escape_is_kept():
    assert parse_ansi_annotated("A\x1b").text == "A\x1b"
    assert parse_ansi_annotated("A\x1bxB").text == "A\x1bxB"


def test_open_span_closes_at_end():
    result = parse_ansi_annotated("\x1b[1mhi")
    assert result.text == "hi"
    assert result.spans == (AnsiSpan(0, 2, (Style.BOLD,)),)


def test_color_replaces_previous_of_same_kind():
    result = parse_ansi_annotated("\x1b[31mA\x1b[32mB")
    assert result.spans == (
        AnsiSpan(0, 1, (Foreground(Color.RED),)),
        AnsiSpan(1, 2, (Foreground(Color.GREEN),)),
    )


def test_repeated_attribute_keeps_one_span():
    result = parse_ansi_annotated("\x1b[1mA\x1b[1mB\x1b[0m")
    assert result.spans == (AnsiSpan(0, 2, (Style.BOLD,)),)


def test_reset_without_active_attributes_makes_no_span():
    result = parse_ansi_annotated("A\x1b[0mB")
    assert result.text == "AB"
    assert result.spans == ()


def test_cursor_position_default_and_f_final():
    result = parse_ansi_annotated("\x1b[HA\x1b[5;7fB")
    assert result.text == "AB"
    assert result.points == (
        AnsiPoint(0, CursorPosition(1, 1)),
        AnsiPoint(1, CursorPosition(5, 7)),
    )


def test_positions_count_characters_in_cleaned_text():
    result = parse_ansi_annotated("é\x1b[1mü\x1b[0m\x1b[K")
    assert result.text == "éü"
    assert result.spans == (AnsiSpan(1, 2, (Style.BOLD,)),)
    assert result.points == (AnsiPoint(2, Erase(EraseTarget.LINE, EraseMode.TO_END)),)


def test_spans_never_empty_and_within_text():
    text = "\x1b[1m\x1b[31mab\x1b[44mcd\x1b[0m\x1b[4m\x1b[0mef\x1b[7m"
    result = parse_ansi_annotated(text)
    assert result.text == "abcdef"
    for span in result.spans:
        assert 0 <= span.start < span.end <= len(result.text)
        assert span.codes


def test_parser_object_is_reusable():
    parser = AnsiParser("x\x1b[1my")
    assert parser.parse_annotated() == parser.parse_annotated()
    assert parser.parse_annotated().text == "xy"


def test_parser_rejects_non_string():
    with pytest.raises(TypeError):
        AnsiParser(b"abc")