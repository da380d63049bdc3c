import io

import pytest

from printfmt.conversions import format_unsigned
from printfmt.printer import printf, sprintf
from printfmt.spec import parse_spec


def test_plain_text_passes_through():
    assert sprintf("hello, world") == "hello, world"


def test_pointer_is_lowercase_hex_with_prefix():
    assert sprintf("%p", 0xDEADBEEF) == "0x%x" % 0xDEADBEEF
    assert sprintf("[%20p]", 4096) == "[%20s]" % ("0x%x" % 4096)


def test_unsigned_wraps_negative_values():
    assert sprintf("%u", -1) == "%u" % 0xFFFFFFFF


def test_unsigned_width_agrees_with_conversion():
    spec, _ = parse_spec("5u", 0)
    assert sprintf("%5u", 100) == format_unsigned(spec, 100)


def test_null_string():
    assert sprintf("%s", None) == "(null)"


def test_percent_ignores_width():
    assert sprintf("%5%") == "%"


def test_signed_conversions_render_nothing_and_take_no_argument():
    assert sprintf("%d%i%s", "x") == "x"


def test_invalid_conversion_truncates_output():
    assert sprintf("ab%qcd", 1) == "ab"


def test_trailing_percent_truncates_output():
    assert sprintf("ab%") == "ab"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        sprintf("%s %s", "only")


def test_printf_writes_to_file_and_counts():
    buf = io.StringIO()
    count = printf("%s=%#x|%-4c|", "key", 255, "v", file=buf)
    assert buf.getvalue() == sprintf("%s=%#x|%-4c|", "key", 255, "v")
    assert count == len(buf.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("%s!", "hi")
    captured = capsys.readouterr()
    assert captured.out == "hi!"
    assert count == len("hi!")


def test_printf_stops_at_invalid_spec():
    buf = io.StringIO()
    count = printf("abc%zdef", file=buf)
    assert buf.getvalue() == "abc"
    assert count == 3