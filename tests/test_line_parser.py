import pytest

from fontconv.errors import MissingArgumentError, ParseError
from fontconv.line_parser import parse_int, parse_line


def test_mixed_arguments():
    desc = parse_line('  OP K1=v1 k2="v 2" k3=3  ')
    assert desc.operation == "op"
    assert set(desc.args) == {"k1", "k2", "k3"}
    assert desc.args["k1"].text == "v1"
    assert desc.args["k1"].value == 0
    assert desc.args["k2"].text == "v 2"
    assert desc.args["k3"].text == "3"
    assert desc.args["k3"].value == 3


def test_operation_only():
    desc = parse_line("chars")
    assert desc.operation == "chars"
    assert desc.args == {}


def test_trailing_tokens_without_equals_are_ignored():
    desc = parse_line("char id=1 dangling")
    assert list(desc.args) == ["id"]


def test_negative_values():
    desc = parse_line("kerning first=1 second=2 amount=-3")
    assert desc.value("amount") == -3


def test_quoted_filename_keeps_text():
    desc = parse_line('page id=0 file="my font_0.png"')
    assert desc.text("file") == "my font_0.png"
    assert desc.value("file") == 0
    assert desc.value("id") == 0


def test_padding_list_is_text():
    desc = parse_line("info padding=0,0,0,0 spacing=1,1")
    assert desc.text("padding") == "0,0,0,0"
    assert desc.value("spacing") == 0


def test_empty_value_at_end_of_line():
    desc = parse_line("op a=1 b=")
    assert desc.args["b"].text == ""
    assert desc.args["b"].value == 0


def test_quoted_value_is_stripped():
    desc = parse_line('op k=" a b " j=1')
    assert desc.text("k") == "a b"
    assert desc.value("j") == 1


def test_opening_quote_at_end_of_line():
    with pytest.raises(ParseError):
        parse_line('op k="')


def test_unterminated_quote():
    with pytest.raises(ParseError):
        parse_line('op k="abc')


def test_duplicate_argument():
    with pytest.raises(ParseError, match="duplicate"):
        parse_line("char id=1 ID=2")


def test_empty_name():
    with pytest.raises(ParseError):
        parse_line("op =5")


def test_require_missing():
    desc = parse_line("char id=1")
    with pytest.raises(MissingArgumentError) as excinfo:
        desc.require("xadvance")
    assert excinfo.value.name == "xadvance"
    assert excinfo.value.operation == "char"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("+7", 7),
        ("-2147483648", -2147483648),
        ("2147483648", 0),
        ("1_000", 0),
        ("1.5", 0),
        ("", 0),
    ],
)
def test_parse_int(text, expected):
    assert parse_int(text) == expected
