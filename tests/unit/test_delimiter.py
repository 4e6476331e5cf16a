import pytest
from mapstring_parser.errors import UnexpectedCharacter, UnexpectedEndOfInput
from mapstring_parser.steps.delimiter import consume_delimiter


pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    "raw,pos,expected,new_pos",
    [
        ("foo=bar;", 3, "=", 4),
        ("foo=bar;", 7, ";", 8),
        (";", 0, ";", 1),
    ]
)
def test_consume_delimiter(raw, pos, expected, new_pos):
    assert consume_delimiter(raw, pos, expected) == new_pos


def test_end_of_input():
    with pytest.raises(UnexpectedEndOfInput) as excinfo:
        consume_delimiter("foo=bar", 7, ";")
    assert excinfo.value.position == 7
    assert excinfo.value.expected == ";"


def test_empty_input():
    with pytest.raises(UnexpectedEndOfInput):
        consume_delimiter("", 0, "=")


def test_wrong_character():
    with pytest.raises(UnexpectedCharacter) as excinfo:
        consume_delimiter("foo-bar;", 3, "=")
    err = excinfo.value
    assert (err.position, err.expected, err.found) == (3, "=", "-")
    assert "'-'" in str(err) and "'='" in str(err)
