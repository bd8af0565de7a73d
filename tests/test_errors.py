import pytest

from lettercalc.errors import ErrorKind, ParseError


@pytest.mark.parametrize(
    "kind, message",
    [
        pytest.param(ErrorKind.UNMATCHED_OPENING_PARENTHESIS, "Unmatched opening parenthesis"),
        pytest.param(ErrorKind.UNMATCHED_CLOSING_PARENTHESIS, "Unmatched closing parenthesis"),
        pytest.param(ErrorKind.DIVISION_BY_ZERO, "Division by zero"),
        pytest.param(ErrorKind.INVALID_CHARACTER, "Invalid character"),
        pytest.param(ErrorKind.EMPTY_EXPRESSION, "Empty expression"),
    ],
)
def test_error_message(kind: ErrorKind, message: str) -> None:
    assert str(ParseError(kind)) == message
    assert kind.description == message


def test_errors_compare_by_kind() -> None:
    assert ParseError(ErrorKind.DIVISION_BY_ZERO, code="3d0", position=2) == ParseError(ErrorKind.DIVISION_BY_ZERO)
    assert ParseError(ErrorKind.DIVISION_BY_ZERO) != ParseError(ErrorKind.EMPTY_EXPRESSION)


def test_highlight_short() -> None:
    error = ParseError(ErrorKind.DIVISION_BY_ZERO, code="3d0", position=2)
    assert error.highlight() == "3d0\n  ^"


def test_highlight_long() -> None:
    code = "1a" * 15
    error = ParseError(ErrorKind.INVALID_CHARACTER, code=code, position=20)
    assert error.highlight() == "..." + code[10:] + "\n" + " " * 13 + "^"

    error = ParseError(ErrorKind.INVALID_CHARACTER, code=code, position=2)
    assert error.highlight() == code[:12] + "...\n  ^"


def test_highlight_at_end() -> None:
    error = ParseError(ErrorKind.EMPTY_EXPRESSION, code="", position=0)
    assert error.highlight() == "\n^"
