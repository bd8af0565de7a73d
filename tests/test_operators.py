import pytest

from lettercalc.errors import ErrorKind, ParseError
from lettercalc.operators import Operator, apply_operator, resolve_operator, truncating_div


@pytest.mark.parametrize(
    "char, expected",
    [
        pytest.param("a", Operator.ADD),
        pytest.param("b", Operator.SUB),
        pytest.param("c", Operator.MUL),
        pytest.param("d", Operator.DIV),
    ],
)
def test_resolve_operator(char: str, expected: Operator) -> None:
    assert resolve_operator(char) is expected


@pytest.mark.parametrize("char", ["e", "f", "+", "A", "1"])
def test_resolve_operator_invalid(char: str) -> None:
    with pytest.raises(ParseError) as exc_info:
        resolve_operator(char, code=f"1{char}", position=1)
    assert exc_info.value.kind is ErrorKind.INVALID_CHARACTER
    assert exc_info.value.position == 1


@pytest.mark.parametrize(
    "a, b, expected",
    [
        pytest.param(7, 2, 3),
        pytest.param(-7, 2, -3),
        pytest.param(7, -2, -3),
        pytest.param(-7, -2, 3),
        pytest.param(0, -3, 0),
        pytest.param(6, 3, 2),
    ],
)
def test_truncating_div(a: int, b: int, expected: int) -> None:
    assert truncating_div(a, b) == expected


@pytest.mark.parametrize(
    "operator, left, right, expected",
    [
        pytest.param(Operator.ADD, 3, 2, 5),
        pytest.param(Operator.SUB, 3, 5, -2),
        pytest.param(Operator.MUL, -3, 4, -12),
        pytest.param(Operator.DIV, -9, 2, -4),
    ],
)
def test_apply_operator(operator: Operator, left: int, right: int, expected: int) -> None:
    assert apply_operator(operator, left, right) == expected


def test_apply_operator_division_by_zero() -> None:
    with pytest.raises(ParseError) as exc_info:
        apply_operator(Operator.DIV, 3, 0, code="3d0", position=2)
    assert exc_info.value.kind is ErrorKind.DIVISION_BY_ZERO
    assert exc_info.value.position == 2
