import enum
from typing import Callable

from lettercalc.errors import ErrorKind, ParseError
from lettercalc.utils import PrintableEnum


class Operator(PrintableEnum):
    ADD = enum.auto()
    SUB = enum.auto()
    MUL = enum.auto()
    DIV = enum.auto()


OPERATOR_CHARS = {
    "a": Operator.ADD,
    "b": Operator.SUB,
    "c": Operator.MUL,
    "d": Operator.DIV,
}

OPERATOR_SYMBOLS = {
    Operator.ADD: "+",
    Operator.SUB: "-",
    Operator.MUL: "*",
    Operator.DIV: "/",
}


def resolve_operator(char: str, code: str = "", position: int = 0) -> Operator:
    operator = OPERATOR_CHARS.get(char)
    if operator is None:
        raise ParseError(ErrorKind.INVALID_CHARACTER, code=code, position=position)
    return operator


def truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero (``//`` rounds toward negative infinity)"""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


BinaryOperationImpl = Callable[[int, int], int]

operation_impls: dict[Operator, BinaryOperationImpl] = {
    Operator.ADD: lambda a, b: a + b,
    Operator.SUB: lambda a, b: a - b,
    Operator.MUL: lambda a, b: a * b,
    Operator.DIV: truncating_div,
}


def apply_operator(operator: Operator, left: int, right: int, code: str = "", position: int = 0) -> int:
    if operator is Operator.DIV and right == 0:
        raise ParseError(ErrorKind.DIVISION_BY_ZERO, code=code, position=position)
    return operation_impls[operator](left, right)
