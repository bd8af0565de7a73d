"""Single-pass evaluator for the letter notation.

Digits form numbers, ``a``/``b``/``c``/``d`` are add/subtract/multiply/divide and
``e``/``f`` open and close a group. There is no precedence: ``3a2c4`` is ``(3 + 2) * 4``.
"""
import logging
import string
from dataclasses import dataclass, field
from typing import Callable, Generic, Optional, TypeVar

from lettercalc.errors import ErrorKind, ParseError
from lettercalc.operators import OPERATOR_CHARS, Operator, apply_operator, resolve_operator

logger = logging.getLogger(__name__)

DIGITS = frozenset(string.digits)
GROUP_OPEN = "e"
GROUP_CLOSE = "f"

Operand = TypeVar("Operand")


@dataclass
class Step(Generic[Operand]):
    """One fold step: ``operator`` combines the running result with ``operand``"""

    operator: Operator
    operand: Operand
    position: int


@dataclass
class ScanResult(Generic[Operand]):
    first: Operand
    steps: list[Step[Operand]]


@dataclass
class _Frame(Generic[Operand]):
    """Operands and operators of one expression body, ``code[start:end]``"""

    start: int
    end: int
    first: Optional[Operand] = None
    steps: list[Step[Operand]] = field(default_factory=list)
    pending: Optional[tuple[Operator, int]] = None

    @property
    def expecting_operand(self) -> bool:
        return self.first is None or self.pending is not None

    def add(self, operand: Operand, position: int) -> None:
        if self.pending is None:
            self.first = operand
        else:
            operator, _ = self.pending
            self.steps.append(Step(operator=operator, operand=operand, position=position))
            self.pending = None

    def close(self, code: str) -> ScanResult:
        if self.pending is not None:
            # operators without a right operand are rejected rather than dropped, so "3a" is not 3
            _, operator_position = self.pending
            raise ParseError(ErrorKind.INVALID_CHARACTER, code=code, position=operator_position)
        if self.first is None:
            raise ParseError(ErrorKind.EMPTY_EXPRESSION, code=code, position=self.start)
        return ScanResult(first=self.first, steps=self.steps)


NumberHandler = Callable[[int], Operand]
Fold = Callable[[ScanResult, str], Operand]


def reduce_expression(code: str, on_number: NumberHandler, fold: Fold) -> Operand:
    """Validates ``code`` left to right, folding every group as soon as its closing char is read.

    Numbers are turned into operands by ``on_number``. Each group body, and finally the whole
    expression, is reduced to an operand by ``fold(scanned, code)``. Open groups are kept on an
    explicit frame stack, so nesting depth is bounded by the input length only.
    """
    closers = _match_groups(code)
    frames: list[_Frame] = [_Frame(start=0, end=len(code))]

    i = 0
    while True:
        frame = frames[-1]
        if i == frame.end:
            scanned = frame.close(code)
            frames.pop()
            if not frames:
                return fold(scanned, code)
            open_position = frame.start - 1
            logger.debug("Group at %d closed at %d", open_position, frame.end)
            frames[-1].add(fold(scanned, code), open_position)
            i += 1  # closing char
            continue

        char = code[i]
        if char in DIGITS or char == GROUP_OPEN:
            if not frame.expecting_operand:
                # two operands in a row, e.g. "1e2f"
                raise ParseError(ErrorKind.INVALID_CHARACTER, code=code, position=i)
            if char == GROUP_OPEN:
                end = closers.get(i)
                if end is None:
                    raise ParseError(ErrorKind.UNMATCHED_OPENING_PARENTHESIS, code=code, position=i)
                frames.append(_Frame(start=i + 1, end=end))
                i += 1
            else:
                value, j = _consume_number(code, i)
                frame.add(on_number(value), i)
                i = j
        elif char in OPERATOR_CHARS:
            if frame.expecting_operand:
                raise ParseError(ErrorKind.INVALID_CHARACTER, code=code, position=i)
            frame.pending = resolve_operator(char, code=code, position=i), i
            i += 1
        elif char == GROUP_CLOSE:
            # every closing char inside a group is some frame's end
            raise ParseError(ErrorKind.UNMATCHED_CLOSING_PARENTHESIS, code=code, position=i)
        else:
            raise ParseError(ErrorKind.INVALID_CHARACTER, code=code, position=i)


def _match_groups(code: str) -> dict[int, int]:
    """Maps the index of every balanced opening char to the index of its closing char"""
    closers: dict[int, int] = {}
    opened: list[int] = []
    for i, char in enumerate(code):
        if char == GROUP_OPEN:
            opened.append(i)
        elif char == GROUP_CLOSE and opened:
            closers[opened.pop()] = i
    return closers


def _consume_number(code: str, i: int) -> tuple[int, int]:
    value = 0
    j = i
    while j < len(code) and code[j] in DIGITS:
        value = value * 10 + int(code[j])
        j += 1
    return value, j


def evaluate(expression: str) -> int:
    """Evaluates ``expression``, raising ``ParseError`` on the first problem found.

    Results are plain Python ints: digit runs and products never overflow or wrap around.
    """
    logger.debug("Evaluating %r", expression)
    return reduce_expression(expression, on_number=int, fold=_fold)


def try_evaluate(expression: str) -> int | ParseError:
    try:
        return evaluate(expression)
    except ParseError as e:
        return e


def _fold(scanned: ScanResult, code: str) -> int:
    result = scanned.first
    for step in scanned.steps:
        result = apply_operator(step.operator, result, step.operand, code=code, position=step.position)
    return result
