from dataclasses import dataclass, field

from lettercalc.utils import DescribedEnum


class ErrorKind(DescribedEnum):
    UNMATCHED_OPENING_PARENTHESIS = "Unmatched opening parenthesis"
    UNMATCHED_CLOSING_PARENTHESIS = "Unmatched closing parenthesis"
    DIVISION_BY_ZERO = "Division by zero"
    INVALID_CHARACTER = "Invalid character"
    EMPTY_EXPRESSION = "Empty expression"


@dataclass
class ParseError(Exception):
    """Evaluation failure.

    Two errors are equal when their kinds are equal; ``code`` and ``position`` only
    locate the failure inside the top-level expression for display.
    """

    kind: ErrorKind
    code: str = field(default="", compare=False)
    position: int = field(default=0, compare=False)

    def __str__(self) -> str:
        return self.kind.description

    def highlight(self) -> str:
        """The expression around the failure, with a caret under the failing char"""
        start, end = _window(self.code, self.position)
        prefix = "..." if start > 0 else ""
        suffix = "..." if end < len(self.code) else ""
        caret_column = len(prefix) + self.position - start
        return f"{prefix}{self.code[start:end]}{suffix}\n" + " " * caret_column + "^"


def _window(code: str, position: int, radius: int = 10) -> tuple[int, int]:
    return max(0, position - radius), min(len(code), position + radius)
