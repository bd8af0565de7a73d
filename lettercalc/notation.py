from lettercalc.evaluator import ScanResult, reduce_expression
from lettercalc.operators import OPERATOR_SYMBOLS


def to_infix(expression: str) -> str:
    """Renders the expression as fully parenthesized infix, e.g. "3a2c4" => "((3 + 2) * 4)"

    Raises the same structural errors as evaluation, but never divides.
    """
    return reduce_expression(expression, on_number=str, fold=_render)


def _render(scanned: ScanResult, code: str) -> str:
    result = scanned.first
    for step in scanned.steps:
        result = f"({result} {OPERATOR_SYMBOLS[step.operator]} {step.operand})"
    return result
