import ast
import math
import random
import string
from fractions import Fraction

from lettercalc.errors import ErrorKind, ParseError
from lettercalc.evaluator import try_evaluate
from lettercalc.notation import to_infix

# operators and digits are weighted up so that some of the generated code is valid
ALPHABET = string.digits + "abcd" * 2 + "ef"


def generate(length: int, rng: random.Random | None = None) -> str:
    return "".join((rng or random).choices(ALPHABET, k=length))


def eval_py(infix: str) -> int | str:
    try:
        return _eval_node(ast.parse(infix, mode="eval").body)
    except ZeroDivisionError as e:
        return str(e)


def _eval_node(node: ast.expr) -> int:
    if isinstance(node, ast.Constant) and isinstance(node.value, int):
        return node.value
    if isinstance(node, ast.BinOp):
        left = _eval_node(node.left)
        right = _eval_node(node.right)
        if isinstance(node.op, ast.Add):
            return left + right
        elif isinstance(node.op, ast.Sub):
            return left - right
        elif isinstance(node.op, ast.Mult):
            return left * right
        elif isinstance(node.op, ast.Div):
            return math.trunc(Fraction(left, right))
    raise ValueError(f"Unexpected node in infix rendering: {ast.dump(node)}")


def check(code: str) -> str | None:
    """Returns a mismatch description, or None if the evaluator agrees with Python on ``code``"""
    res_my = try_evaluate(code)
    try:
        infix: str | None = to_infix(code)
        infix_error: ParseError | None = None
    except ParseError as e:
        infix, infix_error = None, e

    if isinstance(res_my, ParseError):
        if res_my.kind is ErrorKind.DIVISION_BY_ZERO:
            # a group may fail on division before the rest of the expression is validated
            if infix is not None and isinstance(eval_py(infix), int):
                return f"{code!r}\ninfix: {infix}\nmy: {res_my}"
            return None
        if infix_error is None or infix_error.kind is not res_my.kind:
            return f"{code!r}\ninfix: {infix or infix_error}\nmy: {res_my}"
        return None

    if infix is None:
        return f"{code!r}\ninfix: {infix_error}\nmy: {res_my}"
    res_py = eval_py(infix)
    if res_py != res_my:
        return f"{code!r}\ninfix: {infix}\npy: {res_py}\nmy: {res_my}"
    return None


if __name__ == "__main__":
    while True:
        mismatch = check(generate(10))
        if mismatch is not None:
            print(f"{mismatch}\n\n")
