"""
Pattern expression expansion.

Lowers structured pattern expressions into ``re`` pattern strings so that
ligature patterns can be written without hand-escaping::

    ("+", ("any", "=>"))            ->  (?:[=>])+
    ("or", "==", ("seq", "=", "!")) ->  (?:==|(?:=!))

Strings inside an expression are literal text. A tuple or list names an
operator followed by its operands.
"""

import re
from typing import Any

from .config import CONFIG
from .models import PatternExpressionError

_QUANTIFIERS = {
    "*": "*",
    "+": "+",
    "?": "?",
    "zero-or-more": "*",
    "one-or-more": "+",
    "opt": "?",
}


def _charset(operands, negate: bool = False) -> str:
    if not operands or not all(isinstance(op, str) for op in operands):
        raise PatternExpressionError(
            f"Character set needs string operands, got {operands!r}"
        )
    chars = "".join(operands)
    # Inside a class only these are special
    escaped = "".join("\\" + c if c in "\\]^-[" else c for c in chars)
    return ("[^" if negate else "[") + escaped + "]"


def _sequence(operands) -> str:
    return "".join(expand_pattern(op) for op in operands)


def _group(operands) -> str:
    body = _sequence(operands)
    return f"(?:{body})"


def expand_pattern(expression: Any) -> str:
    """
    Expand a structured pattern expression into an ``re`` pattern string.

    Args:
        expression: Literal string, or a tuple/list whose first item is an
            operator (``seq``, ``or``, ``*``, ``+``, ``?``, ``any``,
            ``not-any``, ``repeat``, ``regexp``)

    Returns:
        Pattern string usable with the ``re`` module

    Raises:
        PatternExpressionError: If the expression is malformed
    """
    if isinstance(expression, str):
        return re.escape(expression)

    if not isinstance(expression, (tuple, list)) or not expression:
        raise PatternExpressionError(f"Not a pattern expression: {expression!r}")

    operator, *operands = expression
    if not isinstance(operator, str):
        raise PatternExpressionError(f"Operator must be a string: {operator!r}")

    if operator in CONFIG.SEQUENCE_OPERATORS:
        return _group(operands) if len(operands) > 1 else _sequence(operands)

    if operator in CONFIG.ALTERNATION_OPERATORS:
        if not operands:
            raise PatternExpressionError("Alternation needs at least one operand")
        return "(?:" + "|".join(expand_pattern(op) for op in operands) + ")"

    if operator in _QUANTIFIERS:
        if not operands:
            raise PatternExpressionError(f"{operator!r} needs an operand")
        return _group(operands) + _QUANTIFIERS[operator]

    if operator in CONFIG.CHARSET_OPERATORS:
        return _charset(operands)

    if operator == "not-any":
        return _charset(operands, negate=True)

    if operator in CONFIG.RAW_OPERATORS:
        if len(operands) != 1 or not isinstance(operands[0], str):
            raise PatternExpressionError(f"{operator!r} takes one pattern string")
        return f"(?:{operands[0]})"

    if operator == "repeat":
        counts = []
        while operands and isinstance(operands[0], int) and not isinstance(
            operands[0], bool
        ):
            counts.append(operands.pop(0))
        if not counts or len(counts) > 2 or not operands:
            raise PatternExpressionError(
                "repeat takes (repeat, n, expr) or (repeat, n, m, expr)"
            )
        if len(counts) == 2 and counts[0] > counts[1]:
            raise PatternExpressionError(f"Bad repeat range {counts[0]}..{counts[1]}")
        bounds = ",".join(str(n) for n in counts)
        return _group(operands) + "{" + bounds + "}"

    raise PatternExpressionError(f"Unknown pattern operator {operator!r}")
