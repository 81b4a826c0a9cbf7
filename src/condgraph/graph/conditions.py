from __future__ import annotations

from typing import Sequence


def is_valid_condition(
    expression: str,
    *,
    variable_prefix: str = "$",
    operators: Sequence[str] = ("AND", "OR"),
) -> bool:
    """
    Checks a boolean expression against the alternating token grammar.

    Tokens are separated by single spaces. Even positions hold variables
    (non-empty, starting with ``variable_prefix``); odd positions hold one of
    ``operators``, matched case-sensitively. An empty token list is accepted.
    """
    tokens = expression.split(" ")

    if len(tokens) % 2 == 0 and len(tokens) != 0:
        return False

    for position, token in enumerate(tokens):
        if position % 2:
            if token not in operators:
                return False
        elif not token or not token.startswith(variable_prefix):
            return False

    return True
