from __future__ import annotations

from collections.abc import Iterable

from src.constants import LITERAL_SEPARATOR


def escape_sql_literal(value: str) -> str:
    """
    Escape a Python string for use as a single-quoted SQL literal.
    Doubles single quotes per SQL rules. Empty/None → empty string.
    """
    return (value or "").replace("'", "''")


def quote_identifier(identifier: str) -> str:
    """Quote a single SQL identifier using backticks, doubling any embedded backticks."""
    return f"`{str(identifier).replace('`', '``')}`"


def format_literal_list(values: Iterable[object], escape: bool = False) -> str:
    """
    Render values as comma-separated single-quoted literals: `'a', 'b', '1'`.

    Every value is quoted, numbers included. Input order is kept.
    Embedded quotes are left alone unless `escape` is set.
    """
    literals = []
    for value in values:
        text = str(value)
        if escape:
            text = escape_sql_literal(text)
        literals.append(f"'{text}'")
    return LITERAL_SEPARATOR.join(literals)
