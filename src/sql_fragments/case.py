"""
CASE expression builders for derived columns.

Both builders return a fragment meant for a SELECT list: `CASE ... END AS name`.
Conditions, results and else values are raw SQL and are not escaped.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from src.logger import LOGGER
from src.sql_fragments.utils import format_literal_list

ConditionPairs = Mapping[str, str] | Iterable[tuple[str, str]]


def _ordered_pairs(conditions: ConditionPairs) -> list[tuple[str, str]]:
    # dicts iterate in insertion order, so WHEN order follows the caller
    if isinstance(conditions, Mapping):
        return list(conditions.items())
    return list(conditions)


def generate_case_column(
    column_name: str,
    conditions: ConditionPairs,
    else_value: str | None = None,
) -> str:
    """
    CASE WHEN c1 THEN r1 WHEN c2 THEN r2 ... [ELSE e] END AS column_name.

    WHEN clauses keep the order of `conditions`; the first match wins.
    The ELSE clause is emitted whenever `else_value` is not None, so values
    such as "0" or "" are kept.
    """
    pairs = _ordered_pairs(conditions)
    when_clauses = "\n        ".join(
        f"WHEN {condition} THEN {result}" for condition, result in pairs
    )
    else_clause = f"\n        ELSE {else_value}" if else_value is not None else ""
    LOGGER.debug("Building CASE column %s with %d condition(s)", column_name, len(pairs))
    return f"""
    CASE
        {when_clauses}{else_clause}
    END AS {column_name}
    """


def case_when_in_list(
    existing_column: str,
    values: Iterable[object],
    new_column: str,
    escape: bool = False,
) -> str:
    """
    1/0 flag for membership of `existing_column` in a literal list.

    Values are all rendered as quoted strings, numbers included. Embedded
    quotes pass through untouched unless `escape=True`.
    """
    literals = format_literal_list(values, escape=escape)
    LOGGER.debug("Building membership flag %s on %s", new_column, existing_column)
    return f"""
    CASE
        WHEN {existing_column} IN ({literals})
        THEN 1
        ELSE 0 END AS {new_column}
    """
