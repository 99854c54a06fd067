"""Data quality assertion queries. An empty result means the assertion holds."""

from __future__ import annotations

from src.constants import INVALID_KEY_ALIAS
from src.logger import LOGGER


def run_assert_relationship(
    child_table: str, child_column: str, parent_table: str, parent_column: str
) -> str:
    """
    SELECT every child value with no matching parent value, aliased `invalid_key`.

    NULLs on the parent side are not filtered: with standard NOT IN semantics a
    NULL in the subquery makes the predicate unknown, so no rows come back.
    """
    LOGGER.debug(
        "Building relationship assertion %s.%s -> %s.%s",
        child_table,
        child_column,
        parent_table,
        parent_column,
    )
    return f"""
    select
        {child_column} as {INVALID_KEY_ALIAS}
    from {child_table}
    where {child_column} not in (
        select {parent_column} from {parent_table}
    )
    """
