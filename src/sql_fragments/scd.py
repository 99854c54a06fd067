"""
SQL builder for Slowly Changing Dimension (SCD) Type 2 validity columns.

Each row's validity window ends where the next row for the same partition key
begins, giving gapless, non-overlapping `[valid_from, valid_to)` intervals.

Design guarantees
- Deterministic, side-effect free string generation.
- Identifiers are used verbatim; quoting is the caller's job.
- The end-of-validity sentinel is injected, defaulting to settings.
- Rows sharing a timestamp within a partition are ordered by the engine.
"""

from __future__ import annotations

from collections.abc import Sequence

from src import settings
from src.enums import ScdColumn
from src.logger import LOGGER


def build_partition_clause(partition_columns: Sequence[str]) -> str:
    """`partition by a, b` with the columns in input order."""
    return f"partition by {', '.join(partition_columns)}"


def build_lead_expression(timestamp_column: str, partition_columns: Sequence[str]) -> str:
    """Look-ahead to the next timestamp in the partition, ordered ascending."""
    partition_by = build_partition_clause(partition_columns)
    return f"lead({timestamp_column}) over ({partition_by} order by {timestamp_column})"


def add_scd_columns(
    ref_table: str,
    timestamp_column: str,
    partition_columns: Sequence[str],
    end_of_validity: str = settings.END_OF_VALIDITY_DATE,
) -> str:
    """
    SELECT *, plus `_row_valid_from`, `_row_valid_to` and `_is_active` over `ref_table`.

    `_row_valid_to` falls back to `end_of_validity` (a SQL expression) for the
    latest row of each partition, which is also the only row flagged active.
    Both columns share one lead expression so they always agree.
    """
    lead = build_lead_expression(timestamp_column, partition_columns)
    LOGGER.debug("Building SCD2 columns for %s over %s", ref_table, lead)
    return f"""
        select
            *,
            {timestamp_column} as {ScdColumn.VALID_FROM},
            coalesce({lead}, {end_of_validity}) as {ScdColumn.VALID_TO},
            case when {lead} is null then 1 else 0 end as {ScdColumn.IS_ACTIVE}
        from {ref_table}
    """
