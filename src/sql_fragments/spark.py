"""PySpark adapter for expression fragments."""

from __future__ import annotations

import pyspark.sql.functions as F
from pyspark.sql import Column


def as_column(fragment: str) -> Column:
    """
    Wrap an expression fragment (e.g. from `generate_case_column`) as a Column.

    The alias inside the fragment becomes the column name. Nothing is
    executed; Spark resolves the expression when the DataFrame is evaluated.
    """
    return F.expr(fragment.strip())
