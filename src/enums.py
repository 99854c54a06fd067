"""Enumerations used throughout the SQL fragment generators."""

from enum import StrEnum


class ScdColumn(StrEnum):
    """Technical columns added by the SCD Type 2 fragment."""

    VALID_FROM = "_row_valid_from"
    VALID_TO = "_row_valid_to"
    IS_ACTIVE = "_is_active"
