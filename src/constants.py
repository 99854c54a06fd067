"""Shared constant values used by the SQL fragment generators."""

from typing import Final

INVALID_KEY_ALIAS: Final[str] = "invalid_key"
LITERAL_SEPARATOR: Final[str] = ", "
