"""Configuration values sourced from environment variables."""

import os
from typing import Final

END_OF_VALIDITY_DATE: Final[str] = os.getenv(
    key="END_OF_VALIDITY_DATE", default="cast('9999-12-31 23:59:59' as timestamp)"
)
LOG_LEVEL: Final[str] = os.getenv(key="LOG_LEVEL", default="INFO")
LOGGER_NAME: Final[str] = os.getenv(key="LOGGER_NAME", default="sql-fragments")
LOG_COLOUR_ENABLED: Final[bool] = bool(
    os.getenv(key="LOG_COLOUR_ENABLED", default="True").upper() == "TRUE"
)
