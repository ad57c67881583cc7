from enum import Enum


class EnumEnvironment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class EnumModelVersion(str, Enum):
    """Version tags stamped on every prediction envelope."""

    DURATION = "heuristic-v1.0"
    DEMAND = "time-series-v1.0"
    ROUTE = "tsp-v1.0"


DEFAULT_START_POINT = "A-01-01"
BIN_LOCATION_PATTERN = r"^[A-Z]-\d{1,3}-\d{2}$"
