from enum import StrEnum


class Sequence:
    """Sequential short code counter bounds."""

    # Integers below this value are reserved (they encode to 1-2 character codes)
    START = 100_000


class CodeLength:
    """Random short code length bounds (inclusive)."""

    MIN = 4
    MAX = 12
    DEFAULT = 7


class Retry:
    """Collision retry bounds for short code generation."""

    # Total attempts, the first generation counts as attempt 1
    MAX_ATTEMPTS = 10


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        CONFIG_PATH = 'TINYLINKS_CONFIG'
        LOG_LEVEL = 'LOG_LEVEL'
