"""Configuration settings for the LiftMark workout parser."""
import os


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


class Settings:
    """Parser settings."""

    # Advisory thresholds
    HIGH_REPS_THRESHOLD: int = 100
    MIN_REST_SECONDS: int = 10
    MAX_REST_SECONDS: int = 600

    # HTTP surface
    MAX_INPUT_CHARS: int = 50000

    def __init__(self):
        # Advisory thresholds
        self.HIGH_REPS_THRESHOLD = _int_env("LMWF_HIGH_REPS_THRESHOLD", 100)
        self.MIN_REST_SECONDS = _int_env("LMWF_MIN_REST_SECONDS", 10)
        self.MAX_REST_SECONDS = _int_env("LMWF_MAX_REST_SECONDS", 600)

        self.MAX_INPUT_CHARS = _int_env("LMWF_MAX_INPUT_CHARS", 50000)


settings = Settings()
