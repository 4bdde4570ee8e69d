"""Configuration utilities for infrastructure layer."""

import os


def get_log_level() -> str:
    """
    Get log level name.

    Returns:
        Upper-cased LOG_LEVEL env var, defaults to "INFO"
    """
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_app_version() -> str:
    """
    Get application version.

    Set at image build time (Docker build ARG -> ENV APP_VERSION).

    Returns:
        APP_VERSION env var, defaults to "0.0.0-dev"
    """
    return os.getenv("APP_VERSION", "0.0.0-dev")


def get_advisory_deduplicate() -> bool:
    """
    Whether medical advisories are de-duplicated.

    By default an advisory group is emitted once per matching condition,
    so repeated conditions repeat the advice.

    Returns:
        True if ADVISORY_DEDUPLICATE is "1", "true" or "yes"
    """
    return os.getenv("ADVISORY_DEDUPLICATE", "0").strip().lower() in ("1", "true", "yes")
