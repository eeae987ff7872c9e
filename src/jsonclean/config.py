"""Configuration utilities for JSONCLEAN.

This module centralizes small helpers and constants related to application configuration.
"""

import os
from pathlib import Path

from platformdirs import user_log_dir

from jsonclean.interfaces.batch_codec import BatchFormat

APP_NAME = "jsonclean"
ENV_PREFIX = "JSONCLEAN"  # pragma: no mutate
BATCH_FORMAT_ENV_VAR = f"{ENV_PREFIX}_FORMAT"
DEFAULT_BATCH_FORMAT = BatchFormat.JSON
LOG_FILE_NAME = "latest.log"


class InvalidBatchFormatError(Exception):
    """Raised when JSONCLEAN_FORMAT names an unknown batch format."""

    def __init__(self, value: str) -> None:
        choices = ", ".join(fmt.value for fmt in BatchFormat)
        super().__init__(
            f"{BATCH_FORMAT_ENV_VAR}={value!r} is not a valid format "
            f"(choose from {choices})."
        )
        self.value = value


def raw_batch_format() -> str | None:
    """Return the stripped `JSONCLEAN_FORMAT` value, or None if unset or empty."""
    return os.environ.get(BATCH_FORMAT_ENV_VAR, "").strip() or None


def get_batch_format() -> BatchFormat:
    """Get the default batch format from the environment.

    Returns:
        The format named by `JSONCLEAN_FORMAT` (case-insensitive), or
        `BatchFormat.JSON` if the variable is unset or empty.

    Raises:
        InvalidBatchFormatError: If `JSONCLEAN_FORMAT` names an unknown format.
    """
    if (value := raw_batch_format()) is None:
        return DEFAULT_BATCH_FORMAT
    try:
        return BatchFormat(value.lower())
    except ValueError as e:
        raise InvalidBatchFormatError(value) from e


def default_log_path() -> Path:
    """Return the default flight-recorder file path, creating its directory."""
    return Path(user_log_dir(APP_NAME, appauthor=False, ensure_exists=True)) / LOG_FILE_NAME
