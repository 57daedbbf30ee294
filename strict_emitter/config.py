"""Process-wide configuration read when the emitter module is imported."""

from __future__ import annotations

import logging
import os

from strict_emitter.constants import DEFAULT_MAX_LISTENERS, MAX_LISTENERS_ENV_VAR

logger = logging.getLogger(__name__)


def parse_max_listeners(value: str | None, default: int = DEFAULT_MAX_LISTENERS) -> int:
    """Parse a max listeners setting, falling back to `default` on bad input

    Args:
        value (str | None): Raw value, usually taken from the environment.
        default (int): Returned when `value` is missing or invalid. Defaults to 10.

    Returns:
        int: A non-negative threshold. 0 disables the leak warning.
    """
    if value is None or value.strip() == "":
        return default
    try:
        parsed = int(value)
    except ValueError:
        logger.error(f"{MAX_LISTENERS_ENV_VAR}: {value!r} is not an integer. Using {default}")
        return default
    if parsed < 0:
        logger.error(f"{MAX_LISTENERS_ENV_VAR}: {value} must not be negative. Using {default}")
        return default
    return parsed


def get_default_max_listeners() -> int:
    """Initial value for `Emitter.default_max_listeners`."""
    return parse_max_listeners(os.environ.get(MAX_LISTENERS_ENV_VAR))
