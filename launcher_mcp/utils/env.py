"""Environment variable access and random names."""

import logging
import os
import secrets
import string
from typing import Final

logger = logging.getLogger(__name__)

# Maximum size of a single environment variable on Windows
MAX_ENV_VALUE_LENGTH: Final[int] = 32767

ALPHABET: Final[str] = string.ascii_uppercase + string.ascii_lowercase + string.digits


def get_env(name: str) -> str | None:
    """Read an environment variable.

    Returns:
        The value, or None if the variable is unset or too long
    """
    value = os.environ.get(name)
    if value is not None and len(value) > MAX_ENV_VALUE_LENGTH:
        logger.warning("Environment variable %s exceeds %d chars", name, MAX_ENV_VALUE_LENGTH)
        return None
    return value


def set_env(name: str, value: str) -> bool:
    """Set an environment variable for this process and its children.

    Returns:
        True on success, False if the name or value is rejected
    """
    if not name or "=" in name or "\x00" in name:
        logger.warning("Invalid environment variable name: %r", name)
        return False
    if len(value) > MAX_ENV_VALUE_LENGTH:
        logger.warning("Value for %s exceeds %d chars", name, MAX_ENV_VALUE_LENGTH)
        return False
    if "\x00" in value:
        logger.warning("Value for %s contains a null byte", name)
        return False

    os.environ[name] = value
    return True


def get_random_str(length: int) -> str:
    """Generate a random alphanumeric string.

    Args:
        length: Number of characters

    Returns:
        String of ``length`` characters from A-Z, a-z and 0-9
    """
    return "".join(secrets.choice(ALPHABET) for _ in range(length))
