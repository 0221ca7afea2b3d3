"""
Application settings management.
Uses python-dotenv to load environment variables from a .env file
in the current working directory.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# automailer works relative to the directory it is invoked from
env_path = Path.cwd() / '.env'
load_dotenv(dotenv_path=env_path)

# Store original environment values to prevent modification
_ENV_CACHE = {}


def get_setting(key: str, default=None):
    """
    Get a setting from environment variables.

    Returns a copy of the value to prevent accidental modification
    of the actual environment variable.

    Args:
        key: Environment variable name
        default: Default value if not found

    Returns:
        The environment variable value or default

    Example:
        >>> LOG_PATH = get_setting('AUTOMAILER_LOG_PATH', 'automailer.log')
    """
    # Use cached value if available, otherwise get from env
    if key not in _ENV_CACHE:
        _ENV_CACHE[key] = os.getenv(key, default)

    value = _ENV_CACHE[key]

    # For mutable types, return a copy
    if isinstance(value, (list, dict)):
        return value.copy()

    return value


# Files, resolved against the working directory
CONFIG_PATH = get_setting('AUTOMAILER_CONFIG_PATH', 'config.json')
LOG_PATH = get_setting('AUTOMAILER_LOG_PATH', 'automailer.log')

# Language of the console messages and of the outgoing e-mail
LANGUAGE = get_setting('AUTOMAILER_LANGUAGE', 'en').lower()

# SMTP socket timeout in seconds; unset keeps the socket default
_smtp_timeout = get_setting('SMTP_TIMEOUT')
SMTP_TIMEOUT = float(_smtp_timeout) if _smtp_timeout else None
