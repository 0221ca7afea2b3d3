"""
SMTP configuration loaded from a JSON file.

The file is read once per run and deserialized into an immutable
SMTPConfig. Only the shape of the document is checked; the values
themselves are accepted as they are.
"""

from pathlib import Path
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class ConfigLoadError(Exception):
    """Base exception for configuration loading errors."""

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path


class ConfigOpenError(ConfigLoadError):
    """The configuration file could not be opened or read."""
    pass


class ConfigParseError(ConfigLoadError):
    """The configuration file is not a JSON object of the expected shape."""
    pass


class SMTPConfig(BaseModel):
    """
    SMTP settings read from config.json.

    Missing keys fall back to empty strings and a zero port.

    Example:
        >>> SMTPConfig.model_validate_json('{"smtp_host": "mail.example.com", "from": "me@example.com"}')
        SMTPConfig(smtp_host='mail.example.com', smtp_port=0, username='', from_address='me@example.com')
    """

    model_config = ConfigDict(frozen=True, extra='ignore', populate_by_name=True)

    smtp_host: str = Field('', description="SMTP server hostname")
    smtp_port: int = Field(0, description="SMTP server port")
    username: str = Field('', description="SMTP authentication username")
    password: str = Field('', repr=False, description="SMTP authentication password")
    from_address: str = Field('', alias='from', description="Sender address")


def load_config(config_path: Union[str, Path]) -> SMTPConfig:
    """
    Load SMTP settings from a JSON file.

    Args:
        config_path: Path to the JSON file, relative paths are resolved
            against the current working directory

    Returns:
        SMTPConfig: Parsed settings

    Raises:
        ConfigOpenError: If the file is missing or cannot be read
        ConfigParseError: If the content is not valid JSON or has the wrong shape
    """
    path = Path(config_path).resolve()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = f.read()
    except OSError as e:
        raise ConfigOpenError(f"Cannot open configuration file {path}: {e}", path) from e
    except UnicodeDecodeError as e:
        raise ConfigParseError(f"Configuration file {path} is not valid UTF-8: {e}", path) from e

    try:
        return SMTPConfig.model_validate_json(raw)
    except ValidationError as e:
        # Collapse pydantic's multi-line report into one log-friendly line
        details = '; '.join(
            f"{'.'.join(str(loc) for loc in err['loc']) or '<root>'}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigParseError(f"Configuration file {path} is invalid: {details}", path) from e
