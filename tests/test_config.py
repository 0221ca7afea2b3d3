"""
Tests for SMTP configuration loading.
"""

import json
import pytest

from pydantic import ValidationError

from email_system.config import (
    ConfigLoadError,
    ConfigOpenError,
    ConfigParseError,
    SMTPConfig,
    load_config,
)


class TestLoadConfig:
    """Test config.json deserialization."""

    def test_load_complete_config(self, config_file):
        config = load_config(config_file)

        assert config.smtp_host == 'smtp.example.com'
        assert config.smtp_port == 587
        assert config.username == 'mailer'
        assert config.password == 's3cret'
        assert config.from_address == 'mailer@example.com'

    def test_relative_path_resolved_against_working_directory(self, config_file, monkeypatch):
        monkeypatch.chdir(config_file.parent)

        config = load_config('config.json')

        assert config.smtp_host == 'smtp.example.com'

    def test_missing_fields_default_to_zero_values(self, tmp_path):
        path = tmp_path / 'config.json'
        path.write_text('{"smtp_host": "mail.example.com"}')

        config = load_config(path)

        assert config.smtp_host == 'mail.example.com'
        assert config.smtp_port == 0
        assert config.username == ''
        assert config.password == ''
        assert config.from_address == ''

    def test_unknown_keys_are_ignored(self, tmp_path):
        path = tmp_path / 'config.json'
        path.write_text(json.dumps({'smtp_host': 'h', 'smtp_port': 25, 'signature': 'Regards'}))

        config = load_config(path)

        assert config.smtp_port == 25
        assert not hasattr(config, 'signature')

    def test_values_are_not_validated(self, tmp_path):
        """Any value of the right type is accepted as-is."""
        path = tmp_path / 'config.json'
        path.write_text(json.dumps({'smtp_host': '', 'smtp_port': 99999, 'from': 'not an address'}))

        config = load_config(path)

        assert config.smtp_port == 99999
        assert config.from_address == 'not an address'

    def test_missing_file_raises_open_error(self, tmp_path):
        with pytest.raises(ConfigOpenError) as exc_info:
            load_config(tmp_path / 'config.json')

        assert exc_info.value.path == (tmp_path / 'config.json').resolve()
        assert 'Cannot open configuration file' in str(exc_info.value)

    def test_directory_raises_open_error(self, tmp_path):
        with pytest.raises(ConfigOpenError):
            load_config(tmp_path)

    def test_malformed_json_raises_parse_error(self, tmp_path):
        path = tmp_path / 'config.json'
        path.write_text('{"smtp_host": "smtp.example.com",')

        with pytest.raises(ConfigParseError) as exc_info:
            load_config(path)

        assert 'is invalid' in str(exc_info.value)

    @pytest.mark.parametrize('content', [
        '[]',
        '"smtp.example.com"',
        'null',
        '{"smtp_port": "not-a-number"}',
        '{"username": ["a", "b"]}',
    ])
    def test_wrong_shape_raises_parse_error(self, tmp_path, content):
        path = tmp_path / 'config.json'
        path.write_text(content)

        with pytest.raises(ConfigParseError):
            load_config(path)

    def test_invalid_utf8_raises_parse_error(self, tmp_path):
        path = tmp_path / 'config.json'
        path.write_bytes(b'{"smtp_host": "\xff\xfe"}')

        with pytest.raises(ConfigParseError):
            load_config(path)

    def test_both_errors_share_base_class(self):
        assert issubclass(ConfigOpenError, ConfigLoadError)
        assert issubclass(ConfigParseError, ConfigLoadError)


class TestSMTPConfig:
    """Test the configuration record."""

    def test_is_immutable(self, smtp_config):
        with pytest.raises(ValidationError):
            smtp_config.smtp_host = 'other.example.com'

    def test_password_hidden_from_repr(self, smtp_config):
        assert 's3cret' not in repr(smtp_config)
        assert 'smtp.example.com' in repr(smtp_config)

    def test_from_key_alias(self):
        config = SMTPConfig.model_validate({'from': 'me@example.com'})

        assert config.from_address == 'me@example.com'
