"""
Pytest configuration and fixtures for all tests.
"""

import json
import logging
import os
import sys
import pytest

# Add src to Python path before any imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../src'))

from email_system.client import SendError, Transport
from email_system.config import SMTPConfig


class FakeTransport(Transport):
    """Transport that keeps messages instead of delivering them."""

    def __init__(self, config=None):
        self.config = config
        self.sent = []

    def send(self, message):
        self.sent.append(message)


class FailingTransport(Transport):
    """Transport whose server always rejects the login."""

    def __init__(self, config=None):
        self.config = config

    def send(self, message):
        raise SendError("SMTP authentication failed: (535, b'5.7.8 Authentication credentials invalid')")


@pytest.fixture
def smtp_config():
    """Complete SMTP configuration."""
    return SMTPConfig(
        smtp_host='smtp.example.com',
        smtp_port=587,
        username='mailer',
        password='s3cret',
        from_address='mailer@example.com'
    )


@pytest.fixture
def attachment(tmp_path):
    """Small existing file to send."""
    path = tmp_path / 'report.txt'
    path.write_bytes(b'quarterly numbers\n')
    return path


@pytest.fixture
def config_file(tmp_path):
    """Valid config.json."""
    path = tmp_path / 'config.json'
    path.write_text(json.dumps({
        'smtp_host': 'smtp.example.com',
        'smtp_port': 587,
        'username': 'mailer',
        'password': 's3cret',
        'from': 'mailer@example.com'
    }))
    return path


@pytest.fixture
def test_logger(caplog):
    """Logger whose records are captured by caplog."""
    caplog.set_level(logging.INFO, logger='tests.automailer')
    return logging.getLogger('tests.automailer')


@pytest.fixture
def fake_transport():
    """Transport factory returning one shared FakeTransport."""
    transport = FakeTransport()

    def factory(config):
        transport.config = config
        return transport

    factory.transport = transport
    return factory
