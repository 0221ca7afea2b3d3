"""
High-level service that runs one automailer invocation.

This module provides the AutoMailer class that sequences argument,
file and address checks, configuration loading and delivery. Each step
either passes or ends the run with a fixed Outcome.
"""

import logging
from typing import Callable, Optional, Sequence

import click

from email_system.client import EmailClient, SendError, SMTPTransport, Transport
from email_system.config import ConfigLoadError, SMTPConfig, load_config
from email_system.logging import EmailLogger
from email_system.messages import Outcome, get_mail_text, get_message
from email_system.validators import file_exists, is_valid_email
import settings


class AutoMailer:
    """
    Sends one file to one recipient and reports the result.

    The log sink, the console writer and the transport are injected so
    the whole flow can run without a terminal or an SMTP server.

    Example:
        >>> mailer = AutoMailer(logger=build_file_logger('automailer.log'))
        >>> mailer.run(['report.pdf', 'user@example.com'])
        <Outcome.SUCCESS: 0>
    """

    def __init__(
        self,
        logger: logging.Logger,
        echo: Callable[[str], None] = click.echo,
        transport_factory: Callable[[SMTPConfig], Transport] = SMTPTransport,
        config_path: Optional[str] = None,
        language: Optional[str] = None
    ):
        """
        Initialize service.

        Args:
            logger: Destination of the log lines
            echo: Writes the one console line of the run
            transport_factory: Builds the Transport from the loaded config
            config_path: JSON config file (default: CONFIG_PATH setting)
            language: Message language (default: LANGUAGE setting)
        """
        self.email_logger = EmailLogger(logger)
        self.echo = echo
        self.transport_factory = transport_factory
        self.config_path = config_path or settings.CONFIG_PATH
        self.language = language or settings.LANGUAGE

    def _finish(self, outcome: Outcome) -> Outcome:
        self.echo(get_message(outcome, self.language))
        return outcome

    def run(self, args: Sequence[str]) -> Outcome:
        """
        Run the checks and send the file.

        Args:
            args: Positional arguments, file path then e-mail address.
                Anything after the second is ignored.

        Returns:
            Outcome: How the run ended
        """
        if len(args) < 2:
            self.email_logger.mark_missing_arguments(
                get_message(Outcome.MISSING_ARGUMENTS, self.language)
            )
            return self._finish(Outcome.MISSING_ARGUMENTS)

        file_path, recipient = args[0], args[1]

        if not file_exists(file_path):
            self.email_logger.mark_file_not_found(file_path)
            return self._finish(Outcome.FILE_NOT_FOUND)

        if not is_valid_email(recipient):
            self.email_logger.mark_invalid_email(recipient)
            return self._finish(Outcome.INVALID_EMAIL)

        try:
            config = load_config(self.config_path)
        except ConfigLoadError as e:
            self.email_logger.mark_config_failed(str(e))
            return self._finish(Outcome.CONFIG_LOAD_FAILURE)

        mail_text = get_mail_text(self.language)

        try:
            client = EmailClient(config, self.transport_factory(config))
            client.send_file(
                recipient=recipient,
                file_path=file_path,
                subject=mail_text['subject'],
                body=mail_text['body']
            )
        except SendError as e:
            self.email_logger.mark_failed(recipient, file_path, str(e))
            return self._finish(Outcome.SEND_ERROR)

        self.email_logger.mark_sent(recipient, file_path)
        return self._finish(Outcome.SUCCESS)
