"""
SMTP email client for sending a file as an attachment.

This module provides the EmailClient class, which composes the message,
and the Transport classes that deliver it. SMTPTransport talks to a real
server; tests substitute their own Transport.
"""

import mimetypes
import smtplib
import ssl
from abc import ABC, abstractmethod
from email import encoders
from email.mime.base import MIMEBase
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formatdate, make_msgid, parseaddr
from pathlib import Path
from typing import Optional

from email_system.config import SMTPConfig
import settings

# Port on which the server expects TLS from the first byte
SMTPS_PORT = 465


class SendError(Exception):
    """Raised when a message could not be composed or delivered."""
    pass


class Transport(ABC):
    """
    Delivers a composed message.

    Subclasses implement send() and raise SendError on any failure.
    """

    @abstractmethod
    def send(self, message: MIMEMultipart) -> None:
        pass


class SMTPTransport(Transport):
    """
    Synchronous SMTP delivery with the credentials from SMTPConfig.

    Port 465 uses implicit TLS. Any other port starts in plain text and
    upgrades with STARTTLS when the server offers it. Credentials are only
    sent to servers that advertise AUTH.

    Example:
        >>> transport = SMTPTransport(load_config('config.json'))
        >>> transport.send(message)
    """

    def __init__(self, config: SMTPConfig, timeout: Optional[float] = None):
        """
        Initialize transport.

        Args:
            config: SMTP host, port, credentials and sender
            timeout: Socket timeout in seconds (default: SMTP_TIMEOUT setting)
        """
        self.config = config
        self.timeout = timeout if timeout is not None else settings.SMTP_TIMEOUT

    @property
    def use_ssl(self) -> bool:
        return self.config.smtp_port == SMTPS_PORT

    def _connect(self) -> smtplib.SMTP:
        kwargs = {}
        if self.timeout is not None:
            kwargs['timeout'] = self.timeout

        if self.use_ssl:
            return smtplib.SMTP_SSL(
                self.config.smtp_host,
                self.config.smtp_port,
                context=ssl.create_default_context(),
                **kwargs
            )

        return smtplib.SMTP(self.config.smtp_host, self.config.smtp_port, **kwargs)

    def send(self, message: MIMEMultipart) -> None:
        """
        Dial, authenticate and send one message.

        Raises:
            SendError: If connecting, authenticating or sending fails
        """
        if not self.config.smtp_host:
            raise SendError("SMTP host is not configured")

        try:
            server = self._connect()

            try:
                server.ehlo()
                if not self.use_ssl and server.has_extn('starttls'):
                    server.starttls(context=ssl.create_default_context())
                    server.ehlo()

                if self.config.username and server.has_extn('auth'):
                    server.login(self.config.username, self.config.password)

                server.sendmail(
                    self.config.from_address,
                    [message['To']],
                    message.as_string()
                )

            finally:
                try:
                    server.quit()
                except smtplib.SMTPServerDisconnected:
                    pass

        except smtplib.SMTPAuthenticationError as e:
            raise SendError(f"SMTP authentication failed: {e}") from e
        except smtplib.SMTPException as e:
            raise SendError(f"SMTP error: {e}") from e
        except OSError as e:
            raise SendError(
                f"Cannot connect to {self.config.smtp_host}:{self.config.smtp_port}: {e}"
            ) from e
        except Exception as e:
            raise SendError(f"Failed to send e-mail: {e}") from e


class EmailClient:
    """
    Composes the attachment e-mail and hands it to a Transport.

    Example:
        >>> client = EmailClient(config, SMTPTransport(config))
        >>> client.send_file(
        ...     recipient="user@example.com",
        ...     file_path="report.pdf",
        ...     subject="Automatic file sent",
        ...     body="See attachment"
        ... )
    """

    def __init__(self, config: SMTPConfig, transport: Transport):
        self.config = config
        self.transport = transport

    def build_message(
        self,
        recipient: str,
        file_path: str,
        subject: str,
        body: str
    ) -> MIMEMultipart:
        """
        Build a multipart message with a plain-text body and one attachment.

        Args:
            recipient: Single recipient address
            file_path: File to attach, read now
            subject: Subject header
            body: Plain-text body

        Returns:
            MIMEMultipart: The composed message

        Raises:
            SendError: If the file cannot be read
        """
        path = Path(file_path)

        try:
            content = path.read_bytes()
        except OSError as e:
            raise SendError(f"Cannot read attachment {file_path}: {e}") from e

        msg = MIMEMultipart('mixed')
        msg['From'] = self.config.from_address
        msg['To'] = recipient
        msg['Subject'] = subject
        msg['Date'] = formatdate(localtime=True)
        sender_domain = parseaddr(self.config.from_address)[1].rpartition('@')[2]
        msg['Message-ID'] = make_msgid(domain=sender_domain or None)

        msg.attach(MIMEText(body, 'plain', 'utf-8'))

        content_type, encoding = mimetypes.guess_type(path.name)
        if content_type is None or encoding is not None:
            content_type = 'application/octet-stream'
        maintype, subtype = content_type.split('/', 1)

        part = MIMEBase(maintype, subtype)
        part.set_payload(content)
        encoders.encode_base64(part)
        part.add_header('Content-Disposition', 'attachment', filename=path.name)
        msg.attach(part)

        return msg

    def send_file(
        self,
        recipient: str,
        file_path: str,
        subject: str,
        body: str
    ) -> MIMEMultipart:
        """
        Send a file to a single recipient.

        Returns:
            MIMEMultipart: The message that was delivered

        Raises:
            SendError: If the attachment is unreadable or delivery fails
        """
        msg = self.build_message(recipient, file_path, subject, body)
        self.transport.send(msg)
        return msg
