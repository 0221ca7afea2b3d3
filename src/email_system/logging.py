"""
Email sending logging system.

Provides the file-backed logger used for every run and the EmailLogger
class that writes one tagged line per outcome with the recipient, path
or error involved.

Writing the log must never stop a run: a log file that cannot be opened
or written to is ignored.
"""

import logging

from email_system.messages import Outcome

LOG_FORMAT = '%(asctime)s %(message)s'
LOG_DATE_FORMAT = '%Y/%m/%d %H:%M:%S'


class _SilentFileHandler(logging.FileHandler):
    """Append-only file handler that drops records it cannot write."""

    def handleError(self, record):
        pass


def build_file_logger(log_path: str, name: str = 'automailer') -> logging.Logger:
    """
    Create a logger that appends to log_path.

    The file is created if absent. If it cannot be opened the logger
    discards everything.

    Args:
        log_path: Log file path
        name: Logger name

    Returns:
        logging.Logger: Non-propagating logger with a single handler
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    try:
        handler = _SilentFileHandler(log_path, mode='a', encoding='utf-8')
        handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
    except OSError:
        handler = logging.NullHandler()

    logger.addHandler(handler)
    return logger


class EmailLogger:
    """
    Logger for the outcome of a send.

    Writes to whichever logging.Logger it is given, so callers decide
    where the lines go.

    Example:
        >>> email_logger = EmailLogger(build_file_logger('automailer.log'))
        >>> email_logger.mark_sent('user@example.com', 'report.pdf')
    """

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def _write(self, level: int, outcome: Outcome, text: str):
        try:
            self.logger.log(level, '[%s] %s', outcome.name, text)
        except Exception:
            # A broken log never fails the run
            pass

    def mark_missing_arguments(self, usage: str):
        self._write(logging.ERROR, Outcome.MISSING_ARGUMENTS, usage)

    def mark_file_not_found(self, file_path: str):
        self._write(logging.ERROR, Outcome.FILE_NOT_FOUND, f"File does not exist: {file_path}")

    def mark_invalid_email(self, address: str):
        self._write(logging.ERROR, Outcome.INVALID_EMAIL, f"Invalid e-mail address: {address}")

    def mark_config_failed(self, error_message: str):
        self._write(logging.ERROR, Outcome.CONFIG_LOAD_FAILURE, f"Failed to load configuration: {error_message}")

    def mark_failed(self, recipient: str, file_path: str, error_message: str):
        """Record a failed delivery with the transport error."""
        self._write(
            logging.ERROR,
            Outcome.SEND_ERROR,
            f"Failed to send {file_path} to {recipient}: {error_message}"
        )

    def mark_sent(self, recipient: str, file_path: str):
        """Record a delivered message."""
        self._write(logging.INFO, Outcome.SUCCESS, f"Sent to {recipient}: {file_path}")
