"""
Outcomes of a run and the fixed text shown for each of them.

Every run ends in exactly one Outcome. The console line for an outcome is
looked up in a per-language table so the wording can change without
touching the control flow.
"""

import enum
from typing import Dict


class Outcome(enum.Enum):
    """Terminal state of a run, with the process exit code it maps to."""

    SUCCESS = 0
    MISSING_ARGUMENTS = 2
    FILE_NOT_FOUND = 3
    INVALID_EMAIL = 4
    CONFIG_LOAD_FAILURE = 5
    SEND_ERROR = 6

    @property
    def exit_code(self) -> int:
        return self.value


DEFAULT_LANGUAGE = 'en'

MESSAGES: Dict[str, Dict[Outcome, str]] = {
    'en': {
        Outcome.MISSING_ARGUMENTS: "Too few parameters. Usage: automailer <file-path> <email-address>",
        Outcome.FILE_NOT_FOUND: "Error: specified file does not exist.",
        Outcome.INVALID_EMAIL: "Error: invalid e-mail address.",
        Outcome.CONFIG_LOAD_FAILURE: "Error: failed to load configuration.",
        Outcome.SEND_ERROR: "Error: failed to send e-mail.",
        Outcome.SUCCESS: "E-mail sent successfully.",
    },
    'nl': {
        Outcome.MISSING_ARGUMENTS: "Te weinig parameters. Gebruik: automailer <bestandspad> <e-mailadres>",
        Outcome.FILE_NOT_FOUND: "Fout: opgegeven bestand bestaat niet.",
        Outcome.INVALID_EMAIL: "Fout: ongeldig e-mailadres.",
        Outcome.CONFIG_LOAD_FAILURE: "Fout bij inlezen configuratie.",
        Outcome.SEND_ERROR: "Fout bij verzenden van e-mail.",
        Outcome.SUCCESS: "E-mail succesvol verzonden.",
    },
}

# Subject and body of the outgoing e-mail
MAIL_TEXT: Dict[str, Dict[str, str]] = {
    'en': {
        'subject': "Automatic file sent",
        'body': "See attachment",
    },
    'nl': {
        'subject': "Automatisch bestand verzonden",
        'body': "Zie bijlage",
    },
}


def _resolve(language: str) -> str:
    return language if language in MESSAGES else DEFAULT_LANGUAGE


def get_message(outcome: Outcome, language: str = DEFAULT_LANGUAGE) -> str:
    """
    Get the console line for an outcome.

    Unknown languages fall back to English.

    Example:
        >>> get_message(Outcome.INVALID_EMAIL)
        'Error: invalid e-mail address.'
    """
    return MESSAGES[_resolve(language)][outcome]


def get_mail_text(language: str = DEFAULT_LANGUAGE) -> Dict[str, str]:
    """Get a copy of the fixed subject and body for the outgoing e-mail."""
    return dict(MAIL_TEXT[_resolve(language)])
