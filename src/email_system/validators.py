"""
Input checks run before any configuration or network work.
"""

import os

import email_validator
from email_validator import EmailNotValidError

# Recipients on internal relays (localhost, *.local, bare hostnames) are
# valid address syntax, so no domain is reserved
email_validator.SPECIAL_USE_DOMAIN_NAMES = []


def file_exists(path: str) -> bool:
    """
    Check whether a filesystem entry exists at path.

    Only existence is checked; the file is not opened.
    """
    return os.path.exists(path)


def is_valid_email(value: str) -> bool:
    """
    Check that value is a single syntactically valid e-mail address.

    A display name is allowed ("Jane <jane@example.com>"). Deliverability
    is not checked, no DNS lookup is made and dotless domains such as
    "localhost" are accepted.

    Example:
        >>> is_valid_email("a@b.c")
        True
        >>> is_valid_email("admin@localhost")
        True
        >>> is_valid_email("a.b.c")
        False
    """
    if not value:
        return False

    try:
        email_validator.validate_email(
            value,
            allow_display_name=True,
            allow_quoted_local=True,
            allow_domain_literal=True,
            check_deliverability=False,
            globally_deliverable=False,
            test_environment=True
        )
    except EmailNotValidError:
        return False

    return True
