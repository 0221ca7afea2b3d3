#!/usr/bin/env python3
"""
CLI for automailer.
"""

import click

from email_system.logging import build_file_logger
from email_system.service import AutoMailer
import settings


@click.command(context_settings={'ignore_unknown_options': True})
@click.version_option(package_name="automailer")
@click.argument('args', nargs=-1, metavar='FILE_PATH EMAIL_ADDRESS')
@click.pass_context
def cli(ctx, args):
    """
    Send FILE_PATH as an e-mail attachment to EMAIL_ADDRESS.

    SMTP settings are read from config.json in the current directory and
    every run is logged to automailer.log.

    Example:
        automailer report.pdf user@example.com
    """
    mailer = AutoMailer(logger=build_file_logger(settings.LOG_PATH))
    outcome = mailer.run(args)
    ctx.exit(outcome.exit_code)


if __name__ == "__main__":
    cli()
