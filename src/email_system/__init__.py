"""
Email module for sending a file as an attachment over SMTP.

This module provides:
- config: SMTPConfig and the config.json loader
- validators: file existence and e-mail syntax checks
- client: EmailClient and the SMTP Transport
- logging: log file setup and EmailLogger
- messages: Outcome and the console text for each outcome
- service: AutoMailer, which runs one invocation
"""

# Note: Imports are not exposed at package level
# Import from submodules directly:
#   from email_system.client import EmailClient
#   from email_system.service import AutoMailer

__all__ = ["client", "config", "logging", "messages", "service", "validators"]
