"""E-mail delivery of notifications over SMTP."""

import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from .config import SMTPConfig
from .formatter import format_message
from .models import DisplayRecord

logger = logging.getLogger(__name__)


def build_email(record: DisplayRecord, config: SMTPConfig) -> MIMEMultipart:
    """Create the message for one notification."""
    msg = MIMEMultipart()
    msg['From'] = config.from_email or config.username
    msg['To'] = config.to_email
    subject = str(record.title) if record.title is not None else "New notification"
    if record.app_name is not None:
        subject = f"[{record.app_name}] {subject}"
    msg['Subject'] = subject

    body = format_message(record)
    if record.large_icon:
        body += f"\n\nImage: {record.large_icon['url']}"
    body += f"\n\nActivity: {record.id}"
    msg.attach(MIMEText(body, 'plain'))
    return msg


def send_email(record: DisplayRecord, config: SMTPConfig) -> None:
    """
    Send a notification by e-mail.

    Args:
        record: The notification to send.
        config: SMTP configuration.

    Raises:
        Exception: If email sending fails.
    """
    msg = build_email(record, config)
    timeout_seconds = 30

    try:
        logger.debug(f"Connecting to SMTP server: {config.host}:{config.port}")
        if config.port == 465:
            # Use SMTP_SSL for port 465
            server = smtplib.SMTP_SSL(config.host, config.port, timeout=timeout_seconds)
        else:
            # Use STARTTLS for port 587
            server = smtplib.SMTP(config.host, config.port, timeout=timeout_seconds)
            if config.use_tls:
                server.starttls()

        if config.username:
            server.login(config.username, config.password)
        server.send_message(msg)
        server.quit()

        logger.info(f"Email for {record.id} sent to {config.to_email}")

    except smtplib.SMTPAuthenticationError as e:
        logger.error(
            f"SMTP authentication failed for {config.username}. "
            f"For Gmail use an App Password, not your regular password. "
            f"Error details: {e}"
        )
        raise
    except (smtplib.SMTPException, ConnectionError, TimeoutError) as e:
        logger.error(f"Failed to send email: {e}")
        raise
