"""Display collaborators: show a record and report whether it worked."""

import logging
from typing import Any, Callable

from .config import AppConfig
from .email_notifier import send_email
from .formatter import display_options, format_message
from .models import DisplayRecord
from .twilio_notifier import send_sms

logger = logging.getLogger(__name__)


def log_display(record: DisplayRecord) -> bool:
    """Write the notification to the log."""
    options = display_options(record)
    logger.info(f"Notification {record.id}\n{format_message(record)}")
    logger.debug(f"Icon: {options['icon_url']} Image: {options['image_url']}")
    return True


def _delivering(send: Callable[[DisplayRecord], Any], channel: str) -> Callable[[DisplayRecord], bool]:
    def display(record: DisplayRecord) -> bool:
        try:
            send(record)
        except Exception as e:
            logger.warning(f"{channel} delivery of {record.id} failed: {e}")
            return False
        return True
    return display


def create_display(config: AppConfig) -> Callable[[DisplayRecord], bool]:
    """Create the display collaborator for the configured method."""
    if config.method == "sms":
        return _delivering(lambda record: send_sms(record, config.twilio), "SMS")
    if config.method == "email":
        return _delivering(lambda record: send_email(record, config.smtp), "Email")
    return log_display
