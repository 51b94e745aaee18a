"""Twilio SMS delivery of notifications."""

import logging
from typing import Optional

from .config import TwilioConfig
from .formatter import MAX_SMS_LENGTH, format_message
from .models import DisplayRecord

logger = logging.getLogger(__name__)

try:
    from twilio.base.exceptions import TwilioRestException
    from twilio.rest import Client
    TWILIO_AVAILABLE = True
except ImportError:
    TWILIO_AVAILABLE = False
    logger.warning("Twilio library not installed. Install with: pip install twilio")

# Twilio error code for rejected credentials
AUTHENTICATION_ERROR = 20003

_clients = {}


def _client_for(config: TwilioConfig):
    key = (config.account_sid, config.auth_token)
    if key not in _clients:
        _clients[key] = Client(config.account_sid, config.auth_token)
    return _clients[key]


def send_sms(record: DisplayRecord, config: Optional[TwilioConfig]) -> str:
    """
    Text one notification to the configured phone number.

    Args:
        record: The notification to send.
        config: Twilio configuration.

    Returns:
        The Twilio message SID.

    Raises:
        ImportError: If the twilio package is missing.
        TwilioRestException: If Twilio rejects the message.
    """
    if not TWILIO_AVAILABLE:
        raise ImportError("Twilio library not installed. Install with: pip install twilio")
    if config is None:
        raise ValueError("SMS delivery needs a Twilio configuration")

    body = format_message(record, max_length=MAX_SMS_LENGTH)
    try:
        sent = _client_for(config).messages.create(
            body=body,
            from_=config.from_number,
            to=config.to_number,
        )
    except TwilioRestException as e:
        if e.code == AUTHENTICATION_ERROR:
            logger.error(
                f"Twilio rejected the credentials for account {config.account_sid[:10]}...; "
                f"check TWILIO_ACCOUNT_SID and TWILIO_AUTH_TOKEN"
            )
        raise

    logger.info(f"SMS for {record.id} sent to {config.to_number} (SID {sent.sid})")
    return sent.sid
