"""Rendering display records as notification text."""

from datetime import datetime
from typing import Any, Dict

from .activity import local_name
from .models import DisplayRecord

# Twilio rejects message bodies above this length
MAX_SMS_LENGTH = 1600


def display_options(record: DisplayRecord) -> Dict[str, Any]:
    """
    Options for a basic desktop-style notification.

    Missing title and message become empty strings here, and only here.
    """
    return {
        "type": "basic",
        "icon_url": record.small_icon.get("url"),
        "image_url": record.large_icon.get("url") if record.large_icon else None,
        "title": str(record.title) if record.title is not None else "",
        "message": str(record.text) if record.text is not None else "",
    }


def _format_time(value: Any) -> str:
    if isinstance(value, datetime):
        return value.strftime("%b %d, %Y %I:%M %p")
    return str(value)


def format_message(record: DisplayRecord, max_length: int = None) -> str:
    """
    Plain-text rendering used for SMS and e-mail.

    Example:
        Mastodon: New follower
        Alice started following you.
        Type: Follow | Time: Dec 08, 2025 03:45 PM
    """
    options = display_options(record)
    heading = options["title"] or "New notification"
    if record.app_name is not None:
        heading = f"{record.app_name}: {heading}"

    lines = [heading]
    if options["message"]:
        lines.append(options["message"])

    details = []
    if record.type is not None:
        details.append(f"Type: {local_name(str(record.type))}")
    if record.timestamp is not None:
        details.append(f"Time: {_format_time(record.timestamp)}")
    if details:
        lines.append(" | ".join(details))

    message = "\n".join(lines)
    if max_length and len(message) > max_length:
        message = message[:max_length - 3] + "..."
    return message
