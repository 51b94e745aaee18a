"""Listing and ordering the notifications of an inbox container."""

import logging
from datetime import date, datetime, timezone
from typing import List, Optional

from . import vocab
from .fact_store import FactStore
from .literals import term_value
from .models import Identifier, NotificationRef

logger = logging.getLogger(__name__)


def _make_naive_utc(value) -> Optional[datetime]:
    """Convert a modification value to a naive UTC datetime, or None."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    return None


def scan_inbox(store: FactStore) -> List[NotificationRef]:
    """
    List the notifications of an inbox, newest first.

    Ordering uses the container's dcterms:modified metadata, not the
    publication time inside each notification, so that no notification has
    to be fetched before the order is known. Notifications without a usable
    modification time are left out.

    Args:
        store: Facts of the inbox container.

    Returns:
        NotificationRef objects sorted by modification time, descending.
    """
    contained: List[str] = []
    for term in store.objects(None, vocab.LDP_CONTAINS):
        if isinstance(term, Identifier) and term.value not in contained:
            contained.append(term.value)

    refs = []
    for notification_id in contained:
        modified_term = store.first_object(notification_id, vocab.DCTERMS_MODIFIED)
        if modified_term is None:
            logger.debug(f"Skipping {notification_id}: no modification time")
            continue

        modified = _make_naive_utc(term_value(modified_term))
        if modified is None:
            logger.debug(f"Skipping {notification_id}: unreadable modification time {modified_term.value!r}")
            continue

        refs.append(NotificationRef(id=notification_id, modified=modified))

    refs.sort(key=lambda ref: ref.modified, reverse=True)
    logger.debug(f"Inbox lists {len(contained)} notifications, {len(refs)} orderable")
    return refs
