"""One polling cycle: profile -> inbox -> notifications -> display."""

import logging
from typing import Callable, Optional

from . import vocab
from .activity import ActivityResolver
from .db import HandledSet
from .errors import ConfigurationError, ParseError, TransportError
from .fact_store import FactStore
from .inbox import scan_inbox
from .ldp_client import NO_CACHE, LdpClient
from .models import DisplayRecord, Identifier, NotificationRef

logger = logging.getLogger(__name__)

Display = Callable[[DisplayRecord], bool]


def log_error(message: str, error: Exception) -> None:
    """Default error reporter."""
    logger.error(f"{message}: {error}")


class NotificationSession:
    """
    Shows new inbox notifications.

    A session keeps no state of its own between cycles; the caller passes
    in the HandledSet and must not run two cycles at the same time.
    """

    def __init__(
        self,
        client: LdpClient,
        display: Display,
        report_error: Callable[[str, Exception], None] = log_error,
    ):
        self.client = client
        self.display = display
        self.report_error = report_error
        self.resolver = ActivityResolver(client.fetch_facts, report_error)

    def resolve_inbox_url(self, profile_id: str) -> str:
        """
        Find the inbox advertised by a WebID profile.

        Raises:
            ConfigurationError: If the profile names no inbox.
            TransportError, ParseError: If the profile cannot be read.
        """
        store = FactStore(self.client.fetch_facts(profile_id))
        for predicate in vocab.INBOX_PREDICATES:
            inbox = store.first_object(profile_id, predicate)
            if isinstance(inbox, Identifier):
                logger.debug(f"Inbox of {profile_id} is {inbox.value}")
                return inbox.value
        raise ConfigurationError(f"No inbox found in profile {profile_id}")

    def process_notification(self, ref: NotificationRef) -> Optional[DisplayRecord]:
        """Fetch one notification and resolve it; None if there is nothing to show."""
        store = FactStore(self.client.fetch_facts(ref.id))
        return self.resolver.resolve(store, ref.id)

    def run_cycle(self, profile_id: str, handled: HandledSet) -> None:
        """
        Display every notification in the user's inbox that was not shown yet.

        Failures on single notifications are logged and retried on the next
        cycle. Only a successful display marks a notification as handled.

        Args:
            profile_id: WebID of the user.
            handled: Identifiers already shown; updated in place.

        Raises:
            ConfigurationError: If the profile names no inbox.
        """
        try:
            inbox_url = self.resolve_inbox_url(profile_id)
        except ConfigurationError as e:
            self.report_error("Cannot resolve inbox", e)
            raise
        except (TransportError, ParseError) as e:
            self.report_error(f"Could not read profile {profile_id}", e)
            return

        try:
            refs = scan_inbox(FactStore(self.client.fetch_facts(inbox_url, cache_mode=NO_CACHE)))
        except (TransportError, ParseError) as e:
            self.report_error(f"Could not read inbox {inbox_url}", e)
            return

        new_refs = [ref for ref in refs if ref.id not in handled]
        logger.info(f"Inbox has {len(refs)} notifications, {len(new_refs)} not shown yet")

        shown = 0
        for ref in new_refs:
            try:
                record = self.process_notification(ref)
            except (TransportError, ParseError) as e:
                logger.warning(f"Failed to load notification {ref.id}: {e}")
                continue

            if record is None:
                continue

            try:
                success = self.display(record)
            except Exception as e:
                logger.error(f"Display of {ref.id} failed: {e}", exc_info=True)
                continue

            if not success:
                logger.warning(f"Display of {ref.id} was not confirmed; will retry")
                continue

            handled.add(ref.id)
            shown += 1

        logger.info(f"Cycle complete: {shown} notifications shown")
