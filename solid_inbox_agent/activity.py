"""Resolution of a notification resource into a display record."""

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence

from . import vocab
from .errors import ParseError, TransportError
from .fact_store import FactStore
from .literals import term_value
from .models import DisplayRecord, Fact, Identifier, Term

logger = logging.getLogger(__name__)

FetchFacts = Callable[[str], Sequence[Fact]]
ReportError = Callable[[str, Exception], None]


def local_name(uri: str) -> str:
    """
    Return the last part of a URI: the fragment, or else the last path segment.

    A trailing separator is ignored, so "http://x/ns/" gives "ns".
    """
    name = uri
    for separator in ("#", "/"):
        parts = name.split(separator)
        if len(parts) > 1 and not parts[-1]:
            name = parts[-2]
        else:
            name = parts[-1]
    return name


def find_head_activity(store: FactStore) -> Optional[str]:
    """
    Pick the activity to display from a notification resource.

    Every subject with an as:generator is a candidate. With several
    candidates, the one that no other activity embeds (as subject, object,
    target or actor) wins; if that does not single one out, the first
    candidate is used.

    Args:
        store: Facts of the notification resource.

    Returns:
        The head activity identifier, or None if nothing has a generator.
    """
    candidates: List[str] = []
    for subject in store.subjects(vocab.AS_GENERATOR):
        if subject not in candidates:
            candidates.append(subject)

    if not candidates:
        return None
    if len(candidates) == 1:
        return candidates[0]

    top_level = [
        candidate for candidate in candidates
        if not any(
            store.match(None, predicate, Identifier(candidate))
            for predicate in vocab.EMBEDDING_PREDICATES
        )
    ]
    if len(top_level) == 1:
        return top_level[0]

    logger.debug(
        f"{len(top_level)} of {len(candidates)} activities are top-level; "
        f"falling back to {candidates[0]}"
    )
    return candidates[0]


def _first_value(store: FactStore, subject: Optional[str], predicate: str) -> Any:
    term = store.first_object(subject, predicate)
    return term_value(term) if term is not None else None


def _node_id(term: Optional[Term]) -> Optional[str]:
    return term.value if isinstance(term, Identifier) else None


def collect_attributes(store: FactStore, node: Optional[str]) -> Dict[str, Any]:
    """Map every outgoing fact of a node to {local predicate name: value}."""
    attributes: Dict[str, Any] = {}
    if node is None:
        return attributes
    for fact in store.match(node):
        attributes.setdefault(local_name(fact.predicate), term_value(fact.object))
    return attributes


class ActivityResolver:
    """Turns the facts of one notification resource into a DisplayRecord."""

    def __init__(self, fetch_facts: FetchFacts, report_error: ReportError):
        """
        Args:
            fetch_facts: Fetches and parses a resource, used for icon fallback.
            report_error: Receives failures that do not stop resolution.
        """
        self.fetch_facts = fetch_facts
        self.report_error = report_error

    def resolve(self, store: FactStore, resource_id: str) -> Optional[DisplayRecord]:
        """
        Build the display record for a notification.

        Args:
            store: Facts of the notification resource.
            resource_id: URL the facts were fetched from.

        Returns:
            A DisplayRecord, or None if the resource has no activity with a generator.
        """
        activity = find_head_activity(store)
        if activity is None:
            logger.debug(f"No generator found in {resource_id}")
            return None

        generator_term = store.first_object(activity, vocab.AS_GENERATOR)
        generator = _node_id(generator_term)
        if generator is None:
            logger.debug(
                f"Generator of {activity} is a literal ({generator_term.value!r}); "
                f"no application name or icon can be looked up"
            )

        small_icon = collect_attributes(
            store, _node_id(store.first_object(generator, vocab.AS_ICON)) if generator else None
        )
        if "url" not in small_icon and generator:
            url = self.find_image_url(generator)
            if url:
                small_icon["url"] = url

        large_icon: Optional[Dict[str, Any]] = collect_attributes(
            store, _node_id(store.first_object(activity, vocab.AS_IMAGE))
        )
        if "url" not in large_icon:
            large_icon = None

        text = _first_value(store, activity, vocab.AS_CONTENT)
        if text is None:
            text = _first_value(store, activity, vocab.AS_SUMMARY)

        return DisplayRecord(
            id=activity,
            app_name=_first_value(store, generator, vocab.AS_NAME) if generator else None,
            app_type=_first_value(store, generator, vocab.RDF_TYPE) if generator else None,
            small_icon=small_icon,
            large_icon=large_icon,
            timestamp=_first_value(store, activity, vocab.AS_PUBLISHED),
            title=_first_value(store, activity, vocab.AS_NAME),
            text=text,
            type=_first_value(store, activity, vocab.RDF_TYPE),
        )

    def find_image_url(self, generator: str) -> Optional[str]:
        """
        Look up an image for a generator in its own profile document.

        Failures are reported and yield None.
        """
        if not generator.startswith(("http://", "https://")):
            logger.debug(f"Generator {generator} cannot be dereferenced")
            return None

        try:
            facts = self.fetch_facts(generator)
        except (TransportError, ParseError) as e:
            self.report_error(f"Could not find image for {generator}", e)
            return None

        for fact in facts:
            if fact.predicate in vocab.IMAGE_FALLBACK_PREDICATES:
                return fact.object.value
        return None
