"""In-memory index over the facts of one fetched resource."""

from collections import defaultdict
from typing import Dict, Iterable, Iterator, List, Optional

from .models import Fact, Term


class FactStore:
    """
    Read-only fact index keyed by subject and by predicate.

    Query results keep the order of the facts passed in. Facts from
    parse_turtle are in document order, so "first match" lookups give the
    same answer for the same document on every run.
    """

    def __init__(self, facts: Iterable[Fact]):
        self._facts: List[Fact] = list(facts)
        self._by_subject: Dict[str, List[Fact]] = defaultdict(list)
        self._by_predicate: Dict[str, List[Fact]] = defaultdict(list)
        for fact in self._facts:
            self._by_subject[fact.subject].append(fact)
            self._by_predicate[fact.predicate].append(fact)

    def __len__(self) -> int:
        return len(self._facts)

    def __iter__(self) -> Iterator[Fact]:
        return iter(self._facts)

    def match(
        self,
        subject: Optional[str] = None,
        predicate: Optional[str] = None,
        obj: Optional[Term] = None,
    ) -> List[Fact]:
        """
        Return all facts matching the given pattern.

        Args:
            subject: Subject identifier, or None for any.
            predicate: Predicate identifier, or None for any.
            obj: Object term, or None for any.

        Returns:
            Matching facts in input order.
        """
        if subject is not None and predicate is not None:
            by_subject = self._by_subject.get(subject, [])
            by_predicate = self._by_predicate.get(predicate, [])
            candidates = by_subject if len(by_subject) <= len(by_predicate) else by_predicate
        elif subject is not None:
            candidates = self._by_subject.get(subject, [])
        elif predicate is not None:
            candidates = self._by_predicate.get(predicate, [])
        else:
            candidates = self._facts

        return [
            fact for fact in candidates
            if (subject is None or fact.subject == subject)
            and (predicate is None or fact.predicate == predicate)
            and (obj is None or fact.object == obj)
        ]

    def objects(self, subject: Optional[str], predicate: Optional[str]) -> List[Term]:
        return [fact.object for fact in self.match(subject, predicate)]

    def first_object(self, subject: Optional[str], predicate: Optional[str]) -> Optional[Term]:
        objects = self.objects(subject, predicate)
        return objects[0] if objects else None

    def subjects(self, predicate: Optional[str], obj: Optional[Term] = None) -> List[str]:
        return [fact.subject for fact in self.match(None, predicate, obj)]
