"""HTTP access to Solid pod resources and Turtle parsing."""

import logging
from typing import List, Optional
from urllib.parse import urldefrag

import requests
from rdflib import BNode, Graph, URIRef
from rdflib import Literal as RDFLiteral

from . import vocab
from .errors import ParseError, TransportError
from .models import Fact, Identifier, Literal, Term

logger = logging.getLogger(__name__)

NO_CACHE = "no-cache"


def _to_term(node) -> Term:
    if isinstance(node, RDFLiteral):
        if node.datatype is not None:
            datatype = str(node.datatype)
        elif node.language:
            datatype = vocab.RDF_LANG_STRING
        else:
            datatype = vocab.XSD_STRING
        return Literal(value=str(node), datatype=datatype, language=node.language)
    if isinstance(node, BNode):
        return Identifier(f"_:{node}")
    if isinstance(node, URIRef):
        return Identifier(str(node))
    raise TypeError(f"Unsupported node type: {type(node).__name__}")


class _DocumentOrderGraph(Graph):
    """Graph that remembers the order in which the parser added triples."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.added = {}  # triple -> None, insertion ordered

    def add(self, triple):
        self.added.setdefault(triple, None)
        return super().add(triple)

    def addN(self, quads):
        quads = list(quads)
        for subject, predicate, obj, _ in quads:
            self.added.setdefault((subject, predicate, obj), None)
        return super().addN(quads)


def parse_turtle(text: str, base_uri: str) -> List[Fact]:
    """
    Parse a Turtle document into facts.

    Facts are returned in the order their statements appear in the
    document (a repeated statement keeps its first position), so the same
    text always gives the same list regardless of hash randomization.

    Args:
        text: Turtle source.
        base_uri: Base for relative references, normally the document URL.

    Returns:
        The document's facts, in document order.

    Raises:
        ParseError: If the document is not valid Turtle.
    """
    graph = _DocumentOrderGraph()
    try:
        graph.parse(data=text, format="turtle", publicID=base_uri)
    except Exception as e:
        raise ParseError(base_uri, f"invalid Turtle: {e}") from e

    facts = []
    for subject, predicate, obj in graph.added:
        facts.append(Fact(
            subject=_to_term(subject).value,
            predicate=str(predicate),
            object=_to_term(obj),
        ))
    return facts


class LdpClient:
    """Fetches linked-data resources from a pod."""

    def __init__(
        self,
        timeout: float = 30,
        accept: str = vocab.TURTLE,
        access_token: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the client.

        Args:
            timeout: Request timeout in seconds.
            accept: Accept header sent with every request.
            access_token: Optional bearer token for protected resources.
            session: requests session to reuse (a new one by default).
        """
        self.timeout = timeout
        self.accept = accept
        self.session = session or requests.Session()
        if access_token:
            self.session.headers["Authorization"] = f"Bearer {access_token}"

    def fetch(self, url: str, accept: Optional[str] = None, cache_mode: Optional[str] = None) -> str:
        """
        Fetch a resource body as text.

        Args:
            url: Resource URL. A fragment is not sent.
            accept: Accept header, defaults to the client's.
            cache_mode: NO_CACHE to bypass intermediate caches.

        Returns:
            The response body.

        Raises:
            TransportError: On network errors or a non-success status.
        """
        document_url = urldefrag(url)[0]
        headers = {"Accept": accept or self.accept}
        if cache_mode == NO_CACHE:
            headers["Cache-Control"] = "no-cache"
            headers["Pragma"] = "no-cache"

        logger.debug(f"GET {document_url} (Accept: {headers['Accept']})")
        try:
            response = self.session.get(document_url, headers=headers, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise TransportError(document_url, f"HTTP {status}", status_code=status) from e
        except requests.RequestException as e:
            raise TransportError(document_url, str(e)) from e

        return response.text

    def fetch_facts(self, url: str, cache_mode: Optional[str] = None) -> List[Fact]:
        """Fetch a Turtle resource and parse it relative to its own URL."""
        document_url = urldefrag(url)[0]
        text = self.fetch(document_url, cache_mode=cache_mode)
        return parse_turtle(text, document_url)
