"""
Pytest configuration and shared fixtures for the inbox agent tests.

- ``pod``: an in-memory stand-in for a Solid pod serving Turtle documents
- ``display``: a display collaborator that records what it was asked to show
"""

import sys
from pathlib import Path

import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from solid_inbox_agent.errors import TransportError  # noqa: E402
from solid_inbox_agent.ldp_client import parse_turtle  # noqa: E402

PREFIXES = """
@prefix as: <https://www.w3.org/ns/activitystreams#> .
@prefix ldp: <http://www.w3.org/ns/ldp#> .
@prefix dct: <http://purl.org/dc/terms/> .
@prefix xsd: <http://www.w3.org/2001/XMLSchema#> .
@prefix foaf: <http://xmlns.com/foaf/0.1/> .
@prefix schema: <http://schema.org/> .
"""


class FakePod:
    """Serves Turtle documents by URL, parsed with the real parser."""

    def __init__(self):
        self.documents = {}
        self.failures = {}
        self.requests = []

    def add(self, url, turtle):
        self.documents[url] = PREFIXES + turtle

    def fail(self, url, error=None):
        self.failures[url] = error or TransportError(url, "HTTP 404", status_code=404)

    def fetch_facts(self, url, cache_mode=None):
        url = url.split("#")[0]
        self.requests.append((url, cache_mode))
        if url in self.failures:
            raise self.failures[url]
        if url not in self.documents:
            raise TransportError(url, "HTTP 404", status_code=404)
        return parse_turtle(self.documents[url], url)

    def fetched(self, url):
        return [cache for requested, cache in self.requests if requested == url]


class RecordingDisplay:
    """Display collaborator returning queued results (success by default)."""

    def __init__(self):
        self.shown = []
        self.results = []

    def __call__(self, record):
        self.shown.append(record)
        if self.results:
            result = self.results.pop(0)
            if isinstance(result, Exception):
                raise result
            return result
        return True


@pytest.fixture
def pod():
    return FakePod()


@pytest.fixture
def display():
    return RecordingDisplay()


@pytest.fixture
def reported():
    """Error reporter that collects (message, error) pairs."""
    errors = []

    def report(message, error):
        errors.append((message, error))

    report.errors = errors
    return report
