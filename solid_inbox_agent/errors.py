"""Exceptions raised by the inbox agent."""


class SolidAgentError(Exception):
    """Base class for agent errors."""


class ConfigurationError(SolidAgentError):
    """Settings are missing or the profile does not point to an inbox."""


class TransportError(SolidAgentError):
    """A resource could not be fetched."""

    def __init__(self, url: str, message: str, status_code: int = None):
        super().__init__(f"{url}: {message}")
        self.url = url
        self.status_code = status_code


class ParseError(SolidAgentError):
    """A fetched resource is not valid Turtle."""

    def __init__(self, url: str, message: str):
        super().__init__(f"{url}: {message}")
        self.url = url
