"""Data models for linked-data notifications."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Union


@dataclass(frozen=True)
class Identifier:
    """A URI or blank node label ("_:b0") used as a graph term."""
    value: str


@dataclass(frozen=True)
class Literal:
    """A typed literal value."""
    value: str
    datatype: str
    language: Optional[str] = None


Term = Union[Identifier, Literal]


@dataclass(frozen=True)
class Fact:
    """A single subject-predicate-object statement."""
    subject: str
    predicate: str
    object: Term


@dataclass
class NotificationRef:
    """A notification listed in an inbox container."""
    id: str
    modified: datetime  # naive UTC


@dataclass
class DisplayRecord:
    """Everything needed to show one notification to the user."""
    id: str                               # head activity identifier
    app_name: Optional[Any] = None
    app_type: Optional[Any] = None
    small_icon: Dict[str, Any] = field(default_factory=dict)
    large_icon: Optional[Dict[str, Any]] = None  # None unless it has a url
    timestamp: Optional[Any] = None       # as:published, usually a datetime
    title: Optional[Any] = None
    text: Optional[Any] = None            # as:content, else as:summary
    type: Optional[Any] = None
