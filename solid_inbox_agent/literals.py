"""Conversion of typed literals into native Python values."""

import logging
import math
import re
from datetime import date, datetime, time
from typing import Any, Optional

from . import vocab
from .models import Identifier, Literal, Term

logger = logging.getLogger(__name__)

NOT_A_NUMBER = math.nan

# XSD lexical forms; int()/float() also accept "1_000", "inf", "nan", "1e5"
_INTEGER = re.compile(r"[+-]?[0-9]+")
_DECIMAL = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)")


def _parse_int(value: str) -> Any:
    value = value.strip()
    if not _INTEGER.fullmatch(value):
        return NOT_A_NUMBER
    return int(value)


def _parse_float(value: str) -> Any:
    value = value.strip()
    if not _DECIMAL.fullmatch(value):
        return NOT_A_NUMBER
    return float(value)


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1")


def _iso(value: str) -> str:
    # fromisoformat() only accepts "Z" from Python 3.11 on
    value = value.strip()
    if value.endswith("Z"):
        return value[:-1] + "+00:00"
    return value


def _parse_date(value: str) -> Any:
    return date.fromisoformat(_iso(value)[:10])


def _parse_time(value: str) -> Any:
    return time.fromisoformat(_iso(value))


def _parse_datetime(value: str) -> Any:
    return datetime.fromisoformat(_iso(value))


_CONVERTERS = {
    vocab.XSD_INTEGER: _parse_int,
    vocab.XSD_NON_NEGATIVE_INTEGER: _parse_int,
    vocab.XSD_DECIMAL: _parse_float,
    vocab.XSD_BOOLEAN: _parse_bool,
    vocab.XSD_DATE: _parse_date,
    vocab.XSD_TIME: _parse_time,
    vocab.XSD_DATETIME: _parse_datetime,
}


def coerce(value: Any, datatype: Optional[str]) -> Any:
    """
    Convert a literal's text into a native value according to its datatype.

    Integers and decimals that fail to parse become NaN. Dates and times
    that fail to parse are returned as the raw text. Unknown datatypes
    (including xsd:string) return the text unchanged. Values that are not
    strings are assumed to be converted already and returned as-is.

    Args:
        value: Literal text.
        datatype: Full datatype URI, or None.

    Returns:
        The converted value. Never raises.
    """
    if not isinstance(value, str):
        return value

    converter = _CONVERTERS.get(datatype)
    if converter is None:
        return value

    try:
        return converter(value)
    except ValueError as e:
        logger.debug(f"Could not convert literal '{value}' as {datatype}: {e}")
        return value


def term_value(term: Term) -> Any:
    """Return a literal's native value, or an identifier's URI string."""
    if isinstance(term, Literal):
        return coerce(term.value, term.datatype)
    if isinstance(term, Identifier):
        return term.value
    raise TypeError(f"Not a graph term: {term!r}")
