"""TypeClassifier: maps a leaf value to a (tag, content, color) Classification.

Dispatch order matters in Python:
- ``bool`` MUST be checked before ``int`` (``isinstance(True, int)`` is True).
- ``BigInt`` MUST be checked before ``int`` (it is an ``int`` subclass).
- ``datetime`` MUST be checked before ``date`` only for formatting; both are
  tagged ``date``.

Known oddity: a float NaN is tagged ``float`` (not ``NaN``) because the float
test is "non-integral OR not-a-number".  The ``NaN`` entry in ``TYPE_MAP`` is
kept for hooks and custom renderers but is never produced by ``classify``.

Classifications are immutable and derived purely from the value, so results for
primitive leaves are memoised in a module-level ``LRUCache``.  Other types are
classified fresh each time: an aware datetime or a ``Decimal`` can compare equal
to another value that displays differently.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Set
from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum, auto
from typing import Any

from cachetools import LRUCache, cached

__all__ = [
    "UNDEFINED",
    "BigInt",
    "Classification",
    "ContainerKind",
    "TYPE_MAP",
    "TypeInfo",
    "TypeTag",
    "classify",
    "container_kind",
    "format_number",
]


class _Undefined:
    """Singleton standing in for an absent value (distinct from ``None``)."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()


class BigInt(int):
    """Marks an integer that should be shown as a big integer (``10n``)."""

    def __repr__(self) -> str:
        return f"{int(self)}n"


class TypeTag(StrEnum):
    """Type tags produced by ``classify`` (plus the container badges)."""

    STRING = "string"
    NUMBER = "number"
    FLOAT = "float"
    BIGINT = "bigint"
    BOOLEAN = "boolean"
    DATE = "date"
    NULL = "null"
    NAN = "NaN"
    UNDEFINED = "undefined"
    SET = "Set"
    MAP = "Map"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class TypeInfo:
    """Color token and short badge label for a type tag."""

    color: str
    label: str


TYPE_MAP: dict[TypeTag, TypeInfo] = {
    TypeTag.STRING: TypeInfo(color="#cb4b16", label="string"),
    TypeTag.NUMBER: TypeInfo(color="#268bd2", label="int"),
    TypeTag.FLOAT: TypeInfo(color="#859900", label="float"),
    TypeTag.BIGINT: TypeInfo(color="#268bd2", label="bigint"),
    TypeTag.BOOLEAN: TypeInfo(color="#2aa198", label="bool"),
    TypeTag.DATE: TypeInfo(color="#586e75", label="date"),
    TypeTag.NULL: TypeInfo(color="#d33682", label="null"),
    TypeTag.NAN: TypeInfo(color="#859900", label="NaN"),
    TypeTag.UNDEFINED: TypeInfo(color="#586e75", label="undefined"),
    TypeTag.SET: TypeInfo(color="#6c71c4", label="Set"),
    TypeTag.MAP: TypeInfo(color="#6c71c4", label="Map"),
}


@dataclass(frozen=True, slots=True)
class Classification:
    """Result of classifying a leaf value.

    Attributes:
        tag:     Which kind of leaf this is (see TypeTag).
        content: Display text for the value, e.g. ``"hello"`` (quoted), ``NULL``.
        color:   Color token for the content; empty for untyped leaves.
        badge:   Whether a type badge may be shown for this leaf.  ``null`` and
                 ``undefined`` never carry a badge.
    """

    tag: TypeTag
    content: str
    color: str
    badge: bool = True

    @property
    def label(self) -> str:
        """Short badge label for this tag, or "" when the tag has none."""
        info = TYPE_MAP.get(self.tag)
        return info.label if info is not None else ""


class ContainerKind(StrEnum):
    """Display shape of a container.

    - SEQUENCE -> "sequence" : list or tuple
    - OBJECT   -> "object"   : dict with only string keys
    - SET      -> "set"      : set or frozenset (shown as a sequence)
    - MAP      -> "map"      : any other mapping (shown as an object)
    """

    SEQUENCE = auto()
    OBJECT = auto()
    SET = auto()
    MAP = auto()

    @property
    def is_array(self) -> bool:
        """True when entries are index-keyed and shown with square brackets."""
        return self in (ContainerKind.SEQUENCE, ContainerKind.SET)


def container_kind(value: Any) -> ContainerKind | None:
    """Return the display shape of ``value``, or None for leaves."""
    if isinstance(value, (str, bytes, bytearray)):
        return None
    if isinstance(value, (list, tuple)):
        return ContainerKind.SEQUENCE
    if isinstance(value, Set):
        return ContainerKind.SET
    if isinstance(value, dict) and all(isinstance(k, str) for k in value):
        return ContainerKind.OBJECT
    if isinstance(value, Mapping):
        return ContainerKind.MAP
    return None


def format_number(value: int | float) -> str:
    """Format a number the way a JavaScript host would print it."""
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    return str(value)


def _format_date(value: date) -> str:
    if not isinstance(value, datetime):
        return value.strftime("%a %b %d %Y")
    text = value.strftime("%a %b %d %Y %H:%M:%S")
    if value.tzinfo is not None:
        text += f" GMT{value.strftime('%z')}"
        name = value.tzname()
        if name:
            text += f" ({name})"
    return text


# Equal values of these exact types always display identically.
_CACHEABLE_TYPES = frozenset({type(None), _Undefined, bool, int, BigInt, float, str})


def _cache_key(value: Any, quotes: str = '"') -> tuple[Any, ...]:
    # type() keeps True/1/1.0/BigInt(1) apart; they hash and compare equal.
    return (type(value), value, quotes)


_classification_cache: LRUCache[tuple[Any, ...], Classification] = LRUCache(
    maxsize=1024
)


@cached(_classification_cache, key=_cache_key)
def _classify_hashable(value: Any, quotes: str = '"') -> Classification:
    return _classify(value, quotes)


def _classify(value: Any, quotes: str) -> Classification:
    tag: TypeTag
    badge = True
    if value is None:
        tag, content, badge = TypeTag.NULL, "NULL", False
    elif value is UNDEFINED:
        tag, content, badge = TypeTag.UNDEFINED, "undefined", False
    elif isinstance(value, bool):
        tag, content = TypeTag.BOOLEAN, "true" if value else "false"
    elif isinstance(value, BigInt):
        tag, content = TypeTag.BIGINT, f"{int(value)}n"
    elif isinstance(value, int):
        tag, content = TypeTag.NUMBER, format_number(value)
    elif isinstance(value, float):
        is_float = math.isnan(value) or not value.is_integer()
        tag = TypeTag.FLOAT if is_float else TypeTag.NUMBER
        content = format_number(value)
    elif isinstance(value, date):
        tag, content = TypeTag.DATE, _format_date(value)
    elif isinstance(value, str):
        tag, content = TypeTag.STRING, f"{quotes}{value}{quotes}"
    else:
        tag, content = TypeTag.OTHER, str(value)

    info = TYPE_MAP.get(tag)
    return Classification(
        tag=tag,
        content=content,
        color=info.color if info is not None else "",
        badge=badge and info is not None,
    )


def classify(value: Any, quotes: str = '"') -> Classification:
    """Classify a leaf value.

    Args:
        value:  Any non-container, non-callable value.
        quotes: Character(s) wrapped around string content.

    Returns:
        The ``Classification`` for ``value``.

    Raises:
        TypeError: If ``value`` is a container or a callable; those are handled
            by the traversal, not the classifier.
    """
    if container_kind(value) is not None:
        msg = f"containers are not classified as leaves: {type(value).__name__}"
        raise TypeError(msg)
    if callable(value):
        msg = f"callables are not classified: {type(value).__name__}"
        raise TypeError(msg)
    if type(value) in _CACHEABLE_TYPES:
        return _classify_hashable(value, quotes)
    return _classify(value, quotes)
