"""
Parsing of "key=value" command line arguments.

Repeated flags such as ``--label team=web --label tier=frontend`` arrive as
a list of strings. Surrounding whitespace and commas are tolerated so that
``--label "team=web,"`` works, and only the first '=' splits, so values may
contain '='.
"""

import string
from dataclasses import dataclass
from typing import Iterable, NamedTuple

from .errors import EmptyKeyError, EmptyValueError, MalformedPairError

_TRIM = string.whitespace + ","


class KeyValue(NamedTuple):
    key: str
    value: str


@dataclass(frozen=True)
class Link:
    """A link shown on the Application resource."""

    description: str
    url: str

    def to_dict(self) -> dict[str, str]:
        return {"description": self.description, "url": self.url}


def split_entry(entry: str) -> KeyValue | None:
    """Split a single "key=value" entry.

    Args:
        entry: Raw entry from the command line

    Returns:
        The parsed pair, or None if the entry is blank

    Raises:
        MalformedPairError: If there is no '=' separator
        EmptyKeyError: If the key is blank
        EmptyValueError: If the value is blank
    """
    pair = entry.strip(_TRIM)
    if not pair:
        return None

    key, sep, value = pair.partition("=")
    if not sep:
        raise MalformedPairError(
            f"key value pair {pair!r} must be separated by a '=' character", entry
        )

    key = key.strip()
    if not key:
        raise EmptyKeyError(f"key must not be empty string in {pair!r}", entry)
    value = value.strip()
    if not value:
        raise EmptyValueError(f"value must not be empty string in {pair!r}", entry)

    return KeyValue(key, value)


def parse_map(entries: Iterable[str]) -> dict[str, str]:
    """Build a mapping from "key=value" entries. Later keys win."""
    result: dict[str, str] = {}
    for entry in entries:
        kv = split_entry(entry)
        if kv is not None:
            result[kv.key] = kv.value
    return result


def parse_links(entries: Iterable[str]) -> list[Link]:
    """Build links from "description=url" entries, in input order."""
    links: list[Link] = []
    for entry in entries:
        kv = split_entry(entry)
        if kv is not None:
            links.append(Link(description=kv.key, url=kv.value))
    return links
