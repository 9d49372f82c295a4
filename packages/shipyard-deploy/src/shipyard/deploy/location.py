"""
Output location resolution.

An output root is either a local directory or a URI such as
``gs://bucket/path``. Derived locations append a single segment to the
path and leave everything else untouched:

    >>> suggested_output_path("gs://my-bucket/out")
    'gs://my-bucket/out/suggested'
    >>> expanded_output_path("./output")
    'output/expanded'
"""

import os
import posixpath
import re
from dataclasses import dataclass
from urllib.parse import urlsplit

from .errors import LocationParseError

SUGGESTED = "suggested"
EXPANDED = "expanded"

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


@dataclass(frozen=True)
class LocalPath:
    """A filesystem directory."""

    path: str

    def append_segment(self, segment: str) -> "LocalPath":
        return LocalPath(os.path.normpath(os.path.join(self.path, segment)))

    def __str__(self) -> str:
        return self.path


@dataclass(frozen=True)
class RemoteURI:
    """A URI location. Only the path is ever modified."""

    scheme: str
    netloc: str
    path: str
    query: str = ""
    fragment: str = ""

    def append_segment(self, segment: str) -> "RemoteURI":
        path = posixpath.normpath(posixpath.join(self.path, segment))
        # Always absolute, or the path would be read back as the authority
        if not path.startswith("/"):
            path = "/" + path
        return RemoteURI(self.scheme, self.netloc, path, self.query, self.fragment)

    def __str__(self) -> str:
        uri = f"{self.scheme}://{self.netloc}{self.path}"
        if self.query:
            uri += f"?{self.query}"
        if self.fragment:
            uri += f"#{self.fragment}"
        return uri


Location = LocalPath | RemoteURI


def parse_location(root: str) -> Location:
    """Parse an output root into a LocalPath or RemoteURI.

    Args:
        root: Local directory or URI

    Returns:
        RemoteURI when root starts with "<scheme>://", LocalPath otherwise

    Raises:
        LocationParseError: If root is not a valid location reference
    """
    if any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in root):
        raise LocationParseError(root, "invalid control character")
    if root.startswith(":"):
        raise LocationParseError(root, "missing scheme")

    if "://" not in root:
        return LocalPath(root)

    scheme = root.split("://", 1)[0]
    if not _SCHEME_RE.match(scheme):
        # "./a://b" is a path, "1gs://b" is neither path nor URI
        if ":" in root.split("/", 1)[0]:
            raise LocationParseError(root, f"invalid scheme {scheme!r}")
        return LocalPath(root)
    if _BAD_ESCAPE_RE.search(root):
        raise LocationParseError(root, "invalid percent escape")

    try:
        parts = urlsplit(root)
        _ = parts.port  # raises on a non-numeric port
    except ValueError as e:
        raise LocationParseError(root, str(e)) from e

    # urlsplit lowercases the scheme
    return RemoteURI(
        scheme=scheme,
        netloc=parts.netloc,
        path=parts.path,
        query=parts.query,
        fragment=parts.fragment,
    )


def resolve(root: str, segment: str) -> str:
    """Append segment to the path of root, keeping scheme and authority.

    Raises:
        LocationParseError: If root is not a valid location reference
    """
    return str(parse_location(root).append_segment(segment))


def suggested_output_path(root: str) -> str:
    """Location where suggested configs are written."""
    return resolve(root, SUGGESTED)


def expanded_output_path(root: str) -> str:
    """Location where expanded configs are written."""
    return resolve(root, EXPANDED)


@dataclass(frozen=True)
class OutputPaths:
    """Both derived output locations for one root."""

    root: str
    suggested: str
    expanded: str

    @classmethod
    def from_root(cls, root: str) -> "OutputPaths":
        location = parse_location(root)
        return cls(
            root=root,
            suggested=str(location.append_segment(SUGGESTED)),
            expanded=str(location.append_segment(EXPANDED)),
        )
