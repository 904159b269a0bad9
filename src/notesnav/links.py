"""Link grammar for profile-scoped note URLs.

Every durable location in the app is a hash fragment of the form::

    /p/<profileId>/notes/f/<filter>/q/<query>/p<page>/show/<noteId>

The ``/p/<profileId>/`` prefix is optional; a hash without it belongs to no
profile.  Segments after ``notes`` always appear in the order filter, query,
page, show.  Code that parses links back (see :func:`parse_notes_link`)
relies on that order.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

# ---------------------------------------------------------------------------
# Regex patterns
# ---------------------------------------------------------------------------

# "/p/<token>/" at the very start of the hash ("#" and leading "/" optional)
_PROFILE_RE = re.compile(r"^#?/?p/([^/]+)/")
# Same prefix, used to strip it off a target path
_PROFILE_PREFIX_RE = re.compile(r"^#?/?p/[^/]+/")
_NOTES_RE = re.compile(
    r"^notes"
    r"(?:/f/(?P<filter>[^/]+))?"
    r"(?:/q/(?P<query>[^/]+))?"
    r"(?:/p(?P<page>\d+))?"
    r"(?:/show/(?P<id>[^/]+))?"
    r"/?$"
)

#: Filter names the notes list understands.
NOTE_FILTERS: dict[str, str] = {
    "active": "Notes that are neither trashed nor archived",
    "favorite": "Notes marked as favourite",
    "trashed": "Notes in the trash",
    "notebooks": "Notes inside the notebook given as query",
    "tags": "Notes carrying the tag given as query",
    "search": "Full-text search for the query",
    "task": "Notes with unfinished tasks",
}

DEFAULT_NOTES_ROOT = "notes"


# ---------------------------------------------------------------------------
# Data model
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FilterArgs:
    """Filter criteria of a notes list link."""

    filter: str | None = None
    query: str | None = None
    page: str | int | None = None
    profile_id: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "FilterArgs":
        data = data or {}
        return cls(
            filter=data.get("filter"),
            query=data.get("query"),
            page=data.get("page"),
            profile_id=data.get("profile_id", data.get("profileId")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "filter": self.filter,
            "query": self.query,
            "page": self.page,
            "profile_id": self.profile_id,
        }


@dataclass(frozen=True)
class ParsedLink:
    """Result of :func:`parse_notes_link`."""

    profile_id: str | None
    filter_args: FilterArgs
    note_id: str | None = None


def coerce_filter_args(filter_args: FilterArgs | Mapping[str, Any] | None) -> FilterArgs:
    if isinstance(filter_args, FilterArgs):
        return filter_args
    return FilterArgs.from_dict(filter_args)


# ---------------------------------------------------------------------------
# Model access
# ---------------------------------------------------------------------------


def model_id(model: Any) -> str | None:
    """Return the identifier of a mapping or object model, or ``None``."""
    if model is None:
        return None
    if isinstance(model, Mapping):
        return model.get("id")
    return getattr(model, "id", None)


def model_source(model: Any, key: str = "src") -> Any:
    """Return the retrievable *key* value of *model* (``model.get(key)`` first)."""
    if model is None:
        return None
    getter = getattr(model, "get", None)
    if callable(getter):
        return getter(key)
    return getattr(model, key, None)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def parse_profile_id(hash_: str | None) -> str | None:
    """Return the ``<id>`` of a leading ``/p/<id>/`` segment, else ``None``."""
    match = _PROFILE_RE.match(hash_ or "")
    return match.group(1) if match else None


def strip_profile(path: str) -> str:
    """Drop a leading profile prefix and any leading ``#``/``/`` from *path*."""
    return _PROFILE_PREFIX_RE.sub("", path or "", count=1).lstrip("#/")


def parse_notes_link(link: str, notes_root: str = DEFAULT_NOTES_ROOT) -> ParsedLink | None:
    """Split a notes link into profile id, filter args and note id.

    Returns ``None`` when *link* is not a notes link.
    """
    profile_id = parse_profile_id(link)
    rest = strip_profile(link)
    if rest != notes_root and not rest.startswith(notes_root + "/"):
        return None
    rest = DEFAULT_NOTES_ROOT + rest[len(notes_root) :]
    match = _NOTES_RE.match(rest)
    if not match:
        return None
    return ParsedLink(
        profile_id=profile_id,
        filter_args=FilterArgs(
            filter=match.group("filter"),
            query=match.group("query"),
            page=match.group("page"),
            profile_id=profile_id,
        ),
        note_id=match.group("id"),
    )


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def build_profile_link(profile_id: str | None, url: str) -> str:
    """Return ``/p/<profile_id>/<url>``; without a profile id, just ``/<url>``."""
    path = strip_profile(url)
    if not profile_id:
        return f"/{path}"
    return f"/p/{profile_id}/{path}"


def build_notes_link(
    filter_args: FilterArgs | Mapping[str, Any] | None = None,
    notes_root: str = DEFAULT_NOTES_ROOT,
) -> str:
    """Return the profile-relative ``notes/f/../q/../p<n>`` link.

    Empty values (``None``, ``""``, page ``0``) drop their segment.
    ``filter_args.profile_id`` is not applied here.
    """
    args = coerce_filter_args(filter_args)
    link = notes_root
    if args.filter:
        if args.filter not in NOTE_FILTERS:
            print(f"[warn] Unknown notes filter {args.filter!r}", file=sys.stderr)
        link += f"/f/{args.filter}"
    if args.query:
        link += f"/q/{args.query}"
    if args.page is not None and str(args.page) not in {"", "0"}:
        link += f"/p{args.page}"
    return link


def build_note_link(notes_link: str, note_id: str) -> str:
    return f"{notes_link}/show/{note_id}"


def build_file_link(file_id: str | None) -> str:
    """Return the ``#file:<id>`` pseudo link the editor resolves to a file."""
    return f"#file:{file_id or ''}"
