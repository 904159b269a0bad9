"""UrlHelper: profile-aware link building and page transitions.

The helper snapshots the location hash it was started with, derives the
active profile from it, and answers ``getHashOnStart`` on the ``utils/Url``
channel until :meth:`UrlHelper.stop` is called.  Everything else is a plain
synchronous call::

    history = MemoryHistory("#/p/work/notes")
    with UrlHelper(history) as url:
        url.get_note_link(id="n1")                      # "notes/show/n1"
        url.navigate(url="/notes", include_profile=True)
        history.fragment                                # "p/work/notes"

Navigation targets are one of three destinations.  Callers can pass one
directly, or use the flat keyword options, which resolve with the precedence
``include_profile`` > ``filter_args`` > ``url``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from notesnav.channel import Channel, radio
from notesnav.config import NavConfig, load_config
from notesnav.history import BlobStore, HistoryProvider, ObjectUrlFactory
from notesnav.links import (
    FilterArgs,
    build_file_link,
    build_note_link,
    build_notes_link,
    build_profile_link,
    coerce_filter_args,
    model_id,
    model_source,
    parse_profile_id,
)


# ---------------------------------------------------------------------------
# Destinations
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PlainUrl:
    url: str


@dataclass(frozen=True)
class NoteFilter:
    """A note (or the notes list when no id resolves) under *filter_args*."""

    filter_args: FilterArgs | Mapping[str, Any] | None = None
    id: str | None = None
    model: Any = None


@dataclass(frozen=True)
class ProfileLink:
    url: str = ""
    profile_id: str | None = None


Destination = Union[PlainUrl, NoteFilter, ProfileLink]


_NOTE_KEYS = {"id", "model", "filter_args", "filterArgs"}


def destination_from_options(
    url: str | None = None,
    *,
    filter_args: FilterArgs | Mapping[str, Any] | None = None,
    include_profile: bool = False,
    profile_id: str | None = None,
    id: str | None = None,
    model: Any = None,
) -> Destination:
    """Turn flat navigation options into a single destination.

    A *filter_args* mapping may also carry the note itself (``id``,
    ``model``) with its list filter nested under ``filter_args`` or
    ``filterArgs``; otherwise its remaining keys are the list filter.
    """
    if include_profile:
        return ProfileLink(url or "", profile_id)
    if filter_args is None:
        return PlainUrl(url or "")
    if isinstance(filter_args, Mapping):
        id = filter_args.get("id") or id
        model = filter_args.get("model") or model
        nested = filter_args.get("filter_args", filter_args.get("filterArgs"))
        if nested is not None:
            filter_args = nested
        elif _NOTE_KEYS & filter_args.keys():
            filter_args = {k: v for k, v in filter_args.items() if k not in _NOTE_KEYS}
    return NoteFilter(filter_args, id, model)


# ---------------------------------------------------------------------------
# Helper
# ---------------------------------------------------------------------------


class UrlHelper:
    """Builds links for notes, notebooks and files and drives navigation."""

    HASH_ON_START = "getHashOnStart"

    def __init__(
        self,
        history: HistoryProvider,
        *,
        object_urls: ObjectUrlFactory | None = None,
        channel: Channel | None = None,
        config: NavConfig | None = None,
    ) -> None:
        self.config = config or load_config()
        self.history = history
        self.object_urls = object_urls or BlobStore(self.config.blob_origin)
        self.channel = channel or radio.channel(self.config.channel_name)

        self._hash_on_start: str = history.location_hash or ""
        self.profile_id: str | None = self.get_profile_id()

        self.channel.reply(self.HASH_ON_START, self._reply_hash_on_start, owner=self)

    @property
    def hash_on_start(self) -> str:
        """Location hash the session started with."""
        return self._hash_on_start

    def _reply_hash_on_start(self) -> str:
        return self._hash_on_start

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def stop(self) -> None:
        """Stop answering channel requests registered by this helper."""
        self.channel.stop_replying(self.HASH_ON_START, owner=self)

    def __enter__(self) -> "UrlHelper":
        return self

    def __exit__(self, *_: object) -> None:
        self.stop()

    # ------------------------------------------------------------------
    # Location
    # ------------------------------------------------------------------

    def get_hash(self) -> str | None:
        return self.history.fragment

    def get_profile_id(self, hash_: str | None = None) -> str | None:
        """Profile id in *hash_*, defaulting to the current location hash."""
        if hash_ is None:
            hash_ = self.history.location_hash
        return parse_profile_id(hash_)

    def check_profile(self) -> None:
        """Reload the page when the profile in the hash is not the one we started with."""
        if self.profile_id != self.get_profile_id():
            self.history.reload()

    def history_length(self) -> int:
        return self.history.length

    # ------------------------------------------------------------------
    # Links
    # ------------------------------------------------------------------

    def get_profile_link(self, url: str = "", profile_id: str | None = None) -> str:
        """Prefix *url* with ``/p/<profile>/``.

        Without *profile_id* the profile is read from the current hash; when
        none is found the prefix is left out and ``/<url>`` is returned.
        """
        return build_profile_link(profile_id or self.get_profile_id(), url)

    def get_notes_link(self, filter_args: FilterArgs | Mapping[str, Any] | None = None) -> str:
        args = coerce_filter_args(filter_args)
        link = build_notes_link(args, self.config.notes_root)
        if args.profile_id:
            return self.get_profile_link(url=link, profile_id=args.profile_id)
        return link

    def get_note_link(
        self,
        id: str | None = None,
        model: Any = None,
        filter_args: FilterArgs | Mapping[str, Any] | None = None,
    ) -> str:
        """Link to a single note, or to the notes list when no id resolves.

        An explicit *id* wins over ``model.id``.
        """
        note_id = id or model_id(model)
        notes_link = self.get_notes_link(filter_args)
        if not note_id:
            return notes_link
        return build_note_link(notes_link, note_id)

    def get_file_link(
        self,
        model: Any = None,
        src: Any = None,
        blob: bool = False,
        id: str | None = None,
    ) -> str:
        """Return an object URL (``blob=True``) or a ``#file:<id>`` pseudo link.

        Object URLs belong to the caller, who must revoke them through
        :attr:`object_urls` when done.
        """
        if blob:
            source = model_source(model)
            if source is None:
                source = src
            return self.object_urls.create_object_url(source)
        return build_file_link(model_id(model) or id)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def resolve(self, destination: Destination) -> str:
        """Return the link a destination navigates to."""
        if isinstance(destination, ProfileLink):
            return self.get_profile_link(url=destination.url, profile_id=destination.profile_id)
        if isinstance(destination, NoteFilter):
            return self.get_note_link(
                id=destination.id,
                model=destination.model,
                filter_args=destination.filter_args,
            )
        if isinstance(destination, PlainUrl):
            return destination.url
        raise TypeError(f"Unknown navigation destination: {destination!r}")

    def navigate(
        self,
        destination: Destination | str | None = None,
        *,
        trigger: bool = True,
        **options: Any,
    ) -> None:
        """Go to *destination*, or to the one built from keyword *options*.

        A string destination is the ``url`` option.  A tagged destination
        cannot be combined with options.
        """
        if destination is None:
            destination = destination_from_options(**options)
        elif isinstance(destination, str):
            destination = destination_from_options(destination, **options)
        elif options:
            raise TypeError(
                f"navigate() got options {sorted(options)} together with destination {destination!r}"
            )
        self.history.navigate(self.resolve(destination), trigger=trigger)

    def navigate_back(self, **options: Any) -> None:
        """Go back a page; with no history, navigate forward to the profile link instead."""
        if self.history_length() == 0:
            self.navigate(**{**options, "include_profile": True})
        else:
            self.history.back()
