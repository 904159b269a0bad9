"""Profile-aware URL and navigation helper for the notes app."""

from notesnav.channel import Channel, NoReplyError, Radio, radio
from notesnav.config import NavConfig, load_config
from notesnav.history import BlobStore, HistoryProvider, MemoryHistory, ObjectUrlFactory
from notesnav.links import FilterArgs, parse_notes_link, parse_profile_id
from notesnav.url import NoteFilter, PlainUrl, ProfileLink, UrlHelper

__all__ = [
    "UrlHelper",
    "PlainUrl",
    "NoteFilter",
    "ProfileLink",
    "FilterArgs",
    "parse_profile_id",
    "parse_notes_link",
    "Channel",
    "Radio",
    "radio",
    "NoReplyError",
    "HistoryProvider",
    "MemoryHistory",
    "ObjectUrlFactory",
    "BlobStore",
    "NavConfig",
    "load_config",
]
