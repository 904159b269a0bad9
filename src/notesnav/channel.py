"""Named request/reply channels.

A :class:`Channel` is a table of request names to handler callables.  Other
parts of the app look a value up by asking the channel instead of importing
the component that owns it::

    channel = radio.channel("utils/Url")
    channel.reply("getHashOnStart", lambda: "#/p/default/notes")
    channel.request("getHashOnStart")     # -> "#/p/default/notes"
    channel.stop_replying("getHashOnStart")

Handlers stay registered until explicitly stopped.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


class NoReplyError(LookupError):
    """Raised when a request has no registered handler."""


@dataclass
class _Handler:
    callback: Callable[..., Any]
    owner: object | None = None


class Channel:
    """Request/reply endpoint identified by :attr:`channel_name`."""

    def __init__(self, channel_name: str) -> None:
        self.channel_name = channel_name
        self._handlers: dict[str, _Handler] = {}

    def __repr__(self) -> str:
        return f"Channel({self.channel_name!r}, requests={sorted(self._handlers)})"

    def reply(self, name: str, callback: Callable[..., Any], owner: object | None = None) -> None:
        """Answer *name* requests with *callback*.

        Registering the same callback again is a no-op.  A different callback
        replaces the current one.
        """
        current = self._handlers.get(name)
        if current is not None:
            if current.callback == callback and current.owner is owner:
                return
            print(
                f"[warn] Reply to {name!r} on channel {self.channel_name!r} was overwritten",
                file=sys.stderr,
            )
        self._handlers[name] = _Handler(callback, owner)

    def request(self, name: str, *args: Any, **kwargs: Any) -> Any:
        handler = self._handlers.get(name)
        if handler is None:
            raise NoReplyError(f"Channel '{self.channel_name}' has no reply for '{name}'.")
        return handler.callback(*args, **kwargs)

    def has_reply(self, name: str) -> bool:
        return name in self._handlers

    def stop_replying(self, name: str | None = None, owner: object | None = None) -> None:
        """Remove handlers.

        With *name*, only that request; with *owner*, only handlers registered
        by that owner.  Without either, every handler on the channel.
        """
        for key in list(self._handlers):
            if name is not None and key != name:
                continue
            if owner is not None and self._handlers[key].owner is not owner:
                continue
            del self._handlers[key]


class Radio:
    """Registry handing out one :class:`Channel` per name."""

    def __init__(self) -> None:
        self._channels: dict[str, Channel] = {}

    def channel(self, name: str) -> Channel:
        if name not in self._channels:
            self._channels[name] = Channel(name)
        return self._channels[name]

    def reset(self) -> None:
        """Stop every reply on every channel and forget the channels."""
        for channel in self._channels.values():
            channel.stop_replying()
        self._channels = {}


#: Process-wide registry used when no explicit channel is passed around.
radio = Radio()
