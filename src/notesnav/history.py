"""Navigation-provider and object-URL contracts, with in-memory implementations.

:class:`UrlHelper <notesnav.url.UrlHelper>` never touches browser globals; it
talks to a :class:`HistoryProvider` and an :class:`ObjectUrlFactory`.
:class:`MemoryHistory` and :class:`BlobStore` satisfy those protocols without a
browser, which is how the helper runs headless and in tests.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# Protocols
# ---------------------------------------------------------------------------


@runtime_checkable
class HistoryProvider(Protocol):
    """Location/history operations the URL helper relies on."""

    #: Router fragment of the current page (no leading ``#``).
    fragment: str | None
    #: Full location hash, ``#`` included.
    location_hash: str

    @property
    def length(self) -> int:
        """Number of entries :meth:`back` can return to."""
        ...

    def navigate(self, fragment: str, trigger: bool = True) -> None: ...
    def back(self) -> None: ...
    def reload(self) -> None: ...


@runtime_checkable
class ObjectUrlFactory(Protocol):
    def create_object_url(self, source: Any) -> str: ...
    def revoke_object_url(self, url: str) -> None: ...


# ---------------------------------------------------------------------------
# In-memory history
# ---------------------------------------------------------------------------


def normalise_fragment(fragment: str | None) -> str:
    """Strip the leading ``#``/``/`` and trailing whitespace, as hash routers do."""
    return (fragment or "").lstrip("#/").rstrip()


class MemoryHistory:
    """Hash history kept in a list, with route and reload listeners."""

    def __init__(self, location_hash: str = "") -> None:
        start = normalise_fragment(location_hash)
        self._entries: list[str] = [start]
        # Literal location hash of each entry, as the address bar showed it
        self._hashes: list[str] = [location_hash or ""]
        self._index = 0
        self.fragment: str | None = start
        self.location_hash = location_hash or ""
        self.reloads = 0
        self._route_listeners: list[Callable[[str], None]] = []
        self._reload_listeners: list[Callable[[], None]] = []

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def listen(self, callback: Callable[[str], None]) -> None:
        """Call *callback(fragment)* on every triggered navigation and back()."""
        self._route_listeners.append(callback)

    def on_reload(self, callback: Callable[[], None]) -> None:
        self._reload_listeners.append(callback)

    def _emit_route(self) -> None:
        for callback in list(self._route_listeners):
            callback(self.fragment or "")

    # ------------------------------------------------------------------
    # Provider API
    # ------------------------------------------------------------------

    @property
    def length(self) -> int:
        return self._index

    @property
    def entries(self) -> list[str]:
        return list(self._entries[: self._index + 1])

    def set_hash(self, location_hash: str) -> None:
        """Change the location hash without touching history, like typing in the address bar."""
        self.location_hash = location_hash

    def navigate(self, fragment: str, trigger: bool = True, replace: bool = False) -> None:
        target = normalise_fragment(fragment)
        if target == self.fragment:
            return
        location_hash = f"#{target}"
        if replace:
            self._entries[self._index] = target
            self._hashes[self._index] = location_hash
        else:
            # Forward entries are discarded once a new page is pushed
            del self._entries[self._index + 1 :]
            del self._hashes[self._index + 1 :]
            self._entries.append(target)
            self._hashes.append(location_hash)
            self._index += 1
        self.fragment = target
        self.location_hash = location_hash
        if trigger:
            self._emit_route()

    def back(self) -> None:
        if self._index == 0:
            return
        self._index -= 1
        self.fragment = self._entries[self._index]
        self.location_hash = self._hashes[self._index]
        self._emit_route()

    def reload(self) -> None:
        self.reloads += 1
        for callback in list(self._reload_listeners):
            callback()


# ---------------------------------------------------------------------------
# In-memory object URLs
# ---------------------------------------------------------------------------


class BlobStore:
    """Hands out ``blob:<origin>/<uuid>`` URLs for in-memory sources."""

    def __init__(self, origin: str = "null") -> None:
        self.origin = origin
        self._sources: dict[str, Any] = {}

    def __len__(self) -> int:
        return len(self._sources)

    def create_object_url(self, source: Any) -> str:
        url = f"blob:{self.origin}/{uuid.uuid4()}"
        self._sources[url] = source
        return url

    def revoke_object_url(self, url: str) -> None:
        self._sources.pop(url, None)

    def resolve(self, url: str) -> Any:
        """Return the source behind *url*, or ``None`` once revoked."""
        return self._sources.get(url)
