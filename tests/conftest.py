"""Shared fixtures for the notesnav tests."""

from __future__ import annotations

import pytest

from notesnav.channel import radio
from notesnav.history import BlobStore, MemoryHistory
from notesnav.url import UrlHelper


@pytest.fixture(autouse=True)
def _clean_env_and_radio(monkeypatch):
    """Every test starts without NOTESNAV_* overrides and with no channel replies."""
    for var in ("NOTESNAV_CHANNEL", "NOTESNAV_NOTES_ROOT", "NOTESNAV_BLOB_ORIGIN"):
        monkeypatch.delenv(var, raising=False)
    radio.reset()
    yield
    radio.reset()


@pytest.fixture()
def history() -> MemoryHistory:
    return MemoryHistory("#/p/default/")


@pytest.fixture()
def blobs() -> BlobStore:
    return BlobStore()


@pytest.fixture()
def url(history: MemoryHistory, blobs: BlobStore):
    helper = UrlHelper(history, object_urls=blobs)
    yield helper
    helper.stop()
