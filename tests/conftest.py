from __future__ import annotations

from typing import Any

import pytest

from ytmusic_lyrics.config import AppConfig
from ytmusic_lyrics.sources.base import CatalogProvider
from ytmusic_lyrics.sources.types import Thumbnail, TrackCandidate


class FakeProvider(CatalogProvider):
    """
    In-memory provider for testing.

    Search results are keyed by title, lyrics by video id. Any of the three
    calls can be told to raise via `fail_on`.
    """

    name = "fake"

    def __init__(
        self,
        tracks: dict[str, list[TrackCandidate]] | None = None,
        lyrics: dict[str, Any] | None = None,
        fail_on: str | None = None,
    ):
        self.tracks = dict(tracks or {})
        self.lyrics = dict(lyrics or {})
        self.fail_on = fail_on
        self.init_calls = 0
        self.search_calls: list[str] = []
        self.lyrics_calls: list[str] = []

    def _maybe_fail(self, op: str) -> None:
        if self.fail_on == op:
            raise ConnectionError(f"{op} exploded")

    def initialize(self) -> None:
        self.init_calls += 1
        self._maybe_fail("initialize")

    def search_tracks(self, title: str):
        self.search_calls.append(title)
        self._maybe_fail("search")
        return self.tracks.get(title, [])

    def fetch_lyrics(self, video_id: str):
        self.lyrics_calls.append(video_id)
        self._maybe_fail("lyrics")
        return self.lyrics.get(video_id)


def make_track(
    title: str = "Imagine",
    artist: str = "John Lennon",
    video_id: str = "v1",
    thumbs: tuple[str, ...] = ("a", "b"),
) -> TrackCandidate:
    return TrackCandidate(
        artist=artist,
        title=title,
        video_id=video_id,
        thumbnails=tuple(Thumbnail(url=u) for u in thumbs),
    )


@pytest.fixture
def cfg(tmp_path) -> AppConfig:
    return AppConfig(
        config_dir=tmp_path / "config",
        language="en",
        location="",
        search_limit=5,
        request_timeout_s=3.0,
    )
