from __future__ import annotations

from typing import Sequence

from .types import TrackCandidate

# Raw lyrics as a provider hands them over: lines, one block of text, or nothing.
LyricsPayload = Sequence[str] | str | None


class CatalogProvider:
    name: str

    def initialize(self) -> None:
        raise NotImplementedError

    def search_tracks(self, title: str) -> Sequence[TrackCandidate] | None:
        raise NotImplementedError

    def fetch_lyrics(self, video_id: str) -> LyricsPayload:
        raise NotImplementedError
