from __future__ import annotations

import logging
from typing import Any

import requests
from ytmusicapi import YTMusic

from ytmusic_lyrics.config import AppConfig

from .base import CatalogProvider, LyricsPayload
from .errors import MalformedPayload, ProviderNotInitialized
from .types import Thumbnail, TrackCandidate

logger = logging.getLogger(__name__)


class _TimeoutSession(requests.Session):
    """requests.Session that applies a default timeout to every call."""

    def __init__(self, timeout_s: float):
        super().__init__()
        self.timeout_s = timeout_s

    def request(self, method, url, **kwargs):
        kwargs.setdefault("timeout", self.timeout_s)
        return super().request(method, url, **kwargs)


def _join_artists(artists: Any) -> str:
    if not artists:
        return ""
    if isinstance(artists, dict):
        artists = [artists]
    names = [str(a.get("name") or "") for a in artists if isinstance(a, dict)]
    return ", ".join(n for n in names if n)


def _thumbnails(raw: Any) -> tuple[Thumbnail, ...]:
    out: list[Thumbnail] = []
    for t in raw or ():
        url = t.get("url") if isinstance(t, dict) else None
        if not url:
            raise MalformedPayload(f"thumbnail without url: {t!r}")
        out.append(Thumbnail(url=str(url), width=t.get("width"), height=t.get("height")))
    return tuple(out)


def candidate_from_result(result: dict[str, Any]) -> TrackCandidate:
    video_id = result.get("videoId")
    if not video_id:
        raise MalformedPayload(f"search result without videoId: {result.get('title')!r}")
    return TrackCandidate(
        artist=_join_artists(result.get("artists")),
        title=str(result.get("title") or ""),
        video_id=str(video_id),
        thumbnails=_thumbnails(result.get("thumbnails")),
    )


class YTMusicProvider(CatalogProvider):
    name = "ytmusic"

    def __init__(self, cfg: AppConfig):
        self.cfg = cfg
        self._client: YTMusic | None = None

    @property
    def client(self) -> YTMusic:
        if self._client is None:
            raise ProviderNotInitialized("YTMusic client used before initialize()")
        return self._client

    def initialize(self) -> None:
        if self._client is not None:
            return
        session = _TimeoutSession(self.cfg.request_timeout_s)
        self._client = YTMusic(
            requests_session=session,
            language=self.cfg.language,
            location=self.cfg.location,
        )
        logger.debug(
            "YTMusic client ready (language=%s, location=%s)",
            self.cfg.language,
            self.cfg.location or "-",
        )

    def search_tracks(self, title: str) -> list[TrackCandidate]:
        results = self.client.search(title, filter="songs", limit=self.cfg.search_limit)
        logger.debug("YTMusic search '%s' returned %s results", title, len(results or ()))
        return [candidate_from_result(r) for r in results or ()]

    def fetch_lyrics(self, video_id: str) -> LyricsPayload:
        watch = self.client.get_watch_playlist(videoId=video_id, limit=1)
        browse_id = (watch or {}).get("lyrics")
        if not browse_id:
            logger.debug("No lyrics browse id for video %s", video_id)
            return None

        data = self.client.get_lyrics(browse_id)
        if not data:
            return None
        return data.get("lyrics")
