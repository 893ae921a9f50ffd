from __future__ import annotations

import logging
import threading
from collections.abc import Sequence

from .base import CatalogProvider, LyricsPayload
from .errors import MalformedPayload
from .types import InternalError, LookupOutcome, LyricsResult, NotFound, Thumbnail

logger = logging.getLogger(__name__)

NO_LYRICS_TEXT = "No lyrics available for this song."


def pick_artwork_url(thumbnails: Sequence[Thumbnail]) -> str:
    """Second thumbnail (usually the larger one), else the first, else ""."""
    if len(thumbnails) > 1:
        return thumbnails[1].url
    if thumbnails:
        return thumbnails[0].url
    return ""


def normalize_lyrics(payload: LyricsPayload) -> str | None:
    """
    Collapse a provider lyrics payload into one string.

    Returns None when there is nothing to show; the caller substitutes
    NO_LYRICS_TEXT. A non-blank string is returned untouched. Any shape
    other than lines, text or None raises MalformedPayload.
    """
    if payload is None:
        return None
    if isinstance(payload, str):
        return payload if payload.strip() else None
    if isinstance(payload, Sequence):
        return "\n".join(payload) if payload else None
    raise MalformedPayload(f"unexpected lyrics payload type: {type(payload).__name__}")


class LyricsLookupService:
    def __init__(self, provider: CatalogProvider):
        self.provider = provider
        self._initialized = False
        self._init_lock = threading.Lock()

    @property
    def initialized(self) -> bool:
        return self._initialized

    def _ensure_initialized(self) -> None:
        if self._initialized:
            return
        with self._init_lock:
            if self._initialized:
                return
            logger.info("Initializing %s provider...", self.provider.name)
            self.provider.initialize()
            self._initialized = True
            logger.info("%s provider initialized.", self.provider.name)

    def lookup(self, title: str) -> LookupOutcome:
        """
        Title -> first search hit -> lyrics.

        Never raises: an empty search gives NotFound, any other failure
        gives InternalError. The first search result is always used, even if
        a later one matches the title better.
        """
        try:
            self._ensure_initialized()

            logger.info('Searching for song: "%s"', title)
            candidates = self.provider.search_tracks(title)
            if not candidates:
                logger.warning('No songs found for title: "%s"', title)
                return NotFound()

            track = candidates[0]
            logger.info(
                'Found song: "%s" by "%s" (video id: %s)', track.title, track.artist, track.video_id
            )
            artwork_url = pick_artwork_url(track.thumbnails)

            logger.info("Fetching lyrics for video id: %s", track.video_id)
            payload = self.provider.fetch_lyrics(track.video_id)
            lyrics = normalize_lyrics(payload)
            if lyrics is None:
                logger.warning(
                    "No lyrics content found for video id: %s. Received: %r", track.video_id, payload
                )
                lyrics = NO_LYRICS_TEXT
            else:
                logger.info(
                    "Lyrics fetched successfully (%s format).",
                    "string" if isinstance(payload, str) else "lines",
                )

            return LyricsResult(
                artist_name=track.artist,
                track_name=track.title,
                artwork_url=artwork_url,
                lyrics=lyrics,
            )
        except Exception:
            logger.exception('Lyrics lookup failed for title: "%s"', title)
            return InternalError()
