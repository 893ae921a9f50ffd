from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Union

SEARCH_ENGINE = "YouTube"


@dataclass(frozen=True, slots=True)
class Thumbnail:
    url: str
    width: int | None = None
    height: int | None = None


@dataclass(frozen=True, slots=True)
class TrackCandidate:
    """One search hit as the provider returned it."""
    artist: str
    title: str
    video_id: str
    thumbnails: tuple[Thumbnail, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class LyricsResult:
    artist_name: str
    track_name: str
    artwork_url: str
    lyrics: str
    search_engine: str = SEARCH_ENGINE

    def to_dict(self) -> dict[str, str]:
        return {
            "artist_name": self.artist_name,
            "track_name": self.track_name,
            "search_engine": self.search_engine,
            "artwork_url": self.artwork_url,
            "lyrics": self.lyrics,
        }


@dataclass(frozen=True, slots=True)
class LookupFailure:
    message: ClassVar[str]
    response: ClassVar[str]

    def to_dict(self) -> dict[str, str]:
        return {"message": self.message, "response": self.response}


@dataclass(frozen=True, slots=True)
class NotFound(LookupFailure):
    message: ClassVar[str] = "No songs found for the given title."
    response: ClassVar[str] = "404 Not Found"


@dataclass(frozen=True, slots=True)
class InternalError(LookupFailure):
    message: ClassVar[str] = "An internal error occurred while fetching lyrics."
    response: ClassVar[str] = "500 Internal Server Error"


LookupOutcome = Union[LyricsResult, NotFound, InternalError]
