from ytmusic_lyrics.sources.service import LyricsLookupService
from ytmusic_lyrics.sources.types import InternalError, LookupFailure, LyricsResult, NotFound

__all__ = [
    "InternalError",
    "LookupFailure",
    "LyricsLookupService",
    "LyricsResult",
    "NotFound",
]
