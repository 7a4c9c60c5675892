"""Public models for the RAWG client."""

from rawgapi.models.entities import (
    Achievement,
    Developer,
    Game,
    GamePerson,
    GamePlatform,
    GameSingle,
    GameStoreLink,
    Genre,
    Movie,
    Person,
    Platform,
    PlatformParent,
    Position,
    Publisher,
    RedditPost,
    Screenshot,
    Store,
    Tag,
    TwitchStream,
    YoutubeVideo,
)
from rawgapi.models.envelope import PagedEnvelope
from rawgapi.models.responses import ResponseEnvelope

__all__ = [
    "Achievement",
    "Developer",
    "Game",
    "GamePerson",
    "GamePlatform",
    "GameSingle",
    "GameStoreLink",
    "Genre",
    "Movie",
    "PagedEnvelope",
    "Person",
    "Platform",
    "PlatformParent",
    "Position",
    "Publisher",
    "RedditPost",
    "ResponseEnvelope",
    "Screenshot",
    "Store",
    "Tag",
    "TwitchStream",
    "YoutubeVideo",
]
