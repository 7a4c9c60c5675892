"""Declarations of every RAWG API endpoint exposed by the client."""

from __future__ import annotations

from rawgapi.catalog.descriptor import EndpointDescriptor, ParamKind, QueryParam
from rawgapi.models.entities import (
    Achievement,
    Developer,
    Game,
    GamePerson,
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

PAGE = QueryParam("page", ParamKind.INT)
PAGE_SIZE = QueryParam("page_size", ParamKind.INT)
REQUIRED_PAGE = QueryParam("page", ParamKind.INT, required=True)
REQUIRED_PAGE_SIZE = QueryParam("page_size", ParamKind.INT, required=True)
ORDERING = QueryParam("ordering")

PAGINATION = (PAGE, PAGE_SIZE)
ORDERED_PAGINATION = (ORDERING, PAGE, PAGE_SIZE)


# Creators
LIST_CREATOR_ROLES = EndpointDescriptor(
    "list_creator_roles", "/api/creator-roles", PagedEnvelope[Position], PAGINATION
)
LIST_CREATORS = EndpointDescriptor(
    "list_creators", "/api/creators", PagedEnvelope[Person], PAGINATION
)
GET_CREATOR = EndpointDescriptor("get_creator", "/api/creators/{id}", Person)

# Developers
LIST_DEVELOPERS = EndpointDescriptor(
    "list_developers",
    "/api/developers",
    PagedEnvelope[Developer],
    (REQUIRED_PAGE, REQUIRED_PAGE_SIZE),
)
GET_DEVELOPER = EndpointDescriptor("get_developer", "/api/developers/{id}", Developer)

# Games
LIST_GAMES = EndpointDescriptor(
    "list_games",
    "/api/games",
    PagedEnvelope[Game],
    (
        PAGE,
        PAGE_SIZE,
        QueryParam("search"),
        QueryParam("parent_platforms", ParamKind.CSV),
        QueryParam("platforms", ParamKind.CSV),
        QueryParam("stores", ParamKind.CSV),
        QueryParam("developers", ParamKind.CSV),
        QueryParam("publishers", ParamKind.CSV),
        QueryParam("genres", ParamKind.CSV),
        QueryParam("tags", ParamKind.CSV),
        QueryParam("creators", ParamKind.CSV),
        QueryParam("dates", ParamKind.CSV),
        QueryParam("platforms_count", ParamKind.INT),
        QueryParam("exclude_collection", ParamKind.INT),
        QueryParam("exclude_additions", ParamKind.BOOL),
        QueryParam("exclude_parents", ParamKind.BOOL),
        QueryParam("exclude_game_series", ParamKind.BOOL),
        ORDERING,
    ),
)
LIST_GAMES_SITEMAP = EndpointDescriptor(
    "list_games_sitemap",
    "/api/games/sitemap",
    PagedEnvelope[GameSingle],
    (REQUIRED_PAGE, REQUIRED_PAGE_SIZE),
)
GET_GAME = EndpointDescriptor("get_game", "/api/games/{id}", GameSingle)

# Game-scoped sub-resources
LIST_GAME_ADDITIONS = EndpointDescriptor(
    "list_game_additions",
    "/api/games/{game_pk}/additions",
    PagedEnvelope[Game],
    (REQUIRED_PAGE, REQUIRED_PAGE_SIZE),
)
LIST_GAME_DEVELOPMENT_TEAM = EndpointDescriptor(
    "list_game_development_team",
    "/api/games/{game_pk}/development-team",
    PagedEnvelope[GamePerson],
    ORDERED_PAGINATION,
)
LIST_GAME_SERIES = EndpointDescriptor(
    "list_game_series",
    "/api/games/{game_pk}/game-series",
    PagedEnvelope[Game],
    PAGINATION,
)
LIST_PARENT_GAMES = EndpointDescriptor(
    "list_parent_games",
    "/api/games/{game_pk}/parent-games",
    PagedEnvelope[Game],
    PAGINATION,
)
LIST_GAME_SCREENSHOTS = EndpointDescriptor(
    "list_game_screenshots",
    "/api/games/{game_pk}/screenshots",
    PagedEnvelope[Screenshot],
    ORDERED_PAGINATION,
)
LIST_GAME_STORES = EndpointDescriptor(
    "list_game_stores",
    "/api/games/{game_pk}/stores",
    PagedEnvelope[GameStoreLink],
    ORDERED_PAGINATION,
)
LIST_GAME_ACHIEVEMENTS = EndpointDescriptor(
    "list_game_achievements", "/api/games/{id}/achievements", list[Achievement]
)
LIST_GAME_TRAILERS = EndpointDescriptor(
    "list_game_trailers", "/api/games/{id}/movies", PagedEnvelope[Movie]
)
LIST_GAME_REDDIT_POSTS = EndpointDescriptor(
    "list_game_reddit_posts", "/api/games/{id}/reddit", PagedEnvelope[RedditPost]
)
LIST_SUGGESTED_GAMES = EndpointDescriptor(
    "list_suggested_games", "/api/games/{id}/suggested", PagedEnvelope[GameSingle]
)
LIST_GAME_TWITCH_STREAMS = EndpointDescriptor(
    "list_game_twitch_streams", "/api/games/{id}/twitch", PagedEnvelope[TwitchStream]
)
LIST_GAME_YOUTUBE_VIDEOS = EndpointDescriptor(
    "list_game_youtube_videos", "/api/games/{id}/youtube", PagedEnvelope[YoutubeVideo]
)

# Genres
LIST_GENRES = EndpointDescriptor(
    "list_genres", "/api/genres", PagedEnvelope[Genre], ORDERED_PAGINATION
)
GET_GENRE = EndpointDescriptor("get_genre", "/api/genres/{id}", Genre)

# Platforms
LIST_PLATFORMS = EndpointDescriptor(
    "list_platforms", "/api/platforms", PagedEnvelope[Platform], ORDERED_PAGINATION
)
LIST_PARENT_PLATFORMS = EndpointDescriptor(
    "list_parent_platforms",
    "/api/platforms/lists/parents",
    PagedEnvelope[PlatformParent],
    ORDERED_PAGINATION,
)
GET_PLATFORM = EndpointDescriptor("get_platform", "/api/platforms/{id}", Platform)

# Publishers
LIST_PUBLISHERS = EndpointDescriptor(
    "list_publishers", "/api/publishers", PagedEnvelope[Publisher], PAGINATION
)
GET_PUBLISHER = EndpointDescriptor("get_publisher", "/api/publishers/{id}", Publisher)

# Stores
LIST_STORES = EndpointDescriptor(
    "list_stores", "/api/stores", PagedEnvelope[Store], ORDERED_PAGINATION
)
GET_STORE = EndpointDescriptor("get_store", "/api/stores/{id}", Store)

# Tags
LIST_TAGS = EndpointDescriptor("list_tags", "/api/tags", PagedEnvelope[Tag], PAGINATION)
GET_TAG = EndpointDescriptor("get_tag", "/api/tags/{id}", Tag)


ALL_ENDPOINTS: tuple[EndpointDescriptor, ...] = (
    LIST_CREATOR_ROLES,
    LIST_CREATORS,
    GET_CREATOR,
    LIST_DEVELOPERS,
    GET_DEVELOPER,
    LIST_GAMES,
    LIST_GAMES_SITEMAP,
    GET_GAME,
    LIST_GAME_ADDITIONS,
    LIST_GAME_DEVELOPMENT_TEAM,
    LIST_GAME_SERIES,
    LIST_PARENT_GAMES,
    LIST_GAME_SCREENSHOTS,
    LIST_GAME_STORES,
    LIST_GAME_ACHIEVEMENTS,
    LIST_GAME_TRAILERS,
    LIST_GAME_REDDIT_POSTS,
    LIST_SUGGESTED_GAMES,
    LIST_GAME_TWITCH_STREAMS,
    LIST_GAME_YOUTUBE_VIDEOS,
    LIST_GENRES,
    GET_GENRE,
    LIST_PLATFORMS,
    LIST_PARENT_PLATFORMS,
    GET_PLATFORM,
    LIST_PUBLISHERS,
    GET_PUBLISHER,
    LIST_STORES,
    GET_STORE,
    LIST_TAGS,
    GET_TAG,
)

ENDPOINTS_BY_NAME: dict[str, EndpointDescriptor] = {e.name: e for e in ALL_ENDPOINTS}
