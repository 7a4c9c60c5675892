"""RAWG API service: one async operation per catalog endpoint.

Every operation returns an :data:`~rawgapi.network.result.ApiResponse` and
never raises transport failures; only payload decoding errors propagate.

Example:
    async with create_service("YOUR_API_KEY") as service:
        response = await service.list_games(page=2, page_size=10, search="zelda")
        if isinstance(response, Success):
            print(response.payload.count)
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

import httpx

from rawgapi.catalog import endpoints as ep
from rawgapi.catalog.descriptor import EndpointDescriptor
from rawgapi.config.settings import RawgSettings
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
from rawgapi.network.call import ApiResponseCall, HttpxCall
from rawgapi.network.client import DEFAULT_BASE_URL, build_http_client
from rawgapi.network.converter import json_decoder
from rawgapi.network.result import ApiResponse

logger = logging.getLogger(__name__)

Id = int | str
Csv = str | Iterable[int | str]


class RawgService:
    """Typed access to the RAWG API over a shared ``httpx.AsyncClient``."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def __aenter__(self) -> RawgService:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying client and its connection pool."""
        await self._client.aclose()
        logger.debug("RAWG service closed")

    def call(
        self,
        endpoint: EndpointDescriptor,
        path: dict[str, Any] | None = None,
        **query: Any,
    ) -> ApiResponseCall[Any]:
        """Build an unexecuted call for *endpoint*.

        The returned call can be awaited via ``execute()``, cancelled, or
        cloned. ``None`` query values are dropped.
        """
        request = endpoint.build_request(self._client, path, query)
        return ApiResponseCall(
            HttpxCall(self._client, request),
            json_decoder(endpoint.response),
            endpoint.name,
        )

    async def _execute(
        self,
        endpoint: EndpointDescriptor,
        path: dict[str, Any] | None = None,
        **query: Any,
    ) -> ApiResponse[Any]:
        return await self.call(endpoint, path, **query).execute()

    # =========================================================================
    # Creators
    # =========================================================================

    async def list_creator_roles(
        self, *, page: int | None = None, page_size: int | None = None
    ) -> ApiResponse[PagedEnvelope[Position]]:
        """Get a list of creator positions (jobs)."""
        return await self._execute(ep.LIST_CREATOR_ROLES, page=page, page_size=page_size)

    async def list_creators(
        self, *, page: int | None = None, page_size: int | None = None
    ) -> ApiResponse[PagedEnvelope[Person]]:
        """Get a list of game creators."""
        return await self._execute(ep.LIST_CREATORS, page=page, page_size=page_size)

    async def get_creator(self, creator_id: Id) -> ApiResponse[Person]:
        """Get details of the creator."""
        return await self._execute(ep.GET_CREATOR, {"id": creator_id})

    # =========================================================================
    # Developers
    # =========================================================================

    async def list_developers(
        self, page: int, page_size: int
    ) -> ApiResponse[PagedEnvelope[Developer]]:
        """Get a list of game developers."""
        return await self._execute(ep.LIST_DEVELOPERS, page=page, page_size=page_size)

    async def get_developer(self, developer_id: Id) -> ApiResponse[Developer]:
        """Get details of the developer."""
        return await self._execute(ep.GET_DEVELOPER, {"id": developer_id})

    # =========================================================================
    # Games
    # =========================================================================

    async def list_games(
        self,
        *,
        page: int | None = None,
        page_size: int | None = None,
        search: str | None = None,
        parent_platforms: Csv | None = None,
        platforms: Csv | None = None,
        stores: Csv | None = None,
        developers: Csv | None = None,
        publishers: Csv | None = None,
        genres: Csv | None = None,
        tags: Csv | None = None,
        creators: Csv | None = None,
        dates: Csv | None = None,
        platforms_count: int | None = None,
        exclude_collection: int | None = None,
        exclude_additions: bool | None = None,
        exclude_parents: bool | None = None,
        exclude_game_series: bool | None = None,
        ordering: str | None = None,
    ) -> ApiResponse[PagedEnvelope[Game]]:
        """Get a list of games.

        Args:
            page: Page number within the paginated result set.
            page_size: Number of results per page.
            search: Search query.
            parent_platforms: Parent platform ids, e.g. ``[1, 2, 3]``.
            platforms: Platform ids, e.g. ``"4,5"``.
            stores: Store ids, e.g. ``[5, 6]``.
            developers: Developer ids or slugs, e.g. ``["valve-software"]``.
            publishers: Publisher ids or slugs.
            genres: Genre ids or slugs, e.g. ``["action", "indie"]``.
            tags: Tag ids or slugs, e.g. ``["singleplayer"]``.
            creators: Creator ids or slugs.
            dates: Release date ranges, e.g. ``"2010-01-01,2018-12-31"``.
            platforms_count: Exact number of platforms.
            exclude_collection: Exclude games from this collection id.
            exclude_additions: Exclude additions (DLC, editions).
            exclude_parents: Exclude games which have additions.
            exclude_game_series: Exclude games included in a game series.
            ordering: One of name, released, added, created, rating;
                prefix with ``-`` to reverse.
        """
        return await self._execute(
            ep.LIST_GAMES,
            page=page,
            page_size=page_size,
            search=search,
            parent_platforms=parent_platforms,
            platforms=platforms,
            stores=stores,
            developers=developers,
            publishers=publishers,
            genres=genres,
            tags=tags,
            creators=creators,
            dates=dates,
            platforms_count=platforms_count,
            exclude_collection=exclude_collection,
            exclude_additions=exclude_additions,
            exclude_parents=exclude_parents,
            exclude_game_series=exclude_game_series,
            ordering=ordering,
        )

    async def list_games_sitemap(
        self, page: int, page_size: int
    ) -> ApiResponse[PagedEnvelope[GameSingle]]:
        """Get the sitemap games list."""
        return await self._execute(ep.LIST_GAMES_SITEMAP, page=page, page_size=page_size)

    async def get_game(self, game_id: Id) -> ApiResponse[GameSingle]:
        """Get details of the game by id or slug."""
        return await self._execute(ep.GET_GAME, {"id": game_id})

    async def list_game_additions(
        self, game_pk: Id, page: int, page_size: int
    ) -> ApiResponse[PagedEnvelope[Game]]:
        """Get DLCs, GOTY and other editions, companion apps, etc."""
        return await self._execute(
            ep.LIST_GAME_ADDITIONS, {"game_pk": game_pk}, page=page, page_size=page_size
        )

    async def list_game_development_team(
        self,
        game_pk: Id,
        *,
        ordering: str | None = None,
        page: int | None = None,
        page_size: int | None = None,
    ) -> ApiResponse[PagedEnvelope[GamePerson]]:
        """Get individual creators that were part of the development team."""
        return await self._execute(
            ep.LIST_GAME_DEVELOPMENT_TEAM,
            {"game_pk": game_pk},
            ordering=ordering,
            page=page,
            page_size=page_size,
        )

    async def list_game_series(
        self, game_pk: Id, *, page: int | None = None, page_size: int | None = None
    ) -> ApiResponse[PagedEnvelope[Game]]:
        """Get games that are part of the same series."""
        return await self._execute(
            ep.LIST_GAME_SERIES, {"game_pk": game_pk}, page=page, page_size=page_size
        )

    async def list_parent_games(
        self, game_pk: Id, *, page: int | None = None, page_size: int | None = None
    ) -> ApiResponse[PagedEnvelope[Game]]:
        """Get parent games for DLCs and editions."""
        return await self._execute(
            ep.LIST_PARENT_GAMES, {"game_pk": game_pk}, page=page, page_size=page_size
        )

    async def list_game_screenshots(
        self,
        game_pk: Id,
        *,
        ordering: str | None = None,
        page: int | None = None,
        page_size: int | None = None,
    ) -> ApiResponse[PagedEnvelope[Screenshot]]:
        return await self._execute(
            ep.LIST_GAME_SCREENSHOTS,
            {"game_pk": game_pk},
            ordering=ordering,
            page=page,
            page_size=page_size,
        )

    async def list_game_stores(
        self,
        game_pk: Id,
        *,
        ordering: str | None = None,
        page: int | None = None,
        page_size: int | None = None,
    ) -> ApiResponse[PagedEnvelope[GameStoreLink]]:
        """Get links to the stores that sell the game."""
        return await self._execute(
            ep.LIST_GAME_STORES,
            {"game_pk": game_pk},
            ordering=ordering,
            page=page,
            page_size=page_size,
        )

    async def list_game_achievements(self, game_id: Id) -> ApiResponse[list[Achievement]]:
        return await self._execute(ep.LIST_GAME_ACHIEVEMENTS, {"id": game_id})

    async def list_game_trailers(self, game_id: Id) -> ApiResponse[PagedEnvelope[Movie]]:
        return await self._execute(ep.LIST_GAME_TRAILERS, {"id": game_id})

    async def list_game_reddit_posts(
        self, game_id: Id
    ) -> ApiResponse[PagedEnvelope[RedditPost]]:
        """Get the most recent posts from the game's subreddit."""
        return await self._execute(ep.LIST_GAME_REDDIT_POSTS, {"id": game_id})

    async def list_suggested_games(
        self, game_id: Id
    ) -> ApiResponse[PagedEnvelope[GameSingle]]:
        """Get visually similar games."""
        return await self._execute(ep.LIST_SUGGESTED_GAMES, {"id": game_id})

    async def list_game_twitch_streams(
        self, game_id: Id
    ) -> ApiResponse[PagedEnvelope[TwitchStream]]:
        return await self._execute(ep.LIST_GAME_TWITCH_STREAMS, {"id": game_id})

    async def list_game_youtube_videos(
        self, game_id: Id
    ) -> ApiResponse[PagedEnvelope[YoutubeVideo]]:
        return await self._execute(ep.LIST_GAME_YOUTUBE_VIDEOS, {"id": game_id})

    # =========================================================================
    # Genres, platforms, publishers, stores, tags
    # =========================================================================

    async def list_genres(
        self,
        *,
        ordering: str | None = None,
        page: int | None = None,
        page_size: int | None = None,
    ) -> ApiResponse[PagedEnvelope[Genre]]:
        return await self._execute(
            ep.LIST_GENRES, ordering=ordering, page=page, page_size=page_size
        )

    async def get_genre(self, genre_id: Id) -> ApiResponse[Genre]:
        return await self._execute(ep.GET_GENRE, {"id": genre_id})

    async def list_platforms(
        self,
        *,
        ordering: str | None = None,
        page: int | None = None,
        page_size: int | None = None,
    ) -> ApiResponse[PagedEnvelope[Platform]]:
        return await self._execute(
            ep.LIST_PLATFORMS, ordering=ordering, page=page, page_size=page_size
        )

    async def list_parent_platforms(
        self,
        *,
        ordering: str | None = None,
        page: int | None = None,
        page_size: int | None = None,
    ) -> ApiResponse[PagedEnvelope[PlatformParent]]:
        """Get parent platforms, e.g. PlayStation for PS2 and PS4."""
        return await self._execute(
            ep.LIST_PARENT_PLATFORMS, ordering=ordering, page=page, page_size=page_size
        )

    async def get_platform(self, platform_id: Id) -> ApiResponse[Platform]:
        return await self._execute(ep.GET_PLATFORM, {"id": platform_id})

    async def list_publishers(
        self, *, page: int | None = None, page_size: int | None = None
    ) -> ApiResponse[PagedEnvelope[Publisher]]:
        return await self._execute(ep.LIST_PUBLISHERS, page=page, page_size=page_size)

    async def get_publisher(self, publisher_id: Id) -> ApiResponse[Publisher]:
        return await self._execute(ep.GET_PUBLISHER, {"id": publisher_id})

    async def list_stores(
        self,
        *,
        ordering: str | None = None,
        page: int | None = None,
        page_size: int | None = None,
    ) -> ApiResponse[PagedEnvelope[Store]]:
        """Get video game storefronts."""
        return await self._execute(
            ep.LIST_STORES, ordering=ordering, page=page, page_size=page_size
        )

    async def get_store(self, store_id: Id) -> ApiResponse[Store]:
        return await self._execute(ep.GET_STORE, {"id": store_id})

    async def list_tags(
        self, *, page: int | None = None, page_size: int | None = None
    ) -> ApiResponse[PagedEnvelope[Tag]]:
        return await self._execute(ep.LIST_TAGS, page=page, page_size=page_size)

    async def get_tag(self, tag_id: Id) -> ApiResponse[Tag]:
        return await self._execute(ep.GET_TAG, {"id": tag_id})


def create_service(
    api_key: str | None = None,
    base_url: str = DEFAULT_BASE_URL,
    *,
    settings: RawgSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> RawgService:
    """Create a service whose client appends *api_key* to every request.

    When *settings* is given, its key, base URL and pool limits are used and
    *api_key*/*base_url* are ignored.
    """
    if settings is not None:
        client = build_http_client(
            settings.api_key,
            settings.base_url,
            max_connections=settings.max_connections,
            max_keepalive_connections=settings.max_keepalive_connections,
            transport=transport,
        )
    else:
        client = build_http_client(api_key or "", base_url, transport=transport)
    return RawgService(client)
