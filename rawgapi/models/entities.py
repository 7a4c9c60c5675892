"""Payload entities for the RAWG API.

Field names follow RAWG's snake_case keys. Nearly every field is optional
because list and detail endpoints return different subsets of the same
resource; unknown keys are ignored.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Catalog resources (genres, platforms, stores, publishers, developers, tags)
# ---------------------------------------------------------------------------


class NamedResource(BaseModel):
    """Fields shared by every named RAWG resource."""

    id: int
    name: str | None = None
    slug: str | None = None
    games_count: int | None = None
    image_background: str | None = None


class Genre(NamedResource):
    description: str | None = None


class Platform(NamedResource):
    description: str | None = None
    image: str | None = None
    year_start: int | None = None
    year_end: int | None = None


class PlatformParent(BaseModel):
    """A platform family, e.g. PlayStation for PS2 and PS4."""

    id: int
    name: str | None = None
    slug: str | None = None
    platforms: list[Platform] = Field(default_factory=list)


class Store(NamedResource):
    domain: str | None = None
    description: str | None = None


class Publisher(NamedResource):
    description: str | None = None


class Developer(NamedResource):
    description: str | None = None


class Tag(NamedResource):
    language: str | None = None
    description: str | None = None


# ---------------------------------------------------------------------------
# Creators
# ---------------------------------------------------------------------------


class Position(BaseModel):
    """A creator role, e.g. composer or director."""

    id: int
    name: str | None = None
    slug: str | None = None


class Person(BaseModel):
    id: int
    name: str | None = None
    slug: str | None = None
    image: str | None = None
    image_background: str | None = None
    description: str | None = None
    games_count: int | None = None
    reviews_count: int | None = None
    rating: float | None = None
    rating_top: int | None = None
    updated: str | None = None
    positions: list[Position] = Field(default_factory=list)


class GamePerson(Person):
    """A member of a game's development team."""


# ---------------------------------------------------------------------------
# Games
# ---------------------------------------------------------------------------


class EsrbRating(BaseModel):
    id: int
    name: str | None = None
    slug: str | None = None


class PlatformRequirements(BaseModel):
    minimum: str | None = None
    recommended: str | None = None


class GamePlatform(BaseModel):
    """A platform a game was released on, with release details."""

    platform: NamedResource
    released_at: str | None = None
    requirements: PlatformRequirements | None = None


class Game(BaseModel):
    id: int
    slug: str | None = None
    name: str | None = None
    released: str | None = None
    tba: bool | None = None
    background_image: str | None = None
    rating: float | None = None
    rating_top: int | None = None
    ratings_count: int | None = None
    reviews_text_count: int | None = None
    added: int | None = None
    metacritic: int | None = None
    playtime: int | None = None
    suggestions_count: int | None = None
    updated: str | None = None
    esrb_rating: EsrbRating | None = None
    platforms: list[GamePlatform] | None = None
    genres: list[Genre] | None = None
    tags: list[Tag] | None = None


class GameSingle(Game):
    """Full game details as returned by the detail endpoint."""

    name_original: str | None = None
    description: str | None = None
    description_raw: str | None = None
    website: str | None = None
    background_image_additional: str | None = None
    alternative_names: list[str] = Field(default_factory=list)
    metacritic_url: str | None = None
    reddit_url: str | None = None
    reddit_name: str | None = None
    reddit_count: int | None = None
    twitch_count: int | None = None
    youtube_count: int | None = None
    screenshots_count: int | None = None
    movies_count: int | None = None
    creators_count: int | None = None
    achievements_count: int | None = None
    parent_achievements_count: int | None = None
    parents_count: int | None = None
    additions_count: int | None = None
    game_series_count: int | None = None
    developers: list[Developer] | None = None
    publishers: list[Publisher] | None = None


# ---------------------------------------------------------------------------
# Game-scoped sub-resources
# ---------------------------------------------------------------------------


class Screenshot(BaseModel):
    id: int | None = None
    image: str | None = None
    width: int | None = None
    height: int | None = None
    is_deleted: bool | None = None
    hidden: bool | None = None


class GameStoreLink(BaseModel):
    """Link to a storefront page selling a game."""

    id: int | None = None
    game_id: int | None = None
    store_id: int | None = None
    url: str | None = None


class Achievement(BaseModel):
    id: int
    name: str | None = None
    description: str | None = None
    image: str | None = None
    percent: float | None = None


class Movie(BaseModel):
    """A game trailer. ``data`` maps a resolution label ("480", "max") to a URL."""

    id: int
    name: str | None = None
    preview: str | None = None
    data: dict[str, str] = Field(default_factory=dict)


class RedditPost(BaseModel):
    id: int | None = None
    name: str | None = None
    text: str | None = None
    image: str | None = None
    url: str | None = None
    username: str | None = None
    username_url: str | None = None
    created: str | None = None


class TwitchStream(BaseModel):
    id: int | None = None
    external_id: int | None = None
    name: str | None = None
    description: str | None = None
    created: str | None = None
    published: str | None = None
    thumbnail: str | None = None
    view_count: int | None = None
    language: str | None = None


class YoutubeVideo(BaseModel):
    id: int | None = None
    external_id: str | None = None
    channel_id: str | None = None
    channel_title: str | None = None
    name: str | None = None
    description: str | None = None
    created: str | None = None
    view_count: int | None = None
    comments_count: int | None = None
    like_count: int | None = None
    dislike_count: int | None = None
    favorite_count: int | None = None
    thumbnails: dict[str, dict] = Field(default_factory=dict)
