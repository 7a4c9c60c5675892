"""Unit tests for endpoint descriptors and query serialization."""

from __future__ import annotations

import httpx
import pytest

from rawgapi.catalog import ALL_ENDPOINTS, ENDPOINTS_BY_NAME
from rawgapi.catalog.descriptor import EndpointDescriptor, ParamKind, QueryParam
from rawgapi.catalog import endpoints as ep
from rawgapi.models.envelope import PagedEnvelope


@pytest.fixture
def client() -> httpx.AsyncClient:
    return httpx.AsyncClient(base_url="https://api.rawg.io")


class TestQueryParam:
    def test_int(self) -> None:
        assert QueryParam("page", ParamKind.INT).serialize(2) == "2"

    def test_int_rejects_bool(self) -> None:
        with pytest.raises(TypeError):
            QueryParam("page", ParamKind.INT).serialize(True)

    def test_bool(self) -> None:
        param = QueryParam("exclude_additions", ParamKind.BOOL)
        assert param.serialize(True) == "true"
        assert param.serialize(False) == "false"

    @pytest.mark.parametrize("value", [2.7, 2.0, "2", None])
    def test_int_rejects_non_integers(self, value) -> None:
        with pytest.raises(TypeError):
            QueryParam("page", ParamKind.INT).serialize(value)

    @pytest.mark.parametrize("value", ["false", "true", 0, 1])
    def test_bool_rejects_non_bools(self, value) -> None:
        with pytest.raises(TypeError):
            QueryParam("exclude_additions", ParamKind.BOOL).serialize(value)

    def test_csv_joins_lists(self) -> None:
        assert QueryParam("platforms", ParamKind.CSV).serialize([4, 5]) == "4,5"

    def test_csv_passes_strings_verbatim(self) -> None:
        param = QueryParam("developers", ParamKind.CSV)
        assert param.serialize("valve-software,feral-interactive") == (
            "valve-software,feral-interactive"
        )

    def test_string(self) -> None:
        assert QueryParam("search").serialize("zelda") == "zelda"


class TestEndpointDescriptor:
    def test_path_params_are_discovered(self) -> None:
        assert ep.LIST_GAME_STORES.path_params == ("game_pk",)
        assert ep.LIST_GAMES.path_params == ()

    def test_render_path_quotes_values(self) -> None:
        assert ep.GET_GAME.render_path({"id": "a b/c"}) == "/api/games/a%20b%2Fc"

    def test_missing_path_param_raises(self) -> None:
        with pytest.raises(ValueError, match="Missing path parameter"):
            ep.GET_GAME.render_path({})

    def test_query_items_keep_declared_order(self) -> None:
        items = ep.LIST_GAMES.query_items(
            {"search": "zelda", "page_size": 10, "page": 2}
        )
        assert items == [("page", "2"), ("page_size", "10"), ("search", "zelda")]

    def test_none_values_are_omitted(self) -> None:
        items = ep.LIST_GAMES.query_items({"page": None, "search": "zelda"})
        assert items == [("search", "zelda")]

    def test_missing_required_query_param_raises(self) -> None:
        with pytest.raises(ValueError, match="Missing required query parameter 'page'"):
            ep.LIST_DEVELOPERS.query_items({"page_size": 10})

    def test_unknown_query_param_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown query parameter"):
            ep.LIST_TAGS.query_items({"search": "x"})

    def test_build_request(self, client: httpx.AsyncClient) -> None:
        request = ep.LIST_GAME_SCREENSHOTS.build_request(
            client, {"game_pk": 3498}, {"ordering": "-created", "page": 1}
        )

        assert request.method == "GET"
        assert str(request.url) == (
            "https://api.rawg.io/api/games/3498/screenshots?ordering=-created&page=1"
        )

    def test_build_request_without_params(self, client: httpx.AsyncClient) -> None:
        request = ep.LIST_GENRES.build_request(client)
        assert str(request.url) == "https://api.rawg.io/api/genres"

    def test_descriptor_is_immutable(self) -> None:
        with pytest.raises(AttributeError):
            ep.GET_TAG.path = "/api/other"  # type: ignore[misc]

    def test_custom_descriptor(self, client: httpx.AsyncClient) -> None:
        descriptor = EndpointDescriptor(
            "things", "/api/things/{slug}", PagedEnvelope[dict], (QueryParam("q"),)
        )
        request = descriptor.build_request(client, {"slug": "x"}, {"q": "y"})
        assert request.url.path == "/api/things/x"
        assert request.url.params["q"] == "y"


class TestCatalog:
    def test_every_endpoint_is_get_under_api(self) -> None:
        for endpoint in ALL_ENDPOINTS:
            assert endpoint.method == "GET"
            assert endpoint.path.startswith("/api/")

    def test_names_are_unique(self) -> None:
        assert len(ENDPOINTS_BY_NAME) == len(ALL_ENDPOINTS) == 31

    def test_list_games_filters(self) -> None:
        names = [p.name for p in ep.LIST_GAMES.params]
        assert names[:3] == ["page", "page_size", "search"]
        assert len(names) == 18
        assert names[-1] == "ordering"

    def test_achievements_return_raw_list(self) -> None:
        assert ep.LIST_GAME_ACHIEVEMENTS.response.__origin__ is list
