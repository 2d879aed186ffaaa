"""Tests for the endpoint helpers."""

import json

import pytest
import httpx
import respx

from curseforge_api import CurseForgeClient, CurseForgeConfig, DownloadFailedError, NotFoundError, UnknownError
from curseforge_api.categories import (
    get_categories,
    get_categories_by_class,
    get_category,
    get_minecraft_categories,
)
from curseforge_api.games import get_game, get_game_version_types, get_game_versions, get_games
from curseforge_api.models import File, FingerprintRequest, ModLoaderType, SearchRequest, SortField
from curseforge_api.projects import (
    download_project_file,
    get_dependency_types,
    get_project,
    get_project_by_slug,
    get_project_dependencies,
    get_project_description,
    get_project_file,
    get_project_file_changelog,
    get_project_files,
)
from curseforge_api.search import (
    search_by_fingerprint,
    search_projects,
    search_projects_by_author,
    search_projects_by_category,
    search_projects_by_game_version,
    search_projects_by_mod_loader,
    search_projects_simple,
)

BASE_URL = "https://api.curseforge.com/v1"
EMPTY_PAGE = {"data": [], "pagination": {"index": 0, "pageSize": 0, "resultCount": 0, "totalCount": 0}}


@pytest.fixture
def client():
    """Client with retries disabled."""
    config = CurseForgeConfig(api_key="test-api-key", max_retries=0)
    with CurseForgeClient(config=config, sleep=lambda _: None) as client:
        yield client


def page(*items):
    return {
        "data": list(items),
        "pagination": {"index": 0, "pageSize": 50, "resultCount": len(items), "totalCount": len(items)},
    }


class TestProjects:
    """Test suite for project and file endpoints."""

    @respx.mock
    def test_get_project(self, client):
        """Test fetching a project by id."""
        respx.get(f"{BASE_URL}/mods/238222").mock(
            return_value=httpx.Response(200, json={"data": {"id": 238222, "name": "JEI", "slug": "jei"}})
        )

        project = get_project(client, 238222)

        assert project.id == 238222
        assert project.slug == "jei"

    @respx.mock
    def test_get_project_not_found(self, client):
        """Test that a missing project raises NotFoundError."""
        respx.get(f"{BASE_URL}/mods/1").mock(return_value=httpx.Response(404, text="Not Found"))

        with pytest.raises(NotFoundError):
            get_project(client, 1)

    @respx.mock
    def test_get_project_by_slug(self, client):
        """Test that a slug lookup searches within the game."""
        route = respx.get(f"{BASE_URL}/mods/search").mock(
            return_value=httpx.Response(200, json=page({"id": 238222, "slug": "jei"}))
        )

        project = get_project_by_slug(client, "jei")

        assert project.id == 238222
        params = route.calls.last.request.url.params
        assert params["slug"] == "jei"
        assert params["gameId"] == "432"

    @respx.mock
    def test_get_project_by_slug_not_found(self, client):
        """Test that an empty search result raises NotFoundError."""
        respx.get(f"{BASE_URL}/mods/search").mock(return_value=httpx.Response(200, json=EMPTY_PAGE))

        with pytest.raises(NotFoundError) as exc_info:
            get_project_by_slug(client, "does-not-exist")

        assert "does-not-exist" in str(exc_info.value)

    @respx.mock
    def test_get_project_description(self, client):
        """Test that the description is returned as HTML text."""
        respx.get(f"{BASE_URL}/mods/238222/description").mock(
            return_value=httpx.Response(200, json={"data": "<p>View Items and Recipes</p>"})
        )

        assert get_project_description(client, 238222) == "<p>View Items and Recipes</p>"

    @respx.mock
    def test_get_project_description_wrong_type(self, client):
        """Test that a non-text description is a decode failure."""
        respx.get(f"{BASE_URL}/mods/1/description").mock(
            return_value=httpx.Response(200, json={"data": {"html": "<p/>"}})
        )

        with pytest.raises(UnknownError):
            get_project_description(client, 1)

    @respx.mock
    def test_get_project_dependencies(self, client):
        """Test dependencies with and without a file filter."""
        route = respx.get(f"{BASE_URL}/mods/238222/dependencies").mock(
            return_value=httpx.Response(200, json={"data": [{"id": 1, "addonId": 306612, "typeId": 3}]})
        )

        dependencies = get_project_dependencies(client, 238222)
        assert dependencies[0].addon_id == 306612
        assert "fileId" not in route.calls.last.request.url.params

        get_project_dependencies(client, 238222, file_id=4712866)
        assert route.calls.last.request.url.params["fileId"] == "4712866"

    @respx.mock
    def test_get_dependency_types(self, client):
        """Test listing dependency types."""
        respx.get(f"{BASE_URL}/mods/dependency-types").mock(
            return_value=httpx.Response(200, json={"data": [{"id": 3, "name": "Required"}]})
        )

        assert get_dependency_types(client)[0].name == "Required"

    @respx.mock
    def test_get_project_files(self, client):
        """Test file listing filters and page size clamping."""
        route = respx.get(f"{BASE_URL}/mods/238222/files").mock(
            return_value=httpx.Response(200, json=page({"id": 1, "fileName": "a.jar"}))
        )

        files = get_project_files(
            client,
            238222,
            game_version="1.20.1",
            mod_loader_type=ModLoaderType.FABRIC,
            page_size=100,
        )

        assert [f.file_name for f in files] == ["a.jar"]
        params = route.calls.last.request.url.params
        assert params["gameVersion"] == "1.20.1"
        assert params["modLoaderType"] == "4"
        assert params["pageSize"] == "50"
        assert "index" not in params

    @respx.mock
    def test_get_project_file(self, client):
        """Test fetching a single file."""
        respx.get(f"{BASE_URL}/mods/238222/files/4712866").mock(
            return_value=httpx.Response(200, json={"data": {"id": 4712866, "modId": 238222}})
        )

        assert get_project_file(client, 238222, 4712866).mod_id == 238222

    @respx.mock
    def test_get_project_file_changelog(self, client):
        """Test fetching a file changelog."""
        respx.get(f"{BASE_URL}/mods/238222/files/4712866/changelog").mock(
            return_value=httpx.Response(200, json={"data": "<ul><li>Fixes</li></ul>"})
        )

        assert get_project_file_changelog(client, 238222, 4712866) == "<ul><li>Fixes</li></ul>"

    @respx.mock
    def test_download_project_file(self, client, tmp_path):
        """Test that the file is saved under its own name."""
        url = "https://edge.forgecdn.net/files/4712/866/jei.jar"
        respx.get(url).mock(return_value=httpx.Response(200, content=b"jar bytes"))
        file = File(id=4712866, file_name="jei.jar", download_url=url, file_length=9)

        path = download_project_file(client, file, tmp_path)

        assert path == tmp_path / "jei.jar"
        assert path.read_bytes() == b"jar bytes"

    def test_download_project_file_without_url(self, client, tmp_path):
        """Test that files without a download URL are rejected."""
        file = File(id=1, file_name="private.jar", download_url=None)

        with pytest.raises(DownloadFailedError) as exc_info:
            download_project_file(client, file, tmp_path)

        assert "No download URL available" in str(exc_info.value)
        assert list(tmp_path.iterdir()) == []


class TestCategories:
    """Test suite for category endpoints."""

    @respx.mock
    def test_get_categories(self, client):
        """Test listing every category."""
        route = respx.get(f"{BASE_URL}/categories").mock(
            return_value=httpx.Response(200, json={"data": [{"id": 6, "name": "Mods", "isClass": True}]})
        )

        categories = get_categories(client)

        assert categories[0].name == "Mods"
        assert route.calls.last.request.url.params.get("gameId") is None

    @respx.mock
    def test_get_minecraft_categories(self, client):
        """Test that Minecraft categories are filtered by game id 432."""
        route = respx.get(f"{BASE_URL}/categories").mock(
            return_value=httpx.Response(200, json={"data": []})
        )

        assert get_minecraft_categories(client) == []
        assert route.calls.last.request.url.params["gameId"] == "432"

    @respx.mock
    def test_get_category(self, client):
        """Test fetching a category by id."""
        respx.get(f"{BASE_URL}/categories/421").mock(
            return_value=httpx.Response(200, json={"data": {"id": 421, "slug": "library-api"}})
        )

        assert get_category(client, 421).slug == "library-api"

    @respx.mock
    def test_get_categories_by_class(self, client):
        """Test filtering categories by class."""
        route = respx.get(f"{BASE_URL}/categories").mock(
            return_value=httpx.Response(200, json={"data": [{"id": 421, "classId": 6}]})
        )

        categories = get_categories_by_class(client, 6, game_id=432)

        assert categories[0].class_id == 6
        params = route.calls.last.request.url.params
        assert params["classId"] == "6"
        assert params["gameId"] == "432"


class TestGames:
    """Test suite for game endpoints."""

    @respx.mock
    def test_get_games(self, client):
        """Test listing games."""
        route = respx.get(f"{BASE_URL}/games").mock(
            return_value=httpx.Response(200, json=page({"id": 432, "name": "Minecraft", "slug": "minecraft"}))
        )

        games = get_games(client, page_size=75)

        assert games.data[0].slug == "minecraft"
        assert route.calls.last.request.url.params["pageSize"] == "50"

    @respx.mock
    def test_get_game(self, client):
        """Test fetching a game with its assets."""
        respx.get(f"{BASE_URL}/games/432").mock(
            return_value=httpx.Response(
                200,
                json={"data": {"id": 432, "name": "Minecraft", "assets": {"iconUrl": "icon.png"}}},
            )
        )

        game = get_game(client, 432)

        assert game.name == "Minecraft"
        assert game.assets.icon_url == "icon.png"

    @respx.mock
    def test_get_game_versions(self, client):
        """Test version names grouped by type."""
        respx.get(f"{BASE_URL}/games/432/versions").mock(
            return_value=httpx.Response(200, json={"data": [{"type": 75125, "versions": ["1.20.1", "1.20"]}]})
        )

        versions = get_game_versions(client, 432)

        assert versions[0].type == 75125
        assert versions[0].versions == ["1.20.1", "1.20"]

    @respx.mock
    def test_get_game_version_types(self, client):
        """Test listing version types."""
        respx.get(f"{BASE_URL}/games/432/version-types").mock(
            return_value=httpx.Response(200, json={"data": [{"id": 75125, "gameId": 432, "name": "Minecraft 1.20"}]})
        )

        assert get_game_version_types(client, 432)[0].name == "Minecraft 1.20"


class TestSearch:
    """Test suite for search and fingerprint endpoints."""

    @respx.mock
    def test_search_projects(self, client):
        """Test that the request is sent as query parameters."""
        route = respx.get(f"{BASE_URL}/mods/search").mock(
            return_value=httpx.Response(200, json=page({"id": 1}, {"id": 2}))
        )

        results = search_projects(
            client,
            SearchRequest(game_id=432, search_filter="jei", sort_field=SortField.NAME, page_size=500),
        )

        assert [p.id for p in results] == [1, 2]
        assert results.pagination.total_count == 2
        params = route.calls.last.request.url.params
        assert params["searchFilter"] == "jei"
        assert params["sortField"] == "4"
        assert params["pageSize"] == "50"

    @respx.mock
    def test_search_projects_simple(self, client):
        """Test the text search defaults."""
        route = respx.get(f"{BASE_URL}/mods/search").mock(return_value=httpx.Response(200, json=EMPTY_PAGE))

        search_projects_simple(client, "optifine", limit=5)

        params = route.calls.last.request.url.params
        assert params["gameId"] == "432"
        assert params["searchFilter"] == "optifine"
        assert params["sortOrder"] == "desc"
        assert params["pageSize"] == "5"
        assert "sortField" not in params

    @pytest.mark.parametrize(
        "search, argument, key, value, sort_field",
        [
            (search_projects_by_category, 421, "categoryId", "421", "2"),
            (search_projects_by_author, 32358, "authorId", "32358", "3"),
            (search_projects_by_game_version, "1.20.1", "gameVersion", "1.20.1", "2"),
            (search_projects_by_mod_loader, ModLoaderType.NEOFORGE, "modLoaderType", "6", "2"),
        ],
    )
    @respx.mock
    def test_search_shortcuts(self, client, search, argument, key, value, sort_field):
        """Test the filter and sort order of each search shortcut."""
        route = respx.get(f"{BASE_URL}/mods/search").mock(return_value=httpx.Response(200, json=EMPTY_PAGE))

        search(client, argument, game_id=1, limit=10)

        params = route.calls.last.request.url.params
        assert params[key] == value
        assert params["gameId"] == "1"
        assert params["sortField"] == sort_field
        assert params["sortOrder"] == "desc"

    @respx.mock
    def test_search_by_fingerprint(self, client):
        """Test that fingerprints are posted as a JSON body."""
        route = respx.post(f"{BASE_URL}/fingerprints").mock(
            return_value=httpx.Response(
                200,
                json={"data": {"isCacheBuilt": True, "exactFingerprints": [], "unmatchedFingerprints": [7]}},
            )
        )

        result = search_by_fingerprint(client, [7])

        assert result.is_cache_built is True
        assert result.unmatched_fingerprints == [7]
        assert json.loads(route.calls.last.request.content) == {"fingerprints": [7]}

    @respx.mock
    def test_search_by_fingerprint_request(self, client):
        """Test that a FingerprintRequest is accepted as is."""
        route = respx.post(f"{BASE_URL}/fingerprints").mock(
            return_value=httpx.Response(200, json={"data": {}})
        )

        search_by_fingerprint(client, FingerprintRequest([1, 2]))

        assert json.loads(route.calls.last.request.content) == {"fingerprints": [1, 2]}
