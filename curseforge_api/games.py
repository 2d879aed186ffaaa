"""Game endpoints."""

from typing import List, Optional

from .client import CurseForgeClient
from .models import ApiResponse, Game, GameVersionsByType, GameVersionType, PaginatedResponse
from .models.search import clamp_page_size


def get_games(
    client: CurseForgeClient,
    index: Optional[int] = None,
    page_size: Optional[int] = None,
) -> PaginatedResponse[Game]:
    """Get one page of the games available to the API key."""
    return client.get(
        "/games",
        params={"index": index, "pageSize": clamp_page_size(page_size)},
        parser=PaginatedResponse.parser(Game.from_dict),
    )


def get_game(client: CurseForgeClient, game_id: int) -> Game:
    """Get a game by its id."""
    response = client.get(f"/games/{game_id}", parser=ApiResponse.parser(Game.from_dict))
    return response.data


def get_game_versions(client: CurseForgeClient, game_id: int) -> List[GameVersionsByType]:
    """Get the version names of a game, grouped by version type."""
    response = client.get(
        f"/games/{game_id}/versions",
        parser=ApiResponse.list_parser(GameVersionsByType.from_dict),
    )
    return response.data


def get_game_version_types(client: CurseForgeClient, game_id: int) -> List[GameVersionType]:
    response = client.get(
        f"/games/{game_id}/version-types",
        parser=ApiResponse.list_parser(GameVersionType.from_dict),
    )
    return response.data
