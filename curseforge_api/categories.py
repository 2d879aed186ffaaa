"""Category endpoints."""

from typing import List, Optional

from .client import CurseForgeClient
from .config import MINECRAFT_GAME_ID
from .models import ApiResponse, Category


def get_categories(client: CurseForgeClient, game_id: Optional[int] = None) -> List[Category]:
    """
    Get all categories, optionally limited to one game.

    Args:
        client: The CurseForge client
        game_id: Optional game id

    Returns:
        List of categories
    """
    response = client.get(
        "/categories",
        params={"gameId": game_id},
        parser=ApiResponse.list_parser(Category.from_dict),
    )
    return response.data


def get_minecraft_categories(client: CurseForgeClient) -> List[Category]:
    """Get the categories of Minecraft (game id 432)."""
    return get_categories(client, MINECRAFT_GAME_ID)


def get_category(client: CurseForgeClient, category_id: int) -> Category:
    """Get a category by its id."""
    response = client.get(
        f"/categories/{category_id}",
        parser=ApiResponse.parser(Category.from_dict),
    )
    return response.data


def get_categories_by_class(
    client: CurseForgeClient,
    class_id: int,
    game_id: Optional[int] = None,
) -> List[Category]:
    """
    Get the categories belonging to a class.

    Args:
        client: The CurseForge client
        class_id: The class id, e.g. 6 for Minecraft mods
        game_id: Optional game id
    """
    response = client.get(
        "/categories",
        params={"classId": class_id, "gameId": game_id},
        parser=ApiResponse.list_parser(Category.from_dict),
    )
    return response.data
