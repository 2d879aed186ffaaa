"""
Search and fingerprint endpoints.

Example:
    >>> from curseforge_api.models import SearchRequest, SortField, SortOrder
    >>> request = SearchRequest(
    ...     game_id=432,
    ...     search_filter="optifine",
    ...     sort_field=SortField.POPULARITY,
    ...     sort_order=SortOrder.DESC,
    ...     page_size=20,
    ... )
    >>> results = search_projects(client, request)
    >>> results.pagination.total_count
"""

from typing import Iterable, Optional, Union

from .client import CurseForgeClient
from .config import MINECRAFT_GAME_ID
from .models import (
    ApiResponse,
    FingerprintMatchesResult,
    FingerprintRequest,
    ModLoaderType,
    PaginatedResponse,
    Project,
    SearchRequest,
    SortField,
    SortOrder,
)


def search_projects(client: CurseForgeClient, request: SearchRequest) -> PaginatedResponse[Project]:
    """
    Search for projects.

    Args:
        client: The CurseForge client
        request: The search filters

    Returns:
        One page of matching projects
    """
    return client.get(
        "/mods/search",
        params=request.to_params(),
        parser=PaginatedResponse.parser(Project.from_dict),
    )


def search_by_fingerprint(
    client: CurseForgeClient,
    fingerprints: Union[FingerprintRequest, Iterable[int]],
) -> FingerprintMatchesResult:
    """
    Look up project files by their fingerprints.

    Args:
        client: The CurseForge client
        fingerprints: A FingerprintRequest or the fingerprints themselves

    Returns:
        Exact and partial matches plus the fingerprints that matched nothing
    """
    if not isinstance(fingerprints, FingerprintRequest):
        fingerprints = FingerprintRequest(fingerprints=list(fingerprints))
    response = client.post(
        "/fingerprints",
        fingerprints,
        parser=ApiResponse.parser(FingerprintMatchesResult.from_dict),
    )
    return response.data


def search_projects_simple(
    client: CurseForgeClient,
    search_filter: str,
    game_id: Optional[int] = None,
    limit: Optional[int] = None,
) -> PaginatedResponse[Project]:
    """
    Search for projects with a text filter, in the API's relevance order.

    Args:
        client: The CurseForge client
        search_filter: The search text
        game_id: Optional game id (default: 432 for Minecraft)
        limit: Optional result limit (max 50)
    """
    request = SearchRequest(
        game_id=game_id if game_id is not None else MINECRAFT_GAME_ID,
        search_filter=search_filter,
        sort_order=SortOrder.DESC,
        page_size=limit,
    )
    return search_projects(client, request)


def search_projects_by_category(
    client: CurseForgeClient,
    category_id: int,
    game_id: Optional[int] = None,
    limit: Optional[int] = None,
) -> PaginatedResponse[Project]:
    """Most popular projects of a category."""
    request = SearchRequest(
        game_id=game_id if game_id is not None else MINECRAFT_GAME_ID,
        category_id=category_id,
        sort_field=SortField.POPULARITY,
        sort_order=SortOrder.DESC,
        page_size=limit,
    )
    return search_projects(client, request)


def search_projects_by_author(
    client: CurseForgeClient,
    author_id: int,
    game_id: Optional[int] = None,
    limit: Optional[int] = None,
) -> PaginatedResponse[Project]:
    """Projects of an author, most recently updated first."""
    request = SearchRequest(
        game_id=game_id if game_id is not None else MINECRAFT_GAME_ID,
        author_id=author_id,
        sort_field=SortField.LAST_UPDATED,
        sort_order=SortOrder.DESC,
        page_size=limit,
    )
    return search_projects(client, request)


def search_projects_by_game_version(
    client: CurseForgeClient,
    game_version: str,
    game_id: Optional[int] = None,
    limit: Optional[int] = None,
) -> PaginatedResponse[Project]:
    """Most popular projects with files for a game version."""
    request = SearchRequest(
        game_id=game_id if game_id is not None else MINECRAFT_GAME_ID,
        game_version=game_version,
        sort_field=SortField.POPULARITY,
        sort_order=SortOrder.DESC,
        page_size=limit,
    )
    return search_projects(client, request)


def search_projects_by_mod_loader(
    client: CurseForgeClient,
    mod_loader_type: ModLoaderType,
    game_id: Optional[int] = None,
    limit: Optional[int] = None,
) -> PaginatedResponse[Project]:
    """Most popular projects for a mod loader."""
    request = SearchRequest(
        game_id=game_id if game_id is not None else MINECRAFT_GAME_ID,
        mod_loader_type=mod_loader_type,
        sort_field=SortField.POPULARITY,
        sort_order=SortOrder.DESC,
        page_size=limit,
    )
    return search_projects(client, request)
