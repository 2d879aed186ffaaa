"""
Project and file endpoints.

Example:
    >>> from curseforge_api import CurseForgeClient
    >>> from curseforge_api.projects import get_project
    >>> client = CurseForgeClient("your-api-key")
    >>> project = get_project(client, 238222)
    >>> project.name
    'Just Enough Items (JEI)'
"""

import os
from pathlib import Path
from typing import List, Optional, Union
import logging

from .client import CurseForgeClient
from .config import MINECRAFT_GAME_ID
from .exceptions import DownloadFailedError, NotFoundError
from .models import (
    ApiResponse,
    File,
    ModLoaderType,
    PaginatedResponse,
    Project,
    ProjectDependency,
    ProjectDependencyType,
)
from .models.search import clamp_page_size

logger = logging.getLogger(__name__)


def _as_str(value) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {type(value).__name__}")
    return value


def get_project(client: CurseForgeClient, project_id: int) -> Project:
    """Get a project by its id."""
    response = client.get(f"/mods/{project_id}", parser=ApiResponse.parser(Project.from_dict))
    return response.data


def get_project_by_slug(
    client: CurseForgeClient,
    slug: str,
    game_id: int = MINECRAFT_GAME_ID,
) -> Project:
    """
    Get a project by its slug.

    Args:
        client: The CurseForge client
        slug: The project slug
        game_id: Game the project belongs to

    Raises:
        NotFoundError: If no project has this slug
    """
    response = client.get(
        "/mods/search",
        params={"gameId": game_id, "slug": slug},
        parser=PaginatedResponse.parser(Project.from_dict),
    )
    if not response.data:
        raise NotFoundError(f"Project with slug '{slug}' not found")
    return response.data[0]


def get_project_description(client: CurseForgeClient, project_id: int) -> str:
    """Get the HTML description of a project."""
    response = client.get(f"/mods/{project_id}/description", parser=ApiResponse.parser(_as_str))
    return response.data


def get_project_dependencies(
    client: CurseForgeClient,
    project_id: int,
    file_id: Optional[int] = None,
) -> List[ProjectDependency]:
    """
    Get the dependencies of a project, optionally for one of its files.

    Args:
        client: The CurseForge client
        project_id: The project id
        file_id: Optional file id filter
    """
    response = client.get(
        f"/mods/{project_id}/dependencies",
        params={"fileId": file_id},
        parser=ApiResponse.list_parser(ProjectDependency.from_dict),
    )
    return response.data


def get_dependency_types(client: CurseForgeClient) -> List[ProjectDependencyType]:
    """Get the known project dependency types."""
    response = client.get(
        "/mods/dependency-types",
        parser=ApiResponse.list_parser(ProjectDependencyType.from_dict),
    )
    return response.data


def get_project_files(
    client: CurseForgeClient,
    project_id: int,
    game_version: Optional[str] = None,
    mod_loader_type: Optional[ModLoaderType] = None,
    game_version_type_id: Optional[int] = None,
    index: Optional[int] = None,
    page_size: Optional[int] = None,
) -> PaginatedResponse[File]:
    """
    Get one page of a project's files.

    Args:
        client: The CurseForge client
        project_id: The project id
        game_version: Only files for this game version, e.g. ``"1.20.1"``
        mod_loader_type: Only files for this mod loader
        game_version_type_id: Only files for this game version type
        index: Index of the first file to return
        page_size: Files per page (max 50)

    Returns:
        Paginated list of files
    """
    params = {
        "gameVersion": game_version,
        "modLoaderType": mod_loader_type,
        "gameVersionTypeId": game_version_type_id,
        "index": index,
        "pageSize": clamp_page_size(page_size),
    }
    return client.get(
        f"/mods/{project_id}/files",
        params=params,
        parser=PaginatedResponse.parser(File.from_dict),
    )


def get_project_file(client: CurseForgeClient, project_id: int, file_id: int) -> File:
    """Get a single file of a project."""
    response = client.get(
        f"/mods/{project_id}/files/{file_id}",
        parser=ApiResponse.parser(File.from_dict),
    )
    return response.data


def get_project_file_changelog(client: CurseForgeClient, project_id: int, file_id: int) -> str:
    """Get the HTML changelog of a project file."""
    response = client.get(
        f"/mods/{project_id}/files/{file_id}/changelog",
        parser=ApiResponse.parser(_as_str),
    )
    return response.data


def download_project_file(
    client: CurseForgeClient,
    file: File,
    destination: Union[str, os.PathLike],
) -> Path:
    """
    Download a project file into a directory.

    Args:
        client: The CurseForge client
        file: The file to download
        destination: Directory to place the file in

    Returns:
        Path of the downloaded file

    Raises:
        DownloadFailedError: If the file has no download URL or the download fails
    """
    if not file.download_url:
        raise DownloadFailedError("No download URL available")

    file_path = Path(destination) / file.file_name
    logger.info(f"Downloading {file.file_name} ({file.file_length} bytes)")
    return client.download_file(file.download_url, file_path)
