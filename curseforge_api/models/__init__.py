"""Typed records for CurseForge API responses and requests."""

from .common import (
    ApiResponse,
    PaginatedResponse,
    Pagination,
    ProjectStatus,
    ReleaseType,
    FileStatus,
    FileRelationType,
    HashAlgo,
)
from .category import Category
from .file import File, FileHash, FileDependency, FileModule, SortableGameVersion
from .project import (
    Project,
    ProjectLinks,
    ProjectAuthor,
    ProjectAsset,
    ProjectFileIndex,
    ProjectDependency,
    ProjectDependencyType,
)
from .game import Game, GameAssets, GameVersionsByType, GameVersionType
from .search import SearchRequest, SortField, SortOrder, ModLoaderType, MAX_PAGE_SIZE
from .fingerprint import FingerprintRequest, FingerprintMatch, FingerprintMatchesResult

__all__ = [
    # Envelopes
    "ApiResponse",
    "PaginatedResponse",
    "Pagination",
    # Enums
    "ProjectStatus",
    "ReleaseType",
    "FileStatus",
    "FileRelationType",
    "HashAlgo",
    "SortField",
    "SortOrder",
    "ModLoaderType",
    # Records
    "Category",
    "File",
    "FileHash",
    "FileDependency",
    "FileModule",
    "SortableGameVersion",
    "Project",
    "ProjectLinks",
    "ProjectAuthor",
    "ProjectAsset",
    "ProjectFileIndex",
    "ProjectDependency",
    "ProjectDependencyType",
    "Game",
    "GameAssets",
    "GameVersionsByType",
    "GameVersionType",
    "SearchRequest",
    "FingerprintRequest",
    "FingerprintMatch",
    "FingerprintMatchesResult",
    "MAX_PAGE_SIZE",
]
