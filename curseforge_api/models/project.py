"""Project (mod) records."""

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from .category import Category
from .common import ProjectStatus, ReleaseType, parse_datetime, parse_enum, parse_list, parse_optional
from .file import File


@dataclass
class ProjectLinks:
    website_url: Optional[str] = None
    wiki_url: Optional[str] = None
    issues_url: Optional[str] = None
    source_url: Optional[str] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ProjectLinks":
        d = d or {}
        return cls(
            website_url=d.get("websiteUrl"),
            wiki_url=d.get("wikiUrl"),
            issues_url=d.get("issuesUrl"),
            source_url=d.get("sourceUrl"),
        )


@dataclass
class ProjectAuthor:
    id: int = 0
    name: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ProjectAuthor":
        d = d or {}
        return cls(id=d.get("id", 0), name=d.get("name", ""), url=d.get("url", ""))


@dataclass
class ProjectAsset:
    """A logo or screenshot image."""
    id: int = 0
    mod_id: int = 0
    title: str = ""
    description: Optional[str] = None
    thumbnail_url: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ProjectAsset":
        d = d or {}
        return cls(
            id=d.get("id", 0),
            mod_id=d.get("modId", 0),
            title=d.get("title", ""),
            description=d.get("description"),
            thumbnail_url=d.get("thumbnailUrl", ""),
            url=d.get("url", ""),
        )


@dataclass
class ProjectFileIndex:
    """Latest file per game version / loader, as listed on a project."""
    game_version: str = ""
    file_id: int = 0
    filename: str = ""
    release_type: Union[ReleaseType, int, None] = None
    game_version_type_id: Optional[int] = None
    mod_loader: Optional[int] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ProjectFileIndex":
        d = d or {}
        return cls(
            game_version=d.get("gameVersion", ""),
            file_id=d.get("fileId", 0),
            filename=d.get("filename", ""),
            release_type=parse_enum(ReleaseType, d.get("releaseType")),
            game_version_type_id=d.get("gameVersionTypeId"),
            mod_loader=d.get("modLoader"),
        )


@dataclass
class Project:
    """
    A CurseForge project (mod, modpack, resource pack, ...).

    Attributes
    ----------
    id : int
        Project id.
    game_id : int
        Game the project belongs to (432 for Minecraft).
    slug : str
        URL slug, unique per game and class.
    main_file_id : int
        Id of the file currently marked as the main download.
    latest_files : List[File]
        Most recent files of the project.
    latest_files_indexes : List[ProjectFileIndex]
        Latest file per game version and mod loader.
    """
    id: int = 0
    game_id: int = 0
    name: str = ""
    slug: str = ""
    links: ProjectLinks = field(default_factory=ProjectLinks)
    summary: str = ""
    status: Union[ProjectStatus, int, None] = None
    download_count: int = 0
    is_featured: bool = False
    primary_category_id: int = 0
    categories: List[Category] = field(default_factory=list)
    class_id: Optional[int] = None
    authors: List[ProjectAuthor] = field(default_factory=list)
    logo: Optional[ProjectAsset] = None
    screenshots: List[ProjectAsset] = field(default_factory=list)
    main_file_id: int = 0
    latest_files: List[File] = field(default_factory=list)
    latest_files_indexes: List[ProjectFileIndex] = field(default_factory=list)
    date_created: Optional[datetime] = None
    date_modified: Optional[datetime] = None
    date_released: Optional[datetime] = None
    allow_mod_distribution: Optional[bool] = None
    game_popularity_rank: int = 0
    is_available: bool = False
    thumbs_up_count: int = 0
    rating: Optional[float] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Project":
        d = d or {}
        return cls(
            id=d.get("id", 0),
            game_id=d.get("gameId", 0),
            name=d.get("name", ""),
            slug=d.get("slug", ""),
            links=ProjectLinks.from_dict(d.get("links")),
            summary=d.get("summary", ""),
            status=parse_enum(ProjectStatus, d.get("status")),
            download_count=d.get("downloadCount", 0),
            is_featured=d.get("isFeatured", False),
            primary_category_id=d.get("primaryCategoryId", 0),
            categories=parse_list(Category.from_dict, d.get("categories")),
            class_id=d.get("classId"),
            authors=parse_list(ProjectAuthor.from_dict, d.get("authors")),
            logo=parse_optional(ProjectAsset.from_dict, d.get("logo")),
            screenshots=parse_list(ProjectAsset.from_dict, d.get("screenshots")),
            main_file_id=d.get("mainFileId", 0),
            latest_files=parse_list(File.from_dict, d.get("latestFiles")),
            latest_files_indexes=parse_list(ProjectFileIndex.from_dict, d.get("latestFilesIndexes")),
            date_created=parse_datetime(d.get("dateCreated")),
            date_modified=parse_datetime(d.get("dateModified")),
            date_released=parse_datetime(d.get("dateReleased")),
            allow_mod_distribution=d.get("allowModDistribution"),
            game_popularity_rank=d.get("gamePopularityRank", 0),
            is_available=d.get("isAvailable", False),
            thumbs_up_count=d.get("thumbsUpCount", 0),
            rating=d.get("rating"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ProjectDependency:
    id: int = 0
    addon_id: int = 0
    type_id: int = 0
    file_id: Optional[int] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ProjectDependency":
        d = d or {}
        return cls(
            id=d.get("id", 0),
            addon_id=d.get("addonId", 0),
            type_id=d.get("typeId", 0),
            file_id=d.get("fileId"),
        )


@dataclass
class ProjectDependencyType:
    id: int = 0
    name: str = ""

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ProjectDependencyType":
        d = d or {}
        return cls(id=d.get("id", 0), name=d.get("name", ""))
