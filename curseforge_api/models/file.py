"""File records: a downloadable artifact attached to a project."""

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from .common import (
    FileRelationType,
    FileStatus,
    HashAlgo,
    ReleaseType,
    parse_datetime,
    parse_enum,
    parse_list,
)


@dataclass
class FileHash:
    value: str = ""
    algo: Union[HashAlgo, int, None] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "FileHash":
        d = d or {}
        return cls(value=d.get("value", ""), algo=parse_enum(HashAlgo, d.get("algo")))


@dataclass
class FileDependency:
    mod_id: int = 0
    relation_type: Union[FileRelationType, int, None] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "FileDependency":
        d = d or {}
        return cls(
            mod_id=d.get("modId", 0),
            relation_type=parse_enum(FileRelationType, d.get("relationType")),
        )


@dataclass
class FileModule:
    """A top-level entry of the file archive and its fingerprint."""
    name: str = ""
    fingerprint: int = 0

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "FileModule":
        d = d or {}
        return cls(name=d.get("name", ""), fingerprint=d.get("fingerprint", 0))


@dataclass
class SortableGameVersion:
    game_version_name: str = ""
    game_version_padded: str = ""
    game_version: str = ""
    game_version_release_date: Optional[datetime] = None
    game_version_type_id: Optional[int] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "SortableGameVersion":
        d = d or {}
        return cls(
            game_version_name=d.get("gameVersionName", ""),
            game_version_padded=d.get("gameVersionPadded", ""),
            game_version=d.get("gameVersion", ""),
            game_version_release_date=parse_datetime(d.get("gameVersionReleaseDate")),
            game_version_type_id=d.get("gameVersionTypeId"),
        )


@dataclass
class File:
    """
    A file uploaded to a CurseForge project.

    Attributes
    ----------
    id : int
        File id.
    mod_id : int
        Id of the project the file belongs to.
    display_name : str
        Name shown on the website.
    file_name : str
        Name of the file on disk; used as the download target name.
    release_type : ReleaseType
        Release, beta or alpha.
    download_url : Optional[str]
        Direct download URL; None when the author disallows third-party
        distribution.
    file_fingerprint : int
        MurmurHash2 fingerprint of the whole file, used for matching.
    """
    id: int = 0
    game_id: int = 0
    mod_id: int = 0
    is_available: bool = False
    display_name: str = ""
    file_name: str = ""
    release_type: Union[ReleaseType, int, None] = None
    file_status: Union[FileStatus, int, None] = None
    hashes: List[FileHash] = field(default_factory=list)
    file_date: Optional[datetime] = None
    file_length: int = 0
    download_count: int = 0
    file_size_on_disk: Optional[int] = None
    download_url: Optional[str] = None
    game_versions: List[str] = field(default_factory=list)
    sortable_game_versions: List[SortableGameVersion] = field(default_factory=list)
    dependencies: List[FileDependency] = field(default_factory=list)
    expose_as_alternative: Optional[bool] = None
    parent_project_file_id: Optional[int] = None
    alternate_file_id: Optional[int] = None
    is_server_pack: Optional[bool] = None
    server_pack_file_id: Optional[int] = None
    is_early_access_content: Optional[bool] = None
    early_access_end_date: Optional[datetime] = None
    file_fingerprint: int = 0
    modules: List[FileModule] = field(default_factory=list)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "File":
        d = d or {}
        return cls(
            id=d.get("id", 0),
            game_id=d.get("gameId", 0),
            mod_id=d.get("modId", 0),
            is_available=d.get("isAvailable", False),
            display_name=d.get("displayName", ""),
            file_name=d.get("fileName", ""),
            release_type=parse_enum(ReleaseType, d.get("releaseType")),
            file_status=parse_enum(FileStatus, d.get("fileStatus")),
            hashes=parse_list(FileHash.from_dict, d.get("hashes")),
            file_date=parse_datetime(d.get("fileDate")),
            file_length=d.get("fileLength", 0),
            download_count=d.get("downloadCount", 0),
            file_size_on_disk=d.get("fileSizeOnDisk"),
            download_url=d.get("downloadUrl"),
            game_versions=list(d.get("gameVersions") or []),
            sortable_game_versions=parse_list(SortableGameVersion.from_dict, d.get("sortableGameVersions")),
            dependencies=parse_list(FileDependency.from_dict, d.get("dependencies")),
            expose_as_alternative=d.get("exposeAsAlternative"),
            parent_project_file_id=d.get("parentProjectFileId"),
            alternate_file_id=d.get("alternateFileId"),
            is_server_pack=d.get("isServerPack"),
            server_pack_file_id=d.get("serverPackFileId"),
            is_early_access_content=d.get("isEarlyAccessContent"),
            early_access_end_date=parse_datetime(d.get("earlyAccessEndDate")),
            file_fingerprint=d.get("fileFingerprint", 0),
            modules=parse_list(FileModule.from_dict, d.get("modules")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
