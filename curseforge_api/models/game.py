"""Game and game version records."""

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any, Dict, List, Optional

from .common import parse_datetime, parse_optional


@dataclass
class GameAssets:
    icon_url: Optional[str] = None
    tile_url: Optional[str] = None
    cover_url: Optional[str] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "GameAssets":
        d = d or {}
        return cls(
            icon_url=d.get("iconUrl"),
            tile_url=d.get("tileUrl"),
            cover_url=d.get("coverUrl"),
        )


@dataclass
class Game:
    id: int = 0
    name: str = ""
    slug: str = ""
    date_modified: Optional[datetime] = None
    assets: Optional[GameAssets] = None
    status: Optional[int] = None
    api_status: Optional[int] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Game":
        d = d or {}
        return cls(
            id=d.get("id", 0),
            name=d.get("name", ""),
            slug=d.get("slug", ""),
            date_modified=parse_datetime(d.get("dateModified")),
            assets=parse_optional(GameAssets.from_dict, d.get("assets")),
            status=d.get("status"),
            api_status=d.get("apiStatus"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class GameVersionsByType:
    """All version names of one game version type, e.g. every Minecraft release."""
    type: int = 0
    versions: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "GameVersionsByType":
        d = d or {}
        return cls(type=d.get("type", 0), versions=list(d.get("versions") or []))


@dataclass
class GameVersionType:
    id: int = 0
    game_id: int = 0
    name: str = ""
    slug: str = ""
    is_syncable: Optional[bool] = None
    status: Optional[int] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "GameVersionType":
        d = d or {}
        return cls(
            id=d.get("id", 0),
            game_id=d.get("gameId", 0),
            name=d.get("name", ""),
            slug=d.get("slug", ""),
            is_syncable=d.get("isSyncable"),
            status=d.get("status"),
        )
