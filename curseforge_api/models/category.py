"""Category records."""

from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Any, Dict, Optional

from .common import parse_datetime


@dataclass
class Category:
    """
    A project category, or a class when ``is_class`` is set.

    Classes (Mods, Modpacks, Resource Packs, ...) are the top level; every
    other category points at its class through ``class_id``.
    """
    id: int = 0
    game_id: int = 0
    name: str = ""
    slug: str = ""
    url: str = ""
    icon_url: Optional[str] = None
    date_modified: Optional[datetime] = None
    is_class: Optional[bool] = None
    class_id: Optional[int] = None
    parent_category_id: Optional[int] = None
    display_index: Optional[int] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Category":
        d = d or {}
        return cls(
            id=d.get("id", 0),
            game_id=d.get("gameId", 0),
            name=d.get("name", ""),
            slug=d.get("slug", ""),
            url=d.get("url", ""),
            icon_url=d.get("iconUrl"),
            date_modified=parse_datetime(d.get("dateModified")),
            is_class=d.get("isClass"),
            class_id=d.get("classId"),
            parent_category_id=d.get("parentCategoryId"),
            display_index=d.get("displayIndex"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
