"""Search request parameters."""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Dict, Optional

MAX_PAGE_SIZE = 50


def clamp_page_size(page_size: Optional[int]) -> Optional[int]:
    """Limit a page size to what the API accepts."""
    if page_size is None:
        return None
    return min(page_size, MAX_PAGE_SIZE)


class ModLoaderType(IntEnum):
    ANY = 0
    FORGE = 1
    CAULDRON = 2
    LITELOADER = 3
    FABRIC = 4
    QUILT = 5
    NEOFORGE = 6


class SortField(IntEnum):
    FEATURED = 1
    POPULARITY = 2
    LAST_UPDATED = 3
    NAME = 4
    AUTHOR = 5
    TOTAL_DOWNLOADS = 6
    CATEGORY = 7
    GAME_VERSION = 8
    EARLY_ACCESS = 9
    FEATURED_RELEASED = 10
    RELEASED_DATE = 11
    RATING = 12


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass
class SearchRequest:
    """
    Filters for ``GET /mods/search``. Unset fields are left out of the query.

    Attributes
    ----------
    game_id : Optional[int]
        Game to search in; the API requires it.
    search_filter : Optional[str]
        Free text matched against project names and authors.
    page_size : Optional[int]
        Items per page, clamped to 50.
    """
    game_id: Optional[int] = None
    class_id: Optional[int] = None
    category_id: Optional[int] = None
    game_version: Optional[str] = None
    search_filter: Optional[str] = None
    sort_field: Optional[SortField] = None
    sort_order: Optional[SortOrder] = None
    mod_loader_type: Optional[ModLoaderType] = None
    game_version_type_id: Optional[int] = None
    author_id: Optional[int] = None
    slug: Optional[str] = None
    index: Optional[int] = None
    page_size: Optional[int] = None

    def to_params(self) -> Dict[str, Any]:
        """Convert to query parameters."""
        params = {
            "gameId": self.game_id,
            "classId": self.class_id,
            "categoryId": self.category_id,
            "gameVersion": self.game_version,
            "searchFilter": self.search_filter,
            "sortField": self.sort_field,
            "sortOrder": self.sort_order,
            "modLoaderType": self.mod_loader_type,
            "gameVersionTypeId": self.game_version_type_id,
            "authorId": self.author_id,
            "slug": self.slug,
            "index": self.index,
            "pageSize": clamp_page_size(self.page_size),
        }
        return {key: value for key, value in params.items() if value is not None}
