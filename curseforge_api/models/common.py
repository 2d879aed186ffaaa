"""
Response envelopes and shared helpers for CurseForge models.

Every model mirrors the upstream camelCase JSON with snake_case attributes
and is built through a ``from_dict`` factory.
"""

from dataclasses import dataclass, field, asdict
from datetime import datetime
from enum import Enum, IntEnum
from typing import Any, Callable, Dict, Generic, List, Optional, Type, TypeVar

from dateutil import parser as dateutil_parser

T = TypeVar("T")
E = TypeVar("E", bound=Enum)


def parse_datetime(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp; empty values become None."""
    if not value:
        return None
    if isinstance(value, datetime):
        return value
    return dateutil_parser.isoparse(value)


def parse_enum(enum_cls: Type[E], value: Any) -> Any:
    """Convert to an enum member, keeping unknown values as they are."""
    if value is None:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        return value


def parse_list(item: Callable[[Any], T], values: Optional[List[Any]]) -> List[T]:
    return [item(value) for value in values or []]


def parse_optional(item: Callable[[Any], T], value: Any) -> Optional[T]:
    if value is None:
        return None
    return item(value)


class ProjectStatus(IntEnum):
    NEW = 1
    CHANGES_REQUIRED = 2
    UNDER_SOFT_REVIEW = 3
    APPROVED = 4
    REJECTED = 5
    CHANGES_MADE = 6
    INACTIVE = 7
    ABANDONED = 8
    DELETED = 9
    UNDER_REVIEW = 10


class ReleaseType(IntEnum):
    RELEASE = 1
    BETA = 2
    ALPHA = 3


class FileStatus(IntEnum):
    PROCESSING = 1
    CHANGES_REQUIRED = 2
    UNDER_REVIEW = 3
    APPROVED = 4
    REJECTED = 5
    MALWARE_DETECTED = 6
    DELETED = 7
    ARCHIVED = 8
    TESTING = 9
    RELEASED = 10
    READY_FOR_REVIEW = 11
    DEPRECATED = 12
    BAKING = 13
    AWAITING_PUBLISHING = 14
    FAILED_PUBLISHING = 15


class FileRelationType(IntEnum):
    EMBEDDED_LIBRARY = 1
    OPTIONAL_DEPENDENCY = 2
    REQUIRED_DEPENDENCY = 3
    TOOL = 4
    INCOMPATIBLE = 5
    INCLUDE = 6


class HashAlgo(IntEnum):
    SHA1 = 1
    MD5 = 2


@dataclass
class Pagination:
    """
    Paging metadata returned alongside list results.

    Attributes
    ----------
    index : int
        Index of the first item in this page.
    page_size : int
        Requested number of items per page.
    result_count : int
        Number of items actually returned.
    total_count : int
        Total number of matching items.
    """
    index: int = 0
    page_size: int = 0
    result_count: int = 0
    total_count: int = 0

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Pagination":
        d = d or {}
        return cls(
            index=d.get("index", 0),
            page_size=d.get("pageSize", 0),
            result_count=d.get("resultCount", 0),
            total_count=d.get("totalCount", 0),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ApiResponse(Generic[T]):
    """Envelope of a single-object response: ``{"data": ...}``."""
    data: T

    @classmethod
    def from_dict(cls, d: Dict[str, Any], item: Callable[[Any], T]) -> "ApiResponse[T]":
        return cls(data=item(d["data"]))

    @classmethod
    def parser(cls, item: Callable[[Any], T]) -> Callable[[Dict[str, Any]], "ApiResponse[T]"]:
        """Build a parser for ``CurseForgeClient.get``/``post``."""
        return lambda d: cls.from_dict(d, item)

    @classmethod
    def list_parser(cls, item: Callable[[Any], T]) -> Callable[[Dict[str, Any]], "ApiResponse[List[T]]"]:
        """Like :meth:`parser` for responses whose data is a list."""
        return lambda d: cls(data=[item(value) for value in d["data"]])


@dataclass
class PaginatedResponse(Generic[T]):
    """Envelope of a paged list response: ``{"data": [...], "pagination": {...}}``."""
    data: List[T] = field(default_factory=list)
    pagination: Pagination = field(default_factory=Pagination)

    @classmethod
    def from_dict(cls, d: Dict[str, Any], item: Callable[[Any], T]) -> "PaginatedResponse[T]":
        return cls(
            data=[item(value) for value in d["data"]],
            pagination=Pagination.from_dict(d.get("pagination")),
        )

    @classmethod
    def parser(cls, item: Callable[[Any], T]) -> Callable[[Dict[str, Any]], "PaginatedResponse[T]"]:
        return lambda d: cls.from_dict(d, item)

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self):
        return iter(self.data)
