"""Fingerprint match records."""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List

from .common import parse_list
from .file import File


@dataclass
class FingerprintRequest:
    fingerprints: List[int] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"fingerprints": list(self.fingerprints)}


@dataclass
class FingerprintMatch:
    """A project file whose fingerprint matched one of the submitted ones."""
    id: int = 0
    file: File = field(default_factory=File)
    latest_files: List[File] = field(default_factory=list)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "FingerprintMatch":
        d = d or {}
        return cls(
            id=d.get("id", 0),
            file=File.from_dict(d.get("file")),
            latest_files=parse_list(File.from_dict, d.get("latestFiles")),
        )


@dataclass
class FingerprintMatchesResult:
    """
    Result of a fingerprint lookup.

    Exact matches identify a file by its whole-file fingerprint; partial
    matches only share some module fingerprints. ``partial_match_fingerprints``
    maps each partially matched file id to the fingerprints it shares.
    """
    is_cache_built: bool = False
    exact_matches: List[FingerprintMatch] = field(default_factory=list)
    exact_fingerprints: List[int] = field(default_factory=list)
    partial_matches: List[FingerprintMatch] = field(default_factory=list)
    partial_match_fingerprints: Dict[str, List[int]] = field(default_factory=dict)
    installed_fingerprints: List[int] = field(default_factory=list)
    unmatched_fingerprints: List[int] = field(default_factory=list)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "FingerprintMatchesResult":
        d = d or {}
        return cls(
            is_cache_built=d.get("isCacheBuilt", False),
            exact_matches=parse_list(FingerprintMatch.from_dict, d.get("exactMatches")),
            exact_fingerprints=list(d.get("exactFingerprints") or []),
            partial_matches=parse_list(FingerprintMatch.from_dict, d.get("partialMatches")),
            partial_match_fingerprints=dict(d.get("partialMatchFingerprints") or {}),
            installed_fingerprints=list(d.get("installedFingerprints") or []),
            unmatched_fingerprints=list(d.get("unmatchedFingerprints") or []),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
