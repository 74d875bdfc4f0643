"""
Canonical Types for the Career Roadmap Service

Defines the roadmap dataset records, the query and profile inputs, and the
attributed outcome returned by RoadmapService.
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Phase:
    """One stage of a roadmap: a title and ordered topic bullets."""
    title: str
    topics: Tuple[str, ...] = ()


@dataclass(frozen=True)
class RoadmapRecord:
    """
    Dataset entry describing one career's staged development plan.

    The key is the dataset entry name, preserved verbatim for display;
    matching against it is case-insensitive.
    """
    key: str
    title: str
    phases: Tuple[Phase, ...] = ()


@dataclass(frozen=True)
class CareerQuery:
    """User-supplied occupation string, not guaranteed to exist in the dataset."""
    raw_name: str

    @property
    def normalized(self) -> str:
        """Trimmed, case-folded form used for matching. No other transformation."""
        return (self.raw_name or "").strip().casefold()


@dataclass(frozen=True)
class CareerProfile:
    """Career guidance entry used to personalize the long-form career guide."""
    career: str
    skill: str = ""
    hobby: str = ""
    salary_range: str = ""


# Which path produced a document
SOURCE_REMOTE = "remote"
SOURCE_DATASET = "dataset"
SOURCE_GENERIC = "generic"


@dataclass
class RoadmapOutcome:
    """
    Result of a RoadmapService call with path attribution.

    Attributes:
        content: The rendered document (never empty)
        source: "remote", "dataset" or "generic"
        career_name: The career name as supplied by the caller
        matched_key: Dataset key used on the dataset path
        error_kind: Why the remote path was abandoned, if it was
        error: Human-readable failure detail for logging
    """
    content: str
    source: str
    career_name: str
    matched_key: Optional[str] = None
    error_kind: Optional[str] = None
    error: Optional[str] = field(default=None, repr=False)

    @property
    def used_fallback(self) -> bool:
        return self.source != SOURCE_REMOTE

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)
