"""
Roadmap Dataset Store

Loads the curated roadmap dataset once and serves it read-only for the
lifetime of the store. The dataset is a JSON document shaped as:

    {
        "Software Engineer": {
            "title": "Software Engineer",
            "phases": [{"title": "Phase 1: Foundation", "topics": ["..."]}]
        }
    }

It may be a local file or an http(s) URL. Shape validation uses pydantic;
any fetch or parse failure is raised as DataUnavailable.
"""

import json
import threading
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

import requests
from pydantic import BaseModel, RootModel, ValidationError

from career_roadmap.common.error_handling import DataUnavailable
from career_roadmap.common.logger import get_logger
from career_roadmap.common.types import Phase, RoadmapRecord

logger = get_logger(__name__, component="store")


class PhaseModel(BaseModel):
    """Schema for one phase entry in the dataset."""

    title: str
    topics: List[str] = []


class RoadmapEntryModel(BaseModel):
    """Schema for one dataset entry."""

    title: str
    phases: List[PhaseModel]


class RoadmapDatasetModel(RootModel[Dict[str, RoadmapEntryModel]]):
    """Schema for the full dataset: entry name -> roadmap."""


def parse_dataset(raw: object) -> Mapping[str, RoadmapRecord]:
    """
    Validate decoded JSON and convert it into immutable RoadmapRecords.

    Insertion order of the source document is preserved.

    Args:
        raw: Decoded JSON document

    Returns:
        Read-only mapping of dataset key to RoadmapRecord

    Raises:
        DataUnavailable: If the document does not match the expected shape
    """
    try:
        dataset = RoadmapDatasetModel.model_validate(raw)
    except ValidationError as e:
        raise DataUnavailable(f"Roadmap dataset has unexpected shape: {e}") from e

    records: Dict[str, RoadmapRecord] = {}
    for key, entry in dataset.root.items():
        records[key] = RoadmapRecord(
            key=key,
            title=entry.title,
            phases=tuple(
                Phase(title=phase.title, topics=tuple(phase.topics))
                for phase in entry.phases
            ),
        )
    return MappingProxyType(records)


class RoadmapStore:
    """
    Lazily loaded, cached roadmap dataset.

    The first successful load() is cached; later calls return the same
    mapping without re-reading. Concurrent first loads are serialized so only
    one read happens. A failed load is not cached.

    Usage:
        store = RoadmapStore("data/career_roadmaps.json")
        records = store.load()  # raises DataUnavailable on failure
        records = store.records()  # empty mapping on failure
    """

    def __init__(self, location: str, timeout: float = 30.0):
        """
        Initialize the store.

        Args:
            location: Local file path or http(s) URL of the dataset
            timeout: Timeout in seconds for a remote fetch
        """
        self.location = str(location)
        self.timeout = timeout
        self._records: Optional[Mapping[str, RoadmapRecord]] = None
        self._lock = threading.Lock()

    @property
    def is_loaded(self) -> bool:
        return self._records is not None

    @property
    def is_remote(self) -> bool:
        return self.location.startswith(("http://", "https://"))

    def load(self) -> Mapping[str, RoadmapRecord]:
        """
        Return the dataset, reading it on first use.

        Returns:
            Read-only mapping of dataset key to RoadmapRecord

        Raises:
            DataUnavailable: If the dataset cannot be fetched or parsed
        """
        if self._records is not None:
            return self._records

        with self._lock:
            # Another thread may have finished the load while we waited
            if self._records is None:
                raw = self._fetch_remote() if self.is_remote else self._read_file()
                self._records = parse_dataset(raw)
                logger.info(
                    f"Loaded {len(self._records)} roadmap records from {self.location}"
                )
        return self._records

    def records(self) -> Mapping[str, RoadmapRecord]:
        """
        Return the dataset, or an empty mapping if it is unavailable.

        Never raises: a failed load is logged and treated as "no data".
        """
        try:
            return self.load()
        except DataUnavailable as e:
            logger.warning(f"Roadmap dataset unavailable, continuing without it: {e}")
            return MappingProxyType({})

    def _fetch_remote(self) -> object:
        try:
            response = requests.get(self.location, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.exceptions.Timeout as e:
            raise DataUnavailable(f"Dataset fetch timed out after {self.timeout}s") from e
        except requests.exceptions.RequestException as e:
            raise DataUnavailable(f"Dataset fetch failed: {e}") from e
        except ValueError as e:
            raise DataUnavailable(f"Dataset is not valid JSON: {e}") from e

    def _read_file(self) -> object:
        path = Path(self.location)
        if not path.exists():
            raise DataUnavailable(f"Dataset file not found: {path}")
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise DataUnavailable(f"Dataset file could not be read: {e}") from e
        except json.JSONDecodeError as e:
            raise DataUnavailable(f"Dataset file is not valid JSON: {e}") from e
        except UnicodeDecodeError as e:
            raise DataUnavailable(f"Dataset file is not valid UTF-8: {e}") from e
