"""
Career name matching against the roadmap dataset.

Resolves a free-text career name to at most one RoadmapRecord. Tiers are
applied in order and the first hit wins:

1. Exact: normalized query equals a case-folded dataset key.
2. Substring: query contains the key, or the key contains the query,
   checked entry by entry in dataset order.
3. No match: None.

Normalization is trim + casefold only. Substring matching takes the first
entry in dataset order, so a short key (e.g. "Engineer") placed before a
more specific one (e.g. "Software Engineer") wins for "software engineer
intern". Candidates are not scored.
"""

from typing import Mapping, Optional, Union

from career_roadmap.common.logger import get_logger
from career_roadmap.common.types import CareerQuery, RoadmapRecord

logger = get_logger(__name__, component="matcher")


def normalize_career_name(name: str) -> str:
    """Trim surrounding whitespace and case-fold."""
    return (name or "").strip().casefold()


class CareerMatcher:
    """Tiered career-name resolver. Stateless."""

    def resolve(
        self,
        query: Union[CareerQuery, str],
        dataset: Mapping[str, RoadmapRecord],
    ) -> Optional[RoadmapRecord]:
        """
        Find the roadmap record for a career name.

        Args:
            query: CareerQuery (or raw career name string)
            dataset: Mapping of dataset key to RoadmapRecord, in stored order

        Returns:
            Matching RoadmapRecord, or None when nothing matches
        """
        if isinstance(query, str):
            query = CareerQuery(raw_name=query)

        needle = query.normalized
        if not needle or not dataset:
            return None

        record = self._exact_match(needle, dataset)
        if record is not None:
            logger.debug(f"Exact match for '{query.raw_name}': {record.key}")
            return record

        record = self._substring_match(needle, dataset)
        if record is not None:
            logger.debug(f"Substring match for '{query.raw_name}': {record.key}")
            return record

        logger.debug(f"No roadmap match for '{query.raw_name}'")
        return None

    def _exact_match(
        self, needle: str, dataset: Mapping[str, RoadmapRecord]
    ) -> Optional[RoadmapRecord]:
        for key, record in dataset.items():
            if normalize_career_name(key) == needle:
                return record
        return None

    def _substring_match(
        self, needle: str, dataset: Mapping[str, RoadmapRecord]
    ) -> Optional[RoadmapRecord]:
        for key, record in dataset.items():
            key_norm = normalize_career_name(key)
            if not key_norm:
                continue
            if key_norm in needle or needle in key_norm:
                return record
        return None
