"""
Local roadmap resolution and rendering.

RoadmapStore loads the dataset, CareerMatcher picks a record for a career
name, and RoadmapRenderer turns it (or the generic default) into text.
"""

from career_roadmap.roadmap.matcher import CareerMatcher, normalize_career_name
from career_roadmap.roadmap.renderer import RoadmapRenderer
from career_roadmap.roadmap.store import RoadmapStore, parse_dataset

__all__ = [
    "CareerMatcher",
    "normalize_career_name",
    "RoadmapRenderer",
    "RoadmapStore",
    "parse_dataset",
]
