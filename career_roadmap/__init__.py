"""
Career roadmap generation.

Produces a multi-phase career development document for an occupation, either
from a remote chat-completions endpoint or from the local roadmap dataset.
"""

from career_roadmap.common.config import GenerationConfig
from career_roadmap.services.roadmap_service import RoadmapService

__all__ = ["GenerationConfig", "RoadmapService"]
