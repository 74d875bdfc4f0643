"""
Services for roadmap and career guide generation.

RoadmapService orchestrates the remote generation call and the local
dataset fallback.
"""

from career_roadmap.services.generation_client import GenerationResult, RemoteGenerationClient
from career_roadmap.services.roadmap_service import RoadmapService

__all__ = [
    "GenerationResult",
    "RemoteGenerationClient",
    "RoadmapService",
]
