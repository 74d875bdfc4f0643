"""
Roadmap Service

Orchestrates roadmap generation in two states:

    REMOTE   -> one chat completions call via RemoteGenerationClient
    FALLBACK -> RoadmapStore -> CareerMatcher -> RoadmapRenderer

Any failed remote attempt (missing key, network error, non-2xx status,
malformed body, unexpected exception) moves to FALLBACK. FALLBACK cannot
fail: an unavailable dataset behaves like an empty one and the generic
document is rendered. Every call returns a non-empty document.
"""

import uuid
from typing import Optional

from career_roadmap.common.config import GenerationConfig
from career_roadmap.common.error_handling import GenerationErrorKind
from career_roadmap.common.logger import get_logger
from career_roadmap.common.types import (
    SOURCE_DATASET,
    SOURCE_GENERIC,
    SOURCE_REMOTE,
    CareerProfile,
    CareerQuery,
    RoadmapOutcome,
)
from career_roadmap.roadmap.matcher import CareerMatcher
from career_roadmap.roadmap.renderer import RoadmapRenderer
from career_roadmap.roadmap.store import RoadmapStore
from career_roadmap.services.generation_client import GenerationResult, RemoteGenerationClient
from career_roadmap.services.prompts import build_career_guide_prompt, build_roadmap_prompt

_logger = get_logger(__name__, component="service")


def _error_kind_value(result: GenerationResult) -> str:
    """Failure kind of a result, UNEXPECTED when the client left it unset."""
    kind = result.error_kind or GenerationErrorKind.UNEXPECTED
    return GenerationErrorKind(kind).value


class RoadmapService:
    """
    Career roadmap generation with a deterministic local fallback.

    Usage:
        service = RoadmapService(GenerationConfig.from_env())
        text = service.generate_roadmap("Data Scientist", user_name="Ada")

        # With attribution of which path produced the document
        outcome = service.generate_roadmap_outcome("Data Scientist")
        print(outcome.source)  # "remote", "dataset" or "generic"
    """

    def __init__(
        self,
        config: GenerationConfig,
        store: Optional[RoadmapStore] = None,
        client: Optional[RemoteGenerationClient] = None,
        matcher: Optional[CareerMatcher] = None,
        renderer: Optional[RoadmapRenderer] = None,
        use_remote: bool = True,
    ):
        """
        Initialize the service.

        Args:
            config: Explicit generation configuration
            store: Roadmap dataset store (built from config.dataset_location if None)
            client: Remote generation client (built from config if None)
            matcher: Career matcher (default CareerMatcher)
            renderer: Roadmap renderer (default RoadmapRenderer)
            use_remote: If False, always use the local fallback path
        """
        self.config = config
        self.store = store or RoadmapStore(
            config.dataset_location, timeout=config.timeout_seconds
        )
        self.client = client or RemoteGenerationClient(config)
        self.matcher = matcher or CareerMatcher()
        self.renderer = renderer or RoadmapRenderer()
        self.use_remote = use_remote

    def generate_roadmap(self, career_name: str, user_name: Optional[str] = None) -> str:
        """Generate a roadmap document. Never raises for remote or dataset failures."""
        return self.generate_roadmap_outcome(career_name, user_name).content

    def generate_roadmap_outcome(
        self, career_name: str, user_name: Optional[str] = None
    ) -> RoadmapOutcome:
        """
        Generate a roadmap document with path attribution.

        Args:
            career_name: Free-text occupation name
            user_name: Optional name used to personalize the remote prompt

        Returns:
            RoadmapOutcome with non-empty content
        """
        logger = _logger.bind(run_id=uuid.uuid4().hex)
        career_name = career_name or ""

        result = self._attempt_remote(
            build_roadmap_prompt(career_name, user_name),
            self.config.roadmap_max_tokens,
            operation="roadmap",
            logger=logger,
        )
        if result is not None and result.success:
            logger.info(f"Remote roadmap generated for '{career_name}' in {result.duration_ms}ms")
            return RoadmapOutcome(
                content=result.content,
                source=SOURCE_REMOTE,
                career_name=career_name,
            )

        # Fallback path
        record = self.matcher.resolve(CareerQuery(raw_name=career_name), self.store.records())
        content = self.renderer.render(record, career_name)
        source = SOURCE_DATASET if record is not None else SOURCE_GENERIC
        logger.info(f"Fallback roadmap for '{career_name}' rendered from {source}")

        return RoadmapOutcome(
            content=content,
            source=source,
            career_name=career_name,
            matched_key=record.key if record is not None else None,
            error_kind=_error_kind_value(result) if result is not None else None,
            error=result.error if result is not None else None,
        )

    def generate_career_guide(
        self, profile: CareerProfile, user_name: Optional[str] = None
    ) -> str:
        """
        Generate the long-form career guide for a career profile.

        Falls back to the template guide on any remote failure.

        Args:
            profile: Career, skill, hobby and salary range
            user_name: Optional name used to personalize the remote prompt

        Returns:
            Non-empty guide text
        """
        logger = _logger.bind(run_id=uuid.uuid4().hex)

        result = self._attempt_remote(
            build_career_guide_prompt(profile, user_name),
            self.config.guide_max_tokens,
            operation="career guide",
            logger=logger,
        )
        if result is not None and result.success:
            logger.info(f"Remote career guide generated for '{profile.career}'")
            return result.content

        logger.info(f"Fallback career guide for '{profile.career}' rendered from template")
        return self.renderer.render_career_guide(profile)

    def _attempt_remote(
        self, prompt: str, max_tokens: int, operation: str, logger
    ) -> Optional[GenerationResult]:
        """
        Run the REMOTE state.

        Returns:
            The GenerationResult, or None when the remote path is disabled
        """
        if not self.use_remote:
            logger.debug(f"Remote generation disabled, using fallback for {operation}")
            return None

        try:
            result = self.client.generate(prompt, max_tokens=max_tokens)
        except Exception as e:
            result = GenerationResult.failed(
                GenerationErrorKind.UNEXPECTED, str(e), model=self.config.model
            )
        if not result.success:
            logger.warning(
                f"Remote {operation} generation failed "
                f"({_error_kind_value(result)}): {result.error}. Using fallback."
            )
        return result
