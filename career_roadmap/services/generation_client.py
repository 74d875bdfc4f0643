"""
Remote Generation Client

Single-shot call to an OpenAI-compatible chat completions endpoint.

The client never raises: every attempt returns a GenerationResult carrying
either the generated content or the failure kind, which RoadmapService
inspects to decide whether to fall back to the local roadmap path.
There is no retry; one request per invocation.

Request body:
    {"model": ..., "messages": [{"role": "user", "content": prompt}],
     "temperature": ..., "max_tokens": ...}

Expected response:
    {"choices": [{"message": {"content": "..."}}, ...]}
"""

import time
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

import requests
from pydantic import BaseModel, ValidationError

from career_roadmap.common.config import GenerationConfig
from career_roadmap.common.error_handling import (
    GenerationErrorKind,
    MalformedResponse,
    NetworkError,
    classify_error,
)
from career_roadmap.common.logger import get_logger

logger = get_logger(__name__, component="generation")


class ChatMessage(BaseModel):
    content: str


class ChatChoice(BaseModel):
    message: ChatMessage


class ChatCompletionResponse(BaseModel):
    """The part of a chat completions response we rely on."""

    choices: List[ChatChoice]


@dataclass
class GenerationResult:
    """
    Outcome of one remote generation attempt.

    Attributes:
        content: Generated text (empty on failure)
        success: Whether usable content was produced
        model: Model identifier that was requested
        duration_ms: Time taken for the attempt in milliseconds
        error_kind: Failure category when success is False
        error: Failure detail when success is False
    """

    content: str
    success: bool
    model: str
    duration_ms: int = 0
    error_kind: Optional[GenerationErrorKind] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, content: str, model: str, duration_ms: int = 0) -> "GenerationResult":
        return cls(content=content, success=True, model=model, duration_ms=duration_ms)

    @classmethod
    def failed(
        cls,
        kind: GenerationErrorKind,
        error: str,
        model: str,
        duration_ms: int = 0,
    ) -> "GenerationResult":
        return cls(
            content="",
            success=False,
            model=model,
            duration_ms=duration_ms,
            error_kind=kind,
            error=error,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)


def extract_content(payload: Any) -> str:
    """
    Pull the first choice's message content out of a response body.

    Args:
        payload: Decoded JSON response body

    Returns:
        Non-empty content string

    Raises:
        MalformedResponse: If the body lacks choices[0].message.content
            or the content is blank
    """
    try:
        parsed = ChatCompletionResponse.model_validate(payload)
    except ValidationError as e:
        raise MalformedResponse(f"Unexpected response shape: {e}") from e

    if not parsed.choices:
        raise MalformedResponse("Response contained no choices")

    content = parsed.choices[0].message.content
    if not content.strip():
        raise MalformedResponse("First choice has empty content")
    return content


class RemoteGenerationClient:
    """
    Chat completions client returning typed results instead of raising.

    Usage:
        client = RemoteGenerationClient(GenerationConfig.from_env())
        result = client.generate(prompt, max_tokens=1200)
        if result.success:
            print(result.content)
    """

    def __init__(self, config: GenerationConfig, session: Optional[requests.Session] = None):
        """
        Initialize the client.

        Args:
            config: Endpoint, key, model and timeout settings
            session: Optional requests session (module-level requests.post if None)
        """
        self.config = config
        self._session = session

    def generate(self, prompt: str, max_tokens: Optional[int] = None) -> GenerationResult:
        """
        Send one user-role prompt and return the first choice's content.

        Args:
            prompt: The prompt text
            max_tokens: Token bound (defaults to config.roadmap_max_tokens)

        Returns:
            GenerationResult; success is False on any failure
        """
        model = self.config.model
        if not self.config.is_configured:
            return GenerationResult.failed(
                GenerationErrorKind.NOT_CONFIGURED,
                "No API key configured",
                model=model,
            )

        start = time.monotonic()
        try:
            content = self._request(prompt, max_tokens or self.config.roadmap_max_tokens)
        except Exception as e:
            duration_ms = int((time.monotonic() - start) * 1000)
            return GenerationResult.failed(
                classify_error(e), str(e), model=model, duration_ms=duration_ms
            )

        duration_ms = int((time.monotonic() - start) * 1000)
        logger.debug(f"Remote generation succeeded in {duration_ms}ms ({len(content)} chars)")
        return GenerationResult.ok(content, model=model, duration_ms=duration_ms)

    def _build_payload(self, prompt: str, max_tokens: int) -> Dict[str, Any]:
        return {
            "model": self.config.model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": self.config.temperature,
            "max_tokens": max_tokens,
        }

    def _request(self, prompt: str, max_tokens: int) -> str:
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.config.api_key}",
        }
        post = self._session.post if self._session is not None else requests.post

        try:
            response = post(
                self.config.api_url,
                json=self._build_payload(prompt, max_tokens),
                headers=headers,
                timeout=self.config.timeout_seconds,
            )
        except requests.exceptions.Timeout as e:
            raise NetworkError(
                f"Generation request timed out after {self.config.timeout_seconds}s"
            ) from e
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Generation request failed: {e}") from e

        if not 200 <= response.status_code < 300:
            raise NetworkError(
                f"Generation endpoint returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise MalformedResponse(f"Response body is not valid JSON: {e}") from e

        return extract_content(payload)
