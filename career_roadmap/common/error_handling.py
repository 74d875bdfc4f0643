"""
Error taxonomy for the career roadmap service.

Every failure on the remote and dataset paths maps to one of these types.
RoadmapService recovers all of them locally: callers always receive a
rendered document, and the underlying cause is reported through logging.
"""

from enum import Enum
from typing import Optional


class RoadmapError(Exception):
    """Base class for recoverable roadmap generation failures."""


class NetworkError(RoadmapError):
    """Remote endpoint unreachable, timed out, or returned a non-2xx status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedResponse(RoadmapError):
    """Remote response body did not have the expected JSON shape."""


class DataUnavailable(RoadmapError):
    """Roadmap dataset could not be fetched or failed to parse."""


class GenerationErrorKind(str, Enum):
    """Why a remote generation attempt did not produce content."""

    NETWORK = "network"
    MALFORMED_RESPONSE = "malformed_response"
    NOT_CONFIGURED = "not_configured"
    UNEXPECTED = "unexpected"


def classify_error(error: Exception) -> GenerationErrorKind:
    """
    Map an exception raised during a remote call to a GenerationErrorKind.

    Args:
        error: Exception raised while calling the endpoint

    Returns:
        Matching GenerationErrorKind (UNEXPECTED for anything unrecognised)
    """
    if isinstance(error, NetworkError):
        return GenerationErrorKind.NETWORK
    if isinstance(error, MalformedResponse):
        return GenerationErrorKind.MALFORMED_RESPONSE
    return GenerationErrorKind.UNEXPECTED
