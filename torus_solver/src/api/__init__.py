"""Client side of the challenge service protocol."""

from .client import ApiError, ChallengeClient
from .models import ChallengeRequest, ChallengeResponse, SolutionRequest, SubmissionResult

__all__ = [
    "ApiError",
    "ChallengeClient",
    "ChallengeRequest",
    "ChallengeResponse",
    "SolutionRequest",
    "SubmissionResult",
]
