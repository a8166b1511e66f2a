"""JSON payloads exchanged with the challenge service."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class ChallengeRequest:
    uuid: str
    user: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class ChallengeResponse:
    """Challenge as served: width, height and target index as decimal strings."""

    uuid: str
    set_x: str
    set_y: str
    set_z: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ChallengeResponse":
        """Build a response from decoded JSON, raising ``KeyError`` on missing fields."""
        return cls(
            uuid=str(data["uuid"]),
            set_x=str(data["set_x"]),
            set_y=str(data["set_y"]),
            set_z=str(data["set_z"]),
        )


@dataclass(frozen=True)
class SolutionRequest:
    uuid: str
    result: str
    hash: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class SubmissionResult:
    """Opaque acknowledgement returned by the service after a submission."""

    status_code: int
    body: str


__all__ = ["ChallengeRequest", "ChallengeResponse", "SolutionRequest", "SubmissionResult"]
