from .solver import (
    ChallengeResult,
    SolverStage,
    TorusChallengeSolver,
    parse_challenge_field,
    run_self_check,
)
from .fixtures import HASH_FIXTURE, NEIGHBOR_FIXTURES

__all__ = [
    "ChallengeResult",
    "SolverStage",
    "TorusChallengeSolver",
    "parse_challenge_field",
    "run_self_check",
    "HASH_FIXTURE",
    "NEIGHBOR_FIXTURES",
]
