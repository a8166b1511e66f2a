from __future__ import annotations

"""Solve torus neighbor challenges locally and against the challenge service."""

import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

from torus_solver.src.api.client import ChallengeClient
from torus_solver.src.api.models import SubmissionResult
from torus_solver.src.core.errors import (
    FixtureMismatchError,
    InvalidIndexError,
    MissingClientError,
    ParseError,
    SelfCheckError,
    TorusError,
)
from torus_solver.src.core.matrix_hasher import MatrixHasher
from torus_solver.src.core.neighbors import NeighborFinder
from torus_solver.src.core.torus_grid import TorusGrid
from torus_solver.src.utils.logger import get_logger

from .fixtures import HASH_FIXTURE, NEIGHBOR_FIXTURES

logger = get_logger(__name__)


class SolverStage(Enum):
    """Progress of the most recent solver run."""

    CREATED = "CREATED"
    VALIDATED = "VALIDATED"
    COMPUTED = "COMPUTED"
    SUBMITTED = "SUBMITTED"


@dataclass(frozen=True)
class ChallengeResult:
    neighbors: Tuple[int, ...]
    matrix_hash: str

    @property
    def neighbors_string(self) -> str:
        """Neighbor indices joined by commas, as submitted to the service."""
        return ",".join(str(n) for n in self.neighbors)


def parse_challenge_field(name: str, raw: object) -> int:
    """Return ``raw`` parsed as a base-10 integer or raise :class:`ParseError`."""
    if isinstance(raw, bool) or not isinstance(raw, (str, int)):
        raise ParseError(name, raw)
    if isinstance(raw, int):
        return raw
    text = raw.strip()
    digits = text[1:] if text[:1] in "+-" else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ParseError(name, raw)
    return int(text, 10)


class TorusChallengeSolver:
    """Compute neighbor/hash solutions and exchange them with the service.

    ``client`` is only needed for :meth:`solve_challenge`; the pure
    computation and the self-check never touch the network.
    """

    def __init__(
        self,
        client: Optional[ChallengeClient] = None,
        uuid_factory: Callable[[], str] = lambda: str(uuid.uuid4()),
    ):
        self.client = client
        self.uuid_factory = uuid_factory
        self.stage = SolverStage.CREATED
        self.self_check_passed = False

    # ------------------------------------------------------------------
    def compute_solution(self, width: int, height: int, target_index: int) -> ChallengeResult:
        """Return neighbors of ``target_index`` and the wrapped-matrix hash."""
        self.stage = SolverStage.CREATED
        grid = TorusGrid(width, height)
        if not grid.is_valid_index(target_index):
            raise InvalidIndexError(target_index, width, height)
        self.stage = SolverStage.VALIDATED

        neighbors = NeighborFinder(grid).find_neighbors(target_index)
        matrix_hash = MatrixHasher(grid).calculate_hash()
        self.stage = SolverStage.COMPUTED
        return ChallengeResult(neighbors=tuple(neighbors), matrix_hash=matrix_hash)

    def validate_against_fixtures(self) -> None:
        """Reproduce the known fixtures, raising on the first mismatch."""
        logger.info("Validating implementation against known examples...")
        for fx in NEIGHBOR_FIXTURES:
            result = self.compute_solution(fx.width, fx.height, fx.target_index)
            if result.neighbors != fx.expected:
                raise FixtureMismatchError(fx.description, fx.expected, result.neighbors)
            logger.info("%s: PASSED", fx.description)

        logger.info("Validating hash calculation...")
        MatrixHasher(TorusGrid(HASH_FIXTURE.width, HASH_FIXTURE.height)).validate_expected_hash(
            HASH_FIXTURE.expected
        )
        logger.info("Hash validation: PASSED")
        self.self_check_passed = True
        logger.info("All local validations passed!")

    def run_self_check(self) -> bool:
        """Return ``True`` if every fixture is reproduced, ``False`` otherwise."""
        try:
            self.validate_against_fixtures()
        except TorusError as exc:
            self.self_check_passed = False
            logger.error("Local validation failed: %s", exc)
            return False
        return True

    # ------------------------------------------------------------------
    def solve_challenge(self, user: str) -> SubmissionResult:
        """Fetch a challenge for ``user``, solve it and submit the answer."""
        if self.client is None:
            raise MissingClientError("solve_challenge requires a ChallengeClient")
        if not self.self_check_passed and not self.run_self_check():
            raise SelfCheckError("refusing to contact the service: local validation failed")

        challenge_uuid = self.uuid_factory()
        logger.info("Generated UUID for challenge: %s", challenge_uuid)

        logger.info("Testing API connection...")
        self.client.ping()
        logger.info("API connection successful!")

        logger.info("Requesting challenge from API...")
        challenge = self.client.get_challenge(challenge_uuid, user)
        logger.info(
            "Received challenge: width=%s, height=%s, target_index=%s",
            challenge.set_x,
            challenge.set_y,
            challenge.set_z,
        )

        width = parse_challenge_field("set_x", challenge.set_x)
        height = parse_challenge_field("set_y", challenge.set_y)
        target_index = parse_challenge_field("set_z", challenge.set_z)

        logger.info(
            "Computing solution for %dx%d matrix, target index %d...", width, height, target_index
        )
        result = self.compute_solution(width, height, target_index)
        logger.info("Neighbors: %s", result.neighbors_string)
        logger.info("Matrix Hash: %s", result.matrix_hash)

        logger.info("Submitting solution to API...")
        submission = self.client.submit_solution(
            challenge.uuid, result.neighbors_string, result.matrix_hash
        )
        self.stage = SolverStage.SUBMITTED
        logger.info("Challenge completed successfully!")
        return submission


def run_self_check() -> bool:
    """Run the fixture self-check without any network access."""
    return TorusChallengeSolver().run_self_check()


__all__ = [
    "SolverStage",
    "ChallengeResult",
    "TorusChallengeSolver",
    "parse_challenge_field",
    "run_self_check",
]
