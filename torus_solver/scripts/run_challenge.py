from __future__ import annotations

"""Solve the torus neighbors challenge from the command line."""

import sys
import pathlib

repo_root = pathlib.Path(__file__).resolve().parents[2]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from torus_solver.src.api.client import ChallengeClient
from torus_solver.src.core.errors import TorusError
from torus_solver.src.service.solver import TorusChallengeSolver
from torus_solver.src.utils import config_loader
from torus_solver.src.utils.logger import get_logger, set_level

DESCRIPTION = """Torus Neighbors Challenge Solver

Finds the 8 wrap-around neighbors of a cell in a width x height torus grid and
the SHA-256 (base64) hash of the grid's wrapped index matrix, then exchanges
them with the challenge service: ping, fetch challenge, compute, submit.
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--api", type=str, default=None, help="API base URL")
    parser.add_argument("--user", type=str, default=None, help="User identifier for API requests")
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Run local validation only (no API calls)",
    )
    parser.add_argument("--config", type=str, default=None, help="YAML/JSON config file")
    parser.add_argument("--timeout", type=float, default=None, help="HTTP timeout in seconds")
    parser.add_argument("--debug_http", action="store_true", help="Log full HTTP exchanges")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose or args.debug_http:
        set_level(logging.DEBUG)
    logger = get_logger("torus_solver.run_challenge")

    if args.config:
        config_loader.apply_config(config_loader.load_client_config(Path(args.config)))
    if args.api is not None:
        config_loader.set_api_url(args.api)
    if args.user is not None:
        config_loader.set_user(args.user)
    if args.timeout is not None:
        config_loader.set_timeout(args.timeout)
    if args.debug_http:
        config_loader.set_debug_http(True)

    if args.validate:
        logger.info("Running local validation...")
        if not TorusChallengeSolver().run_self_check():
            return 1
        logger.info("Local validation completed successfully!")
        return 0

    config_loader.print_runtime_config()
    with ChallengeClient(
        config_loader.API_URL,
        timeout=config_loader.TIMEOUT,
        debug_http=config_loader.DEBUG_HTTP or None,
    ) as client:
        solver = TorusChallengeSolver(client)

        logger.info("Running local validation before API interaction...")
        if not solver.run_self_check():
            return 1

        try:
            solver.solve_challenge(config_loader.USER)
        except TorusError as exc:
            logger.error("Challenge failed: %s", exc)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
