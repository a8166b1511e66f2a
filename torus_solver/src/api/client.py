from __future__ import annotations

"""HTTP client for the torus challenge service."""

import logging
import os
from typing import Any, Dict, Optional

import httpx

from torus_solver.src.core.errors import TorusError
from torus_solver.src.utils.logger import get_logger

from .models import ChallengeRequest, ChallengeResponse, SolutionRequest, SubmissionResult

logger = get_logger(__name__)

PING_PATH = "/ping"
CHALLENGE_PATH = "/challenge-me-easy"


class ApiError(TorusError, RuntimeError):
    """Raised when the challenge service is unreachable or answers with an error."""

    def __init__(
        self,
        operation: str,
        message: str,
        status_code: Optional[int] = None,
        body: str = "",
    ):
        self.operation = operation
        self.status_code = status_code
        self.body = body
        super().__init__(f"{operation}: {message}")


def _log_request(request: httpx.Request) -> None:
    request.read()
    logger.debug(
        "REQUEST:\n%s %s\n%s\n\n%s",
        request.method,
        request.url,
        "\n".join(f"{k}: {v}" for k, v in request.headers.items()),
        request.content.decode("utf-8", errors="replace"),
    )


def _log_response(response: httpx.Response) -> None:
    response.read()
    logger.debug(
        "RESPONSE:\n%s %s\n%s\n\n%s",
        response.status_code,
        response.reason_phrase,
        "\n".join(f"{k}: {v}" for k, v in response.headers.items()),
        response.text,
    )


class ChallengeClient:
    """Thin wrapper around :class:`httpx.Client` for the three service calls."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        debug_http: Optional[bool] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        if debug_http is None:
            debug_http = bool(os.environ.get("DEBUG_HTTP"))
        self.debug_http = debug_http

        event_hooks: Dict[str, list] = {"request": [], "response": []}
        if debug_http:
            # hooks log at DEBUG
            logger.setLevel(logging.DEBUG)
            event_hooks["request"].append(_log_request)
            event_hooks["response"].append(_log_response)

        self.http_client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            event_hooks=event_hooks,
        )

    # ------------------------------------------------------------------
    def __enter__(self) -> "ChallengeClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self.http_client.close()

    # ------------------------------------------------------------------
    def _send(self, operation: str, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            response = self.http_client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            raise ApiError(operation, f"request failed: {exc}") from exc

        if response.status_code != httpx.codes.OK:
            raise ApiError(
                operation,
                f"failed with status {response.status_code}: {response.text}",
                status_code=response.status_code,
                body=response.text,
            )
        return response

    def ping(self) -> None:
        """Check that the service is reachable."""
        self._send("ping", "GET", PING_PATH)

    def get_challenge(self, uuid: str, user: str) -> ChallengeResponse:
        """Request a new challenge for ``uuid``/``user``.

        The service expects the request payload as a JSON body on a ``GET``.
        """
        request = ChallengeRequest(uuid=uuid, user=user)
        response = self._send(
            "get_challenge", "GET", CHALLENGE_PATH, json=request.to_dict()
        )
        try:
            return ChallengeResponse.from_dict(response.json())
        except ValueError as exc:
            raise ApiError(
                "get_challenge",
                f"failed to decode challenge response: {exc}",
                status_code=response.status_code,
                body=response.text,
            ) from exc
        except (KeyError, TypeError) as exc:
            raise ApiError(
                "get_challenge",
                f"challenge response is missing field {exc}",
                status_code=response.status_code,
                body=response.text,
            ) from exc

    def submit_solution(self, uuid: str, result: str, hash: str) -> SubmissionResult:
        """Post the neighbor string and matrix hash for challenge ``uuid``."""
        request = SolutionRequest(uuid=uuid, result=result, hash=hash)
        response = self._send(
            "submit_solution", "POST", CHALLENGE_PATH, json=request.to_dict()
        )
        logger.info("Solution submitted successfully. Response: %s", response.text)
        return SubmissionResult(status_code=response.status_code, body=response.text)


__all__ = ["ApiError", "ChallengeClient"]
