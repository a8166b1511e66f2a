import json
import logging

import httpx
import pytest

from torus_solver.src.api.client import ApiError, ChallengeClient
from torus_solver.src.api.models import ChallengeResponse
from torus_solver.src.core.matrix_hasher import MatrixHasher
from torus_solver.src.core.torus_grid import TorusGrid
from torus_solver.src.service.solver import SolverStage, TorusChallengeSolver

BASE_URL = "https://challenge.test"


def _client(handler, **kwargs) -> ChallengeClient:
    return ChallengeClient(BASE_URL, transport=httpx.MockTransport(handler), **kwargs)


def test_client_strips_trailing_slash():
    client = ChallengeClient(BASE_URL + "/", debug_http=False)
    assert client.base_url == BASE_URL
    assert not client.debug_http
    client.close()


def test_debug_http_from_environment(monkeypatch, client_logger_at_default):
    monkeypatch.setenv("DEBUG_HTTP", "1")
    with ChallengeClient(BASE_URL) as client:
        assert client.debug_http
    monkeypatch.delenv("DEBUG_HTTP")
    with ChallengeClient(BASE_URL) as client:
        assert not client.debug_http


def test_ping_success():
    seen = []

    def handler(request):
        seen.append((request.method, request.url.path))
        return httpx.Response(200, text="pong")

    with _client(handler) as client:
        client.ping()
    assert seen == [("GET", "/ping")]


def test_ping_failure():
    def handler(request):
        return httpx.Response(500, text="Server error")

    with _client(handler) as client:
        with pytest.raises(ApiError) as info:
            client.ping()
    assert info.value.operation == "ping"
    assert info.value.status_code == 500
    assert info.value.body == "Server error"


def test_ping_network_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with _client(handler) as client:
        with pytest.raises(ApiError) as info:
            client.ping()
    assert info.value.status_code is None
    assert isinstance(info.value.__cause__, httpx.ConnectError)


def test_get_challenge_success():
    def handler(request):
        assert request.url.path == "/challenge-me-easy"
        assert request.method == "GET"
        assert json.loads(request.content) == {"uuid": "test-uuid", "user": "test-user"}
        assert request.headers["content-type"] == "application/json"
        return httpx.Response(
            200, json={"uuid": "test-uuid", "set_x": "4", "set_y": "4", "set_z": "5"}
        )

    with _client(handler) as client:
        challenge = client.get_challenge("test-uuid", "test-user")
    assert challenge == ChallengeResponse(uuid="test-uuid", set_x="4", set_y="4", set_z="5")


def test_get_challenge_numeric_fields_are_stringified():
    def handler(request):
        return httpx.Response(200, json={"uuid": "u", "set_x": 5, "set_y": 4, "set_z": 1})

    with _client(handler) as client:
        challenge = client.get_challenge("u", "")
    assert (challenge.set_x, challenge.set_y, challenge.set_z) == ("5", "4", "1")


def test_get_challenge_missing_field():
    def handler(request):
        return httpx.Response(200, json={"uuid": "u", "set_x": "4"})

    with _client(handler) as client:
        with pytest.raises(ApiError) as info:
            client.get_challenge("u", "user")
    assert "set_y" in str(info.value)


def test_get_challenge_invalid_json():
    def handler(request):
        return httpx.Response(200, text="not json")

    with _client(handler) as client:
        with pytest.raises(ApiError) as info:
            client.get_challenge("u", "user")
    assert info.value.operation == "get_challenge"


def test_get_challenge_error_status():
    def handler(request):
        return httpx.Response(400, text="Bad request")

    with _client(handler) as client:
        with pytest.raises(ApiError) as info:
            client.get_challenge("u", "user")
    assert info.value.status_code == 400


def test_submit_solution():
    def handler(request):
        assert request.method == "POST"
        assert request.url.path == "/challenge-me-easy"
        assert json.loads(request.content) == {
            "uuid": "test-uuid",
            "result": "1,2,3,4,5,6,7,8",
            "hash": "test-hash",
        }
        return httpx.Response(200, json={"status": "success"})

    with _client(handler) as client:
        submission = client.submit_solution("test-uuid", "1,2,3,4,5,6,7,8", "test-hash")
    assert submission.status_code == 200
    assert json.loads(submission.body) == {"status": "success"}


def test_submit_solution_failure():
    def handler(request):
        return httpx.Response(403, text="wrong answer")

    with _client(handler) as client:
        with pytest.raises(ApiError) as info:
            client.submit_solution("u", "0", "h")
    assert info.value.operation == "submit_solution"
    assert info.value.body == "wrong answer"


def test_debug_http_logs_exchange(caplog, client_logger_at_default):
    def handler(request):
        return httpx.Response(200, text="pong")

    with _client(handler, debug_http=True) as client:
        client.ping()
    assert client_logger_at_default.level == logging.DEBUG
    assert "REQUEST:" in caplog.text
    assert "RESPONSE:" in caplog.text
    assert "pong" in caplog.text


def test_debug_http_env_logs_exchange(monkeypatch, caplog, client_logger_at_default):
    def handler(request):
        return httpx.Response(200, text="pong")

    monkeypatch.setenv("DEBUG_HTTP", "1")
    with _client(handler) as client:
        client.ping()
    assert "REQUEST:" in caplog.text
    assert "GET https://challenge.test/ping" in caplog.text
    assert "RESPONSE:" in caplog.text


def test_no_dumps_without_debug_http(monkeypatch, caplog, client_logger_at_default):
    def handler(request):
        return httpx.Response(200, text="pong")

    monkeypatch.delenv("DEBUG_HTTP", raising=False)
    with _client(handler) as client:
        client.ping()
    assert "REQUEST:" not in caplog.text
    assert client_logger_at_default.level == logging.INFO


def test_solver_end_to_end_with_http():
    submitted = {}

    def handler(request):
        if request.url.path == "/ping":
            return httpx.Response(200)
        if request.method == "GET":
            body = json.loads(request.content)
            assert body["user"] == "bob"
            return httpx.Response(
                200, json={"uuid": "srv-1", "set_x": "5", "set_y": "4", "set_z": "1"}
            )
        submitted.update(json.loads(request.content))
        return httpx.Response(200, json={"status": "accepted"})

    expected_hash = MatrixHasher(TorusGrid(5, 4)).calculate_hash()
    with _client(handler) as client:
        solver = TorusChallengeSolver(client, uuid_factory=lambda: "req-1")
        submission = solver.solve_challenge("bob")

    assert submitted["uuid"] == "srv-1"
    assert submitted["result"] == "15,16,17,0,2,5,6,7"
    assert submitted["hash"] == expected_hash
    assert json.loads(submission.body) == {"status": "accepted"}
    assert solver.stage is SolverStage.SUBMITTED
