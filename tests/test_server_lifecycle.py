"""
Tests for the HTTP server lifecycle.

Runs the real uvicorn server on an ephemeral loopback port.
"""

import asyncio
import socket
import threading
import time
from pathlib import Path

import httpx
import pytest
import uvicorn
from fastapi import FastAPI

from userfiles.core.config import Settings
from userfiles.domain.records.errors import StartupFatalError
from userfiles.main import create_app
from userfiles.server import ServerLifecycle, ServerState

HOST = "127.0.0.1"


@pytest.fixture
def app(tmp_path: Path) -> FastAPI:
    return create_app(Settings(user_files_path=tmp_path / "user_files", rate_limit_enabled=False))


@pytest.fixture
def server(app: FastAPI):
    lifecycle = ServerLifecycle(app, host=HOST, port=0, grace_period=2.0)
    yield lifecycle
    lifecycle.stop()


def base_url(lifecycle: ServerLifecycle) -> str:
    host, port = lifecycle.bound_address
    return f"http://{host}:{port}"


class TestStateMachine:
    """Tests for lifecycle state transitions."""

    def test_initial_state(self, server: ServerLifecycle) -> None:
        """A new server is created but not bound."""
        assert server.state is ServerState.CREATED
        assert server.bound_address is None

    def test_start_then_stop(self, server: ServerLifecycle) -> None:
        """start() listens, stop() reaches the terminal state."""
        server.start()
        assert server.state is ServerState.LISTENING
        assert server.bound_address[1] > 0

        server.stop()
        assert server.state is ServerState.STOPPED

    def test_stop_before_start(self, server: ServerLifecycle) -> None:
        """Stopping a never-started server goes straight to STOPPED."""
        server.stop()

        assert server.state is ServerState.STOPPED

    def test_start_twice_is_ignored(self, server: ServerLifecycle) -> None:
        """A second start() keeps the first socket."""
        server.start()
        address = server.bound_address

        server.start()

        assert server.bound_address == address

    def test_stop_is_idempotent(self, server: ServerLifecycle) -> None:
        """Repeated stop() calls are harmless."""
        server.start()
        server.stop()
        server.stop()

        assert server.state is ServerState.STOPPED

    def test_start_after_stop_is_ignored(self, server: ServerLifecycle) -> None:
        """STOPPED is terminal."""
        server.stop()
        server.start()

        assert server.state is ServerState.STOPPED


class TestServing:
    """Tests against the live server."""

    def test_start_does_not_block_and_serves(self, server: ServerLifecycle) -> None:
        """Requests sent right after start() are answered."""
        server.start()

        with httpx.Client(base_url=base_url(server), timeout=5.0) as client:
            upload = client.post(
                "/user/add",
                data={"id": "alice"},
                files={"file": ("alice.json", b'{"k": "v"}', "application/json")},
            )
            check = client.get("/user/alice")

        assert upload.status_code == 200
        assert check.json() == {"user_id": "alice", "exists": True}

    def test_connections_refused_after_stop(self, server: ServerLifecycle) -> None:
        """After stop() the port no longer accepts connections."""
        server.start()
        url = base_url(server)
        server.stop()

        with pytest.raises(httpx.ConnectError):
            httpx.get(f"{url}/health", timeout=2.0)

    def test_in_flight_request_completes_during_stop(self, app: FastAPI) -> None:
        """A slow request started before stop() still gets its response."""

        @app.get("/slow")
        def slow() -> dict:
            time.sleep(0.5)
            return {"done": True}

        lifecycle = ServerLifecycle(app, host=HOST, port=0, grace_period=3.0)
        lifecycle.start()
        url = base_url(lifecycle)
        results: dict = {}

        def call() -> None:
            results["response"] = httpx.get(f"{url}/slow", timeout=5.0)

        caller = threading.Thread(target=call)
        caller.start()
        time.sleep(0.2)
        lifecycle.stop()
        caller.join()

        assert results["response"].status_code == 200
        assert results["response"].json() == {"done": True}
        assert lifecycle.state is ServerState.STOPPED

    def test_stop_abandons_requests_past_grace_period(self, app: FastAPI) -> None:
        """stop() returns near the deadline even if a handler never finishes."""

        @app.get("/hang")
        async def hang() -> dict:
            await asyncio.sleep(30)
            return {"done": True}

        lifecycle = ServerLifecycle(app, host=HOST, port=0, grace_period=0.5)
        lifecycle.start()
        url = base_url(lifecycle)
        results: dict = {}

        def call() -> None:
            try:
                results["response"] = httpx.get(f"{url}/hang", timeout=10.0)
            except httpx.HTTPError as exc:
                results["error"] = exc

        caller = threading.Thread(target=call)
        caller.start()
        time.sleep(0.2)

        started = time.monotonic()
        lifecycle.stop()
        elapsed = time.monotonic() - started
        caller.join(timeout=10.0)

        assert elapsed < 0.5 + 1.5
        assert lifecycle.state is ServerState.STOPPED
        assert "response" not in results or results["response"].status_code != 200


class TestStartupFailures:
    """Tests for fatal startup conditions."""

    def test_port_in_use_is_fatal(self, app: FastAPI) -> None:
        """Binding an occupied port raises before serving."""
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as blocker:
            blocker.bind((HOST, 0))
            blocker.listen()
            port = blocker.getsockname()[1]

            lifecycle = ServerLifecycle(app, host=HOST, port=port)
            with pytest.raises(StartupFatalError):
                lifecycle.start()

        assert lifecycle.state is ServerState.CREATED

    def test_unusable_storage_root_is_fatal(self, tmp_path: Path) -> None:
        """The app cannot be built over a regular file."""
        blocker = tmp_path / "blocker"
        blocker.write_text("")

        with pytest.raises(StartupFatalError):
            create_app(Settings(user_files_path=blocker))

    def test_serving_thread_exit_marks_failed(
        self, server: ServerLifecycle, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """uvicorn exiting on its own is recorded instead of staying LISTENING."""
        def exit_at_startup(self, sockets=None):
            raise SystemExit(1)

        monkeypatch.setattr(uvicorn.Server, "run", exit_at_startup)

        server.start()
        server._thread.join(timeout=5.0)

        assert server.state is ServerState.FAILED

    def test_stop_after_failure_keeps_failed(
        self, server: ServerLifecycle, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """stop() on a failed server is a no-op."""
        monkeypatch.setattr(uvicorn.Server, "run", lambda self, sockets=None: None)

        server.start()
        server._thread.join(timeout=5.0)
        server.stop()

        assert server.state is ServerState.FAILED
