"""
HTTP server lifecycle.

Owns the listen socket, the uvicorn server and the thread it runs on,
and exposes start/stop as explicit state transitions:

    CREATED -> LISTENING -> SHUTTING_DOWN -> STOPPED
    LISTENING -> FAILED   (serving thread died without stop())

Usage:
    lifecycle = ServerLifecycle(app, host="0.0.0.0", port=80)
    lifecycle.start()   # returns immediately, serves in the background
    lifecycle.stop()    # blocks for at most the grace period
"""

import logging
import socket
import threading
from enum import Enum

import uvicorn
from fastapi import FastAPI

from userfiles.domain.records.errors import StartupFatalError

logger = logging.getLogger(__name__)

DEFAULT_GRACE_SECONDS = 5.0
# Time left to the serving thread after the grace period to cancel
# abandoned requests and unwind the event loop.
_JOIN_MARGIN_SECONDS = 1.0


class ServerState(Enum):
    CREATED = "created"
    LISTENING = "listening"
    SHUTTING_DOWN = "shutting_down"
    STOPPED = "stopped"
    FAILED = "failed"


class ServerLifecycle:
    """Runs a FastAPI application on a background uvicorn server.

    The socket is bound and put into listening mode inside ``start()``,
    on the caller's thread, so a bad address surfaces as
    ``StartupFatalError`` before any request is served and connections
    made right after ``start()`` returns are queued rather than refused.
    """

    def __init__(
        self,
        app: FastAPI,
        host: str = "0.0.0.0",
        port: int = 80,
        grace_period: float = DEFAULT_GRACE_SECONDS,
    ) -> None:
        """
        Args:
            app: The ASGI application to serve.
            host: Interface to bind.
            port: TCP port to bind. 0 lets the OS pick a free port.
            grace_period: Seconds in-flight requests may run after stop().
        """
        self._app = app
        self._host = host
        self._port = port
        self._grace_period = grace_period

        self._state = ServerState.CREATED
        self._lock = threading.Lock()
        self._socket: socket.socket | None = None
        self._address: tuple[str, int] | None = None
        self._server: uvicorn.Server | None = None
        self._thread: threading.Thread | None = None

    @property
    def state(self) -> ServerState:
        return self._state

    @property
    def bound_address(self) -> tuple[str, int] | None:
        """The ``(host, port)`` actually bound, once listening."""
        return self._address

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Bind the listen socket and start serving in a background thread.

        Raises:
            StartupFatalError: If the address cannot be bound.
        """
        with self._lock:
            if self._state is not ServerState.CREATED:
                logger.warning("Server already %s; start() ignored.", self._state.value)
                return

            self._socket = self._bind()
            config = uvicorn.Config(
                app=self._app,
                log_config=None,
                access_log=False,
                timeout_graceful_shutdown=self._grace_period,
            )
            self._server = uvicorn.Server(config)
            self._thread = threading.Thread(
                target=self._serve, name="userfiles-http", daemon=True
            )
            self._state = ServerState.LISTENING
            self._thread.start()

        host, port = self.bound_address
        logger.info("Server starting on %s:%d", host, port)

    def stop(self) -> None:
        """Stop accepting connections and wait for in-flight requests.

        Returns once shutdown completes or the grace period elapses,
        whichever comes first. Requests still running after the deadline
        are abandoned.
        """
        with self._lock:
            if self._state is ServerState.CREATED:
                self._state = ServerState.STOPPED
                return
            if self._state is not ServerState.LISTENING:
                return
            self._state = ServerState.SHUTTING_DOWN

        logger.info("Shutting down server (grace period %.1fs)", self._grace_period)
        self._server.should_exit = True
        self._thread.join(timeout=self._grace_period + _JOIN_MARGIN_SECONDS)

        if self._thread.is_alive():
            logger.error("Server shutdown error: grace period exceeded, abandoning requests")
            self._server.force_exit = True
        else:
            logger.info("Server stopped gracefully")

        self._socket.close()
        self._state = ServerState.STOPPED

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _bind(self) -> socket.socket:
        try:
            family = socket.AF_INET6 if ":" in self._host else socket.AF_INET
            sock = socket.socket(family, socket.SOCK_STREAM)
        except OSError as exc:
            raise StartupFatalError(f"Cannot create socket for {self._host}: {exc}") from exc

        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.bind((self._host, self._port))
            sock.listen()
            self._address = tuple(sock.getsockname()[:2])
        except OSError as exc:
            sock.close()
            logger.critical("Server error: cannot bind %s:%d: %s", self._host, self._port, exc)
            raise StartupFatalError(
                f"Cannot bind {self._host}:{self._port}: {exc}"
            ) from exc
        return sock

    def _serve(self) -> None:
        try:
            self._server.run(sockets=[self._socket])
        except Exception:
            logger.exception("Server error")
        except SystemExit:
            # uvicorn exits this way when it cannot serve the socket
            logger.error("Server exited during startup")

        with self._lock:
            # Only stop() leaves LISTENING on purpose.
            if self._state is ServerState.LISTENING:
                logger.critical("Server stopped unexpectedly; marking it failed")
                self._state = ServerState.FAILED
                self._socket.close()
