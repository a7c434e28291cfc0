"""
CLI entry point.

Usage:
    # Serve with settings from the environment / .env
    python -m userfiles serve

    # Override the listen address and storage directory
    userfiles serve --host 127.0.0.1 --port 8080 --user-files-path ./user_files
"""

import argparse
import logging
import signal
import sys
import threading
from pathlib import Path

from userfiles.core.config import Settings
from userfiles.domain.records.errors import StartupFatalError
from userfiles.server import ServerLifecycle, ServerState

logger = logging.getLogger(__name__)


def _wait_for_shutdown_signal(server: ServerLifecycle) -> None:
    """Block until SIGINT or SIGTERM is delivered or the server dies."""
    received = threading.Event()

    def _handler(signum, _frame) -> None:
        logger.info("Received %s", signal.Signals(signum).name)
        received.set()

    signal.signal(signal.SIGINT, _handler)
    signal.signal(signal.SIGTERM, _handler)
    while server.state is ServerState.LISTENING and not received.wait(timeout=0.5):
        pass


def cmd_serve(args: argparse.Namespace) -> int:
    """Start the HTTP server and stop it gracefully on a signal."""
    from userfiles.main import create_app

    overrides = {
        "host": args.host,
        "port": args.port,
        "user_files_path": args.user_files_path,
        "shutdown_grace_seconds": args.grace_period,
        "log_level": args.log_level,
    }
    settings = Settings(**{k: v for k, v in overrides.items() if v is not None})

    try:
        app = create_app(settings)
        server = ServerLifecycle(
            app,
            host=settings.host,
            port=settings.port,
            grace_period=settings.shutdown_grace_seconds,
        )
        server.start()
    except StartupFatalError as exc:
        logger.critical("Startup failed: %s", exc.message)
        return 1

    try:
        _wait_for_shutdown_signal(server)
    finally:
        server.stop()
    if server.state is ServerState.FAILED:
        return 1
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Per-user file store HTTP service")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP server")
    serve_parser.add_argument("--host", help="Interface to bind (default: HOST or 0.0.0.0)")
    serve_parser.add_argument("--port", type=int, help="Port to bind (default: PORT or 80)")
    serve_parser.add_argument(
        "--user-files-path",
        type=Path,
        help="Directory for <user_id>.json files (default: USER_FILES_PATH or /user_files)",
    )
    serve_parser.add_argument(
        "--grace-period",
        type=float,
        help="Seconds to let in-flight requests finish on shutdown (default: 5)",
    )
    serve_parser.add_argument("--log-level", help="DEBUG, INFO, WARNING or ERROR")
    serve_parser.set_defaults(func=cmd_serve)

    args = parser.parse_args(argv)
    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
