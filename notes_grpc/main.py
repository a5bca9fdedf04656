"""Main entry point for the notes server."""

from __future__ import annotations

import argparse
import logging
import signal
import sys

from .server import DEFAULT_HOST, DEFAULT_MAX_WORKERS, DEFAULT_PORT, serve


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="notes-server",
        description="Notes gRPC server - create, read, update, delete and search notes",
    )
    parser.add_argument(
        "--host",
        default=DEFAULT_HOST,
        help=f"Address to listen on (default: {DEFAULT_HOST})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=DEFAULT_PORT,
        help=f"Port to listen on (default: {DEFAULT_PORT})",
    )
    parser.add_argument(
        "--max-workers",
        type=int,
        default=DEFAULT_MAX_WORKERS,
        help=f"Worker threads serving RPCs (default: {DEFAULT_MAX_WORKERS})",
    )
    parser.add_argument(
        "--grace",
        type=float,
        default=5.0,
        help="Seconds to let in-flight RPCs finish on shutdown (default: 5)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )
    return parser


def main(argv: list[str] | None = None):
    """Run the notes service as a gRPC server."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    logger = logging.getLogger(__name__)
    logger.info(f"Starting notes server on {args.host}:{args.port}")

    server = serve(args.host, args.port, max_workers=args.max_workers)

    def shutdown(signum, frame):
        logger.info("Received shutdown signal, stopping server...")
        server.stop(grace=args.grace)
        sys.exit(0)

    signal.signal(signal.SIGINT, shutdown)
    signal.signal(signal.SIGTERM, shutdown)

    server.wait_for_termination()


if __name__ == "__main__":
    main()
