"""Command-line entrypoint for the media range server.

Serves one media file over HTTP with byte-range support so browser players
can seek without downloading the whole file. Options not given on the command
line come from `MEDIA_*` environment variables or `.env`.

Usage:
    python main.py video.mp4 --port 8080
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import uvicorn

from api.server import create_app
from config import Settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Serve a media file with HTTP Range support",
    )
    parser.add_argument(
        "media_path",
        type=Path,
        nargs="?",
        help="File to serve (default: MEDIA_MEDIA_PATH or video.mp4)",
    )
    parser.add_argument("--host", type=str, help="Host/IP address to bind")
    parser.add_argument("-p", "--port", type=int, help="Port to listen on")
    parser.add_argument("--route", type=str, help="URL path of the media route")
    parser.add_argument(
        "-b", "--buffer-size", type=int, help="Maximum bytes per streamed chunk"
    )
    parser.add_argument("--log-level", type=str, help="Console log level")
    return parser


def load_settings(argv: list[str] | None = None) -> Settings:
    """Build settings from the environment, overridden by CLI arguments."""
    args = build_parser().parse_args(argv)
    overrides = {
        key: value
        for key, value in vars(args).items()
        if value is not None
    }
    return Settings(**overrides)


def main(argv: list[str] | None = None) -> None:
    config = load_settings(argv)

    if not config.media_path.is_file():
        print(f"[ERROR] Media file does not exist: {config.media_path}")
        sys.exit(1)

    uvicorn.run(
        create_app(config),
        host=config.host,
        port=config.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
