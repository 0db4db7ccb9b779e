"""GitHub bridge MCP server: newline-delimited JSON-RPC over stdio.

Reads one request per line from stdin and writes one response per line to
stdout, in order. Logging goes to stderr only. A malformed line is logged
and skipped; it never stops the loop.

Runs as: python -m github_bridge
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from pydantic import ValidationError

from github_bridge.config import BridgeSettings
from github_bridge.dispatcher import Dispatcher
from github_bridge.errors import ConfigurationError
from github_bridge.github.client import GitHubClient
from github_bridge.protocol import decode_request, encode_response
from github_bridge.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Send all log records to stderr so stdout carries only responses."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )


def serve(dispatcher: Dispatcher, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """Run the request loop until end of input. Returns the number of responses written."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout

    # Undecodable bytes must reach the per-line check instead of ending the loop.
    if hasattr(stdin, "reconfigure"):
        stdin.reconfigure(errors="surrogateescape")

    written = 0
    for lineno, line in enumerate(stdin, start=1):
        line = line.strip()
        if not line:
            continue

        try:
            request = decode_request(line)
        except ValidationError as e:
            logger.warning("Discarding malformed message on line %d: %s", lineno, e.errors()[0].get("msg", e))
            continue
        except UnicodeError:
            logger.warning("Discarding malformed message on line %d: not valid UTF-8", lineno)
            continue

        response = dispatcher.handle(request)
        stdout.write(encode_response(response) + "\n")
        stdout.flush()
        written += 1

    logger.info("Input closed after %d response(s)", written)
    return written


def main() -> int:
    settings = BridgeSettings()
    configure_logging(settings.bridge_log_level)

    try:
        token = settings.require_token()
    except ConfigurationError as e:
        logger.error("Cannot start GitHub bridge: %s", e)
        return 1

    registry = ToolRegistry()
    with GitHubClient(token, base_url=settings.github_api_url, timeout=settings.github_timeout) as client:
        logger.info("GitHub bridge started with %d tools, waiting for messages on stdin", len(registry))
        serve(Dispatcher(registry, client))
    return 0


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
