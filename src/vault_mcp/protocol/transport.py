"""Stdio transport — newline-delimited JSON over binary streams.

One line in, at most one line out, strictly in order: the next line is not
read until the previous reply has been written and flushed.  Two loops are
provided and behave identically:

* :meth:`StdioTransport.serve`, a single asyncio task that only suspends
  while waiting for input or for a tool's I/O;
* :meth:`StdioTransport.serve_sync`, a blocking loop.

The loop ends on end-of-input.  A failure to read or write the stream raises
:class:`~vault_mcp.protocol.errors.TransportError`.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import BinaryIO, Protocol

from vault_mcp.protocol.errors import TransportError

logger = logging.getLogger(__name__)


class LineDispatcher(Protocol):
    """Anything that turns a request line into an optional response line."""

    async def dispatch(self, line: str | bytes) -> str | None: ...


class StdioTransport:
    """Serve a :class:`LineDispatcher` over stdin/stdout (or any binary streams)."""

    def __init__(
        self,
        dispatcher: LineDispatcher,
        *,
        reader: BinaryIO | None = None,
        writer: BinaryIO | None = None,
    ) -> None:
        self._dispatcher = dispatcher
        self._reader = reader if reader is not None else sys.stdin.buffer
        self._writer = writer if writer is not None else sys.stdout.buffer

    async def serve(self) -> int:
        """Run the cooperative loop until end-of-input.  Returns lines handled."""
        handled = 0
        while True:
            line = await asyncio.to_thread(self._read_line)
            if not line:
                break
            if not line.strip():
                continue
            reply = await self._dispatcher.dispatch(line)
            if reply is not None:
                self._write_line(reply)
            handled += 1
        logger.info("End of input after %d message(s)", handled)
        return handled

    def serve_sync(self) -> int:
        """Run the blocking loop until end-of-input.  Returns lines handled."""
        handled = 0
        with asyncio.Runner() as runner:
            while True:
                line = self._read_line()
                if not line:
                    break
                if not line.strip():
                    continue
                reply = runner.run(self._dispatcher.dispatch(line))
                if reply is not None:
                    self._write_line(reply)
                handled += 1
        logger.info("End of input after %d message(s)", handled)
        return handled

    def _read_line(self) -> bytes:
        try:
            return self._reader.readline()
        except (OSError, ValueError) as exc:
            raise TransportError(f"Failed to read from input stream: {exc}") from exc

    def _write_line(self, reply: str) -> None:
        try:
            self._writer.write(reply.encode("utf-8") + b"\n")
            self._writer.flush()
        except (OSError, ValueError) as exc:
            raise TransportError(f"Failed to write to output stream: {exc}") from exc
