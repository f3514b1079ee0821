"""StdioSession — the request/response loop over line-delimited streams.

Reads one newline-delimited record at a time, decodes it, dispatches it and
writes the response as one newline-terminated record before reading the next.
Undecodable records are dropped without a response; the loop only stops at
end of input or on a stream-level failure (oversized record, I/O error).
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, BinaryIO

from twosum_mcp.config import DEFAULT_MAX_RECORD_SIZE
from twosum_mcp.protocol.codec import decode_request, encode_response
from twosum_mcp.protocol.errors import DecodeError, RecordTooLargeError

if TYPE_CHECKING:
    from twosum_mcp.protocol.dispatcher import MethodDispatcher

logger = logging.getLogger(__name__)


class StdioSession:
    """Synchronous, single-threaded session over a pair of byte streams.

    Usage::

        session = StdioSession(dispatcher)           # defaults to stdin/stdout
        session.run()
    """

    def __init__(
        self,
        dispatcher: MethodDispatcher,
        *,
        reader: BinaryIO | None = None,
        writer: BinaryIO | None = None,
        max_record_size: int = DEFAULT_MAX_RECORD_SIZE,
    ) -> None:
        if max_record_size <= 0:
            msg = "max_record_size must be positive"
            raise ValueError(msg)
        self._dispatcher = dispatcher
        self._reader = reader if reader is not None else sys.stdin.buffer
        self._writer = writer if writer is not None else sys.stdout.buffer
        self._max_record_size = max_record_size

    def run(self) -> int:
        """Serve until end of input; return the number of responses written.

        Raises
        ------
        RecordTooLargeError
            If a record exceeds ``max_record_size``.
        OSError
            If reading or writing fails.
        """
        written = 0
        while True:
            record = self.read_record()
            if record is None:
                break
            if self.process(record):
                written += 1
        logger.info("Input closed after %d response(s)", written)
        return written

    def process(self, record: bytes) -> bool:
        """Handle one record; return whether a response was written."""
        try:
            request = decode_request(record)
        except DecodeError as exc:
            logger.debug("Skipping record: %s", exc)
            return False

        response = self._dispatcher.handle(request)
        self._writer.write(encode_response(response) + b"\n")
        self._writer.flush()
        return True

    def read_record(self) -> bytes | None:
        """Read the next record without its line terminator; ``None`` at EOF."""
        # Room for the body plus a two-byte \r\n terminator.
        line = self._reader.readline(self._max_record_size + 2)
        if not line:
            return None
        if line.endswith(b"\n"):
            line = line[:-1]
        if line.endswith(b"\r"):
            line = line[:-1]
        if len(line) > self._max_record_size:
            raise RecordTooLargeError(self._max_record_size)
        return line
