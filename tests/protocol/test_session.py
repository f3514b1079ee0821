"""Tests for the StdioSession read/dispatch/write loop."""

from __future__ import annotations

import io
import json
from typing import Any
from unittest.mock import MagicMock

import pytest

from twosum_mcp.protocol.dispatcher import MethodDispatcher
from twosum_mcp.protocol.errors import RecordTooLargeError
from twosum_mcp.protocol.session import StdioSession
from twosum_mcp.tools.registry import default_registry

LIST_REQUEST = b'{"jsonrpc":"2.0","id":1,"method":"tools/list"}'


def _call(request_id: int, nums: list[int], target: int) -> bytes:
    return json.dumps(
        {
            "jsonrpc": "2.0",
            "id": request_id,
            "method": "tools/call",
            "params": {"name": "two_sum", "arguments": {"nums": nums, "target": target}},
        }
    ).encode()


def _session(data: bytes, **kwargs: Any) -> tuple[StdioSession, io.BytesIO]:
    writer = io.BytesIO()
    session = StdioSession(
        MethodDispatcher(default_registry()),
        reader=io.BytesIO(data),
        writer=writer,
        **kwargs,
    )
    return session, writer


def _responses(writer: io.BytesIO) -> list[dict[str, Any]]:
    return [json.loads(line) for line in writer.getvalue().splitlines()]


class TestStdioSession:
    def test_empty_input(self) -> None:
        session, writer = _session(b"")
        assert session.run() == 0
        assert writer.getvalue() == b""

    def test_one_response_per_request(self) -> None:
        session, writer = _session(LIST_REQUEST + b"\n" + _call(2, [3, 3], 6) + b"\n")
        assert session.run() == 2
        responses = _responses(writer)
        assert [r["id"] for r in responses] == [1, 2]
        assert responses[1]["result"]["structuredContent"] == {"indices": [0, 1]}

    def test_responses_are_newline_terminated(self) -> None:
        session, writer = _session(LIST_REQUEST + b"\n" + LIST_REQUEST + b"\n")
        session.run()
        output = writer.getvalue()
        assert output.endswith(b"\n")
        assert output.count(b"\n") == 2

    def test_malformed_record_is_skipped(self) -> None:
        data = b"this is not json\n" + b"{\"broken\": \n" + _call(7, [2, 7, 11, 15], 9) + b"\n"
        session, writer = _session(data)
        assert session.run() == 1
        responses = _responses(writer)
        assert len(responses) == 1
        assert responses[0]["id"] == 7
        assert responses[0]["result"]["structuredContent"] == {"indices": [0, 1]}

    def test_blank_lines_are_skipped(self) -> None:
        session, writer = _session(b"\n\n" + LIST_REQUEST + b"\n\n")
        assert session.run() == 1

    def test_order_preserved(self) -> None:
        data = b"".join(_call(i, [i, 1], i + 1) + b"\n" for i in range(10))
        session, writer = _session(data)
        session.run()
        assert [r["id"] for r in _responses(writer)] == list(range(10))

    def test_final_record_without_newline(self) -> None:
        session, writer = _session(LIST_REQUEST)
        assert session.run() == 1
        assert _responses(writer)[0]["id"] == 1

    def test_crlf_terminators(self) -> None:
        session, writer = _session(LIST_REQUEST + b"\r\n" + LIST_REQUEST + b"\r\n")
        assert session.run() == 2

    def test_unknown_method_gets_error_response(self) -> None:
        session, writer = _session(b'{"jsonrpc":"2.0","id":"x","method":"ping"}\n')
        session.run()
        response = _responses(writer)[0]
        assert response["id"] == "x"
        assert response["error"]["code"] == -32601

    def test_record_at_limit_is_accepted(self) -> None:
        record = LIST_REQUEST + b" " * 10
        session, writer = _session(record + b"\n", max_record_size=len(record))
        assert session.run() == 1

    def test_crlf_record_at_limit_is_accepted(self) -> None:
        session, writer = _session(LIST_REQUEST + b"\r\n", max_record_size=len(LIST_REQUEST))
        assert session.run() == 1
        assert _responses(writer)[0]["id"] == 1

    def test_crlf_record_over_limit_is_fatal(self) -> None:
        session, writer = _session(
            LIST_REQUEST + b" \r\n", max_record_size=len(LIST_REQUEST)
        )
        with pytest.raises(RecordTooLargeError):
            session.run()

    def test_record_over_limit_at_eof_is_fatal(self) -> None:
        session, writer = _session(LIST_REQUEST + b" ", max_record_size=len(LIST_REQUEST))
        with pytest.raises(RecordTooLargeError):
            session.run()

    def test_oversized_record_is_fatal(self) -> None:
        oversized = LIST_REQUEST + b" " * 11
        data = LIST_REQUEST + b"\n" + oversized + b"\n" + LIST_REQUEST + b"\n"
        session, writer = _session(data, max_record_size=len(LIST_REQUEST) + 10)
        with pytest.raises(RecordTooLargeError) as exc_info:
            session.run()
        assert exc_info.value.limit == len(LIST_REQUEST) + 10
        # The record before the oversized one was answered.
        assert len(_responses(writer)) == 1

    def test_invalid_max_record_size(self) -> None:
        with pytest.raises(ValueError, match="positive"):
            StdioSession(MagicMock(), reader=io.BytesIO(), writer=io.BytesIO(), max_record_size=0)

    def test_writes_before_next_read(self) -> None:
        events: list[str] = []

        class _Reader(io.BytesIO):
            def readline(self, size: int | None = -1) -> bytes:
                events.append("read")
                return super().readline(size)

        class _Writer(io.BytesIO):
            def flush(self) -> None:
                events.append("flush")

        session = StdioSession(
            MethodDispatcher(default_registry()),
            reader=_Reader(LIST_REQUEST + b"\n" + LIST_REQUEST + b"\n"),
            writer=_Writer(),
        )
        session.run()
        assert events == ["read", "flush", "read", "flush", "read"]

    def test_process_reports_skips(self) -> None:
        session, writer = _session(b"")
        assert session.process(b"garbage") is False
        assert session.process(LIST_REQUEST) is True
        assert len(_responses(writer)) == 1
