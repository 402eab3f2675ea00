"""Testes do decodificador de envelope {ok, error, warnings}."""

from __future__ import annotations

import json

import pytest
from pydantic import BaseModel

from api.connectors.slack.envelope import (
    SlackEnvelope,
    decode_envelope,
    empty_response,
    parse_envelope,
)
from api.connectors.slack.errors import SlackApiError, SlackDecodeError
from api.connectors.slack.models import SlackApiFilesInfoResponse


class _Counter(BaseModel):
    total: int | None = None


def test_parse_envelope_reads_common_fields() -> None:
    envelope = parse_envelope('{"ok": false, "error": "ratelimited", "warnings": ["w1"], "x": 1}')

    assert envelope == SlackEnvelope(ok=False, error="ratelimited", warnings=["w1"])


def test_parse_envelope_defaults() -> None:
    envelope = parse_envelope("{}")

    assert envelope.ok is False
    assert envelope.error is None
    assert envelope.warnings is None


@pytest.mark.parametrize("body", ["{not json", "[1, 2]", '"texto"'])
def test_parse_envelope_rejects_non_objects(body: str) -> None:
    with pytest.raises(SlackDecodeError, match="invalid_envelope") as exc_info:
        parse_envelope(body)

    assert exc_info.value.http_response_body == body


def test_decode_envelope_success_files_info() -> None:
    body = json.dumps(
        {
            "ok": True,
            "file": {"id": "F123", "name": "report.pdf", "size": 2048},
            "comments": [],
            "response_metadata": {"next_cursor": ""},
        }
    )

    result = decode_envelope(body, SlackApiFilesInfoResponse)

    assert result.file is not None
    assert result.file.id == "F123"
    assert result.file.name == "report.pdf"
    assert result.items == []
    assert not result.next_cursor


def test_decode_envelope_error_has_priority() -> None:
    body = '{"ok": false, "error": "file_not_found"}'

    with pytest.raises(SlackApiError) as exc_info:
        decode_envelope(body, SlackApiFilesInfoResponse)

    assert exc_info.value.code == "file_not_found"
    assert exc_info.value.warnings == []
    assert str(exc_info.value) == "slack_api_error: file_not_found"


def test_decode_envelope_ok_false_without_error_decodes() -> None:
    result = decode_envelope('{"ok": false, "total": 3}', _Counter)

    assert result.total == 3


def test_decode_envelope_type_mismatch_raises_decode_error() -> None:
    with pytest.raises(SlackDecodeError, match="invalid_response_payload"):
        decode_envelope('{"ok": true, "total": "muitos"}', _Counter)


def test_empty_response_is_zero_value() -> None:
    assert empty_response(SlackApiFilesInfoResponse) == SlackApiFilesInfoResponse()
    assert empty_response(_Counter).total is None
