"""Tests for the developer CLI."""

import json
from pathlib import Path
from typing import Any

from typer.testing import CliRunner

from alexa_envelope.cli import app

runner = CliRunner()


def _write(tmp_path: Path, payload: Any, name: str = "payload.json") -> str:
    path = tmp_path / name
    path.write_text(json.dumps(payload))
    return str(path)


def test_parse_request(tmp_path: Path, slot_payload: dict[str, Any]) -> None:
    """Test parsing a request prints its summary and slots."""
    result = runner.invoke(app, ["parse", _write(tmp_path, slot_payload)])

    assert result.exit_code == 0
    assert "IntentRequest" in result.output
    assert "object.genre" in result.output
    assert "alternative rock" in result.output


def test_parse_response_with_echo(tmp_path: Path) -> None:
    """Test parsing a response and echoing it back."""
    raw = {"version": "1.0", "response": {"shouldEndSession": False}}

    result = runner.invoke(app, ["parse", _write(tmp_path, raw), "--response", "--echo"])

    assert result.exit_code == 0
    assert "shouldEndSession" in result.output
    assert "absent" not in result.output


def test_parse_invalid_request(tmp_path: Path, intent_payload: dict[str, Any]) -> None:
    """Test an invalid request reports the failing path and exits non-zero."""
    del intent_payload["request"]["intent"]["name"]

    result = runner.invoke(app, ["parse", _write(tmp_path, intent_payload)])

    assert result.exit_code == 1
    assert "$.request.intent.name" in result.output


def test_parse_missing_file(tmp_path: Path) -> None:
    """Test a missing input file exits non-zero."""
    result = runner.invoke(app, ["parse", str(tmp_path / "nope.json")])

    assert result.exit_code == 1
    assert "File not found" in result.output


def test_fields_lists_structures() -> None:
    """Test the naming table overview."""
    result = runner.invoke(app, ["fields"])

    assert result.exit_code == 0
    assert "RequestEnvelope" in result.output
    assert "OpaqueDirective" in result.output


def test_fields_for_one_structure() -> None:
    """Test showing one structure's wire names."""
    result = runner.invoke(app, ["fields", "Stream"])

    assert result.exit_code == 0
    assert "offsetInMilliseconds" in result.output
    assert "expected_previous_token" in result.output


def test_fields_unknown_structure() -> None:
    """Test an unknown structure name exits non-zero."""
    result = runner.invoke(app, ["fields", "Nope"])

    assert result.exit_code == 1
    assert "Unknown structure" in result.output


def test_draft_as_json(tmp_path: Path) -> None:
    """Test drafting table entries from an example document."""
    example = {"deviceId": "d", "supportedInterfaces": {"AudioPlayer": {}}}

    result = runner.invoke(app, ["draft", _write(tmp_path, example), "--name", "Device", "--json"])

    assert result.exit_code == 0
    assert json.loads(result.output) == {
        "Device": {"deviceId": "device_id", "supportedInterfaces": "supported_interfaces"},
        "SupportedInterfaces": {"AudioPlayer": "audio_player"},
        "AudioPlayer": {},
    }


def test_draft_rejects_non_object(tmp_path: Path) -> None:
    """Test drafting from a JSON array fails."""
    result = runner.invoke(app, ["draft", _write(tmp_path, [1, 2])])

    assert result.exit_code == 1
    assert "must be a JSON object" in result.output
