"""Tests for unknown-field preservation across parse and serialize."""

import copy
import json
from typing import Any

import pytest

from alexa_envelope import parse_request, parse_response, serialize_request, serialize_response
from alexa_envelope.models import AudioPlayerState, Device
from alexa_envelope.models.types import InterfaceName


@pytest.mark.parametrize(
    "fixture_name",
    ["launch_payload", "intent_payload", "slot_payload", "playback_payload"],
)
def test_request_round_trip_is_lossless(fixture_name: str, request: pytest.FixtureRequest) -> None:
    """Test captured requests serialize back to the JSON they were parsed from."""
    payload = request.getfixturevalue(fixture_name)

    envelope = parse_request(json.dumps(payload))

    assert json.loads(serialize_request(envelope)) == payload


def test_unknown_context_blocks_are_kept(intent_payload: dict[str, Any]) -> None:
    """Test unmodelled interface blocks are available and unchanged."""
    envelope = parse_request(intent_payload)

    viewport = envelope.context.model_extra["Viewport"]
    assert viewport == intent_payload["context"]["Viewport"]
    assert viewport["experiences"][0]["canRotate"] is False
    assert isinstance(viewport["dpi"], int)


def test_interfaces_merge_known_and_unknown_blocks(slot_payload: dict[str, Any]) -> None:
    """Test Context.interfaces lists every interface-state block."""
    context = parse_request(slot_payload).context

    interfaces = context.interfaces()

    assert set(interfaces) == {"AudioPlayer", "Display", "Extensions"}
    assert isinstance(interfaces["AudioPlayer"], AudioPlayerState)
    assert interfaces["Extensions"] == {"available": {"aplext:backstack:10": {}}}


def test_device_supported_interfaces(slot_payload: dict[str, Any]) -> None:
    """Test supportedInterfaces lookups by enum and by raw name."""
    device = parse_request(slot_payload).context.system.device

    assert device.supports(InterfaceName.AUDIO_PLAYER)
    assert device.supports("Display")
    assert not device.supports(InterfaceName.APL)
    assert device.supported_interfaces["Display"] == {"templateVersion": "1.0", "markupVersion": "1.0"}


def test_device_without_interfaces() -> None:
    """Test a device that declares nothing supports nothing."""
    assert not Device(device_id="d").supports(InterfaceName.AUDIO_PLAYER)


def test_slot_extras_are_kept(slot_payload: dict[str, Any]) -> None:
    """Test newer slot fields survive without a model attribute."""
    slot = parse_request(slot_payload).intent.slot("object.name")

    assert slot.model_extra == {"source": "USER", "slotValue": {"type": "Simple", "value": "in rainbows"}}


def test_null_unknown_fields_are_written_back(launch_payload: dict[str, Any]) -> None:
    """Test an unknown field holding null is not dropped."""
    payload = copy.deepcopy(launch_payload)
    payload["request"]["shouldLinkResultBeReturned"] = None
    payload["experimental"] = {"flag": None}

    wire = json.loads(serialize_request(parse_request(payload)))

    assert wire["request"]["shouldLinkResultBeReturned"] is None
    assert wire["experimental"] == {"flag": None}


def test_number_types_are_preserved(intent_payload: dict[str, Any]) -> None:
    """Test integers stay integers and floats stay floats in arbitrary JSON."""
    envelope = parse_request(intent_payload)

    wire = json.loads(serialize_request(envelope))

    assert isinstance(wire["session"]["attributes"]["turns"], int)
    assert wire["session"]["attributes"]["history"][0]["score"] == 0.75
    assert envelope.attribute("turns") == 3
    assert envelope.attribute("missing", "fallback") == "fallback"


def test_closed_structures_drop_unknown_fields(intent_payload: dict[str, Any]) -> None:
    """Test a structure without an extension map ignores unknown keys."""
    payload = copy.deepcopy(intent_payload)
    payload["session"]["application"]["region"] = "eu-west-1"

    envelope = parse_request(payload)

    assert envelope.session.application.application_id == "amzn1.ask.skill.myappid"
    assert "region" not in json.loads(serialize_request(envelope))["session"]["application"]


def test_unknown_enum_values_survive(launch_payload: dict[str, Any]) -> None:
    """Test enumeration values added by the platform later are kept as strings."""
    payload = copy.deepcopy(launch_payload)
    payload["request"]["locale"] = "pl-PL"
    payload["context"] = {
        "System": {"application": {"applicationId": "a"}},
        "AudioPlayer": {"playerActivity": "WARMING_UP"},
    }

    envelope = parse_request(payload)

    assert envelope.locale == "pl-PL"
    assert envelope.context.audio_player.player_activity == "WARMING_UP"
    assert json.loads(serialize_request(envelope)) == payload


def test_response_extras_round_trip() -> None:
    """Test unknown response body fields are echoed back."""
    raw = {
        "version": "1.0",
        "sessionAttributes": {"step": 2, "ratio": 0.5, "tags": None},
        "response": {
            "outputSpeech": {"type": "PlainText", "text": "ok"},
            "canFulfillIntent": {"canFulfill": "YES", "slots": {}},
            "shouldEndSession": True,
        },
    }

    response = parse_response(raw)

    assert response.response.model_extra == {"canFulfillIntent": {"canFulfill": "YES", "slots": {}}}
    assert json.loads(serialize_response(response)) == raw


def test_parsed_response_adds_no_fields() -> None:
    """Test fields missing from a response stay missing after a round trip."""
    raw = {
        "version": "1.0",
        "response": {
            "outputSpeech": {"text": "hi"},
            "reprompt": {"outputSpeech": {"ssml": "<speak>still there?</speak>"}},
            "directives": [
                {
                    "type": "AudioPlayer.Play",
                    "playBehavior": "ENQUEUE",
                    "audioItem": {"stream": {"url": "https://a", "token": "t"}},
                }
            ],
        },
    }

    response = parse_response(json.dumps(raw))

    assert response.response.output_speech.type is None
    assert response.response.directives[0].audio_item.stream.offset_in_milliseconds is None
    assert json.loads(serialize_response(response)) == raw
