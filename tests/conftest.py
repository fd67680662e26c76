"""Shared request payloads, modelled on live Alexa traffic with identifiers redacted."""

from typing import Any

import pytest


@pytest.fixture
def launch_payload() -> dict[str, Any]:
    return {
        "version": "1.0",
        "request": {
            "type": "LaunchRequest",
            "requestId": "r1",
            "timestamp": "2025-01-01T00:00:00Z",
            "locale": "en-US",
        },
    }


@pytest.fixture
def intent_payload() -> dict[str, Any]:
    return {
        "version": "1.0",
        "session": {
            "new": True,
            "sessionId": "amzn1.echo-api.session.abc123",
            "application": {"applicationId": "amzn1.ask.skill.myappid"},
            "attributes": {
                "lastSpeech": "Jupiter has the shortest day of all the planets",
                "turns": 3,
                "history": [{"intent": "hello", "score": 0.75}],
            },
            "user": {"userId": "amzn1.ask.account.theuserid"},
        },
        "context": {
            "System": {
                "application": {"applicationId": "amzn1.ask.skill.myappid"},
                "user": {"userId": "amzn1.ask.account.theuserid"},
                "device": {
                    "deviceId": "amzn1.ask.device.superfakedevice",
                    "supportedInterfaces": {},
                },
                "apiEndpoint": "https://api.amazonalexa.com",
                "apiAccessToken": "53kr14t.k3y.d4t4-otherstuff",
            },
            "Viewport": {
                "experiences": [
                    {
                        "arcMinuteWidth": 246,
                        "arcMinuteHeight": 144,
                        "canRotate": False,
                        "canResize": False,
                    }
                ],
                "shape": "RECTANGLE",
                "pixelWidth": 1024,
                "pixelHeight": 600,
                "dpi": 160,
                "currentPixelWidth": 1024,
                "currentPixelHeight": 600,
                "touch": ["SINGLE"],
            },
        },
        "request": {
            "type": "IntentRequest",
            "requestId": "amzn1.echo-api.request.b8b49fde-4370-423f-bbb0-dc7305b788a0",
            "timestamp": "2018-12-03T00:33:58Z",
            "locale": "en-US",
            "intent": {"name": "hello", "confirmationStatus": "NONE"},
        },
    }


@pytest.fixture
def slot_payload() -> dict[str, Any]:
    return {
        "version": "1.0",
        "session": {
            "new": False,
            "sessionId": "amzn1.echo-api.session.SESSION",
            "application": {"applicationId": "amzn1.ask.skill.APP"},
            "attributes": {},
            "user": {"userId": "amzn1.ask.account.USER"},
        },
        "context": {
            "Display": {},
            "AudioPlayer": {"playerActivity": "IDLE"},
            "Extensions": {"available": {"aplext:backstack:10": {}}},
            "System": {
                "application": {"applicationId": "amzn1.ask.skill.APP"},
                "user": {"userId": "amzn1.ask.account.USER"},
                "device": {
                    "deviceId": "amzn1.ask.device.DEVICE",
                    "supportedInterfaces": {
                        "AudioPlayer": {},
                        "Display": {"templateVersion": "1.0", "markupVersion": "1.0"},
                    },
                },
                "apiEndpoint": "https://api.amazonalexa.com",
                "apiAccessToken": "SECRET",
            },
        },
        "request": {
            "type": "IntentRequest",
            "requestId": "amzn1.echo-api.request.REQUEST",
            "locale": "en-GB",
            "timestamp": "2025-03-17T23:27:29Z",
            "dialogState": "IN_PROGRESS",
            "intent": {
                "name": "AMAZON.PlaybackAction<object@MusicCreativeWork>",
                "confirmationStatus": "NONE",
                "slots": {
                    "object.era": {"name": "object.era", "confirmationStatus": "NONE"},
                    "object.name": {
                        "name": "object.name",
                        "value": "in rainbows",
                        "confirmationStatus": "NONE",
                        "source": "USER",
                        "slotValue": {"type": "Simple", "value": "in rainbows"},
                    },
                    "object.genre": {
                        "name": "object.genre",
                        "value": "alt rock",
                        "confirmationStatus": "NONE",
                        "resolutions": {
                            "resolutionsPerAuthority": [
                                {
                                    "authority": "amzn1.er-authority.echo-sdk.APP.DYNAMIC",
                                    "status": {"code": "ER_SUCCESS_NO_MATCH"},
                                },
                                {
                                    "authority": "amzn1.er-authority.echo-sdk.APP.GENRE",
                                    "status": {"code": "ER_SUCCESS_MATCH"},
                                    "values": [
                                        {"value": {"name": "alternative rock", "id": "ALT_ROCK"}},
                                        {"value": {"name": "rock", "id": "ROCK"}},
                                    ],
                                },
                            ]
                        },
                    },
                },
            },
        },
    }


@pytest.fixture
def playback_payload() -> dict[str, Any]:
    """AudioPlayer events arrive without a session."""
    return {
        "version": "1.0",
        "context": {
            "System": {
                "application": {"applicationId": "amzn1.ask.skill.APP"},
                "user": {"userId": "amzn1.ask.account.USER"},
                "device": {
                    "deviceId": "amzn1.ask.device.DEVICE",
                    "supportedInterfaces": {"AudioPlayer": {}},
                },
                "apiEndpoint": "https://api.amazonalexa.com",
            },
            "AudioPlayer": {
                "token": "track-1",
                "offsetInMilliseconds": -1,
                "playerActivity": "PLAYING",
            },
        },
        "request": {
            "type": "AudioPlayer.PlaybackNearlyFinished",
            "requestId": "amzn1.echo-api.request.PLAYBACK",
            "timestamp": "2025-03-17T23:30:00Z",
            "locale": "en-US",
            "token": "track-1",
            "offsetInMilliseconds": 182000,
        },
    }
