"""Shared pytest fixtures for all test types."""

import json

import pytest

from polly_ops.lib.config import reset_all_configs
from polly_ops.models import OperationResponse


_CONFIG_ENV_VARS = (
    "AWS_REGION",
    "POLLY_ENDPOINT_URL",
    "POLLY_OUTPUT_FORMAT",
    "POLLY_VOICE_ID",
    "POLLY_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Isolate every test from ambient configuration."""
    for name in _CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_all_configs()
    yield
    reset_all_configs()


@pytest.fixture
def voices_payload() -> dict:
    """DescribeVoices body as returned by the service."""
    return {
        "NextToken": None,
        "Voices": [
            {
                "Gender": "Female",
                "Id": "Joanna",
                "LanguageCode": "en-US",
                "LanguageName": "US English",
                "Name": "Joanna",
                "SupportedEngines": ["neural", "standard"],
            },
            {
                "Gender": "Male",
                "Id": "Takumi",
                "LanguageCode": "ja-JP",
                "LanguageName": "Japanese",
                "Name": "Takumi",
                "SupportedEngines": ["neural", "standard"],
            },
            {
                "Gender": "Female",
                "Id": "Aditi",
                "LanguageCode": "en-IN",
                "LanguageName": "Indian English",
                "Name": "Aditi",
                "AdditionalLanguageCodes": ["hi-IN"],
                "SupportedEngines": ["standard"],
            },
        ],
    }


@pytest.fixture
def task_payload() -> dict:
    """StartSpeechSynthesisTask / GetSpeechSynthesisTask body."""
    return {
        "SynthesisTask": {
            "CreationTime": 1.647342818404e9,
            "Engine": "standard",
            "OutputFormat": "mp3",
            "OutputUri": "https://s3.us-east-1.amazonaws.com/polly-bucket/8c730aaa.mp3",
            "RequestCharacters": 11,
            "TaskId": "8c730aaa-530e-4b46-bb34-b1827d1a7eac",
            "TaskStatus": "scheduled",
            "TextType": "text",
            "VoiceId": "Joanna",
        }
    }


@pytest.fixture
def voices_response(voices_payload) -> OperationResponse:
    """Executor response carrying a DescribeVoices JSON body."""
    return OperationResponse(
        body=json.dumps(voices_payload).encode("utf-8"),
        headers=[("Content-Type", "application/json")],
        status_code=200,
    )


@pytest.fixture
def audio_response() -> OperationResponse:
    """Executor response carrying an MP3 payload that is not valid UTF-8."""
    return OperationResponse(
        body=b"ID3\x04\x00\x00\x00\x00\x00#TSSE\x00\x00\x00\x0f\xff\xf3X\xc4\x00",
        headers=[
            ("x-amzn-RequestCharacters", "5"),
            ("Content-Type", "audio/mpeg"),
        ],
        status_code=200,
    )
