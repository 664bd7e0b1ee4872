"""Typed option records for the synthesis operations.

Option names are lower_snake on the Python side and PascalCase on the wire.
The documented names go through a fixed lookup table; anything else is
forwarded with a generic PascalCase conversion.
"""

import copy
import logging
from typing import Any

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)


DEFAULT_OUTPUT_FORMAT = "mp3"
DEFAULT_VOICE_ID = "Joanna"

# Fixed option name -> wire key table
WIRE_KEYS: dict[str, str] = {
    "engine": "Engine",
    "language_code": "LanguageCode",
    "lexicon_names": "LexiconNames",
    "output_s3_key_prefix": "OutputS3KeyPrefix",
    "sample_rate": "SampleRate",
    "sns_topic_arn": "SnsTopicArn",
    "text_type": "TextType",
}

# Options that become required body keys rather than optional parameters
_REQUIRED_OPTIONS = frozenset({"output_format", "voice_id"})


def format_option(name: str) -> str:
    """
    Map an option name to its wire key.

    Args:
        name: lower_snake option name, e.g. "sample_rate"

    Returns:
        str: The documented wire key, or a PascalCase rendering of
             name when it is not in WIRE_KEYS.
    """
    key = WIRE_KEYS.get(name)
    if key is not None:
        return key

    key = "".join(part[:1].upper() + part[1:] for part in name.split("_") if part)
    logger.debug(f"Forwarding unrecognized option {name!r} as {key!r}")
    return key


class SynthesisOptions(BaseModel):
    """
    Options accepted by synthesize_speech.

    Attributes:
        output_format: mp3, ogg_vorbis, json or pcm (default mp3)
        voice_id: Voice to synthesize with (default Joanna)
        engine: standard, neural, long-form or generative
        language_code: Only needed for bilingual voices such as Aditi
        lexicon_names: Pronunciation lexicons to apply
        sample_rate: Audio frequency in Hz, as a string ("8000", "16000", ...)
        text_type: text or ssml
    """

    output_format: str = Field(default=DEFAULT_OUTPUT_FORMAT)
    voice_id: str = Field(default=DEFAULT_VOICE_ID)
    engine: str | None = None
    language_code: str | None = None
    lexicon_names: list[str] | None = None
    sample_rate: str | None = None
    text_type: str | None = None

    model_config = {
        "extra": "allow",
        "frozen": True,
    }

    @field_validator("sample_rate", mode="before")
    @classmethod
    def coerce_sample_rate(cls, value: Any) -> Any:
        """The service expects the rate as a string."""
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    def wire_params(self) -> dict[str, Any]:
        """
        Optional parameters the caller supplied, keyed by wire name.

        Fields left unset or set to None are omitted. output_format and
        voice_id are required body keys and never appear here. Values are
        deep copies, so later changes to the caller's objects do not leak in.
        """
        supplied = set(self.model_fields_set) | set(self.model_extra or {})
        return {
            format_option(name): copy.deepcopy(value)
            for name, value in self
            if name in supplied and name not in _REQUIRED_OPTIONS and value is not None
        }


class SynthesisTaskOptions(SynthesisOptions):
    """
    Options accepted by start_speech_synthesis_task.

    Attributes:
        output_s3_key_prefix: S3 key prefix for the output file
        sns_topic_arn: SNS topic notified about task status changes
    """

    output_s3_key_prefix: str | None = None
    sns_topic_arn: str | None = None
