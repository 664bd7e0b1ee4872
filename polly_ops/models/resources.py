"""Typed views over decoded Polly response bodies.

The parser returns plain mappings; these models give typed access to
them when a caller wants it:

    >>> payload = parse(response, Action.DESCRIBE_VOICES)
    >>> voices = VoiceList.model_validate(payload).voices
"""

from enum import Enum

from pydantic import BaseModel, Field


_RESOURCE_CONFIG = {
    "extra": "ignore",
    "populate_by_name": True,
}


class Voice(BaseModel):
    """A voice returned by DescribeVoices."""

    id: str = Field(..., alias="Id")
    name: str | None = Field(default=None, alias="Name")
    gender: str | None = Field(default=None, alias="Gender")
    language_code: str | None = Field(default=None, alias="LanguageCode")
    language_name: str | None = Field(default=None, alias="LanguageName")
    additional_language_codes: list[str] = Field(
        default_factory=list, alias="AdditionalLanguageCodes"
    )
    supported_engines: list[str] = Field(default_factory=list, alias="SupportedEngines")

    model_config = _RESOURCE_CONFIG


class VoiceList(BaseModel):
    """Decoded DescribeVoices response."""

    voices: list[Voice] = Field(default_factory=list, alias="Voices")
    next_token: str | None = Field(default=None, alias="NextToken")

    model_config = _RESOURCE_CONFIG

    def by_language(self, language_code: str) -> list[Voice]:
        """Voices that speak language_code, primarily or additionally."""
        return [
            voice
            for voice in self.voices
            if voice.language_code == language_code
            or language_code in voice.additional_language_codes
        ]


class SynthesisTaskStatus(str, Enum):
    """Lifecycle states of an asynchronous synthesis task."""

    SCHEDULED = "scheduled"
    IN_PROGRESS = "inProgress"
    COMPLETED = "completed"
    FAILED = "failed"


class SynthesisTask(BaseModel):
    """SynthesisTask object from StartSpeechSynthesisTask/GetSpeechSynthesisTask."""

    task_id: str = Field(..., alias="TaskId")
    task_status: SynthesisTaskStatus = Field(..., alias="TaskStatus")
    task_status_reason: str | None = Field(default=None, alias="TaskStatusReason")
    output_uri: str | None = Field(default=None, alias="OutputUri")
    creation_time: float | None = Field(default=None, alias="CreationTime")
    request_characters: int | None = Field(default=None, alias="RequestCharacters")
    sns_topic_arn: str | None = Field(default=None, alias="SnsTopicArn")
    lexicon_names: list[str] = Field(default_factory=list, alias="LexiconNames")
    output_format: str | None = Field(default=None, alias="OutputFormat")
    sample_rate: str | None = Field(default=None, alias="SampleRate")
    text_type: str | None = Field(default=None, alias="TextType")
    voice_id: str | None = Field(default=None, alias="VoiceId")
    language_code: str | None = Field(default=None, alias="LanguageCode")
    engine: str | None = Field(default=None, alias="Engine")

    model_config = _RESOURCE_CONFIG

    @classmethod
    def from_response(cls, payload: dict) -> "SynthesisTask":
        """
        Build from a decoded task response.

        Both task actions wrap the object as {"SynthesisTask": {...}};
        an already unwrapped mapping is accepted too.
        """
        return cls.model_validate(payload.get("SynthesisTask", payload))

    @property
    def is_finished(self) -> bool:
        """True once the task has completed or failed."""
        return self.task_status in (SynthesisTaskStatus.COMPLETED, SynthesisTaskStatus.FAILED)
