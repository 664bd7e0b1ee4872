"""Operation builders for the Polly text-to-speech API.

Each public function returns a fresh OperationDescriptor describing one
HTTP call. Nothing here performs I/O or validates content; voice IDs,
formats and sample rates are checked by the service itself.

Example:
    >>> operation = synthesize_speech("hello world", voice_id="Takumi")
    >>> operation.body_dict()
    {'Text': 'hello world', 'OutputFormat': 'mp3', 'VoiceId': 'Takumi'}
"""

import logging
from collections.abc import Mapping
from typing import Any

from polly_ops.models.operation import Action, HttpMethod, OperationDescriptor
from polly_ops.models.options import SynthesisOptions, SynthesisTaskOptions
from polly_ops.services.polly.parsers import parse

logger = logging.getLogger(__name__)


SERVICE = "polly"

VOICES_PATH = "/v1/voices"
SPEECH_PATH = "/v1/speech"
SYNTHESIS_TASKS_PATH = "/v1/synthesisTasks"


def describe_voices() -> OperationDescriptor:
    """
    List the voices available for speech synthesis.

    https://docs.aws.amazon.com/polly/latest/dg/API_DescribeVoices.html
    """
    return _request(HttpMethod.GET, Action.DESCRIBE_VOICES, path=VOICES_PATH)


def synthesize_speech(
    text: str,
    options: SynthesisOptions | Mapping[str, Any] | None = None,
    **kwargs: Any,
) -> OperationDescriptor:
    """
    Synthesize speech from text; the response body is the audio stream.

    https://docs.aws.amazon.com/polly/latest/dg/API_SynthesizeSpeech.html

    Args:
        text: Text or SSML to synthesize, passed through as-is
        options: SynthesisOptions or a mapping of option names
        **kwargs: Option overrides (output_format, voice_id, engine,
                  language_code, lexicon_names, sample_rate, text_type)

    Returns:
        OperationDescriptor for POST /v1/speech
    """
    resolved = _resolve_options(SynthesisOptions, options, kwargs)

    required_params = {
        "Text": text,
        "OutputFormat": resolved.output_format,
        "VoiceId": resolved.voice_id,
    }

    body = {**resolved.wire_params(), **required_params}

    return _request(HttpMethod.POST, Action.SYNTHESIZE_SPEECH, path=SPEECH_PATH, body=body)


def start_speech_synthesis_task(
    text: str,
    output_s3_bucket_name: str,
    options: SynthesisTaskOptions | Mapping[str, Any] | None = None,
    **kwargs: Any,
) -> OperationDescriptor:
    """
    Start an asynchronous synthesis task writing its output to S3.

    https://docs.aws.amazon.com/polly/latest/dg/API_StartSpeechSynthesisTask.html

    Args:
        text: Text or SSML to synthesize
        output_s3_bucket_name: Bucket receiving the synthesized audio
        options: SynthesisTaskOptions or a mapping of option names
        **kwargs: Option overrides, as for synthesize_speech plus
                  output_s3_key_prefix and sns_topic_arn

    Returns:
        OperationDescriptor for POST /v1/synthesisTasks
    """
    resolved = _resolve_options(SynthesisTaskOptions, options, kwargs)

    required_params = {
        "Text": text,
        "OutputFormat": resolved.output_format,
        "VoiceId": resolved.voice_id,
        "OutputS3BucketName": output_s3_bucket_name,
    }

    body = {**resolved.wire_params(), **required_params}

    return _request(
        HttpMethod.POST,
        Action.START_SPEECH_SYNTHESIS_TASK,
        path=SYNTHESIS_TASKS_PATH,
        body=body,
    )


def get_speech_synthesis_task(task_id: str) -> OperationDescriptor:
    """
    Retrieve a synthesis task, including its status and output URI.

    https://docs.aws.amazon.com/polly/latest/dg/API_GetSpeechSynthesisTask.html
    """
    return _request(
        HttpMethod.GET,
        Action.GET_SPEECH_SYNTHESIS_TASK,
        path=SYNTHESIS_TASKS_PATH + "/" + task_id,
    )


def _resolve_options(
    options_cls: type[SynthesisOptions],
    options: SynthesisOptions | Mapping[str, Any] | None,
    overrides: dict[str, Any],
) -> SynthesisOptions:
    """Merge an options record or mapping with keyword overrides."""
    if options is None:
        supplied: dict[str, Any] = {}
    elif isinstance(options, SynthesisOptions):
        supplied = {name: value for name, value in options if name in options.model_fields_set}
        supplied.update(options.model_extra or {})
    else:
        supplied = dict(options)

    supplied.update(overrides)
    # None means absent, for required options too
    supplied = {name: value for name, value in supplied.items() if value is not None}
    return options_cls(**supplied)


def _request(
    method: HttpMethod,
    action: Action,
    path: str,
    body: dict[str, Any] | None = None,
) -> OperationDescriptor:
    operation = OperationDescriptor(
        method=method,
        action=action,
        path=path,
        body=body or {},
        parser=parse,
        service=SERVICE,
    )
    logger.debug(f"Built {action.value} operation: {method.value} {path}")
    return operation
