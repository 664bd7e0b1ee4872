"""Value types for Polly operations, options and responses."""

from polly_ops.models.operation import Action, HttpMethod, OperationDescriptor, OperationResponse
from polly_ops.models.options import (
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_VOICE_ID,
    WIRE_KEYS,
    SynthesisOptions,
    SynthesisTaskOptions,
    format_option,
)
from polly_ops.models.resources import SynthesisTask, SynthesisTaskStatus, Voice, VoiceList

__all__ = [
    "Action",
    "HttpMethod",
    "OperationDescriptor",
    "OperationResponse",
    "DEFAULT_OUTPUT_FORMAT",
    "DEFAULT_VOICE_ID",
    "WIRE_KEYS",
    "SynthesisOptions",
    "SynthesisTaskOptions",
    "format_option",
    "SynthesisTask",
    "SynthesisTaskStatus",
    "Voice",
    "VoiceList",
]
