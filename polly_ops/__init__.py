"""Request builders for the Amazon Polly text-to-speech API."""

__version__ = "0.2.0"

from polly_ops.models import (
    Action,
    HttpMethod,
    OperationDescriptor,
    OperationResponse,
    SynthesisOptions,
    SynthesisTaskOptions,
)
from polly_ops.services.polly import (
    SERVICE,
    describe_voices,
    get_speech_synthesis_task,
    parse,
    start_speech_synthesis_task,
    synthesize_speech,
)

__all__ = [
    "__version__",
    "Action",
    "HttpMethod",
    "OperationDescriptor",
    "OperationResponse",
    "SynthesisOptions",
    "SynthesisTaskOptions",
    "SERVICE",
    "describe_voices",
    "synthesize_speech",
    "start_speech_synthesis_task",
    "get_speech_synthesis_task",
    "parse",
]
