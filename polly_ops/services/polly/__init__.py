"""Amazon Polly operation builders and response parser.

Example:
    >>> from polly_ops.services.polly import synthesize_speech
    >>>
    >>> operation = synthesize_speech("hello world", sample_rate="16000")
    >>> response = executor.execute(operation)
    >>> audio = operation.parser(response, operation.action).body
"""

from polly_ops.services.polly.operations import (
    SERVICE,
    describe_voices,
    get_speech_synthesis_task,
    start_speech_synthesis_task,
    synthesize_speech,
)
from polly_ops.services.polly.parsers import parse
from polly_ops.services.polly.transport import (
    OperationExecutor,
    build_http_request,
    response_from_httpx,
)

__all__ = [
    "SERVICE",
    "describe_voices",
    "synthesize_speech",
    "start_speech_synthesis_task",
    "get_speech_synthesis_task",
    "parse",
    "OperationExecutor",
    "build_http_request",
    "response_from_httpx",
]
