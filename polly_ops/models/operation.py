"""Operation descriptor and response value types.

An OperationDescriptor describes one Polly HTTP call without executing it.
The executor that runs it hands back an OperationResponse, which the
descriptor's parser may then post-process.
"""

import copy
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable

from pydantic import BaseModel, Field, field_validator, model_validator


class Action(str, Enum):
    """Polly API actions, used as the parser dispatch discriminant."""

    DESCRIBE_VOICES = "describe_voices"
    SYNTHESIZE_SPEECH = "synthesize_speech"
    START_SPEECH_SYNTHESIS_TASK = "start_speech_synthesis_task"
    GET_SPEECH_SYNTHESIS_TASK = "get_speech_synthesis_task"


class HttpMethod(str, Enum):
    """HTTP methods used by the Polly REST API."""

    GET = "GET"
    POST = "POST"


class OperationDescriptor(BaseModel):
    """
    Immutable description of a single Polly HTTP operation.

    Built fresh by each builder call and consumed by an external executor.
    The parser is invoked by that executor, never by this package.
    """

    method: HttpMethod = Field(..., description="HTTP method")
    action: Action = Field(..., description="API action tag")
    path: str = Field(..., description="URL path, e.g. /v1/speech")
    body: Mapping[str, Any] = Field(default_factory=dict, description="Request parameters")
    parser: Callable[[Any, Any], Any] | None = Field(
        default=None, description="Response post-processing hook (response, action)"
    )
    service: str = Field(default="polly", description="Target service identifier")

    model_config = {
        "frozen": True,
    }

    @field_validator("body", mode="after")
    @classmethod
    def freeze_body(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        """Store a private, read-only copy of the request parameters."""
        return MappingProxyType(copy.deepcopy(dict(value)))

    @model_validator(mode="after")
    def validate_body_for_method(self) -> "OperationDescriptor":
        """Only POST operations may carry a body."""
        if self.body and self.method != HttpMethod.POST:
            raise ValueError(f"{self.method.value} operations cannot carry a body")
        return self

    def body_dict(self) -> dict[str, Any]:
        """Mutable deep copy of the body, e.g. for JSON encoding."""
        return copy.deepcopy(dict(self.body))

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly view of the descriptor, without the parser hook."""
        data = self.model_dump(mode="json", exclude={"parser", "body"})
        data["body"] = self.body_dict()
        return data


class OperationResponse(BaseModel):
    """
    Raw response returned by an executor.

    The body is kept as bytes so binary audio survives untouched.
    """

    body: bytes = Field(default=b"", description="Raw response body")
    headers: list[tuple[str, str]] = Field(default_factory=list, description="Header pairs")
    status_code: int = Field(default=200, description="HTTP status code")

    model_config = {
        "frozen": True,
    }
