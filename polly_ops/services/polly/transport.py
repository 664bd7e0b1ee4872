"""Seam between operation descriptors and an HTTP executor.

This module does not send anything. It defines the executor contract and
converts between descriptors/responses and httpx objects so an executor
built on httpx only has to add signing, retries and the actual send.
"""

import logging
from typing import Protocol, runtime_checkable

import httpx

from polly_ops.lib.config import get_polly_config
from polly_ops.models.operation import HttpMethod, OperationDescriptor, OperationResponse

logger = logging.getLogger(__name__)


@runtime_checkable
class OperationExecutor(Protocol):
    """
    Contract for executors that run operation descriptors.

    Example:
        >>> operation = describe_voices()
        >>> response = executor.execute(operation)
        >>> voices = operation.parser(response, operation.action)

    Contract:
        - MUST sign and send the request described by the operation
        - MUST return the raw body bytes unmodified
        - MUST raise its own error type on transport failure
        - MAY retry; this package never does
    """

    def execute(self, operation: OperationDescriptor) -> OperationResponse:
        """Run the operation and return the raw response."""
        ...


def build_http_request(
    operation: OperationDescriptor, endpoint: str | None = None
) -> httpx.Request:
    """
    Render an operation as an unsent, unsigned httpx request.

    Args:
        operation: Descriptor to render
        endpoint: Base URL (default: configured Polly endpoint)

    Returns:
        httpx.Request with a JSON body for POST operations
    """
    base_url = (endpoint or get_polly_config().endpoint).rstrip("/")
    url = f"{base_url}{operation.path}"

    if operation.method == HttpMethod.POST:
        request = httpx.Request(operation.method.value, url, json=operation.body_dict())
    else:
        request = httpx.Request(operation.method.value, url)

    logger.debug(f"Rendered {operation.action.value} as {request.method} {request.url}")
    return request


def response_from_httpx(response: httpx.Response) -> OperationResponse:
    """
    Convert an httpx response into an OperationResponse.

    Repeated headers are kept as separate pairs and the body is copied
    byte-for-byte.
    """
    return OperationResponse(
        body=response.content,
        headers=list(response.headers.multi_items()),
        status_code=response.status_code,
    )
