"""Response parser for Polly operations.

Executors call parse(response, action) after the network round-trip.
JSON-bearing responses are decoded into mappings; speech responses carry
binary audio and are returned untouched.
"""

import json
import logging
from typing import Any

from polly_ops.lib.exceptions import ResponseDecodeError
from polly_ops.models.operation import Action, OperationResponse

logger = logging.getLogger(__name__)


# Actions whose response body is a JSON document
JSON_ACTIONS = frozenset(
    {
        Action.DESCRIBE_VOICES,
        Action.START_SPEECH_SYNTHESIS_TASK,
        Action.GET_SPEECH_SYNTHESIS_TASK,
    }
)


def parse(response: OperationResponse, action: Action | str) -> Any:
    """
    Post-process an executor response for the given action.

    Args:
        response: Response returned by the executor
        action: Action tag of the operation (Action or its string value)

    Returns:
        dict for JSON-bearing actions, otherwise response unchanged.

    Raises:
        ResponseDecodeError: If a JSON-bearing body cannot be decoded
    """
    try:
        action = Action(action)
    except ValueError:
        logger.debug(f"Passing through response for unknown action {action!r}")
        return response

    if action not in JSON_ACTIONS:
        return response

    logger.debug(f"Decoding JSON response for {action.value}")
    return decode_json_body(response.body, action)


def decode_json_body(body: bytes, action: Action) -> dict[str, Any]:
    """
    Decode a UTF-8 JSON object body.

    Raises:
        ResponseDecodeError: On invalid UTF-8, invalid JSON, or a
                             top-level value that is not an object
    """
    try:
        decoded = json.loads(body.decode("utf-8"))
    except UnicodeDecodeError as e:
        logger.warning(f"Response body for {action.value} is not valid UTF-8")
        raise ResponseDecodeError(
            f"Body is not valid UTF-8: {e}", action=action.value, original_error=e
        ) from e
    except json.JSONDecodeError as e:
        logger.warning(f"Response body for {action.value} is not valid JSON")
        raise ResponseDecodeError(
            f"Body is not valid JSON: {e.msg} at position {e.pos}",
            action=action.value,
            original_error=e,
        ) from e

    if not isinstance(decoded, dict):
        raise ResponseDecodeError(
            f"Expected a JSON object, got {type(decoded).__name__}", action=action.value
        )

    return decoded
