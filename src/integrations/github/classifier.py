"""
Classification of GraphQL ``errors`` payloads.

Upstream error objects are parsed into one of four shapes before any
decision is made on them, so the mapping below never duck-types on
optional keys.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

from src.core.errors import ApplicationError, GitHubGraphQLError, RepositoryNotFoundError
from src.core.utils.logging import get_logger
from src.presentation.svg import wrap_text_multiline

DEFAULT_NOT_FOUND_MESSAGE = "Could not fetch repository."
DEFAULT_GRAPHQL_MESSAGE = "Something went wrong while trying to retrieve the stats data using the GraphQL API."

# Width/lines the message must fit on the error card
MESSAGE_WIDTH = 90
MESSAGE_LINES = 1


class GraphQLNotFound(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["not_found"] = "not_found"
    message: str | None = None


class GraphQLRateLimited(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["rate_limited"] = "rate_limited"
    message: str | None = None


class GraphQLMessage(BaseModel):
    """An error with a message but no type we act on."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["message"] = "message"
    message: str
    type: str | None = None


class GraphQLUnknown(BaseModel):
    """Anything else: no usable type, no message, or not an object at all."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unknown"] = "unknown"
    raw: Any = None


GraphQLErrorShape = GraphQLNotFound | GraphQLRateLimited | GraphQLMessage | GraphQLUnknown


def parse_graphql_error(raw: Any) -> GraphQLErrorShape:
    """Map one element of a GraphQL ``errors`` array onto its shape."""
    if not isinstance(raw, dict):
        return GraphQLUnknown(raw=raw)

    error_type = raw.get("type")
    message = raw.get("message")
    if not isinstance(message, str) or not message.strip():
        message = None

    if error_type == "NOT_FOUND":
        return GraphQLNotFound(message=message)
    if error_type == "RATE_LIMITED":
        return GraphQLRateLimited(message=message)
    if message:
        return GraphQLMessage(message=message, type=error_type if isinstance(error_type, str) else None)
    return GraphQLUnknown(raw=raw)


def first_error_shape(body: dict[str, Any]) -> GraphQLErrorShape | None:
    """Shape of ``errors[0]``, or None when the body carries no errors."""
    errors = body.get("errors")
    if not errors:
        return None
    if not isinstance(errors, list):
        return GraphQLUnknown(raw=errors)
    return parse_graphql_error(errors[0])


def _to_application_error(shape: GraphQLErrorShape, errors: list[Any]) -> ApplicationError:
    if isinstance(shape, GraphQLNotFound):
        return RepositoryNotFoundError(shape.message or DEFAULT_NOT_FOUND_MESSAGE)
    if isinstance(shape, GraphQLMessage | GraphQLRateLimited) and shape.message:
        lines = wrap_text_multiline(shape.message, MESSAGE_WIDTH, MESSAGE_LINES)
        return GitHubGraphQLError(lines[0] if lines else shape.message, errors)
    return GitHubGraphQLError(DEFAULT_GRAPHQL_MESSAGE, errors)


def classify_response(body: dict[str, Any], logger: Any = None) -> dict[str, Any]:
    """
    Inspect a successful GraphQL response body.

    Args:
        body: Decoded JSON body of an HTTP 200 response.
        logger: Logger the classified error is reported to before raising.

    Returns:
        The body itself (without an empty ``errors`` key) when there are no errors.

    Raises:
        RepositoryNotFoundError: If ``errors[0]`` is of type NOT_FOUND.
        GitHubGraphQLError: For any other GraphQL error.
    """
    shape = first_error_shape(body)
    if shape is None:
        return {key: value for key, value in body.items() if key != "errors"}

    logger = logger or get_logger(__name__)
    errors = body["errors"] if isinstance(body["errors"], list) else [body["errors"]]
    error = _to_application_error(shape, errors)
    logger.error(
        "graphql_error_classified",
        error_type=error.type,
        shape=shape.kind,
        message=error.message,
        errors=errors,
    )
    raise error
