import json
import logging
from collections.abc import Callable, Mapping
from typing import Any

from domain.models import (
    CONTENT_FILTERED,
    MISSING_QUERY_ERROR,
    PROCESSING_ERROR,
    ErrorResult,
    FailureResult,
    HttpResult,
    InferenceRequest,
    QueryResult,
)
from infrastructure.config import BEDROCK_MODEL_ID

logger = logging.getLogger(__name__)

QueryLookup = Callable[[Mapping[str, Any], Any], Any]


def _query_from_body(event: Mapping[str, Any], body: Any) -> Any:
    if isinstance(body, Mapping):
        return body.get("user_query")
    return None


def _query_from_event(event: Mapping[str, Any], body: Any) -> Any:
    return event.get("user_query")


# Tried in order, first non-empty string wins.
QUERY_LOOKUPS: tuple[QueryLookup, ...] = (_query_from_body, _query_from_event)


def parse_body(event: Mapping[str, Any]) -> Any:
    """Return the event body as a parsed object.

    A string or bytes body is decoded as UTF-8 JSON (errors propagate), and a
    JSON ``null`` is rejected. A missing or empty non-string body becomes an
    empty dict.
    """
    raw = event.get("body")
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8")
    if isinstance(raw, str):
        parsed = json.loads(raw)
        if parsed is None:
            raise TypeError("Cannot read 'user_query' from a null body")
        return parsed
    return raw or {}


def find_user_query(event: Mapping[str, Any], body: Any) -> str | None:
    # An empty string counts as missing, and so does any non-string value.
    for lookup in QUERY_LOOKUPS:
        value = lookup(event, body)
        if isinstance(value, str) and value:
            return value
    return None


def completion_reason(parsed: Any) -> str | None:
    if not isinstance(parsed, Mapping):
        return None
    results = parsed.get("results")
    if isinstance(results, list) and results and isinstance(results[0], Mapping):
        return results[0].get("completionReason")
    return None


class RequestAdapter:
    """Turns a proxy event into one Bedrock ``invoke_model`` call.

    The client and model id are fixed at construction and shared by every
    invocation; nothing else is kept between calls.
    """

    def __init__(self, client, model_id: str = BEDROCK_MODEL_ID):
        self._client = client
        self._model_id = model_id

    @property
    def model_id(self) -> str:
        return self._model_id

    def handle(self, event: Mapping[str, Any]) -> HttpResult:
        try:
            body = parse_body(event)
            user_query = find_user_query(event, body)
            if user_query is None:
                return HttpResult.of(400, ErrorResult(error=MISSING_QUERY_ERROR))

            request = InferenceRequest.for_query(self._model_id, user_query)
            logger.info(
                "Payload Sent: %s", json.dumps(request.model_dump(), indent=2)
            )

            response = self._client.invoke_model(**request.model_dump())
            parsed = json.loads(response["body"].read().decode("utf-8"))

            if completion_reason(parsed) == CONTENT_FILTERED:
                logger.warning("Response was filtered by the model.")

            return HttpResult.of(
                200, QueryResult(query=user_query, generated_response=parsed)
            )
        except Exception as exc:
            logger.exception("Error querying model")
            return HttpResult.of(
                500, FailureResult(error=PROCESSING_ERROR, details=str(exc))
            )
