import json
from typing import Any

from pydantic import BaseModel, Field

CONTENT_TYPE_JSON = "application/json"
CONTENT_FILTERED = "CONTENT_FILTERED"
MISSING_QUERY_ERROR = "Missing 'user_query' in request."
PROCESSING_ERROR = "Failed to process request"


class TextGenerationConfig(BaseModel):
    """Fixed sampling parameters sent with every Titan request."""
    maxTokenCount: int = 3072
    stopSequences: list[str] = Field(default_factory=list)
    temperature: float = 0.7
    topP: float = 0.9


class InferenceRequest(BaseModel):
    """Keyword arguments for ``bedrock-runtime.invoke_model``."""
    modelId: str
    contentType: str = CONTENT_TYPE_JSON
    accept: str = CONTENT_TYPE_JSON
    body: str

    @classmethod
    def for_query(cls, model_id: str, user_query: str) -> "InferenceRequest":
        payload = {
            "inputText": user_query,
            "textGenerationConfig": TextGenerationConfig().model_dump(),
        }
        return cls(modelId=model_id, body=json.dumps(payload))


class QueryResult(BaseModel):
    query: str
    generated_response: Any


class ErrorResult(BaseModel):
    error: str


class FailureResult(ErrorResult):
    details: str


class HttpResult(BaseModel):
    """Proxy-integration response: ``{"statusCode": ..., "body": "<json>"}``."""
    statusCode: int
    body: str

    @classmethod
    def of(cls, status_code: int, payload: BaseModel) -> "HttpResult":
        return cls(
            statusCode=status_code,
            body=payload.model_dump_json(),
        )
