import io
import json

import pytest
from botocore.response import StreamingBody

from application.handler import RequestAdapter

TITAN_RESPONSE = {
    "inputTextTokenCount": 6,
    "results": [
        {
            "tokenCount": 12,
            "outputText": "Paris is the capital of France.",
            "completionReason": "FINISH",
        }
    ],
}


class FakeBedrockClient:
    """Stands in for a ``bedrock-runtime`` client."""

    def __init__(self, payload=None, error=None):
        self.payload = TITAN_RESPONSE if payload is None else payload
        self.error = error
        self.calls: list[dict] = []

    def invoke_model(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        raw = self.payload if isinstance(self.payload, bytes) else json.dumps(self.payload).encode("utf-8")
        return {
            "body": StreamingBody(io.BytesIO(raw), len(raw)),
            "contentType": "application/json",
        }


@pytest.fixture
def titan_response():
    return json.loads(json.dumps(TITAN_RESPONSE))


@pytest.fixture
def fake_client():
    return FakeBedrockClient()


@pytest.fixture
def make_client():
    return FakeBedrockClient


@pytest.fixture
def adapter(fake_client):
    return RequestAdapter(fake_client)
