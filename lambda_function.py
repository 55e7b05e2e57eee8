"""AWS Lambda entry point (API Gateway proxy integration).

Configure the function handler as ``lambda_function.handler``.
"""
from application.handler import RequestAdapter
from infrastructure.config import configure_logging
from infrastructure.llm import get_bedrock_client

configure_logging()

# Built once per container, reused across warm invocations.
_adapter = RequestAdapter(get_bedrock_client())


def handler(event, context):
    return _adapter.handle(event).model_dump()
