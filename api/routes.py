from functools import lru_cache

from fastapi import APIRouter, Depends, Request, Response
from fastapi.concurrency import run_in_threadpool

from application.handler import RequestAdapter
from infrastructure.config import AWS_REGION
from infrastructure.llm import get_bedrock_client

router = APIRouter()


@lru_cache
def get_adapter() -> RequestAdapter:
    return RequestAdapter(get_bedrock_client())


@router.get("/health")
async def health(adapter: RequestAdapter = Depends(get_adapter)):
    return {"status": "ok", "model": adapter.model_id, "region": AWS_REGION}


@router.post("/api/query")
async def query(request: Request, adapter: RequestAdapter = Depends(get_adapter)):
    """Replay the request as an API Gateway proxy event."""
    raw = await request.body()
    # Decoded inside the adapter so bad UTF-8 lands in its error boundary
    event = {"body": raw or None}

    # invoke_model blocks, keep it off the event loop
    result = await run_in_threadpool(adapter.handle, event)
    return Response(
        content=result.body,
        status_code=result.statusCode,
        media_type="application/json",
    )
