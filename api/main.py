import uvicorn
from fastapi import FastAPI

from api.routes import router
from infrastructure.config import API_HOST, API_PORT, configure_logging

configure_logging()

app = FastAPI(
    title="Bedrock Query Adapter",
    description="Local HTTP front for the Lambda request adapter",
)
app.include_router(router)


if __name__ == "__main__":
    uvicorn.run(app, host=API_HOST, port=API_PORT)
