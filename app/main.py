import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from app.api.endpoints import lyrics
from app.core.config import get_settings
from app.core.http_client import HttpClientManager
from app.schemas.models import HealthStatus

logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await HttpClientManager.close()

app = FastAPI(
    title="LyricsFlow Fetch",
    description="Extracts lyrics from song pages.",
    version="1.0.0",
    docs_url="/docs",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

app.include_router(lyrics.router, prefix="/v1")

# Path served by the Netlify function deployment
app.add_api_route(
    "/.netlify/functions/fetch-lyrics",
    lyrics.fetch_lyrics,
    methods=["GET"],
    include_in_schema=False
)

@app.get("/v1/health", response_model=HealthStatus)
async def health_check():
    return {"status": "ok"}
