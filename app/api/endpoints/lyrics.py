from typing import Optional
from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from app.schemas.models import LyricsResponse, ErrorResponse, LyricsErr
from app.services.lyrics_service import LyricsService
import logging

router = APIRouter()
logger = logging.getLogger(__name__)

MISSING_URL_ERROR = "Missing song URL"
FETCH_FAILED_ERROR = "Failed to fetch lyrics"

# Sent on success only
CORS_HEADERS = {"Access-Control-Allow-Origin": "*"}

# Dependency Injection for Service
def get_lyrics_service():
    return LyricsService()

@router.get(
    "/fetch-lyrics",
    response_model=LyricsResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Extract lyrics from a song page"
)
async def fetch_lyrics(
    url: Optional[str] = Query(None, description="Song page URL"),
    service: LyricsService = Depends(get_lyrics_service)
):
    """
    Downloads the song page at `url` and returns the text of its first
    `data-lyrics-container` element, trimmed. Empty string if the page has none.
    """
    if not url:
        logger.info("Rejected request without song URL")
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(error=MISSING_URL_ERROR).model_dump()
        )

    logger.info(f"Received lyrics request for: {url}")

    result = await service.fetch_lyrics(url)

    if isinstance(result, LyricsErr):
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error=FETCH_FAILED_ERROR).model_dump()
        )

    return JSONResponse(
        status_code=200,
        content=LyricsResponse(lyrics=result.lyrics).model_dump(),
        headers=CORS_HEADERS
    )
