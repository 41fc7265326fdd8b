import logging

from app.core.extractor import LyricsExtractor
from app.core.http_client import fetch_text
from app.schemas.models import LyricsErr, LyricsOk, LyricsResult

logger = logging.getLogger(__name__)


class LyricsService:
    """
    Fetches a song page and extracts its lyrics.
    Coordinators:
    - Download -> via app.core.http_client
    - Parsing/extraction -> via app.core.extractor
    """

    async def fetch_lyrics(self, url: str) -> LyricsResult:
        """
        Download ``url`` and extract the lyrics container text.

        Any failure (network, size cap, parser) collapses into LyricsErr;
        the underlying exception is logged, not returned.

        Args:
            url: Song page URL supplied by the caller.

        Returns:
            LyricsOk with the (possibly empty) lyrics, or LyricsErr.
        """
        try:
            html = await fetch_text(url)
            logger.info(f"Downloaded {len(html)} chars from {url}")

            lyrics = LyricsExtractor.extract(html)
        except Exception as e:
            logger.error(f"Failed to fetch lyrics from {url}: {e}", exc_info=True)
            return LyricsErr(reason=f"{type(e).__name__}: {e}")

        if lyrics is None:
            logger.warning(f"No lyrics container found at {url}")
            return LyricsOk(lyrics="")

        logger.info(f"Extracted {len(lyrics)} chars of lyrics from {url}")
        return LyricsOk(lyrics=lyrics)
