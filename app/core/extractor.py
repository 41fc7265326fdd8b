import logging
from typing import Optional

from bs4 import BeautifulSoup
from bs4.element import CData, NavigableString, Script, Stylesheet

logger = logging.getLogger(__name__)

# Characters trimmed from the lyrics ends: Unicode spaces, line terminators and the BOM
TRIM_CHARS = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


class ExtractionError(Exception):
    """Raised when a song page cannot be parsed."""
    pass


class LyricsExtractor:
    """
    Pulls the lyrics block out of a song page.

    The block is the first element carrying the ``data-lyrics-container``
    attribute; its value is ignored, presence alone marks the container.
    Pages are parsed with html5lib so line endings and malformed markup are
    handled the way a browser handles them.
    """
    CONTAINER_SELECTOR = "[data-lyrics-container]"
    PARSER = "html5lib"
    # Every text node counts, including <script> and <style> content
    TEXT_TYPES = (NavigableString, CData, Script, Stylesheet)

    @staticmethod
    def parse(html: str) -> BeautifulSoup:
        try:
            return BeautifulSoup(html, LyricsExtractor.PARSER)
        except Exception as e:
            raise ExtractionError(f"Failed to parse HTML: {e}") from e

    @staticmethod
    def extract(html: str) -> Optional[str]:
        """
        Return the trimmed text of the first lyrics container.

        Descendant text is concatenated in document order; only leading and
        trailing whitespace is removed.

        Returns:
            The lyrics text, or None if the page has no container.
        """
        soup = LyricsExtractor.parse(html)
        container = soup.select_one(LyricsExtractor.CONTAINER_SELECTOR)
        if container is None:
            return None
        text = container.get_text(types=LyricsExtractor.TEXT_TYPES)
        return text.strip(TRIM_CHARS)
