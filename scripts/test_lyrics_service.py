import asyncio

import httpx

from app.core.http_client import fetch_text
from app.schemas.models import LyricsOk, LyricsErr
from app.services.lyrics_service import LyricsService

SONG_URL = "https://genius.com/Artist-song-lyrics"

PAGE = """
<html>
  <head><title>Song Lyrics</title></head>
  <body>
    <div class="header">Artist - Song</div>
    <div data-lyrics-container="true">
        [Verse 1]<br/>Line one<br/>Line two
    </div>
  </body>
</html>
"""


def run(coro):
    return asyncio.run(coro)


def test_fetch_lyrics_ok(upstream):
    upstream.serve(lambda request: httpx.Response(200, html=PAGE))

    result = run(LyricsService().fetch_lyrics(SONG_URL))

    assert isinstance(result, LyricsOk)
    assert result.lyrics == "[Verse 1]Line oneLine two"
    assert len(upstream.requests) == 1
    assert upstream.requests[0].method == "GET"
    assert str(upstream.requests[0].url) == SONG_URL

def test_fetch_lyrics_without_container_is_empty(upstream):
    upstream.serve(lambda request: httpx.Response(200, html="<p>Nothing here</p>"))

    result = run(LyricsService().fetch_lyrics(SONG_URL))

    assert result == LyricsOk(lyrics="")

def test_fetch_lyrics_network_failure(upstream):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    upstream.serve(refuse)

    result = run(LyricsService().fetch_lyrics(SONG_URL))

    assert isinstance(result, LyricsErr)
    assert "connection refused" in result.reason

def test_fetch_lyrics_upstream_error_status_is_still_parsed(upstream):
    page = '<div data-lyrics-container="true">Served anyway</div>'
    upstream.serve(lambda request: httpx.Response(404, html=page))

    result = run(LyricsService().fetch_lyrics(SONG_URL))

    assert result == LyricsOk(lyrics="Served anyway")

def test_fetch_lyrics_follows_redirects(upstream):
    def redirect(request):
        if request.url.path == "/old":
            return httpx.Response(301, headers={"Location": "https://genius.com/new"})
        return httpx.Response(200, html='<div data-lyrics-container>Moved</div>')

    upstream.serve(redirect)

    result = run(LyricsService().fetch_lyrics("https://genius.com/old"))

    assert result == LyricsOk(lyrics="Moved")
    assert len(upstream.requests) == 2

def test_fetch_text_respects_size_cap(upstream, settings):
    settings(max_body_bytes=16)
    upstream.serve(lambda request: httpx.Response(200, text="x" * 64))

    result = run(LyricsService().fetch_lyrics(SONG_URL))

    assert isinstance(result, LyricsErr)
    assert "FetchError" in result.reason

def test_fetch_text_decodes_declared_charset(upstream):
    body = '<div data-lyrics-container>Café</div>'.encode("latin-1")
    upstream.serve(lambda request: httpx.Response(
        200, content=body, headers={"Content-Type": "text/html; charset=latin-1"}
    ))

    text = run(fetch_text(SONG_URL))

    assert "Café" in text
