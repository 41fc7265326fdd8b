import httpx
import asyncio
import os
import sys

PORT = os.environ.get("LYRICSFLOW_PORT", "8001")
SONG_URL = sys.argv[1] if len(sys.argv) > 1 else "https://genius.com/Jay-chou-qi-li-xiang-lyrics"

async def verify_api():
    url = f"http://127.0.0.1:{PORT}/v1/fetch-lyrics"
    params = {"url": SONG_URL}

    print(f"Sending request to {url} with {params}...")
    try:
        async with httpx.AsyncClient(trust_env=False) as client:
            response = await client.get(url, params=params, timeout=30.0)
            print(f"Status Code: {response.status_code}")
            print(f"CORS: {response.headers.get('access-control-allow-origin')}")
            if response.status_code == 200:
                lyrics = response.json().get("lyrics", "")
                if lyrics:
                    print("\n✅ Verification SUCCESS: Received lyrics.")
                    print(f"Line count: {len(lyrics.splitlines())}")
                    print(lyrics[:200])
                else:
                    print("\n⚠️ Page has no lyrics container.")
            else:
                print(f"Error Response: {response.text}")
    except Exception as e:
        print(f"Request Failed: {e}")

if __name__ == "__main__":
    asyncio.run(verify_api())
