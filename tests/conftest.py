from datetime import datetime, timezone

import pytest
import httpx

from sitemap_hub.main import app


@pytest.fixture
async def client():
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def full_video() -> dict:
    """
    Every video attribute set; dates in UTC.
    """
    return {
        "player_loc": "http://example.com/player.swf?video=123",
        "content_loc": "http://example.com/video.flv",
        "thumbnail_loc": "http://example.com/thumb.jpg",
        "title": "Grilling steaks for summer",
        "description": "Alkis shows you how to get perfectly done steaks every time",
        "expiration_date": datetime(2030, 11, 5, 19, 20, 30, tzinfo=timezone.utc),
        "duration": 600,
        "rating": 4.2,
        "view_count": 12345,
        "publication_date": datetime(2024, 11, 5, 19, 20, 30, tzinfo=timezone.utc),
        "tag": ["steak", "meat", "summer"],
        "category": ["Grilling"],
        "family_friendly": True,
    }
