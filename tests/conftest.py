from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


def pytest_configure():
    # Ensure project root is on sys.path for absolute imports like 'services.rendering'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    # Set test environment knobs
    os.environ.setdefault("RUN_ENV", "test")


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    monkeypatch.delenv("API_TRACE", raising=False)
    monkeypatch.setenv("RUN_ID", "test-run")
    from config.settings import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings():
    from config.settings import DEFAULT_BASE_URL, Settings
    return Settings(
        proxycurl_api_key="test-api-key",
        proxycurl_base_url=DEFAULT_BASE_URL,
        http_timeout_seconds=None,
        log_level="INFO",
        run_env="test",
    )


@pytest.fixture
def profile_payload():
    return {
        "public_identifier": "johnrmarty",
        "profile_pic_url": "https://example.com/pic.jpg",
        "background_cover_image_url": None,
        "first_name": "John",
        "last_name": "Marty",
        "full_name": "John Marty",
        "follower_count": 500,
        "occupation": "Co-Founder at Freedom Fund Real Estate",
        "headline": "Financial Freedom through Real Estate",
        "summary": "Test summary",
        "country": "US",
        "country_full_name": "United States of America",
        "city": "Seattle",
        "state": "Washington",
        "experiences": [
            {
                "starts_at": {"day": 1, "month": 1, "year": 2015},
                "ends_at": {"day": 1, "month": 6, "year": 2018},
                "company": "Old Corp",
                "title": "Analyst",
                "description": "Crunched numbers",
            },
            {
                "starts_at": {"day": 1, "month": 8, "year": 2021},
                "ends_at": None,
                "company": "Freedom Fund Real Estate",
                "title": "Co-Founder",
                "description": "Helping people invest",
            },
        ],
        "education": [
            {
                "school": "University of Washington",
                "degree_name": "Master of Business Administration",
                "field_of_study": "Finance",
            },
        ],
        "accomplishment_organisations": [],
        "certifications": [],
        "connections": 500,
        "people_also_viewed": [],
        "recommendations": [],
        "activities": [],
        "similarly_named_profiles": [],
        "articles": [],
        "groups": [],
    }
