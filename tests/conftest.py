"""Pytest configuration and fixtures."""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from resource_hub.api.deps import get_engine
from resource_hub.catalog.catalog import ResourceCatalog
from resource_hub.main import app
from resource_hub.recommendation.engine import RecommendationEngine

SAMPLE_RECORDS = [
    {
        "id": 1,
        "title": "Understanding Anxiety in College",
        "type": "video",
        "url": "https://example.org/1",
        "description": "How anxiety shows up for students.",
        "tags": ["anxiety", "college", "coping"],
        "difficulty_level": "intermediate",
    },
    {
        "id": 2,
        "title": "Box Breathing",
        "type": "video",
        "url": "https://example.org/2",
        "description": "A four-count exercise for panic moments.",
        "tags": ["anxiety", "breathing"],
        "difficulty_level": "beginner",
    },
    {
        "id": 3,
        "title": "Signs of Depression",
        "type": "article",
        "url": "https://example.org/3",
        "description": "Common symptoms and when to seek help.",
        "tags": ["depression", "mental health"],
        "difficulty_level": "beginner",
    },
    {
        "id": 4,
        "title": "Burnout at Work",
        "type": "audio",
        "url": "https://example.org/4",
        "description": "Setting sustainable boundaries in a demanding job.",
        "tags": ["burnout", "Workplace"],
        "difficulty_level": "advanced",
    },
    {
        "id": 5,
        "title": "Journal Prompts",
        "type": "tool",
        "url": "https://example.org/5",
        "description": "Thirty days of reflective writing.",
        "tags": ["journaling"],
        "difficulty_level": "beginner",
    },
    {
        "id": 6,
        "title": "Sleep Basics",
        "type": "blog",
        "url": "https://example.org/6",
        "description": "Simple habits for better rest.",
        "tags": ["sleep"],
        "difficulty_level": "beginner",
    },
]


@pytest.fixture
def catalog() -> ResourceCatalog:
    """Small in-memory catalog."""
    return ResourceCatalog.from_records(SAMPLE_RECORDS)


@pytest.fixture
def engine(catalog: ResourceCatalog) -> RecommendationEngine:
    """Recommendation engine over the sample catalog."""
    return RecommendationEngine(catalog)


@pytest.fixture
def client(engine: RecommendationEngine) -> Generator[TestClient, None, None]:
    """Create FastAPI test client backed by the sample catalog."""
    app.dependency_overrides[get_engine] = lambda: engine

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
