"""
Global fixtures for all unit tests.

Provides:
- Environment variable isolation (prevents real API keys reaching tests)
- A small on-disk roadmap dataset
- GenerationConfig instances pointing at fake endpoints
"""

import json

import pytest

from career_roadmap.common.config import GenerationConfig


SAMPLE_DATASET = {
    "Software Engineer": {
        "title": "Software Engineer",
        "phases": [
            {
                "title": "Phase 1: Foundation",
                "topics": ["Learn programming basics", "Build small projects"],
            },
            {
                "title": "Phase 2: Specialization",
                "topics": ["Pick a track", "Ship a real project"],
            },
        ],
    },
    "Data Scientist": {
        "title": "Data Scientist",
        "phases": [
            {"title": "Phase 1: Foundation", "topics": ["Learn statistics"]},
        ],
    },
    "Data Analyst": {
        "title": "Data Analyst",
        "phases": [
            {"title": "Phase 1: Foundation", "topics": ["Learn SQL"]},
        ],
    },
}


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """
    Isolate test environment from real credentials and configurations.

    Tests build GenerationConfig explicitly; this only guards against
    anything reading the environment directly.
    """
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test-mock-key")
    monkeypatch.setenv("OPENAI_API_URL", "https://llm.invalid/v1/chat/completions")
    monkeypatch.delenv("ROADMAP_DATASET", raising=False)


@pytest.fixture
def sample_dataset():
    """Raw dataset document (decoded JSON)."""
    return json.loads(json.dumps(SAMPLE_DATASET))


@pytest.fixture
def dataset_file(tmp_path, sample_dataset):
    """Sample dataset written to a temporary JSON file."""
    path = tmp_path / "roadmaps.json"
    path.write_text(json.dumps(sample_dataset), encoding="utf-8")
    return path


@pytest.fixture
def remote_config(dataset_file):
    """Config with an API key so the remote path is attempted."""
    return GenerationConfig(
        api_key="sk-test-mock-key",
        api_url="https://llm.invalid/v1/chat/completions",
        model="gpt-3.5-turbo",
        temperature=0.7,
        timeout_seconds=5.0,
        dataset_location=str(dataset_file),
    )


@pytest.fixture
def keyless_config(dataset_file):
    """Config without an API key: remote path always reports not_configured."""
    return GenerationConfig(api_key="", dataset_location=str(dataset_file))
