"""
Спільні фікстури: TestClient для застосунку та перемикання ключа Gemini.
"""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from core.config import settings
from main import app


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def gemini_key(monkeypatch):
    """Вдаємо, що ключ Gemini налаштований."""
    monkeypatch.setattr(settings, "GEMINI_API_KEY", "test-key")


@pytest.fixture
def no_gemini_key(monkeypatch):
    monkeypatch.setattr(settings, "GEMINI_API_KEY", None)


@pytest.fixture
def fake_gemini(gemini_key):
    """Підміняє реальний виклик Gemini."""
    with patch("llm.summarizer.generate_text", new_callable=AsyncMock) as mocked:
        mocked.return_value = "Kısa özet."
        yield mocked
