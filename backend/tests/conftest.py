from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from nutrisnap.config import settings
from nutrisnap.main import app
from nutrisnap.services.llm_client import ProviderError, get_completion_client


class FakeCompletionClient:
    def __init__(self, reply: str = "Eat more lentils.", error: Optional[Exception] = None):
        self.reply = reply
        self.error = error
        self.calls: List[List[Dict[str, str]]] = []

    def generate(self, messages):
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture(autouse=True)
def _log_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "log_dir", tmp_path / "logs")


@pytest.fixture
def provider():
    return FakeCompletionClient()


@pytest.fixture
def failing_provider():
    return FakeCompletionClient(error=ProviderError("boom"))


@pytest.fixture
def api(provider):
    app.dependency_overrides[get_completion_client] = lambda: provider
    yield TestClient(app)
    app.dependency_overrides.clear()
