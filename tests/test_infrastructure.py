"""Unit tests for settings and the Mistral completion adapter."""
from types import SimpleNamespace

import pytest

from mindline.application.ports import CompletionError
from mindline.infrastructure import config
from mindline.infrastructure.config import DEFAULT_LEXICON_PATH, DEFAULT_TIMEOUT_MS, Settings
from mindline.infrastructure.lexicon_loader import build_detector, default_lexicon
from mindline.infrastructure.llm.mistral_client import (
    MistralCompletionAdapter,
    OfflineCompletionAdapter,
    build_completion,
)


@pytest.fixture(autouse=True)
def env_only(monkeypatch):
    """Read settings from the environment only."""
    monkeypatch.setattr(config, "_HAS_STREAMLIT", False)
    for name in ("MISTRAL_API_KEY", "MISTRAL_MODEL", "MINDLINE_LEXICON_PATH", "MINDLINE_COMPLETION_TIMEOUT_MS"):
        monkeypatch.delenv(name, raising=False)


class FakeChat:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.kwargs = None

    def complete(self, **kwargs):
        self.kwargs = kwargs
        if self.error:
            raise self.error
        return self.response


def _response(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def _adapter_with(chat):
    adapter = MistralCompletionAdapter(Settings())
    adapter._client = SimpleNamespace(chat=chat)
    return adapter


class TestSettings:
    """Test environment-backed settings."""

    def test_defaults(self):
        settings = Settings()
        assert settings.mistral_api_key is None
        assert settings.mistral_model == "mistral-small-latest"
        assert settings.lexicon_path == DEFAULT_LEXICON_PATH
        assert settings.completion_timeout_ms == DEFAULT_TIMEOUT_MS

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("MISTRAL_API_KEY", "secret")
        monkeypatch.setenv("MISTRAL_MODEL", "mistral-large-latest")
        monkeypatch.setenv("MINDLINE_LEXICON_PATH", str(tmp_path / "lexicon.csv"))
        monkeypatch.setenv("MINDLINE_COMPLETION_TIMEOUT_MS", "5000")
        settings = Settings()
        assert settings.mistral_api_key == "secret"
        assert settings.mistral_model == "mistral-large-latest"
        assert settings.lexicon_path == tmp_path / "lexicon.csv"
        assert settings.completion_timeout_ms == 5000

    def test_invalid_timeout_falls_back(self, monkeypatch):
        monkeypatch.setenv("MINDLINE_COMPLETION_TIMEOUT_MS", "soon")
        assert Settings().completion_timeout_ms == DEFAULT_TIMEOUT_MS


class TestMistralAdapter:
    """Test the Mistral adapter with a fake client."""

    def test_missing_key_disables_client(self):
        adapter = MistralCompletionAdapter(Settings())
        assert not adapter.available
        with pytest.raises(CompletionError):
            adapter.complete([{"role": "user", "content": "hi"}])

    def test_build_completion_without_key_is_offline(self):
        completion = build_completion(Settings())
        assert isinstance(completion, OfflineCompletionAdapter)
        with pytest.raises(CompletionError):
            completion.complete([])

    def test_json_mode_request(self):
        chat = FakeChat(response=_response('{"sentiment": "neutral"}'))
        adapter = _adapter_with(chat)
        messages = [{"role": "user", "content": "hi"}]

        assert adapter.complete(messages) == '{"sentiment": "neutral"}'
        assert chat.kwargs["model"] == "mistral-small-latest"
        assert chat.kwargs["messages"] == messages
        assert chat.kwargs["response_format"] == {"type": "json_object"}

    def test_text_mode_request(self):
        chat = FakeChat(response=_response("Take care."))
        assert _adapter_with(chat).complete([], json_mode=False) == "Take care."
        assert "response_format" not in chat.kwargs

    def test_call_failure_raises_completion_error(self):
        chat = FakeChat(error=TimeoutError("timed out"))
        with pytest.raises(CompletionError):
            _adapter_with(chat).complete([])

    @pytest.mark.parametrize("response", [
        SimpleNamespace(choices=[]),
        _response(None),
        _response([{"type": "text", "text": "chunked"}]),
    ])
    def test_unexpected_response_raises_completion_error(self, response):
        with pytest.raises(CompletionError):
            _adapter_with(FakeChat(response=response)).complete([])


class TestDetectorWiring:
    """Test building detectors from settings."""

    def test_default_lexicon_is_shared(self):
        assert default_lexicon() is default_lexicon()
        assert len(build_detector()) == len(default_lexicon())

    def test_missing_lexicon_gives_empty_detector(self, monkeypatch, tmp_path):
        monkeypatch.setenv("MINDLINE_LEXICON_PATH", str(tmp_path / "missing.csv"))
        detector = build_detector(Settings())
        assert len(detector) == 0
        assert detector.analyze_text("I feel hopeless and depressed").overall_risk == "low"
