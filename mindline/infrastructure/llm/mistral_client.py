import logging
from typing import List

from mindline.application.ports import CompletionError, CompletionPort
from mindline.infrastructure.config import Settings


logger = logging.getLogger(__name__)


class MistralCompletionAdapter(CompletionPort):
    def __init__(self, settings: Settings | None = None):
        self.settings = settings or Settings()
        self._client = None
        self._model = self.settings.mistral_model
        self._init_client()

    def _init_client(self):
        api_key = self.settings.mistral_api_key
        if not api_key:
            logger.warning("Mistral API key is missing; completions disabled.")
            self._client = None
            return
        try:
            from mistralai import Mistral
            self._client = Mistral(api_key=api_key, timeout_ms=self.settings.completion_timeout_ms)
        except Exception as e:
            logger.exception("Failed to initialize Mistral client: %s", e)
            self._client = None

    @property
    def available(self) -> bool:
        return self._client is not None

    def complete(self, messages: List[dict], json_mode: bool = True) -> str:
        if not self._client:
            raise CompletionError("Mistral client not initialized (missing API key or import error)")
        kwargs = {"model": self._model, "messages": messages, "temperature": 0.3}
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}
        try:
            response = self._client.chat.complete(**kwargs)
        except Exception as e:
            logger.exception("Mistral chat call failed: %s", e)
            raise CompletionError(f"Mistral chat call failed: {e}") from e

        try:
            content = response.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as e:
            raise CompletionError("Mistral response had no message content") from e
        if not isinstance(content, str):
            raise CompletionError("Mistral response content was not text")
        return content


class OfflineCompletionAdapter(CompletionPort):
    """Stands in for the remote service when none is configured."""

    def complete(self, messages: List[dict], json_mode: bool = True) -> str:
        raise CompletionError("Completion service is offline")


def build_completion(settings: Settings | None = None) -> CompletionPort:
    settings = settings or Settings()
    adapter = MistralCompletionAdapter(settings)
    if adapter.available:
        return adapter
    return OfflineCompletionAdapter()
