from typing import List, Protocol


class CompletionError(RuntimeError):
    """Raised when a completion service is unavailable or the call fails."""


class CompletionPort(Protocol):
    def complete(self, messages: List[dict], json_mode: bool = True) -> str:
        """
        Accepts chat-style messages and returns the model's text.
        With json_mode the text is expected to hold a single JSON object.
        """
        ...
