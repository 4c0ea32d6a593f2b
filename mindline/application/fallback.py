import json
import logging
from typing import Callable, TypeVar

from pydantic import ValidationError

from mindline.application.ports import CompletionError


logger = logging.getLogger(__name__)

T = TypeVar("T")

RECOVERABLE_ERRORS = (CompletionError, json.JSONDecodeError, ValidationError)


def parse_json_object(raw: str) -> dict:
    """Parse the outermost JSON object in raw model output.

    Models often wrap the object in prose or code fences, so anything before
    the first "{" and after the last "}" is dropped.
    """
    raw = (raw or "").strip()
    if not raw.startswith("{"):
        start_idx = raw.find("{")
        if start_idx != -1:
            raw = raw[start_idx:]
    if not raw.endswith("}"):
        end_idx = raw.rfind("}")
        if end_idx != -1:
            raw = raw[:end_idx + 1]

    data = json.loads(raw)
    if not isinstance(data, dict):
        raise json.JSONDecodeError("Expected a JSON object", raw, 0)
    return data


def with_fallback(remote: Callable[[], T], heuristic: Callable[[], T], label: str = "completion") -> T:
    try:
        return remote()
    except RECOVERABLE_ERRORS as e:
        logger.warning("%s unavailable or invalid, using heuristic: %s", label, e)
        return heuristic()
