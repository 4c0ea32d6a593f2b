import os
import logging
from pathlib import Path

try:
    import streamlit as st  # type: ignore
    _HAS_STREAMLIT = True
except Exception:
    _HAS_STREAMLIT = False

logger = logging.getLogger(__name__)


DEFAULT_LEXICON_PATH = Path(__file__).parent.parent / "data" / "mental_illnesses.csv"
DEFAULT_TIMEOUT_MS = 15000


def get_secret(name: str, default: str | None = None) -> str | None:
    # Prefer Streamlit secrets if available
    if _HAS_STREAMLIT:
        try:
            if name in st.secrets:
                return str(st.secrets.get(name))
        except Exception as e:
            # st.secrets raises when no secrets.toml exists
            logger.debug("Streamlit secrets unavailable for %s: %s", name, e)
    # Fallback to environment variables
    return os.environ.get(name, default)


class Settings:
    @property
    def mistral_api_key(self) -> str | None:
        return get_secret("MISTRAL_API_KEY") or None

    @property
    def mistral_model(self) -> str:
        return get_secret("MISTRAL_MODEL", "mistral-small-latest") or "mistral-small-latest"

    @property
    def lexicon_path(self) -> Path:
        value = get_secret("MINDLINE_LEXICON_PATH")
        return Path(value) if value else DEFAULT_LEXICON_PATH

    @property
    def completion_timeout_ms(self) -> int:
        value = get_secret("MINDLINE_COMPLETION_TIMEOUT_MS")
        if not value:
            return DEFAULT_TIMEOUT_MS
        try:
            return int(value)
        except ValueError:
            logger.warning("Invalid MINDLINE_COMPLETION_TIMEOUT_MS %r; using %d", value, DEFAULT_TIMEOUT_MS)
            return DEFAULT_TIMEOUT_MS
