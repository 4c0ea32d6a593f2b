import pytest

from mindline.domain.rules import ConditionDetector
from mindline.infrastructure.config import DEFAULT_LEXICON_PATH
from mindline.infrastructure.lexicon_loader import load_lexicon


@pytest.fixture(scope="session")
def packaged_lexicon():
    """The lexicon shipped in mindline/data."""
    return load_lexicon(DEFAULT_LEXICON_PATH)


@pytest.fixture
def detector(packaged_lexicon):
    return ConditionDetector(packaged_lexicon)


@pytest.fixture
def empty_detector():
    return ConditionDetector(())
