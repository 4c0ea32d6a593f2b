"""Loads the condition lexicon from a two-column CSV file."""
import csv
import logging
from functools import lru_cache
from pathlib import Path
from typing import Tuple

from mindline.domain.lexicon import build_lexicon
from mindline.domain.models import ConditionRecord
from mindline.domain.rules import ConditionDetector
from mindline.infrastructure.config import Settings


logger = logging.getLogger(__name__)


def load_lexicon(path: str | Path) -> Tuple[ConditionRecord, ...]:
    """
    Read (illness, definition) rows from a CSV file.

    The first row is treated as a header and skipped. A missing or
    unreadable file gives an empty lexicon; the detector then reports no
    conditions and low risk.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            reader = csv.reader(f)
            next(reader, None)
            lexicon = build_lexicon(reader)
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        logger.warning("Could not read lexicon %s: %s", path, e)
        return ()

    if not lexicon:
        logger.warning("Lexicon %s contained no usable rows", path)
    else:
        logger.info("Loaded %d conditions from %s", len(lexicon), path)
    return lexicon


@lru_cache(maxsize=1)
def default_lexicon() -> Tuple[ConditionRecord, ...]:
    return load_lexicon(Settings().lexicon_path)


def build_detector(settings: Settings | None = None) -> ConditionDetector:
    if settings is None:
        return ConditionDetector(default_lexicon())
    return ConditionDetector(load_lexicon(settings.lexicon_path))
