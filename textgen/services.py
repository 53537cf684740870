import logging
from enum import Enum
from pathlib import Path
from typing import Optional

from textgen.analytics.markov import LanguageModel
from textgen.config import settings
from textgen.schemas import ModelStats

logger = logging.getLogger(__name__)


class Mode(str, Enum):
    FIXED = "fixed"
    RANDOM = "random"


def build_model(window_length: int, mode: Mode = Mode.FIXED) -> LanguageModel:
    seed = settings.fixed_seed if mode == Mode.FIXED else None
    logger.debug("building model window_length=%d mode=%s", window_length, mode.value)
    return LanguageModel(window_length, seed=seed)


def train_model(window_length: int, mode: Mode, corpus_path: str | Path, encoding: Optional[str] = None) -> LanguageModel:
    model = build_model(window_length, mode)
    model.train_file(corpus_path, encoding=encoding or settings.encoding)
    return model


def generate_text(model: LanguageModel, seed_text: str, length: int) -> str:
    out = model.generate(seed_text, length)
    if len(out) < len(seed_text) + length:
        logger.info("generated %d of %d requested chars", len(out) - len(seed_text), length)
    return out


def get_stats(model: LanguageModel) -> ModelStats:
    return model.stats()
