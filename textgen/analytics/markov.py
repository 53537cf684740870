import logging
import random
from collections import deque
from pathlib import Path
from typing import Iterable, Optional

from textgen.analytics.distribution import DistributionTable
from textgen.analytics.stats import entropy
from textgen.core.corpus import read_corpus
from textgen.core.validation import is_valid_length, is_valid_window_length
from textgen.schemas import ModelStats

logger = logging.getLogger(__name__)


class LanguageModel:
    """
    Character-level Markov model over fixed-length windows.

    Maps every window of `window_length` characters seen in the corpus to a
    DistributionTable of the characters that followed it. The random source
    belongs to the instance: pass `seed` for reproducible generation, leave it
    as None for a different text on every run.

    train() is meant to be called once per model.
    """

    def __init__(self, window_length: int, seed: Optional[int] = None):
        if not is_valid_window_length(window_length):
            raise ValueError(f"window_length must be a positive integer, got {window_length!r}")
        self.window_length = window_length
        self.seed = seed
        self.rng = random.Random(seed)
        self.table: dict[str, DistributionTable] = {}

    def __len__(self) -> int:
        return len(self.table)

    def __contains__(self, window: str) -> bool:
        return window in self.table

    def __getitem__(self, window: str) -> DistributionTable:
        return self.table[window]

    def __str__(self) -> str:
        return self.dump()

    def train(self, corpus: Iterable[str]) -> None:
        buf = deque(maxlen=self.window_length)
        transitions = 0
        for c in corpus:
            if c == '\r':
                continue
            if len(buf) < self.window_length:
                buf.append(c)
                continue
            window = ''.join(buf)
            probs = self.table.get(window)
            if probs is None:
                probs = self.table[window] = DistributionTable()
            probs.record_occurrence(c)
            transitions += 1
            buf.append(c)

        for probs in self.table.values():
            self.calculate_probabilities(probs)
        logger.info("trained %d windows from %d transitions (window_length=%d)",
                    len(self.table), transitions, self.window_length)

    def train_file(self, path: str | Path, encoding: str = "utf-8") -> None:
        logger.debug("reading corpus %s", path)
        corpus = read_corpus(path, encoding=encoding)
        try:
            self.train(corpus)
        finally:
            corpus.close()

    def calculate_probabilities(self, probs: DistributionTable) -> None:
        probs.normalize()

    def get_random_char(self, probs: DistributionTable) -> str:
        return probs.sample(self.rng.random())

    def generate(self, initial_text: str, text_length: int) -> str:
        """
        Extend initial_text by up to text_length sampled characters.

        Returns initial_text unchanged, whatever text_length is, when it is
        shorter than the window.
        Stops early, returning what was built so far, as soon as the trailing
        window was never seen during training.
        """
        if len(initial_text) < self.window_length:
            return initial_text
        if not is_valid_length(text_length):
            raise ValueError(f"text_length must be a non-negative integer, got {text_length!r}")

        out = list(initial_text)
        target = len(initial_text) + text_length
        while len(out) < target:
            window = ''.join(out[-self.window_length:])
            probs = self.table.get(window)
            if probs is None:
                logger.debug("unseen window %r after %d chars, stopping", window, len(out))
                break
            out.append(self.get_random_char(probs))
        return ''.join(out)

    def dump(self) -> str:
        return ''.join(f"{window} : {probs}\n" for window, probs in self.table.items())

    def stats(self) -> ModelStats:
        n = len(self.table)
        transitions = sum(probs.total() for probs in self.table.values())
        chars = {e.char for probs in self.table.values() for e in probs}
        branching = sum(len(probs) for probs in self.table.values())
        H = sum(entropy(e.p for e in probs) for probs in self.table.values())
        return ModelStats(
            window_length=self.window_length,
            windows=n,
            transitions=transitions,
            distinct_chars=len(chars),
            avg_branching=branching / n if n else 0.0,
            avg_entropy=H / n if n else 0.0,
        )
