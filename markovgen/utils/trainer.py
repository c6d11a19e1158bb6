"""Utilities for training and generation."""

import logging
from pathlib import Path
from typing import Iterable, List, Union

from markovgen.models.markov import MarkovModel
from markovgen.data.corpus import read_chars


logger = logging.getLogger(__name__)


class Trainer:
    """Training helper for MarkovModel instances."""

    def __init__(self, model: MarkovModel):
        self.model = model

    def fit(self, corpus: Union[Path, Iterable[str]]) -> dict:
        """Train on a corpus file or on text.

        A `Path` is read from disk; anything else, including a plain
        string, is passed to the model as corpus text.
        """
        if isinstance(corpus, Path):
            logger.info(f"Reading corpus from {corpus}")
            stream = read_chars(corpus)
        else:
            stream = corpus

        transitions = self.model.train(stream)
        stats = self.model.stats()
        logger.info(
            f"Learned {transitions} transitions; model now has "
            f"{stats['windows']} windows over {stats['distinct_chars']} distinct characters"
        )
        return stats


class Generator:
    """Text generation helper for MarkovModel instances."""

    def __init__(self, model: MarkovModel):
        self.model = model

    def generate(self, prompt: str, max_new_chars: int = 100) -> str:
        """Generate a continuation of `prompt`."""
        window_length = self.model.window_length
        if len(prompt) < window_length:
            logger.warning(
                f"Prompt {prompt!r} is shorter than the window length ({window_length}); nothing generated"
            )
            return prompt
        if prompt[-window_length:] not in self.model:
            logger.warning(f"Window {prompt[-window_length:]!r} never seen in training; nothing generated")
            return prompt

        output = self.model.generate(prompt, max_new_chars)
        produced = len(output) - len(prompt)
        if produced < max_new_chars:
            logger.debug(f"Generation stopped early after {produced} of {max_new_chars} characters")
        return output

    def samples(self, prompt: str, max_new_chars: int = 100, n: int = 1) -> List[str]:
        """Draw `n` independent continuations from the model's random source."""
        return [self.generate(prompt, max_new_chars) for _ in range(n)]
