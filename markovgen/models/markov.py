"""
Fixed-order character-level Markov model.
Maps every window of `window_length` characters seen in the corpus to the
distribution of characters that followed it, and generates text by sampling
from those distributions one character at a time.
"""
import logging
from typing import Dict, Iterable, Optional

import torch

from markovgen.models.distribution import CharDistribution


logger = logging.getLogger(__name__)


class MarkovModel:
    def __init__(self, window_length: int, seed: Optional[int] = None):
        """
        Args:
            window_length: Number of characters of context per window
            seed: Fixed seed for reproducible generation; None draws entropy
        """
        if window_length < 1:
            raise ValueError("window_length must be at least 1")
        self._window_length = window_length
        self.seed = seed
        self.window_map: Dict[str, CharDistribution] = {}

        self._generator = torch.Generator()
        if seed is None:
            self._generator.seed()
        else:
            self._generator.manual_seed(seed)

    @property
    def window_length(self) -> int:
        return self._window_length

    @property
    def is_trained(self) -> bool:
        return bool(self.window_map)

    def train(self, stream: Iterable[str]) -> int:
        """Count next-character occurrences for every window in `stream`.

        `stream` may be a string, an iterable of characters, or any iterable
        of text chunks (e.g. an open file). Counts are added to whatever the
        model already holds. Returns the number of transitions recorded.
        """
        window = ''
        transitions = 0
        for chunk in stream:
            for c in chunk:
                # still filling the first window
                if len(window) < self._window_length:
                    window += c
                    continue
                probs = self.window_map.get(window)
                if probs is None:
                    probs = CharDistribution()
                    self.window_map[window] = probs
                probs.record_occurrence(c)
                window = window[1:] + c
                transitions += 1

        if transitions == 0:
            logger.warning(
                f"Corpus too short for window length {self._window_length}; no transitions learned"
            )

        for probs in self.window_map.values():
            probs.normalize()
        logger.debug(f"Recorded {transitions} transitions over {len(self.window_map)} windows")
        return transitions

    def random_char(self, probs: CharDistribution) -> str:
        return probs.sample(self._generator)

    def generate(self, seed_text: str, target_length: int) -> str:
        """Extend `seed_text` by up to `target_length` sampled characters.

        The seed is returned unchanged when it is shorter than one window or
        its last window was never observed. Generation stops early, keeping
        what was produced so far, once it reaches a window with no recorded
        successors.
        """
        if len(seed_text) < self._window_length:
            return seed_text
        window = seed_text[len(seed_text) - self._window_length:]
        if window not in self.window_map:
            return seed_text

        generated = []
        while len(generated) < target_length:
            probs = self.window_map.get(window)
            if probs is None:
                break
            c = self.random_char(probs)
            generated.append(c)
            window = window[1:] + c
        return seed_text + ''.join(generated)

    def stats(self) -> dict:
        """Return basic statistics about the trained model."""
        if not self.window_map:
            return {
                "windows": 0,
                "total_transitions": 0,
                "avg_transitions_per_window": 0.0,
                "distinct_chars": 0,
            }

        total_transitions = sum(probs.total() for probs in self.window_map.values())
        chars = set()
        for window, probs in self.window_map.items():
            chars.update(window)
            chars.update(entry.char for entry in probs)
        return {
            "windows": len(self.window_map),
            "total_transitions": total_transitions,
            "avg_transitions_per_window": total_transitions / len(self.window_map),
            "distinct_chars": len(chars),
        }

    def __len__(self) -> int:
        return len(self.window_map)

    def __contains__(self, window: str) -> bool:
        return window in self.window_map

    def __str__(self) -> str:
        return ''.join(f"{window} : {probs}\n" for window, probs in self.window_map.items())
