"""Per-window next-character frequency distributions."""

from typing import Dict, Iterator, List, Optional

import torch


class CharData:
    """A single observed character with its count and derived probabilities."""

    __slots__ = ('char', 'count', 'p', 'cp')

    def __init__(self, char: str):
        self.char = char
        self.count = 1
        self.p = 0.0
        self.cp = 0.0

    def __repr__(self) -> str:
        return f"CharData({self.char!r}, count={self.count}, p={self.p}, cp={self.cp})"

    def __str__(self) -> str:
        return f"({self.char} {self.count} {self.p} {self.cp})"


class CharDistribution:
    """Ordered multiset of next characters observed after one window.

    Entries keep their observation order. Cumulative probabilities are
    computed over that order, and sampling scans it the same way.
    """

    def __init__(self):
        self._entries: Dict[str, CharData] = {}

    def record_occurrence(self, ch: str) -> None:
        """Increment the count of `ch`, creating its entry on first sight."""
        entry = self._entries.get(ch)
        if entry is None:
            self._entries[ch] = CharData(ch)
        else:
            entry.count += 1

    def total(self) -> int:
        return sum(entry.count for entry in self._entries.values())

    def normalize(self) -> None:
        """Recompute p and cp for every entry from the current counts."""
        total = self.total()
        if total == 0:
            return
        running = 0.0
        for entry in self._entries.values():
            entry.p = entry.count / total
            running += entry.p
            entry.cp = running

    def sample(self, generator: torch.Generator) -> str:
        """Draw a character according to the cumulative probabilities.

        Args:
            generator: Random source used for the uniform draw in [0, 1)

        If rounding leaves the last cp just under the draw, the last
        entry's character is returned.
        """
        if not self._entries:
            raise ValueError("Cannot sample from an empty distribution")
        r = torch.rand((), generator=generator).item()
        entry = None
        for entry in self._entries.values():
            if entry.cp > r:
                return entry.char
        return entry.char

    def find(self, ch: str) -> Optional[CharData]:
        return self._entries.get(ch)

    def index_of(self, ch: str) -> int:
        """Position of `ch` in the entry order, or -1 if absent."""
        for i, entry in enumerate(self._entries.values()):
            if entry.char == ch:
                return i
        return -1

    def get(self, index: int) -> CharData:
        """Entry at `index`; negative indices are not supported."""
        if index < 0 or index >= len(self._entries):
            raise IndexError(f"Index {index} out of range for distribution of size {len(self._entries)}")
        for i, entry in enumerate(self._entries.values()):
            if i == index:
                return entry

    def remove(self, ch: str) -> bool:
        """Drop the entry for `ch`. Probabilities are stale until normalize()."""
        return self._entries.pop(ch, None) is not None

    def size(self) -> int:
        return len(self._entries)

    def to_list(self) -> List[CharData]:
        return list(self._entries.values())

    def __getitem__(self, index: int) -> CharData:
        return self.get(index)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CharData]:
        return iter(self._entries.values())

    def __contains__(self, ch: str) -> bool:
        return ch in self._entries

    def __str__(self) -> str:
        return ''.join(str(entry) for entry in self._entries.values())
