from dataclasses import dataclass
from typing import Iterator, Optional

from textgen.analytics.stats import cumulative, search_cumulative


@dataclass
class CharCount:
    char: str
    count: int = 1
    p: float = 0.0
    cp: float = 0.0

    def __str__(self) -> str:
        return f"({self.char} {self.count} {self.p} {self.cp})"


class DistributionTable:
    """
    Counts of the characters seen after one context window.

    Entries are unique by character and kept in first-seen order. After
    normalize() every entry carries its probability p and the cumulative
    probability cp, so a single uniform draw picks a character via sample().
    """

    def __init__(self):
        self.entries: list[CharCount] = []

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[CharCount]:
        return iter(self.entries)

    def __contains__(self, char: str) -> bool:
        return self.index_of(char) != -1

    def __getitem__(self, index: int) -> CharCount:
        # no negative indexing: positions are 0..len-1 only
        if index < 0 or index >= len(self.entries):
            raise IndexError(f"index {index} out of range for table of size {len(self.entries)}")
        return self.entries[index]

    def __str__(self) -> str:
        if not self.entries:
            return "()"
        return " ".join(str(e) for e in self.entries)

    def first(self) -> Optional[CharCount]:
        return self.entries[0] if self.entries else None

    def index_of(self, char: str) -> int:
        for i, e in enumerate(self.entries):
            if e.char == char:
                return i
        return -1

    def record_occurrence(self, char: str) -> None:
        """Increment the count for char, appending a new entry on first sight."""
        i = self.index_of(char)
        if i == -1:
            self.entries.append(CharCount(char))
        else:
            self.entries[i].count += 1

    def remove(self, char: str) -> bool:
        i = self.index_of(char)
        if i == -1:
            return False
        del self.entries[i]
        return True

    def total(self) -> int:
        return sum(e.count for e in self.entries)

    def to_list(self) -> list[CharCount]:
        return list(self.entries)

    def normalize(self) -> None:
        t = self.total()
        if t == 0:
            for e in self.entries:
                e.p = 0.0
                e.cp = 0.0
            return
        for e in self.entries:
            e.p = e.count / t
        cps = cumulative([e.p for e in self.entries])
        for e, cp in zip(self.entries, cps):
            e.cp = cp

    def sample(self, r: float) -> str:
        """Character for a uniform draw r in [0, 1)."""
        i = search_cumulative([e.cp for e in self.entries], r)
        return self.entries[i].char
