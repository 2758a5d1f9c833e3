"""Ledger entities: path pairs, batches and the history stack."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class PathPair:
    """One completed relocation of a single file."""

    original: Path
    staged: Path

    def to_json(self) -> list[str]:
        """Serialize as a ``[original, staged]`` pair."""
        return [str(self.original), str(self.staged)]

    @classmethod
    def from_json(cls, data: Iterable[str]) -> "PathPair":
        original, staged = data
        return cls(original=Path(original), staged=Path(staged))


@dataclass
class Batch:
    """
    Ordered relocations produced by one remove or undo invocation.

    A batch grows while relocations succeed and is frozen once it is pushed
    onto a History.
    """

    pairs: list[PathPair] = field(default_factory=list)
    frozen: bool = field(default=False, compare=False, repr=False)

    def append(self, pair: PathPair) -> None:
        if self.frozen:
            raise ValueError("Cannot modify a batch that is already in history")
        self.pairs.append(pair)

    def freeze(self) -> "Batch":
        self.frozen = True
        return self

    def __len__(self) -> int:
        return len(self.pairs)

    def __iter__(self) -> Iterator[PathPair]:
        return iter(self.pairs)

    def __getitem__(self, index: int) -> PathPair:
        return self.pairs[index]

    def to_json(self) -> list[list[str]]:
        return [pair.to_json() for pair in self.pairs]

    @classmethod
    def from_json(cls, data: Iterable[Iterable[str]]) -> "Batch":
        return cls(pairs=[PathPair.from_json(item) for item in data])


class History:
    """
    LIFO stack of batches, the sole source of truth for undo.

    The top of the stack is the most recent invocation. Batches are only
    pushed and popped at the top.
    """

    def __init__(self, batches: Iterable[Batch] | None = None):
        """
        Initialize the history.

        Args:
            batches: Batches ordered from oldest to newest
        """
        self._batches: list[Batch] = [batch.freeze() for batch in batches or []]

    def push(self, batch: Batch) -> None:
        """Add a batch to the top of the stack and freeze it."""
        self._batches.append(batch.freeze())

    def pop(self) -> Batch | None:
        """
        Remove and return the most recent batch.

        Returns:
            The top batch, or None if history is empty
        """
        if not self._batches:
            return None
        return self._batches.pop()

    def peek(self) -> Batch | None:
        """Return the most recent batch without removing it."""
        return self._batches[-1] if self._batches else None

    def is_empty(self) -> bool:
        return not self._batches

    def __len__(self) -> int:
        return len(self._batches)

    def __iter__(self) -> Iterator[Batch]:
        """Iterate over batches from oldest to newest."""
        return iter(self._batches)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, History):
            return NotImplemented
        return self._batches == other._batches

    def to_json(self) -> list[list[list[str]]]:
        return [batch.to_json() for batch in self._batches]

    @classmethod
    def from_json(cls, data: Iterable[Iterable[Iterable[str]]]) -> "History":
        return cls(Batch.from_json(batch) for batch in data)
