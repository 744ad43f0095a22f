from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass

from boggle.collector import ResultCollector
from boggle.dictionary import ConfigurationError, DictionaryIndex
from boggle.metrics import SearchStats

logger = logging.getLogger("boggle")


class BoardSizeMismatch(ValueError):
    """Board dimensions do not agree with the number of letters supplied."""


def neighbors(index: int, width: int, height: int) -> list[int]:
    """Row-major indexes of the up-to-8 cells touching *index*, clipped at the edges."""
    r, c = divmod(index, width)
    adj = []
    for dr in (-1, 0, 1):
        for dc in (-1, 0, 1):
            if dr == 0 and dc == 0:
                continue
            nr, nc = r + dr, c + dc
            if 0 <= nr < height and 0 <= nc < width:
                adj.append(nr * width + nc)
    return adj


@dataclass(frozen=True)
class SolveContext:
    """Everything about one board that stays fixed while it is being solved."""

    width: int
    height: int
    cells: str
    adjacency: tuple[tuple[int, ...], ...]
    min_length: int = 3

    @classmethod
    def create(cls, width: int, height: int, letters, min_length: int = 3) -> SolveContext:
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise BoardSizeMismatch(f"Board {name} must be a positive integer, got {value!r}")
        letters = list(letters)
        if len(letters) != width * height:
            raise BoardSizeMismatch(
                f"Number of letters ({len(letters)}) does not match board size "
                f"{width}x{height} ({width * height})"
            )
        for i, ch in enumerate(letters):
            if not isinstance(ch, str) or len(ch) != 1:
                raise BoardSizeMismatch(f"Board cell {i} must be a single character, got {ch!r}")
        cells = "".join(_fold(ch) for ch in letters)
        adjacency = tuple(tuple(neighbors(i, width, height)) for i in range(width * height))
        return cls(width, height, cells, adjacency, min_length)


def _fold(ch: str) -> str:
    # Lowercasing may expand a character (e.g. "İ"); keep one cell, one character
    lower = ch.lower()
    return lower if len(lower) == 1 else ch


class _Search:
    """Depth-first walk over one board, consuming words from *index* as they are found.

    The walk keeps its own stack of neighbor iterators, so path length is not
    limited by the interpreter's recursion depth.
    """

    def __init__(self, ctx: SolveContext, index: DictionaryIndex, stats: SearchStats):
        self.ctx = ctx
        self.index = index
        self.stats = stats
        self.collector = ResultCollector()
        self.used = [False] * len(ctx.cells)
        self.trail: list[int] = []
        self.path: list[str] = []

    def _enter(self, cell: int):
        self.used[cell] = True
        self.trail.append(cell)
        self.path.append(self.ctx.cells[cell])

    def _leave(self):
        cell = self.trail.pop()
        self.path.pop()
        self.used[cell] = False

    @contextmanager
    def _on_path(self, cell: int):
        """Start a path at *cell*; every cell added inside the block is released on exit."""
        depth = len(self.trail)
        self._enter(cell)
        try:
            yield
        finally:
            while len(self.trail) > depth:
                self._leave()

    def run(self) -> list[str]:
        for start in range(len(self.ctx.cells)):
            leading = self.ctx.cells[start]
            if self.index.is_exhausted(leading):
                self.stats.starts_skipped += 1
                continue
            self.stats.starts += 1
            with self._on_path(start):
                if self.ctx.min_length <= 1 and self._match(leading, leading):
                    continue
                self._extend(start, leading)
        return self.collector.export()

    def _match(self, leading: str, word: str) -> bool:
        """Record *word* if it is still in the index. True if its bucket is now empty."""
        if self.index.try_consume_exact(leading, word):
            self.collector.insert(word)
            self.stats.words_found += 1
            return self.index.is_exhausted(leading)
        return False

    def _extend(self, start: int, leading: str):
        """Grow paths from *start* until every branch is pruned.

        Stops early once every word starting with *leading* has been found.
        Cells still on the path at that point are released by ``_on_path``.
        """
        stack = [iter(self.ctx.adjacency[start])]
        while stack:
            nxt = next(stack[-1], None)
            if nxt is None:
                stack.pop()
                if stack:
                    self._leave()
                continue
            if self.used[nxt]:
                continue
            self._enter(nxt)
            candidate = "".join(self.path)
            self.stats.prefix_queries += 1
            if not self.index.has_prefix(leading, candidate):
                self.stats.pruned += 1
                self._leave()
                continue
            if len(candidate) >= self.ctx.min_length and self._match(leading, candidate):
                return
            stack.append(iter(self.ctx.adjacency[nxt]))


def solve(width: int, height: int, letters, index: DictionaryIndex,
          min_length: int = 3, stats: SearchStats | None = None) -> list[str]:
    """Find every word of *index* that can be traced on the board.

    Paths move between horizontally, vertically or diagonally adjacent cells
    and never reuse a cell. Found words are removed from *index*.

    Returns the words in ascending order, each once. Raises BoardSizeMismatch
    when *letters* does not fill a *width* x *height* board.
    """
    if min_length < 1:
        raise ConfigurationError(f"Minimum word length must be at least 1, got {min_length}")
    ctx = SolveContext.create(width, height, letters, min_length)
    stats = stats if stats is not None else SearchStats()
    words = _Search(ctx, index, stats).run()
    stats.log()
    return words


class Boggle:
    """Configure a vocabulary once, then solve any number of boards against it."""

    def __init__(self, min_length: int = 3):
        self.min_length = min_length
        self.last_error: BoardSizeMismatch | None = None
        self._index: DictionaryIndex | None = None

    @property
    def configured(self) -> bool:
        return self._index is not None

    @property
    def word_count(self) -> int:
        return len(self._index) if self._index is not None else 0

    def configure(self, words, presorted: bool = True) -> int:
        # Build first so a bad vocabulary leaves the previous one in place
        index = DictionaryIndex.build(words, presorted=presorted)
        self._index = index
        return len(index)

    def solve(self, width: int, height: int, letters, min_length: int | None = None,
              stats: SearchStats | None = None) -> list[str]:
        """Solve one board against a fresh copy of the configured words.

        Raises BoardSizeMismatch instead of returning an empty list.
        """
        if self._index is None:
            raise ConfigurationError("No legal words configured; call configure() first")
        if min_length is None:
            min_length = self.min_length
        words = solve(width, height, letters, self._index.copy(), min_length, stats)
        logger.info("Board %dx%d solved: %d words", width, height, len(words))
        return words

    def solve_board(self, width: int, height: int, letters,
                    stats: SearchStats | None = None) -> list[str]:
        self.last_error = None
        try:
            return self.solve(width, height, letters, stats=stats)
        except BoardSizeMismatch as e:
            logger.warning("Board size mismatch: %s", e)
            self.last_error = e
            return []
