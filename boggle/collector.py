from bisect import insort


class ResultCollector:
    """Found words, kept in ascending order with no repeats."""

    def __init__(self):
        self._words: list[str] = []
        self._seen: set[str] = set()

    def insert(self, word: str) -> bool:
        if word in self._seen:
            return False
        self._seen.add(word)
        insort(self._words, word)
        return True

    def export(self) -> list[str]:
        return list(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: str) -> bool:
        return word in self._seen
