from __future__ import annotations

import logging
from bisect import bisect_left

logger = logging.getLogger("boggle")


class ConfigurationError(ValueError):
    """The legal-word vocabulary (or the index built from it) is unusable."""


class DictionaryIndex:
    """Legal words bucketed by first letter, each bucket kept sorted.

    Matching a word removes it from its bucket (consume-once), and a bucket
    that runs dry is dropped from the map. Use ``copy()`` to get a fresh index
    per solve when the same vocabulary must be searched more than once.
    """

    def __init__(self):
        self._buckets: dict[str, list[str]] | None = None

    @classmethod
    def build(cls, words, presorted: bool = True) -> DictionaryIndex:
        index = cls()
        index._buckets = _group_by_first_letter(words, presorted)
        logger.info("Dictionary index built: %d words, %d letters",
                    len(index), len(index._buckets))
        return index

    def copy(self) -> DictionaryIndex:
        clone = DictionaryIndex()
        clone._buckets = {ch: list(words) for ch, words in self._require().items()}
        return clone

    def _require(self) -> dict[str, list[str]]:
        if self._buckets is None:
            raise ConfigurationError("Dictionary index has not been built")
        return self._buckets

    def __len__(self) -> int:
        return sum(len(words) for words in self._require().values())

    def letters(self) -> list[str]:
        return sorted(self._require())

    def is_exhausted(self, leading: str) -> bool:
        return leading not in self._require()

    def has_prefix(self, leading: str, prefix: str) -> bool:
        words = self._require().get(leading)
        if not words:
            return False
        # First entry >= prefix is the smallest word that could start with it
        i = bisect_left(words, prefix)
        return i < len(words) and words[i].startswith(prefix)

    def try_consume_exact(self, leading: str, word: str) -> bool:
        buckets = self._require()
        words = buckets.get(leading)
        if not words:
            return False
        i = bisect_left(words, word)
        if i == len(words) or words[i] != word:
            return False
        del words[i]
        if not words:
            del buckets[leading]
            logger.debug("Bucket '%s' exhausted", leading)
        return True


def _group_by_first_letter(words, presorted: bool) -> dict[str, list[str]]:
    """Validate the vocabulary and split it into per-letter buckets.

    Nothing is returned until every word has been checked, so a bad vocabulary
    never yields a half-built index.
    """
    words = list(words)
    for pos, word in enumerate(words):
        if not isinstance(word, str) or not word:
            raise ConfigurationError(f"Empty or non-string word at position {pos}: {word!r}")
        if word != word.lower():
            raise ConfigurationError(f"Word at position {pos} is not lowercase: {word!r}")

    if presorted:
        for pos in range(1, len(words)):
            if words[pos] < words[pos - 1]:
                raise ConfigurationError(
                    f"Words not sorted: {words[pos]!r} (position {pos}) "
                    f"comes after {words[pos - 1]!r}"
                )
    else:
        words.sort()

    buckets: dict[str, list[str]] = {}
    previous = None
    for word in words:
        if word == previous:
            continue
        # Sorted input means each letter's words arrive contiguously
        buckets.setdefault(word[0], []).append(word)
        previous = word
    return buckets
