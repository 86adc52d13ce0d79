import logging
from os import PathLike
from typing import Dict, Iterable, List, Tuple, Union

from .occurrences import Occurrences, word_occurrences

logger = logging.getLogger(__name__)


def load_dictionary(path: Union[str, PathLike[str]]) -> List[str]:
    """Read a word list with one word per line. Surrounding whitespace is stripped
    and blank lines are skipped.

    Args:
        path (`str`) - path to a UTF-8 encoded word list
    """
    with open(path, encoding="utf-8") as stream:
        words = [line.strip() for line in stream]
    words = [w for w in words if w != ""]
    logger.info(f"loaded dictionary from {path} ({len(words)} words)")
    return words


class DictionaryIndex:
    """Every word of a dictionary, grouped by its occurrence list.

    Words keep the case they have in the dictionary, but are grouped on their
    lowercase letters, so "Sean" and "sane" end up together. Duplicates in the
    dictionary are kept. The index is built once and never changes afterwards.

    Args:
        words (`Iterable[str]`) - the dictionary
    """

    def __init__(self, words: Iterable[str]):
        grouped: Dict[Occurrences, List[str]] = {}
        count = 0
        for word in words:
            grouped.setdefault(word_occurrences(word), []).append(word)
            count += 1
        self._index: Dict[Occurrences, Tuple[str, ...]] = {
            key: tuple(group) for key, group in grouped.items()
        }
        self.word_count = count

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, occurrences: object) -> bool:
        return occurrences in self._index

    def get(self, occurrences: Occurrences) -> Tuple[str, ...]:
        """The words whose letters are exactly `occurrences`, or an empty tuple"""
        return self._index.get(occurrences, ())

    def word_anagrams(self, word: str) -> List[str]:
        """All the dictionary words made of exactly the letters of `word`. `word` does
        not need to be in the dictionary itself."""
        return list(self.get(word_occurrences(word)))
