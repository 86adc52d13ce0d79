from concurrent.futures import ProcessPoolExecutor, as_completed
from contextlib import closing
from itertools import islice
import logging
import time
from typing import Iterable, Iterator, List, Sequence, Tuple, Union

from anagrammer.dictionary import DictionaryIndex
from anagrammer.occurrences import (
    Occurrences,
    combinations,
    sentence_occurrences,
    subtract,
)

logger = logging.getLogger(__name__)

Sentence = List[str]

_worker_index: Union[DictionaryIndex, None] = None
"""the index searched by a worker process, set once when the worker starts"""


def next_words(
    index: DictionaryIndex, remaining: Occurrences
) -> Iterator[Tuple[str, Occurrences]]:
    """Every word that can be placed using some of the `remaining` letters, paired
    with the letters that would be left over after placing it."""
    for sub in combinations(remaining):
        if not sub:
            # placing nothing makes no progress
            continue
        words = index.get(sub)
        if not words:
            continue
        rest = subtract(remaining, sub)
        for word in words:
            yield word, rest


def search(
    index: DictionaryIndex,
    chosen: Tuple[str, ...],
    remaining: Occurrences,
    deadline: Union[float, None] = None,
) -> Iterator[Sentence]:
    """Depth first enumeration of every way to finish the sentence `chosen` so that
    it uses up exactly the `remaining` letters.

    If a `deadline` (as returned by `time.time()`) is given, the enumeration quietly
    ends once it has passed, whether or not anything was found.
    """
    if deadline is not None and time.time() > deadline:
        return
    if not remaining:
        yield list(chosen)
        return
    for word, rest in next_words(index, remaining):
        yield from search(index, chosen + (word,), rest, deadline)


def load_worker_index(index: DictionaryIndex) -> None:
    global _worker_index
    _worker_index = index


def expand_branch(
    chosen: Tuple[str, ...],
    remaining: Occurrences,
    max_results: Union[int, None],
    deadline: Union[float, None],
) -> List[Sentence]:
    """Search below the partial sentence `chosen` in a worker process, stopping after
    `max_results` sentences or at the `deadline`."""
    return list(
        islice(search(_worker_index, chosen, remaining, deadline), max_results)
    )


def sentence_anagrams(
    sentence: Sequence[str], index: DictionaryIndex
) -> Iterator[Sentence]:
    """Lazily produce every sentence of dictionary words that uses exactly the
    letters of `sentence`.

    The number and length of words may differ from the original. The same words in a
    different order are a different anagram. The empty sentence has exactly one
    anagram, the empty sentence.

    Args:
        sentence (`Sequence[str]`) - the words to rearrange
        index (`DictionaryIndex`) - the dictionary words may be drawn from

    Returns:
        a generator of sentences, each a new list of words
    """
    return search(index, (), sentence_occurrences(sentence))


class Solver:
    """Finds anagram sentences against a fixed vocabulary.

    Args:
        vocabulary (`Iterable[str]`) - the words anagrams may be made of
        max_results (`int`) - stop solving after this many anagrams. Unbounded if None
        max_time (`float`) - stop solving after this many seconds, even if nothing
            has been found. Unbounded if None
        workers (`int`) - number of processes to spread the search over. The search
            runs in this process if None or 1
    """

    def __init__(
        self,
        vocabulary: Iterable[str],
        max_results: Union[int, None] = None,
        max_time: Union[float, None] = None,
        workers: Union[int, None] = None,
    ):
        if max_results is not None and max_results < 0:
            raise ValueError(f"max_results must not be negative, got {max_results}")
        if workers is not None and workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")

        self.index = DictionaryIndex(vocabulary)
        logger.info(
            f"indexed vocab ({self.index.word_count} words, "
            f"{len(self.index)} distinct signatures)"
        )
        self.max_results = max_results
        self.max_time = max_time
        self.workers = workers

    def word_anagrams(self, word: str) -> List[str]:
        return self.index.word_anagrams(word)

    def sentence_anagrams(self, sentence: Sequence[str]) -> Iterator[Sentence]:
        return sentence_anagrams(sentence, self.index)

    def solve(self, sentence: Sequence[str]) -> List[Sentence]:
        """Collect the anagrams of `sentence`, honoring `max_results` and `max_time`.

        Args:
            sentence (`Sequence[str]`) - the words to rearrange

        Returns:
            A list of anagram sentences, in no particular order
        """
        start_time = time.time()
        deadline = None
        if self.max_time is not None:
            deadline = start_time + self.max_time

        if self.workers is None or self.workers == 1:
            remaining = sentence_occurrences(sentence)
            results = search(self.index, (), remaining, deadline)
        else:
            results = self.fan_out(sentence, deadline)

        found = []
        with closing(results):
            while True:
                if self.max_results is not None and len(found) >= self.max_results:
                    logger.info("Found %d anagrams, stopping.", self.max_results)
                    break

                try:
                    found.append(next(results))
                except StopIteration:
                    break

        if deadline is not None and time.time() > deadline:
            logger.info("Timeout after %d seconds, stopping.", self.max_time)

        logger.info(
            "Found %d anagrams of '%s' (%d letters) in %.2f seconds",
            len(found),
            " ".join(sentence),
            sentence_occurrences(sentence).total(),
            time.time() - start_time,
        )
        return found

    def fan_out(
        self, sentence: Sequence[str], deadline: Union[float, None] = None
    ) -> Iterator[Sentence]:
        """Search below each first word choice in a pool of worker processes.

        Every first word is its own unit of work, and each unit stops by itself after
        `max_results` sentences or at the `deadline`. Closing the generator cancels the
        units that have not started and does not wait for the running ones.
        """
        remaining = sentence_occurrences(sentence)
        if not remaining:
            yield []
            return

        branches = [((w,), rest) for w, rest in next_words(self.index, remaining)]
        if not branches:
            return
        workers = min(self.workers, len(branches))
        logger.debug(
            "searching %d first words across %d workers", len(branches), workers
        )

        executor = ProcessPoolExecutor(
            max_workers=workers,
            initializer=load_worker_index,
            initargs=(self.index,),
        )
        try:
            futures = [
                executor.submit(
                    expand_branch, chosen, rest, self.max_results, deadline
                )
                for chosen, rest in branches
            ]
            for future in as_completed(futures):
                yield from future.result()
                if deadline is not None and time.time() > deadline:
                    break
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

    def compute_valid_vocab(self, remaining: Occurrences) -> Iterator[str]:
        """Lazily compute the vocabulary words that can be placed with the remaining
        letters.

        Args:
            remaining (`Occurrences`) - the letters available for making new words

        Returns:
            a generator of valid words from the Solver's vocabulary
        """
        for word, _ in next_words(self.index, remaining):
            yield word
