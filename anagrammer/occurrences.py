from collections import Counter
from itertools import product
from typing import Iterable, List, Self, Sequence, Tuple

Pair = Tuple[str, int]


class PreconditionViolation(ValueError):
    """Raised when an occurrence list is subtracted from one that does not contain
    it. The search never does this, so seeing one means a caller is broken."""


class Occurrences(tuple):
    """The letters of a word or sentence as a sorted tuple of `(letter, count)`
    pairs.

    Letters are single lowercase alphabetic characters, each appearing at most once,
    in strictly ascending order. Counts are positive integers: a letter that does not
    occur is left out rather than recorded with a count of zero. Instances are
    immutable and hashable, so two words with equal occurrences are anagrams of each
    other and either can be used to look the other up.

    Args:
        pairs (`Iterable[Tuple[str, int]]`) - already sorted, zero-free pairs. Use
            `word_occurrences` or `sentence_occurrences` to build one from text.

    Raises:
        ValueError: if `pairs` is not a valid occurrence list
    """

    def __new__(cls, pairs: Iterable[Pair] = ()) -> Self:
        self = super().__new__(cls, (tuple(p) for p in pairs))
        previous = None
        for pair in self:
            if len(pair) != 2:
                raise ValueError(f"Expected a (letter, count) pair, got {pair!r}")
            letter, count = pair
            if not (
                isinstance(letter, str)
                and len(letter) == 1
                and letter.isalpha()
                and letter == letter.lower()
            ):
                raise ValueError(f"'{letter}' is not a lowercase letter")
            if isinstance(count, bool) or not isinstance(count, int) or count < 1:
                raise ValueError(f"Count for '{letter}' must be a positive int")
            if previous is not None and letter <= previous:
                raise ValueError(f"'{letter}' is out of order or repeated")
            previous = letter
        return self

    def __repr__(self) -> str:
        return f"Occurrences({tuple(self)!r})"

    def __add__(self, other: Iterable[Pair]) -> "Occurrences":
        return merge(self, other)

    def __sub__(self, other: Iterable[Pair]) -> "Occurrences":
        return subtract(self, other)

    def total(self) -> int:
        return sum(count for _, count in self)


def _from_counter(counts: Counter) -> Occurrences:
    return Occurrences(sorted((c, n) for c, n in counts.items() if n != 0))


def word_occurrences(word: str) -> Occurrences:
    """Count the letters in `word`, ignoring case and anything that is not a letter.

    >>> word_occurrences("Abcd")
    Occurrences((('a', 1), ('b', 1), ('c', 1), ('d', 1)))
    """
    return _from_counter(Counter(c for c in word.lower() if c.isalpha()))


def sentence_occurrences(sentence: Sequence[str]) -> Occurrences:
    """Count the letters of every word in `sentence` together. Word boundaries are
    not preserved."""
    return word_occurrences("".join(sentence))


def subtract(x: Iterable[Pair], y: Iterable[Pair]) -> Occurrences:
    """Remove the letters of `y` from `x`.

    Args:
        x (`Occurrences`) - the letters to remove from
        y (`Occurrences`) - the letters to remove, which must all be present in `x`
            at least as many times as they appear in `y`

    Raises:
        PreconditionViolation: if `y` is not a sub-multiset of `x`
    """
    remaining = dict(x)
    for letter, count in y:
        available = remaining.get(letter, 0)
        if count > available:
            raise PreconditionViolation(
                f"Cannot remove {count} of '{letter}' from {available}"
            )
        remaining[letter] = available - count
    return _from_counter(Counter(remaining))


def merge(x: Iterable[Pair], y: Iterable[Pair]) -> Occurrences:
    """Add the letters of `x` and `y` together."""
    total = Counter(dict(x))
    total.update(dict(y))
    return _from_counter(total)


def combinations(occurrences: Iterable[Pair]) -> List[Occurrences]:
    """List every sub-multiset of `occurrences`, from the empty occurrence list up
    to and including `occurrences` itself.

    Each letter is independently taken between 0 and its full count times, so a list
    with counts c1..ck has (c1 + 1) * ... * (ck + 1) sub-multisets.

    >>> len(combinations(word_occurrences("abba")))
    9
    """
    pairs = list(occurrences)
    choices = [range(count + 1) for _, count in pairs]
    return [
        Occurrences(
            (letter, n) for (letter, _), n in zip(pairs, counts, strict=True) if n
        )
        for counts in product(*choices)
    ]
