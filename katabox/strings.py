"""String puzzles: segmentation, equivalence classes, tags and the like."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable
from string import ascii_lowercase

_TAG_LIMIT = 100


def _segmentable(text: str, vocabulary: set[str]) -> bool:
    """Tell whether ``text`` splits into pieces that are all in ``vocabulary``."""
    reachable = [True] + [False] * len(text)
    for end in range(1, len(text) + 1):
        reachable[end] = any(
            reachable[start] and text[start:end] in vocabulary
            for start in range(end)
        )
    return reachable[-1]


def word_break(s: str, words: Iterable[str]) -> bool:
    """Tell whether ``s`` is a concatenation of words from ``words``."""
    return _segmentable(s, set(words))


def concatenated_words(words: list[str]) -> list[str]:
    """Return, in input order, the words made up entirely of other words."""
    vocabulary = set(words)
    found = []
    for word in words:
        vocabulary.discard(word)
        if _segmentable(word, vocabulary):
            found.append(word)
        vocabulary.add(word)
    return found


def smallest_equivalent_string(s1: str, s2: str, base: str) -> str:
    """Map each letter of ``base`` to the smallest letter equivalent to it.

    ``s1[i]`` and ``s2[i]`` are declared equivalent; equivalence is
    reflexive, symmetric and transitive. Only lowercase ASCII letters are
    accepted.
    """
    if len(s1) != len(s2):
        raise ValueError("equivalence strings must have the same length")
    invalid = set(s1 + s2 + base) - set(ascii_lowercase)
    if invalid:
        raise ValueError(f"not lowercase letters: {''.join(sorted(invalid))}")

    parent = {letter: letter for letter in ascii_lowercase}

    def find(letter: str) -> str:
        while parent[letter] != letter:
            parent[letter] = parent[parent[letter]]
            letter = parent[letter]
        return letter

    for a, b in zip(s1, s2):
        root_a, root_b = find(a), find(b)
        if root_a != root_b:
            low, high = sorted((root_a, root_b))
            parent[high] = low

    return "".join(find(letter) for letter in base)


def clear_stars(s: str) -> str:
    """Remove every ``*`` together with the smallest character left of it.

    Among equal smallest characters the rightmost one is removed.
    """
    heap: list[tuple[str, int]] = []
    removed: set[int] = set()
    for index, char in enumerate(s):
        if char == "*":
            if not heap:
                raise ValueError(f"no character left to remove at position {index}")
            _, negated = heapq.heappop(heap)
            removed.update((index, -negated))
        else:
            heapq.heappush(heap, (char, -index))
    return "".join(char for index, char in enumerate(s) if index not in removed)


def largest_box_string(word: str, num_friends: int) -> str:
    """Return the largest piece over all splits of ``word`` into non-empty parts.

    ``word`` is split into exactly ``num_friends`` non-empty pieces in every
    possible way; the lexicographically largest piece seen is returned.
    """
    if num_friends == 1:
        return word
    if not 1 <= num_friends <= len(word):
        raise ValueError("number of friends must be between 1 and the word length")
    longest = len(word) - num_friends + 1
    return max(word[start:start + longest] for start in range(len(word)))


def max_parity_difference(s: str) -> int:
    """Largest odd letter frequency minus smallest even letter frequency."""
    counts = Counter(s).values()
    odd = [count for count in counts if count % 2]
    even = [count for count in counts if not count % 2]
    if not odd or not even:
        raise ValueError("need at least one odd and one even letter frequency")
    return max(odd) - min(even)


def generate_tag(caption: str) -> str:
    """Turn a caption into a camel-case hashtag of at most 100 characters.

    Only ASCII letters are kept; a letter that follows a space is upper-cased,
    every other letter lower-cased, and the first letter is always lower case.
    """
    letters = []
    capitalize = False
    for char in caption:
        if char == " ":
            capitalize = True
            continue
        if not (char.isascii() and char.isalpha()):
            continue
        letters.append(char.upper() if capitalize else char.lower())
        capitalize = False
    tag = ("#" + "".join(letters))[:_TAG_LIMIT]
    return tag[:1] + tag[1:2].lower() + tag[2:]