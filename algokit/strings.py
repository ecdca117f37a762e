"""String algorithms: sliding windows, stacks and binary arithmetic."""

from __future__ import annotations

from collections import Counter
from itertools import zip_longest

_VOWELS = frozenset("aeiou")


def number_of_substrings(s: str) -> int:
    """Count substrings holding at least one of each of three distinct characters."""
    counts: Counter[str] = Counter()
    left = 0
    total = 0
    for right, char in enumerate(s):
        counts[char] += 1
        while len(counts) == 3 and left < right:
            total += len(s) - right
            outgoing = s[left]
            counts[outgoing] -= 1
            if counts[outgoing] == 0:
                del counts[outgoing]
            left += 1
    return total


def are_almost_equal(s1: str, s2: str) -> bool:
    """Return whether at most one swap within one string makes the strings equal."""
    if len(s1) != len(s2):
        raise ValueError("strings must have the same length")
    differing = [(a, b) for a, b in zip(s1, s2) if a != b]
    if len(differing) > 2:
        return False
    return Counter(a for a, _ in differing) == Counter(b for _, b in differing)


def remove_occurrences(s: str, part: str) -> str:
    """Repeatedly remove the leftmost occurrence of ``part`` until none is left."""
    if not part:
        raise ValueError("part must not be empty")
    kept: list[str] = []
    size = len(part)
    for char in s:
        kept.append(char)
        if len(kept) >= size and "".join(kept[-size:]) == part:
            del kept[-size:]
    return "".join(kept)


def minimum_recolors(blocks: str, k: int) -> int:
    """Return the fewest 'W' blocks to repaint to get ``k`` consecutive 'B' blocks."""
    if not 1 <= k <= len(blocks):
        raise ValueError("k must be between 1 and the number of blocks")
    whites = blocks[:k].count("W")
    best = whites
    for leaving, entering in zip(blocks, blocks[k:]):
        whites += (entering == "W") - (leaving == "W")
        best = min(best, whites)
    return best


def clear_digits(s: str) -> str:
    """Remove each digit together with the closest letter to its left."""
    kept: list[str] = []
    for char in s:
        if not char.isalpha() and kept and kept[-1].isalpha():
            kept.pop()
        else:
            kept.append(char)
    return "".join(kept)


def _at_least(word: str, k: int) -> int:
    vowels: Counter[str] = Counter()
    consonants = 0
    left = 0
    total = 0
    for right, char in enumerate(word):
        if char in _VOWELS:
            vowels[char] += 1
        else:
            consonants += 1
        while len(vowels) == 5 and consonants >= k:
            total += len(word) - right
            outgoing = word[left]
            if outgoing in _VOWELS:
                vowels[outgoing] -= 1
                if vowels[outgoing] == 0:
                    del vowels[outgoing]
            else:
                consonants -= 1
            left += 1
    return total


def count_of_substrings(word: str, k: int) -> int:
    """Count substrings holding every vowel and exactly ``k`` consonants."""
    return _at_least(word, k) - _at_least(word, k + 1)


def add_binary(a: str, b: str) -> str:
    """Add two binary strings, keeping the width of the longer one."""
    if set(a) - {"0", "1"} or set(b) - {"0", "1"}:
        raise ValueError("operands must be binary strings")
    carry = 0
    digits: list[str] = []
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        total = int(x) + int(y) + carry
        digits.append(str(total % 2))
        carry = total // 2
    if carry:
        digits.append("1")
    return "".join(reversed(digits))


def partition_labels(s: str) -> list[int]:
    """Split ``s`` into as many parts as possible with each character in one part only."""
    last = {char: index for index, char in enumerate(s)}
    sizes: list[int] = []
    start = 0
    end = 0
    for index, char in enumerate(s):
        end = max(end, last[char])
        if index == end:
            sizes.append(index - start + 1)
            start = index + 1
    return sizes