"""Enumeration and backtracking over sequences, strings and digits."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator, Sequence
from functools import reduce
from itertools import combinations, islice, product
from operator import xor

_HAPPY_LETTERS = "abc"
_MAX_PATTERN = 8


def num_tile_possibilities(tiles: str) -> int:
    """Count the distinct non-empty sequences that can be spelled with ``tiles``."""
    counts = Counter(tiles)
    letters = list(counts)

    def extend() -> int:
        total = 0
        for letter in letters:
            if counts[letter]:
                counts[letter] -= 1
                total += 1 + extend()
                counts[letter] += 1
        return total

    return extend()


def _happy_strings(n: int, prefix: str = "") -> Iterator[str]:
    if len(prefix) == n:
        yield prefix
        return
    for letter in _HAPPY_LETTERS:
        if not prefix or prefix[-1] != letter:
            yield from _happy_strings(n, prefix + letter)


def get_happy_string(n: int, k: int) -> str:
    """Return the ``k``-th (1-based) happy string of length ``n``, or "" if there is none.

    A happy string uses only 'a', 'b' and 'c' with no two equal neighbours.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if k < 1:
        return ""
    return next(islice(_happy_strings(n), k - 1, None), "")


def construct_distanced_sequence(n: int) -> list[int]:
    """Return the lexicographically largest sequence where 1 occurs once and each
    ``i`` in 2..n occurs twice, exactly ``i`` positions apart."""
    if n < 1:
        raise ValueError("n must be at least 1")
    size = 2 * n - 1
    result = [0] * size
    used = [False] * (n + 1)

    def place(index: int) -> bool:
        while index < size and result[index]:
            index += 1
        if index == size:
            return True
        for value in range(n, 0, -1):
            if used[value]:
                continue
            partner = index + value if value > 1 else index
            if value > 1 and (partner >= size or result[partner]):
                continue
            result[index] = result[partner] = value
            used[value] = True
            if place(index + 1):
                return True
            result[index] = result[partner] = 0
            used[value] = False
        return False

    place(0)
    return result


def subset_xor_sum(nums: Sequence[int]) -> int:
    """Return the sum of the XOR totals of every subset of ``nums``."""
    return sum(
        reduce(xor, subset, 0)
        for size in range(len(nums) + 1)
        for subset in combinations(nums, size)
    )


def find_different_binary_string(nums: Sequence[str]) -> str:
    """Return the smallest binary string of length ``len(nums)`` not in ``nums``."""
    seen = set(nums)
    for bits in product("01", repeat=len(nums)):
        candidate = "".join(bits)
        if candidate not in seen:
            return candidate
    return ""


def smallest_number(pattern: str) -> str:
    """Return the smallest string of distinct digits 1-9 following an I/D pattern."""
    if set(pattern) - {"I", "D"}:
        raise ValueError("pattern may hold only 'I' and 'D'")
    if len(pattern) > _MAX_PATTERN:
        raise ValueError("pattern is too long for distinct digits 1-9")
    digits: list[str] = []
    pending: list[str] = []
    for position in range(len(pattern) + 1):
        pending.append(str(position + 1))
        if position == len(pattern) or pattern[position] == "I":
            digits.extend(reversed(pending))
            pending.clear()
    return "".join(digits)


def _splits_to(digits: str, target: int) -> bool:
    if target < 0:
        return False
    if not digits:
        return target == 0
    return any(
        _splits_to(digits[cut:], target - int(digits[:cut]))
        for cut in range(1, len(digits) + 1)
    )


def punishment_number(n: int) -> int:
    """Sum ``i * i`` over 1..n where the decimal square splits into parts summing to ``i``."""
    return sum(i * i for i in range(1, n + 1) if _splits_to(str(i * i), i))


def check_powers_of_three(n: int) -> bool:
    """Return whether ``n`` is a sum of distinct powers of three."""
    if n < 0:
        return False
    while n:
        n, digit = divmod(n, 3)
        if digit == 2:
            return False
    return True