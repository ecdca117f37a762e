"""Number theory and counting over integers and integer lists."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence
from itertools import combinations

MOD = 10**9 + 7


def closest_primes(left: int, right: int) -> list[int]:
    """Return the first pair of neighbouring primes in ``[left, right]`` with the
    smallest gap, or ``[-1, -1]``; ranges spanning at most one step give ``[-1, -1]``."""
    none = [-1, -1]
    if right - left <= 1 or right < 2:
        return none
    sieve = bytearray([1]) * (right + 1)
    sieve[0] = sieve[1] = 0
    for i in range(2, math.isqrt(right) + 1):
        if sieve[i]:
            sieve[i * i :: i] = bytes(len(range(i * i, right + 1, i)))
    primes = [p for p in range(max(left, 2), right + 1) if sieve[p]]
    best = none
    gap = math.inf
    for a, b in zip(primes, primes[1:]):
        if b - a < gap:
            best, gap = [a, b], b - a
    return best


def colored_cells(n: int) -> int:
    """Return the number of cells coloured after ``n`` minutes of growth."""
    if n < 1:
        raise ValueError("n must be at least 1")
    return 2 * n * n - 2 * n + 1


def fib(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with fib(0) = 0."""
    if n < 0:
        raise ValueError("n must not be negative")
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def climb_stairs(n: int) -> int:
    """Return the number of ways to climb ``n`` steps taking one or two at a time."""
    if n < 0:
        raise ValueError("n must not be negative")
    a, b = 1, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def _prime_scores(limit: int) -> list[int]:
    scores = [0] * (limit + 1)
    for i in range(2, limit + 1):
        if scores[i] == 0:
            for multiple in range(i, limit + 1, i):
                scores[multiple] += 1
    return scores


def maximum_score(nums: Sequence[int], k: int) -> int:
    """Return the best product of ``k`` subarray picks, modulo 10**9 + 7.

    Each pick takes the element of highest prime score in its subarray
    (leftmost on ties).
    """
    if not nums:
        raise ValueError("nums must not be empty")
    scores = _prime_scores(max(nums))
    n = len(nums)
    left = [-1] * n
    right = [n] * n
    stack: list[int] = []
    for index, value in enumerate(nums):
        while stack and scores[nums[stack[-1]]] < scores[value]:
            right[stack.pop()] = index
        if stack:
            left[index] = stack[-1]
        stack.append(index)

    result = 1
    for value, index in sorted(((v, i) for i, v in enumerate(nums)), reverse=True):
        if k <= 0:
            break
        operations = min(k, (right[index] - index) * (index - left[index]))
        result = result * pow(value, operations, MOD) % MOD
        k -= operations
    if k > 0:
        raise ValueError("k exceeds the number of subarrays")
    return result


def tuple_same_product(nums: Sequence[int]) -> int:
    """Count tuples (a, b, c, d) of distinct elements with a * b == c * d."""
    products = Counter(a * b for a, b in combinations(nums, 2))
    return sum(4 * count * (count - 1) for count in products.values())


def count_bad_pairs(nums: Sequence[int]) -> int:
    """Count index pairs i < j with ``j - i != nums[j] - nums[i]``."""
    n = len(nums)
    groups = Counter(value - index for index, value in enumerate(nums))
    good = sum(count * (count - 1) // 2 for count in groups.values())
    return n * (n - 1) // 2 - good


def num_of_subarrays(arr: Sequence[int]) -> int:
    """Count subarrays with an odd sum, modulo 10**9 + 7."""
    odd, even = 0, 1
    total = 0
    running = 0
    for value in arr:
        running += value
        if running % 2:
            total += even
            odd += 1
        else:
            total += odd
            even += 1
    return total % MOD