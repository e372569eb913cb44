"""Dynamic-programming problems over sequences and amounts."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

__all__ = [
    "climb_stairs",
    "num_decodings",
    "word_break",
    "max_product",
    "rob",
    "rob_circular",
    "length_of_lis",
    "coin_change",
    "min_cost_climbing_stairs",
]


def climb_stairs(n: int) -> int:
    """Return the number of ways to climb ``n`` steps taking one or two at a time."""
    one, two = 1, 1
    for _ in range(n - 1):
        one, two = one + two, one
    return one


def num_decodings(s: str) -> int:
    """Return the number of ways a digit string decodes with 1..26 mapped to letters."""
    n = len(s)
    if n == 0:
        return 1
    after_next = 1
    nxt = 0 if s[-1] == "0" else 1
    for pos in reversed(range(n - 1)):
        if s[pos] == "0":
            ways = 0
        else:
            ways = nxt
            if int(s[pos : pos + 2]) <= 26:
                ways += after_next
        after_next, nxt = nxt, ways
    return nxt


def word_break(s: str, word_dict: Iterable[str]) -> bool:
    """Return True if ``s`` splits into words of ``word_dict``.

    An empty dictionary never matches, even for an empty string.
    """
    words = set(word_dict)
    if not words:
        return False
    reachable = [True] + [False] * len(s)
    for end in range(1, len(s) + 1):
        reachable[end] = any(
            reachable[start] and s[start:end] in words
            for start in reversed(range(end))
        )
    return reachable[-1]


def max_product(nums: Sequence[int]) -> int:
    """Return the largest product of a contiguous non-empty subarray."""
    if not nums:
        raise ValueError("max_product() needs at least one number")
    best = nums[0]
    high = low = 1
    for value in nums:
        high, low = (
            max(value, high * value, low * value),
            min(value, high * value, low * value),
        )
        best = max(best, high, low)
    return best


def rob(nums: Iterable[int]) -> int:
    """Return the largest sum of non-adjacent values."""
    prev = cur = 0
    for value in nums:
        prev, cur = cur, max(prev + value, cur)
    return cur


def rob_circular(nums: Sequence[int]) -> int:
    """Return the largest sum of non-adjacent values where the ends are adjacent."""
    if len(nums) == 1:
        return nums[0]
    return max(rob(nums[:-1]), rob(nums[1:]))


def length_of_lis(nums: Sequence[int]) -> int:
    """Return the length of the longest strictly increasing subsequence.

    An empty sequence yields 1.
    """
    lengths = [1] * len(nums)
    for i, value in enumerate(nums):
        for j in range(i):
            if nums[j] < value:
                lengths[i] = max(lengths[i], lengths[j] + 1)
    return max(lengths, default=1)


def coin_change(coins: Iterable[int], amount: int) -> int:
    """Return the fewest coins summing to ``amount``, or -1 if it cannot be made."""
    if amount < 0:
        raise ValueError("amount must not be negative")
    denominations = sorted(coins)
    if any(coin <= 0 for coin in denominations):
        raise ValueError("coin values must be positive")
    best: list[int | None] = [0] + [None] * amount
    for total in range(1, amount + 1):
        options = [
            best[total - coin] + 1
            for coin in denominations
            if coin <= total and best[total - coin] is not None
        ]
        best[total] = min(options, default=None)
    result = best[amount]
    return -1 if result is None else result


def min_cost_climbing_stairs(cost: Sequence[int]) -> int:
    """Return the cheapest cost to reach past the top, starting at step 0 or 1."""
    if not cost:
        raise ValueError("cost must not be empty")
    nxt, after_next = cost[-1], 0
    for step_cost in reversed(cost[:-1]):
        nxt, after_next = step_cost + min(nxt, after_next), nxt
    return min(nxt, after_next)