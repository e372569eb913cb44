"""Array problems: two pointers, monotonic stacks and queues, binary search."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

__all__ = [
    "MinStack",
    "trap",
    "max_sliding_window",
    "daily_temperatures",
    "min_eating_speed",
]


class MinStack:
    """A stack that reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._data: list[int] = []
        self._minimums: list[int] = []

    def __len__(self) -> int:
        return len(self._data)

    def push(self, val: int) -> None:
        """Push ``val`` onto the stack."""
        if not self._minimums or self._minimums[-1] >= val:
            self._minimums.append(val)
        self._data.append(val)

    def pop(self) -> None:
        """Remove the top element."""
        if not self._data:
            raise IndexError("pop from empty stack")
        if self._minimums[-1] == self._data[-1]:
            self._minimums.pop()
        self._data.pop()

    def top(self) -> int:
        """Return the top element."""
        if not self._data:
            raise IndexError("top of empty stack")
        return self._data[-1]

    def get_min(self) -> int:
        """Return the smallest element."""
        if not self._minimums:
            raise IndexError("minimum of empty stack")
        return self._minimums[-1]


def trap(height: Sequence[int]) -> int:
    """Return how much rain water the elevation map ``height`` holds."""
    if len(height) < 2:
        return 0
    left, right = 0, len(height) - 1
    left_max, right_max = height[left], height[right]
    water = 0
    while left < right:
        if height[left] < height[right]:
            left += 1
            left_max = max(left_max, height[left])
            water += left_max - height[left]
        else:
            right -= 1
            right_max = max(right_max, height[right])
            water += right_max - height[right]
    return water


def max_sliding_window(nums: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every window of ``k`` consecutive values."""
    if k < 1:
        raise ValueError("window size must be at least 1")
    window: deque[int] = deque()
    result: list[int] = []
    for i, value in enumerate(nums):
        if window and window[0] == i - k:
            window.popleft()
        while window and nums[window[-1]] < value:
            window.pop()
        window.append(i)
        if i >= k - 1:
            result.append(nums[window[0]])
    return result


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """For each day, return how many days pass until a warmer one (0 if never)."""
    result = [0] * len(temperatures)
    pending: list[int] = []
    for i, temp in enumerate(temperatures):
        while pending and temp > temperatures[pending[-1]]:
            earlier = pending.pop()
            result[earlier] = i - earlier
        pending.append(i)
    return result


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Return the slowest eating speed that finishes every pile within ``h`` hours."""
    if not piles:
        raise ValueError("piles must not be empty")
    low, high = 1, max(piles)
    while low <= high:
        mid = (low + high) // 2
        hours = sum(-(-pile // mid) for pile in piles)
        if hours <= h:
            high = mid - 1
        else:
            low = mid + 1
    return low