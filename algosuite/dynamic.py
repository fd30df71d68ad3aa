"""Dynamic programming algorithms over integer sequences."""

from __future__ import annotations

from typing import Sequence


def maximum_score(nums: Sequence[int], multipliers: Sequence[int]) -> int:
    """Return the best score from multiplying values taken off either end of ``nums``."""
    n, m = len(nums), len(multipliers)
    if m > n:
        raise ValueError("there must be at least as many numbers as multipliers")
    following = [0] * (m + 1)
    for i in reversed(range(m)):
        factor = multipliers[i]
        following = [
            max(
                factor * nums[left] + following[left + 1],
                factor * nums[n - 1 - (i - left)] + following[left],
            )
            for left in range(i + 1)
        ]
    return following[0]


def can_partition(nums: Sequence[int]) -> bool:
    """Return True if ``nums`` splits into two subsets of equal sum."""
    if any(value < 0 for value in nums):
        raise ValueError("values must be non-negative")
    total = sum(nums)
    if total % 2:
        return False
    reachable = 1
    for value in nums:
        reachable |= reachable << value
    return bool(reachable >> (total // 2) & 1)


def find_length(nums1: Sequence[int], nums2: Sequence[int]) -> int:
    """Return the length of the longest run common to both sequences; -1 if either is empty."""
    if not nums1 or not nums2:
        return -1
    best = 0
    previous = [0] * (len(nums2) + 1)
    for a in nums1:
        current = [0]
        for j, b in enumerate(nums2):
            current.append(previous[j] + 1 if a == b else 0)
        best = max(best, max(current))
        previous = current
    return best


def min_cost_climbing_stairs(cost: Sequence[int]) -> int:
    """Return the cheapest way past the top, starting from step 0 or 1."""
    if not cost:
        raise ValueError("cost must not be empty")
    first, second = cost[-1], 0
    for step_cost in reversed(cost[:-1]):
        first, second = step_cost + min(first, second), first
    return min(first, second)