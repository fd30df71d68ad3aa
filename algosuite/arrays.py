"""Array algorithms: scanning, counting, two pointers and in-place rearranging."""

from __future__ import annotations

from collections import Counter
from itertools import accumulate
from typing import Iterable, Optional, Sequence


def remove_duplicates(nums: list[int]) -> int:
    """Drop repeated values from ``nums`` in place, keeping first occurrences; return the new length."""
    nums[:] = dict.fromkeys(nums)
    return len(nums)


def max_profit(prices: Iterable[int]) -> int:
    """Return the best profit from a single buy followed by a later sell."""
    lowest: Optional[int] = None
    profit = 0
    for price in prices:
        if lowest is None or price < lowest:
            lowest = price
        else:
            profit = max(profit, price - lowest)
    return profit


def max_profit_multiple(prices: Sequence[int]) -> int:
    """Return the best profit when any number of buy/sell transactions is allowed."""
    return sum(max(0, later - earlier) for earlier, later in zip(prices, prices[1:]))


def running_sum(nums: Iterable[int]) -> list[int]:
    """Return the running totals of ``nums``."""
    return list(accumulate(nums))


def two_sum_sorted(numbers: Sequence[int], target: int) -> list[int]:
    """Return 1-based positions of two values in a sorted sequence that add up to ``target``.

    An empty list is returned when no such pair exists.
    """
    low, high = 0, len(numbers) - 1
    while low < high:
        total = numbers[low] + numbers[high]
        if total == target:
            return [low + 1, high + 1]
        if total < target:
            low += 1
        else:
            high -= 1
    return []


def max_operations(nums: Iterable[int], k: int) -> int:
    """Return how many disjoint pairs summing to ``k`` can be removed."""
    ordered = sorted(nums)
    low, high = 0, len(ordered) - 1
    count = 0
    while low < high:
        total = ordered[low] + ordered[high]
        if total == k:
            count += 1
            low += 1
            high -= 1
        elif total < k:
            low += 1
        else:
            high -= 1
    return count


def majority_element(nums: Sequence[int]) -> int:
    """Return the Boyer-Moore voting candidate for the majority value."""
    if not nums:
        raise ValueError("nums must not be empty")
    candidate = nums[0]
    votes = 1
    for value in nums[1:]:
        votes += 1 if value == candidate else -1
        if votes <= 0:
            candidate = value
            votes = 1
    return candidate


def maximum_unique_subarray(nums: Sequence[int]) -> int:
    """Return the largest sum of a contiguous run of distinct values."""
    window: set[int] = set()
    start = 0
    current = 0
    best = 0
    for value in nums:
        while value in window:
            window.remove(nums[start])
            current -= nums[start]
            start += 1
        window.add(value)
        current += value
        best = max(best, current)
    return best


def number_of_weak_characters(properties: Iterable[Sequence[int]]) -> int:
    """Count characters whose attack and defense are both beaten by another character."""
    ordered = sorted(properties, key=lambda item: (-item[0], item[1]))
    strongest: Optional[int] = None
    weak = 0
    for _, defense in ordered:
        if strongest is not None and strongest > defense:
            weak += 1
        else:
            strongest = defense
    return weak


def find_original_array(changed: Iterable[int]) -> list[int]:
    """Recover the array whose values and their doubles make up ``changed``; [] if impossible."""
    values = sorted(changed)
    counts = Counter(values)
    original: list[int] = []
    for value in values:
        if counts[value] <= 0:
            continue
        counts[value] -= 1
        if counts[value * 2] <= 0:
            return []
        counts[value * 2] -= 1
        original.append(value)
    return original


def contains_duplicate(nums: Iterable[int]) -> bool:
    """Return True if any value appears more than once."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def contains_nearby_duplicate(nums: Iterable[int], k: int) -> bool:
    """Return True if two equal values sit at most ``k`` positions apart."""
    last_seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        if value in last_seen and index - last_seen[value] <= k:
            return True
        last_seen[value] = index
    return False


def majority_elements(nums: Sequence[int]) -> list[int]:
    """Return the values that occur more than ``len(nums) // 3`` times."""
    first: Optional[int] = None
    second: Optional[int] = None
    first_count = second_count = 0
    for value in nums:
        if value == first:
            first_count += 1
        elif value == second:
            second_count += 1
        elif first_count == 0:
            first, first_count = value, 1
        elif second_count == 0:
            second, second_count = value, 1
        else:
            first_count -= 1
            second_count -= 1
    threshold = len(nums) // 3
    counts = Counter(nums)
    return [
        candidate
        for candidate in (first, second)
        if candidate is not None and counts[candidate] > threshold
    ]


def maximum_groups(nums: Sequence[int]) -> int:
    """Return how many groups of strictly growing size and total can be formed."""
    remaining = len(nums)
    size = 0
    groups = 0
    while remaining >= size + 1:
        size += 1
        remaining -= size
        groups += 1
    return groups


def merge_similar_items(
    items1: Iterable[Sequence[int]], items2: Iterable[Sequence[int]]
) -> list[list[int]]:
    """Sum the weights of items with equal value; return [value, weight] pairs by value."""
    weights: dict[int, int] = {}
    for value, weight in (*items1, *items2):
        weights[value] = weights.get(value, 0) + weight
    return [[value, weights[value]] for value in sorted(weights)]


def missing_number(nums: Iterable[int]) -> int:
    """Return the smallest value in 0..len(nums) that does not appear in ``nums``."""
    present = set(nums)
    return next(i for i in range(len(present) + 1) if i not in present)


def trap(height: Sequence[int]) -> int:
    """Return how much rain water the elevation map holds."""
    left_max = list(accumulate(height, max))
    right_max = list(accumulate(reversed(height), max))[::-1]
    return sum(
        min(left, right) - level
        for left, right, level in zip(left_max, right_max, height)
    )


def sort_colors(nums: list[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place in a single pass."""
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        value = nums[mid]
        if value == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif value == 1:
            mid += 1
        elif value == 2:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1
        else:
            raise ValueError(f"colors must be 0, 1 or 2, got {value!r}")


def merge(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` of ``nums2`` into the first ``m`` of ``nums1``, in place."""
    if len(nums1) < m + n:
        raise ValueError("nums1 must have room for m + n values")
    nums1[: m + n] = sorted([*nums1[:m], *nums2[:n]])


def sort_array_by_parity(nums: Iterable[int]) -> list[int]:
    """Return the even values followed by the odd values, each in original order."""
    values = list(nums)
    return [v for v in values if v % 2 == 0] + [v for v in values if v % 2 != 0]


def bag_of_tokens_score(tokens: Iterable[int], power: int) -> int:
    """Return the best score reachable by playing tokens face up or face down."""
    ordered = sorted(tokens)
    start, end = 0, len(ordered) - 1
    score = best = 0
    while start <= end:
        if ordered[start] <= power:
            power -= ordered[start]
            start += 1
            score += 1
        elif score > 0:
            power += ordered[end]
            end -= 1
            score -= 1
        else:
            break
        best = max(best, score)
    return best


def sum_even_after_queries(
    nums: Iterable[int], queries: Iterable[Sequence[int]]
) -> list[int]:
    """Apply each (value, index) query and report the sum of even values after each."""
    values = list(nums)
    even_sum = sum(v for v in values if v % 2 == 0)
    results: list[int] = []
    for delta, index in queries:
        if values[index] % 2 == 0:
            even_sum -= values[index]
        values[index] += delta
        if values[index] % 2 == 0:
            even_sum += values[index]
        results.append(even_sum)
    return results