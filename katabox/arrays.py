"""Array puzzles: water trapping, trading, partitions, counting and geometry."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Mapping, Sequence
from functools import reduce
from itertools import accumulate

MOD = 1_000_000_007


def trap_rain_water(heights: Sequence[int]) -> int:
    """Units of water held between the bars of an elevation map."""
    if not heights:
        return 0
    left = list(accumulate(heights, max))
    right = list(accumulate(reversed(heights), max))[::-1]
    return sum(
        max(min(high_left, high_right) - height, 0)
        for height, high_left, high_right in zip(heights, left, right)
    )


def max_profit_two_transactions(prices: Sequence[int]) -> int:
    """Best profit from at most two non-overlapping buy-then-sell trades."""
    first_buy = second_buy = float("-inf")
    first_sell = second_sell = 0
    for price in prices:
        first_buy = max(first_buy, -price)
        first_sell = max(first_sell, first_buy + price)
        second_buy = max(second_buy, first_sell - price)
        second_sell = max(second_sell, second_buy + price)
    return int(second_sell)


def find_rotated_min(nums: Sequence[int]) -> int:
    """Smallest value of a rotated sorted sequence that may hold duplicates."""
    if not nums:
        raise ValueError("sequence is empty")
    best = nums[0]
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        best = min(best, nums[mid])
        if nums[low] == nums[mid] == nums[high]:
            low += 1
            high -= 1
        elif nums[mid] > nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return best


def partition_count(nums: Sequence[int], k: int) -> int:
    """Fewest groups such that within each group max minus min is at most ``k``."""
    groups = 0
    group_start = None
    for value in sorted(nums):
        if group_start is None or value - group_start > k:
            groups += 1
            group_start = value
    return groups


def max_first_last_product(nums: Sequence[int], m: int) -> int:
    """Largest ``nums[i] * nums[j]`` with ``j - i >= m - 1``.

    These are the first and last elements of a subsequence of length ``m``.
    """
    if m < 1:
        raise ValueError("subsequence length must be at least 1")
    if m > len(nums):
        raise ValueError("subsequence is longer than the sequence")
    suffix_max = list(accumulate(reversed(nums), max))[::-1]
    suffix_min = list(accumulate(reversed(nums), min))[::-1]
    return max(
        first * (suffix_max[i + m - 1] if first > 0 else suffix_min[i + m - 1])
        for i, first in enumerate(nums[: len(nums) - m + 1])
    )


def x_values(nums: Sequence[int], k: int) -> list[int]:
    """For each remainder ``x`` below ``k``, count subarrays whose product is ``x`` mod ``k``."""
    if k < 1:
        raise ValueError("modulus must be at least 1")
    totals: Counter[int] = Counter()
    ending_here: Counter[int] = Counter()
    for value in nums:
        value %= k
        extended: Counter[int] = Counter()
        for product, count in ending_here.items():
            extended[product * value % k] += count
        extended[value] += 1
        ending_here = extended
        totals.update(ending_here)
    return [totals[remainder] for remainder in range(k)]


def count_unlock_permutations(complexity: Sequence[int]) -> int:
    """Orders in which all computers can be unlocked, modulo 10**9 + 7.

    Computer 0 starts unlocked; each other computer must be unlocked from one
    of lower complexity that is already open.
    """
    if not complexity:
        return 1
    root, *others = complexity
    if any(value <= root for value in others):
        return 0
    return reduce(lambda acc, factor: acc * factor % MOD, range(1, len(others) + 1), 1)


def _best_span(lines: Mapping[int, list[int]], low: int, high: int) -> int:
    return max(
        ((max(values) - min(values)) * max(key - low, high - key) for key, values in lines.items()),
        default=0,
    )


def max_triangle_area(coords: Sequence[Sequence[int]]) -> int | None:
    """Twice the largest area of a triangle with one side parallel to an axis.

    Returns None when no such triangle with positive area exists.
    """
    rows: defaultdict[int, list[int]] = defaultdict(list)
    cols: defaultdict[int, list[int]] = defaultdict(list)
    for row, col in coords:
        rows[row].append(col)
        cols[col].append(row)
    if not rows:
        return None
    area = max(
        _best_span(rows, min(rows), max(rows)),
        _best_span(cols, min(cols), max(cols)),
    )
    return area or None


def _flips_to(nums: Sequence[int], target: int) -> int | None:
    """Adjacent-pair flips needed to turn every element into ``target``, or None."""
    flips = 0
    sign = 1
    for value in nums[:-1]:
        if value * sign != target:
            flips += 1
            sign = -1
        else:
            sign = 1
    return flips if nums[-1] * sign == target else None


def can_make_equal(nums: Sequence[int], k: int) -> bool:
    """Tell whether at most ``k`` adjacent-pair sign flips make all of ``nums`` equal.

    Every element must be 1 or -1. The input is not modified.
    """
    if any(value not in (1, -1) for value in nums):
        raise ValueError("elements must be 1 or -1")
    if not nums:
        return True
    for target in (1, -1):
        flips = _flips_to(nums, target)
        if flips is not None and flips <= k:
            return True
    return False


def special_triplets(nums: Sequence[int]) -> int:
    """Count ``i < j < k`` with ``nums[i] == nums[k] == 2 * nums[j]``, modulo 10**9 + 7."""
    before: Counter[int] = Counter()
    after = Counter(nums)
    total = 0
    for value in nums:
        after[value] -= 1
        double = value * 2
        total = (total + before[double] * after[double]) % MOD
        before[value] += 1
    return total