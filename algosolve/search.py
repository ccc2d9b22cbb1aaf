"""Searching and pair-counting over sorted data."""

from __future__ import annotations

from bisect import bisect_left
from typing import Sequence


def search_insert(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in sorted ``nums``, or where it would be inserted."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == target:
            return mid
        if target > nums[mid]:
            lo = mid + 1
        else:
            hi = mid - 1
    return lo


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Return True when ``target`` is in a matrix of sorted, increasing rows."""
    lo, hi = 0, len(matrix) - 1
    row = None
    while lo <= hi:
        mid = (lo + hi) // 2
        candidate = matrix[mid]
        if candidate[0] <= target <= candidate[-1]:
            row = candidate
            break
        if candidate[0] < target:
            lo = mid + 1
        else:
            hi = mid - 1
    if row is None:
        return False
    position = bisect_left(row, target)
    return position < len(row) and row[position] == target


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Median of the values of both arrays taken together."""
    merged = sorted([*nums1, *nums2])
    if not merged:
        raise ValueError("at least one value is required")
    middle = len(merged) // 2
    if len(merged) % 2:
        return float(merged[middle])
    return (merged[middle] + merged[middle - 1]) / 2.0


def count_pairs(nums: Sequence[int], target: int) -> int:
    """Number of pairs ``i < j`` with ``nums[i] + nums[j] < target``."""
    values = sorted(nums)
    lo, hi = 0, len(values) - 1
    count = 0
    while lo < hi:
        if values[lo] + values[hi] >= target:
            hi -= 1
        else:
            count += hi - lo
            lo += 1
    return count