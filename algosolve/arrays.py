"""Algorithms over integer arrays."""

from __future__ import annotations

from collections import Counter, deque
from functools import reduce
from itertools import accumulate
from operator import mul, xor
from typing import Iterator, Sequence


def _c_mod(value: int, divisor: int) -> int:
    """Remainder whose sign follows the dividend (truncating division)."""
    remainder = abs(value) % abs(divisor)
    return -remainder if value < 0 else remainder


def height_checker(heights: Sequence[int]) -> int:
    """Count positions where ``heights`` differs from its sorted order."""
    return sum(actual != expected for actual, expected in zip(heights, sorted(heights)))


def max_satisfied(customers: Sequence[int], grumpy: Sequence[int], minutes: int) -> int:
    """Most satisfied customers when the owner suppresses grumpiness for ``minutes``."""
    if len(customers) != len(grumpy):
        raise ValueError("customers and grumpy must have the same length")
    if not 1 <= minutes <= len(customers):
        raise ValueError("minutes must be between 1 and the number of customers")
    base = sum(count for count, mood in zip(customers, grumpy) if not mood)
    gains = [count * mood for count, mood in zip(customers, grumpy)]
    window = sum(gains[:minutes])
    best = window
    for entering, leaving in zip(gains[minutes:], gains):
        window += entering - leaving
        best = max(best, window)
    return base + best


def relative_sort_array(arr1: Sequence[int], arr2: Sequence[int]) -> list[int]:
    """Order ``arr1`` by the order of ``arr2``; the rest follow in ascending order."""
    counts = Counter(arr1)
    result: list[int] = []
    for value in arr2:
        result.extend([value] * counts.pop(value, 0))
    for value in sorted(counts):
        result.extend([value] * counts[value])
    return result


def xor_operation(n: int, start: int) -> int:
    """XOR of ``start + 2 * i`` for ``i`` in ``range(n)``."""
    return reduce(xor, (start + 2 * i for i in range(n)), 0)


def num_identical_pairs(nums: Sequence[int]) -> int:
    """Number of index pairs ``i < j`` with equal values."""
    return sum(count * (count - 1) // 2 for count in Counter(nums).values())


def restore_matrix(row_sum: Sequence[int], col_sum: Sequence[int]) -> list[list[int]]:
    """Build a non-negative matrix with the given row and column sums."""
    rows = list(row_sum)
    cols = list(col_sum)
    matrix = [[0] * len(cols) for _ in rows]
    i = j = 0
    while i < len(rows) and j < len(cols):
        value = min(rows[i], cols[j])
        matrix[i][j] = value
        rows[i] -= value
        cols[j] -= value
        if rows[i] == 0:
            i += 1
        if cols[j] == 0:
            j += 1
    return matrix


def count_k_difference(nums: Sequence[int], k: int) -> int:
    """Number of pairs ``i < j`` with ``|nums[i] - nums[j]| == k``."""
    seen: Counter[int] = Counter()
    total = 0
    for value in nums:
        total += seen[value - k] + seen[value + k]
        seen[value] += 1
    return total


def min_moves_to_seat(seats: Sequence[int], students: Sequence[int]) -> int:
    """Minimum total moves to seat every student, one per seat."""
    if len(seats) != len(students):
        raise ValueError("seats and students must have the same length")
    return sum(abs(seat - student) for seat, student in zip(sorted(seats), sorted(students)))


def contains_duplicate(nums: Sequence[int]) -> bool:
    """Return True when some value appears more than once."""
    return len(set(nums)) < len(nums)


def product_except_self(nums: Sequence[int]) -> list[int]:
    """For each position, the product of all the other values."""
    prefixes = list(accumulate(nums, mul, initial=1))[:-1]
    suffixes = list(accumulate(reversed(nums), mul, initial=1))[:-1][::-1]
    return [before * after for before, after in zip(prefixes, suffixes)]


def convert_temperature(celsius: float) -> tuple[float, float]:
    """Convert Celsius to ``(kelvin, fahrenheit)``."""
    return celsius + 273.15, celsius * 1.8 + 32


def min_operations(nums1: Sequence[int], nums2: Sequence[int], k: int) -> int:
    """Fewest paired +k/-k operations turning ``nums1`` into ``nums2``, or -1 if impossible."""
    if len(nums1) != len(nums2):
        raise ValueError("nums1 and nums2 must have the same length")
    if k == 0:
        return 0 if list(nums1) == list(nums2) else -1
    surplus = deficit = 0
    for a, b in zip(nums1, nums2):
        diff = a - b
        if diff % k:
            return -1
        if diff > 0:
            surplus += diff
        else:
            deficit -= diff
    return surplus // k if surplus == deficit else -1


def maximum_achievable_x(num: int, t: int) -> int:
    """Largest number that can reach ``num`` in at most ``t`` paired steps."""
    return num + 2 * t


def min_patches(nums: Sequence[int], n: int) -> int:
    """Fewest numbers to add to sorted ``nums`` so every value in 1..n is a subset sum."""
    reach = 1
    patches = 0
    pending = iter(nums)
    upcoming = next(pending, None)
    while reach <= n:
        if upcoming is not None and upcoming <= reach:
            reach += upcoming
            upcoming = next(pending, None)
        else:
            reach += reach
            patches += 1
    return patches


def trap(height: Sequence[int]) -> int:
    """Units of rain water trapped between the bars of ``height``."""
    if not height:
        return 0
    left_max = accumulate(height, max)
    right_max = list(accumulate(reversed(height), max))[::-1]
    return sum(min(left, right) - bar for left, right, bar in zip(left_max, right_max, height))


def check_subarray_sum(nums: Sequence[int], k: int) -> bool:
    """Return True when a subarray of length two or more sums to a multiple of ``k``."""
    if k == 0:
        raise ValueError("k must not be zero")
    first_seen = {0: -1}
    total = 0
    for index, value in enumerate(nums):
        total += value
        remainder = _c_mod(total, k)
        if remainder in first_seen:
            if index - first_seen[remainder] >= 2:
                return True
        else:
            first_seen[remainder] = index
    return False


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Every subset of ``nums``; subsets that include an element come before those that skip it."""
    items = list(nums)

    def build(index: int) -> Iterator[list[int]]:
        if index == len(items):
            yield []
            return
        for rest in build(index + 1):
            yield [items[index], *rest]
        yield from build(index + 1)

    return list(build(0))


def max_profit_assignment(
    difficulty: Sequence[int], profit: Sequence[int], worker: Sequence[int]
) -> int:
    """Total profit when each worker takes the best job no harder than their ability.

    Only the first ``len(worker)`` jobs are considered.
    """
    n = len(worker)
    if len(difficulty) < n or len(profit) < n:
        raise ValueError("difficulty and profit need at least as many entries as worker")
    jobs = iter(sorted(zip(difficulty[:n], profit[:n])))
    upcoming = next(jobs, None)
    best = 0
    total = 0
    for ability in sorted(worker):
        while upcoming is not None and upcoming[0] <= ability:
            best = max(best, upcoming[1])
            upcoming = next(jobs, None)
        total += best
    return total


def subarrays_div_by_k(nums: Sequence[int], k: int) -> int:
    """Number of non-empty subarrays whose sum is divisible by ``k``."""
    if k == 0:
        raise ValueError("k must not be zero")
    seen: Counter[int] = Counter({0: 1})
    count = 0
    prefix = 0
    for value in nums:
        prefix += value
        remainder = _c_mod(prefix, k)
        if remainder < 0:
            remainder += k
        count += seen[remainder]
        seen[remainder] += 1
    return count


def sorted_squares(nums: Sequence[int]) -> list[int]:
    """Squares of a sorted array, in ascending order."""
    result: deque[int] = deque()
    left, right = 0, len(nums) - 1
    while left <= right:
        left_sq = nums[left] * nums[left]
        right_sq = nums[right] * nums[right]
        if left_sq > right_sq:
            result.appendleft(left_sq)
            left += 1
        else:
            result.appendleft(right_sq)
            right -= 1
    return list(result)