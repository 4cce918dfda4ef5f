"""Comparison sorts, integer sorts and binary search.

``quicksort`` and ``heap_sort`` rearrange a mutable sequence in place and
return None, like ``list.sort``; the other sorts build a new list. The
comparison sorts accept ``key`` the way ``sorted`` does; to sort with a
two-argument comparator pass ``key=functools.cmp_to_key(cmp)``. When a key
is given its values are computed once into a parallel list, so the in-place
sorts then use O(n) extra space instead of O(1)/O(log n).
"""
import random
from typing import Any, Callable, Iterable, List, MutableSequence, Optional, Sequence

from typeguard import typechecked

from .config import PivotStrategy, get_settings
from .errors import InvalidArgumentError

KeyFunc = Optional[Callable[..., Any]]

_rng = random.Random()


def _keys(items, key):
    return items if key is None else [key(x) for x in items]


def _swap(items, keys, i, j):
    items[i], items[j] = items[j], items[i]
    if keys is not items: keys[i], keys[j] = keys[j], keys[i]


def _choose_pivot(keys, lo, hi, strategy):
    if strategy == "last": return hi
    if strategy == "random": return _rng.randint(lo, hi)
    mid = (lo + hi) // 2
    a, b, c = keys[lo], keys[mid], keys[hi]
    if a < b:
        if b < c: return mid
        return hi if a < c else lo
    if a < c: return lo
    return hi if b < c else mid


def _hoare_partition(items, keys, lo, hi, pivot_idx):
    _swap(items, keys, lo, pivot_idx)
    pivot = keys[lo]
    i, j = lo - 1, hi + 1
    while True:
        i += 1
        while keys[i] < pivot: i += 1
        j -= 1
        while pivot < keys[j]: j -= 1
        if i >= j: return j
        _swap(items, keys, i, j)


@typechecked
def quicksort(items: MutableSequence[Any], key: KeyFunc = None, pivot: Optional[PivotStrategy] = None) -> None:
    """Sort in place with Hoare partitioning; not stable.

    Pivot strategies (default from settings, ``median_of_three``):
    ``median_of_three`` takes the median of the first, middle and last keys
    and avoids the quadratic case on sorted or reversed input; ``random``
    gives O(n log n) expected time on any input; ``last`` always takes the
    final element and degrades to O(n^2) on already sorted input.
    The smaller side of each partition is processed first, keeping the
    explicit range stack at O(log n).
    """
    strategy = pivot or get_settings().quicksort_pivot
    keys = _keys(items, key)
    ranges = [(0, len(items) - 1)]
    while ranges:
        lo, hi = ranges.pop()
        if lo >= hi: continue
        p = _hoare_partition(items, keys, lo, hi, _choose_pivot(keys, lo, hi, strategy))
        left, right = (lo, p), (p + 1, hi)
        if p - lo < hi - p - 1: left, right = right, left
        ranges.append(left); ranges.append(right)


@typechecked
def merge_sort(items: Iterable[Any], key: KeyFunc = None) -> List[Any]:
    """Stable bottom-up merge sort into a new list, O(n log n) time, O(n) extra space."""
    src = list(items)
    keys = _keys(src, key)
    n = len(src)
    order = list(range(n))
    buf = [0] * n
    width = 1
    while width < n:
        for lo in range(0, n, 2 * width):
            mid, hi = min(lo + width, n), min(lo + 2 * width, n)
            i, j, k = lo, mid, lo
            while i < mid and j < hi:
                if keys[order[j]] < keys[order[i]]:
                    buf[k] = order[j]; j += 1
                else:
                    buf[k] = order[i]; i += 1
                k += 1
            buf[k:hi] = order[i:mid] if i < mid else order[j:hi]
        order, buf = buf, order
        width *= 2
    return [src[i] for i in order]


def _sift_down(items, keys, root, end):
    while True:
        child = 2 * root + 1
        if child >= end: return
        if child + 1 < end and keys[child] < keys[child + 1]: child += 1
        if not keys[root] < keys[child]: return
        _swap(items, keys, root, child)
        root = child


@typechecked
def heap_sort(items: MutableSequence[Any], key: KeyFunc = None) -> None:
    """In-place heap sort over a max-heap; O(n log n) always, not stable."""
    keys = _keys(items, key)
    n = len(items)
    for root in range(n // 2 - 1, -1, -1):
        _sift_down(items, keys, root, n)
    for end in range(n - 1, 0, -1):
        _swap(items, keys, 0, end)
        _sift_down(items, keys, 0, end)


@typechecked
def counting_sort(values: Iterable[int], max_value: int) -> List[int]:
    """Sort integers in ``0..max_value`` in O(n + k)."""
    values = list(values)
    if max_value < 0: raise InvalidArgumentError(f"max_value must be non-negative, got {max_value}")
    counts = [0] * (max_value + 1)
    for v in values:
        if not 0 <= v <= max_value: raise InvalidArgumentError(f"{v} is outside 0..{max_value}")
        counts[v] += 1
    out = []
    for v, c in enumerate(counts):
        out.extend([v] * c)
    return out


@typechecked
def radix_sort(values: Iterable[int], base: int = 10) -> List[int]:
    """LSD radix sort of non-negative integers, one stable counting pass per digit."""
    values = list(values)
    if base < 2: raise InvalidArgumentError(f"base must be at least 2, got {base}")
    if any(v < 0 for v in values): raise InvalidArgumentError("radix_sort needs non-negative integers")
    if not values: return values
    largest, exp = max(values), 1
    while largest // exp > 0:
        buckets: List[List[int]] = [[] for _ in range(base)]
        for v in values:
            buckets[(v // exp) % base].append(v)
        values = [v for bucket in buckets for v in bucket]
        exp *= base
    return values


@typechecked
def binary_search(items: Sequence[Any], target: Any) -> int:
    """Index of ``target`` in the ascending ``items``, or -1."""
    l, r = 0, len(items) - 1
    while l <= r:
        mid = (l + r) // 2
        if items[mid] == target: return mid
        if items[mid] < target: l = mid + 1
        else: r = mid - 1
    return -1


def is_sorted(items: Iterable[Any], key: KeyFunc = None) -> bool:
    keys = _keys(list(items), key)
    return all(not keys[i + 1] < keys[i] for i in range(len(keys) - 1))
