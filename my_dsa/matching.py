"""Substring search. All functions return every start index, overlaps included.

An empty pattern matches nowhere and yields ``[]``.
"""
from typing import List, Optional

from typeguard import typechecked

from .config import get_settings
from .errors import InvalidArgumentError


@typechecked
def prefix_table(pattern: str) -> List[int]:
    """``table[i]`` is the length of the longest proper prefix of ``pattern[:i+1]`` that is also its suffix."""
    table = [0] * len(pattern)
    k = 0
    for i in range(1, len(pattern)):
        while k and pattern[i] != pattern[k]:
            k = table[k - 1]
        if pattern[i] == pattern[k]: k += 1
        table[i] = k
    return table


@typechecked
def kmp_search(text: str, pattern: str) -> List[int]:
    """Knuth-Morris-Pratt, O(n + m). The text index never moves backwards;
    on a mismatch the pattern falls back through the prefix table instead."""
    if not pattern: return []
    table, matches, k = prefix_table(pattern), [], 0
    m = len(pattern)
    for i, ch in enumerate(text):
        while k and ch != pattern[k]:
            k = table[k - 1]
        if ch == pattern[k]: k += 1
        if k == m:
            matches.append(i - m + 1)
            k = table[k - 1]
    return matches


@typechecked
def rabin_karp_search(text: str, pattern: str, base: Optional[int] = None, modulus: Optional[int] = None) -> List[int]:
    """Rolling polynomial hash over code points, average O(n + m).

    Every hash hit is confirmed by comparing the window with the pattern, so
    collisions cost time (O(n*m) in the worst case) but never produce a false match.
    """
    settings = get_settings()
    base = settings.rabin_karp_base if base is None else base
    mod = settings.rabin_karp_modulus if modulus is None else modulus
    if base < 2: raise InvalidArgumentError(f"base must be at least 2, got {base}")
    if mod < 2: raise InvalidArgumentError(f"modulus must be at least 2, got {mod}")
    n, m = len(text), len(pattern)
    if not m or m > n: return []
    high = pow(base, m - 1, mod)
    p_hash = w_hash = 0
    for i in range(m):
        p_hash = (p_hash * base + ord(pattern[i])) % mod
        w_hash = (w_hash * base + ord(text[i])) % mod
    matches = []
    for i in range(n - m + 1):
        if w_hash == p_hash and text[i:i + m] == pattern: matches.append(i)
        if i + m < n:
            w_hash = ((w_hash - ord(text[i]) * high) * base + ord(text[i + m])) % mod
    return matches


@typechecked
def naive_search(text: str, pattern: str) -> List[int]:
    """Check every alignment, O(n * m); the reference the other searches must agree with."""
    n, m = len(text), len(pattern)
    if not m: return []
    return [i for i in range(n - m + 1) if text[i:i + m] == pattern]
