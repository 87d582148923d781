"""Suffix, rank and height arrays built with the prefix-doubling algorithm."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate

_MAX_ALPHABET = 256


def _codes(seq: str | bytes | Sequence[int], max_len: int) -> list[int]:
    codes = [ord(ch) for ch in seq] if isinstance(seq, str) else [int(v) for v in seq]
    for code in codes:
        if not 0 <= code < max_len:
            raise ValueError(f"symbol {code} outside the range [0, {max_len})")
    return codes


def _counting_sort(keys: list[int], items: list[int], alphabet: int) -> list[int]:
    """Stable sort of ``items`` by the parallel ``keys``."""
    counts = [0] * alphabet
    for key in keys:
        counts[key] += 1
    ends = list(accumulate(counts))
    result = [0] * len(items)
    for key, item in zip(reversed(keys), reversed(items)):
        ends[key] -= 1
        result[ends[key]] = item
    return result


def _build(codes: list[int], alphabet: int) -> list[int]:
    n = len(codes)
    if n == 0:
        return []
    rank = list(codes)
    sa = _counting_sort(rank, list(range(n)), alphabet)

    def rank_at(ranks: list[int], i: int) -> int:
        return ranks[i] if i < n else -1

    step, distinct = 1, 1
    while distinct < n:
        second = list(range(n - step, n)) + [s - step for s in sa if s >= step]
        sa = _counting_sort([rank[i] for i in second], second, alphabet)
        old = rank
        rank = [0] * n
        distinct = 1
        for prev, cur in zip(sa, sa[1:]):
            same = old[prev] == old[cur] and rank_at(old, prev + step) == rank_at(old, cur + step)
            if same:
                rank[cur] = distinct - 1
            else:
                rank[cur] = distinct
                distinct += 1
        alphabet = distinct
        step *= 2
    return sa


class SuffixArray:
    """Suffix array of a sequence, with its rank and height (LCP) arrays."""

    def __init__(self, seq: str | bytes | Sequence[int], max_len: int = _MAX_ALPHABET) -> None:
        if max_len > _MAX_ALPHABET:
            raise ValueError("out of the range")
        codes = _codes(seq, max_len)
        self._suffix = _build(codes, max_len)
        self._rank = [0] * len(self._suffix)
        for position, start in enumerate(self._suffix):
            self._rank[start] = position
        self._height = [
            self._common_prefix(codes, a, b) for a, b in zip(self._suffix, self._suffix[1:])
        ]

    @staticmethod
    def _common_prefix(codes: list[int], a: int, b: int) -> int:
        n = len(codes)
        length = 0
        while a < n and b < n and codes[a] == codes[b]:
            a += 1
            b += 1
            length += 1
        return length

    def suffix_array(self) -> list[int]:
        """Start positions of the suffixes in lexicographic order."""
        return list(self._suffix)

    def height_array(self) -> list[int]:
        """Longest common prefix of each pair of neighbouring sorted suffixes."""
        return list(self._height)

    def rank_array(self) -> list[int]:
        """Sorted position of the suffix starting at each index."""
        return list(self._rank)