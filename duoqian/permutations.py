"""
Heap 算法的迭代版本 (不递归)

顺序固定，例如 [A, B, C] → ABC, BAC, CAB, ACB, BCA, CBA
第一个结果总是输入本身，共 n! 个。
"""

from __future__ import annotations

from typing import Iterator, Sequence, TypeVar

T = TypeVar("T")


def iter_permutations(items: Sequence[T]) -> Iterator[list[T]]:
    a = list(items)
    n = len(a)
    c = [0] * n
    yield list(a)

    i = 1
    while i < n:
        if c[i] < i:
            if i % 2 == 0:
                a[0], a[i] = a[i], a[0]
            else:
                a[c[i]], a[i] = a[i], a[c[i]]
            yield list(a)
            c[i] += 1
            i = 1
        else:
            c[i] = 0
            i += 1


def permutations(items: Sequence[T]) -> list[list[T]]:
    return list(iter_permutations(items))
