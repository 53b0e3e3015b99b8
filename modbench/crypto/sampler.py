"""Uniform sampling of group elements by rejection.

A draw is ``byte_length`` random bytes read as a big-endian unsigned
integer.  Draws >= bound are discarded and redrawn; reducing them mod
bound instead would bias the result toward small values.

``byte_length`` is a property of the group (ceil(bit_length(p) / 8)),
not of the bound, and is passed in rather than recomputed per call.
"""

from __future__ import annotations

import random
from typing import List, Tuple

from modbench.crypto.group import CyclicGroup


def random_element(rng: random.Random, bound: int, byte_length: int) -> int:
    """Return a uniform integer in [0, bound) drawn from *rng*."""
    if bound < 1:
        raise ValueError(f"Sampling bound must be >= 1, got {bound}")
    if bound > 1 << (8 * byte_length):
        raise ValueError(f"Bound does not fit in {byte_length} bytes")

    while True:
        candidate = int.from_bytes(rng.randbytes(byte_length), "big")
        if candidate < bound:
            return candidate


def random_elements(rng: random.Random, group: CyclicGroup, count: int) -> List[int]:
    """Return *count* independent elements of [0, p-1)."""
    return [random_element(rng, group.order_bound, group.byte_length) for _ in range(count)]


def generate_inputs(
    rng: random.Random, group: CyclicGroup, count: int
) -> Tuple[List[int], List[int], List[int]]:
    """Return three input arrays (A, B, C) of length *count*.

    Samples are drawn interleaved (A[i], B[i], C[i] on step i), so the
    arrays depend on the seed and on this draw order.
    """
    a: List[int] = []
    b: List[int] = []
    c: List[int] = []
    for _ in range(count):
        a.append(random_element(rng, group.order_bound, group.byte_length))
        b.append(random_element(rng, group.order_bound, group.byte_length))
        c.append(random_element(rng, group.order_bound, group.byte_length))
    return a, b, c
