"""Tests for rejection sampling of group elements."""

from __future__ import annotations

import random
from collections import Counter

import pytest

from modbench.crypto import sampler
from modbench.crypto.group import CyclicGroup, default_group


def test_samples_in_range_small_bound():
    rng = random.Random(1)
    bound = 200
    for _ in range(10_000):
        x = sampler.random_element(rng, bound, 1)
        assert 0 <= x < bound


def test_samples_roughly_uniform():
    rng = random.Random(7)
    bound = 200
    n = 20_000
    buckets = Counter(sampler.random_element(rng, bound, 1) // 10 for _ in range(n))
    assert set(buckets) == set(range(20))
    expected = n / 20
    for count in buckets.values():
        assert abs(count - expected) < 0.2 * expected


def test_rejection_not_modulo():
    # Draws >= bound are redrawn, never reduced: 255 mod 5 would be 0.
    class FakeRng:
        def __init__(self, values):
            self._values = list(values)

        def randbytes(self, n):
            return self._values.pop(0).to_bytes(n, "big")

    rng = FakeRng([255, 254, 4])
    assert sampler.random_element(rng, 5, 1) == 4


def test_bound_one_always_zero():
    rng = random.Random(3)
    assert all(sampler.random_element(rng, 1, 1) == 0 for _ in range(20))


def test_invalid_bound():
    rng = random.Random(0)
    with pytest.raises(ValueError):
        sampler.random_element(rng, 0, 1)
    with pytest.raises(ValueError):
        sampler.random_element(rng, 257, 1)


def test_production_samples_below_order_bound():
    g = default_group()
    rng = random.Random(42)
    for x in sampler.random_elements(rng, g, 50):
        assert 0 <= x < g.order_bound


def test_generate_inputs_deterministic():
    g = default_group()
    first = sampler.generate_inputs(random.Random(42), g, 20)
    second = sampler.generate_inputs(random.Random(42), g, 20)
    assert first == second


def test_generate_inputs_seed_sensitive():
    g = default_group()
    first = sampler.generate_inputs(random.Random(42), g, 5)
    second = sampler.generate_inputs(random.Random(43), g, 5)
    assert first != second


def test_generate_inputs_shape():
    g = CyclicGroup.from_hex("17", generator=5)  # p = 23
    a, b, c = sampler.generate_inputs(random.Random(0), g, 30)
    assert len(a) == len(b) == len(c) == 30
    assert all(0 <= v < 22 for v in a + b + c)
