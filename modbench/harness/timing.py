"""Timing harness: pre-generate inputs, time both primitives, compare.

Run flow:
1. Build the group from the config (a bad modulus constant is fatal).
2. Seed the pseudo-random source with ``config.seed``.
3. Generate arrays A, B, C of length ``n_ops_mul``.
4. Time ``mod_mul(A[i], B[i], p)`` for i < n_ops_mul.
5. Time ``elgamal_encrypt(A[i], B[i], g, p, C[i])`` for i < n_ops_exp,
   reusing the first n_ops_exp entries of the same arrays.
6. Report ns/op of each batch (integer division) and their ratio.
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from modbench.config import GENERATOR, MODULUS_HEX, N_OPS_EXP, N_OPS_MUL, SEED
from modbench.crypto import sampler
from modbench.crypto.arith import elgamal_encrypt, mod_mul
from modbench.crypto.group import CyclicGroup

Clock = Callable[[], int]


class BenchmarkConfig(BaseModel):
    """Immutable parameters of one benchmark run."""

    model_config = ConfigDict(frozen=True)

    modulus_hex: str = MODULUS_HEX
    generator: int = GENERATOR
    n_ops_mul: int = Field(default=N_OPS_MUL, ge=1)
    n_ops_exp: int = Field(default=N_OPS_EXP, ge=1)
    seed: int = SEED

    @model_validator(mode="after")
    def _exp_inputs_fit(self) -> "BenchmarkConfig":
        # The exponentiation loop reads the arrays generated for the
        # multiplication loop.
        if self.n_ops_exp > self.n_ops_mul:
            raise ValueError(
                f"n_ops_exp={self.n_ops_exp} exceeds n_ops_mul={self.n_ops_mul}"
            )
        return self


@dataclass
class BenchmarkInputs:
    """Pre-generated operands shared by both timing loops."""

    a: List[int]
    b: List[int]
    c: List[int]

    def __len__(self) -> int:
        return len(self.a)


@dataclass
class BenchmarkResult:
    mul_total_ns: int
    exp_total_ns: int
    n_ops_mul: int
    n_ops_exp: int

    @property
    def mul_ns_per_op(self) -> int:
        return self.mul_total_ns // self.n_ops_mul

    @property
    def exp_ns_per_op(self) -> int:
        return self.exp_total_ns // self.n_ops_exp

    @property
    def factor(self) -> float:
        """Exponentiation cost in units of one multiplication."""
        if self.mul_ns_per_op == 0:
            return float("inf")
        return self.exp_ns_per_op / self.mul_ns_per_op


class Harness:
    """Runs one benchmark for a given config.

    The random source and the clock are injectable; by default the
    source is ``random.Random(config.seed)`` and the clock is
    ``time.perf_counter_ns``.
    """

    def __init__(
        self,
        config: Optional[BenchmarkConfig] = None,
        rng: Optional[random.Random] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self.config = config if config is not None else BenchmarkConfig()
        self.group = CyclicGroup.from_hex(self.config.modulus_hex, self.config.generator)
        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self.clock: Clock = clock if clock is not None else time.perf_counter_ns

    def generate_inputs(self) -> BenchmarkInputs:
        a, b, c = sampler.generate_inputs(self.rng, self.group, self.config.n_ops_mul)
        return BenchmarkInputs(a=a, b=b, c=c)

    def time_multiplications(self, inputs: BenchmarkInputs) -> int:
        """Total ns spent on ``n_ops_mul`` modular multiplications."""
        n = self._require(inputs, self.config.n_ops_mul)
        p = self.group.modulus
        a, b = inputs.a, inputs.b

        start = self.clock()
        for i in range(n):
            mod_mul(a[i], b[i], p)
        end = self.clock()
        return end - start

    def time_exponentiations(self, inputs: BenchmarkInputs) -> int:
        """Total ns spent on ``n_ops_exp`` ElGamal-shaped workloads."""
        n = self._require(inputs, self.config.n_ops_exp)
        g, p = self.group.generator, self.group.modulus
        a, b, c = inputs.a, inputs.b, inputs.c

        start = self.clock()
        for i in range(n):
            elgamal_encrypt(a[i], b[i], g, p, c[i])
        end = self.clock()
        return end - start

    def run(self) -> BenchmarkResult:
        inputs = self.generate_inputs()
        mul_total = self.time_multiplications(inputs)
        exp_total = self.time_exponentiations(inputs)
        return BenchmarkResult(
            mul_total_ns=mul_total,
            exp_total_ns=exp_total,
            n_ops_mul=self.config.n_ops_mul,
            n_ops_exp=self.config.n_ops_exp,
        )

    @staticmethod
    def _require(inputs: BenchmarkInputs, n: int) -> int:
        if len(inputs.a) < n or len(inputs.b) < n or len(inputs.c) < n:
            raise ValueError(f"Need {n} inputs per array, got {len(inputs)}")
        return n


def format_report(result: BenchmarkResult) -> List[str]:
    """Render the three output lines (trailing spaces included)."""
    return [
        f"multiplication: {result.mul_ns_per_op} ns/op ",
        f"exponentiation: {result.exp_ns_per_op} ns/op ",
        f"diferential factor: {result.factor} ",
    ]
