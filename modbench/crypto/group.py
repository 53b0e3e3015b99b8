"""Multiplicative cyclic group Z_p* used by the benchmark.

The group is fixed by a hex-encoded prime modulus and a small generator.
The generator is assumed, not verified, to generate the group.
"""

from __future__ import annotations

import string
from dataclasses import dataclass

from modbench.config import GENERATOR, MODULUS_HEX


class GroupParameterError(ValueError):
    """Raised when the group constants cannot define a usable group."""


@dataclass(frozen=True)
class CyclicGroup:
    """Group parameters (p, g) plus values derived once from p.

    Attributes
    ----------
    modulus     : prime p
    generator   : g
    order_bound : p - 1, exclusive upper bound for sampled elements
    bit_length  : bit length of p
    byte_length : ceil(bit_length / 8), width of one random draw
    """

    modulus: int
    generator: int
    order_bound: int
    bit_length: int
    byte_length: int

    @classmethod
    def from_hex(cls, modulus_hex: str, generator: int = GENERATOR) -> "CyclicGroup":
        """Parse *modulus_hex* (whitespace ignored) into a group."""
        digits = "".join(modulus_hex.split())
        if not digits or any(ch not in string.hexdigits for ch in digits):
            raise GroupParameterError("Modulus constant is not a hex string")
        p = int(digits, 16)
        if p <= 2 or p % 2 == 0:
            raise GroupParameterError(f"Modulus must be an odd integer > 2, got {p}")
        if not 2 <= generator < p - 1:
            raise GroupParameterError(f"Generator {generator} outside [2, p-1)")

        bit_length = p.bit_length()
        return cls(
            modulus=p,
            generator=generator,
            order_bound=p - 1,
            bit_length=bit_length,
            byte_length=(bit_length + 7) // 8,
        )


def default_group() -> CyclicGroup:
    """The 4096-bit RFC 3526 group with g = 2."""
    return CyclicGroup.from_hex(MODULUS_HEX, GENERATOR)
