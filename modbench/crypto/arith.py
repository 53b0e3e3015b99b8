"""Big-integer primitives whose cost the harness compares.

Neither function is constant time and the ElGamal-shaped workload is
not an encryption scheme: it exists only to exercise two modular
exponentiations per call.  Do not use it to protect anything.
"""

from __future__ import annotations

from typing import Tuple


def mod_mul(a: int, b: int, p: int) -> int:
    """Modular multiplication, full product first, then one reduction.

    The product of two operands of bit_length(p) bits is formed in full
    (up to 2 * bit_length(p) bits) before reducing, with no Montgomery
    or Barrett interleaving.
    """
    z = a * b
    return z % p


def elgamal_encrypt(x: int, y: int, g: int, p: int, m: int) -> Tuple[int, int]:
    """ElGamal-shaped workload: c1 = g^y, s = c1^x, c2 = s*m  (all mod p).

    https://en.wikipedia.org/wiki/ElGamal_encryption
    """
    c1 = pow(g, y, p)
    s = pow(c1, x, p)
    c2 = (s * m) % p
    return c1, c2


def elgamal_decrypt(c1: int, c2: int, x: int, p: int) -> int:
    """Undo :func:`elgamal_encrypt` given the exponent *x*.

    Returns ``m mod p``.  Raises ``ZeroDivisionError`` if s = c1^x mod p
    has no inverse mod p.
    """
    s = pow(c1, x, p)
    try:
        s_inv = pow(s, -1, p)
    except ValueError as exc:
        raise ZeroDivisionError(f"s = {s} is not invertible mod p") from exc
    return (c2 * s_inv) % p
