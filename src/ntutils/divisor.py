"""Greatest Common Divisor utilities over the unsigned 64-bit integer domain.

Provides a binary (Stein's) GCD for pairs and arbitrary sequences of operands, and the iterative Extended Euclidean
Algorithm for the Bezout coefficients. The extended variant divides and runs in O(log(min(lhs, rhs))), the binary
variant only shifts and subtracts.

Operands are plain Python integers constrained to `[0, U64_MAX]`, anything else is rejected before computation.

Typical usage example:

    gcd(42, 144)
    gcd_many([42, 8, 144])
    g, x, y = extended_gcd(161, 28)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from collections.abc import Sequence
from functools import reduce

_U64_BITS: int = 64
U64_MAX: int = (1 << _U64_BITS) - 1


def check_u64(value: int, name: str = "value") -> int:
    """Validates that `value` is an unsigned 64-bit operand.

    Args:
        value: The operand to check.
        name: Argument name used in the error message. Defaults to "value".

    Returns:
        The unchanged `value`.

    Raises:
        TypeError: If `value` is not an integer. Booleans are not accepted as operands.
        ValueError: If `value` is outside `[0, U64_MAX]`.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    if not 0 <= value <= U64_MAX:
        raise ValueError(f"{name} must be in range [0, 2**{_U64_BITS} - 1]")
    return value


def check_u64_sequence(elems: Sequence[int], name: str = "elems") -> Sequence[int]:
    """Validates every element of `elems` with `check_u64`, naming the offending index on failure."""
    for i, e in enumerate(elems):
        check_u64(e, f"{name}[{i}]")
    return elems


def _trailing_zeros(x: int) -> int:
    # x must be > 0
    return (x & -x).bit_length() - 1


def _stein(lhs: int, rhs: int) -> int:
    """A single binary GCD reduction step, folded over the operands by `gcd_many`.

    Args:
        lhs: Accumulated GCD so far, 0 for the fold seed.
        rhs: The next operand.

    Returns:
        GCD of `lhs` and `rhs`, or the nonzero side if either of them is 0.
    """
    if lhs == 0 or rhs == 0:
        return lhs | rhs
    shift = _trailing_zeros(lhs | rhs)
    rhs >>= _trailing_zeros(rhs)
    while lhs > 0:
        lhs >>= _trailing_zeros(lhs)
        if rhs > lhs:
            lhs, rhs = rhs, lhs
        lhs -= rhs
    return rhs << shift


def gcd_many(elems: Sequence[int]) -> int:
    """Finds the GCD (Greatest Common Divisor) for a sequence of elements.

    Implements Stein's algorithm, folded left to right over `elems` starting from 0.
    Time complexity is O(K * N**2) for K numbers of at most N bits.

    Corner cases:
        - GCD of an empty sequence equals 0.
        - GCD of a single element sequence equals that element.
        - GCD of an all-zero sequence equals 0.

    Args:
        elems: Ordered sequence of unsigned 64-bit operands. Zeros and duplicates are permitted.

    Returns:
        The greatest common divisor of all `elems`.

    Raises:
        TypeError: If an element is not an integer.
        ValueError: If an element is outside `[0, U64_MAX]`.
    """
    check_u64_sequence(elems)
    if not elems:
        return 0
    if len(elems) == 1:
        return elems[0]
    return reduce(_stein, elems, 0)


def gcd(lhs: int, rhs: int) -> int:
    """Finds the GCD (Greatest Common Divisor) for a pair of numbers.

    Two element specialization of `gcd_many`, hence `gcd(0, 0) == 0`.

    Args:
        lhs: The first unsigned 64-bit operand.
        rhs: The second unsigned 64-bit operand.

    Returns:
        Greatest common divisor of `lhs` and `rhs`.

    Raises:
        TypeError: If an operand is not an integer.
        ValueError: If an operand is outside `[0, U64_MAX]`.
    """
    check_u64(lhs, "lhs")
    check_u64(rhs, "rhs")
    return gcd_many((lhs, rhs))


def extended_gcd(lhs: int, rhs: int) -> tuple[int, int, int]:
    """Implements the Extended Euclidean Algorithm.

    Such that x*lhs + y*rhs = g = gcd(lhs, rhs). Iterative, the coefficient and remainder pairs advance in lockstep.
    The returned coefficients are bounded by `rhs // g` and `lhs // g` respectively, so they always fit a signed
    64-bit integer.

    Corner cases:
        - `extended_gcd(lhs, 0) == (lhs, 1, 0)`
        - `extended_gcd(0, rhs) == (rhs, 0, 1)` for a nonzero `rhs`
        - `extended_gcd(0, 0) == (0, 1, 0)`

    Args:
        lhs: The first unsigned 64-bit operand.
        rhs: The second unsigned 64-bit operand.

    Returns:
        Greatest common divisor of both numbers, as well as the Bezout coefficients (g, x, y).

    Raises:
        TypeError: If an operand is not an integer.
        ValueError: If an operand is outside `[0, U64_MAX]`.
    """
    check_u64(lhs, "lhs")
    check_u64(rhs, "rhs")
    r0, r1 = lhs, rhs
    x0, x1, y0, y1 = 1, 0, 0, 1
    while r1 > 0:
        q = r0 // r1
        r0, r1 = r1, r0 - q * r1
        x0, x1 = x1, x0 - q * x1
        y0, y1 = y1, y0 - q * y1
    return r0, x0, y0
