"""Least Common Multiple utilities, composed on top of the binary GCD.

Products are kept within the unsigned 64-bit contract by reducing them modulo 2**64, so large or numerous operands
wrap silently. Bounding the magnitude and count of the operands is left to the caller.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from collections.abc import Sequence
from functools import reduce

from ntutils.divisor import check_u64
from ntutils.divisor import check_u64_sequence
from ntutils.divisor import gcd_many
from ntutils.divisor import U64_MAX


def lcm_many(elems: Sequence[int]) -> int:
    """Finds the LCM (Least Common Multiple) for a sequence of elements.

    Divides the first element by the GCD of all elements and multiplies the rest in as they are. For a pair of
    numbers this is the least common multiple; for more, the result is a common multiple of every element.
    Time complexity is dominated by `gcd_many`, O(K * N**2).

    Corner cases:
        - LCM of an empty sequence equals 0.
        - LCM of a single element sequence equals that element.
        - LCM of an all-zero sequence equals 0.

    Args:
        elems: Ordered sequence of unsigned 64-bit operands.

    Returns:
        The combined multiple, reduced modulo 2**64.

    Raises:
        TypeError: If an element is not an integer.
        ValueError: If an element is outside `[0, U64_MAX]`.
    """
    check_u64_sequence(elems)
    if not elems:
        return 0
    if len(elems) == 1:
        return elems[0]
    g = gcd_many(elems)
    # Only zero when every element is zero.
    if g == 0:
        return 0
    return reduce(lambda acc, e: (acc * e) & U64_MAX, elems[1:], elems[0] // g)


def lcm(lhs: int, rhs: int) -> int:
    """Finds the LCM (Least Common Multiple) for a pair of numbers, `lcm(0, 0) == 0`.

    Args:
        lhs: The first unsigned 64-bit operand.
        rhs: The second unsigned 64-bit operand.

    Returns:
        Least common multiple of `lhs` and `rhs`, reduced modulo 2**64.

    Raises:
        TypeError: If an operand is not an integer.
        ValueError: If an operand is outside `[0, U64_MAX]`.
    """
    check_u64(lhs, "lhs")
    check_u64(rhs, "rhs")
    return lcm_many((lhs, rhs))
