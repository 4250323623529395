"""Exact-arithmetic Number Theory Utilities over unsigned 64-bit integers.

Provides the greatest common divisor for pairs and sequences (Stein's algorithm), the Extended Euclidean Algorithm
with Bezout coefficients and the least common multiple for pairs and sequences. All functions are pure and validate
their operands against the unsigned 64-bit range `[0, U64_MAX]`.

Typical usage example:

    gcd_many([42, 8, 144])
    g, x, y = extended_gcd(161, 28)
    lcm(42, 144)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from ntutils.divisor import extended_gcd
from ntutils.divisor import gcd
from ntutils.divisor import gcd_many
from ntutils.divisor import U64_MAX
from ntutils.multiple import lcm
from ntutils.multiple import lcm_many

__version__ = "0.0.1"
__all__ = [
    "U64_MAX",
    "gcd",
    "gcd_many",
    "extended_gcd",
    "lcm",
    "lcm_many",
]
