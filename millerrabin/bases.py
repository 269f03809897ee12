# millerrabin/bases.py
# Which bases to try for a given n.

from __future__ import annotations
import random
from typing import List, Optional

# Testing all of these decides primality exactly for n < 2^64
DETERMINISTIC_BASES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)

WORD_LIMIT = 0xFFFFFFFFFFFFFFFF  # 2^64 − 1

def in_deterministic_band(n: int) -> bool:
    return n <= WORD_LIMIT

def deterministic_bases(n: int) -> List[int]:
    return [a for a in DETERMINISTIC_BASES if a < n - 1]

def random_bases(n: int, k: int, rng: Optional[random.Random] = None) -> List[int]:
    """
    k independent uniform bases in [2, n−1).
    Draws getrandbits(bits(n−1)) and rejects anything outside the range.
    """
    upper = n - 1
    if k > 0 and upper <= 2:
        raise ValueError("n must be >= 4 to draw random bases")
    if rng is None:
        rng = random.Random()
    bits = upper.bit_length()
    out: List[int] = []
    while len(out) < k:
        m = rng.getrandbits(bits)
        if 2 <= m < upper:
            out.append(m)
    return out

def base_sequence(n: int, k: int, rng: Optional[random.Random] = None) -> List[int]:
    if in_deterministic_band(n):
        return deterministic_bases(n)
    return random_bases(n, k, rng)
