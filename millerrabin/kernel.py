# millerrabin/kernel.py
# Miller–Rabin kernel
# - n−1 = d·2^r decomposition
# - single-base strong witness check
# - entry-point integer coercion

from __future__ import annotations
import operator
from typing import Optional, Tuple

# ---------- Input coercion ----------

def to_int(x) -> int:
    """Coerce ints, int-likes (numpy, gmpy2) and decimal/0x/0o/0b text to int."""
    if isinstance(x, (bytes, bytearray)):
        x = x.decode()
    if isinstance(x, str):
        s = x.strip().replace("_", "")
        if s[:2].lower() in ("0x", "0o", "0b"):
            return int(s, 0)
        return int(s, 10)
    return operator.index(x)

# ---------- Decomposition ----------

def decompose(n: int) -> Tuple[int, int]:
    """Return (d, r) with n−1 = d·2^r and d odd. Caller guarantees n >= 3."""
    d = n - 1
    r = 0
    while d & 1 == 0:
        d >>= 1
        r += 1
    return d, r

# ---------- Witness ----------

def miller_rabin(a: int, n: int, d: int, r: int) -> bool:
    """True if a proves n composite (a is a witness), False otherwise."""
    n_minus_one = n - 1
    x = pow(a, d, n)
    if x == 1 or x == n_minus_one:
        return False
    for _ in range(r - 1):
        x = (x * x) % n
        if x == n_minus_one:
            return False
        if x == 1:
            # non-trivial square root of 1
            return True
    return True

def is_witness(a, n) -> Optional[bool]:
    """
    Test whether `a` is a witness for the compositeness of `n`.
    Returns None when a < 2 or n < 3.
    """
    a, n = to_int(a), to_int(n)
    if a < 2 or n < 3:
        return None
    d, r = decompose(n)
    return miller_rabin(a, n, d, r)
