# millerrabin/driver.py
# Bulk Miller–Rabin: small-n fast path, base selection, parallel find-any
# over a concurrent.futures pool with cancel-on-first-witness.

from __future__ import annotations
import concurrent.futures
import logging
import random
from typing import Optional, Sequence

from .bases import base_sequence, in_deterministic_band
from .config import Settings, load_settings
from .kernel import decompose, miller_rabin, to_int

log = logging.getLogger(__name__)

_POOLS = {
    "thread": concurrent.futures.ThreadPoolExecutor,
    "process": concurrent.futures.ProcessPoolExecutor,
}

def find_witness(bases: Sequence[int], n: int, d: int, r: int,
                 workers: int = 1, executor: str = "thread") -> Optional[int]:
    """
    Return any base in `bases` that witnesses n composite, or None.
    Pending work is cancelled as soon as one witness comes back.
    """
    if workers <= 1 or len(bases) <= 1:
        for a in bases:
            if miller_rabin(a, n, d, r):
                return a
        return None

    try:
        pool_cls = _POOLS[executor]
    except KeyError:
        raise ValueError(f"unknown executor {executor!r}") from None

    num_workers = min(workers, len(bases))
    with pool_cls(max_workers=num_workers) as pool:
        futures = {pool.submit(miller_rabin, a, n, d, r): a for a in bases}
        for future in concurrent.futures.as_completed(futures):
            try:
                hit = future.result()
            except Exception:
                for f in futures:
                    f.cancel()
                raise
            if hit:
                for f in futures:
                    f.cancel()
                return futures[future]
    return None

def is_prime(n, k: Optional[int] = None, *,
             workers: Optional[int] = None,
             executor: Optional[str] = None,
             rng: Optional[random.Random] = None,
             seed: Optional[int] = None,
             settings: Optional[Settings] = None) -> bool:
    """
    Miller–Rabin primality test.

    Exact for n < 2^64 (fixed bases 2..37). Above that, k random bases are
    tried and a composite slips through with probability at most 4^−k.
    Unset arguments fall back to `settings`, or to MILLERRABIN_* settings
    when none are given. The environment is not read if every argument is set.
    """
    n = to_int(n)
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n & 1 == 0:
        return False

    if rng is None and seed is not None:
        rng = random.Random(seed)
    if settings is None and None in (k, workers, executor, rng):
        settings = load_settings()
    if k is None:
        k = settings.rounds
    if workers is None:
        workers = settings.workers
    if executor is None:
        executor = settings.executor
    if rng is None:
        rng = random.Random(settings.seed)

    d, r = decompose(n)
    bases = base_sequence(n, k, rng)
    log.debug("n has %d bits, %s band, %d bases",
              n.bit_length(),
              "deterministic" if in_deterministic_band(n) else "probabilistic",
              len(bases))

    witness = find_witness(bases, n, d, r, workers=workers, executor=executor)
    if witness is not None:
        log.debug("base %d witnesses compositeness", witness)
        return False
    return True
