import sys, argparse, logging, random
from typing import Optional

from .config import EXECUTORS, load_settings
from .driver import is_prime
from .kernel import is_witness, to_int

def _count(minimum: int):
    def parse(s: str) -> int:
        v = int(s)
        if v < minimum:
            raise argparse.ArgumentTypeError(f"must be >= {minimum}, got {v}")
        return v
    return parse

def process(n: int, args, rng: random.Random) -> int:
    if args.witness is not None:
        res = is_witness(args.witness, n)
        label = "invalid" if res is None else ("witness" if res else "non-witness")
        print(f"{n}\t{label}\t{args.witness}")
        return 0
    ok = is_prime(n, args.rounds, workers=args.workers, executor=args.executor, rng=rng)
    print(f"{n}\t{'prime' if ok else 'composite'}")
    return 0

def main(argv: Optional[list] = None) -> int:
    settings = load_settings()
    ap = argparse.ArgumentParser(prog="millerrabin", description="Miller–Rabin primality test")
    ap.add_argument("-k", "--rounds", type=_count(0), default=settings.rounds,
                    help="random bases to try for n >= 2^64")
    ap.add_argument("--workers", type=_count(1), default=settings.workers, help="pool size")
    ap.add_argument("--executor", choices=EXECUTORS, default=settings.executor)
    ap.add_argument("--seed", type=int, default=settings.seed, help="rng seed for reproducibility")
    ap.add_argument("--witness", type=to_int, default=None, metavar="A",
                    help="only test whether A witnesses each N composite")
    ap.add_argument("-v", "--verbose", action="store_true")
    ap.add_argument("N", nargs="*", help="integers to test (default: read stdin)")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")
    rng = random.Random(args.seed)

    rc = 0
    lines = args.N if args.N else sys.stdin
    for line in lines:
        line = line.strip()
        if not line:
            continue
        try:
            n = to_int(line)
        except ValueError:
            print(f"# skip: {line}", file=sys.stderr); rc |= 1; continue
        rc |= process(n, args, rng)
    return rc

if __name__ == "__main__":
    raise SystemExit(main())
