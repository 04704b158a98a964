"""Prime field arithmetic — demo entry point.

Runs worked scenarios over GF(1_000_000_007) and GF(998_244_353).
Usage: python main.py [seed]
"""

import logging
import sys

from gf import GF, Polynomial, rng
from gf.primes import MOD_1E9_7, MOD_998244353


def setup_basic_logger(name: str = "gf", level: int = logging.INFO) -> logging.Logger:
    """Return a logger configured with a StreamHandler and a compact formatter."""
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(level)
    ch = logging.StreamHandler()
    fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    ch.setFormatter(fmt)
    logger.addHandler(ch)
    return logger


def banner(title: str):
    print("=" * 50)
    print(title)
    print("=" * 50)


def scenario_powers(F: type[GF]) -> GF:
    x = F(2).pow(100)
    print(f"2^100 mod {F.MODULUS} = {x}")
    print(f"2^(p-1) mod {F.MODULUS} = {F(2).pow(F.MODULUS - 1)}")
    print()
    return x


def scenario_inverse(F: type[GF]) -> GF:
    x, y = F(12345678), F(87654321)
    z = y * x * x.recip()
    print(f"x = {x}, y = {y}")
    print(f"1/x = {x.recip()}")
    print(f"y * x * (1/x) = {z}")
    print()
    return z


def scenario_reduction(F: type[GF]) -> list[GF]:
    values = [-1, F.MODULUS, 3 * F.MODULUS + 5, -F.MODULUS - 2]
    reduced = [F(v) for v in values]
    for v, r in zip(values, reduced):
        print(f"  {v} -> {r}")
    print()
    return reduced


def scenario_secret_recovery(F: type[GF], secret: int, degree: int = 2) -> GF:
    """Hide `secret` as p(0) of a random polynomial and recover it from degree+1 points."""
    poly = Polynomial.random(F, degree=degree, constant=secret)
    points = [(F(i), poly.evaluate(i)) for i in range(1, degree + 2)]
    print(f"Points: {[(int(x), int(y)) for x, y in points]}")
    recovered = Polynomial.interpolate_at_zero(points)
    print(f"Recovered p(0) = {recovered} (secret={secret})")
    print(f"Interpolant matches: {Polynomial.interpolate(points) == poly}")
    print()
    return recovered


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    seed = int(argv[0]) if argv else 42
    log = setup_basic_logger()
    log.info("running demo with seed %d", seed)

    F = GF[MOD_1E9_7]

    banner("SCENARIO 1: Modular exponentiation")
    scenario_powers(F)

    banner("SCENARIO 2: Inverse round trip")
    scenario_inverse(F)

    banner("SCENARIO 3: Euclidean reduction")
    scenario_reduction(F)

    banner("SCENARIO 4: Secret recovery over GF(998244353)")
    with rng.seeded(seed):
        scenario_secret_recovery(GF[MOD_998244353], secret=31337)
    return 0


if __name__ == "__main__":
    sys.exit(main())
