"""Prime field arithmetic: field elements, polynomials, primality, deterministic RNG."""

from gf.field import GF
from gf.polynomial import Polynomial, lagrange_coefficients_at_zero
from gf.primes import is_prime, MOD_1E9_7, MOD_998244353, MOD_MERSENNE61
from gf import rng
