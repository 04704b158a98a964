"""Primality testing and commonly used prime moduli."""

MOD_1E9_7 = 1_000_000_007
MOD_998244353 = 998_244_353  # 119 * 2^23 + 1, NTT-friendly
MOD_MERSENNE61 = (1 << 61) - 1

# The first 13 primes as Miller-Rabin witnesses are exact below 3.3 * 10^24.
_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41)


def is_prime(n: int) -> bool:
    """Deterministic Miller-Rabin primality test.

    Exact for every n < 3.3 * 10^24, which covers all 64-bit moduli.
    Larger n are reported as probable primes.
    """
    if n < 2:
        return False
    for q in _WITNESSES:
        if n % q == 0:
            return n == q
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    for a in _WITNESSES:
        x = pow(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(s - 1):
            x = x * x % n
            if x == n - 1:
                break
        else:
            return False
    return True
