"""Random field elements.

Draws come from `secrets` unless a seed is set, in which case they come from
a seeded random.Random and repeat exactly:

    with rng.seeded(42):
        xs = rng.field_elements(GF[998_244_353], 8)
"""

import contextlib
import random
import secrets

_source: random.Random | None = None


def set_seed(seed: int | None):
    """Seed every following draw. None switches back to `secrets`."""
    global _source
    _source = None if seed is None else random.Random(seed)


@contextlib.contextmanager
def seeded(seed: int | None):
    """Draw from `seed` inside the block, then restore the previous source."""
    global _source
    saved = _source
    set_seed(seed)
    try:
        yield
    finally:
        _source = saved


def randbelow(n: int) -> int:
    """Uniform integer in [0, n)."""
    if n <= 0:
        raise ValueError(f"randbelow bound must be positive, got {n}")
    if _source is None:
        return secrets.randbelow(n)
    return _source.randrange(n)


def field_element(field, nonzero: bool = False):
    """Uniform element of `field`; with nonzero=True, uniform over F_p^*."""
    p = field.MODULUS
    if p is None:
        raise TypeError(f"{field.__name__} has no modulus")
    if nonzero:
        return field._from_residue(randbelow(p - 1) + 1)
    return field._from_residue(randbelow(p))


def field_elements(field, count: int, nonzero: bool = False) -> list:
    return [field_element(field, nonzero) for _ in range(count)]
