"""Finite field arithmetic over F_p with the modulus fixed per class.

A field is a subclass of GF carrying the class constant MODULUS; elements
store only their canonical residue. Get a field class with GF[p] (cached) or
by subclassing:

    F = GF[1_000_000_007]
    assert F(2).pow(100) == 976371285

    class Fp(GF):
        __slots__ = ()
        MODULUS = 998_244_353

MODULUS must be prime. Primality is asserted when the class is created, so
the check disappears under `python -O`. Elements are immutable: assigning
or deleting attributes raises AttributeError.
"""

import functools
import logging
import operator

from gf import rng
from gf.primes import is_prime

logger = logging.getLogger(__name__)

I64_MIN = -(1 << 63)
I64_MAX = (1 << 63) - 1
U64_MAX = (1 << 64) - 1


def _as_i64(v) -> int:
    """Integer value of `v`, which must fit in a signed 64-bit integer."""
    try:
        v = operator.index(v)
    except TypeError:
        raise TypeError(f"int required, got {type(v).__name__}") from None
    if not I64_MIN <= v <= I64_MAX:
        raise OverflowError(f"{v} does not fit in a signed 64-bit integer")
    return v


def _as_exponent(e) -> int:
    try:
        e = operator.index(e)
    except TypeError:
        raise TypeError(f"int exponent required, got {type(e).__name__}") from None
    if e < 0:
        raise ValueError(f"exponent must be non-negative, got {e}")
    if e > U64_MAX:
        raise OverflowError(f"exponent {e} does not fit in an unsigned 64-bit integer")
    return e


def _check_modulus(p):
    if isinstance(p, bool) or not isinstance(p, int):
        raise TypeError(f"MODULUS must be an int, got {type(p).__name__}")
    if not 2 <= p <= I64_MAX:
        raise ValueError(f"MODULUS must satisfy 2 <= MODULUS < 2^63, got {p}")


class GF:
    """Element of the prime field F_p, p = type(self).MODULUS.

    Elements are immutable. Integer operands on either side of + - * / are
    promoted into the field first; elements of fields with a different
    modulus do not mix.
    """

    __slots__ = ('value',)

    MODULUS: int | None = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if "MODULUS" not in cls.__dict__:
            return
        p = cls.MODULUS
        _check_modulus(p)
        assert is_prime(p), f"MODULUS {p} is not prime"
        logger.debug("created field %s (p=%d)", cls.__name__, p)

    def __class_getitem__(cls, modulus):
        if cls.MODULUS is not None:
            raise TypeError(f"{cls.__name__} already has a modulus")
        _check_modulus(modulus)
        return _field(modulus)

    def __init__(self, value=0):
        cls = type(self)
        if cls.MODULUS is None:
            raise TypeError("GF has no modulus: use GF[p] or a subclass defining MODULUS")
        if isinstance(value, GF):
            if value.MODULUS != cls.MODULUS:
                raise TypeError(f"cannot convert {type(value).__name__} to {cls.__name__}")
            _set_value(self, value.value)
        else:
            _set_value(self, _as_i64(value) % cls.MODULUS)

    @classmethod
    def new(cls, value) -> 'GF':
        return cls(value)

    @classmethod
    def _from_residue(cls, r: int) -> 'GF':
        # r must already lie in [0, MODULUS)
        obj = object.__new__(cls)
        _set_value(obj, r)
        return obj

    @classmethod
    def zero(cls) -> 'GF':
        return cls._from_residue(0)

    @classmethod
    def one(cls) -> 'GF':
        return cls._from_residue(1)

    @classmethod
    def random(cls) -> 'GF':
        """Return a random non-zero field element."""
        return rng.field_element(cls, nonzero=True)

    @classmethod
    def random_including_zero(cls) -> 'GF':
        """Return a random field element (may be zero)."""
        return rng.field_element(cls)

    def as_value(self) -> int:
        """Canonical residue in [0, MODULUS)."""
        return self.value

    def _residue(self, other):
        """Residue of `other` promoted into this field, None if it does not mix."""
        if isinstance(other, GF):
            return other.value if other.MODULUS == self.MODULUS else None
        try:
            return _as_i64(other) % self.MODULUS
        except TypeError:
            return None

    def __add__(self, other):
        b = self._residue(other)
        if b is None:
            return NotImplemented
        return self._from_residue((self.value + b) % self.MODULUS)

    def __radd__(self, other):
        a = self._residue(other)
        if a is None:
            return NotImplemented
        return self._from_residue((a + self.value) % self.MODULUS)

    def __sub__(self, other):
        b = self._residue(other)
        if b is None:
            return NotImplemented
        p = self.MODULUS
        return self._from_residue((self.value + p - b) % p)

    def __rsub__(self, other):
        a = self._residue(other)
        if a is None:
            return NotImplemented
        p = self.MODULUS
        return self._from_residue((a + p - self.value) % p)

    def __mul__(self, other):
        b = self._residue(other)
        if b is None:
            return NotImplemented
        return self._from_residue(self.value * b % self.MODULUS)

    def __rmul__(self, other):
        a = self._residue(other)
        if a is None:
            return NotImplemented
        return self._from_residue(a * self.value % self.MODULUS)

    def __truediv__(self, other):
        b = self._residue(other)
        if b is None:
            return NotImplemented
        return self * self._from_residue(b).recip()

    def __rtruediv__(self, other):
        a = self._residue(other)
        if a is None:
            return NotImplemented
        return self._from_residue(a) * self.recip()

    def __neg__(self):
        p = self.MODULUS
        return self._from_residue((p - self.value) % p)

    def __pos__(self):
        return self

    def pow(self, exponent) -> 'GF':
        """self^exponent for 0 <= exponent < 2^64, by square-and-multiply.

        pow(0) is one for every element, zero included.
        """
        e = _as_exponent(exponent)
        return self._from_residue(pow(self.value, e, self.MODULUS))

    def __pow__(self, exponent, modulo=None):
        if modulo is not None:
            return NotImplemented
        if isinstance(exponent, GF):
            exponent = exponent.value
        try:
            operator.index(exponent)
        except TypeError:
            return NotImplemented
        return self.pow(exponent)

    def recip(self) -> 'GF':
        """Multiplicative inverse via Fermat's little theorem: a^{p-2} mod p.

        Zero has no inverse; recip() of zero returns zero.
        """
        return self.pow(self.MODULUS - 2)

    def __eq__(self, other):
        if isinstance(other, GF):
            return self.MODULUS == other.MODULUS and self.value == other.value
        try:
            return self.value == operator.index(other)
        except TypeError:
            return NotImplemented

    def __hash__(self):
        return hash(self.value)

    def __bool__(self):
        return self.value != 0

    def __int__(self):
        return self.value

    def __str__(self):
        return str(self.value)

    def __format__(self, spec):
        return format(self.value, spec)

    def __repr__(self):
        return f"{type(self).__name__}({self.value})"

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} elements are immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} elements are immutable")

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        if type(self).__dict__.get('_generated'):
            return (_element, (self.MODULUS, self.value))
        return (type(self), (self.value,))


_set_value = GF.value.__set__


@functools.cache
def _field(p):
    return type(f'GF[{p}]', (GF,), {
        '__slots__': (),
        '__module__': __name__,
        'MODULUS': p,
        '_generated': True,
    })


def _element(p, value):
    """Rebuild an element of GF[p]; used by pickle."""
    return _field(p)._from_residue(value)
