"""Polynomial operations and Lagrange interpolation over F_p."""

from itertools import zip_longest

from gf.field import GF


def _field_of(values) -> type[GF]:
    """Field class of the first field element among `values`."""
    for v in values:
        if isinstance(v, GF):
            return type(v)
    raise ValueError("cannot infer the field: no field element given")


def _check_distinct(x_values: list[GF]):
    if len({x.value for x in x_values}) != len(x_values):
        raise ValueError("interpolation points must have distinct x-coordinates")


class Polynomial:
    """Polynomial over F_p. coeffs[0] = constant term.

    Trailing zero coefficients are dropped, so the zero polynomial has no
    coefficients and degree -1.
    """

    __slots__ = ('field', 'coeffs')

    def __init__(self, coeffs, field: type[GF] | None = None):
        coeffs = list(coeffs)
        if field is None:
            field = _field_of(coeffs)
        coeffs = [field(c) for c in coeffs]
        while coeffs and not coeffs[-1]:
            coeffs.pop()
        self.field = field
        self.coeffs = coeffs

    @property
    def degree(self) -> int:
        return len(self.coeffs) - 1

    def evaluate(self, x) -> GF:
        """Evaluate polynomial at x using Horner's method."""
        x = self.field(x)
        result = self.field.zero()
        for coeff in reversed(self.coeffs):
            result = result * x + coeff
        return result

    def _same_field(self, other) -> bool:
        return isinstance(other, Polynomial) and other.field.MODULUS == self.field.MODULUS

    def __add__(self, other):
        if not self._same_field(other):
            return NotImplemented
        zero = self.field.zero()
        return Polynomial([a + b for a, b in zip_longest(self.coeffs, other.coeffs, fillvalue=zero)],
                          self.field)

    def __neg__(self):
        return Polynomial([-c for c in self.coeffs], self.field)

    def __sub__(self, other):
        if not self._same_field(other):
            return NotImplemented
        return self + (-other)

    def __mul__(self, other):
        if not isinstance(other, Polynomial):
            try:
                scalar = self.field(other)
            except TypeError:
                return NotImplemented
            return Polynomial([c * scalar for c in self.coeffs], self.field)
        if not self._same_field(other):
            return NotImplemented
        if not self.coeffs or not other.coeffs:
            return Polynomial([], self.field)
        # Schoolbook convolution on raw residues, reduced once per coefficient.
        p = self.field.MODULUS
        out = [0] * (len(self.coeffs) + len(other.coeffs) - 1)
        for i, a in enumerate(self.coeffs):
            for j, b in enumerate(other.coeffs):
                out[i + j] += a.value * b.value
        return Polynomial([c % p for c in out], self.field)

    def __rmul__(self, other):
        if isinstance(other, Polynomial):
            return NotImplemented
        return self.__mul__(other)

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._same_field(other) and self.coeffs == other.coeffs

    __hash__ = None

    def __repr__(self):
        return f"Polynomial({[c.value for c in self.coeffs]}, {self.field.__name__})"

    @staticmethod
    def random(field: type[GF], degree: int, constant) -> 'Polynomial':
        """Random polynomial of given degree with p(0) = constant."""
        coeffs = [field(constant)]
        for _ in range(degree):
            coeffs.append(field.random())
        return Polynomial(coeffs, field)

    @staticmethod
    def interpolate(points: list[tuple[GF, GF]]) -> 'Polynomial':
        """Unique polynomial of degree < len(points) through the given (x_i, y_i)."""
        if not points:
            raise ValueError("interpolation needs at least one point")
        field = _field_of([v for pt in points for v in pt])
        xs = [field(x) for x, _ in points]
        ys = [field(y) for _, y in points]
        _check_distinct(xs)
        result = Polynomial([], field)
        for i, (xi, yi) in enumerate(zip(xs, ys)):
            basis = Polynomial([1], field)
            denominator = field.one()
            for j, xj in enumerate(xs):
                if i == j:
                    continue
                basis = basis * Polynomial([-xj, 1], field)
                denominator = denominator * (xi - xj)
            result = result + basis * (yi / denominator)
        return result

    @staticmethod
    def interpolate_at_zero(points: list[tuple[GF, GF]]) -> GF:
        """Lagrange interpolation evaluated at x=0.

        points: list of (x_i, y_i) pairs.
        Returns p(0) = sum_i y_i * lambda_i where lambda_i = prod_{j!=i} (-x_j)/(x_i - x_j).
        """
        if not points:
            raise ValueError("interpolation needs at least one point")
        field = _field_of([v for pt in points for v in pt])
        lambdas = lagrange_coefficients_at_zero([field(x) for x, _ in points])
        result = field.zero()
        for (_, yi), lambda_i in zip(points, lambdas):
            result = result + yi * lambda_i
        return result


def lagrange_coefficients_at_zero(x_values: list[GF]) -> list[GF]:
    """Precompute Lagrange basis coefficients at x=0 for given x-coordinates.

    Returns lambda_i = prod_{j!=i} (-x_j) / (x_i - x_j) for each i.
    """
    if not x_values:
        return []
    field = _field_of(x_values)
    x_values = [field(x) for x in x_values]
    _check_distinct(x_values)
    n = len(x_values)
    lambdas = []
    for i in range(n):
        numerator = field.one()
        denominator = field.one()
        for j in range(n):
            if i == j:
                continue
            numerator = numerator * (-x_values[j])
            denominator = denominator * (x_values[i] - x_values[j])
        lambdas.append(numerator / denominator)
    return lambdas
