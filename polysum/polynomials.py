"""Class for representing polynomials of one variable with rational coefficients.

A RationalPolynomial is a tuple of integer coefficients (constant term first)
sharing one integer divider:

    RationalPolynomial((c0, c1, c2), d)  =  (c0 + c1*x + c2*x²) / d

Equality is syntactic.  (0, 1, 1)/2 and (0, 2, 2)/4 are different objects
until both are `simplified()`.
"""

from fractions import Fraction
import functools

from polysum.common import gcd, lcm, to_superscript

class DivisionByZero(ZeroDivisionError):
    pass

class RationalPolynomial(object):
    __slots__ = ("coefficients", "divider")

    def __init__(self, coefficients=(), divider=1):
        if divider == 0:
            raise DivisionByZero("Division by zero")
        self.coefficients = tuple(coefficients)
        self.divider = divider

    @staticmethod
    def integer(value : int):
        return RationalPolynomial((value,), 1)

    def __hash__(self):
        return hash((self.coefficients, self.divider))

    def __eq__(self, other):
        if not isinstance(other, RationalPolynomial):
            return NotImplemented
        return self.coefficients == other.coefficients and self.divider == other.divider

    def __ne__(self, other):
        res = self.__eq__(other)
        return res if res is NotImplemented else not res

    def __repr__(self):
        return "RationalPolynomial({!r}, {!r})".format(self.coefficients, self.divider)

    def __str__(self):
        return self.to_unicode_string()

    def degree(self):
        """The highest power with a nonzero coefficient, or -1 for zero."""
        for i in reversed(range(len(self.coefficients))):
            if self.coefficients[i]:
                return i
        return -1

    def is_zero(self):
        return self.degree() < 0

    def trimmed(self):
        """The same polynomial without trailing zero coefficients."""
        return RationalPolynomial(self.coefficients[:self.degree() + 1], self.divider)

    def __call__(self, x) -> Fraction:
        """Evaluate exactly at x (Horner's rule)."""
        acc = 0
        for c in reversed(self.coefficients):
            acc = acc * x + c
        return Fraction(acc, self.divider)

    def evaluate_integer(self, x) -> int:
        """Evaluate at x, insisting that the result is an integer."""
        res = self(x)
        if res.denominator != 1:
            raise ValueError("{} is not an integer at x={}: {}".format(self, x, res))
        return res.numerator

    def __add__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else sum(self, other)

    __radd__ = __add__

    def __mul__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else product(self, other)

    def __rmul__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else product(other, self)

    def simplified(self):
        """Divide out the common factor of the coefficients and the divider.

        The result's divider is always positive.
        """
        g = gcd(functools.reduce(gcd, self.coefficients, 0), self.divider)
        if (self.divider < 0) != (g < 0):
            g = -g # prefer a positive divider
        if g == 1:
            return self
        return RationalPolynomial((c // g for c in self.coefficients), self.divider // g)

    def to_ascii_string(self):
        return self._format(unicode=False)

    def to_unicode_string(self):
        return self._format(unicode=True)

    def _format(self, unicode):
        s = ""
        for p in reversed(range(len(self.coefficients))):
            c = self.coefficients[p]
            if c == 0:
                continue
            term = _format_term(p, abs(c), unicode)
            if not s:
                s = ("-" if c < 0 else "") + term
            else:
                s += (" - " if c < 0 else " + ") + term
        if not s:
            return "0"
        if self.divider != 1:
            return "({})/{}".format(s, self.divider)
        return s

def _coerce(x):
    if isinstance(x, RationalPolynomial):
        return x
    if isinstance(x, int) and not isinstance(x, bool):
        return RationalPolynomial.integer(x)
    return None

def _format_term(power, magnitude, unicode):
    if power == 0:
        return str(magnitude)
    x = "x" if power == 1 else "x" + to_superscript(power, unicode)
    return x if magnitude == 1 else str(magnitude) + x

RationalPolynomial.ZERO = RationalPolynomial()
RationalPolynomial.ONE  = RationalPolynomial((1,))
RationalPolynomial.X    = RationalPolynomial((0, 1))

def sum(a : RationalPolynomial, b : RationalPolynomial) -> RationalPolynomial:
    if len(a.coefficients) < len(b.coefficients):
        a, b = b, a
    d = lcm(a.divider, b.divider)
    amul = d // a.divider
    bmul = d // b.divider
    terms = [c * amul for c in a.coefficients]
    for i, c in enumerate(b.coefficients):
        terms[i] += c * bmul
    return RationalPolynomial(terms, d)

def product(a : RationalPolynomial, b : RationalPolynomial) -> RationalPolynomial:
    if not a.coefficients or not b.coefficients:
        return RationalPolynomial((), a.divider * b.divider)
    terms = [0] * (len(a.coefficients) + len(b.coefficients) - 1)
    for i, ca in enumerate(a.coefficients):
        for j, cb in enumerate(b.coefficients):
            terms[i + j] += ca * cb
    return RationalPolynomial(terms, a.divider * b.divider)

def lagrange_at_naturals(values) -> RationalPolynomial:
    """The polynomial of degree < len(values) through (i, values[i]) for i = 0, 1, 2, ...

    Built term by term from Lagrange's formula,

        Σ_i values[i] · Π_{j≠i} (x - j)/(i - j),

    so the result is usually not simplified.
    """
    values = tuple(values)
    res = RationalPolynomial.ZERO
    for i, v in enumerate(values):
        term = RationalPolynomial.integer(v)
        for j in range(len(values)):
            if i != j:
                term = product(term, RationalPolynomial((-j, 1), i - j))
        res = sum(res, term)
    return res
