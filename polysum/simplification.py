"""Turn a summation expression into the polynomial it computes.

An expression whose degree is at most d is determined by its values at the
d+1 points 0, 1, ..., d.  `simplify` evaluates the expression at exactly those
points and interpolates.

Important functions:
 - simplify: Exp -> RationalPolynomial
 - simplify_text: str -> RationalPolynomial
"""

from polysum.contexts import UnboundIndex
from polysum.evaluation import eval, degree
from polysum.logging import task, event
from polysum.opts import Option
from polysum.parse import parse_exp
from polysum.polynomials import RationalPolynomial, lagrange_at_naturals
from polysum.syntax import Exp
from polysum.syntax_tools import free_indices

verify_points = Option("verify-points", int, 0,
    description="After interpolating, check the result against the expression at this many more points",
    metavar="N")

class NullExpression(ValueError):
    pass

class DegreeUnderestimated(AssertionError):
    """The degree estimate was too small to determine the polynomial.

    This means the degree heuristic is wrong for this expression.
    """
    def __init__(self, e, estimate, point, expected, actual):
        super().__init__("degree estimate {} is too small: at {} the expression is {}, but the polynomial gives {}".format(
            estimate, point, expected, actual))
        self.e = e
        self.estimate = estimate
        self.point = point

def simplify(e : Exp) -> RationalPolynomial:
    """Return the simplified polynomial p with p(n) == eval(e, n) for every n."""
    if e is None:
        raise NullExpression("expression is None")
    unbound = free_indices(e)
    if unbound:
        raise UnboundIndex(unbound[0])
    with task("simplify"):
        with task("estimating degree"):
            d = degree(e)
            event("degree <= {}".format(d))
        with task("sampling", points=d+1):
            samples = [eval(e, i) for i in range(d + 1)]
        with task("interpolating"):
            p = lagrange_at_naturals(samples)
        with task("simplifying"):
            p = p.simplified()
            event("result: {}".format(p))
        if verify_points.value > 0:
            with task("verifying", points=verify_points.value):
                check(e, p, range(d + 1, d + 1 + verify_points.value), estimate=d)
    return p

def check(e : Exp, p : RationalPolynomial, points, estimate=None):
    """Raise DegreeUnderestimated if p disagrees with e at any of the points."""
    for n in points:
        expected = eval(e, n)
        actual = p(n)
        if actual != expected:
            raise DegreeUnderestimated(e, estimate, n, expected, actual)

def simplify_text(s : str) -> RationalPolynomial:
    """Parse an expression (see parse.py) and simplify it."""
    return simplify(parse_exp(s))
