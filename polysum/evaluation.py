"""Interpreters for summation expressions.

Every expression can be read in two ways:
 - as an integer, once the parameter is bound to an integer (`eval`)
 - as an upper bound on the degree of the polynomial it computes, as a
   function of the parameter (`degree`)

Both readings walk the tree the same way, so they share one fold
(`Interpretation`) and differ only in how constants, sums, products and
summations combine.  The values bound in the Context are integers for
evaluation and degree weights for estimation.

Important functions:
 - eval: evaluate an expression at one parameter value
 - eval_bulk: evaluate the same expression at many parameter values
 - degree: upper bound on the degree of an expression
"""

from polysum.common import Visitor
from polysum.contexts import RootContext
from polysum.syntax import Exp

class Interpretation(Visitor):
    """A fold over expressions, threading a Context through the walk.

    Subclasses say how to interpret constants, additions, products and
    summations.  Variable references always resolve through the context.
    """

    def run(self, e : Exp, parameter):
        return self.visit(e, RootContext(parameter))

    def visit_EParam(self, e, ctx):
        return ctx.parameter()
    def visit_EIndex(self, e, ctx):
        return ctx.index(e.name)
    def visit_ENum(self, e, ctx):
        return self.constant(e.val)
    def visit_EAdd(self, e, ctx):
        return self.add(self.visit(e.e1, ctx), self.visit(e.e2, ctx))
    def visit_EMul(self, e, ctx):
        return self.multiply(self.visit(e.e1, ctx), self.visit(e.e2, ctx))
    def visit_ESum(self, e, ctx):
        raise NotImplementedError()

    def constant(self, val):
        raise NotImplementedError()
    def add(self, x, y):
        raise NotImplementedError()
    def multiply(self, x, y):
        raise NotImplementedError()

class Evaluator(Interpretation):
    """Exact integer evaluation."""

    def constant(self, val):
        return val
    def add(self, x, y):
        return x + y
    def multiply(self, x, y):
        return x * y
    def visit_ESum(self, e, ctx):
        lo = self.visit(e.lo, ctx)
        hi = self.visit(e.hi, ctx)
        total = 0
        # range() is empty when hi < lo, however far apart they are
        for i in range(lo, hi + 1):
            total += self.visit(e.body, ctx.extend(e.index, i))
        return total

class DegreeEstimator(Interpretation):
    """Upper bound on polynomial degree.

    The value bound to the parameter is its weight (1), and the value bound to
    an index is the weight of the summation bounds that introduce it.
    """

    def constant(self, val):
        return 0
    def add(self, x, y):
        return max(x, y)
    def multiply(self, x, y):
        return x + y
    def visit_ESum(self, e, ctx):
        lo = self.visit(e.lo, ctx)
        hi = self.visit(e.hi, ctx)
        count = max(lo, hi) # overestimate
        return self.visit(e.body, ctx.extend(e.index, count)) + count

_EVALUATOR = Evaluator()
_DEGREE_ESTIMATOR = DegreeEstimator()

def eval(e : Exp, parameter : int) -> int:
    """Evaluate an expression with the parameter bound to `parameter`.

    Raises UnboundIndex if `e` refers to an index outside of its summation.
    """
    return _EVALUATOR.run(e, parameter)

def eval_bulk(e : Exp, parameters) -> [int]:
    """Evaluate the same expression at each of the given parameter values.

    The call

        eval_bulk(e, ns)

    is equivalent to

        [eval(e, n) for n in ns].
    """
    return [_EVALUATOR.run(e, n) for n in parameters]

def degree(e : Exp) -> int:
    """Return an upper bound on the degree of the polynomial `e` computes.

    The bound is always safe (never smaller than the true degree) but is often
    loose for summations whose range length does not grow with the parameter.
    """
    return _DEGREE_ESTIMATOR.run(e, 1)
