"""Utilities for working with syntax trees.

Important functions:
 - pprint: prettyprint an expression
 - free_indices: compute the set of unbound index names
 - freshen_binders: give every summation a fresh index name
"""

from polysum import common
from polysum.common import OrderedSet, fresh_name
from polysum.syntax import Exp, EParam, EIndex, ENum, EAdd, EMul, ESum, PARAM

# Binding strength of each kind of expression, loosest first
_ADD_PREC  = 1
_MUL_PREC  = 2
_ATOM_PREC = 3

def _is_negation(e):
    return isinstance(e, EMul) and e.e1 == ENum(-1)

def _prec(e):
    if isinstance(e, EAdd):
        return _ADD_PREC
    if isinstance(e, EMul):
        return _MUL_PREC
    if isinstance(e, ENum) and e.val < 0:
        return _MUL_PREC
    return _ATOM_PREC

class PrettyPrinter(common.Visitor):
    def __init__(self, format="plain", parameter_name="x"):
        assert format in ("plain", "unicode")
        self.format = format
        self.parameter_name = parameter_name

    def visit_at(self, e, prec):
        """Print e, parenthesized unless it binds at least as tightly as prec."""
        s = self.visit(e)
        return s if _prec(e) >= prec else "({})".format(s)

    def visit_EParam(self, e):
        return self.parameter_name

    def visit_EIndex(self, e):
        return e.name

    def visit_ENum(self, e):
        return str(e.val)

    def visit_EAdd(self, e):
        lhs = self.visit_at(e.e1, _ADD_PREC)
        if _is_negation(e.e2):
            return "{} - {}".format(lhs, self.visit_at(e.e2.e2, _MUL_PREC))
        return "{} + {}".format(lhs, self.visit_at(e.e2, _MUL_PREC))

    def visit_EMul(self, e):
        if _is_negation(e):
            return "-{}".format(self.visit_at(e.e2, _ATOM_PREC))
        return "{} * {}".format(self.visit_at(e.e1, _MUL_PREC), self.visit_at(e.e2, _ATOM_PREC))

    def visit_ESum(self, e):
        if self.format == "unicode":
            return "Σ[{}={}..{}]({})".format(e.index, self.visit(e.lo), self.visit(e.hi), self.visit(e.body))
        return "sum({}, {}, {}, {})".format(e.index, self.visit(e.lo), self.visit(e.hi), self.visit(e.body))

def pprint(e : Exp, format="plain", parameter_name="x") -> str:
    """Render an expression as text.

    The "plain" format is accepted by parse.parse_exp.
    """
    return PrettyPrinter(format=format, parameter_name=parameter_name).visit(e)

def free_indices(e : Exp) -> OrderedSet:
    """Find the names of all index variables in `e` that no summation binds.

    Returns an OrderedSet of names in a deterministic order.
    """
    res = OrderedSet()

    # Work stack of (expression, names bound around it), to avoid running out
    # of stack frames on deeply nested expressions.
    stk = [(e, frozenset())]
    while stk:
        x, bound = stk.pop()
        if isinstance(x, EIndex):
            if x.name not in bound:
                res.add(x.name)
        elif isinstance(x, ESum):
            stk.append((x.body, bound | {x.index}))
            stk.append((x.hi, bound))
            stk.append((x.lo, bound))
        else:
            stk.extend((c, bound) for c in reversed(x.children()) if isinstance(c, Exp))
    return res

class _Freshener(common.Visitor):
    def __init__(self, parameter_name):
        self.parameter_name = parameter_name
    def visit_EIndex(self, e, scope):
        if e.name in scope:
            return EIndex(scope[e.name])
        if self.parameter_name is not None and e.name == self.parameter_name:
            return PARAM
        return e
    def visit_EAdd(self, e, scope):
        return EAdd(self.visit(e.e1, scope), self.visit(e.e2, scope))
    def visit_EMul(self, e, scope):
        return EMul(self.visit(e.e1, scope), self.visit(e.e2, scope))
    def visit_ESum(self, e, scope):
        name = fresh_name("i")
        inner = dict(scope)
        inner[e.index] = name
        return ESum(self.visit(e.lo, scope), self.visit(e.hi, scope), name, self.visit(e.body, inner))
    def visit_Exp(self, e, scope):
        return e

def freshen_binders(e : Exp, parameter_name : str = None) -> Exp:
    """Rename every summation index to a never-before-seen name.

    References are renamed along with their (innermost) binder, so the result
    means the same thing as `e`.  If `parameter_name` is given, free index
    references with that name become the parameter.  Other free references
    are left alone.
    """
    return _Freshener(parameter_name).visit(e, {})
