"""Abstract syntax for summation expressions.

An expression is a tree built from six cases:

    EParam()                  the parameter (the one free variable)
    EIndex(name)              an index variable bound by an enclosing ESum
    ENum(val)                 an integer constant
    EAdd(e1, e2)              e1 + e2
    EMul(e1, e2)              e1 * e2
    ESum(lo, hi, index, body) sum of body for index = lo, lo+1, ..., hi

Expressions are usually built with the combinators in this module rather than
by calling the constructors directly:

    PARAM                                   the parameter
    summation(1, PARAM, lambda i: i * i)    1² + 2² + ... + x²
    2 * PARAM - 1                           ints are converted automatically
"""

from polysum.common import ADT, declare_case, fresh_name

class Exp(ADT):
    def __add__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else EAdd(self, other)
    def __radd__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else EAdd(other, self)
    def __mul__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else EMul(self, other)
    def __rmul__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else EMul(other, self)
    def __neg__(self):
        return EMul(ENum(-1), self)
    def __sub__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else EAdd(self, -other)
    def __rsub__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else EAdd(other, -self)

    def eval(self, parameter : int) -> int:
        """Evaluate this expression with the parameter bound to `parameter`."""
        from polysum.evaluation import eval
        return eval(self, parameter)

    def degree(self) -> int:
        """An upper bound on the degree of the polynomial computed by this expression."""
        from polysum.evaluation import degree
        return degree(self)

EParam              = declare_case(Exp, "EParam")
EIndex              = declare_case(Exp, "EIndex", ["name"])
ENum                = declare_case(Exp, "ENum",   ["val"])
EAdd                = declare_case(Exp, "EAdd",   ["e1", "e2"])
EMul                = declare_case(Exp, "EMul",   ["e1", "e2"])
ESum                = declare_case(Exp, "ESum",   ["lo", "hi", "index", "body"])

# -----------------------------------------------------------------------------
# Constructors

PARAM = EParam()
ZERO = ENum(0)
ONE = ENum(1)

def _is_int(x):
    return isinstance(x, int) and not isinstance(x, bool)

def _coerce(x):
    if isinstance(x, Exp):
        return x
    if _is_int(x):
        return ENum(x)
    return None

def const(value : int) -> Exp:
    """An integer constant."""
    if not _is_int(value):
        raise TypeError("constants must be integers, not {}".format(type(value).__name__))
    return ENum(value)

def to_exp(x) -> Exp:
    """Convert an int (or an existing expression) to an expression."""
    e = _coerce(x)
    if e is None:
        raise TypeError("cannot convert {!r} to an expression".format(x))
    return e

def summation(lo, hi, body_builder) -> Exp:
    """Sum a sequence of values.

    Parameters:
        lo - the first value of the index variable
        hi - the last value of the index variable (the sum is empty if hi < lo)
        body_builder - a function from the index variable (an EIndex) to the
            summed expression.  It is called exactly once.

    The index variable gets a fresh name, so nested summations never capture
    each other's indices.
    """
    lo = to_exp(lo)
    hi = to_exp(hi)
    name = fresh_name("i")
    body = to_exp(body_builder(EIndex(name)))
    return ESum(lo, hi, name, body)

def power(base, k : int) -> Exp:
    """base * base * ... * base (k copies), or ONE if k is 0.

    The product is built by repeated squaring, so the tree is only about
    2*log2(k) levels deep and shares its repeated subtrees.
    """
    if k < 0:
        raise ValueError("negative exponent {}".format(k))
    base = to_exp(base)
    if k == 0:
        return ONE
    if k == 1:
        return base
    half = power(base, k // 2)
    res = EMul(half, half)
    return EMul(res, base) if k % 2 else res
