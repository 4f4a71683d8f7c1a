"""Utility functions and classes not found in the standard libraries.

Important functions and classes:
 - ADT: top-level class for algebraic data types
 - declare_case: create a new subclass of an ADT
 - Visitor: top-level class for visitors over ADTs
 - fresh_name: generate a never-before-seen name (string)
 - gcd, lcm: integer divisibility helpers used by polynomial arithmetic
 - to_superscript: render an exponent with superscript digits
"""

# builtins
import sys
import os
from multiprocessing import Value
import ctypes

# 3rd party
from ordered_set import OrderedSet

def gcd(a : int, b : int) -> int:
    """Greatest common divisor of two integers by Euclid's algorithm.

    Unlike `math.gcd`, the sign of the result is not normalized: it follows
    the last nonzero remainder.  Callers that care about the sign (e.g.
    `RationalPolynomial.simplified`) fix it up themselves.
    """
    while b != 0:
        a, b = b, a % b
    return a

def lcm(a : int, b : int) -> int:
    """Least common multiple of two integers (not both zero)."""
    return (a // gcd(a, b)) * b

_SUPERSCRIPT_DIGITS = "⁰¹²³⁴⁵⁶⁷⁸⁹"

def to_superscript(n : int, unicode : bool = True) -> str:
    """Render a non-negative integer as an exponent.

    With unicode=True every decimal digit becomes the matching superscript
    character (12 -> "¹²").  Otherwise the ASCII form "^12" is used.
    """
    if n < 0:
        raise ValueError("Cannot be converted to superscript: {!r}".format(n))
    if not unicode:
        return "^{}".format(n)
    return "".join(_SUPERSCRIPT_DIGITS[int(d)] for d in str(n))

class ADT(object):
    """An algebraic data type (ADT).

    This class is not abstract, but it is not useful on its own; it is a parent
    for syntax trees.

    ADTs support == and are hashable.  They are never mutated after
    construction, so the hash is computed once and cached.

    Important methods:
        - children

    See also:
        - Visitor
    """

    def children(self):
        return ()
    def __str__(self):
        return repr(self)
    def __repr__(self):
        return "{}({})".format(type(self).__name__, ", ".join(repr(child) for child in self.children()))
    def __hash__(self):
        if not hasattr(self, "_hash"):
            self._hash = hash((type(self).__name__,) + self.children())
        return self._hash
    def __eq__(self, other):
        if self is other: return True
        return type(self) is type(other) and self.children() == other.children()
    def __ne__(self, other):
        return not self.__eq__(other)

class Visitor(object):
    def visit(self, x, *args, **kwargs):
        """Call the method named "visit_TYPE" where TYPE is type(x)."""
        t = type(x)
        first_visit_func = None
        while t is not None:
            visit_func = "visit_" + t.__name__
            first_visit_func = first_visit_func or visit_func
            f = getattr(self, visit_func, None)
            if f is None:
                if t is object:
                    break
                else:
                    t = t.__base__
                    continue
            return f(x, *args, **kwargs)
        raise NotImplementedError("{} does not implement {}".format(type(self).__name__, first_visit_func))

_name_counter = Value(ctypes.c_uint64, 0)

def fresh_name(hint : str = "name", omit : {str} = ()) -> str:
    """Generate a new name.

    The returned name is guaranteed to be distinct from all names previously
    returned by `fresh_name` (even across threads and forked processes), and
    is is also guaranteed to be distinct from all names in `omit`.

    The `hint` parameter will be used in the generated name.
    """
    name = None
    with _name_counter.get_lock():
        i = _name_counter.value
        while name is None or name in omit:
            name = "_{}{}".format(hint, i)
            i += 1
        _name_counter.value = i
    return name

def declare_case(supertype, name, attrs=()):
    """Create a new case for an ADT type.

    Usage:
        CaseName = declare_case(SuperType, "CaseName", ["member1", ...])

    Creates a new class (CaseName) that is a subclass of SuperType and has all
    the given members.
    """
    if not isinstance(attrs, tuple):
        attrs = tuple(attrs)
    def __init__(self, *args):
        assert len(args) == len(attrs), "{} expects {} args, was given {}".format(name, len(attrs), len(args))
        supertype.__init__(self)
        for attr, val in zip(attrs, args):
            setattr(self, attr, val)
    def children(self):
        return tuple(getattr(self, a) for a in attrs)
    t = type(name, (supertype,), {
        "__init__": __init__,
        "__slots__": attrs,
        "children": children })
    return t

def open_maybe_stdin(f : str, mode="r"):
    """Open file f, or open standard input if f is "-".

    In any case, the caller is responsible for closing the returned handle.
    The safest usage of this function is

        with open_maybe_stdin(path) as f:
            ...
    """
    if f == "-":
        return os.fdopen(os.dup(sys.stdin.fileno()), mode)
    return open(f, mode)
