"""Classes for managing "contexts".

A Context object describes what the variables of an expression are bound to
while it is being interpreted.  There are two kinds of variables:
 - the parameter (the single free variable of every expression)
 - index variables (introduced by a summation and in scope in its body)

Contexts are persistent: extending a context with a new index binding builds
a new object on top of the old one and never changes the old one.  This lets
every iteration of a summation share the context of the enclosing expression.

Important terminology:
 - "root context": a context that binds only the parameter
 - "indexed context": a context that binds one index name on top of a parent

The same classes are used for exact evaluation (where the bound values are
the integers being computed with) and for degree estimation (where the bound
values are degree weights); see evaluation.py.
"""

class UnboundIndex(LookupError):
    """An index variable was referenced outside of the summation binding it."""
    def __init__(self, name):
        super().__init__("Unknown index {}".format(name))
        self.name = name

class Context(object):
    """A Context describes the value of each variable in scope."""

    def parameter(self):
        """Return the value bound to the parameter."""
        raise NotImplementedError()

    def index(self, name : str):
        """Return the value bound to index `name`.

        Raises UnboundIndex if no enclosing context binds `name`.
        """
        raise NotImplementedError()

    def parent(self):
        """
        If this context is underneath a summation, return the context outside
        the summation.  Otherwise (if this is a root context) return None.
        """
        raise NotImplementedError()

    def root(self):
        """Return this context's root context."""
        ctx = self
        while ctx.parent() is not None:
            ctx = ctx.parent()
        return ctx

    def extend(self, name : str, value):
        """Return a new context binding `name` to `value` on top of this one."""
        return IndexedContext(self, name, value)

class RootContext(Context):
    __slots__ = ("_parameter",)

    def __init__(self, parameter):
        self._parameter = parameter
    def parameter(self):
        return self._parameter
    def index(self, name):
        raise UnboundIndex(name)
    def parent(self):
        return None
    def __repr__(self):
        return "RootContext({!r})".format(self._parameter)

class IndexedContext(Context):
    __slots__ = ("_parent", "name", "value")

    def __init__(self, parent : Context, name : str, value):
        self._parent = parent
        self.name = name
        self.value = value
    def parameter(self):
        return self.root().parameter()
    def index(self, name):
        # Walk outward without recursion; summations can nest deeply.
        ctx = self
        while isinstance(ctx, IndexedContext):
            if ctx.name == name:
                return ctx.value
            ctx = ctx._parent
        return ctx.index(name)
    def parent(self):
        return self._parent
    def __repr__(self):
        return "IndexedContext({!r}, {!r}, {!r})".format(self._parent, self.name, self.value)
