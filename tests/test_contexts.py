import unittest

from polysum.contexts import RootContext, IndexedContext, UnboundIndex

class TestContexts(unittest.TestCase):

    def test_root(self):
        ctx = RootContext(7)
        self.assertEqual(ctx.parameter(), 7)
        assert ctx.parent() is None
        assert ctx.root() is ctx

    def test_unbound(self):
        with self.assertRaises(UnboundIndex) as cm:
            RootContext(0).index("i")
        self.assertEqual(cm.exception.name, "i")
        with self.assertRaises(LookupError):
            RootContext(0).extend("j", 1).index("i")

    def test_lookup_walks_outward(self):
        root = RootContext(3)
        ctx = root.extend("i", 10).extend("j", 20)
        self.assertEqual(ctx.index("j"), 20)
        self.assertEqual(ctx.index("i"), 10)
        self.assertEqual(ctx.parameter(), 3)
        assert ctx.root() is root

    def test_shadowing(self):
        ctx = RootContext(0).extend("i", 1).extend("i", 2)
        self.assertEqual(ctx.index("i"), 2)
        self.assertEqual(ctx.parent().index("i"), 1)

    def test_extend_does_not_mutate(self):
        parent = RootContext(0).extend("i", 1)
        a = parent.extend("j", 5)
        b = parent.extend("j", 6)
        self.assertEqual(a.index("j"), 5)
        self.assertEqual(b.index("j"), 6)
        with self.assertRaises(UnboundIndex):
            parent.index("j")
        assert isinstance(a, IndexedContext)
        assert a.parent() is parent

    def test_deep_chain(self):
        ctx = RootContext(42)
        for i in range(5000):
            ctx = ctx.extend("v{}".format(i), i)
        self.assertEqual(ctx.index("v0"), 0)
        self.assertEqual(ctx.parameter(), 42)
