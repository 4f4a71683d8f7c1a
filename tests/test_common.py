import unittest

from polysum.common import (
    gcd, lcm, to_superscript, fresh_name,
    ADT, declare_case, Visitor)

class TestArithmetic(unittest.TestCase):

    def test_gcd(self):
        self.assertEqual(gcd(12, 18), 6)
        self.assertEqual(gcd(18, 12), 6)
        self.assertEqual(gcd(7, 13), 1)
        self.assertEqual(gcd(0, 5), 5)
        self.assertEqual(gcd(5, 0), 5)
        self.assertEqual(gcd(0, 0), 0)

    def test_gcd_negative(self):
        assert abs(gcd(-4, 6)) == 2
        assert abs(gcd(4, -6)) == 2
        assert abs(gcd(-4, -6)) == 2

    def test_gcd_big(self):
        a = 2**200 * 3
        b = 2**150 * 5
        self.assertEqual(gcd(a, b), 2**150)

    def test_lcm(self):
        self.assertEqual(lcm(4, 6), 12)
        self.assertEqual(lcm(3, 5), 15)
        self.assertEqual(lcm(1, 9), 9)
        self.assertEqual(lcm(6, 6), 6)
        assert abs(lcm(2, -1)) == 2

    def test_lcm_divisible(self):
        for a in (1, -1, 2, -2, 6, -10, 15):
            for b in (1, -1, 3, -4, 10, 25):
                d = lcm(a, b)
                assert d % a == 0
                assert d % b == 0

class TestSuperscript(unittest.TestCase):

    def test_single_digits(self):
        self.assertEqual(to_superscript(0), "⁰")
        self.assertEqual(to_superscript(2), "²")
        self.assertEqual(to_superscript(9), "⁹")

    def test_multiple_digits(self):
        self.assertEqual(to_superscript(10), "¹⁰")
        self.assertEqual(to_superscript(1234567890), "¹²³⁴⁵⁶⁷⁸⁹⁰")

    def test_ascii(self):
        self.assertEqual(to_superscript(2, unicode=False), "^2")
        self.assertEqual(to_superscript(12, unicode=False), "^12")

    def test_negative(self):
        with self.assertRaises(ValueError):
            to_superscript(-1)

class TestFreshName(unittest.TestCase):

    def test_distinct(self):
        names = [fresh_name("i") for _ in range(100)]
        self.assertEqual(len(set(names)), 100)
        assert all("i" in n for n in names)

    def test_omit(self):
        n = fresh_name("v")
        m = fresh_name("v", omit={n, "_v0", "_v1"})
        assert m not in (n, "_v0", "_v1")

class Shape(ADT): pass
Circle = declare_case(Shape, "Circle", ["r"])
Rect   = declare_case(Shape, "Rect",   ["w", "h"])

class Area(Visitor):
    def visit_Rect(self, x):
        return x.w * x.h

class TestADT(unittest.TestCase):

    def test_structural_equality(self):
        assert Rect(1, 2) == Rect(1, 2)
        assert Rect(1, 2) != Rect(2, 1)
        assert Circle(1) != Rect(1, 1)
        self.assertEqual(hash(Rect(1, 2)), hash(Rect(1, 2)))
        self.assertEqual(len({Circle(3), Circle(3), Circle(4)}), 2)

    def test_wrong_arity(self):
        with self.assertRaises(AssertionError):
            Rect(1)

    def test_children(self):
        self.assertEqual(Rect(3, 4).children(), (3, 4))
        self.assertEqual(Circle(2).children(), (2,))

    def test_repr(self):
        self.assertEqual(repr(Rect(3, 4)), "Rect(3, 4)")

    def test_visitor(self):
        self.assertEqual(Area().visit(Rect(3, 4)), 12)
        with self.assertRaises(NotImplementedError):
            Area().visit(Circle(1))

