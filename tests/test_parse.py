import unittest

from polysum.syntax import *
from polysum import opts
from polysum.parse import parse_exp, tokenize, ParseError, max_exponent
from polysum.syntax_tools import pprint
from polysum.polynomials import RationalPolynomial
from polysum.simplification import simplify

class TestLexer(unittest.TestCase):

    def test_tokens(self):
        toks = [(t.type, t.value) for t in tokenize("sum(i, 1, x^2, 3*i) # comment")]
        self.assertEqual(toks, [
            ("KW_SUM", "sum"),
            ("OP_OPEN_PAREN", "("),
            ("WORD", "i"),
            ("OP_COMMA", ","),
            ("NUM", 1),
            ("OP_COMMA", ","),
            ("WORD", "x"),
            ("OP_CARET", "^"),
            ("NUM", 2),
            ("OP_COMMA", ","),
            ("NUM", 3),
            ("OP_TIMES", "*"),
            ("WORD", "i"),
            ("OP_CLOSE_PAREN", ")")])

    def test_illegal_character(self):
        with self.assertRaises(ParseError):
            list(tokenize("x $ 1"))

class TestParser(unittest.TestCase):

    def test_atoms(self):
        self.assertEqual(parse_exp("12"), ENum(12))
        self.assertEqual(parse_exp("x"), PARAM)
        self.assertEqual(parse_exp("-3"), ENum(-3))
        self.assertEqual(parse_exp("(((x)))"), PARAM)

    def test_operators(self):
        self.assertEqual(parse_exp("x + 2 * x"), EAdd(PARAM, EMul(ENum(2), PARAM)))
        self.assertEqual(parse_exp("x - 1"), PARAM - 1)
        self.assertEqual(parse_exp("-x"), -PARAM)
        self.assertEqual(parse_exp("1 + 2 + x"), EAdd(EAdd(ENum(1), ENum(2)), PARAM))

    def test_precedence(self):
        self.assertEqual(parse_exp("2 * x + 1").eval(5), 11)
        self.assertEqual(parse_exp("2 * (x + 1)").eval(5), 12)
        self.assertEqual(parse_exp("-x^2").eval(3), -9)
        self.assertEqual(parse_exp("x - 1 - 1").eval(5), 3)
        self.assertEqual(parse_exp("x^2^2").eval(2), 16)
        self.assertEqual(parse_exp("2 * x^3").eval(2), 16)

    def test_powers(self):
        self.assertEqual(parse_exp("x^0"), ONE)
        self.assertEqual(parse_exp("x^1"), PARAM)
        self.assertEqual(parse_exp("x^3"), EMul(EMul(PARAM, PARAM), PARAM))
        self.assertEqual(parse_exp("x^(1+1)"), EMul(PARAM, PARAM))
        self.assertEqual(parse_exp("x^sum(i, 1, 2, i)").eval(2), 8)

    def test_bad_exponents(self):
        for text in ("x^x", "2^x", "x^(0-1)", "sum(i, 1, x, x^i)"):
            with self.assertRaises(ParseError):
                parse_exp(text)

    def test_exponent_limit(self):
        snap = opts.snapshot()
        try:
            self.assertEqual(parse_exp("x^64").eval(2), 2**64)
            for text in ("x^65", "x^5000"):
                with self.assertRaises(ParseError):
                    parse_exp(text)
            max_exponent.value = 5000
            self.assertEqual(parse_exp("x^5000").eval(1), 1)
        finally:
            opts.restore(snap)

    def test_sum(self):
        e = parse_exp("sum(i, 1, x, i * i)")
        assert isinstance(e, ESum)
        self.assertNotEqual(e.index, "i")
        self.assertEqual(e.lo, ENum(1))
        self.assertEqual(e.hi, PARAM)
        self.assertEqual(e.body, EMul(EIndex(e.index), EIndex(e.index)))
        self.assertEqual(simplify(e), RationalPolynomial((0, 1, 3, 2), 6))

    def test_nested_sums_get_fresh_names(self):
        e = parse_exp("sum(i, 1, x, sum(i, 1, i, i))")
        self.assertNotEqual(e.index, e.body.index)
        # the inner i shadows the outer one in the body, but not in the bounds
        self.assertEqual(e.body.hi, EIndex(e.index))
        self.assertEqual(e.body.body, EIndex(e.body.index))
        self.assertEqual(e.eval(3), 1 + 3 + 6)

    def test_index_shadows_parameter(self):
        e = parse_exp("sum(x, 1, x, x)")
        self.assertEqual(e.hi, PARAM)
        self.assertEqual(simplify(e), RationalPolynomial((0, 1, 1), 2))

    def test_parameter_name(self):
        self.assertEqual(parse_exp("n * n", parameter_name="n"), EMul(PARAM, PARAM))
        with self.assertRaises(ParseError):
            parse_exp("x", parameter_name="n")

    def test_unknown_variables(self):
        with self.assertRaises(ParseError):
            parse_exp("y + 1")
        with self.assertRaises(ParseError):
            parse_exp("sum(i, 1, i, 1)")
        with self.assertRaises(ParseError):
            parse_exp("sum(i, 1, x, j)")

    def test_syntax_errors(self):
        for text in ("", "x +", "(x", "x)", "sum(1, 1, x, 1)", "sum(i, 1, x)", "x x", "sum"):
            with self.assertRaises(ParseError):
                parse_exp(text)

    def test_multiline(self):
        text = """
            # sum of odd numbers
            sum(i, 1, x,
                2*i - 1)
        """
        self.assertEqual(simplify(parse_exp(text)), RationalPolynomial((0, 0, 1), 1))

    def test_pprint_round_trip(self):
        texts = [
            "x + 1",
            "x - (x + 1)",
            "-(x * x) + 3",
            "(x + 1) * (x - 2) * -3",
            "sum(i, 1, x, i * i - x)",
            "sum(i, x, 2 * x, sum(j, 1, i, j * (i - 1)))",
        ]
        for text in texts:
            e = parse_exp(text)
            e2 = parse_exp(pprint(e))
            for n in range(6):
                self.assertEqual(e.eval(n), e2.eval(n))
