#!/usr/bin/env python

"""
Main entry point for polysum. Run with --help for options.
"""

import sys
import argparse

from polysum import common
from polysum import opts
from polysum import parse
from polysum import syntax_tools
from polysum.contexts import UnboundIndex
from polysum.evaluation import degree
from polysum.polynomials import DivisionByZero
from polysum.simplification import simplify, DegreeUnderestimated

def run(argv=None):
    """Entry point for the polysum executable.

    This procedure reads sys.argv (or `argv`, if given) and prints the closed
    form of the requested expression.
    """

    parser = argparse.ArgumentParser(description='Closed forms for nested summations.')
    parser.add_argument("-a", "--ascii", action="store_true", help="Write exponents as x^2 instead of x²")
    parser.add_argument("-d", "--degree", action="store_true", help="Also print the degree estimate")
    parser.add_argument("-e", "--eval", metavar="N", type=int, action="append", default=[], help="Also print the value of the polynomial at N (repeatable)")
    parser.add_argument("-s", "--show-expression", action="store_true", help="Also print the parsed expression")
    parser.add_argument("-f", "--file", metavar="FILE", default=None, help="Read the expression from FILE, use '-' for stdin")

    internal_opts = parser.add_argument_group("Internal parameters")
    opts.setup(internal_opts)

    parser.add_argument("expression", nargs="?", default=None, help="Expression to simplify (omit or use '-' to read stdin)")
    args = parser.parse_args(argv)
    opts.read(args)

    if args.expression is not None and args.expression != "-":
        input_text = args.expression
    else:
        source = "-" if args.expression == "-" else (args.file or "-")
        with common.open_maybe_stdin(source) as f:
            input_text = f.read()

    try:
        e = parse.parse_exp(input_text)
        if args.show_expression:
            print("Expression: {}".format(syntax_tools.pprint(e, format="unicode", parameter_name=parse.default_parameter_name.value)))
        if args.degree:
            print("Degree estimate: {}".format(degree(e)))
        p = simplify(e)
    except (parse.ParseError, UnboundIndex, DivisionByZero, DegreeUnderestimated) as exc:
        print("Error: {}".format(exc))
        sys.exit(1)
    except RecursionError:
        print("Error: expression is nested too deeply")
        sys.exit(1)

    print(p.to_ascii_string() if args.ascii else p.to_unicode_string())
    for n in args.eval:
        print("p({}) = {}".format(n, p(n)))

if __name__ == "__main__":
    run()
