"""Parser for the textual expression syntax.

Examples of the syntax:

    12
    sum(i, 1, x, i * i)
    sum(i, 1, 2*x, sum(j, i, x, j - i))
    (x + 1)^3 - x^3

The parameter is written `x` (see the "parameter-name" option).  Every other
word must be the index of an enclosing `sum`.  Exponents must be constants
between 0 and the "max-exponent" option; `e^k` is shorthand for the product of
k copies of e.

The important function is:
 - parse_exp: str -> Exp
"""

# 3rd party
from ply import lex, yacc

# ours
from polysum import syntax
from polysum.evaluation import eval
from polysum.opts import Option
from polysum.syntax_tools import freshen_binders, free_indices

default_parameter_name = Option("parameter-name", str, "x", description="Name of the parameter in textual expressions", metavar="NAME")
max_exponent = Option("max-exponent", int, 64, description="Largest exponent accepted after ^", metavar="K")

class ParseError(Exception):
    pass

# Each operator has a name and a syntax.  Each becomes an OP_* token for the
# lexer.  So, e.g. ("PLUS", "+") matches "+" and the token will be named
# OP_PLUS.
_OPERATORS = [
    ("PLUS", "+"),
    ("MINUS", "-"),
    ("TIMES", "*"),
    ("CARET", "^"),
    ("COMMA", ","),
    ("OPEN_PAREN", "("),
    ("CLOSE_PAREN", ")"),
    ]

_KEYWORDS = ["sum"]

# Lexer ########################################################################

def keyword_token_name(kw):
    return "KW_{}".format(kw.upper())

def op_token_name(opname):
    return "OP_{}".format(opname.upper())

# Enumerate token names
tokens = []
for kw in _KEYWORDS:
    tokens.append(keyword_token_name(kw))
for opname, op in _OPERATORS:
    tokens.append(op_token_name(opname))
tokens += ["WORD", "NUM"]
tokens = tuple(tokens) # freeze tokens

def make_lexer():

    # ply discovers token rules by looking at the variables in scope here
    # (functions with a regex docstring, or plain regex strings), so every
    # operator needs its own local.
    t_OP_PLUS        = r"\+"
    t_OP_MINUS       = r"-"
    t_OP_TIMES       = r"\*"
    t_OP_CARET       = r"\^"
    t_OP_COMMA       = r","
    t_OP_OPEN_PAREN  = r"\("
    t_OP_CLOSE_PAREN = r"\)"

    def t_WORD(t):
        r"[a-zA-Z_]\w*"
        if t.value in _KEYWORDS:
            t.type = keyword_token_name(t.value)
        return t

    def t_NUM(t):
        r"\d+"
        t.value = int(t.value)
        return t

    def t_COMMENT(t):
        r"\#[^\n]*"
        pass

    def t_newline(t):
        r"\n+"
        t.lexer.lineno += len(t.value)

    t_ignore = " \t\r"

    def t_error(t):
        raise ParseError("Illegal character {!r} at position {}".format(t.value[0], t.lexpos))

    return lex.lex()

_lexer = make_lexer()
def tokenize(s):
    lexer = _lexer.clone() # Because lexer objects are stateful
    lexer.input(s)
    while True:
        tok = lexer.token()
        if not tok:
            break
        yield tok

# Parser #######################################################################

def _exponent(e):
    """The value of an expression used as an exponent.

    Words are not resolved yet at this point, so a mention of the parameter
    shows up as an unbound index just like an unknown word.
    """
    unknown = free_indices(e)
    if unknown:
        raise ParseError("exponent must be a constant, but it mentions {}".format(", ".join(unknown)))
    k = eval(e, 0)
    if k < 0:
        raise ParseError("negative exponent {}".format(k))
    if k > max_exponent.value:
        raise ParseError("exponent {} is larger than the limit of {} (see --max-exponent)".format(k, max_exponent.value))
    return k

def make_parser():
    start = "exp"

    precedence = (
        ("left", "OP_PLUS", "OP_MINUS"),
        ("left", "OP_TIMES"),
        ("right", "UMINUS"),
        ("right", "OP_CARET"))

    def p_exp(p):
        """exp : NUM
               | WORD
               | exp OP_PLUS exp
               | exp OP_MINUS exp
               | exp OP_TIMES exp
               | exp OP_CARET exp
               | OP_MINUS exp %prec UMINUS
               | OP_OPEN_PAREN exp OP_CLOSE_PAREN
               | KW_SUM OP_OPEN_PAREN WORD OP_COMMA exp OP_COMMA exp OP_COMMA exp OP_CLOSE_PAREN"""
        if len(p) == 2:
            if isinstance(p[1], int):
                p[0] = syntax.ENum(p[1])
            else:
                # Resolved to an index or to the parameter once scopes are known
                p[0] = syntax.EIndex(p[1])
        elif len(p) == 3:
            if isinstance(p[2], syntax.ENum):
                p[0] = syntax.ENum(-p[2].val)
            else:
                p[0] = -p[2]
        elif len(p) == 4:
            if p[1] == "(":
                p[0] = p[2]
            elif p[2] == "+":
                p[0] = p[1] + p[3]
            elif p[2] == "-":
                p[0] = p[1] - p[3]
            elif p[2] == "*":
                p[0] = p[1] * p[3]
            elif p[2] == "^":
                p[0] = syntax.power(p[1], _exponent(p[3]))
            else:
                assert False, "unknown case: {}".format(repr(p[1:]))
        else:
            p[0] = syntax.ESum(p[5], p[7], p[3], p[9])

    def p_error(p):
        if p is None:
            raise ParseError("Unexpected end of input")
        raise ParseError("Syntax error at position {}: unexpected {!r}".format(p.lexpos, p.value))

    return yacc.yacc(debug=False, write_tables=False)

_parser = make_parser()

def parse_exp(s : str, parameter_name : str = None) -> syntax.Exp:
    """Parse a string as an expression.

    Every summation in the result has a fresh index name.  Raises ParseError
    if the text is malformed or mentions an unknown variable.
    """
    if parameter_name is None:
        parameter_name = default_parameter_name.value
    raw = _parser.parse(s, lexer=_lexer.clone())
    e = freshen_binders(raw, parameter_name=parameter_name)
    unknown = free_indices(e)
    if unknown:
        raise ParseError("Unknown variable{} {}".format("s" if len(unknown) > 1 else "", ", ".join(unknown)))
    return e
