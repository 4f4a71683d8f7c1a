"""Settings declared next to the code that reads them.

Each polysum module that has a setting (verbosity, the parameter name the
parser accepts, the largest exponent, how many extra points the simplifier
cross-checks) declares an Option for it at module level.  The command line
tool calls `setup` to turn every Option into a flag and `read` to copy the
parsed flags back.

    verify_points = Option("verify-points", int, 0, description="...")
    ...
    if verify_points.value > 0:
        ...
"""

# Every Option declared so far, in declaration order.
_OPTS = []

class Option(object):
    def __init__(self, name, type, default, description="", metavar=None):
        assert type in (bool, str, int)
        assert all(o.name != name for o in _OPTS), "duplicate option {}".format(name)
        self.name = name
        self.type = type
        self.default = default
        self.value = default
        self.description = description
        self.metavar = metavar
        _OPTS.append(self)

    def __repr__(self):
        return "Option({!r}, {}, {!r})".format(self.name, self.type.__name__, self.value)

def setup(parser):
    """Add a --flag to an argparse parser (or group) for every Option."""
    for o in _OPTS:
        if o.type is bool:
            parser.add_argument("--" + o.name, action="store_true", default=o.default, help=o.description)
        else:
            parser.add_argument("--" + o.name,
                metavar=o.metavar,
                type=o.type,
                default=o.default,
                help="{} (default={!r})".format(o.description, o.default))

def read(args):
    """Copy parsed argparse values into the Options."""
    for o in _OPTS:
        o.value = getattr(args, o.name.replace("-", "_"))

def snapshot():
    """The current value of every Option, by name."""
    return { o.name : o.value for o in _OPTS }

def restore(snap):
    """Set every Option named in `snap` back to the recorded value."""
    for o in _OPTS:
        if o.name in snap:
            o.value = snap[o.name]
