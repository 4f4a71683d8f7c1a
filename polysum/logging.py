"""Timed, indented progress messages for the phases of a simplification.

Important functions:
 - task: a context manager around one phase of work
 - event: print a log message (indented based on active tasks)
 - profile: cumulative time spent in each (nested) task so far

Each thread has its own stack of active tasks, so concurrent simplifications
do not interleave their task paths.  The accumulated times are shared.
"""

from collections import defaultdict
from contextlib import contextmanager
import datetime
import threading

from polysum.opts import Option

verbose = Option("verbose", bool, False, description="Log the phases of every simplification")

_times = defaultdict(float)
_times_lock = threading.Lock()
_local = threading.local()

def _active_tasks():
    stk = getattr(_local, "tasks", None)
    if stk is None:
        stk = _local.tasks = []
    return stk

def log(string):
    if verbose.value:
        print(string)

def _format_kwargs(kwargs):
    if not kwargs:
        return ""
    return " [" + ", ".join("{}={}".format(k, v) for k, v in kwargs.items()) + "]"

@contextmanager
def task(name, **kwargs):
    stk = _active_tasks()
    log("{}{}{}...".format("  " * len(stk), name, _format_kwargs(kwargs)))
    stk.append(name)
    key = tuple(stk)
    start = datetime.datetime.now()
    try:
        yield
    finally:
        duration = (datetime.datetime.now() - start).total_seconds()
        stk.pop()
        with _times_lock:
            _times[key] += duration
        log("{}Finished {} [duration={:.3}s]".format("  " * len(stk), name, duration))

def event(name, **kwargs):
    log("{}{}{}".format("  " * len(_active_tasks()), name, _format_kwargs(kwargs)))

def profile():
    """Return {task path: total seconds}, slowest first.

    A task path is the tuple of task names from the outermost active task down
    to the task itself.
    """
    with _times_lock:
        return { k : _times[k] for k in sorted(_times.keys(), key=_times.get, reverse=True) }
