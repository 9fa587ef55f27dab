# Builder.py
# Shorthand functions to help build Expression trees.

from . import Operations
from .Expression import OperatorKind


def plus(args):
    """Return the addends in 'args' added together (an Addition)."""
    return Operations.Addition(args)


def multiply(args):
    """Return the operands in 'args' multiplied together (a Multiplication)."""
    return Operations.Multiplication(args)


_BUILDERS = {
    OperatorKind.ADDITION: plus,
    OperatorKind.MULTIPLICATION: multiply,
}


def build(kind, args):
    """Return the Function for operator 'kind' applied to 'args'. Unknown kinds raise KeyError."""
    return _BUILDERS[kind](args)
