# Expression.py
"""""
Expression tree model for the symbolic engine.

Node types
----------
- Value: numeric constant (float)
- Variable: named unknown
- Function: n-ary operator owning its argument list (see Operations.py)

Every node can be differentiated, simplified against a map of known variables,
and compared by structure. Structural equality doubles as equals()/__eq__ and
hashcode()/__hash__, so nodes work as keys in HashMap and in plain dicts.
"""""

from abc import ABCMeta, abstractmethod
from collections import namedtuple
from enum import Enum
import math

from . import error as E
from .Structures import Hashable


# Result of Function.split(): residual symbolic terms plus the numeric accumulator
SplitFunction = namedtuple("SplitFunction", ["expressions", "value"])


class OperatorKind(Enum):
    """Operators known to the engine; the value doubles as the display symbol."""
    ADDITION = "+"
    MULTIPLICATION = "*"


# -----------------------------
# Base type
# -----------------------------

class Expression(Hashable):
    """A node in a symbolic expression tree."""

    @abstractmethod
    def is_function_of(self, variable):
        """True if a Variable named 'variable' occurs in this subtree."""

    @abstractmethod
    def derivative(self, variable):
        """Return a new, unsimplified tree for d(self)/d(variable)."""

    @abstractmethod
    def has_unknowns(self, knowns):
        """True if this subtree contains a Variable that is not a key of 'knowns'."""

    @abstractmethod
    def simplify(self, knowns, trace=None):
        """Return a tree with known variables substituted and constants folded.

        'knowns' maps Variable -> Value (a dict or a HashMap) and is only read.
        'trace' is an optional callable(term, count) told about every group of
        like terms in each grouping pass an Addition makes.
        """

    @abstractmethod
    def structural_equals(self, other):
        """True if 'other' has the same shape and values, ignoring identity."""

    @abstractmethod
    def evaluate(self):
        """Return the float value of a tree that contains no variables."""

    def equals(self, other):
        if not isinstance(other, Expression):
            return False
        return self.structural_equals(other)

    def __eq__(self, other):
        return self.equals(other)

    def __hash__(self):
        return self.hashcode()


# -----------------------------
# Leaves
# -----------------------------

class _ValueType(ABCMeta):
    """Metaclass giving Value its canonical constants as read-only class attributes."""

    NEGATIVE_ONE = property(lambda cls: _NEGATIVE_ONE)
    ZERO = property(lambda cls: _ZERO)
    ONE = property(lambda cls: _ONE)
    TWO = property(lambda cls: _TWO)


class Value(Expression, metaclass=_ValueType):
    """A known numeric constant.

    Value.NEGATIVE_ONE, Value.ZERO, Value.ONE and Value.TWO are shared and
    cannot be rebound. Compare values with structural_equals()/==, never with 'is'.
    """

    def __init__(self, value):
        self._value = float(value)

    @property
    def value(self):
        return self._value

    def is_function_of(self, variable):
        return False

    def derivative(self, variable):
        return Value.ZERO

    def has_unknowns(self, knowns):
        return False

    def simplify(self, knowns, trace=None):
        return self

    def evaluate(self):
        return self._value

    def structural_equals(self, other):
        # Exact comparison, no epsilon
        return isinstance(other, Value) and self._value == other._value

    def hashcode(self):
        return hash(self._value)

    def __str__(self):
        if math.isnan(self._value):
            return "NaN"
        if math.isinf(self._value):
            return "Infinity" if self._value > 0 else "-Infinity"
        if self._value.is_integer() and abs(self._value) < 1e21:
            return str(int(self._value))
        return repr(self._value)

    def __repr__(self):
        return f"Value({self})"


_NEGATIVE_ONE = Value(-1.0)
_ZERO = Value(0.0)
_ONE = Value(1.0)
_TWO = Value(2.0)


class Variable(Expression):
    """A named unknown. Names are case-sensitive."""

    def __init__(self, name):
        self._name = name

    @property
    def name(self):
        return self._name

    def is_function_of(self, variable):
        return self._name == variable

    def derivative(self, variable):
        if self._name == variable:
            return Value.ONE
        return Value.ZERO

    def has_unknowns(self, knowns):
        return self not in knowns

    def simplify(self, knowns, trace=None):
        """Return the Value mapped to this Variable in 'knowns', or the Variable itself."""
        known = knowns.get(self)
        if known is None:
            return self
        return known

    def evaluate(self):
        raise E.EvaluationError(f"Cannot evaluate unknown variable: {self._name}", code="2000", expression=self)

    def structural_equals(self, other):
        return isinstance(other, Variable) and self._name == other._name

    def hashcode(self):
        # Plain sum of character codes; anagrams collide, equals() separates them
        return sum(ord(char) for char in self._name)

    def __str__(self):
        return self._name

    def __repr__(self):
        return f"Variable('{self._name}')"


# -----------------------------
# Functions
# -----------------------------

def multiset_equals(left, right):
    """Return True if 'left' and 'right' hold the same expressions regardless of order.

    Greedy bipartite matching: every element of 'left' claims one structurally
    equal, still unclaimed element of 'right'. O(n^2).
    """
    if len(left) != len(right):
        return False

    claimed = [False] * len(right)

    for expr0 in left:
        for j, expr1 in enumerate(right):
            if not claimed[j] and expr0.structural_equals(expr1):
                claimed[j] = True
                break
        else:
            return False

    return True


class Function(Expression):
    """An operator applied to a list of argument expressions.

    min_args is inclusive and max_args is exclusive:
    min_args <= len(args) < max_args holds after construction and after every
    add_argument(). The argument list is copied; the Function owns it.
    """

    KIND = None

    def __init__(self, name, args, min_args, max_args, commutative_args):
        self.name = name

        if (max_args < min_args) or (max_args < 0):
            raise E.RangeError(
                f"Invalid argument bounds for '{name}': min_args={min_args}, max_args={max_args}",
                code="3000")

        self.min_args = min_args
        self.max_args = max_args

        args = list(args)

        if len(args) >= max_args:
            raise E.RangeError(
                f"'{name}' accepts fewer than {max_args} arguments, got {len(args)}", code="3001")

        if len(args) < min_args:
            raise E.RangeError(
                f"'{name}' needs at least {min_args} arguments, got {len(args)}", code="3002")

        self.args = args
        self.commutative_args = commutative_args

    def add_argument(self, arg):
        """Append 'arg' if there is room. Returns False (and changes nothing) if the function is full."""
        if len(self.args) + 1 < self.max_args:
            self.args.append(arg)
            return True
        return False

    def is_function_of(self, variable):
        return any(arg.is_function_of(variable) for arg in self.args)

    def has_unknowns(self, knowns):
        return any(arg.has_unknowns(knowns) for arg in self.args)

    def structural_equals(self, other):
        if not isinstance(other, Function):
            return False

        if (len(self.args) != len(other.args)) or (self.name != other.name):
            return False

        if self.commutative_args:
            return multiset_equals(self.args, other.args)

        for expr0, expr1 in zip(self.args, other.args):
            if not expr0.structural_equals(expr1):
                return False
        return True

    def hashcode(self):
        # Order independent, so every permutation of commutative args hashes alike
        return sum(arg.hashcode() for arg in self.args)

    def __str__(self):
        return "(" + f" {self.name} ".join(str(arg) for arg in self.args) + ")"

    def __repr__(self):
        return f"{type(self).__name__}({self.args!r})"
