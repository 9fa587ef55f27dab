# Operations.py
"""""
Concrete operators: Addition and Multiplication.

Both take 2..199 arguments (MAX_ALLOWED_ARGS is exclusive) and are commutative.

Addition simplifies fully: known variables are substituted, constants are
summed, nested sums are flattened and repeated terms are collected
(x + x -> 2 * x). Multiplication only simplifies its factors; it does not fold
constants or drop neutral factors.
"""""

import copy
import logging
import math

from . import Builder
from .Expression import Function, OperatorKind, SplitFunction, Value, Variable
from .Structures import HashMap

logger = logging.getLogger(__name__)


class Addition(Function):
    """The addition operation, with any number of addends."""

    KIND = OperatorKind.ADDITION
    MAX_ALLOWED_ARGS = 200

    def __init__(self, args):
        super().__init__(self.KIND.value, args, 2, Addition.MAX_ALLOWED_ARGS, True)

    def derivative(self, variable):
        """The derivative of a sum is the sum of the derivatives."""
        return Addition([arg.derivative(variable) for arg in self.args])

    def evaluate(self):
        return sum(arg.evaluate() for arg in self.args)

    def split(self, knowns):
        """Flatten nested sums into (residual symbolic terms, summed constants).

        Values, known Variables and the numeric parts of nested Additions go
        into the accumulator; everything else is kept in traversal order.
        Equal residual terms are not merged here.
        """
        total = 0.0
        expressions = []

        for arg in self.args:
            if isinstance(arg, Value):
                total += arg.value
            elif isinstance(arg, Variable) and arg in knowns:
                total += knowns.get(arg).value
            elif isinstance(arg, Addition):
                inner = arg.split(knowns)
                total += inner.value.value
                expressions.extend(inner.expressions)
            else:
                expressions.append(arg)

        return SplitFunction(expressions, Value(total))

    def simplify(self, knowns, trace=None):
        simplified = Addition([arg.simplify(knowns, trace) for arg in self.args])

        # Nothing unknown left: the whole sum is a number
        if not simplified.has_unknowns(knowns):
            return Value(simplified.evaluate())

        split = simplified.split(knowns)

        # Collecting can produce a term equal to another one (x + x + 2*x),
        # so regroup until every term is distinct
        terms = split.expressions
        while True:
            grouped = _group_terms(terms, knowns, trace)
            settled = len(grouped) == len(terms)
            terms = grouped
            if settled:
                break

        if not terms:
            return split.value

        # The accumulator is kept even when it is zero
        terms.append(split.value)
        return _bounded_sum(terms)


def _group_terms(terms, knowns, trace):
    """One grouping pass: every distinct term once, repeated terms as (count * term)."""
    counts = HashMap()
    for term in terms:
        counts.put(term, counts.get(term, 0) + 1)

    grouped = []
    for term, count in zip(counts.keys(), counts.values()):
        logger.debug("Grouped term %s x%d", term, count)
        if trace is not None:
            trace(term, count)

        if count == 1:
            grouped.append(term)
        else:
            grouped.append(Multiplication([Value(count), term]).simplify(knowns, trace))

    return grouped


def _bounded_sum(terms):
    """Build an Addition over 'terms', nesting the tail when it exceeds the argument limit."""
    limit = Addition.MAX_ALLOWED_ARGS - 1
    if len(terms) <= limit:
        return Addition(terms)
    return Addition(terms[:limit - 1] + [_bounded_sum(terms[limit - 1:])])


class Multiplication(Function):
    """The multiplication operation, with any number of factors."""

    KIND = OperatorKind.MULTIPLICATION
    MAX_ALLOWED_ARGS = 200

    def __init__(self, args):
        super().__init__(self.KIND.value, args, 2, Multiplication.MAX_ALLOWED_ARGS, True)

    def derivative(self, variable):
        """Product rule extended to n factors: sum over i of (f_i' * every other f_j).

        The result is not simplified. Factors that are not differentiated are
        copied so the new tree does not share subtrees with this one.
        """
        terms = []

        for i in range(len(self.args)):
            operands = []
            for j, arg in enumerate(self.args):
                if j == i:
                    operands.append(arg.derivative(variable))
                else:
                    operands.append(copy.deepcopy(arg))
            terms.append(Builder.multiply(operands))

        return Builder.plus(terms)

    def evaluate(self):
        return math.prod(arg.evaluate() for arg in self.args)

    def split(self, knowns):
        # Products contribute no numeric part to a sum's accumulator
        return SplitFunction([], Value.ZERO)

    def simplify(self, knowns, trace=None):
        """Simplify every factor and rewrap them; constants are not multiplied out."""
        return Multiplication([arg.simplify(knowns, trace) for arg in self.args])
