from . import error as E
from .Structures import (
    EqualComparable,
    Hashable,
    BetterMap,
    LinkedList,
    HashMap,
)
from .Expression import (
    Expression,
    Value,
    Variable,
    Function,
    OperatorKind,
    SplitFunction,
    multiset_equals,
)
from .Operations import Addition, Multiplication
from .Builder import plus, multiply, build

__all__ = [
    # errors
    "E",

    # containers
    "EqualComparable",
    "Hashable",
    "BetterMap",
    "LinkedList",
    "HashMap",

    # expression model
    "Expression",
    "Value",
    "Variable",
    "Function",
    "OperatorKind",
    "SplitFunction",
    "multiset_equals",

    # operators and builders
    "Addition",
    "Multiplication",
    "plus",
    "multiply",
    "build",
]
