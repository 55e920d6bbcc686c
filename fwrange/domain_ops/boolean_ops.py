"""
Provides the three-valued Boolean domain, in which comparisons between
intervals are evaluated.

An element is the set of the boolean values a test may produce: "true",
"false", "both" when the outcome is unknown, or "none" when the test is
never evaluated.
"""

from fwrange import domains
from fwrange.constants import lits

Boolean = domains.Powerset({lits.TRUE, lits.FALSE})

none = Boolean.build(frozenset([]))
false = Boolean.build(frozenset([lits.FALSE]))
true = Boolean.build(frozenset([lits.TRUE]))
both = Boolean.build(frozenset([lits.TRUE, lits.FALSE]))


def not_(x):
    """
    Swaps true and false. Both and none are left as is.

    :rtype: frozenset[str]
    """
    if Boolean.eq(x, true):
        return false
    elif Boolean.eq(x, false):
        return true
    return x


def and_(x, y):
    """
    Returns the possible outcomes of the conjunction of a value of x with a
    value of y. A known false operand decides the result on its own.

    :rtype: frozenset[str]
    """
    if Boolean.eq(x, none) or Boolean.eq(y, none):
        return none
    elif Boolean.eq(x, false) or Boolean.eq(y, false):
        return false
    return true if Boolean.eq(x, true) and Boolean.eq(y, true) else both


def or_(x, y):
    """
    Returns the possible outcomes of the disjunction of a value of x with a
    value of y. A known true operand decides the result on its own.

    :rtype: frozenset[str]
    """
    if Boolean.eq(x, none) or Boolean.eq(y, none):
        return none
    elif Boolean.eq(x, true) or Boolean.eq(y, true):
        return true
    return false if Boolean.eq(x, false) and Boolean.eq(y, false) else both


def lit(val):
    """
    :param bool val: A python boolean.
    :rtype: frozenset[str]
    """
    return true if val else false


def decide(may_be_true, may_be_false):
    """
    Returns the element of the Boolean domain containing the boolean values
    flagged as possible.
    """
    if may_be_true and may_be_false:
        return both
    elif may_be_true:
        return true
    elif may_be_false:
        return false
    else:
        return none
