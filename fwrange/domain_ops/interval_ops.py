"""
Provides a collection of useful operations on interval domains: the
arithmetic transfer functions and the evaluation of comparisons.

Each operation is obtained by giving it the interval domain of its operands,
and returns a function computing on elements of this domain.

Arithmetic is computed on unbounded integers and checked against the
bit-width of the domain afterwards. When the bounds do not fit, the result is
the top element ("overflow"), unless one of the operands is the explicit
interval (MIN, MAX). Such an operand carries no information to lose, so the
bounds are simply wrapped around.
"""

from functools import reduce

from fwrange import bounds
from fwrange.domain_ops import boolean_ops
from fwrange.tools.logger import log


def overflows(domain, lo, hi):
    """
    Returns True if the bounds [lo, hi] computed on unbounded integers do not
    fit the width of the given domain.
    """
    return lo < domain.min or hi > domain.max


def fit(domain, lo, hi, operands, name):
    """
    Returns the element of the domain for the bounds [lo, hi] computed on
    unbounded integers from the given operands, applying the overflow policy
    described in this module's documentation.
    """
    if not overflows(domain, lo, hi):
        return lo, hi
    elif any(domain.is_full(x) for x in operands):
        return domain.wrap(lo, hi)

    log('overflow', '{} of {} overflows {} bits'.format(
        name, ', '.join(domain.str(x) for x in operands), domain.width
    ))
    return domain.top


def strict(domain, compute):
    """
    Lifts the given function on bounded intervals to a function on every
    element of the domain: empty operands give the empty interval and
    top operands give top, without any computation.
    """
    def do(x, y):
        if domain.is_empty(x) or domain.is_empty(y):
            return domain.bottom
        elif domain.is_top(x) or domain.is_top(y):
            return domain.top
        return compute(x, y)

    return do


def join_all(domain, xs):
    return reduce(domain.join, xs, domain.bottom)


def unsigned_divisors(domain, y):
    """
    Returns the unsigned parts of the given interval, without zero.
    """
    return [
        (max(c, 1), d)
        for c, d in bounds.unsigned_parts(y[0], y[1], domain.width)
        if d >= 1
    ]


def from_bool(domain):
    """
    Given an interval domain, returns a function which converts an element of
    the Boolean domain to an interval: {1} for true, {0} for false, and top
    when the value is unknown.
    """
    one, zero = domain.build(1), domain.build(0)

    def do(b):
        if boolean_ops.Boolean.eq(b, boolean_ops.true):
            return one
        elif boolean_ops.Boolean.eq(b, boolean_ops.false):
            return zero
        elif boolean_ops.Boolean.eq(b, boolean_ops.both):
            return domain.top
        else:
            return domain.bottom

    return do


def add(domain):
    """
    Given an interval domain, returns a function which, given two sets of
    integers represented by elements of this interval domain, returns the
    smallest interval which contains all possible results of adding integers
    of each set in a pairwise manner.
    """
    def do(x, y):
        return fit(domain, x[0] + y[0], x[1] + y[1], (x, y), 'add')

    return strict(domain, do)


def sub(domain):
    """
    Given an interval domain, returns a function which, given two sets of
    integers represented by elements of this interval domain, returns the
    smallest interval which contains all possible results of subtracting
    integers of each set in a pairwise manner.
    """
    def do(x, y):
        return fit(domain, x[0] - y[1], x[1] - y[0], (x, y), 'sub')

    return strict(domain, do)


def mul(domain):
    """
    Given an interval domain, returns a function which computes the smallest
    interval containing all the pairwise products of the two given sets of
    integers. Depending on the signs of the bounds, any corner of the two
    intervals may give the extreme products.
    """
    def do(x, y):
        products = [a * c for a in x for c in y]
        return fit(domain, min(products), max(products), (x, y), 'mul')

    return strict(domain, do)


def neg(domain):
    """
    Given an interval domain, returns a function which, given a set of
    integers represented by an element of this interval domain, returns the
    smallest interval which contains the negation of all the integers in the
    given interval. Negating MIN overflows.
    """
    def do(x):
        if domain.is_special(x):
            return x
        return fit(domain, -x[1], -x[0], (x,), 'neg')

    return do


def sdiv(domain):
    """
    Given an interval domain, returns a function which computes the signed
    division of integers of each set, rounding toward zero.

    Division by zero is undefined and cannot happen in the analyzed program,
    so zero is excluded from the divisor. A divisor which is exactly {0}
    gives the empty interval. Dividing MIN by -1 overflows.
    """
    def do(x, y):
        divisors = bounds.nonzero_parts(y[0], y[1])
        if len(divisors) == 0:
            return domain.bottom

        # Quotients are monotonic on each part of the divisor.
        quotients = [
            bounds.sdiv(n, d)
            for n in x
            for part in divisors
            for d in part
        ]
        return fit(domain, min(quotients), max(quotients), (x, y), 'sdiv')

    return strict(domain, do)


def udiv(domain):
    """
    Given an interval domain, returns a function which computes the unsigned
    division of integers of each set. Both operands are read as unsigned,
    which may split each of them in two parts.
    """
    def do(x, y):
        divisors = unsigned_divisors(domain, y)
        return join_all(domain, [
            domain.from_unsigned(a // d, b // c)
            for a, b in bounds.unsigned_parts(x[0], x[1], domain.width)
            for c, d in divisors
        ])

    return strict(domain, do)


def srem(domain):
    """
    Given an interval domain, returns a function which computes the signed
    remainder of integers of each set. The sign of the remainder follows the
    dividend, and its magnitude is lower than the one of the divisor.
    """
    def do(x, y):
        divisors = bounds.nonzero_parts(y[0], y[1])
        if len(divisors) == 0:
            return domain.bottom

        a, b = x
        if a == b and y[0] == y[1]:
            r = bounds.srem(a, y[0])
            return r, r

        magnitudes = [abs(d) for part in divisors for d in part]
        smallest, largest = min(magnitudes), max(magnitudes)

        if max(-a, b) < smallest:
            return x

        lo = 0 if a >= 0 else max(a, 1 - largest)
        hi = 0 if b <= 0 else min(b, largest - 1)
        return lo, hi

    return strict(domain, do)


def urem(domain):
    """
    Given an interval domain, returns a function which computes the unsigned
    remainder of integers of each set.
    """
    def urem_parts(a, b, c, d):
        if b < c:
            return a, b
        elif a == b and c == d:
            return a % c, a % c
        else:
            return 0, min(b, d - 1)

    def do(x, y):
        divisors = unsigned_divisors(domain, y)
        return join_all(domain, [
            domain.from_unsigned(*urem_parts(a, b, c, d))
            for a, b in bounds.unsigned_parts(x[0], x[1], domain.width)
            for c, d in divisors
        ])

    return strict(domain, do)


def _comparison(domain, decide):
    def do(x, y):
        if domain.is_empty(x) or domain.is_empty(y):
            return boolean_ops.none
        return decide(domain.limits(x), domain.limits(y))

    return do


def unsigned_hull(domain, x):
    """
    Returns the smallest unsigned interval containing the unsigned reading of
    the given bounds.
    """
    parts = bounds.unsigned_parts(x[0], x[1], domain.width)
    return parts[0][0], parts[-1][1]


def eq(domain):
    """
    Given an interval domain, returns a function which, given a set of
    integers represented by elements of this interval domain, returns the
    smallest set which contains all the possible boolean values that can
    result from testing equality between integers of each set in a pairwise
    manner.
    """
    def do(x, y):
        (a, b), (c, d) = x, y
        return boolean_ops.decide(
            a <= d and c <= b,
            not (a == b == c == d)
        )

    return _comparison(domain, do)


def neq(domain):
    do_eq = eq(domain)

    def do(x, y):
        return boolean_ops.not_(do_eq(x, y))

    return do


def slt(domain):
    """
    Given an interval domain, returns a function which evaluates the signed
    "is less than" test between integers of each set.
    """
    def do(x, y):
        (a, b), (c, d) = x, y
        return boolean_ops.decide(a < d, b >= c)

    return _comparison(domain, do)


def sle(domain):
    """
    Given an interval domain, returns a function which evaluates the signed
    "is less than or equal" test between integers of each set.
    """
    def do(x, y):
        (a, b), (c, d) = x, y
        return boolean_ops.decide(a <= d, b > c)

    return _comparison(domain, do)


def ult(domain):
    """
    Given an interval domain, returns a function which evaluates the unsigned
    "is less than" test between integers of each set.
    """
    def do(x, y):
        (a, b), (c, d) = unsigned_hull(domain, x), unsigned_hull(domain, y)
        return boolean_ops.decide(a < d, b >= c)

    return _comparison(domain, do)


def ule(domain):
    """
    Given an interval domain, returns a function which evaluates the unsigned
    "is less than or equal" test between integers of each set.
    """
    def do(x, y):
        (a, b), (c, d) = unsigned_hull(domain, x), unsigned_hull(domain, y)
        return boolean_ops.decide(a <= d, b > c)

    return _comparison(domain, do)


def _swapped(comparison):
    def build(domain):
        do_cmp = comparison(domain)

        def do(x, y):
            return do_cmp(y, x)

        return do

    return build


sgt = _swapped(slt)
sge = _swapped(sle)
ugt = _swapped(ult)
uge = _swapped(ule)
