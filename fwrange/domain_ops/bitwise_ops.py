"""
Provides the bitwise transfer functions of interval domains.

Bitwise operations are not monotonic on two's-complement integers: the bounds
of a result do not come from the bounds of the operands. Operands are thus
split according to their sign. Within a sign quadrant, both operands are
contiguous unsigned intervals sharing their most significant bit, on which
the tight unsigned bounds of Hacker's Delight (section 4-3) apply, and the
sign of the result is known. The results of the quadrants are then joined.
"""

from fwrange import bounds
from fwrange.domain_ops import interval_ops
from fwrange.tools.logger import log


def min_or(a, b, c, d, width):
    """
    Returns the minimum of x | y for x in [a, b] and y in [c, d], all
    unsigned.
    """
    m = 1 << (width - 1)
    while m != 0:
        if ~a & c & m:
            temp = (a | m) & -m
            if temp <= b:
                a = temp
                break
        elif a & ~c & m:
            temp = (c | m) & -m
            if temp <= d:
                c = temp
                break
        m >>= 1
    return a | c


def max_or(a, b, c, d, width):
    m = 1 << (width - 1)
    while m != 0:
        if b & d & m:
            temp = (b - m) | (m - 1)
            if temp >= a:
                b = temp
                break
            temp = (d - m) | (m - 1)
            if temp >= c:
                d = temp
                break
        m >>= 1
    return b | d


def min_and(a, b, c, d, width):
    m = 1 << (width - 1)
    while m != 0:
        if ~a & ~c & m:
            temp = (a | m) & -m
            if temp <= b:
                a = temp
                break
            temp = (c | m) & -m
            if temp <= d:
                c = temp
                break
        m >>= 1
    return a & c


def max_and(a, b, c, d, width):
    m = 1 << (width - 1)
    while m != 0:
        if b & ~d & m:
            temp = (b & ~m) | (m - 1)
            if temp >= a:
                b = temp
                break
        elif ~b & d & m:
            temp = (d & ~m) | (m - 1)
            if temp >= c:
                d = temp
                break
        m >>= 1
    return b & d


def min_xor(a, b, c, d, width):
    m = 1 << (width - 1)
    while m != 0:
        if ~a & c & m:
            temp = (a | m) & -m
            if temp <= b:
                a = temp
        elif a & ~c & m:
            temp = (c | m) & -m
            if temp <= d:
                c = temp
        m >>= 1
    return a ^ c


def max_xor(a, b, c, d, width):
    m = 1 << (width - 1)
    while m != 0:
        if b & d & m:
            temp = (b - m) | (m - 1)
            if temp >= a:
                b = temp
            else:
                temp = (d - m) | (m - 1)
                if temp >= c:
                    d = temp
        m >>= 1
    return b ^ d


def _by_sign_quadrant(domain, x, y, lower, upper):
    """
    Returns the join of the results of the unsigned bitwise operation
    described by the given bounds functions, over each pair of sign parts of
    the operands.
    """
    results = []
    for a, b in bounds.sign_parts(x[0], x[1]):
        a, b = (bounds.to_unsigned(a, domain.width),
                bounds.to_unsigned(b, domain.width))
        for c, d in bounds.sign_parts(y[0], y[1]):
            c, d = (bounds.to_unsigned(c, domain.width),
                    bounds.to_unsigned(d, domain.width))
            results.append(domain.from_unsigned(
                lower(a, b, c, d, domain.width),
                upper(a, b, c, d, domain.width)
            ))
    return interval_ops.join_all(domain, results)


def signed_and(domain, x, y):
    return _by_sign_quadrant(domain, x, y, min_and, max_and)


def signed_or(domain, x, y):
    return _by_sign_quadrant(domain, x, y, min_or, max_or)


def signed_xor(domain, x, y):
    return _by_sign_quadrant(domain, x, y, min_xor, max_xor)


def and_(domain):
    """
    Given an interval domain, returns a function which computes the smallest
    interval containing the bitwise conjunction of integers of each set.
    """
    return interval_ops.strict(
        domain, lambda x, y: signed_and(domain, x, y)
    )


def or_(domain):
    """
    Given an interval domain, returns a function which computes the smallest
    interval containing the bitwise disjunction of integers of each set.
    """
    return interval_ops.strict(
        domain, lambda x, y: signed_or(domain, x, y)
    )


def xor(domain):
    """
    Given an interval domain, returns a function which computes the smallest
    interval containing the bitwise exclusive disjunction of integers of each
    set.
    """
    return interval_ops.strict(
        domain, lambda x, y: signed_xor(domain, x, y)
    )


def _valid_amount(domain, y, name):
    if y[0] < 0 or y[1] >= domain.width:
        log('overflow', '{} by {} is undefined on {} bits'.format(
            name, domain.str(y), domain.width
        ))
        return False
    return True


def shl(domain):
    """
    Given an interval domain, returns a function which computes the left
    shift of integers of the first set by amounts of the second set.

    Shifting by an amount outside of [0, width) is undefined and gives top.
    A shift which moves significant bits out of the value overflows.
    """
    def do(x, y):
        if not _valid_amount(domain, y, 'shl'):
            return domain.top

        c, d = y
        if c == d:
            lo, hi = x[0] << c, x[1] << c
        else:
            lo = min(x[0] << c, x[0] << d)
            hi = max(x[1] << c, x[1] << d)
        return interval_ops.fit(domain, lo, hi, (x, y), 'shl')

    return interval_ops.strict(domain, do)


def lshr(domain):
    """
    Given an interval domain, returns a function which computes the logical
    right shift of integers of the first set by amounts of the second set.
    The shifted value is read as unsigned.
    """
    def do(x, y):
        if not _valid_amount(domain, y, 'lshr'):
            return domain.top

        c, d = y
        return interval_ops.join_all(domain, [
            domain.from_unsigned(a >> d, b >> c)
            for a, b in bounds.unsigned_parts(x[0], x[1], domain.width)
        ])

    return interval_ops.strict(domain, do)


def ashr(domain):
    """
    Given an interval domain, returns a function which computes the
    arithmetic right shift of integers of the first set by amounts of the
    second set. It never overflows.
    """
    def do(x, y):
        if not _valid_amount(domain, y, 'ashr'):
            return domain.top

        (a, b), (c, d) = x, y
        return min(a >> c, a >> d), max(b >> c, b >> d)

    return interval_ops.strict(domain, do)
