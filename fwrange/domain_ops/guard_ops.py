"""
Provides the narrowing of intervals by the guards of conditional branches.

Given a comparison which is known to hold, the operands are narrowed to the
integers for which it can hold. If it cannot hold at all, the branch is
unreachable and both operands become empty.

The core rule is on intervals that do not wrap around: [a, b] <= [c, d] can
only hold if a <= d, in which case the left operand is narrowed to
[a, min(b, d)] and the right one to [max(a, c), d]. Unsigned comparisons on
signed intervals first split the operands which cross the north pole into
two parts, on which the rule is applied pairwise.
"""

from fwrange import bounds
from fwrange.constants import ops
from fwrange.domain_ops import boolean_ops, interval_ops
from fwrange.errors import ContractViolation
from fwrange.tools.logger import log


def may_ule_without_crossing(a, b, c, d):
    """
    Returns True if some integer of [a, b] may be lower than or equal to some
    integer of [c, d], none of them crossing a pole.
    """
    return a <= d


def may_ult_without_crossing(a, b, c, d):
    return a < d


def _signed_narrowing(strict):
    s = 1 if strict else 0

    def narrow(domain, x, y):
        (a, b), (c, d) = domain.limits(x), domain.limits(y)
        return (a, min(b, d - s)), (max(c, a + s), d)

    return narrow


def _unsigned_narrowing(strict):
    s = 1 if strict else 0
    may_hold = (may_ult_without_crossing if strict
                else may_ule_without_crossing)

    def narrow(domain, x, y):
        x_lo, x_hi = domain.limits(x)
        y_lo, y_hi = domain.limits(y)
        lefts, rights = [], []
        for a, b in bounds.unsigned_parts(x_lo, x_hi, domain.width):
            for c, d in bounds.unsigned_parts(y_lo, y_hi, domain.width):
                if may_hold(a, b, c, d):
                    lefts.append(domain.from_unsigned(a, min(b, d - s)))
                    rights.append(domain.from_unsigned(max(c, a + s), d))
        return (interval_ops.join_all(domain, lefts),
                interval_ops.join_all(domain, rights))

    return narrow


def _eq_narrowing(domain, x, y):
    m = domain.meet(x, y)
    return m, m


def _exclude(domain, x, y):
    """
    Removes the integer of y from the ends of x, if y is a singleton.
    """
    if not domain.is_singleton(y):
        return x
    lo, hi = domain.limits(x)
    if lo == y[0]:
        lo += 1
    elif hi == y[0]:
        hi -= 1
    return lo, hi


def _ne_narrowing(domain, x, y):
    return _exclude(domain, x, y), _exclude(domain, y, x)


def _swapped(narrow):
    def do(domain, x, y):
        l, r = narrow(domain, y, x)
        return r, l

    return do


_GUARDS = {
    ops.EQ: (interval_ops.eq, _eq_narrowing),
    ops.NE: (interval_ops.neq, _ne_narrowing),
    ops.SLE: (interval_ops.sle, _signed_narrowing(strict=False)),
    ops.SLT: (interval_ops.slt, _signed_narrowing(strict=True)),
    ops.ULE: (interval_ops.ule, _unsigned_narrowing(strict=False)),
    ops.ULT: (interval_ops.ult, _unsigned_narrowing(strict=True)),
    ops.SGE: (interval_ops.sge, _swapped(_signed_narrowing(strict=False))),
    ops.SGT: (interval_ops.sgt, _swapped(_signed_narrowing(strict=True))),
    ops.UGE: (interval_ops.uge, _swapped(_unsigned_narrowing(strict=False))),
    ops.UGT: (interval_ops.ugt, _swapped(_unsigned_narrowing(strict=True))),
}


def _keep_top(domain, orig, narrowed):
    """
    A top operand about which nothing was learned stays top.
    """
    if domain.is_top(orig) and domain.is_full(narrowed):
        return orig
    return narrowed


def filter_two_vars(domain, cmp):
    """
    Given an interval domain and a comparison, returns a function which,
    given the two operands of the comparison, returns them narrowed to the
    integers for which the comparison holds.

    :param Intervals domain: The domain of both operands.
    :param str cmp: One of the comparisons of the ops module.
    :rtype: (object, object) -> (object, object)
    """
    if cmp not in _GUARDS:
        raise ContractViolation("unknown comparison: {}".format(cmp))

    evaluate, narrow = _GUARDS[cmp]
    do_eval = evaluate(domain)

    def do(x, y):
        holds = do_eval(domain.check(x), domain.check(y))
        if (boolean_ops.Boolean.eq(holds, boolean_ops.none) or
                boolean_ops.Boolean.eq(holds, boolean_ops.false)):
            log('guard', '{} {} {} cannot hold'.format(
                domain.str(x), cmp, domain.str(y)
            ))
            return domain.bottom, domain.bottom
        elif boolean_ops.Boolean.eq(holds, boolean_ops.true):
            return x, y

        l, r = narrow(domain, x, y)
        return _keep_top(domain, x, l), _keep_top(domain, y, r)

    return do


def filter_var_and_const(domain, cmp):
    """
    Same as filter_two_vars, where the right operand is an integer constant.
    The returned function gives the narrowed left operand and the singleton
    interval of the constant, or two empty intervals.
    """
    do_filter = filter_two_vars(domain, cmp)

    def do(x, constant):
        return do_filter(x, domain.build(constant))

    return do
