"""
Provides the entry points used by the analysis driver: the transfer
functions of binary operations and casts, and the narrowing of guards, all
selected by the names defined in the ops module.
"""

from funcy.calc import memoize

from fwrange import domains
from fwrange.constants import ops
from fwrange.domain_ops import (
    bitwise_ops, boolean_ops, cast_ops, guard_ops, interval_ops
)
from fwrange.errors import ContractViolation


ARITHMETIC = {
    ops.ADD: interval_ops.add,
    ops.SUB: interval_ops.sub,
    ops.MUL: interval_ops.mul,
    ops.SDIV: interval_ops.sdiv,
    ops.UDIV: interval_ops.udiv,
    ops.SREM: interval_ops.srem,
    ops.UREM: interval_ops.urem,
}

BITWISE = {
    ops.AND: bitwise_ops.and_,
    ops.OR: bitwise_ops.or_,
    ops.XOR: bitwise_ops.xor,
    ops.SHL: bitwise_ops.shl,
    ops.LSHR: bitwise_ops.lshr,
    ops.ASHR: bitwise_ops.ashr,
}

COMPARISONS = {
    ops.EQ: interval_ops.eq,
    ops.NE: interval_ops.neq,
    ops.SLT: interval_ops.slt,
    ops.SLE: interval_ops.sle,
    ops.SGT: interval_ops.sgt,
    ops.SGE: interval_ops.sge,
    ops.ULT: interval_ops.ult,
    ops.ULE: interval_ops.ule,
    ops.UGT: interval_ops.ugt,
    ops.UGE: interval_ops.uge,
}


@memoize
def binary_transfer(width, opcode):
    """
    Returns the transfer function of the given arithmetic or bitwise
    operation on integers of the given bit-width. Functions are cached by
    width, so any two interval domains of that width may use them.

    :param int width: The bit-width of both operands.
    :param str opcode: One of the binary operations of the ops module.
    """
    domain = domains.fixed_width(width)
    if opcode in ARITHMETIC:
        return ARITHMETIC[opcode](domain)
    elif opcode in BITWISE:
        return BITWISE[opcode](domain)
    raise ContractViolation("unknown binary operation: {}".format(opcode))


@memoize
def comparison(width, cmp):
    domain = domains.fixed_width(width)
    if cmp not in COMPARISONS:
        raise ContractViolation("unknown comparison: {}".format(cmp))
    return COMPARISONS[cmp](domain)


@memoize
def guard(width, cmp):
    return guard_ops.filter_two_vars(domains.fixed_width(width), cmp)


def apply(domain, opcode, left, right):
    """
    Returns the interval of the results of the given binary operation on
    integers of the two given intervals. Both must be elements of the given
    domain, otherwise ContractViolation is raised.
    """
    return binary_transfer(domain.width, opcode)(
        domain.check(left), domain.check(right)
    )


def evaluate(domain, cmp, left, right):
    """
    Returns the element of the Boolean domain containing the possible
    outcomes of the given comparison.
    """
    return comparison(domain.width, cmp)(
        domain.check(left), domain.check(right)
    )


def apply_cast(kind, source, src_domain, target_width, bool_hint=None,
               sign_extend=False):
    """
    Returns the interval of the results of casting integers of the source
    interval to the given bit-width.

    :param str kind: Either ops.TRUNC or ops.EXT.
    :param source: An element of src_domain.
    :param domains.Intervals src_domain: The domain of the source.
    :param int target_width: The bit-width of the result.
    :param frozenset[str] | None bool_hint: When the source is a boolean,
        its value in the Boolean domain, if known.
    :param bool sign_extend: Whether an extension is signed.
    """
    dst_domain = domains.fixed_width(target_width)
    source = src_domain.check(source)

    if bool_hint is not None:
        source = src_domain.meet(
            source, interval_ops.from_bool(src_domain)(bool_hint)
        )

    if kind == ops.TRUNC:
        cast = cast_ops.trunc(src_domain, dst_domain)
    elif kind == ops.EXT and sign_extend:
        cast = cast_ops.sext(src_domain, dst_domain)
    elif kind == ops.EXT:
        cast = cast_ops.zext(src_domain, dst_domain)
    else:
        raise ContractViolation("unknown cast: {}".format(kind))

    return cast(source)


def filter(domain, cmp, left, right):
    """
    Returns the two operands of the given comparison, narrowed assuming the
    comparison holds. The right operand may be an integer constant, in
    which case its singleton interval is returned in its place.
    """
    if isinstance(right, int):
        right = domain.build(right)
    return guard(domain.width, cmp)(
        domain.check(left), domain.check(right)
    )


def bool_interval(domain, b):
    """
    Returns the interval seeded from the given element of the Boolean domain.
    """
    return interval_ops.from_bool(domain)(boolean_ops.Boolean.build(b))
