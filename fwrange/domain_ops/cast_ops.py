"""
Provides the transfer functions of casts between interval domains of
different bit-widths: truncation, and signed or unsigned extension.
"""

from fwrange import bounds
from fwrange.domain_ops import interval_ops
from fwrange.errors import ContractViolation
from fwrange.tools.logger import log


def _check_widths(src, dst, narrowing):
    if narrowing and dst.width >= src.width:
        raise ContractViolation(
            "cannot truncate {} bits to {} bits".format(src.width, dst.width)
        )
    elif not narrowing and dst.width <= src.width:
        raise ContractViolation(
            "cannot extend {} bits to {} bits".format(src.width, dst.width)
        )


def is_truncate_overflow(x, width):
    """
    Returns True if truncating the integers of the given bounds to the given
    width does not give an interval, i.e. if the truncated bounds are not
    ordered or if the interval has more integers than the width can count.

    :param (int, int) x: The bounds of the source interval.
    :param int width: The target bit-width.
    :rtype: bool
    """
    lo, hi = x
    return (hi - lo >= bounds.cardinality(width) or
            bounds.to_signed(lo, width) > bounds.to_signed(hi, width))


def trunc(src, dst):
    """
    Given the source and target interval domains, returns a function which
    truncates an element of the source domain. An interval of another
    width raises ContractViolation.
    """
    _check_widths(src, dst, narrowing=True)

    def do(x):
        if src.is_empty(src.check(x)):
            return dst.bottom
        elif src.is_top(x):
            return dst.top
        elif is_truncate_overflow(x, dst.width):
            log('cast', 'truncating {} to {} bits is not an interval'.format(
                src.str(x), dst.width
            ))
            return dst.top
        return dst.build(
            bounds.to_signed(x[0], dst.width),
            bounds.to_signed(x[1], dst.width)
        )

    return do


def sext(src, dst):
    """
    Given the source and target interval domains, returns a function which
    sign-extends an element of the source domain. Signed bounds are
    preserved.
    """
    _check_widths(src, dst, narrowing=False)

    def do(x):
        if src.is_empty(src.check(x)):
            return dst.bottom
        return dst.build(*src.limits(x))

    return do


def zext(src, dst):
    """
    Given the source and target interval domains, returns a function which
    zero-extends an element of the source domain. The source is read as
    unsigned, which may split it in two parts.
    """
    _check_widths(src, dst, narrowing=False)

    def do(x):
        if src.is_empty(src.check(x)):
            return dst.bottom
        lo, hi = src.limits(x)
        parts = bounds.unsigned_parts(lo, hi, src.width)
        return interval_ops.join_all(dst, [dst.build(a, b) for a, b in parts])

    return do
