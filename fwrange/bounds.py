"""
Provides helpers to reason about fixed-width two's-complement integers.

Bounds are python integers holding the signed reading of a bit pattern of a
given width. The integers of a given width lie on a circle of 2^width
values, on which two transition points matter:

- The "south pole", between the maximum and the minimum signed values.
- The "north pole", between all-ones and zero, i.e. between the maximum and
  the minimum unsigned values.

An interval stored under the signed reading never crosses the south pole,
but may cross the north pole when read as unsigned, and conversely.
"""


def cardinality(width):
    """
    Returns the number of distinct values of the given width.
    """
    return 1 << width


def signed_min(width):
    return -(1 << (width - 1))


def signed_max(width):
    return (1 << (width - 1)) - 1


def unsigned_max(width):
    return (1 << width) - 1


def to_unsigned(value, width):
    """
    Returns the unsigned reading of the bit pattern obtained by truncating
    the given integer to the given width.
    """
    return value & unsigned_max(width)


def to_signed(value, width):
    """
    Returns the signed reading of the bit pattern obtained by truncating
    the given integer to the given width.
    """
    value = to_unsigned(value, width)
    return value - cardinality(width) if value >> (width - 1) else value


def crosses_north_pole(lo, hi):
    """
    Returns True if the signed interval [lo, hi] contains both -1 and 0,
    that is, if it wraps around when read as unsigned.

    :param int lo: The signed lower bound.
    :param int hi: The signed upper bound.
    :rtype: bool
    """
    return lo < 0 <= hi


def crosses_south_pole(lo, hi, width):
    """
    Returns True if the unsigned interval [lo, hi] contains both the maximum
    and the minimum signed values, that is, if it wraps around when read as
    signed.

    :param int lo: The unsigned lower bound.
    :param int hi: The unsigned upper bound.
    :param int width: The bit-width of the bounds.
    :rtype: bool
    """
    return lo <= signed_max(width) < hi


def sign_parts(lo, hi):
    """
    Splits the signed interval [lo, hi] into its negative part and its
    non-negative part, omitting empty parts.

    :rtype: list[(int, int)]
    """
    parts = []
    if lo < 0:
        parts.append((lo, min(hi, -1)))
    if hi >= 0:
        parts.append((max(lo, 0), hi))
    return parts


def nonzero_parts(lo, hi):
    """
    Splits the signed interval [lo, hi] into its negative part and its
    positive part, omitting empty parts. Zero belongs to neither.

    :rtype: list[(int, int)]
    """
    parts = []
    if lo < 0:
        parts.append((lo, min(hi, -1)))
    if hi > 0:
        parts.append((max(lo, 1), hi))
    return parts


def unsigned_parts(lo, hi, width):
    """
    Returns the unsigned reading of the signed interval [lo, hi], as a list
    of at most two unsigned intervals which do not cross the north pole.

    :rtype: list[(int, int)]
    """
    if crosses_north_pole(lo, hi):
        return [(0, hi), (to_unsigned(lo, width), unsigned_max(width))]
    return [(to_unsigned(lo, width), to_unsigned(hi, width))]


def sdiv(a, b):
    """
    Signed division rounding toward zero.
    """
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def srem(a, b):
    """
    Signed remainder whose sign follows the dividend.
    """
    return a - b * sdiv(a, b)
