"""
Provides the abstract domains of the analysis: the interval domain over
fixed-width integers, and the powerset domain used for booleans.
"""

from funcy.calc import memoize

from fwrange import bounds, widening
from fwrange.errors import ContractViolation, UnsupportedOperation
from fwrange.tools.logger import log
from fwrange.utils import powerset


class AbstractDomain:
    """
    The operations every domain of this package provides.

    A domain has a "bottom" element, standing for no value at all, and a
    "top" element, standing for any value. Elements are immutable: every
    operation returns a new element, or one of its arguments.
    """

    def build(self, *args):
        raise NotImplementedError

    def is_empty(self, x):
        """
        Returns True if no concrete value is described by x.
        """
        return self.size(x) == 0

    def size(self, x):
        raise NotImplementedError

    def join(self, a, b):
        """
        Returns the least element describing every value of both a and b.
        It may describe more values than their union.
        """
        raise NotImplementedError

    def generalized_join(self, xs):
        """
        Joins any number of elements into a disjunction of them. Convex
        domains cannot describe disjunctions, so this raises
        UnsupportedOperation unless overridden.
        """
        raise UnsupportedOperation(
            "{} does not support n-ary joins".format(type(self).__name__)
        )

    def meet(self, a, b):
        """
        Returns the greatest element describing only values of both a and b.
        """
        raise NotImplementedError

    def update(self, a, b, widen=False):
        return self.join(a, b)

    def lt(self, a, b):
        raise NotImplementedError

    def eq(self, a, b):
        """
        Returns True if a and b describe the same concrete values, even when
        they are written differently.
        """
        raise NotImplementedError

    def is_identical(self, a, b):
        """
        Returns True if a and b are written the same way. Fixed-point
        drivers must use this test to detect convergence.
        """
        return a == b

    def le(self, a, b):
        return self.eq(a, b) or self.lt(a, b)

    def generator(self):
        """
        Yields every element of this domain. Only meant for small domains,
        in tests.
        """
        raise NotImplementedError

    def concretize(self, abstract):
        raise NotImplementedError

    def abstract(self, concrete):
        """
        Returns the least element describing the given set of concrete
        values.
        """
        raise NotImplementedError

    def str(self, x):
        raise NotImplementedError


class _Special:
    """
    A distinguished element shared by every interval domain. Two specials
    are equal when they have the same name.
    """
    def __init__(self, name):
        self.name = name

    def __eq__(self, other):
        if not isinstance(other, _Special):
            return NotImplemented
        return self.name == other.name

    def __ne__(self, other):
        eq = self.__eq__(other)
        return eq if eq is NotImplemented else not eq

    def __hash__(self):
        return hash(self.name)

    def __repr__(self):
        return self.name


BOTTOM = _Special('bottom')
TOP = _Special('top')


class Intervals(AbstractDomain):
    """
    An abstract domain used to represent sets of fixed-width integers.

    Elements are either BOTTOM, TOP, or a pair (lo, hi) of signed bounds such
    that MIN <= lo <= hi <= MAX. BOTTOM and TOP are shared by the domains of
    every width, so two domains of the same width accept each other's
    elements.

    Note that TOP is distinct from (MIN, MAX): both represent every integer
    of the given width, but operations on TOP return TOP directly, whereas
    operations on (MIN, MAX) compute bounds and may overflow.
    """

    def __init__(self, width, signed=True):
        """
        :param int width: The bit-width of the represented integers.
        :param bool signed: Whether bounds are ordered as signed integers.
            Only signed intervals are supported.
        """
        if width < 1:
            raise ContractViolation("invalid bit-width: {}".format(width))
        if not signed:
            raise ContractViolation("intervals must be signed")

        self.width = width
        self.signed = signed
        self.min = bounds.signed_min(width)
        self.max = bounds.signed_max(width)
        self.full = (self.min, self.max)
        self.bottom = BOTTOM
        self.top = TOP

    def build(self, *args):
        """
        Creates a new interval.
        - Without arguments, returns the bottom element.
        - With one argument, returns the singleton of this constant,
          truncated to the width of this domain. Both the signed and the
          unsigned reading of a bit pattern are accepted.
        - With two arguments, returns the interval between these two signed
          bounds, which must fit the width of this domain.
        """
        if len(args) == 0:
            return self.bottom
        elif len(args) == 1:
            value = bounds.to_signed(args[0], self.width)
            return value, value
        elif len(args) == 2:
            return self.check(tuple(args))
        raise ContractViolation(
            "invalid {}-bit interval: {}".format(self.width, args)
        )

    def check(self, x):
        """
        Returns x if it is an element of this domain. Otherwise, raises
        ContractViolation: x was most likely built for another width.
        """
        if self.is_special(x):
            return x
        elif (isinstance(x, tuple) and len(x) == 2 and
              self.min <= x[0] <= x[1] <= self.max):
            return x
        raise ContractViolation(
            "invalid {}-bit interval: {}".format(self.width, x)
        )

    def from_value(self, value):
        """
        Returns the element describing a program value about which nothing is
        known yet, that is, the top element. The given handle is only used
        for tracing.
        """
        log('build', 'top for {}'.format(value))
        return self.top

    def from_unsigned(self, lo, hi):
        """
        Returns the element representing the unsigned interval [lo, hi].
        If this interval crosses the south pole, its signed reading is not
        convex and the top element is returned.
        """
        if bounds.crosses_south_pole(lo, hi, self.width):
            return self.top
        return (bounds.to_signed(lo, self.width),
                bounds.to_signed(hi, self.width))

    def wrap(self, lo, hi):
        """
        Returns the smallest interval containing the truncation of every
        integer between lo and hi to the width of this domain.
        """
        if hi - lo + 1 >= bounds.cardinality(self.width):
            return self.full
        w_lo = bounds.to_signed(lo, self.width)
        w_hi = bounds.to_signed(hi, self.width)
        return (w_lo, w_hi) if w_lo <= w_hi else self.full

    def is_empty(self, x):
        return x == self.bottom

    def is_top(self, x):
        return x == self.top

    def is_full(self, x):
        """
        Returns True if the given element is the explicit interval
        (MIN, MAX), as opposed to the top element.
        """
        return x == self.full

    def is_singleton(self, x):
        return not self.is_special(x) and x[0] == x[1]

    def is_special(self, x):
        return x == self.bottom or x == self.top

    def limits(self, x):
        """
        Returns the bounds of the given non-empty element. The top element
        is bounded by the extreme values of this domain.

        :rtype: (int, int)
        """
        return self.full if x == self.top else x

    def normalize(self, x):
        """
        Returns the top element if the given element is (MIN, MAX), otherwise
        the element itself. Only meant for comparisons and display.
        """
        return self.top if self.is_full(x) else x

    def size(self, x):
        if x == self.bottom:
            return 0
        lo, hi = self.limits(x)
        return hi - lo + 1

    def contains(self, x, value):
        if x == self.bottom:
            return False
        lo, hi = self.limits(x)
        return lo <= value <= hi

    def join(self, a, b):
        if a == self.bottom:
            return b
        elif b == self.bottom:
            return a
        elif a == self.top or b == self.top:
            return self.top
        else:
            return min(a[0], b[0]), max(a[1], b[1])

    def meet(self, a, b):
        if a == self.bottom or b == self.top:
            return a
        elif b == self.bottom or a == self.top:
            return b
        elif a[1] < b[0] or b[1] < a[0]:
            return self.bottom
        else:
            return max(a[0], b[0]), min(a[1], b[1])

    def widen(self, prev, new, landmarks=None, strategy=widening.DEFAULT):
        """
        Returns an upper bound of the two given elements which guarantees the
        termination of ascending chains.

        :param prev: The element computed at the previous iteration.
        :param new: The element computed at the current iteration.
        :param widening.LandmarkSet | None landmarks: The landmarks used by
            the JumpSet strategy.
        :param str strategy: One of the strategies of the widening module.
        """
        widening.check_strategy(strategy)

        if strategy == widening.NO_WIDEN:
            return self.join(prev, new)
        elif prev == self.bottom:
            return new
        elif new == self.bottom:
            return prev
        elif prev == self.top or new == self.top:
            return self.top

        lo, hi = prev
        if new[0] < lo:
            lo = widening.widen_lower(self, new[0], landmarks, strategy)
            log('widening', 'lower bound {} widened to {}'.format(new[0], lo))
        if new[1] > hi:
            hi = widening.widen_upper(self, new[1], landmarks, strategy)
            log('widening', 'upper bound {} widened to {}'.format(new[1], hi))
        return lo, hi

    def update(self, a, b, widen=False, landmarks=None,
               strategy=widening.DEFAULT):
        if widen:
            return self.widen(a, b, landmarks, strategy)
        else:
            return self.join(a, b)

    def le(self, a, b):
        if a == self.bottom or b == self.top:
            return True
        elif b == self.bottom:
            return False
        elif a == self.top:
            return self.is_full(b)
        else:
            return b[0] <= a[0] and a[1] <= b[1]

    def lt(self, a, b):
        return self.le(a, b) and not self.eq(a, b)

    def eq(self, a, b):
        return self.normalize(a) == self.normalize(b)

    def generator(self):
        for x_f in range(self.min, self.max + 1):
            for x_t in range(x_f, self.max + 1):
                yield x_f, x_t

    def concretize(self, abstract):
        if abstract == self.bottom:
            return frozenset([])
        lo, hi = self.limits(abstract)
        return frozenset(range(lo, hi + 1))

    def abstract(self, concrete):
        if len(concrete) == 0:
            return self.bottom
        return self.build(min(concrete), max(concrete))

    def str(self, x):
        if x == self.bottom:
            return "[empty]"
        elif x == self.top:
            return "top"
        return "[{}, {}]".format(*x)


@memoize
def fixed_width(width):
    """
    Returns the interval domain of the given bit-width. The same instance is
    returned for equal widths.

    :rtype: Intervals
    """
    return Intervals(width)


class Powerset(AbstractDomain):
    """
    The lattice of the subsets of a finite set of values, ordered by
    inclusion. Elements are frozensets.
    """

    def __init__(self, values):
        self.elements = powerset(values)
        self.bottom = frozenset()
        self.top = frozenset(values)

    def build(self, elem):
        if elem not in self.elements:
            raise ContractViolation("not an element: {}".format(elem))
        return elem

    def size(self, x):
        return len(x)

    def join(self, a, b):
        return a | b

    def meet(self, a, b):
        return a & b

    def update(self, a, b, widen=False):
        return self.join(a, b)

    def lt(self, a, b):
        return a < b

    def le(self, a, b):
        return a <= b

    def eq(self, a, b):
        return a == b

    def generator(self):
        return self.elements

    def concretize(self, abstract):
        return abstract

    def abstract(self, concretes):
        return self.build(frozenset(concretes))

    def str(self, x):
        return "{{{}}}".format(", ".join(sorted(str(e) for e in x)))
