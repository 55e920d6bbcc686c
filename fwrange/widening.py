"""
Provides the widening strategies of interval domains, along with the set of
landmark constants used by the default strategy.

The strategy is an explicit argument of each widening call, so that several
analyses using different strategies can coexist.
"""

from collections import defaultdict

from fwrange import bounds
from fwrange.errors import ContractViolation


NO_WIDEN = 'NoWiden'
"""
Widening is a plain join. Does not terminate on infinite ascending chains.
"""

COUSOT76 = 'Cousot76'
"""
A diverging bound jumps to the extreme value of the domain.
"""

JUMP_SET = 'JumpSet'
"""
A diverging bound snaps to the nearest landmark at or beyond its new value,
and to the extreme value of the domain if there is none.
"""

DEFAULT = JUMP_SET

STRATEGIES = frozenset([NO_WIDEN, COUSOT76, JUMP_SET])


class LandmarkSet:
    """
    A finite set of width-tagged integer constants, typically collected from
    the literals appearing in the analyzed program.
    """
    def __init__(self, constants=()):
        """
        :param iterable[(int, int)] constants: Pairs of a value and of the
            bit-width it is tagged with.
        """
        self._landmarks = defaultdict(set)
        self.update(constants)

    def add(self, value, width):
        """
        Adds the given constant. Values are stored as signed bit patterns,
        so 255 and -1 are the same 8-bit landmark.
        """
        self._landmarks[width].add(bounds.to_signed(value, width))

    def update(self, constants):
        for value, width in constants:
            self.add(value, width)

    def below(self, value, width):
        """
        Returns the greatest landmark of the given width that is lower than or
        equal to the given value, or None if there is none.

        :rtype: int | None
        """
        return max(
            (x for x in self._landmarks[width] if x <= value),
            default=None
        )

    def above(self, value, width):
        """
        Returns the lowest landmark of the given width that is greater than
        or equal to the given value, or None if there is none.

        :rtype: int | None
        """
        return min(
            (x for x in self._landmarks[width] if x >= value),
            default=None
        )

    def of_width(self, width):
        return frozenset(self._landmarks[width])

    def __len__(self):
        return sum(len(xs) for xs in self._landmarks.values())

    def __iter__(self):
        for width, xs in self._landmarks.items():
            for x in sorted(xs):
                yield x, width


def check_strategy(strategy):
    if strategy not in STRATEGIES:
        raise ContractViolation(
            "unknown widening strategy: {}".format(strategy)
        )


def widen_lower(domain, value, landmarks, strategy):
    """
    Returns the bound to use in place of a lower bound which decreased to
    the given value.
    """
    if strategy == JUMP_SET and landmarks is not None:
        landmark = landmarks.below(value, domain.width)
        if landmark is not None:
            return landmark
    return domain.min


def widen_upper(domain, value, landmarks, strategy):
    """
    Returns the bound to use in place of an upper bound which increased to
    the given value.
    """
    if strategy == JUMP_SET and landmarks is not None:
        landmark = landmarks.above(value, domain.width)
        if landmark is not None:
            return landmark
    return domain.max
