from itertools import product

from fwrange.domain_ops import boolean_ops


all_elems = [
    boolean_ops.true,
    boolean_ops.false,
    boolean_ops.both,
    boolean_ops.none
]


def _to_concrete(b):
    if b is boolean_ops.true:
        return {True}
    elif b is boolean_ops.false:
        return {False}
    elif b is boolean_ops.both:
        return {True, False}
    else:
        return set()


def _to_abstract(bools):
    return boolean_ops.decide(True in bools, False in bools)


class BinaryOperationTest:
    """
    Abstract test class. Can be inherited to test a binary operation on the
    boolean domain.
    """
    def concrete_op(self, a, b):
        raise NotImplementedError

    def abstract_op(self, x, y):
        raise NotImplementedError

    def run(self):
        for x in all_elems:
            for y in all_elems:
                res = {
                    self.concrete_op(a, b)
                    for a, b in product(_to_concrete(x), _to_concrete(y))
                }
                assert boolean_ops.Boolean.eq(
                    self.abstract_op(x, y), _to_abstract(res)
                )


class AndTest(BinaryOperationTest):
    def concrete_op(self, a, b):
        return a and b

    def abstract_op(self, x, y):
        return boolean_ops.and_(x, y)


class OrTest(BinaryOperationTest):
    def concrete_op(self, a, b):
        return a or b

    def abstract_op(self, x, y):
        return boolean_ops.or_(x, y)


def test_and():
    AndTest().run()


def test_or():
    OrTest().run()


def test_not():
    for x in all_elems:
        expected = _to_abstract({not a for a in _to_concrete(x)})
        assert boolean_ops.Boolean.eq(boolean_ops.not_(x), expected)


def test_lattice():
    Boolean = boolean_ops.Boolean
    assert Boolean.bottom == boolean_ops.none
    assert Boolean.top == boolean_ops.both
    assert Boolean.join(boolean_ops.true, boolean_ops.false) == (
        boolean_ops.both
    )
    assert Boolean.meet(boolean_ops.true, boolean_ops.false) == (
        boolean_ops.none
    )
    assert boolean_ops.lit(True) is boolean_ops.true
    assert boolean_ops.lit(False) is boolean_ops.false
