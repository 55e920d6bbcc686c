import pytest

from brute_force import elements
from fwrange import domains
from fwrange.errors import ContractViolation, UnsupportedOperation


test_dom = domains.Intervals(3)


def _all_elements():
    return elements(test_dom) + [test_dom.bottom]


def test_join_is_sound():
    for a in _all_elements():
        for b in _all_elements():
            j = test_dom.join(a, b)
            union = test_dom.concretize(a) | test_dom.concretize(b)
            assert union <= test_dom.concretize(j)
            assert test_dom.eq(j, test_dom.abstract(union))


def test_meet_is_exact():
    for a in _all_elements():
        for b in _all_elements():
            m = test_dom.meet(a, b)
            assert test_dom.concretize(m) == (
                test_dom.concretize(a) & test_dom.concretize(b)
            )


def test_order_is_inclusion():
    for a in _all_elements():
        for b in _all_elements():
            assert test_dom.le(a, b) == (
                test_dom.concretize(a) <= test_dom.concretize(b)
            )
            assert test_dom.eq(a, b) == (
                test_dom.concretize(a) == test_dom.concretize(b)
            )


def test_bottom_and_top_are_extremes():
    for a in _all_elements():
        assert test_dom.le(test_dom.bottom, a)
        assert test_dom.le(a, test_dom.top)
        assert test_dom.join(test_dom.bottom, a) == a
        assert test_dom.is_top(test_dom.join(test_dom.top, a))


def test_join_laws():
    xs = _all_elements()
    for a in xs:
        assert test_dom.eq(test_dom.join(a, a), a)
        for b in xs:
            assert test_dom.eq(test_dom.join(a, b), test_dom.join(b, a))
            for c in xs[::5]:
                assert test_dom.eq(
                    test_dom.join(test_dom.join(a, b), c),
                    test_dom.join(a, test_dom.join(b, c))
                )


def test_join_of_singletons():
    dom = domains.Intervals(8)
    assert dom.join(dom.build(5), dom.build(10)) == (5, 10)


def test_disjoint_meet_is_empty():
    dom = domains.Intervals(8)
    assert dom.is_empty(dom.meet((0, 3), (5, 9)))
    assert dom.meet(dom.top, (5, 9)) == (5, 9)


def test_equality_versus_identity():
    dom = domains.Intervals(8)
    assert dom.eq(dom.full, dom.top)
    assert not dom.is_identical(dom.full, dom.top)
    assert dom.is_identical((1, 2), (1, 2))
    assert dom.is_top(dom.normalize(dom.full))
    assert dom.normalize((1, 2)) == (1, 2)


def test_singleton():
    dom = domains.Intervals(8)
    assert dom.is_singleton(dom.build(3))
    assert not dom.is_singleton((3, 4))
    assert not dom.is_singleton(dom.top)
    assert not dom.is_singleton(dom.bottom)


def test_build():
    dom = domains.Intervals(8)
    assert dom.is_empty(dom.build())
    assert dom.build(255) == (-1, -1)
    assert dom.build(-1) == (-1, -1)
    assert dom.build(-128, 127) == dom.full
    assert not dom.is_top(dom.build(-128, 127))
    assert dom.is_top(dom.from_value('%x'))

    with pytest.raises(ContractViolation):
        dom.build(3, 2)
    with pytest.raises(ContractViolation):
        dom.build(0, 128)


def test_only_signed_intervals():
    with pytest.raises(ContractViolation):
        domains.Intervals(8, signed=False)
    with pytest.raises(ContractViolation):
        domains.Intervals(0)


def test_generalized_join_is_unsupported():
    with pytest.raises(UnsupportedOperation):
        test_dom.generalized_join([(0, 1), (2, 3)])


def test_fixed_width_domains_are_shared():
    assert domains.fixed_width(8) is domains.fixed_width(8)
    assert domains.fixed_width(8) is not domains.fixed_width(16)
    assert domains.fixed_width(16).width == 16


def test_poles():
    dom = domains.Intervals(8)
    assert dom.from_unsigned(0, 127) == (0, 127)
    assert dom.from_unsigned(200, 255) == (-56, -1)
    assert dom.is_top(dom.from_unsigned(100, 200))
    assert dom.wrap(120, 130) == dom.full
    assert dom.wrap(130, 140) == (-126, -116)
    assert dom.wrap(0, 300) == dom.full


def test_str():
    dom = domains.Intervals(8)
    assert dom.str(dom.bottom) == '[empty]'
    assert dom.str(dom.top) == 'top'
    assert dom.str((1, 2)) == '[1, 2]'


def test_special_elements_are_shared_by_all_domains():
    i8, other_i8, i16 = (domains.Intervals(8), domains.Intervals(8),
                         domains.Intervals(16))
    assert other_i8.is_top(i8.top)
    assert i16.is_empty(i8.bottom)
    assert i8.top == i16.top
    assert i8.top != i8.bottom
    assert i8.top != i8.full
    assert len({i8.top, i16.top, i8.bottom}) == 2
    assert other_i8.join(i8.top, (1, 2)) == other_i8.top


def test_check():
    dom = domains.Intervals(8)
    assert dom.check((-128, 127)) == (-128, 127)
    assert dom.is_top(dom.check(dom.top))
    assert dom.is_empty(dom.check(dom.bottom))

    for x in [(0, 300), (-129, 0), (3, 2), (1, 2, 3), 5, None]:
        with pytest.raises(ContractViolation):
            dom.check(x)
